"""High-level async client for TransLink RTTI bus positions."""

from __future__ import annotations

import dataclasses
import logging
from typing import Any

import aiohttp

from pyrtti._api.buses import fetch_buses
from pyrtti._transport import HttpTransport, Transport
from pyrtti.config import RttiConfig
from pyrtti.models.vehicle import VehicleRecord

_logger = logging.getLogger(__name__)


class RttiClient:
    """Async client for current bus positions.

    Usage::

        async with RttiClient(RttiConfig.from_env()) as client:
            buses = await client.get_buses("099")

    The configuration is an immutable snapshot. :meth:`update_config`
    swaps in a new one; a fetch already in progress keeps the snapshot
    it started with.
    """

    def __init__(
        self,
        config: RttiConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._config = config or RttiConfig()
        self._external_session = session is not None
        self._http_session = session
        self._transport: Transport | None = transport

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> RttiClient:
        if self._transport is None:
            if self._http_session is None:
                self._http_session = aiohttp.ClientSession()
            self._transport = HttpTransport(self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
            self._transport = None

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def config(self) -> RttiConfig:
        return self._config

    def update_config(self, **changes: Any) -> RttiConfig:
        """Replace configuration fields, returning the new snapshot.

        ``client.update_config(api_key="...", simulation=False)``
        """
        self._config = dataclasses.replace(self._config, **changes)
        _logger.debug(
            "Configuration updated: simulation=%s custom_relay=%s api_key_set=%s",
            self._config.simulation,
            bool(self._config.relay_template),
            self._config.credential is not None,
        )
        return self._config

    # ------------------------------------------------------------------
    # Data
    # ------------------------------------------------------------------

    async def get_buses(self, route_no: str | None = None) -> list[VehicleRecord]:
        """Return current bus positions, optionally for one route.

        See :func:`pyrtti._api.buses.fetch_buses` for the relay order
        and fallback rules.
        """
        return await fetch_buses(self._config, self._transport, route_no)
