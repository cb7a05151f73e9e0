"""HTTP transport for relay requests."""

from __future__ import annotations

import logging
from typing import Protocol

import aiohttp

from pyrtti._constants import REQUEST_TIMEOUT_S, USER_AGENT
from pyrtti._redact import redact_url, truncate
from pyrtti.exceptions import RttiTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by the relay chain.

    Having a protocol here makes it easy to pass test doubles while
    keeping the production implementation (`HttpTransport`) concrete.
    """

    async def get_text(self, url: str, *, relay: str = "", timeout: float = REQUEST_TIMEOUT_S) -> str:
        ...


class HttpTransport:
    """aiohttp transport issuing one bounded GET per relay attempt."""

    def __init__(self, http_session: aiohttp.ClientSession) -> None:
        self._http = http_session

    async def get_text(self, url: str, *, relay: str = "", timeout: float = REQUEST_TIMEOUT_S) -> str:
        """GET *url* and return the body text.

        The request is aborted once *timeout* seconds have elapsed.

        Raises
        ------
        RttiTransportError
            On timeout, connection failure, a non-2xx status or a body
            that cannot be decoded as text.
        """
        headers = {
            "accept": "application/json, application/xml;q=0.9, */*;q=0.8",
            "user-agent": USER_AGENT,
        }

        _logger.debug("GET %s", redact_url(url))

        try:
            async with self._http.get(url, headers=headers, timeout=aiohttp.ClientTimeout(total=timeout)) as resp:
                try:
                    text = await resp.text()
                except (UnicodeDecodeError, LookupError) as exc:
                    raise RttiTransportError(
                        f"Undecodable body (HTTP {resp.status}) from {relay}: {exc}",
                        status_code=resp.status,
                        relay=relay,
                    ) from exc
                if not 200 <= resp.status < 300:
                    raise RttiTransportError(
                        f"HTTP {resp.status} from {relay}: {truncate(text)}",
                        status_code=resp.status,
                        relay=relay,
                    )
        except RttiTransportError:
            raise
        except TimeoutError as exc:
            raise RttiTransportError(
                f"Request via {relay} timed out after {timeout}s",
                relay=relay,
            ) from exc
        except aiohttp.ClientError as exc:
            raise RttiTransportError(
                f"Request via {relay} failed: {redact_url(str(exc))}",
                relay=relay,
            ) from exc

        return text
