"""Current bus positions via the relay chain.

Endpoints:
  - GET /buses (through each relay strategy in turn)
"""

from __future__ import annotations

import logging
import time

from pyrtti import simulation
from pyrtti._api._envelope import unwrap_relay_envelope
from pyrtti._api.classifier import classify, is_empty_answer
from pyrtti._api.parser import parse
from pyrtti._redact import redact_url
from pyrtti._transport import Transport
from pyrtti.config import ExhaustionPolicy, MissingKeyPolicy, RttiConfig
from pyrtti.exceptions import (
    RttiApiError,
    RttiChainExhaustedError,
    RttiCredentialError,
    RttiError,
    RttiRelayEnvelopeError,
    RttiTransportError,
    RttiUnparseableError,
)
from pyrtti.models.outcomes import ClassifiedOutcome, ParseOutcome, ParseSuccess, ParseUpstreamError
from pyrtti.models.vehicle import VehicleRecord
from pyrtti.relays import RelayStrategy, build_strategies, build_target_url

_logger = logging.getLogger(__name__)


async def _attempt(
    strategy: RelayStrategy,
    target_url: str,
    transport: Transport,
    timeout: float,
) -> ParseOutcome:
    """Fetch *target_url* through one relay and decode the body.

    Raises
    ------
    RttiTransportError
        Network failure, timeout or non-2xx status.
    RttiRelayEnvelopeError
        The relay envelope is malformed or reports a relay failure.
    """
    relay_url = strategy.build_url(target_url)
    text = await transport.get_text(relay_url, relay=strategy.name, timeout=timeout)
    if strategy.enveloping:
        text = unwrap_relay_envelope(text, relay=strategy.name)
    return parse(text)


async def fetch_buses(
    config: RttiConfig,
    transport: Transport | None,
    route_no: str | None = None,
    *,
    now: float | None = None,
) -> list[VehicleRecord]:
    """Fetch current bus positions, falling back per *config*.

    Relay strategies are tried strictly one after another, each exactly
    once. The first decoded vehicle list wins. RTTI's "no buses" and
    "invalid route" codes end the chain with an empty list.

    Parameters
    ----------
    config : RttiConfig
        Configuration snapshot for this fetch.
    transport : Transport or None
        HTTP transport. Only required for live requests.
    route_no : str or None
        Only return buses on this route.
    now : float or None
        Epoch seconds, used for the cache-busting nonce and for the
        synthetic fleet. Defaults to the current time.

    Returns
    -------
    list[VehicleRecord]
        Live records, an empty list, or the synthetic fleet.

    Raises
    ------
    RttiError
        A live request is needed but no transport was given.
    RttiCredentialError
        RTTI rejected the API key; no further relays are tried.
    RttiChainExhaustedError
        Every relay failed and ``exhaustion_policy`` is ``RAISE``.
    """
    if now is None:
        now = time.time()
    route_no = route_no.strip() if route_no else None

    if config.simulation:
        return simulation.generate(route_no, now=now)

    api_key = config.credential
    if api_key is None:
        if config.missing_key_policy is MissingKeyPolicy.EMPTY:
            _logger.debug("No API key configured, returning no buses")
            return []
        _logger.debug("No API key configured, serving simulated buses")
        return simulation.generate(route_no, now=now)

    if transport is None:
        raise RttiError("No transport for live requests. Use 'async with RttiClient(...) as client:'")

    target_url = build_target_url(config, api_key, route_no, int(now * 1000))
    failures: list[RttiError] = []

    for strategy in build_strategies(config):
        try:
            outcome = await _attempt(strategy, target_url, transport, config.request_timeout)
        except (RttiTransportError, RttiRelayEnvelopeError) as exc:
            _logger.warning("%s failed: %s", strategy.name, exc)
            failures.append(exc)
            continue

        if isinstance(outcome, ParseSuccess):
            _logger.debug("%s returned %d buses", strategy.name, len(outcome.records))
            return outcome.records

        if isinstance(outcome, ParseUpstreamError):
            classified = classify(outcome.code)
            if is_empty_answer(classified):
                _logger.debug("%s: RTTI code %s (%s), no buses", strategy.name, outcome.code, outcome.message)
                return []
            if classified is ClassifiedOutcome.FATAL_CREDENTIAL:
                raise RttiCredentialError(
                    f"RTTI rejected the API key: code={outcome.code} message={outcome.message}",
                    code=outcome.code,
                    relay=strategy.name,
                )
            _logger.warning("RTTI error via %s: code=%s message=%s", strategy.name, outcome.code, outcome.message)
            failures.append(
                RttiApiError(
                    f"RTTI error: code={outcome.code} message={outcome.message}",
                    code=outcome.code,
                    relay=strategy.name,
                )
            )
            continue

        _logger.warning("%s returned an unparseable body: %s", strategy.name, outcome.reason)
        failures.append(RttiUnparseableError(outcome.reason, relay=strategy.name))

    if config.exhaustion_policy is ExhaustionPolicy.SIMULATE:
        _logger.warning(
            "All %d relays failed for %s, serving simulated buses",
            len(failures),
            redact_url(target_url),
        )
        return simulation.generate(route_no, now=now)

    raise RttiChainExhaustedError(
        f"All {len(failures)} relays failed for {redact_url(target_url)}",
        failures=tuple(failures),
    )
