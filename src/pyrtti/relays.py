"""Relay strategies for reaching RTTI indirectly.

RTTI cannot be called directly from the environments this client runs
in, so every request goes through a relay. A relay either passes the
upstream body through unchanged ("raw") or wraps it in a JSON envelope
("enveloping").
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote, urlencode

from pyrtti._constants import ALLORIGINS_GET, ALLORIGINS_RAW, CORSPROXY
from pyrtti.config import RttiConfig

_URL_PLACEHOLDER = "{url}"
# Same unreserved set as JavaScript's encodeURIComponent.
_ENCODE_SAFE = "-_.!~*'()"


def encode_target(url: str) -> str:
    return quote(url, safe=_ENCODE_SAFE)


@dataclass(frozen=True, slots=True)
class RelayStrategy:
    """A named way of reaching the upstream API.

    Parameters
    ----------
    name : str
        Label used in logs and failure reports.
    template : str
        Relay URL. ``{url}`` is replaced with the encoded target URL;
        without a placeholder the encoded target is appended.
    enveloping : bool
        Whether the relay wraps the upstream body in a JSON envelope.
    """

    name: str
    template: str
    enveloping: bool = False

    def build_url(self, target_url: str) -> str:
        encoded = encode_target(target_url)
        if _URL_PLACEHOLDER in self.template:
            return self.template.replace(_URL_PLACEHOLDER, encoded)
        return f"{self.template}{encoded}"


BUILTIN_STRATEGIES: tuple[RelayStrategy, ...] = (
    RelayStrategy(name="AllOrigins (JSON)", template=ALLORIGINS_GET, enveloping=True),
    RelayStrategy(name="AllOrigins (Raw)", template=ALLORIGINS_RAW),
    RelayStrategy(name="corsproxy.io", template=CORSPROXY),
)


def build_strategies(config: RttiConfig) -> list[RelayStrategy]:
    """Return the relay strategies for *config* in the order they are tried.

    A configured custom relay always comes first.
    """
    strategies: list[RelayStrategy] = []
    custom = config.relay_template
    if custom:
        strategies.append(RelayStrategy(name="CustomProxy", template=custom))
    strategies.extend(BUILTIN_STRATEGIES)
    return strategies


def build_target_url(config: RttiConfig, api_key: str, route_no: str | None, nonce: int) -> str:
    """Build the RTTI ``/buses`` URL.

    ``nonce`` is appended as ``_`` so caching relays fetch a fresh copy.
    """
    params: dict[str, str] = {"apikey": api_key}
    if route_no:
        params["routeNo"] = route_no
    params["_"] = str(nonce)
    return f"{config.base_url.rstrip('/')}/buses?{urlencode(params)}"
