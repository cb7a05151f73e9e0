"""pyrtti - Async Python client for TransLink RTTI live bus positions."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyrtti")
except PackageNotFoundError:
    __version__ = "0+local"
from pyrtti.client import RttiClient
from pyrtti.config import ExhaustionPolicy, MissingKeyPolicy, RttiConfig
from pyrtti.exceptions import (
    RttiApiError,
    RttiChainExhaustedError,
    RttiConfigError,
    RttiCredentialError,
    RttiError,
    RttiRelayEnvelopeError,
    RttiTransportError,
    RttiUnparseableError,
)
from pyrtti.models import (
    AVAILABLE_ROUTES,
    ClassifiedOutcome,
    Direction,
    ParseOutcome,
    ParseSuccess,
    ParseUnparseable,
    ParseUpstreamError,
    RouteDescriptor,
    RouteMap,
    VehicleRecord,
    find_route,
)
from pyrtti.relays import RelayStrategy

__all__ = [
    "__version__",
    "AVAILABLE_ROUTES",
    "ClassifiedOutcome",
    "Direction",
    "ExhaustionPolicy",
    "MissingKeyPolicy",
    "ParseOutcome",
    "ParseSuccess",
    "ParseUnparseable",
    "ParseUpstreamError",
    "RelayStrategy",
    "RouteDescriptor",
    "RouteMap",
    "RttiApiError",
    "RttiChainExhaustedError",
    "RttiClient",
    "RttiConfig",
    "RttiConfigError",
    "RttiCredentialError",
    "RttiError",
    "RttiRelayEnvelopeError",
    "RttiTransportError",
    "RttiUnparseableError",
    "VehicleRecord",
    "find_route",
]
