"""Results of decoding and classifying an upstream response."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from pyrtti.models.vehicle import VehicleRecord


@dataclass(frozen=True, slots=True)
class ParseSuccess:
    """Body decoded into vehicle records (possibly none)."""

    records: list[VehicleRecord] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class ParseUpstreamError:
    """Body is an RTTI error document."""

    code: str
    message: str = ""


@dataclass(frozen=True, slots=True)
class ParseUnparseable:
    """Body is neither a vehicle list nor an error document."""

    reason: str = ""


ParseOutcome = ParseSuccess | ParseUpstreamError | ParseUnparseable


class ClassifiedOutcome(enum.Enum):
    """What an RTTI error code means for the relay chain."""

    EMPTY_RESULT = "empty_result"
    """No vehicles right now; a valid empty answer."""
    ROUTE_NOT_FOUND = "route_not_found"
    """The requested route does not exist; also an empty answer."""
    FATAL_CREDENTIAL = "fatal_credential"
    """The API key was rejected; stop trying relays."""
    UNKNOWN_UPSTREAM_ERROR = "unknown_upstream_error"
    """Any other code; try the next relay."""
