"""Data models for RTTI responses."""

from pyrtti.models.outcomes import (
    ClassifiedOutcome,
    ParseOutcome,
    ParseSuccess,
    ParseUnparseable,
    ParseUpstreamError,
)
from pyrtti.models.route import AVAILABLE_ROUTES, RouteDescriptor, find_route
from pyrtti.models.vehicle import Direction, RouteMap, VehicleRecord

__all__ = [
    "AVAILABLE_ROUTES",
    "ClassifiedOutcome",
    "Direction",
    "ParseOutcome",
    "ParseSuccess",
    "ParseUnparseable",
    "ParseUpstreamError",
    "RouteDescriptor",
    "RouteMap",
    "VehicleRecord",
    "find_route",
]
