"""Data hand-off to the transit assistant.

The assistant is a language model that may call a ``getBusLocations``
tool. The answer is built from the bus list the caller already holds,
so no extra RTTI request is made. Talking to the model itself is left
to the caller.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pyrtti.models.vehicle import VehicleRecord

BUS_LOCATIONS_TOOL_NAME = "getBusLocations"
DEFAULT_TOOL_LIMIT = 10

BUS_LOCATIONS_TOOL: dict[str, Any] = {
    "name": BUS_LOCATIONS_TOOL_NAME,
    "parameters": {
        "type": "OBJECT",
        "description": "Get current real-time locations of buses for a specific route or all routes.",
        "properties": {
            "routeNo": {
                "type": "STRING",
                "description": 'The route number to filter by (e.g., "099", "019"). If omitted, returns all buses.',
            },
        },
        "required": [],
    },
}


def select_buses(
    buses: Sequence[VehicleRecord],
    route_no: str | None = None,
    *,
    limit: int = DEFAULT_TOOL_LIMIT,
) -> list[VehicleRecord]:
    """Pick the buses a tool call asked for.

    With a route, every bus on it is returned (``"99"`` also matches
    ``"099"``). Without one, only the first *limit* buses are returned
    to keep the model context small.
    """
    if route_no:
        wanted = {route_no, f"0{route_no}"}
        return [bus for bus in buses if bus.route_id in wanted]
    return list(buses[:limit])


def summarize_bus(bus: VehicleRecord) -> dict[str, str]:
    return {
        "route": bus.route_id,
        "vehicle": bus.vehicle_id,
        "direction": bus.direction.value if bus.direction else "",
        "location": f"{bus.latitude:.4f}, {bus.longitude:.4f}",
        "destination": bus.destination,
    }


def build_tool_response(buses: Sequence[VehicleRecord], route_no: str | None = None) -> dict[str, Any]:
    """Build the ``getBusLocations`` tool result for *buses*."""
    return {"buses": [summarize_bus(bus) for bus in select_buses(buses, route_no)]}
