"""Route reference data."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from pyrtti.models.vehicle import Direction


class RouteDescriptor(BaseModel):
    """A route the client knows about, used to filter requests."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    route_no: str
    name: str
    direction: Direction
    color: str


AVAILABLE_ROUTES: tuple[RouteDescriptor, ...] = (
    RouteDescriptor(route_no="099", name="B-Line Commercial-Broadway / UBC", direction=Direction.WEST, color="#f97316"),
    RouteDescriptor(route_no="019", name="Metrotown / Stanley Park", direction=Direction.WEST, color="#3b82f6"),
    RouteDescriptor(route_no="005", name="Robson / Downtown", direction=Direction.SOUTH, color="#a855f7"),
    RouteDescriptor(route_no="R4", name="41st Ave RapidBus", direction=Direction.EAST, color="#22c55e"),
    RouteDescriptor(route_no="Seabus", name="SeaBus Lonsdale / Waterfront", direction=Direction.SOUTH, color="#ef4444"),
)


def find_route(route_no: str) -> RouteDescriptor | None:
    """Look up a route by number, accepting ``"99"`` for ``"099"``."""
    wanted = route_no.strip()
    for route in AVAILABLE_ROUTES:
        if route.route_no == wanted or route.route_no.lstrip("0") == wanted.lstrip("0"):
            return route
    return None
