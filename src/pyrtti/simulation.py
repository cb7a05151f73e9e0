"""Synthetic fleet used when live data is unavailable.

Positions are a pure function of the wall-clock time and the route
filter: each simulated bus oscillates along a fixed polyline, so two
calls at the same instant return identical fleets and the motion
repeats every ``2π × SIMULATION_TIME_SCALE_S`` seconds.
"""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from datetime import UTC, datetime

from pyrtti._constants import SIMULATED_ROUTES, SIMULATION_FALLBACK_PATH, SIMULATION_TIME_SCALE_S
from pyrtti.models.vehicle import Direction, RouteMap, VehicleRecord

SIMULATION_DESTINATION = "Simulation Mode"
SIMULATION_PATTERN = "Full"

#: Seconds for one full back-and-forth trip along a path.
OSCILLATION_PERIOD_S: float = 2 * math.pi * SIMULATION_TIME_SCALE_S


@dataclass(frozen=True, slots=True)
class SimulationPath:
    """Ordered ``(latitude, longitude)`` waypoints for a route.

    ``forward`` is the direction reported while a bus moves from the
    first waypoint towards the last.
    """

    waypoints: tuple[tuple[float, float], ...]
    forward: Direction


SIMULATION_PATHS: dict[str, SimulationPath] = {
    "099": SimulationPath(
        waypoints=(
            (49.2626, -123.0694),  # Commercial-Broadway
            (49.2635, -123.1130),  # VGH
            (49.2641, -123.1518),  # Broadway & Arbutus
            (49.2663, -123.2070),  # UBC Loop
        ),
        forward=Direction.WEST,
    ),
    "019": SimulationPath(
        waypoints=(
            (49.2274, -123.0045),  # Metrotown
            (49.2432, -123.0635),  # Kingsway
            (49.2807, -123.0999),  # Main St
            (49.3000, -123.1300),  # Stanley Park
        ),
        forward=Direction.WEST,
    ),
    "Seabus": SimulationPath(
        waypoints=(
            (49.2855, -123.1121),  # Waterfront
            (49.3098, -123.0827),  # Lonsdale Quay
        ),
        forward=Direction.NORTH,
    ),
}


def _vehicle_count(route_no: str) -> int:
    return 2 if route_no == "Seabus" else 5


def _interpolate(waypoints: tuple[tuple[float, float], ...], progress: float) -> tuple[float, float]:
    """Position at *progress* (0..1) along the polyline."""
    segments = len(waypoints) - 1
    if segments < 1:
        return waypoints[0]
    scaled = min(max(progress, 0.0), 1.0) * segments
    index = min(int(scaled), segments - 1)
    fraction = scaled - index
    (lat0, lng0), (lat1, lng1) = waypoints[index], waypoints[index + 1]
    return lat0 + (lat1 - lat0) * fraction, lng0 + (lng1 - lng0) * fraction


def _simulate_route(route_no: str, now: float, recorded_at: str) -> list[VehicleRecord]:
    path = SIMULATION_PATHS.get(route_no) or SIMULATION_PATHS[SIMULATION_FALLBACK_PATH]
    count = _vehicle_count(route_no)
    phase = now / SIMULATION_TIME_SCALE_S

    buses: list[VehicleRecord] = []
    for i in range(count):
        arg = phase + 2 * math.pi * i / count
        progress = (math.sin(arg) + 1) / 2
        latitude, longitude = _interpolate(path.waypoints, progress)
        direction = path.forward if math.cos(arg) >= 0 else path.forward.opposite
        buses.append(
            VehicleRecord(
                vehicle_id=f"{route_no}-{1000 + i}",
                route_id=route_no,
                direction=direction,
                destination=SIMULATION_DESTINATION,
                pattern=SIMULATION_PATTERN,
                latitude=latitude,
                longitude=longitude,
                recorded_at=recorded_at,
                route_map=RouteMap(href=""),
            )
        )
    return buses


def generate(route_no: str | None = None, *, now: float | None = None) -> list[VehicleRecord]:
    """Generate the synthetic fleet.

    Parameters
    ----------
    route_no : str or None
        Simulate only this route; ``None`` simulates the default set.
    now : float or None
        Epoch seconds to evaluate positions at. Defaults to the current
        time.

    Returns
    -------
    list[VehicleRecord]
        Two buses for ``Seabus``, five for every other route. Routes
        without a known path reuse the ``099`` path.
    """
    if now is None:
        now = time.time()
    routes = [route_no] if route_no else list(SIMULATED_ROUTES)
    recorded_at = datetime.fromtimestamp(now, tz=UTC).strftime("%I:%M:%S %p")

    buses: list[VehicleRecord] = []
    for route in routes:
        buses.extend(_simulate_route(route, now, recorded_at))
    return buses
