"""Tests for Pydantic model parsing of RTTI vehicle records."""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from pyrtti.models.route import AVAILABLE_ROUTES, find_route
from pyrtti.models.vehicle import Direction, RouteMap, VehicleRecord

SAMPLE_PAYLOAD: dict = {
    "VehicleNo": "9245",
    "TripId": 13456321,
    "RouteNo": "099",
    "Direction": "WEST",
    "Destination": "UBC",
    "Pattern": "WB1",
    "Latitude": 49.263233,
    "Longitude": -123.138233,
    "RecordedTime": "09:12:33 am",
    "RouteMap": {"Href": "https://nb.translink.ca/geodata/099.kmz"},
}

# ------------------------------------------------------------------
# Direction
# ------------------------------------------------------------------


class TestDirection:
    def test_known_value(self) -> None:
        assert Direction("NORTH") is Direction.NORTH

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("west", Direction.WEST), (" East ", Direction.EAST), ("South", Direction.SOUTH)],
    )
    def test_lenient_values(self, raw: str, expected: Direction) -> None:
        assert Direction(raw) is expected

    @pytest.mark.parametrize("raw", ["", "UP", "Southbound", 3])
    def test_unknown_value_raises(self, raw: object) -> None:
        with pytest.raises(ValueError):
            Direction(raw)

    def test_opposite(self) -> None:
        assert Direction.NORTH.opposite is Direction.SOUTH
        assert Direction.EAST.opposite is Direction.WEST
        assert Direction.WEST.opposite.opposite is Direction.WEST


# ------------------------------------------------------------------
# VehicleRecord
# ------------------------------------------------------------------


class TestVehicleRecord:
    def test_parses_upstream_payload(self) -> None:
        record = VehicleRecord.model_validate(SAMPLE_PAYLOAD)

        assert record.vehicle_id == "9245"
        assert record.route_id == "099"
        assert record.direction is Direction.WEST
        assert record.latitude == 49.263233
        assert record.longitude == -123.138233
        assert record.recorded_at == "09:12:33 am"
        assert record.route_map == RouteMap(href="https://nb.translink.ca/geodata/099.kmz")

    def test_string_coordinates_are_coerced(self) -> None:
        record = VehicleRecord.model_validate(dict(SAMPLE_PAYLOAD, Latitude=" 49.26 ", Longitude="-123.10"))
        assert record.latitude == 49.26
        assert record.longitude == -123.10

    def test_snake_case_construction(self) -> None:
        record = VehicleRecord(vehicle_id="1", route_id="R4", direction=Direction.EAST, latitude=49.2, longitude=-123.1)
        assert record.destination == ""
        assert record.route_map.href == ""

    def test_missing_route_map_defaults_to_empty(self) -> None:
        payload = {k: v for k, v in SAMPLE_PAYLOAD.items() if k != "RouteMap"}
        assert VehicleRecord.model_validate(payload).route_map.href == ""
        assert VehicleRecord.model_validate(dict(payload, RouteMap=None)).route_map.href == ""

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("Latitude", None),
            ("Latitude", ""),
            ("Latitude", "abc"),
            ("Latitude", math.nan),
            ("Latitude", math.inf),
            ("Latitude", 91.0),
            ("Longitude", -180.5),
            ("Longitude", "NaN"),
            ("Longitude", True),
        ],
    )
    def test_invalid_coordinates_rejected(self, field: str, value: object) -> None:
        with pytest.raises(ValidationError):
            VehicleRecord.model_validate(dict(SAMPLE_PAYLOAD, **{field: value}))

    def test_missing_coordinates_rejected(self) -> None:
        payload = {k: v for k, v in SAMPLE_PAYLOAD.items() if k != "Longitude"}
        with pytest.raises(ValidationError):
            VehicleRecord.model_validate(payload)

    def test_unknown_direction_kept_without_direction(self) -> None:
        record = VehicleRecord.model_validate(dict(SAMPLE_PAYLOAD, Direction="SIDEWAYS"))
        assert record.direction is None
        assert record.vehicle_id == SAMPLE_PAYLOAD["VehicleNo"]

    def test_missing_direction_kept_without_direction(self) -> None:
        payload = {k: v for k, v in SAMPLE_PAYLOAD.items() if k != "Direction"}
        record = VehicleRecord.model_validate(payload)
        assert record.direction is None

    def test_frozen(self) -> None:
        record = VehicleRecord.model_validate(SAMPLE_PAYLOAD)
        with pytest.raises(ValidationError):
            record.latitude = 0.0  # type: ignore[misc]


# ------------------------------------------------------------------
# Routes
# ------------------------------------------------------------------


class TestRoutes:
    def test_reference_routes(self) -> None:
        assert [r.route_no for r in AVAILABLE_ROUTES] == ["099", "019", "005", "R4", "Seabus"]

    def test_find_route_accepts_unpadded_number(self) -> None:
        route = find_route("99")
        assert route is not None
        assert route.route_no == "099"
        assert route.direction is Direction.WEST

    def test_find_route_unknown(self) -> None:
        assert find_route("123") is None
