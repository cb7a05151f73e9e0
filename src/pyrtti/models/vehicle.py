"""Vehicle position model."""

from __future__ import annotations

import enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from pyrtti.ingestion.normalize import safe_coordinate, safe_str

MAX_LATITUDE = 90.0
MAX_LONGITUDE = 180.0


class Direction(str, enum.Enum):
    """Direction of travel reported for a bus."""

    NORTH = "NORTH"
    SOUTH = "SOUTH"
    EAST = "EAST"
    WEST = "WEST"

    @classmethod
    def _missing_(cls, value: object) -> Direction | None:
        # RTTI spells these "WEST", but some feeds send "West" or " West ".
        if not isinstance(value, str):
            return None
        normalized = value.strip().upper()
        for member in cls:
            if normalized == member.value:
                return member
        return None

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}


class RouteMap(BaseModel):
    """Link to the route map published with a vehicle record."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    href: str = Field(default="", validation_alias=AliasChoices("Href", "href"))

    @field_validator("href", mode="before")
    @classmethod
    def _coerce_href(cls, value: Any) -> str:
        return safe_str(value)


class VehicleRecord(BaseModel):
    """One observed bus position.

    Fields are mapped from the RTTI ``/buses`` response. ``vehicle_id``
    is unique within a route, not across the network. ``recorded_at``
    is passed through as sent by RTTI and never reparsed.

    A record can only be built with finite coordinates inside
    geographic bounds; anything else raises
    :class:`pydantic.ValidationError`. A missing or unrecognised
    ``Direction`` leaves ``direction`` as ``None``.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    vehicle_id: str = Field(default="", validation_alias=AliasChoices("VehicleNo", "vehicle_id"))
    route_id: str = Field(default="", validation_alias=AliasChoices("RouteNo", "route_id"))
    direction: Direction | None = Field(default=None, validation_alias=AliasChoices("Direction", "direction"))
    destination: str = Field(default="", validation_alias=AliasChoices("Destination", "destination"))
    pattern: str = Field(default="", validation_alias=AliasChoices("Pattern", "pattern"))
    latitude: float = Field(validation_alias=AliasChoices("Latitude", "latitude"))
    longitude: float = Field(validation_alias=AliasChoices("Longitude", "longitude"))
    recorded_at: str = Field(default="", validation_alias=AliasChoices("RecordedTime", "recorded_at"))
    route_map: RouteMap = Field(default_factory=RouteMap, validation_alias=AliasChoices("RouteMap", "route_map"))

    @field_validator("vehicle_id", "route_id", "destination", "pattern", "recorded_at", mode="before")
    @classmethod
    def _coerce_strings(cls, value: Any) -> str:
        return safe_str(value)

    @field_validator("direction", mode="before")
    @classmethod
    def _coerce_direction(cls, value: Any) -> Direction | None:
        try:
            return Direction(value)
        except ValueError:
            return None

    @field_validator("latitude", mode="before")
    @classmethod
    def _check_latitude(cls, value: Any) -> float:
        parsed = safe_coordinate(value, MAX_LATITUDE)
        if parsed is None:
            raise ValueError(f"latitude must be a finite number within ±{MAX_LATITUDE}, got {value!r}")
        return parsed

    @field_validator("longitude", mode="before")
    @classmethod
    def _check_longitude(cls, value: Any) -> float:
        parsed = safe_coordinate(value, MAX_LONGITUDE)
        if parsed is None:
            raise ValueError(f"longitude must be a finite number within ±{MAX_LONGITUDE}, got {value!r}")
        return parsed

    @field_validator("route_map", mode="before")
    @classmethod
    def _coerce_route_map(cls, value: Any) -> Any:
        return {} if value is None else value
