# path: transit-itinerary-api/itinerary_api/models/reference_models.py

from __future__ import annotations

from typing import Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator

from itinerary_api.utils.geo import Coordinate


class Station(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    longitude: float = Field(ge=-180.0, le=180.0)
    latitude: float = Field(ge=-90.0, le=90.0)

    @property
    def coordinate(self) -> Coordinate:
        return (self.longitude, self.latitude)


class Route(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    color: str


class Shape(BaseModel):
    """Physical polyline of a route, or of one branch of it (e.g. A1, A2)."""

    model_config = ConfigDict(frozen=True)

    id: str
    coordinates: Tuple[Coordinate, ...]  # (lon, lat)

    @field_validator("coordinates")
    @classmethod
    def validate_coords(cls, coords: Tuple[Coordinate, ...]):
        if not coords:
            raise ValueError("Shape must contain at least 1 coordinate")
        for lon, lat in coords:
            if not (-180.0 <= lon <= 180.0):
                raise ValueError(f"lon out of range [-180,180]: {lon}")
            if not (-90.0 <= lat <= 90.0):
                raise ValueError(f"lat out of range [-90,90]: {lat}")
        return coords
