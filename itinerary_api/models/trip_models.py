# path: transit-itinerary-api/itinerary_api/models/trip_models.py

from __future__ import annotations

from typing import List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, model_validator

from itinerary_api.models.geojson_models import LineFeature, StopFeatureCollection


class Leg(BaseModel):
    """One continuous ride on a single route between two stations."""

    model_config = ConfigDict(frozen=True)

    route: str
    begin: str
    end: str


class Solution(BaseModel):
    model_config = ConfigDict(frozen=True)

    origin: str
    first_transfer_arrival: str
    first_transfer_departure: str
    second_transfer_arrival: str
    second_transfer_departure: str
    destination: str


class Trip(BaseModel):
    """A day's answer: three routes ridden in order, and where each was boarded and left."""

    model_config = ConfigDict(frozen=True)

    routes: Tuple[str, str, str]
    solution: Solution

    def stops(self) -> List[str]:
        s = self.solution
        return [
            s.origin,
            s.first_transfer_arrival,
            s.first_transfer_departure,
            s.second_transfer_arrival,
            s.second_transfer_departure,
            s.destination,
        ]

    def legs(self) -> List[Leg]:
        s = self.solution
        first, second, third = self.routes
        return [
            Leg(route=first, begin=s.origin, end=s.first_transfer_arrival),
            Leg(route=second, begin=s.first_transfer_departure, end=s.second_transfer_arrival),
            Leg(route=third, begin=s.second_transfer_departure, end=s.destination),
        ]


class Itinerary(BaseModel):
    day_index: Optional[int] = None
    trip_routes: Tuple[str, str, str]
    stops: StopFeatureCollection
    lines: List[LineFeature]

    @model_validator(mode="after")
    def validate_line_count(self):
        if len(self.lines) != 3:
            raise ValueError("An itinerary has exactly 3 lines, one per leg")
        return self
