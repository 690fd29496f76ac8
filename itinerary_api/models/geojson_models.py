# path: transit-itinerary-api/itinerary_api/models/geojson_models.py

### GeoJSON shapes handed to the map layer (one stop collection + three lines)

from __future__ import annotations

from typing import List, Literal, Optional, Tuple
from pydantic import BaseModel, Field, field_validator, model_validator

from itinerary_api.utils.geo import Coordinate


class PointGeometry(BaseModel):
    type: Literal["Point"] = "Point"
    coordinates: Tuple[float, float]  # (lon, lat)


class LineStringGeometry(BaseModel):
    type: Literal["LineString"] = "LineString"
    coordinates: List[Coordinate]

    @field_validator("coordinates")
    @classmethod
    def validate_coords(cls, coords: List[Coordinate]):
        # A single point is allowed: a leg that begins and ends at the same station.
        if not coords:
            raise ValueError("LineString must contain at least 1 coordinate")
        return coords


class StopProperties(BaseModel):
    id: str
    name: str


class StopFeature(BaseModel):
    type: Literal["Feature"] = "Feature"
    properties: StopProperties
    geometry: PointGeometry


class StopFeatureCollection(BaseModel):
    type: Literal["FeatureCollection"] = "FeatureCollection"
    bbox: Optional[List[float]] = None
    features: List[StopFeature] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_unique_ids(self):
        ids = [f.properties.id for f in self.features]
        if len(ids) != len(set(ids)):
            raise ValueError("Stop features must have unique station ids")
        return self


class LineProperties(BaseModel):
    route: str
    color: str
    shape_id: str
    length_m: float = Field(ge=0)


class LineFeature(BaseModel):
    type: Literal["Feature"] = "Feature"
    properties: LineProperties
    geometry: LineStringGeometry

    @property
    def coordinates(self) -> List[Coordinate]:
        return self.geometry.coordinates
