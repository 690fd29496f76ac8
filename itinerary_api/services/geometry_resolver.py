# path: transit-itinerary-api/itinerary_api/services/geometry_resolver.py

from __future__ import annotations

from typing import Iterable, List, Sequence
import logging

from itinerary_api.core.errors import GeometryResolutionError
from itinerary_api.models.geojson_models import (
    LineFeature,
    LineProperties,
    LineStringGeometry,
    PointGeometry,
    StopFeature,
    StopFeatureCollection,
    StopProperties,
)
from itinerary_api.models.reference_models import Shape
from itinerary_api.models.trip_models import Leg
from itinerary_api.services.reference_data import ReferenceData
from itinerary_api.utils.geo import Coordinate, bbox_wgs84, contains, index_of, polyline_length_m

logger = logging.getLogger(__name__)


def build_stop_features(reference: ReferenceData, station_ids: Iterable[str]) -> StopFeatureCollection:
    # dict keeps first-occurrence order
    unique_ids = list(dict.fromkeys(station_ids))

    features = []
    for station_id in unique_ids:
        station = reference.get_station(station_id)
        features.append(
            StopFeature(
                properties=StopProperties(id=station.id, name=station.name),
                geometry=PointGeometry(coordinates=station.coordinate),
            )
        )

    bbox = bbox_wgs84([f.geometry.coordinates for f in features]) if features else None
    return StopFeatureCollection(bbox=bbox, features=features)


def select_shape(candidates: Sequence[Shape], begin: Coordinate, end: Coordinate) -> Shape:
    """
    Pick the candidate shape containing both endpoints.

    Falls back to the last-listed candidate when none contains both; the index
    lookup that follows then reports which endpoint is missing.
    """
    if len(candidates) == 1:
        return candidates[0]
    for shape in candidates:
        if contains(shape.coordinates, begin) and contains(shape.coordinates, end):
            return shape
    return candidates[-1]


def slice_between(coordinates: Sequence[Coordinate], begin_index: int, end_index: int) -> List[Coordinate]:
    """Inclusive slice oriented from begin_index to end_index."""
    lo, hi = min(begin_index, end_index), max(begin_index, end_index)
    segment = list(coordinates[lo : hi + 1])
    if begin_index > end_index:
        segment.reverse()
    return segment


def resolve_leg(reference: ReferenceData, leg: Leg) -> LineFeature:
    begin_station = reference.get_station(leg.begin)
    end_station = reference.get_station(leg.end)
    route = reference.get_route(leg.route)

    begin = begin_station.coordinate
    end = end_station.coordinate

    shape = select_shape(reference.get_shape_candidates(route.id), begin, end)

    begin_index = index_of(shape.coordinates, begin)
    if begin_index is None:
        raise GeometryResolutionError(route.id, begin_station.id, "begin")
    end_index = index_of(shape.coordinates, end)
    if end_index is None:
        raise GeometryResolutionError(route.id, end_station.id, "end")

    logger.debug(
        "Resolved leg %s %s->%s on shape %s [%d..%d]",
        route.id, leg.begin, leg.end, shape.id, begin_index, end_index,
    )

    coordinates = slice_between(shape.coordinates, begin_index, end_index)
    return LineFeature(
        properties=LineProperties(
            route=route.id,
            color=route.color,
            shape_id=shape.id,
            length_m=polyline_length_m(coordinates),
        ),
        geometry=LineStringGeometry(coordinates=coordinates),
    )
