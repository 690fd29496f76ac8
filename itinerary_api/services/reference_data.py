# path: transit-itinerary-api/itinerary_api/services/reference_data.py

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple
import json
import logging
import re

from itinerary_api.core.config import settings
from itinerary_api.core.errors import NotFoundError
from itinerary_api.models.reference_models import Route, Shape, Station

logger = logging.getLogger(__name__)

STATIONS_FILE = "stations.json"
ROUTES_FILE = "routes.json"
SHAPES_FILE = "shapes.json"


def _read_json(path: Path) -> Any:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def _variant_suffix(route_id: str, key: str) -> Optional[int]:
    m = re.fullmatch(re.escape(route_id) + r"(\d+)", key)
    return int(m.group(1)) if m else None


class ReferenceData:
    """Read-only station, route and shape tables.

    A route's shape is stored under the route id when it has one physical path.
    Branching routes are stored as numbered variants instead (``A1``, ``A2``),
    and every variant becomes a candidate for that route.
    """

    def __init__(self, stations: Dict[str, Station], routes: Dict[str, Route], shapes: Dict[str, Shape]):
        self._stations = dict(stations)
        self._routes = dict(routes)
        self._shapes = dict(shapes)
        self._candidates: Dict[str, Tuple[Shape, ...]] = {}
        for route_id in self._routes:
            candidates = self._find_candidates(route_id)
            if candidates:
                self._candidates[route_id] = candidates

    @classmethod
    def from_mappings(
        cls,
        stations: Mapping[str, Mapping[str, Any]],
        routes: Mapping[str, Mapping[str, Any]],
        shapes: Mapping[str, List[List[float]]],
    ) -> "ReferenceData":
        return cls(
            stations={sid: Station(id=sid, **row) for sid, row in stations.items()},
            routes={rid: Route(id=rid, **row) for rid, row in routes.items()},
            shapes={key: Shape(id=key, coordinates=[tuple(c) for c in coords]) for key, coords in shapes.items()},
        )

    @classmethod
    def from_directory(cls, data_dir: Path) -> "ReferenceData":
        data_dir = Path(data_dir)
        reference = cls.from_mappings(
            stations=_read_json(data_dir / STATIONS_FILE),
            routes=_read_json(data_dir / ROUTES_FILE),
            shapes=_read_json(data_dir / SHAPES_FILE),
        )
        logger.info(
            "Loaded reference data from %s: %d stations, %d routes, %d shapes",
            data_dir,
            len(reference._stations),
            len(reference._routes),
            len(reference._shapes),
        )
        return reference

    def _find_candidates(self, route_id: str) -> Tuple[Shape, ...]:
        if route_id in self._shapes:
            return (self._shapes[route_id],)
        variants = []
        for key, shape in self._shapes.items():
            suffix = _variant_suffix(route_id, key)
            if suffix is not None:
                variants.append((suffix, shape))
        variants.sort(key=lambda v: v[0])
        return tuple(shape for _, shape in variants)

    def get_station(self, station_id: str) -> Station:
        try:
            return self._stations[station_id]
        except KeyError:
            raise NotFoundError("station", station_id) from None

    def get_route(self, route_id: str) -> Route:
        try:
            return self._routes[route_id]
        except KeyError:
            raise NotFoundError("route", route_id) from None

    def get_shape_candidates(self, route_id: str) -> Tuple[Shape, ...]:
        try:
            return self._candidates[route_id]
        except KeyError:
            raise NotFoundError("shape for route", route_id) from None


@lru_cache(maxsize=1)
def load_reference_data() -> ReferenceData:
    return ReferenceData.from_directory(settings.data_dir)
