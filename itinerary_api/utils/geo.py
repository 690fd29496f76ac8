# path: transit-itinerary-api/itinerary_api/utils/geo.py

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple
import math

Coordinate = Tuple[float, float]  # (lon, lat)


def coords_equal(a: Sequence[float], b: Sequence[float]) -> bool:
    # Exact comparison; shapes and stations come from the same source data.
    return a[0] == b[0] and a[1] == b[1]


def index_of(coordinates: Sequence[Coordinate], target: Coordinate) -> Optional[int]:
    """First index in coordinates exactly equal to target, or None."""
    for i, coord in enumerate(coordinates):
        if coords_equal(coord, target):
            return i
    return None


def contains(coordinates: Sequence[Coordinate], target: Coordinate) -> bool:
    return index_of(coordinates, target) is not None


def bbox_wgs84(points_lonlat: Iterable[Coordinate]) -> List[float]:
    """GeoJSON bbox member: [min_lon, min_lat, max_lon, max_lat]."""
    points = list(points_lonlat)
    lons = [p[0] for p in points]
    lats = [p[1] for p in points]
    return [min(lons), min(lats), max(lons), max(lats)]


def haversine_m(a_lon: float, a_lat: float, b_lon: float, b_lat: float) -> float:
    r = 6371000.0
    phi1 = math.radians(a_lat)
    phi2 = math.radians(b_lat)
    dphi = math.radians(b_lat - a_lat)
    dlmb = math.radians(b_lon - a_lon)

    s = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlmb / 2) ** 2
    return 2 * r * math.asin(math.sqrt(s))


def polyline_length_m(points_lonlat: Sequence[Coordinate]) -> float:
    total = 0.0
    for i in range(1, len(points_lonlat)):
        a_lon, a_lat = points_lonlat[i - 1]
        b_lon, b_lat = points_lonlat[i]
        total += haversine_m(a_lon, a_lat, b_lon, b_lat)
    return total
