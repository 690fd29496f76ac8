# path: transit-itinerary-api/itinerary_api/core/errors.py

from __future__ import annotations


class ItineraryError(Exception):
    """Base class for failures raised while resolving an itinerary."""


class NotFoundError(ItineraryError):
    def __init__(self, kind: str, key: object):
        self.kind = kind
        self.key = key
        super().__init__(f"Unknown {kind}: {key!r}")


class GeometryResolutionError(ItineraryError):
    """A leg endpoint does not lie on the shape chosen for its route."""

    def __init__(self, route_id: str, station_id: str, endpoint: str):
        self.route_id = route_id
        self.station_id = station_id
        self.endpoint = endpoint
        super().__init__(
            f"{endpoint} station {station_id!r} is not on any shape of route {route_id!r}"
        )
