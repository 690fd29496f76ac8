# path: transit-itinerary-api/itinerary_api/services/trip_assembly.py

from __future__ import annotations

import logging

from itinerary_api.models.trip_models import Itinerary, Trip
from itinerary_api.services.geometry_resolver import build_stop_features, resolve_leg
from itinerary_api.services.puzzle_book import PuzzleBook
from itinerary_api.services.reference_data import ReferenceData

logger = logging.getLogger(__name__)


def assemble_trip(reference: ReferenceData, trip: Trip, day_index: int | None = None) -> Itinerary:
    # The first failing leg aborts the whole trip; nothing is drawn in its place.
    stops = build_stop_features(reference, trip.stops())
    lines = [resolve_leg(reference, leg) for leg in trip.legs()]
    return Itinerary(day_index=day_index, trip_routes=trip.routes, stops=stops, lines=lines)


def assemble_day(reference: ReferenceData, puzzles: PuzzleBook, day_index: int) -> Itinerary:
    trip = puzzles.trip_for_day(day_index)
    logger.debug("Assembling day %d: routes %s", day_index, "/".join(trip.routes))
    return assemble_trip(reference, trip, day_index=day_index)
