# path: transit-itinerary-api/itinerary_api/api/routes/itineraries.py

from __future__ import annotations

from typing import List, Optional, Tuple

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from itinerary_api.models.geojson_models import LineFeature, StopFeatureCollection
from itinerary_api.services.puzzle_book import PuzzleBook, load_puzzle_book, today_game_index
from itinerary_api.services.reference_data import ReferenceData, load_reference_data
from itinerary_api.services.trip_assembly import assemble_day

router = APIRouter(prefix="/itineraries", tags=["itineraries"])


class ItineraryResponse(BaseModel):
    day_index: int
    previous_day: Optional[int] = None
    next_day: Optional[int] = None
    trip_routes: Tuple[str, str, str]
    stops: StopFeatureCollection
    lines: List[LineFeature]


def _respond(reference: ReferenceData, puzzles: PuzzleBook, day_index: int) -> ItineraryResponse:
    itinerary = assemble_day(reference, puzzles, day_index)
    return ItineraryResponse(
        day_index=day_index,
        previous_day=puzzles.previous_day(day_index),
        next_day=puzzles.next_day(day_index),
        trip_routes=itinerary.trip_routes,
        stops=itinerary.stops,
        lines=itinerary.lines,
    )


@router.get("/today", response_model=ItineraryResponse, response_model_exclude_none=True)
def get_today(
    reference: ReferenceData = Depends(load_reference_data),
    puzzles: PuzzleBook = Depends(load_puzzle_book),
) -> ItineraryResponse:
    return _respond(reference, puzzles, today_game_index())


@router.get("/{day_index}", response_model=ItineraryResponse, response_model_exclude_none=True)
def get_day(
    day_index: int,
    reference: ReferenceData = Depends(load_reference_data),
    puzzles: PuzzleBook = Depends(load_puzzle_book),
) -> ItineraryResponse:
    return _respond(reference, puzzles, day_index)
