# path: transit-itinerary-api/itinerary_api/services/puzzle_book.py

from __future__ import annotations

from datetime import date, datetime
from functools import lru_cache
from pathlib import Path
from typing import List, Optional
from zoneinfo import ZoneInfo
import json
import logging

from itinerary_api.core.config import settings
from itinerary_api.core.errors import NotFoundError
from itinerary_api.models.trip_models import Trip

logger = logging.getLogger(__name__)

PUZZLES_FILE = "puzzles.json"


def today_game_index(today: Optional[date] = None) -> int:
    """Days elapsed since the game epoch; day 0 is the epoch itself."""
    if today is None:
        today = datetime.now(ZoneInfo(settings.timezone)).date()
    return (today - settings.game_epoch).days


class PuzzleBook:
    """Daily answers, indexed by game day."""

    def __init__(self, trips: List[Trip]):
        self._trips = list(trips)

    @classmethod
    def from_file(cls, path: Path) -> "PuzzleBook":
        with open(path, encoding="utf-8") as f:
            rows = json.load(f)
        book = cls([Trip.model_validate(row) for row in rows])
        logger.info("Loaded %d daily puzzles from %s", len(book), path)
        return book

    def __len__(self) -> int:
        return len(self._trips)

    def trip_for_day(self, day_index: int) -> Trip:
        if not 0 <= day_index < len(self._trips):
            raise NotFoundError("day", day_index)
        return self._trips[day_index]

    def _in_range(self, day_index: int) -> Optional[int]:
        return day_index if 0 <= day_index < len(self._trips) else None

    def previous_day(self, day_index: int) -> Optional[int]:
        return self._in_range(day_index - 1)

    def next_day(self, day_index: int) -> Optional[int]:
        return self._in_range(day_index + 1)


@lru_cache(maxsize=1)
def load_puzzle_book() -> PuzzleBook:
    return PuzzleBook.from_file(Path(settings.data_dir) / PUZZLES_FILE)
