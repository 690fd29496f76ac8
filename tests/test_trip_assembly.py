from datetime import date

import pytest

from itinerary_api.core.config import DEFAULT_DATA_DIR, settings
from itinerary_api.core.errors import GeometryResolutionError, NotFoundError
from itinerary_api.models.trip_models import Solution, Trip
from itinerary_api.services.puzzle_book import PUZZLES_FILE, PuzzleBook, today_game_index
from itinerary_api.services.reference_data import ReferenceData
from itinerary_api.services.trip_assembly import assemble_day, assemble_trip


@pytest.fixture
def reference():
    return ReferenceData.from_directory(DEFAULT_DATA_DIR)


@pytest.fixture
def puzzles():
    return PuzzleBook.from_file(DEFAULT_DATA_DIR / PUZZLES_FILE)


def make_trip(routes, *stops):
    keys = [
        "origin",
        "first_transfer_arrival",
        "first_transfer_departure",
        "second_transfer_arrival",
        "second_transfer_departure",
        "destination",
    ]
    return Trip(routes=routes, solution=Solution(**dict(zip(keys, stops))))


def test_legs_pair_consecutive_stops():
    trip = make_trip(("1", "L", "4"), "137", "132", "L01", "L03", "635", "631")
    legs = trip.legs()
    assert [(leg.route, leg.begin, leg.end) for leg in legs] == [
        ("1", "137", "132"),
        ("L", "L01", "L03"),
        ("4", "635", "631"),
    ]


def test_assemble_day_produces_three_lines_in_leg_order(reference, puzzles):
    itinerary = assemble_day(reference, puzzles, 0)
    assert itinerary.day_index == 0
    assert [line.properties.route for line in itinerary.lines] == ["L", "A", "1"]
    assert len(itinerary.stops.features) == 6
    for leg, line in zip(puzzles.trip_for_day(0).legs(), itinerary.lines):
        assert line.coordinates[0] == reference.get_station(leg.begin).coordinate
        assert line.coordinates[-1] == reference.get_station(leg.end).coordinate


def test_repeated_transfer_station_is_drawn_once(reference, puzzles):
    itinerary = assemble_day(reference, puzzles, 2)
    ids = [f.properties.id for f in itinerary.stops.features]
    assert ids == ["125", "127", "A27", "A61", "H11"]
    assert [line.properties.shape_id for line in itinerary.lines] == ["1", "A1", "A1"]


def test_branch_only_leg_uses_its_branch(reference, puzzles):
    itinerary = assemble_day(reference, puzzles, 3)
    assert itinerary.lines[2].properties.shape_id == "A2"
    assert itinerary.lines[2].coordinates[-1] == reference.get_station("A65").coordinate


def test_every_packaged_day_resolves(reference, puzzles):
    for day_index in range(len(puzzles)):
        assert len(assemble_day(reference, puzzles, day_index).lines) == 3


def test_failing_leg_aborts_trip(reference):
    trip = make_trip(("1", "A", "L"), "137", "132", "A27", "H11", "H11", "L06")
    with pytest.raises(GeometryResolutionError) as exc:
        assemble_trip(reference, trip)
    assert exc.value.route_id == "L"


def test_unknown_day_raises_not_found(reference, puzzles):
    with pytest.raises(NotFoundError):
        assemble_day(reference, puzzles, len(puzzles))
    with pytest.raises(NotFoundError):
        assemble_day(reference, puzzles, -1)


def test_neighbouring_days_are_clamped(puzzles):
    assert puzzles.previous_day(0) is None
    assert puzzles.next_day(0) == 1
    assert puzzles.next_day(len(puzzles) - 1) is None


def test_today_game_index_counts_days_from_epoch(monkeypatch):
    monkeypatch.setattr(settings, "game_epoch", date(2024, 3, 1))
    assert today_game_index(date(2024, 3, 1)) == 0
    assert today_game_index(date(2024, 3, 4)) == 3
