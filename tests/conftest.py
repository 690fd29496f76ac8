import pytest

from itinerary_api.services.reference_data import ReferenceData

A = [-74.0, 40.7]
X = [-73.95, 40.75]
B = [-73.9, 40.8]


@pytest.fixture
def scenario_reference():
    """Stations A and B on a three-point shape [A, x, B]."""
    return ReferenceData.from_mappings(
        stations={
            "A": {"name": "Station A", "longitude": A[0], "latitude": A[1]},
            "B": {"name": "Station B", "longitude": B[0], "latitude": B[1]},
        },
        routes={"R": {"color": "#ff6319"}},
        shapes={"R": [A, X, B]},
    )


@pytest.fixture
def branching_reference():
    """Route Y has one trunk and two branches stored as Y1 and Y2."""
    return ReferenceData.from_mappings(
        stations={
            "T1": {"name": "Trunk 1", "longitude": -73.9, "latitude": 40.7},
            "T2": {"name": "Trunk 2", "longitude": -73.8, "latitude": 40.7},
            "N1": {"name": "North 1", "longitude": -73.7, "latitude": 40.8},
            "S1": {"name": "South 1", "longitude": -73.7, "latitude": 40.6},
            "Z9": {"name": "Off route", "longitude": -73.0, "latitude": 41.0},
        },
        routes={"Y": {"color": "#fccc0a"}, "G": {"color": "#6cbe45"}},
        shapes={
            "Y1": [[-73.9, 40.7], [-73.8, 40.7], [-73.75, 40.75], [-73.7, 40.8]],
            "Y2": [[-73.9, 40.7], [-73.8, 40.7], [-73.75, 40.65], [-73.7, 40.6]],
            "G": [[-73.9, 40.7], [-73.8, 40.7]],
        },
    )
