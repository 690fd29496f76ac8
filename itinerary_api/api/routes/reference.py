# path: transit-itinerary-api/itinerary_api/api/routes/reference.py

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from itinerary_api.models.geojson_models import LineFeature
from itinerary_api.models.reference_models import Route, Station
from itinerary_api.models.trip_models import Leg
from itinerary_api.services.geometry_resolver import resolve_leg
from itinerary_api.services.reference_data import ReferenceData, load_reference_data

router = APIRouter(tags=["reference"])


@router.get("/stations/{station_id}", response_model=Station)
def get_station(station_id: str, reference: ReferenceData = Depends(load_reference_data)) -> Station:
    return reference.get_station(station_id)


@router.get("/routes/{route_id}", response_model=Route)
def get_route(route_id: str, reference: ReferenceData = Depends(load_reference_data)) -> Route:
    return reference.get_route(route_id)


@router.get("/legs", response_model=LineFeature)
def get_leg(
    route: str = Query(...),
    begin: str = Query(...),
    end: str = Query(...),
    reference: ReferenceData = Depends(load_reference_data),
) -> LineFeature:
    return resolve_leg(reference, Leg(route=route, begin=begin, end=end))
