"""Reward endpoints — stateless distance / reward calculation and reverse geocoding."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from app.application.ports.geocoder_port import GeocoderPort
from app.domain.errors import InvalidInputError
from app.domain.policies.reward_calculator import (
    compute_distance_km,
    compute_reward,
    compute_trip,
)
from app.domain.value_objects.geo_point import GeoPoint
from app.infrastructure.api.dependencies import get_geocoder
from app.infrastructure.api.errors import to_http
from app.infrastructure.api.schemas import (
    DistanceRequest,
    RewardRequest,
    TripComputationOut,
)

router = APIRouter(tags=["rewards"])


@router.post("/rewards/distance")
async def distance(body: DistanceRequest):
    """Great-circle distance between two coordinates."""
    try:
        km = compute_distance_km(body.start.to_domain(), body.end.to_domain())
    except InvalidInputError as e:
        raise to_http(e)
    return {"distance_km": km}


@router.post("/rewards/compute", response_model=TripComputationOut)
async def compute(body: RewardRequest):
    """Reward for a distance, or for the trip between two coordinates."""
    try:
        if body.distance_km is not None:
            computation = compute_reward(body.distance_km)
        else:
            computation = compute_trip(body.start.to_domain(), body.end.to_domain())
    except InvalidInputError as e:
        raise to_http(e)
    return TripComputationOut.from_domain(computation)


@router.get("/geocode/reverse")
async def reverse_geocode(
    lat: float = Query(...),
    lon: float = Query(...),
    geocoder: GeocoderPort = Depends(get_geocoder),
):
    """Name the place at a device location (used to prefill the start field)."""
    try:
        point = GeoPoint(latitude=lat, longitude=lon)
    except InvalidInputError as e:
        raise to_http(e)
    return {"place_name": await geocoder.reverse_geocode(point)}
