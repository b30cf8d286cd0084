"""Trip endpoints — quote, record and list sustainable trips."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.persistence.database import get_session
from app.application.ports.trip_repo import TripRepository
from app.application.use_cases.quote_trip import QuoteTripUseCase
from app.application.use_cases.record_trip import RecordTripUseCase
from app.config import settings
from app.domain.errors import DomainError
from app.infrastructure.api.dependencies import (
    get_quote_trip_uc,
    get_record_trip_uc,
    get_trip_repo,
)
from app.infrastructure.api.errors import to_http
from app.infrastructure.api.schemas import (
    CoordinateOut,
    ProfileOut,
    QuoteRequest,
    TripComputationOut,
    TripOut,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/trips", tags=["trips"])


@router.post("/quote")
async def quote_trip(
    body: QuoteRequest,
    quote_uc: QuoteTripUseCase = Depends(get_quote_trip_uc),
):
    """Preview a trip: resolve both places and compute the reward without saving."""
    try:
        quote = await quote_uc.execute(body.start_location, body.end_location)
    except DomainError as e:
        raise to_http(e)

    return {
        "start_location": quote.start_location,
        "end_location": quote.end_location,
        "start": CoordinateOut.from_domain(quote.start_point),
        "end": CoordinateOut.from_domain(quote.end_point),
        "reward": TripComputationOut.from_domain(quote.computation),
    }


@router.post("", status_code=201)
async def record_trip(
    user_id: str = Form(...),
    start_location: str = Form(...),
    end_location: str = Form(...),
    ticket_image: UploadFile = File(...),
    record_uc: RecordTripUseCase = Depends(get_record_trip_uc),
    session: AsyncSession = Depends(get_session),
):
    """Record a trip with its ticket image and credit the reward to the user."""
    content = await ticket_image.read()
    try:
        recorded = await record_uc.execute(
            user_id=user_id,
            start_location=start_location,
            end_location=end_location,
            image_filename=ticket_image.filename or "ticket.jpg",
            image_content=content,
        )
    except DomainError as e:
        await session.rollback()
        raise to_http(e)

    try:
        await session.commit()
    except Exception:
        await session.rollback()
        await record_uc.discard(recorded)
        raise

    return {
        "status": "ok",
        "trip": TripOut.from_domain(recorded.trip),
        "profile": ProfileOut.from_domain(recorded.profile),
        "message": (
            f"You earned {recorded.trip.points_earned} points "
            f"and saved {recorded.trip.carbon_saved}kg CO₂!"
        ),
    }


@router.get("/{user_id}")
async def list_trips(
    user_id: str,
    limit: int | None = Query(default=None, ge=1, le=100),
    repo: TripRepository = Depends(get_trip_repo),
):
    """List the user's most recent trips, newest first."""
    trips = await repo.get_recent(user_id, limit or settings.recent_trips_limit)
    return {
        "total": await repo.count_by_user(user_id),
        "trips": [TripOut.from_domain(t) for t in trips],
    }
