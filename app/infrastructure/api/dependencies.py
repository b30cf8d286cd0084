"""FastAPI dependency injection — wires adapters into use cases."""

from __future__ import annotations

import logging

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.geocoder.mapbox_adapter import MapboxAdapter
from app.adapters.geocoder.nominatim_adapter import NominatimAdapter
from app.adapters.persistence.database import get_session
from app.adapters.persistence.repositories import SqlProfileRepository, SqlTripRepository
from app.adapters.storage.local_ticket_storage import LocalTicketStorage
from app.application.ports.geocoder_port import GeocoderPort
from app.application.ports.profile_repo import ProfileRepository
from app.application.ports.trip_repo import TripRepository
from app.application.use_cases.dashboard import DashboardUseCase
from app.application.use_cases.quote_trip import QuoteTripUseCase
from app.application.use_cases.record_trip import RecordTripUseCase
from app.config import settings
from app.domain.policies.goals import MonthlyGoals

logger = logging.getLogger(__name__)

# Singleton adapters (stateless or with internal caching)
if settings.mapbox_api_key:
    _geocoder_adapter: GeocoderPort = MapboxAdapter()
    logger.info("Using Mapbox for geocoding")
else:
    _geocoder_adapter = NominatimAdapter()
    logger.info("Using Nominatim for geocoding")

_ticket_storage = LocalTicketStorage()

_monthly_goals = MonthlyGoals(
    points=settings.monthly_points_goal,
    carbon_kg=settings.monthly_carbon_goal_kg,
    trips=settings.monthly_trips_goal,
)


def get_geocoder() -> GeocoderPort:
    return _geocoder_adapter


def get_profile_repo(session: AsyncSession = Depends(get_session)) -> ProfileRepository:
    return SqlProfileRepository(session)


def get_trip_repo(session: AsyncSession = Depends(get_session)) -> TripRepository:
    return SqlTripRepository(session)


def get_quote_trip_uc(geocoder: GeocoderPort = Depends(get_geocoder)) -> QuoteTripUseCase:
    return QuoteTripUseCase(geocoder=geocoder)


def get_record_trip_uc(
    quote_uc: QuoteTripUseCase = Depends(get_quote_trip_uc),
    trip_repo: TripRepository = Depends(get_trip_repo),
    profile_repo: ProfileRepository = Depends(get_profile_repo),
) -> RecordTripUseCase:
    return RecordTripUseCase(
        quote=quote_uc,
        storage=_ticket_storage,
        trip_repo=trip_repo,
        profile_repo=profile_repo,
    )


def get_dashboard_uc(
    trip_repo: TripRepository = Depends(get_trip_repo),
    profile_repo: ProfileRepository = Depends(get_profile_repo),
) -> DashboardUseCase:
    return DashboardUseCase(
        trip_repo=trip_repo,
        profile_repo=profile_repo,
        goals=_monthly_goals,
        recent_limit=settings.recent_trips_limit,
        leaderboard_size=settings.leaderboard_size,
    )
