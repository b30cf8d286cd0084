"""Profile endpoints — create, read and the dashboard view."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.persistence.database import get_session
from app.application.ports.profile_repo import ProfileRepository
from app.application.use_cases.dashboard import DashboardUseCase
from app.domain.entities.profile import Profile
from app.domain.errors import DomainError
from app.infrastructure.api.dependencies import get_dashboard_uc, get_profile_repo
from app.infrastructure.api.errors import to_http
from app.infrastructure.api.schemas import (
    LeaderboardEntryOut,
    ProfileCreate,
    ProfileOut,
    TripOut,
)

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.post("", status_code=201, response_model=ProfileOut)
async def create_profile(
    body: ProfileCreate,
    repo: ProfileRepository = Depends(get_profile_repo),
    session: AsyncSession = Depends(get_session),
):
    """Create an empty profile for a newly signed-up user."""
    if await repo.get_by_user(body.user_id):
        raise HTTPException(status_code=409, detail="Profile already exists")

    try:
        profile = await repo.save(Profile(id=None, user_id=body.user_id, email=body.email))
        await session.commit()
    except IntegrityError:
        await session.rollback()
        raise HTTPException(status_code=409, detail="Profile already exists")
    return ProfileOut.from_domain(profile)


@router.get("/{user_id}", response_model=ProfileOut)
async def get_profile(user_id: str, repo: ProfileRepository = Depends(get_profile_repo)):
    profile = await repo.get_by_user(user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return ProfileOut.from_domain(profile)


@router.get("/{user_id}/dashboard")
async def get_dashboard(
    user_id: str,
    dashboard_uc: DashboardUseCase = Depends(get_dashboard_uc),
):
    """Totals, recent trips, monthly goals, achievements and leaderboard."""
    try:
        d = await dashboard_uc.execute(user_id)
    except DomainError as e:
        raise to_http(e)

    return {
        "profile": ProfileOut.from_domain(d.profile),
        "trip_count": d.trip_count,
        "recent_trips": [TripOut.from_domain(t) for t in d.recent_trips],
        "goals": [
            {
                "kind": g.kind.value,
                "current": g.current,
                "target": g.target,
                "percent": g.percent,
                "bar_value": g.bar_value,
            }
            for g in d.goals
        ],
        "achievements": [a.value for a in d.achievements],
        "leaderboard": [LeaderboardEntryOut.from_domain(e) for e in d.leaderboard],
    }

