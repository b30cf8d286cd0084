"""Leaderboard endpoint — top users by points."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from app.application.ports.profile_repo import ProfileRepository
from app.config import settings
from app.domain.policies.leaderboard import rank_profiles
from app.infrastructure.api.dependencies import get_profile_repo
from app.infrastructure.api.schemas import LeaderboardEntryOut

router = APIRouter(prefix="/leaderboard", tags=["leaderboard"])


@router.get("")
async def leaderboard(
    current_user_id: str | None = None,
    limit: int | None = Query(default=None, ge=1, le=100),
    repo: ProfileRepository = Depends(get_profile_repo),
):
    """Top profiles ranked by points, then carbon saved."""
    size = limit or settings.leaderboard_size
    profiles = await repo.get_top(size)
    entries = rank_profiles(profiles, size, current_user_id=current_user_id)
    return {
        "total": len(entries),
        "entries": [LeaderboardEntryOut.from_domain(e) for e in entries],
    }
