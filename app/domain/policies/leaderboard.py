"""LeaderboardPolicy — rank profiles by points earned."""

from __future__ import annotations

from dataclasses import dataclass

from app.domain.entities.profile import Profile


@dataclass(frozen=True)
class LeaderboardEntry:
    position: int
    user_id: str
    email: str
    points: int
    total_carbon_saved: float
    is_current_user: bool = False


def rank_profiles(
    profiles: list[Profile],
    limit: int = 10,
    current_user_id: str | None = None,
) -> list[LeaderboardEntry]:
    """Order profiles by points (desc), then carbon (desc), then email.

    Args:
        profiles: candidate profiles, any order.
        limit: maximum number of entries returned.
        current_user_id: marks the matching entry with is_current_user.

    Returns:
        Entries with 1-based positions.
    """
    if limit < 1:
        raise ValueError("Leaderboard limit must be at least 1")

    ordered = sorted(profiles, key=lambda p: (-p.points, -p.total_carbon_saved, p.email))
    return [
        LeaderboardEntry(
            position=index,
            user_id=p.user_id,
            email=p.email,
            points=p.points,
            total_carbon_saved=p.total_carbon_saved,
            is_current_user=p.user_id == current_user_id,
        )
        for index, p in enumerate(ordered[:limit], start=1)
    ]
