"""DashboardUseCase — everything the user's dashboard shows in one call."""

from __future__ import annotations

from dataclasses import dataclass

from app.application.ports.profile_repo import ProfileRepository
from app.application.ports.trip_repo import TripRepository
from app.domain.entities.profile import Profile
from app.domain.entities.trip import Trip
from app.domain.errors import ProfileNotFoundError
from app.domain.policies.goals import (
    GoalProgress,
    MonthlyGoals,
    earned_achievements,
    evaluate_goals,
)
from app.domain.policies.leaderboard import LeaderboardEntry, rank_profiles
from app.domain.value_objects.enums import Achievement


@dataclass
class Dashboard:
    profile: Profile
    trip_count: int
    recent_trips: list[Trip]
    goals: list[GoalProgress]
    achievements: list[Achievement]
    leaderboard: list[LeaderboardEntry]


class DashboardUseCase:
    def __init__(
        self,
        trip_repo: TripRepository,
        profile_repo: ProfileRepository,
        goals: MonthlyGoals,
        recent_limit: int = 5,
        leaderboard_size: int = 10,
    ):
        self._trips = trip_repo
        self._profiles = profile_repo
        self._goals = goals
        self._recent_limit = recent_limit
        self._leaderboard_size = leaderboard_size

    async def execute(self, user_id: str) -> Dashboard:
        profile = await self._profiles.get_by_user(user_id)
        if profile is None:
            raise ProfileNotFoundError(user_id)

        trip_count = await self._trips.count_by_user(user_id)
        recent = await self._trips.get_recent(user_id, self._recent_limit)
        top = await self._profiles.get_top(self._leaderboard_size)

        return Dashboard(
            profile=profile,
            trip_count=trip_count,
            recent_trips=recent,
            goals=evaluate_goals(profile, trip_count, self._goals),
            achievements=earned_achievements(profile, trip_count),
            leaderboard=rank_profiles(top, self._leaderboard_size, current_user_id=user_id),
        )
