"""GoalsPolicy — monthly goal progress and achievement badges."""

from __future__ import annotations

from dataclasses import dataclass

from app.domain.entities.profile import Profile
from app.domain.value_objects.enums import Achievement, GoalKind

FIRST_POINTS_THRESHOLD = 100
GREEN_TRIPS_THRESHOLD = 5
ECO_WARRIOR_CARBON_KG = 10


@dataclass(frozen=True)
class MonthlyGoals:
    points: int = 1000
    carbon_kg: float = 50.0
    trips: int = 20


@dataclass(frozen=True)
class GoalProgress:
    kind: GoalKind
    current: float
    target: float
    percent: int  # may exceed 100 once the goal is beaten
    bar_value: float  # progress bar fill, capped at 100


def evaluate_goals(
    profile: Profile,
    trip_count: int,
    goals: MonthlyGoals,
) -> list[GoalProgress]:
    """Progress towards each monthly goal, in points / carbon / trips order."""
    return [
        _progress(GoalKind.POINTS, profile.points, goals.points),
        _progress(GoalKind.CARBON, profile.total_carbon_saved, goals.carbon_kg),
        _progress(GoalKind.TRIPS, trip_count, goals.trips),
    ]


def earned_achievements(profile: Profile, trip_count: int) -> list[Achievement]:
    earned = []
    if profile.points >= FIRST_POINTS_THRESHOLD:
        earned.append(Achievement.FIRST_100_POINTS)
    if trip_count >= GREEN_TRIPS_THRESHOLD:
        earned.append(Achievement.FIVE_GREEN_TRIPS)
    if profile.total_carbon_saved >= ECO_WARRIOR_CARBON_KG:
        earned.append(Achievement.ECO_WARRIOR)
    return earned


def _progress(kind: GoalKind, current: float, target: float) -> GoalProgress:
    if target <= 0:
        raise ValueError(f"Goal target for {kind.value} must be positive")
    ratio = current / target * 100
    return GoalProgress(
        kind=kind,
        current=current,
        target=target,
        percent=int(ratio + 0.5),
        bar_value=min(ratio, 100.0),
    )
