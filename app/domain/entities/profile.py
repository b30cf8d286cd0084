"""Profile entity — a user's running reward totals."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

from app.domain.policies.reward_calculator import TripComputation, round_half_up


@dataclass
class Profile:
    id: int | None
    user_id: str
    email: str
    points: int = 0
    total_carbon_saved: float = 0.0
    created_at: datetime | None = None

    def apply(self, computation: TripComputation) -> Profile:
        """Return a copy of this profile with the trip's reward added to the totals."""
        return replace(
            self,
            points=self.points + computation.points_earned,
            total_carbon_saved=round_half_up(
                self.total_carbon_saved + computation.carbon_saved_kg, 2
            ),
        )
