"""Port interface for profile persistence."""

from abc import ABC, abstractmethod

from app.domain.entities.profile import Profile
from app.domain.policies.reward_calculator import TripComputation


class ProfileRepository(ABC):
    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        ...

    @abstractmethod
    async def get_by_user(self, user_id: str) -> Profile | None:
        ...

    @abstractmethod
    async def add_reward(self, user_id: str, computation: TripComputation) -> Profile:
        """Atomically add a trip reward to the running totals and return the updated profile."""
        ...

    @abstractmethod
    async def get_top(self, limit: int) -> list[Profile]:
        """Return up to `limit` profiles with the most points."""
        ...
