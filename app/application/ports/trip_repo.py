"""Port interface for trip persistence."""

from abc import ABC, abstractmethod

from app.domain.entities.trip import Trip


class TripRepository(ABC):
    @abstractmethod
    async def save(self, trip: Trip) -> Trip:
        ...

    @abstractmethod
    async def get_recent(self, user_id: str, limit: int) -> list[Trip]:
        """Return the user's trips, newest first."""
        ...

    @abstractmethod
    async def count_by_user(self, user_id: str) -> int:
        ...
