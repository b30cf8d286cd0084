"""Port interface for storing ticket proof images."""

from abc import ABC, abstractmethod


class TicketStoragePort(ABC):
    @abstractmethod
    async def store(self, user_id: str, filename: str, content: bytes) -> str:
        """Store the image and return its path relative to the storage root.

        Raises TicketStorageError if the image is rejected or cannot be written.
        """
        ...

    @abstractmethod
    async def delete(self, path: str) -> None:
        """Remove a previously stored image. Missing files are ignored."""
        ...
