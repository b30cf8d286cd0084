"""Domain errors — raised by policies and use cases, mapped to HTTP in the API layer."""


class DomainError(Exception):
    """Base class for all GoGreen domain errors."""


class InvalidInputError(DomainError, ValueError):
    """A coordinate or distance is non-finite, out of range or negative."""


class LocationNotResolvedError(DomainError):
    """A place name could not be turned into coordinates."""

    def __init__(self, query: str):
        super().__init__(f"Location could not be resolved: {query!r}")
        self.query = query


class ProfileNotFoundError(DomainError):
    def __init__(self, user_id: str):
        super().__init__(f"Profile not found for user {user_id}")
        self.user_id = user_id


class TicketStorageError(DomainError):
    """The ticket image could not be stored."""


class InvalidTicketImageError(TicketStorageError):
    """The uploaded ticket image is empty or not an accepted image type."""
