"""Map domain errors to HTTP responses."""

from fastapi import HTTPException

from app.domain.errors import (
    DomainError,
    InvalidInputError,
    InvalidTicketImageError,
    LocationNotResolvedError,
    ProfileNotFoundError,
    TicketStorageError,
)

_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (InvalidInputError, 422),
    (LocationNotResolvedError, 422),
    (InvalidTicketImageError, 422),
    (ProfileNotFoundError, 404),
    (TicketStorageError, 502),
]


def to_http(error: DomainError) -> HTTPException:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return HTTPException(status_code=status, detail=str(error))
    return HTTPException(status_code=400, detail=str(error))
