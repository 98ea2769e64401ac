"""Helper utilities shared across API route handlers."""

from fastapi import HTTPException, status

from app.domain.exceptions import (
    DomainError,
    PersistenceError,
    QueueFullError,
    ValidationError,
)

_STATUS_BY_ERROR: tuple[tuple[type[DomainError], int], ...] = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (QueueFullError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (PersistenceError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def http_error_for(exc: DomainError) -> HTTPException:
    """Return the HTTP error that reports ``exc`` to the caller."""

    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return HTTPException(status_code=status_code, detail=str(exc))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)
    )
