"""Helper utilities shared across API route handlers."""

from fastapi import HTTPException, status

from app.domain.errors import (
    ForbiddenError,
    InvalidTransitionError,
    ListingUnavailableError,
    NotFoundError,
    ReservationServiceError,
    StorageError,
    ValidationError,
)

_STATUS_BY_ERROR: tuple[tuple[type[ReservationServiceError], int], ...] = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (InvalidTransitionError, status.HTTP_409_CONFLICT),
    (ListingUnavailableError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (StorageError, status.HTTP_503_SERVICE_UNAVAILABLE),
)


def to_http_exception(exc: ReservationServiceError) -> HTTPException:
    """Translate a domain failure into the matching HTTP error."""

    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return HTTPException(status_code=status_code, detail=str(exc))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)
    )
