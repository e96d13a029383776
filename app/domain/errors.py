"""Typed failures reported by the reservation and notification use cases."""

from __future__ import annotations


class ReservationServiceError(Exception):
    """Base class for every failure surfaced to API callers."""


class NotFoundError(ReservationServiceError, LookupError):
    """The requested resource does not exist."""


class ReservationNotFound(NotFoundError):
    def __init__(self, reservation_id: str) -> None:
        super().__init__(f"Reservation {reservation_id} not found")
        self.reservation_id = reservation_id


class ListingNotFound(NotFoundError):
    def __init__(self, listing_id: str) -> None:
        super().__init__(f"Listing {listing_id} not found")
        self.listing_id = listing_id


class NotificationNotFound(NotFoundError):
    def __init__(self, notification_id: str) -> None:
        super().__init__(f"Notification {notification_id} not found")
        self.notification_id = notification_id


class ForbiddenError(ReservationServiceError, PermissionError):
    """The caller is not allowed to view or act on the resource."""


class InvalidTransitionError(ReservationServiceError, ValueError):
    """Raised when a status change does not follow a legal edge."""

    def __init__(self, current: str, target: str) -> None:
        super().__init__(f"Invalid reservation status transition: {current} -> {target}")
        self.current = current
        self.target = target


class ListingUnavailableError(ReservationServiceError, ValueError):
    def __init__(self, listing_id: str) -> None:
        super().__init__(f"Listing {listing_id} is not available")
        self.listing_id = listing_id


class ValidationError(ReservationServiceError, ValueError):
    """Malformed window, price or identifier."""


class StorageError(ReservationServiceError, RuntimeError):
    """The relational store failed and the transaction was rolled back."""


__all__ = [
    "ForbiddenError",
    "InvalidTransitionError",
    "ListingNotFound",
    "ListingUnavailableError",
    "NotFoundError",
    "NotificationNotFound",
    "ReservationNotFound",
    "ReservationServiceError",
    "StorageError",
    "ValidationError",
]
