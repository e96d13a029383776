"""Repository implementations for infrastructure layer."""

from .listing_repository import ListingRepository
from .reservation_repository import ReservationRepository
from .notification_repository import NotificationRepository

__all__ = [
    "ListingRepository",
    "ReservationRepository",
    "NotificationRepository",
]
