"""ORM models used by the application infrastructure."""

from .listing import ListingModel
from .reservation import ReservationModel
from .notification import NotificationModel

__all__ = [
    "ListingModel",
    "ReservationModel",
    "NotificationModel",
]
