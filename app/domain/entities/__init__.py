"""Domain entities exposed by the application."""

from .identity import ROLE_CLIENT, ROLE_PROVIDER, Identity
from .listing import Listing
from .notification import (
    NOTIFICATION_TYPE_MESSAGE,
    NOTIFICATION_TYPE_ORDER_UPDATE,
    Notification,
)
from .reservation import (
    PARTY_OWNER,
    PARTY_RENTER,
    RESERVATION_STATUSES,
    RESERVATION_STATUS_CANCELLED,
    RESERVATION_STATUS_COMPLETED,
    RESERVATION_STATUS_CONFIRMED,
    RESERVATION_STATUS_IN_PROGRESS,
    RESERVATION_STATUS_PENDING,
    Reservation,
    ReservationWindow,
)

__all__ = [
    "Identity",
    "ROLE_CLIENT",
    "ROLE_PROVIDER",
    "Listing",
    "Notification",
    "NOTIFICATION_TYPE_MESSAGE",
    "NOTIFICATION_TYPE_ORDER_UPDATE",
    "Reservation",
    "ReservationWindow",
    "RESERVATION_STATUSES",
    "RESERVATION_STATUS_PENDING",
    "RESERVATION_STATUS_CONFIRMED",
    "RESERVATION_STATUS_IN_PROGRESS",
    "RESERVATION_STATUS_COMPLETED",
    "RESERVATION_STATUS_CANCELLED",
    "PARTY_RENTER",
    "PARTY_OWNER",
]
