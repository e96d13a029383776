from .notification import BulkActionResult, NotificationRead, UnreadCountRead
from .reservation import (
    ReservationCreate,
    ReservationRead,
    ReservationStatusLiteral,
    ReservationStatusUpdate,
)

__all__ = [
    "BulkActionResult",
    "NotificationRead",
    "UnreadCountRead",
    "ReservationCreate",
    "ReservationRead",
    "ReservationStatusLiteral",
    "ReservationStatusUpdate",
]
