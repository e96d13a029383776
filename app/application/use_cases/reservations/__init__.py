"""Use cases driving the reservation lifecycle."""

from .cancel_reservation import cancel_reservation
from .create_reservation import ListingLookup, create_reservation
from .get_reservation import get_reservation
from .list_reservations import list_reservations
from .transition_reservation_status import transition_reservation_status

__all__ = [
    "ListingLookup",
    "cancel_reservation",
    "create_reservation",
    "get_reservation",
    "list_reservations",
    "transition_reservation_status",
]
