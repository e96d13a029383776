"""Aggregate application use cases."""

from .reservations import (
    cancel_reservation,
    create_reservation,
    transition_reservation_status,
)

__all__ = [
    "cancel_reservation",
    "create_reservation",
    "transition_reservation_status",
]
