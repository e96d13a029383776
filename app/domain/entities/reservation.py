"""Domain entity representing a booking made against a listing."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

RESERVATION_STATUS_PENDING = "pending"
RESERVATION_STATUS_CONFIRMED = "confirmed"
RESERVATION_STATUS_IN_PROGRESS = "in_progress"
RESERVATION_STATUS_COMPLETED = "completed"
RESERVATION_STATUS_CANCELLED = "cancelled"

RESERVATION_STATUSES = (
    RESERVATION_STATUS_PENDING,
    RESERVATION_STATUS_CONFIRMED,
    RESERVATION_STATUS_IN_PROGRESS,
    RESERVATION_STATUS_COMPLETED,
    RESERVATION_STATUS_CANCELLED,
)

# Parties of a reservation, relative to the reservation itself.
PARTY_RENTER = "renter"
PARTY_OWNER = "owner"


@dataclass(frozen=True)
class ReservationWindow:
    """Time span covered by a reservation."""

    start: datetime
    end: datetime


@dataclass
class Reservation:
    """Agreement between a renter and a listing owner for a time window."""

    id: str | None
    listing_id: str
    renter_id: str
    owner_id: str
    window: ReservationWindow
    total_price: Decimal
    status: str
    created_at: datetime | None = None

    def party_of(self, user_id: str) -> str | None:
        """Return the party ``user_id`` plays in this reservation, if any."""

        if user_id == self.renter_id:
            return PARTY_RENTER
        if user_id == self.owner_id:
            return PARTY_OWNER
        return None

    def party_user_id(self, party: str) -> str:
        """Return the user identifier behind ``party``."""

        if party == PARTY_RENTER:
            return self.renter_id
        if party == PARTY_OWNER:
            return self.owner_id
        msg = f"Unknown reservation party: {party}"
        raise ValueError(msg)


__all__ = [
    "PARTY_OWNER",
    "PARTY_RENTER",
    "RESERVATION_STATUSES",
    "RESERVATION_STATUS_CANCELLED",
    "RESERVATION_STATUS_COMPLETED",
    "RESERVATION_STATUS_CONFIRMED",
    "RESERVATION_STATUS_IN_PROGRESS",
    "RESERVATION_STATUS_PENDING",
    "Reservation",
    "ReservationWindow",
]
