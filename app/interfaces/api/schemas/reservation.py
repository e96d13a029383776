"""Pydantic models describing reservation payloads."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field

ReservationStatusLiteral = Literal[
    "pending", "confirmed", "in_progress", "completed", "cancelled"
]


class ReservationCreate(BaseModel):
    """Payload used by a renter to book a listing."""

    listing_id: str = Field(..., min_length=1, description="Listing to book")
    start: datetime = Field(..., description="Start of the rental window")
    end: datetime = Field(..., description="End of the rental window")
    total_price: Decimal = Field(..., ge=0, description="Agreed total price")


class ReservationStatusUpdate(BaseModel):
    """Payload requesting a status change."""

    status: ReservationStatusLiteral


class ReservationRead(BaseModel):
    """Representation of a reservation returned to either party."""

    id: str
    listing_id: str
    renter_id: str
    owner_id: str
    start: datetime
    end: datetime
    total_price: Decimal
    status: ReservationStatusLiteral
    created_at: datetime


__all__ = [
    "ReservationCreate",
    "ReservationRead",
    "ReservationStatusLiteral",
    "ReservationStatusUpdate",
]
