"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    type: str
    title: str
    body: str
    related_reservation_id: str | None = None
    is_read: bool
    created_at: datetime


class UnreadCountRead(BaseModel):
    count: int


class BulkActionResult(BaseModel):
    """Number of notifications affected by a bulk operation."""

    count: int


__all__ = ["BulkActionResult", "NotificationRead", "UnreadCountRead"]
