"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

NOTIFICATION_TYPE_ORDER_UPDATE = "order_update"
NOTIFICATION_TYPE_MESSAGE = "message"


@dataclass
class Notification:
    """Information message addressed to exactly one user."""

    id: str | None
    user_id: str
    type: str
    title: str
    body: str
    related_reservation_id: str | None = None
    is_read: bool = False
    created_at: datetime | None = None


__all__ = [
    "NOTIFICATION_TYPE_MESSAGE",
    "NOTIFICATION_TYPE_ORDER_UPDATE",
    "Notification",
]
