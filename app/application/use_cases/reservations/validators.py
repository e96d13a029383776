"""Common validation helpers for reservation use cases."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal, InvalidOperation

from app.domain.entities import ReservationWindow
from app.domain.errors import ValidationError
from app.domain.policies import is_known_status
from app.utils import ensure_app_timezone

# Matches the Numeric(12, 2) price column.
MAX_PRICE = Decimal("9999999999.99")


def ensure_identifier(value: str | None, *, field: str) -> str:
    """Return ``value`` stripped, or raise when it is missing."""

    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} is required")
    return value.strip()


def ensure_valid_window(start: datetime | None, end: datetime | None) -> ReservationWindow:
    """Return a normalized window, requiring ``start < end``."""

    if start is None or end is None:
        raise ValidationError("The reservation window requires a start and an end")

    normalized_start = ensure_app_timezone(start)
    normalized_end = ensure_app_timezone(end)
    if normalized_start >= normalized_end:
        raise ValidationError("The reservation window must end after it starts")
    return ReservationWindow(start=normalized_start, end=normalized_end)


def ensure_valid_price(value: Decimal | float | int | str | None) -> Decimal:
    """Return ``value`` as a non-negative two-decimal amount."""

    if value is None or isinstance(value, bool):
        raise ValidationError("total_price is required")
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError("total_price must be a number") from exc
    if not amount.is_finite():
        raise ValidationError("total_price must be a finite number")
    if amount < 0:
        raise ValidationError("total_price cannot be negative")
    if amount > MAX_PRICE:
        raise ValidationError(f"total_price cannot exceed {MAX_PRICE}")
    return amount.quantize(Decimal("0.01"))


def ensure_known_status(status: str | None) -> str:
    if not isinstance(status, str) or not is_known_status(status):
        raise ValidationError(f"Unknown reservation status: {status!r}")
    return status


__all__ = [
    "ensure_identifier",
    "ensure_known_status",
    "ensure_valid_price",
    "ensure_valid_window",
]
