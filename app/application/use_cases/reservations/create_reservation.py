"""Use case for booking a listing."""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import Protocol

from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    NotificationsCommitted,
    emit_notification_plan,
    run_post_commit,
)
from app.domain.entities import (
    PARTY_RENTER,
    Listing,
    Reservation,
)
from app.domain.errors import ListingNotFound, ListingUnavailableError, ValidationError
from app.domain.policies import (
    DEFAULT_NOTIFICATION_CATALOG,
    INITIAL_STATUS,
    NotificationCatalog,
)
from app.infrastructure.repositories import ListingRepository, ReservationRepository
from app.infrastructure.transaction import transaction
from app.utils import now_in_app_timezone

from .validators import ensure_identifier, ensure_valid_price, ensure_valid_window

logger = logging.getLogger(__name__)


class ListingLookup(Protocol):
    def get(self, listing_id: str) -> Listing | None: ...


def create_reservation(
    session: Session,
    *,
    renter_id: str,
    listing_id: str,
    start: datetime | None,
    end: datetime | None,
    total_price: Decimal | float | int | str | None,
    listings: ListingLookup | None = None,
    catalog: NotificationCatalog | None = None,
    on_committed: NotificationsCommitted | None = None,
) -> Reservation:
    """Create a ``pending`` reservation and notify both parties.

    The owner is copied from the listing at booking time. Availability is
    read, not locked: two concurrent requests for the same listing may both
    succeed.
    """

    renter_id = ensure_identifier(renter_id, field="renter_id")
    listing_id = ensure_identifier(listing_id, field="listing_id")
    window = ensure_valid_window(start, end)
    price = ensure_valid_price(total_price)

    lookup = listings or ListingRepository(session)
    catalog = catalog or DEFAULT_NOTIFICATION_CATALOG
    repository = ReservationRepository(session)

    with transaction(session):
        listing = lookup.get(listing_id)
        if listing is None:
            raise ListingNotFound(listing_id)
        if not listing.is_available:
            raise ListingUnavailableError(listing_id)
        if listing.owner_id == renter_id:
            raise ValidationError("You cannot book your own listing")

        reservation = repository.create(
            Reservation(
                id=None,
                listing_id=listing.id,
                renter_id=renter_id,
                owner_id=listing.owner_id,
                window=window,
                total_price=price,
                status=INITIAL_STATUS,
                created_at=now_in_app_timezone(),
            )
        )
        plan = catalog.plan(
            reservation,
            from_status=None,
            to_status=INITIAL_STATUS,
            actor=PARTY_RENTER,
        )
        notifications = emit_notification_plan(session, plan)

    logger.info(
        "Reservation %s created by %s on listing %s",
        reservation.id,
        renter_id,
        listing_id,
    )
    run_post_commit(notifications, on_committed)
    return reservation


__all__ = ["ListingLookup", "create_reservation"]
