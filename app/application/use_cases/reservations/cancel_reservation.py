"""Use case for a renter cancelling their own reservation."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    NotificationsCommitted,
    run_post_commit,
)
from app.domain.entities import (
    RESERVATION_STATUS_CANCELLED,
    RESERVATION_STATUS_COMPLETED,
    Identity,
    Reservation,
)
from app.domain.errors import ForbiddenError, InvalidTransitionError
from app.domain.policies import DEFAULT_NOTIFICATION_CATALOG, NotificationCatalog
from app.infrastructure.transaction import transaction

from .transition_reservation_status import apply_transition, load_reservation_for_update
from .validators import ensure_identifier


def cancel_reservation(
    session: Session,
    *,
    caller: Identity,
    reservation_id: str,
    catalog: NotificationCatalog | None = None,
    on_committed: NotificationsCommitted | None = None,
) -> Reservation:
    """Cancel ``reservation_id``; only its renter may use this shortcut."""

    reservation_id = ensure_identifier(reservation_id, field="reservation_id")
    catalog = catalog or DEFAULT_NOTIFICATION_CATALOG

    with transaction(session):
        reservation = load_reservation_for_update(session, reservation_id)
        if reservation.renter_id != caller.user_id:
            raise ForbiddenError("Only the renter can cancel this reservation")
        if reservation.status == RESERVATION_STATUS_COMPLETED:
            raise InvalidTransitionError(
                current=RESERVATION_STATUS_COMPLETED, target=RESERVATION_STATUS_CANCELLED
            )
        updated, notifications = apply_transition(
            session,
            caller=caller,
            reservation=reservation,
            target_status=RESERVATION_STATUS_CANCELLED,
            catalog=catalog,
        )

    run_post_commit(notifications, on_committed)
    return updated


__all__ = ["cancel_reservation"]
