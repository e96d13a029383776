"""Use case for moving a reservation along the status state machine."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    NotificationsCommitted,
    emit_notification_plan,
    run_post_commit,
)
from app.domain.entities import Identity, Notification, Reservation
from app.domain.errors import (
    ForbiddenError,
    InvalidTransitionError,
    ReservationNotFound,
)
from app.domain.policies import (
    DEFAULT_NOTIFICATION_CATALOG,
    NotificationCatalog,
    can_transition,
    validate_transition,
)
from app.infrastructure.repositories import ReservationRepository
from app.infrastructure.transaction import transaction

from .validators import ensure_identifier, ensure_known_status

logger = logging.getLogger(__name__)


def load_reservation_for_update(session: Session, reservation_id: str) -> Reservation:
    """Re-read the reservation row, locking it for the current transaction."""

    reservation = ReservationRepository(session).get(reservation_id, for_update=True)
    if reservation is None:
        raise ReservationNotFound(reservation_id)
    return reservation


def apply_transition(
    session: Session,
    *,
    caller: Identity,
    reservation: Reservation,
    target_status: str,
    catalog: NotificationCatalog,
) -> tuple[Reservation, list[Notification]]:
    """Check, persist and fan out one status change without committing.

    Checks run in a fixed order: the caller must be a party (``Forbidden``),
    the edge must exist (``InvalidTransition``), then the caller's side must be
    allowed to drive it (``Forbidden``).
    """

    actor = reservation.party_of(caller.user_id)
    if actor is None:
        raise ForbiddenError("You are not allowed to modify this reservation")

    current = reservation.status
    try:
        validate_transition(current, target_status)
    except InvalidTransitionError:
        logger.warning(
            "Rejected transition %s -> %s on reservation %s by %s",
            current,
            target_status,
            reservation.id,
            caller.user_id,
        )
        raise

    if not can_transition(caller, reservation, target_status):
        raise ForbiddenError(
            f"The {actor} of a reservation cannot move it from {current} to {target_status}"
        )

    updated = ReservationRepository(session).update_status(reservation.id, target_status)
    plan = catalog.plan(
        updated,
        from_status=current,
        to_status=target_status,
        actor=actor,
    )
    notifications = emit_notification_plan(session, plan)
    logger.info(
        "Reservation %s moved %s -> %s by %s (%d notification(s))",
        updated.id,
        current,
        target_status,
        actor,
        len(notifications),
    )
    return updated, notifications


def transition_reservation_status(
    session: Session,
    *,
    caller: Identity,
    reservation_id: str,
    target_status: str,
    catalog: NotificationCatalog | None = None,
    on_committed: NotificationsCommitted | None = None,
) -> Reservation:
    """Move ``reservation_id`` to ``target_status`` on behalf of ``caller``.

    Transitions are one-shot: repeating a request that already succeeded
    evaluates the self-loop ``target -> target`` and fails.
    """

    reservation_id = ensure_identifier(reservation_id, field="reservation_id")
    target_status = ensure_known_status(target_status)
    catalog = catalog or DEFAULT_NOTIFICATION_CATALOG

    with transaction(session):
        reservation = load_reservation_for_update(session, reservation_id)
        updated, notifications = apply_transition(
            session,
            caller=caller,
            reservation=reservation,
            target_status=target_status,
            catalog=catalog,
        )

    run_post_commit(notifications, on_committed)
    return updated


__all__ = [
    "apply_transition",
    "load_reservation_for_update",
    "transition_reservation_status",
]
