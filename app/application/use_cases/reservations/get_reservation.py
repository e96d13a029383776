"""Use case for retrieving a single reservation."""

from sqlalchemy.orm import Session

from app.domain.entities import Identity, Reservation
from app.domain.errors import ForbiddenError, ReservationNotFound
from app.domain.policies import can_view
from app.infrastructure.repositories import ReservationRepository
from app.infrastructure.transaction import read_scope

from .validators import ensure_identifier


def get_reservation(session: Session, *, caller: Identity, reservation_id: str) -> Reservation:
    """Return the reservation if ``caller`` is one of its parties."""

    reservation_id = ensure_identifier(reservation_id, field="reservation_id")
    with read_scope(session):
        reservation = ReservationRepository(session).get(reservation_id)
    if reservation is None:
        raise ReservationNotFound(reservation_id)
    if not can_view(caller, reservation):
        raise ForbiddenError("You do not have access to this reservation")
    return reservation


__all__ = ["get_reservation"]
