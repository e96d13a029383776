"""Use case for listing the reservations visible to a caller."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Identity, Reservation
from app.infrastructure.repositories import ReservationRepository
from app.infrastructure.transaction import read_scope


def list_reservations(session: Session, *, caller: Identity) -> Sequence[Reservation]:
    """Providers see bookings on their listings, clients the ones they made."""

    repository = ReservationRepository(session)
    with read_scope(session):
        if caller.is_provider():
            return repository.list_for_owner(caller.user_id)
        return repository.list_for_renter(caller.user_id)


__all__ = ["list_reservations"]
