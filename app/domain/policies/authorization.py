"""Decide whether a caller may view or act on a reservation."""

from app.domain.entities import Identity, Reservation

from .transitions import is_legal_edge, party_may_transition


def can_view(caller: Identity, reservation: Reservation) -> bool:
    """Only the renter and the owner of ``reservation`` may see it."""

    return reservation.party_of(caller.user_id) is not None


def can_transition(caller: Identity, reservation: Reservation, target_status: str) -> bool:
    """Return ``True`` when ``caller`` may move ``reservation`` to ``target_status``."""

    party = reservation.party_of(caller.user_id)
    if party is None:
        return False
    current = reservation.status
    return is_legal_edge(current, target_status) and party_may_transition(
        party, current, target_status
    )


__all__ = ["can_transition", "can_view"]
