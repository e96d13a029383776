"""Reservation status state machine."""

from __future__ import annotations

from collections.abc import Mapping

from app.domain.entities import (
    PARTY_OWNER,
    PARTY_RENTER,
    RESERVATION_STATUS_CANCELLED,
    RESERVATION_STATUS_COMPLETED,
    RESERVATION_STATUS_CONFIRMED,
    RESERVATION_STATUS_IN_PROGRESS,
    RESERVATION_STATUS_PENDING,
    RESERVATION_STATUSES,
)
from app.domain.errors import InvalidTransitionError

INITIAL_STATUS = RESERVATION_STATUS_PENDING

_LEGAL_EDGES: Mapping[str, frozenset[str]] = {
    RESERVATION_STATUS_PENDING: frozenset(
        {RESERVATION_STATUS_CONFIRMED, RESERVATION_STATUS_CANCELLED}
    ),
    RESERVATION_STATUS_CONFIRMED: frozenset(
        {RESERVATION_STATUS_IN_PROGRESS, RESERVATION_STATUS_CANCELLED}
    ),
    RESERVATION_STATUS_IN_PROGRESS: frozenset(
        {RESERVATION_STATUS_COMPLETED, RESERVATION_STATUS_CANCELLED}
    ),
    RESERVATION_STATUS_COMPLETED: frozenset(),
    RESERVATION_STATUS_CANCELLED: frozenset(),
}

# Edges each party may drive. The owner side resolves pending requests and
# starts the rental; either side may cancel or close an ongoing one.
_PARTY_EDGES: Mapping[str, frozenset[tuple[str, str]]] = {
    PARTY_OWNER: frozenset(
        {
            (RESERVATION_STATUS_PENDING, RESERVATION_STATUS_CONFIRMED),
            (RESERVATION_STATUS_PENDING, RESERVATION_STATUS_CANCELLED),
            (RESERVATION_STATUS_CONFIRMED, RESERVATION_STATUS_IN_PROGRESS),
            (RESERVATION_STATUS_CONFIRMED, RESERVATION_STATUS_CANCELLED),
            (RESERVATION_STATUS_IN_PROGRESS, RESERVATION_STATUS_COMPLETED),
            (RESERVATION_STATUS_IN_PROGRESS, RESERVATION_STATUS_CANCELLED),
        }
    ),
    PARTY_RENTER: frozenset(
        {
            (RESERVATION_STATUS_PENDING, RESERVATION_STATUS_CANCELLED),
            (RESERVATION_STATUS_CONFIRMED, RESERVATION_STATUS_CANCELLED),
            (RESERVATION_STATUS_IN_PROGRESS, RESERVATION_STATUS_COMPLETED),
            (RESERVATION_STATUS_IN_PROGRESS, RESERVATION_STATUS_CANCELLED),
        }
    ),
}


def is_known_status(status: str) -> bool:
    return status in RESERVATION_STATUSES


def is_terminal(status: str) -> bool:
    """Return ``True`` when ``status`` has no outgoing edge."""

    return not _LEGAL_EDGES.get(status)


def is_legal_edge(current: str, target: str) -> bool:
    """Return ``True`` when ``current -> target`` is part of the state machine."""

    return target in _LEGAL_EDGES.get(current, frozenset())


def validate_transition(current: str, target: str) -> None:
    """Raise :class:`InvalidTransitionError` unless ``current -> target`` is legal."""

    if not is_legal_edge(current, target):
        raise InvalidTransitionError(current=current, target=target)


def party_may_transition(party: str, current: str, target: str) -> bool:
    """Return ``True`` when ``party`` may drive the ``current -> target`` edge."""

    return (current, target) in _PARTY_EDGES.get(party, frozenset())


def allowed_targets(current: str, party: str | None = None) -> frozenset[str]:
    """Return the statuses reachable from ``current``, optionally for ``party``."""

    targets = _LEGAL_EDGES.get(current, frozenset())
    if party is None:
        return targets
    return frozenset(
        target for target in targets if party_may_transition(party, current, target)
    )


def legal_edges() -> frozenset[tuple[str, str]]:
    """Return every legal ``(current, target)`` pair."""

    return frozenset(
        (current, target)
        for current, targets in _LEGAL_EDGES.items()
        for target in targets
    )


__all__ = [
    "INITIAL_STATUS",
    "allowed_targets",
    "is_known_status",
    "is_legal_edge",
    "is_terminal",
    "legal_edges",
    "party_may_transition",
    "validate_transition",
]
