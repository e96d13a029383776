"""Data-driven catalog describing which notifications each transition produces.

A plan is looked up by ``(from_status, to_status, actor)``. Reservation
creation has no previous status and is keyed with ``from_status=None``. Each
entry lists one :class:`NotificationTemplate` per recipient party; titles and
bodies are ``str.format`` templates rendered against the reservation.
"""

from __future__ import annotations

import re
import string
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from app.domain.entities import (
    NOTIFICATION_TYPE_ORDER_UPDATE,
    PARTY_OWNER,
    PARTY_RENTER,
    RESERVATION_STATUS_CANCELLED,
    RESERVATION_STATUS_COMPLETED,
    RESERVATION_STATUS_CONFIRMED,
    RESERVATION_STATUS_IN_PROGRESS,
    RESERVATION_STATUS_PENDING,
    Reservation,
)

from .transitions import INITIAL_STATUS, is_legal_edge

PlanKey = tuple[str | None, str, str]

_PARTIES = (PARTY_RENTER, PARTY_OWNER)

TEMPLATE_FIELDS = frozenset(
    {"reservation_id", "listing_id", "start", "end", "total_price", "status"}
)
_FIELD_NAME = re.compile(r"^[^.\[]*")


@dataclass(frozen=True)
class NotificationTemplate:
    """Message addressed to one party of a reservation."""

    recipient: str
    title: str
    body: str
    type: str = NOTIFICATION_TYPE_ORDER_UPDATE


@dataclass(frozen=True)
class PlannedNotification:
    """Rendered notification ready to be persisted for ``user_id``."""

    user_id: str
    recipient: str
    type: str
    title: str
    body: str
    related_reservation_id: str | None


class NotificationCatalog:
    """Immutable mapping from plan keys to notification templates."""

    def __init__(self, entries: Mapping[PlanKey, Sequence[NotificationTemplate]]) -> None:
        validated: dict[PlanKey, tuple[NotificationTemplate, ...]] = {}
        for key, templates in entries.items():
            self._validate_entry(key, templates)
            validated[key] = tuple(templates)
        self._entries = validated

    def keys(self) -> Iterable[PlanKey]:
        return self._entries.keys()

    def templates_for(
        self, from_status: str | None, to_status: str, actor: str
    ) -> tuple[NotificationTemplate, ...]:
        return self._entries.get((from_status, to_status, actor), ())

    def plan(
        self,
        reservation: Reservation,
        *,
        from_status: str | None,
        to_status: str,
        actor: str,
    ) -> list[PlannedNotification]:
        """Render the notifications ``actor`` triggers for the given edge."""

        context = _render_context(reservation)
        return [
            PlannedNotification(
                user_id=reservation.party_user_id(template.recipient),
                recipient=template.recipient,
                type=template.type,
                title=template.title.format(**context),
                body=template.body.format(**context),
                related_reservation_id=reservation.id,
            )
            for template in self.templates_for(from_status, to_status, actor)
        ]

    @staticmethod
    def _validate_entry(key: PlanKey, templates: Sequence[NotificationTemplate]) -> None:
        from_status, to_status, actor = key
        if actor not in _PARTIES:
            raise ValueError(f"Unknown actor party in catalog key {key!r}")
        if from_status is None:
            if to_status != INITIAL_STATUS:
                raise ValueError(f"Creation plans must target {INITIAL_STATUS!r}: {key!r}")
        elif not is_legal_edge(from_status, to_status):
            raise ValueError(f"Catalog key {key!r} is not a legal transition")

        recipients = [template.recipient for template in templates]
        unknown = [recipient for recipient in recipients if recipient not in _PARTIES]
        if unknown:
            raise ValueError(f"Unknown recipient party {unknown[0]!r} in {key!r}")
        if len(set(recipients)) != len(recipients):
            raise ValueError(f"Duplicate recipient in catalog entry {key!r}")
        for template in templates:
            for text in (template.title, template.body):
                _validate_placeholders(text, key)


def _validate_placeholders(text: str, key: PlanKey) -> None:
    """Reject templates referencing fields the renderer does not provide."""

    try:
        parsed = list(string.Formatter().parse(text))
    except ValueError as exc:
        raise ValueError(f"Malformed template {text!r} in {key!r}: {exc}") from exc
    for _, field_name, _, _ in parsed:
        if field_name is None:
            continue
        name = _FIELD_NAME.match(field_name).group(0)
        if name not in TEMPLATE_FIELDS:
            raise ValueError(
                f"Unknown placeholder {{{field_name}}} in {key!r}; "
                f"expected one of {sorted(TEMPLATE_FIELDS)}"
            )


def _render_context(reservation: Reservation) -> dict[str, Any]:
    price = reservation.total_price
    if isinstance(price, Decimal):
        price = price.quantize(Decimal("0.01"))
    return {
        "reservation_id": reservation.id or "",
        "listing_id": reservation.listing_id,
        "start": reservation.window.start.date().isoformat(),
        "end": reservation.window.end.date().isoformat(),
        "total_price": price,
        "status": reservation.status,
    }


def _cancellation_entries(from_status: str) -> dict[PlanKey, list[NotificationTemplate]]:
    """Cancelling a started booking informs whichever party did not act."""

    return {
        (from_status, RESERVATION_STATUS_CANCELLED, PARTY_RENTER): [
            NotificationTemplate(
                PARTY_OWNER,
                "Reservation cancelled",
                "The client cancelled the reservation for {start} to {end}.",
            )
        ],
        (from_status, RESERVATION_STATUS_CANCELLED, PARTY_OWNER): [
            NotificationTemplate(
                PARTY_RENTER,
                "Reservation cancelled",
                "The provider cancelled your reservation for {start} to {end}.",
            )
        ],
    }


_COMPLETED_TEMPLATES = [
    NotificationTemplate(
        PARTY_RENTER,
        "Rental completed",
        "Your reservation is complete. Don't forget to review the provider!",
    ),
    NotificationTemplate(
        PARTY_OWNER,
        "Rental completed",
        "The rental was marked as completed. Thank you for your service!",
    ),
]

DEFAULT_CATALOG_ENTRIES: dict[PlanKey, list[NotificationTemplate]] = {
    (None, RESERVATION_STATUS_PENDING, PARTY_RENTER): [
        NotificationTemplate(
            PARTY_RENTER,
            "Reservation sent",
            "Your reservation for {start} to {end} was sent to the provider. "
            "Awaiting confirmation.",
        ),
        NotificationTemplate(
            PARTY_OWNER,
            "New reservation",
            "You received a new reservation request for {start} to {end} "
            "({total_price}). Review it now!",
        ),
    ],
    (RESERVATION_STATUS_PENDING, RESERVATION_STATUS_CONFIRMED, PARTY_OWNER): [
        NotificationTemplate(
            PARTY_RENTER,
            "Reservation confirmed",
            "Your reservation was confirmed by the provider. "
            "You can contact them for more details.",
        )
    ],
    # Owner-side cancellation of a pending request is a refusal.
    (RESERVATION_STATUS_PENDING, RESERVATION_STATUS_CANCELLED, PARTY_OWNER): [
        NotificationTemplate(
            PARTY_RENTER,
            "Reservation declined",
            "The provider declined your reservation request. Try another provider.",
        )
    ],
    (RESERVATION_STATUS_PENDING, RESERVATION_STATUS_CANCELLED, PARTY_RENTER): [
        NotificationTemplate(
            PARTY_OWNER,
            "Reservation cancelled",
            "The client withdrew the reservation request for {start} to {end}.",
        )
    ],
    (RESERVATION_STATUS_CONFIRMED, RESERVATION_STATUS_IN_PROGRESS, PARTY_OWNER): [
        NotificationTemplate(
            PARTY_RENTER,
            "Rental in progress",
            "Your reservation is now in progress. Enjoy!",
        )
    ],
    **_cancellation_entries(RESERVATION_STATUS_CONFIRMED),
    **_cancellation_entries(RESERVATION_STATUS_IN_PROGRESS),
    (RESERVATION_STATUS_IN_PROGRESS, RESERVATION_STATUS_COMPLETED, PARTY_RENTER): list(
        _COMPLETED_TEMPLATES
    ),
    (RESERVATION_STATUS_IN_PROGRESS, RESERVATION_STATUS_COMPLETED, PARTY_OWNER): list(
        _COMPLETED_TEMPLATES
    ),
}

DEFAULT_NOTIFICATION_CATALOG = NotificationCatalog(DEFAULT_CATALOG_ENTRIES)


__all__ = [
    "DEFAULT_CATALOG_ENTRIES",
    "DEFAULT_NOTIFICATION_CATALOG",
    "NotificationCatalog",
    "NotificationTemplate",
    "PlanKey",
    "PlannedNotification",
    "TEMPLATE_FIELDS",
]
