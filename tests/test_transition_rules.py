"""Table tests for the reservation state machine and its notification plans."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from itertools import product

import pytest

from app.domain.entities import (
    PARTY_OWNER,
    PARTY_RENTER,
    RESERVATION_STATUSES,
    Reservation,
    ReservationWindow,
)
from app.domain.errors import InvalidTransitionError
from app.domain.policies import (
    DEFAULT_NOTIFICATION_CATALOG,
    NotificationCatalog,
    NotificationTemplate,
    allowed_targets,
    is_legal_edge,
    is_terminal,
    legal_edges,
    party_may_transition,
    validate_transition,
)

LEGAL = {
    ("pending", "confirmed"),
    ("pending", "cancelled"),
    ("confirmed", "in_progress"),
    ("confirmed", "cancelled"),
    ("in_progress", "completed"),
    ("in_progress", "cancelled"),
}


def _reservation(status: str = "pending") -> Reservation:
    return Reservation(
        id="res-1",
        listing_id="listing-1",
        renter_id="renter-1",
        owner_id="owner-1",
        window=ReservationWindow(
            start=datetime(2024, 6, 1, tzinfo=timezone.utc),
            end=datetime(2024, 6, 3, tzinfo=timezone.utc),
        ),
        total_price=Decimal("300"),
        status=status,
    )


@pytest.mark.parametrize(("current", "target"), list(product(RESERVATION_STATUSES, repeat=2)))
def test_only_listed_edges_are_legal(current, target):
    expected = (current, target) in LEGAL

    assert is_legal_edge(current, target) is expected
    if expected:
        validate_transition(current, target)
    else:
        with pytest.raises(InvalidTransitionError) as excinfo:
            validate_transition(current, target)
        assert excinfo.value.current == current
        assert excinfo.value.target == target


def test_legal_edges_match_the_state_machine():
    assert legal_edges() == LEGAL


@pytest.mark.parametrize("status", ["completed", "cancelled"])
def test_terminal_statuses_have_no_exit(status):
    assert is_terminal(status)
    assert allowed_targets(status) == frozenset()
    for party in (PARTY_RENTER, PARTY_OWNER):
        assert allowed_targets(status, party) == frozenset()


@pytest.mark.parametrize("status", ["pending", "confirmed", "in_progress"])
def test_every_party_can_cancel_a_live_reservation(status):
    assert not is_terminal(status)
    assert party_may_transition(PARTY_RENTER, status, "cancelled")
    assert party_may_transition(PARTY_OWNER, status, "cancelled")


@pytest.mark.parametrize(
    ("party", "current", "target", "expected"),
    [
        (PARTY_OWNER, "pending", "confirmed", True),
        (PARTY_RENTER, "pending", "confirmed", False),
        (PARTY_OWNER, "confirmed", "in_progress", True),
        (PARTY_RENTER, "confirmed", "in_progress", False),
        (PARTY_OWNER, "in_progress", "completed", True),
        (PARTY_RENTER, "in_progress", "completed", True),
        (PARTY_OWNER, "pending", "completed", False),
        ("stranger", "pending", "cancelled", False),
    ],
)
def test_party_specific_edges(party, current, target, expected):
    assert party_may_transition(party, current, target) is expected


def test_allowed_targets_for_renter_on_pending():
    assert allowed_targets("pending", PARTY_RENTER) == frozenset({"cancelled"})
    assert allowed_targets("pending", PARTY_OWNER) == frozenset({"confirmed", "cancelled"})


@pytest.mark.parametrize(
    ("from_status", "to_status", "actor", "expected"),
    [
        (None, "pending", PARTY_RENTER, [(PARTY_RENTER, "Reservation sent"), (PARTY_OWNER, "New reservation")]),
        ("pending", "confirmed", PARTY_OWNER, [(PARTY_RENTER, "Reservation confirmed")]),
        ("pending", "cancelled", PARTY_OWNER, [(PARTY_RENTER, "Reservation declined")]),
        ("pending", "cancelled", PARTY_RENTER, [(PARTY_OWNER, "Reservation cancelled")]),
        ("confirmed", "in_progress", PARTY_OWNER, [(PARTY_RENTER, "Rental in progress")]),
        ("confirmed", "cancelled", PARTY_RENTER, [(PARTY_OWNER, "Reservation cancelled")]),
        ("confirmed", "cancelled", PARTY_OWNER, [(PARTY_RENTER, "Reservation cancelled")]),
        ("in_progress", "cancelled", PARTY_RENTER, [(PARTY_OWNER, "Reservation cancelled")]),
        ("in_progress", "cancelled", PARTY_OWNER, [(PARTY_RENTER, "Reservation cancelled")]),
        ("in_progress", "completed", PARTY_RENTER, [(PARTY_RENTER, "Rental completed"), (PARTY_OWNER, "Rental completed")]),
        ("in_progress", "completed", PARTY_OWNER, [(PARTY_RENTER, "Rental completed"), (PARTY_OWNER, "Rental completed")]),
    ],
)
def test_default_catalog_plans(from_status, to_status, actor, expected):
    reservation = _reservation(to_status)

    plan = DEFAULT_NOTIFICATION_CATALOG.plan(
        reservation, from_status=from_status, to_status=to_status, actor=actor
    )

    assert [(item.recipient, item.title) for item in plan] == expected
    ids = {PARTY_RENTER: "renter-1", PARTY_OWNER: "owner-1"}
    assert [item.user_id for item in plan] == [ids[recipient] for recipient, _ in expected]
    assert all(item.related_reservation_id == "res-1" for item in plan)
    assert all(item.type == "order_update" for item in plan)


def test_refusal_and_withdrawal_use_distinct_copy():
    reservation = _reservation("cancelled")

    refusal = DEFAULT_NOTIFICATION_CATALOG.plan(
        reservation, from_status="pending", to_status="cancelled", actor=PARTY_OWNER
    )
    withdrawal = DEFAULT_NOTIFICATION_CATALOG.plan(
        reservation, from_status="pending", to_status="cancelled", actor=PARTY_RENTER
    )

    assert refusal[0].body != withdrawal[0].body
    assert refusal[0].title != withdrawal[0].title


def test_cancellations_never_notify_the_actor():
    for key in DEFAULT_NOTIFICATION_CATALOG.keys():
        from_status, to_status, actor = key
        if to_status != "cancelled":
            continue
        recipients = [
            template.recipient
            for template in DEFAULT_NOTIFICATION_CATALOG.templates_for(*key)
        ]
        assert actor not in recipients


def test_templates_are_rendered_against_the_reservation():
    plan = DEFAULT_NOTIFICATION_CATALOG.plan(
        _reservation(), from_status=None, to_status="pending", actor=PARTY_RENTER
    )

    assert "2024-06-01" in plan[0].body
    assert "2024-06-03" in plan[0].body
    assert "300.00" in plan[1].body


def test_unplanned_edge_yields_no_notifications():
    catalog = NotificationCatalog({})

    assert catalog.plan(
        _reservation(), from_status="pending", to_status="confirmed", actor=PARTY_OWNER
    ) == []


@pytest.mark.parametrize(
    "entries",
    [
        {("completed", "cancelled", PARTY_OWNER): []},
        {("pending", "confirmed", "admin"): []},
        {(None, "confirmed", PARTY_RENTER): []},
        {
            ("pending", "confirmed", PARTY_OWNER): [
                NotificationTemplate(PARTY_RENTER, "a", "b"),
                NotificationTemplate(PARTY_RENTER, "c", "d"),
            ]
        },
        {("pending", "confirmed", PARTY_OWNER): [NotificationTemplate("admin", "a", "b")]},
        {
            ("pending", "confirmed", PARTY_OWNER): [
                NotificationTemplate(PARTY_RENTER, "Hi {renter_name}", "b")
            ]
        },
        {
            ("pending", "confirmed", PARTY_OWNER): [
                NotificationTemplate(PARTY_RENTER, "a", "Total {}")
            ]
        },
        {
            ("pending", "confirmed", PARTY_OWNER): [
                NotificationTemplate(PARTY_RENTER, "a", "From {start")
            ]
        },
    ],
)
def test_catalog_rejects_inconsistent_entries(entries):
    with pytest.raises(ValueError):
        NotificationCatalog(entries)


def test_catalog_accepts_known_placeholders_with_format_specs():
    catalog = NotificationCatalog(
        {
            ("pending", "confirmed", PARTY_OWNER): [
                NotificationTemplate(PARTY_RENTER, "{status!s}", "Total {total_price:>10}")
            ]
        }
    )

    (planned,) = catalog.plan(
        _reservation(), from_status="pending", to_status="confirmed", actor=PARTY_OWNER
    )
    assert planned.body == "Total     300.00"
