"""Tests for the reservation authorization policy."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from app.domain.entities import Identity, Reservation, ReservationWindow
from app.domain.policies import can_transition, can_view

RENTER = Identity(user_id="renter-1", role="client")
OWNER = Identity(user_id="owner-1", role="provider")
STRANGER = Identity(user_id="someone-else", role="provider")


def _reservation(status: str) -> Reservation:
    return Reservation(
        id="res-1",
        listing_id="listing-1",
        renter_id=RENTER.user_id,
        owner_id=OWNER.user_id,
        window=ReservationWindow(
            start=datetime(2024, 6, 1, tzinfo=timezone.utc),
            end=datetime(2024, 6, 3, tzinfo=timezone.utc),
        ),
        total_price=Decimal("300"),
        status=status,
    )


def test_only_parties_can_view():
    reservation = _reservation("pending")

    assert can_view(RENTER, reservation)
    assert can_view(OWNER, reservation)
    assert not can_view(STRANGER, reservation)


@pytest.mark.parametrize("status", ["pending", "confirmed", "in_progress", "completed", "cancelled"])
@pytest.mark.parametrize("target", ["pending", "confirmed", "in_progress", "completed", "cancelled"])
def test_strangers_can_never_transition(status, target):
    assert not can_transition(STRANGER, _reservation(status), target)


@pytest.mark.parametrize(
    ("caller", "status", "target", "expected"),
    [
        (OWNER, "pending", "confirmed", True),
        (RENTER, "pending", "confirmed", False),
        (RENTER, "pending", "cancelled", True),
        (OWNER, "pending", "cancelled", True),
        (OWNER, "confirmed", "in_progress", True),
        (RENTER, "confirmed", "in_progress", False),
        (RENTER, "in_progress", "completed", True),
        (OWNER, "confirmed", "completed", False),
        (RENTER, "completed", "cancelled", False),
        (OWNER, "cancelled", "pending", False),
        (OWNER, "confirmed", "confirmed", False),
    ],
)
def test_parties_follow_their_edges(caller, status, target, expected):
    assert can_transition(caller, _reservation(status), target) is expected


def test_account_role_does_not_grant_party_rights():
    provider_renter = Identity(user_id=RENTER.user_id, role="provider")

    assert not can_transition(provider_renter, _reservation("pending"), "confirmed")
