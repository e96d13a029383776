"""API routes for booking listings and driving reservation status."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.application.use_cases.reservations import (
    cancel_reservation as cancel_reservation_uc,
    create_reservation as create_reservation_uc,
    get_reservation as get_reservation_uc,
    list_reservations as list_reservations_uc,
    transition_reservation_status as transition_reservation_status_uc,
)
from app.domain.entities import Identity, Reservation
from app.domain.errors import ReservationServiceError
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_identity
from app.interfaces.api.routes_helpers import to_http_exception
from app.interfaces.api.schemas import (
    ReservationCreate,
    ReservationRead,
    ReservationStatusUpdate,
)

router = APIRouter(prefix="/reservations", tags=["reservations"])


def _reservation_to_schema(reservation: Reservation) -> ReservationRead:
    return ReservationRead(
        id=reservation.id or "",
        listing_id=reservation.listing_id,
        renter_id=reservation.renter_id,
        owner_id=reservation.owner_id,
        start=reservation.window.start,
        end=reservation.window.end,
        total_price=reservation.total_price,
        status=reservation.status,
        created_at=reservation.created_at,
    )


@router.post("/", response_model=ReservationRead, status_code=status.HTTP_201_CREATED)
def create_reservation(
    payload: ReservationCreate,
    db: Session = Depends(get_db),
    caller: Identity = Depends(get_current_identity),
) -> ReservationRead:
    """Book a listing on behalf of the authenticated renter."""

    try:
        reservation = create_reservation_uc(
            db,
            renter_id=caller.user_id,
            listing_id=payload.listing_id,
            start=payload.start,
            end=payload.end,
            total_price=payload.total_price,
        )
    except ReservationServiceError as exc:
        raise to_http_exception(exc) from exc
    return _reservation_to_schema(reservation)


@router.get("/", response_model=list[ReservationRead])
def list_reservations(
    db: Session = Depends(get_db),
    caller: Identity = Depends(get_current_identity),
) -> list[ReservationRead]:
    """Return the reservations the caller made or received."""

    try:
        reservations = list_reservations_uc(db, caller=caller)
    except ReservationServiceError as exc:
        raise to_http_exception(exc) from exc
    return [_reservation_to_schema(reservation) for reservation in reservations]


@router.get("/{reservation_id}", response_model=ReservationRead)
def read_reservation(
    reservation_id: str,
    db: Session = Depends(get_db),
    caller: Identity = Depends(get_current_identity),
) -> ReservationRead:
    try:
        reservation = get_reservation_uc(db, caller=caller, reservation_id=reservation_id)
    except ReservationServiceError as exc:
        raise to_http_exception(exc) from exc
    return _reservation_to_schema(reservation)


@router.put("/{reservation_id}/status", response_model=ReservationRead)
def update_reservation_status(
    reservation_id: str,
    payload: ReservationStatusUpdate,
    db: Session = Depends(get_db),
    caller: Identity = Depends(get_current_identity),
) -> ReservationRead:
    """Move the reservation to the requested status."""

    try:
        reservation = transition_reservation_status_uc(
            db,
            caller=caller,
            reservation_id=reservation_id,
            target_status=payload.status,
        )
    except ReservationServiceError as exc:
        raise to_http_exception(exc) from exc
    return _reservation_to_schema(reservation)


@router.delete("/{reservation_id}", response_model=ReservationRead)
def cancel_reservation(
    reservation_id: str,
    db: Session = Depends(get_db),
    caller: Identity = Depends(get_current_identity),
) -> ReservationRead:
    """Cancel a reservation as its renter."""

    try:
        reservation = cancel_reservation_uc(db, caller=caller, reservation_id=reservation_id)
    except ReservationServiceError as exc:
        raise to_http_exception(exc) from exc
    return _reservation_to_schema(reservation)
