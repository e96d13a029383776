"""Persistence helpers for reservation entities."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from sqlalchemy.orm import Session

from app.domain.entities import Reservation, ReservationWindow
from app.infrastructure.models import ReservationModel
from app.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


class ReservationRepository:
    """Provide create/read/status-update operations for :class:`Reservation`.

    The repository never commits; callers wrap writes in
    :func:`app.infrastructure.transaction.transaction`.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, reservation_id: str, *, for_update: bool = False) -> Reservation | None:
        model = self._get_model(reservation_id, for_update=for_update)
        return self._to_entity(model) if model else None

    def list_for_owner(self, owner_id: str) -> Sequence[Reservation]:
        query = (
            self.session.query(ReservationModel)
            .filter(ReservationModel.owner_id == owner_id)
            .order_by(ReservationModel.created_at.desc(), ReservationModel.id.desc())
        )
        return [self._to_entity(model) for model in query.all()]

    def list_for_renter(self, renter_id: str) -> Sequence[Reservation]:
        query = (
            self.session.query(ReservationModel)
            .filter(ReservationModel.renter_id == renter_id)
            .order_by(ReservationModel.created_at.desc(), ReservationModel.id.desc())
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, reservation: Reservation) -> Reservation:
        model = ReservationModel(
            listing_id=reservation.listing_id,
            renter_id=reservation.renter_id,
            owner_id=reservation.owner_id,
            start_at=ensure_app_naive_datetime(reservation.window.start),
            end_at=ensure_app_naive_datetime(reservation.window.end),
            total_price=reservation.total_price,
            status=reservation.status,
            created_at=ensure_app_naive_datetime(
                reservation.created_at or now_in_app_timezone()
            ),
        )
        if reservation.id is not None:
            model.id = reservation.id
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def update_status(self, reservation_id: str, status: str) -> Reservation:
        model = self._get_model(reservation_id)
        if model is None:
            msg = f"Reservation with id {reservation_id} not found"
            raise ValueError(msg)
        model.status = status
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def _get_model(
        self, reservation_id: str, *, for_update: bool = False
    ) -> ReservationModel | None:
        query = self.session.query(ReservationModel).filter(
            ReservationModel.id == reservation_id
        )
        if for_update:
            query = query.with_for_update().populate_existing()
        return query.first()

    @staticmethod
    def _to_entity(model: ReservationModel) -> Reservation:
        return Reservation(
            id=model.id,
            listing_id=model.listing_id,
            renter_id=model.renter_id,
            owner_id=model.owner_id,
            window=ReservationWindow(
                start=ensure_app_timezone(model.start_at),
                end=ensure_app_timezone(model.end_at),
            ),
            total_price=Decimal(str(model.total_price)),
            status=model.status,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["ReservationRepository"]
