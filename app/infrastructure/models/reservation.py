"""SQLAlchemy model for persisted reservations."""

from uuid import uuid4

from sqlalchemy import Column, DateTime, Numeric, String

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class ReservationModel(Base):
    """Database representation of a booking between a renter and an owner."""

    __tablename__ = "reservation"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    listing_id = Column(String(36), nullable=False, index=True)
    renter_id = Column(String(36), nullable=False, index=True)
    owner_id = Column(String(36), nullable=False, index=True)
    start_at = Column(DateTime(), nullable=False)
    end_at = Column(DateTime(), nullable=False)
    total_price = Column(Numeric(12, 2), nullable=False)
    status = Column(String(20), nullable=False, index=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["ReservationModel"]
