"""SQLAlchemy model for the listing catalog read by the booking flow."""

from uuid import uuid4

from sqlalchemy import Boolean, Column, String
from sqlalchemy.sql import expression

from app.infrastructure.database import Base


class ListingModel(Base):
    """Database representation of a rentable piece of equipment."""

    __tablename__ = "listing"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    owner_id = Column(String(36), nullable=False, index=True)
    name = Column(String(120), nullable=False, default="")
    is_available = Column(
        Boolean,
        nullable=False,
        default=True,
        server_default=expression.true(),
    )


__all__ = ["ListingModel"]
