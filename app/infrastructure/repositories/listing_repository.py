"""Read access to the listing catalog."""

from sqlalchemy.orm import Session

from app.domain.entities import Listing
from app.infrastructure.models import ListingModel


class ListingRepository:
    """Resolve listing ownership and availability."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, listing_id: str) -> Listing | None:
        model = self.session.get(ListingModel, listing_id)
        if model is None:
            return None
        return Listing(
            id=model.id,
            owner_id=model.owner_id,
            is_available=bool(model.is_available),
        )


__all__ = ["ListingRepository"]
