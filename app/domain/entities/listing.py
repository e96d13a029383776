"""Domain entity describing a rentable listing as seen by the booking flow."""

from dataclasses import dataclass


@dataclass
class Listing:
    """Ownership and availability of a piece of equipment on offer."""

    id: str
    owner_id: str
    is_available: bool


__all__ = ["Listing"]
