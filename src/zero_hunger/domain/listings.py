"""Domain models for food listings."""

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum


@dataclass(frozen=True)
class Coordinate:
    """A latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class FoodListing:
    """Represents one surplus food donation offer."""

    id: str
    title: str
    description: str
    image_url: str
    expires_at: datetime
    location: Coordinate
    donor_name: str
    is_available: bool = True

    def claimed(self) -> "FoodListing":
        """Return a copy of this listing marked unavailable."""
        return replace(self, is_available=False)


class ClaimOutcome(str, Enum):
    """Result of a pickup request against a listing."""

    CLAIMED = "claimed"
    ALREADY_CLAIMED = "already_claimed"
    NOT_FOUND = "not_found"


class DonationValidationError(ValueError):
    """Raised when a donation is missing a required field."""

    def __init__(self, field_name: str) -> None:
        super().__init__(f"{field_name} is required")
        self.field_name = field_name
