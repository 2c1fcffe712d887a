"""Services for browsing, donating and claiming food listings."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol
from uuid import uuid4

from zero_hunger.domain.listings import (
    ClaimOutcome,
    Coordinate,
    DonationValidationError,
    FoodListing,
)
from zero_hunger.services.feed import ListingFeed
from zero_hunger.services.notifications import Notifier, Severity
from zero_hunger.services.sessions import SessionState

logger = logging.getLogger(__name__)

DONATION_POSTED_MESSAGE = "Donation Posted Successfully!"
PICKUP_REQUESTED_MESSAGE = "Success! Pickup details sent to your inbox."
CLAIM_FAILURE_MESSAGES = {
    ClaimOutcome.ALREADY_CLAIMED: "Sorry, this food has already been claimed.",
    ClaimOutcome.NOT_FOUND: "This listing is no longer available.",
}


class FoodRepository(Protocol):
    """Data access interface for food listings."""

    async def list_nearby(
        self, origin: Coordinate, radius_km: float
    ) -> list[FoodListing]:
        """Return available listings around an origin."""

    async def donate(self, listing: FoodListing) -> None:
        """Store a new listing ahead of all existing ones."""

    async def claim(self, listing_id: str) -> ClaimOutcome:
        """Mark a listing unavailable if it exists and is still available."""

    def all_listings(self) -> list[FoodListing]:
        """Return every stored listing, including claimed ones."""


def _now() -> datetime:
    return datetime.now(tz=UTC)


def _new_listing_id() -> str:
    return str(uuid4())


@dataclass
class ListingService:
    """Application service for the donate and request-pickup flows."""

    repository: FoodRepository
    feed: ListingFeed
    session: SessionState
    notifier: Notifier
    default_origin: Coordinate
    default_radius_km: float
    default_donor_name: str = "My Restaurant"
    shelf_life: timedelta = timedelta(hours=24)
    id_factory: Callable[[], str] = _new_listing_id
    clock: Callable[[], datetime] = _now

    async def list_nearby(
        self, origin: Coordinate | None = None, radius_km: float | None = None
    ) -> list[FoodListing]:
        """Return available listings, defaulting to the configured area."""
        return await self.repository.list_nearby(
            self.default_origin if origin is None else origin,
            self.default_radius_km if radius_km is None else radius_km,
        )

    def build_donation(  # noqa: PLR0913
        self,
        title: str,
        description: str,
        *,
        image_url: str = "",
        donor_name: str | None = None,
        location: Coordinate | None = None,
        expires_at: datetime | None = None,
    ) -> FoodListing:
        """Validate form input and create a new, available listing."""
        if not title.strip():
            raise DonationValidationError("title")
        if not description.strip():
            raise DonationValidationError("description")
        return FoodListing(
            id=self.id_factory(),
            title=title,
            description=description,
            image_url=image_url,
            expires_at=expires_at or self.clock() + self.shelf_life,
            location=location or self.default_origin,
            donor_name=donor_name or self.default_donor_name,
        )

    async def donate(  # noqa: PLR0913
        self,
        title: str,
        description: str,
        *,
        image_url: str = "",
        donor_name: str | None = None,
        location: Coordinate | None = None,
        expires_at: datetime | None = None,
    ) -> FoodListing:
        """Post a donation and refresh the feed so it surfaces first."""
        listing = self.build_donation(
            title,
            description,
            image_url=image_url,
            donor_name=donor_name,
            location=location,
            expires_at=expires_at,
        )
        await self.repository.donate(listing)
        logger.info("Posted donation %s (%s)", listing.id, listing.title)
        await self.notifier.notify(DONATION_POSTED_MESSAGE, Severity.SUCCESS)
        await self.feed.refresh()
        return listing

    async def claim(self, listing_id: str) -> ClaimOutcome:
        """Request pickup of a listing and refresh the feed."""
        outcome = await self.repository.claim(listing_id)
        if outcome is ClaimOutcome.CLAIMED:
            self.session.record_pickup(listing_id)
            await self.notifier.notify(PICKUP_REQUESTED_MESSAGE, Severity.SUCCESS)
        else:
            logger.warning("Claim of %s rejected: %s", listing_id, outcome.value)
            await self.notifier.notify(
                CLAIM_FAILURE_MESSAGES[outcome], Severity.WARNING
            )
        await self.feed.refresh()
        return outcome

    def pickups(self) -> list[FoodListing]:
        """Return the listings claimed in this session, most recent first."""
        by_id = {listing.id: listing for listing in self.repository.all_listings()}
        return [by_id[item] for item in self.session.pickups if item in by_id]
