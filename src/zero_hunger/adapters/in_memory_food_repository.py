"""In-memory food repository with simulated network latency."""

import asyncio
import logging
from datetime import UTC, datetime, timedelta

from zero_hunger.domain.geo import haversine_km
from zero_hunger.domain.listings import ClaimOutcome, Coordinate, FoodListing
from zero_hunger.services.listings import FoodRepository

logger = logging.getLogger(__name__)

PLACEHOLDER_IMAGE_URL = "https://via.placeholder.com/150"


def seed_listings(now: datetime) -> list[FoodListing]:
    """Return the fixed listings every fresh store starts with."""
    return [
        FoodListing(
            id="1",
            title="Surprise Bag - Bakery",
            description="Assorted pastries and bread from today.",
            image_url=PLACEHOLDER_IMAGE_URL,
            expires_at=now + timedelta(hours=24),
            location=Coordinate(-1.2921, 36.8219),  # Nairobi CBD
            donor_name="City Bakery",
        ),
        FoodListing(
            id="2",
            title="Vegetable Stew",
            description="5 servings of fresh stew. Vegetarian.",
            image_url=PLACEHOLDER_IMAGE_URL,
            expires_at=now + timedelta(hours=5),
            location=Coordinate(-1.2864, 36.8172),
            donor_name="Mama Oliech Restaurant",
        ),
        FoodListing(
            id="3",
            title="Fresh Fruit Box",
            description="Bananas and Mangoes, slightly ripe.",
            image_url=PLACEHOLDER_IMAGE_URL,
            expires_at=now + timedelta(days=2),
            location=Coordinate(-1.2990, 36.7800),  # Kilimani
            donor_name="Green Grocers",
        ),
    ]


class InMemoryFoodRepository(FoodRepository):
    """Stand-in for a hosted database, kept entirely in process memory.

    Mutations happen synchronously after each simulated delay, so two
    claims racing on one event loop resolve first-come-first-served.
    """

    def __init__(  # noqa: PLR0913
        self,
        listings: list[FoodListing] | None = None,
        *,
        list_latency_seconds: float = 0.8,
        donate_latency_seconds: float = 1.0,
        claim_latency_seconds: float = 1.0,
        filter_by_radius: bool = False,
    ) -> None:
        self._listings = (
            list(listings)
            if listings is not None
            else seed_listings(datetime.now(tz=UTC))
        )
        self._list_latency = list_latency_seconds
        self._donate_latency = donate_latency_seconds
        self._claim_latency = claim_latency_seconds
        self._filter_by_radius = filter_by_radius

    async def list_nearby(
        self, origin: Coordinate, radius_km: float
    ) -> list[FoodListing]:
        """Return available listings, optionally limited to a radius."""
        await asyncio.sleep(self._list_latency)
        available = [item for item in self._listings if item.is_available]
        if not self._filter_by_radius:
            return available
        return [
            item
            for item in available
            if haversine_km(origin, item.location) <= radius_km
        ]

    async def donate(self, listing: FoodListing) -> None:
        """Insert a listing at the front so it shows up first."""
        await asyncio.sleep(self._donate_latency)
        self._listings.insert(0, listing)

    async def claim(self, listing_id: str) -> ClaimOutcome:
        """Swap an available listing for its claimed copy."""
        await asyncio.sleep(self._claim_latency)
        for index, item in enumerate(self._listings):
            if item.id != listing_id:
                continue
            if not item.is_available:
                return ClaimOutcome.ALREADY_CLAIMED
            self._listings[index] = item.claimed()
            logger.info("Listing %s claimed", listing_id)
            return ClaimOutcome.CLAIMED
        return ClaimOutcome.NOT_FOUND

    def all_listings(self) -> list[FoodListing]:
        """Return a snapshot of every listing in store order."""
        return list(self._listings)
