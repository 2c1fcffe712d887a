"""Cached state of the most recent nearby-listings query."""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal

from zero_hunger.domain.listings import Coordinate, FoodListing
from zero_hunger.services.notifications import Notifier, Severity

if TYPE_CHECKING:
    from zero_hunger.services.listings import FoodRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FeedLoading:
    """A query is pending or the cache was invalidated."""

    status: Literal["loading"] = "loading"


@dataclass(frozen=True)
class FeedLoaded:
    """The last query succeeded."""

    listings: list[FoodListing]
    status: Literal["loaded"] = "loaded"


@dataclass(frozen=True)
class FeedFailed:
    """The last query raised; stays failed until the next refresh."""

    error: str
    status: Literal["failed"] = "failed"


FeedState = FeedLoading | FeedLoaded | FeedFailed


@dataclass
class ListingFeed:
    """Pull-based cache around ``FoodRepository.list_nearby``."""

    repository: "FoodRepository"
    notifier: Notifier
    origin: Coordinate
    radius_km: float
    state: FeedState = field(default_factory=FeedLoading)

    def invalidate(self) -> None:
        """Drop the cached result."""
        self.state = FeedLoading()

    async def load(self) -> FeedState:
        """Run the query and store its outcome."""
        try:
            listings = await self.repository.list_nearby(self.origin, self.radius_km)
        except Exception as exc:
            logger.exception("Failed to load nearby listings")
            self.state = FeedFailed(error=str(exc))
            await self.notifier.notify(f"Error loading map: {exc}", Severity.ERROR)
            return self.state
        self.state = FeedLoaded(listings=listings)
        return self.state

    async def refresh(self) -> FeedState:
        """Invalidate and re-run the query."""
        self.invalidate()
        return await self.load()
