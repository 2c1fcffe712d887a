"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

import pytest

from zero_hunger.adapters.in_memory_food_repository import InMemoryFoodRepository
from zero_hunger.config import Settings
from zero_hunger.containers import AppContainer, build_container
from zero_hunger.domain.listings import ClaimOutcome, Coordinate, FoodListing
from zero_hunger.services.listings import FoodRepository
from zero_hunger.services.notifications import Notifier, Severity

FIXED_NOW = datetime(2024, 1, 5, 15, 7, tzinfo=UTC)


@dataclass
class RecordingNotifier(Notifier):
    """Fake notifier that records every message."""

    messages: list[tuple[str, Severity]] = field(default_factory=list)

    async def notify(self, message: str, severity: Severity) -> None:
        self.messages.append((message, severity))


@dataclass
class FailingFoodRepository(FoodRepository):
    """Repository whose queries always fail."""

    error: str = "network unreachable"
    calls: int = 0

    async def list_nearby(
        self, origin: Coordinate, radius_km: float
    ) -> list[FoodListing]:
        self.calls += 1
        raise ConnectionError(self.error)

    async def donate(self, listing: FoodListing) -> None:
        return None

    async def claim(self, listing_id: str) -> ClaimOutcome:
        return ClaimOutcome.NOT_FOUND

    def all_listings(self) -> list[FoodListing]:
        return []


def make_listing(listing_id: str, **overrides: object) -> FoodListing:
    values: dict[str, object] = {
        "id": listing_id,
        "title": f"Listing {listing_id}",
        "description": "Test food",
        "image_url": "",
        "expires_at": FIXED_NOW,
        "location": Coordinate(-1.2921, 36.8219),
        "donor_name": "Test Donor",
    }
    values.update(overrides)
    return FoodListing(**values)  # type: ignore[arg-type]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        list_latency_seconds=0,
        donate_latency_seconds=0,
        claim_latency_seconds=0,
    )


@pytest.fixture
def repository() -> InMemoryFoodRepository:
    return InMemoryFoodRepository(
        list_latency_seconds=0,
        donate_latency_seconds=0,
        claim_latency_seconds=0,
    )


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def container(
    settings: Settings,
    repository: InMemoryFoodRepository,
    notifier: RecordingNotifier,
) -> AppContainer:
    return build_container(settings, repository=repository, notifier=notifier)
