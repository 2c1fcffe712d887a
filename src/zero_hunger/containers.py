"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import timedelta

from zero_hunger.adapters.in_memory_food_repository import InMemoryFoodRepository
from zero_hunger.adapters.logging_notifier import LoggingNotifier
from zero_hunger.config import Settings
from zero_hunger.services.feed import ListingFeed
from zero_hunger.services.listings import FoodRepository, ListingService
from zero_hunger.services.notifications import Notifier
from zero_hunger.services.sessions import SessionState


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    repository: FoodRepository
    notifier: Notifier
    session: SessionState
    feed: ListingFeed
    listing_service: ListingService
    close_resources: Callable[[], Awaitable[None]]


def build_container(
    settings: Settings | None = None,
    repository: FoodRepository | None = None,
    notifier: Notifier | None = None,
) -> AppContainer:
    """Create the default dependency container.

    Every call produces a freshly seeded store, so tests and app instances
    never share listings.
    """
    resolved_settings = settings or Settings()
    resolved_repository = repository or InMemoryFoodRepository(
        list_latency_seconds=resolved_settings.list_latency_seconds,
        donate_latency_seconds=resolved_settings.donate_latency_seconds,
        claim_latency_seconds=resolved_settings.claim_latency_seconds,
        filter_by_radius=resolved_settings.filter_by_radius,
    )
    resolved_notifier = notifier or LoggingNotifier()
    session = SessionState()
    feed = ListingFeed(
        repository=resolved_repository,
        notifier=resolved_notifier,
        origin=resolved_settings.origin,
        radius_km=resolved_settings.search_radius_km,
    )
    listing_service = ListingService(
        repository=resolved_repository,
        feed=feed,
        session=session,
        notifier=resolved_notifier,
        default_origin=resolved_settings.origin,
        default_radius_km=resolved_settings.search_radius_km,
        default_donor_name=resolved_settings.default_donor_name,
        shelf_life=timedelta(hours=resolved_settings.donation_shelf_life_hours),
    )

    async def close_resources() -> None:
        feed.invalidate()

    return AppContainer(
        settings=resolved_settings,
        repository=resolved_repository,
        notifier=resolved_notifier,
        session=session,
        feed=feed,
        listing_service=listing_service,
        close_resources=close_resources,
    )
