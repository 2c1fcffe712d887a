"""Tests for the cached listing feed."""

import asyncio

from zero_hunger.adapters.in_memory_food_repository import InMemoryFoodRepository
from zero_hunger.domain.listings import Coordinate
from zero_hunger.services.feed import FeedFailed, FeedLoaded, FeedLoading, ListingFeed
from zero_hunger.services.notifications import Severity
from tests.conftest import FailingFoodRepository, RecordingNotifier

NAIROBI = Coordinate(-1.2921, 36.8219)


def test_feed_starts_loading_and_loads(
    repository: InMemoryFoodRepository, notifier: RecordingNotifier
) -> None:
    feed = ListingFeed(repository, notifier, origin=NAIROBI, radius_km=5.0)

    assert isinstance(feed.state, FeedLoading)

    state = asyncio.run(feed.load())

    assert isinstance(state, FeedLoaded)
    assert len(state.listings) == 3
    assert feed.state is state


def test_invalidate_returns_to_loading(
    repository: InMemoryFoodRepository, notifier: RecordingNotifier
) -> None:
    feed = ListingFeed(repository, notifier, origin=NAIROBI, radius_km=5.0)
    asyncio.run(feed.load())

    feed.invalidate()

    assert isinstance(feed.state, FeedLoading)


def test_failed_load_is_terminal_until_refresh(notifier: RecordingNotifier) -> None:
    repository = FailingFoodRepository()
    feed = ListingFeed(repository, notifier, origin=NAIROBI, radius_km=5.0)

    state = asyncio.run(feed.load())

    assert isinstance(state, FeedFailed)
    assert state.error == "network unreachable"
    assert repository.calls == 1
    assert notifier.messages == [
        ("Error loading map: network unreachable", Severity.ERROR)
    ]
    assert feed.state is state

    asyncio.run(feed.refresh())

    assert repository.calls == 2
    assert isinstance(feed.state, FeedFailed)


def test_refresh_sees_new_state(
    repository: InMemoryFoodRepository, notifier: RecordingNotifier
) -> None:
    feed = ListingFeed(repository, notifier, origin=NAIROBI, radius_km=5.0)
    asyncio.run(feed.load())
    asyncio.run(repository.claim("1"))

    state = asyncio.run(feed.refresh())

    assert isinstance(state, FeedLoaded)
    assert [item.id for item in state.listings] == ["2", "3"]
