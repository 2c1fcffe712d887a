"""Command line preview of the seeded rescue map."""

import asyncio

from zero_hunger.app_logging import configure_logging
from zero_hunger.config import Settings
from zero_hunger.containers import build_container
from zero_hunger.services.feed import FeedLoaded
from zero_hunger.services.presentation import availability_summary, format_expiry


async def _preview(settings: Settings) -> list[str]:
    container = build_container(settings)
    state = await container.feed.load()
    if not isinstance(state, FeedLoaded):
        return ["Could not load listings."]
    lines = [availability_summary(len(state.listings))]
    lines.extend(
        f"- {item.title} ({item.donor_name}), expires {format_expiry(item.expires_at)}"
        for item in state.listings
    )
    return lines


def main(settings: Settings | None = None) -> None:
    """Print the listings a receiver would see on a cold start."""
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.log_level)
    print("Zero Hunger")  # noqa: T201
    for line in asyncio.run(_preview(resolved_settings)):
        print(line)  # noqa: T201


if __name__ == "__main__":
    main()
