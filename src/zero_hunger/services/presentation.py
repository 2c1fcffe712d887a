"""Display helpers for the rescue map and listing details."""

from dataclasses import dataclass
from datetime import datetime

from zero_hunger.domain.listings import Coordinate, FoodListing

TILE_URL_TEMPLATE = "https://tile.openstreetmap.org/{z}/{x}/{y}.png"


@dataclass(frozen=True)
class MapMarker:
    """A tappable pin for one listing."""

    listing_id: str
    title: str
    position: Coordinate


@dataclass(frozen=True)
class MapView:
    """Everything a tile surface needs to draw the rescue map."""

    center: Coordinate
    zoom: float
    tile_url_template: str
    markers: list[MapMarker]
    summary: str


def format_expiry(value: datetime) -> str:
    """Format an expiry like ``Jan 5, 3:07 PM``."""
    hour = value.hour % 12 or 12
    meridiem = "AM" if value.hour < 12 else "PM"  # noqa: PLR2004
    month = value.strftime("%b")
    return f"{month} {value.day}, {hour}:{value.minute:02d} {meridiem}"


def availability_summary(count: int) -> str:
    """Return the banner text shown over the map."""
    return f"{count} surplus meals available nearby."


def map_view(
    listings: list[FoodListing], center: Coordinate, zoom: float = 13.0
) -> MapView:
    """Build the map payload for a set of listings."""
    return MapView(
        center=center,
        zoom=zoom,
        tile_url_template=TILE_URL_TEMPLATE,
        markers=[
            MapMarker(listing_id=item.id, title=item.title, position=item.location)
            for item in listings
        ],
        summary=availability_summary(len(listings)),
    )
