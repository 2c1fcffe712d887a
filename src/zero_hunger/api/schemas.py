"""Pydantic models for API payloads."""

from datetime import datetime

from pydantic import BaseModel, Field, model_validator

from zero_hunger.domain.listings import ClaimOutcome, Coordinate, FoodListing
from zero_hunger.domain.roles import Role, Tab
from zero_hunger.services.feed import FeedFailed, FeedLoaded, FeedState
from zero_hunger.services.presentation import MapView, format_expiry


class CoordinatePayload(BaseModel):
    """Latitude/longitude pair."""

    latitude: float
    longitude: float

    @classmethod
    def from_domain(cls, coordinate: Coordinate) -> "CoordinatePayload":
        return cls(latitude=coordinate.latitude, longitude=coordinate.longitude)


class ListingResponse(BaseModel):
    """A food listing as returned to clients."""

    id: str
    title: str
    description: str
    image_url: str
    expires_at: datetime
    expires_label: str
    location: CoordinatePayload
    donor_name: str
    is_available: bool

    @classmethod
    def from_domain(cls, listing: FoodListing) -> "ListingResponse":
        return cls(
            id=listing.id,
            title=listing.title,
            description=listing.description,
            image_url=listing.image_url,
            expires_at=listing.expires_at,
            expires_label=format_expiry(listing.expires_at),
            location=CoordinatePayload.from_domain(listing.location),
            donor_name=listing.donor_name,
            is_available=listing.is_available,
        )


class DonationRequest(BaseModel):
    """Donation form payload."""

    title: str
    description: str
    image_url: str = ""
    donor_name: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    expires_at: datetime | None = None

    @model_validator(mode="after")
    def require_full_location(self) -> "DonationRequest":
        if (self.latitude is None) != (self.longitude is None):
            raise ValueError("latitude and longitude must be given together")
        return self

    def location(self) -> Coordinate | None:
        """Return the pickup location when both parts were supplied."""
        if self.latitude is None or self.longitude is None:
            return None
        return Coordinate(self.latitude, self.longitude)


class ClaimResponse(BaseModel):
    """Result of a pickup request."""

    id: str
    outcome: ClaimOutcome


class FeedResponse(BaseModel):
    """Snapshot of the cached listings query."""

    status: str
    listings: list[ListingResponse] | None = None
    error: str | None = None

    @classmethod
    def from_state(cls, state: FeedState) -> "FeedResponse":
        if isinstance(state, FeedLoaded):
            return cls(
                status=state.status,
                listings=[ListingResponse.from_domain(item) for item in state.listings],
            )
        if isinstance(state, FeedFailed):
            return cls(status=state.status, error=state.error)
        return cls(status=state.status)


class MarkerResponse(BaseModel):
    """Map pin for one listing."""

    listing_id: str
    title: str
    position: CoordinatePayload


class MapResponse(BaseModel):
    """Rescue map payload."""

    center: CoordinatePayload
    zoom: float
    tile_url_template: str
    markers: list[MarkerResponse]
    summary: str

    @classmethod
    def from_view(cls, view: MapView) -> "MapResponse":
        return cls(
            center=CoordinatePayload.from_domain(view.center),
            zoom=view.zoom,
            tile_url_template=view.tile_url_template,
            markers=[
                MarkerResponse(
                    listing_id=marker.listing_id,
                    title=marker.title,
                    position=CoordinatePayload.from_domain(marker.position),
                )
                for marker in view.markers
            ],
            summary=view.summary,
        )


class TabResponse(BaseModel):
    """Navigation tab entry."""

    key: str
    label: str
    icon: str

    @classmethod
    def from_tab(cls, tab: Tab) -> "TabResponse":
        return cls(key=tab.value.key, label=tab.value.label, icon=tab.value.icon)


class SessionResponse(BaseModel):
    """Current role, its navigation and the session's pickups."""

    role: Role
    tabs: list[TabResponse]
    pickups: list[ListingResponse] = Field(default_factory=list)

