"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from zero_hunger.api.schemas import (
    ClaimResponse,
    DonationRequest,
    FeedResponse,
    ListingResponse,
    MapResponse,
    SessionResponse,
    TabResponse,
)
from zero_hunger.app_logging import configure_logging
from zero_hunger.containers import AppContainer
from zero_hunger.domain.listings import (
    ClaimOutcome,
    Coordinate,
    DonationValidationError,
)
from zero_hunger.services.feed import FeedFailed, FeedLoaded, FeedLoading
from zero_hunger.services.presentation import map_view

_CLAIM_STATUS = {
    ClaimOutcome.CLAIMED: status.HTTP_200_OK,
    ClaimOutcome.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ClaimOutcome.ALREADY_CLAIMED: status.HTTP_409_CONFLICT,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        state = await app.state.container.feed.load()
        logger.info("Initial listing feed %s", state.status)
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Zero Hunger", lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/listings")
    async def list_listings(
        request: Request,
        lat: float | None = None,
        lon: float | None = None,
        radius_km: float | None = None,
    ) -> list[ListingResponse]:
        """Return available listings around a point."""
        state_container: AppContainer = request.app.state.container
        if (lat is None) != (lon is None):
            raise HTTPException(
                status_code=422, detail="lat and lon must be given together"
            )
        origin = None if lat is None or lon is None else Coordinate(lat, lon)
        listings = await state_container.listing_service.list_nearby(origin, radius_km)
        return [ListingResponse.from_domain(item) for item in listings]

    @app.post("/listings", status_code=status.HTTP_201_CREATED)
    async def donate(payload: DonationRequest, request: Request) -> ListingResponse:
        """Post a surplus food donation."""
        state_container: AppContainer = request.app.state.container
        try:
            listing = await state_container.listing_service.donate(
                payload.title,
                payload.description,
                image_url=payload.image_url,
                donor_name=payload.donor_name,
                location=payload.location(),
                expires_at=payload.expires_at,
            )
        except DonationValidationError as exc:
            raise HTTPException(
                status_code=422, detail=str(exc)
            ) from exc
        return ListingResponse.from_domain(listing)

    @app.post("/listings/{listing_id}/claim")
    async def claim(listing_id: str, request: Request) -> JSONResponse:
        """Request pickup of a listing."""
        state_container: AppContainer = request.app.state.container
        outcome = await state_container.listing_service.claim(listing_id)
        body = ClaimResponse(id=listing_id, outcome=outcome)
        return JSONResponse(
            status_code=_CLAIM_STATUS[outcome], content=body.model_dump(mode="json")
        )

    @app.get("/feed")
    async def feed(request: Request) -> FeedResponse:
        """Return the cached listing feed without re-querying."""
        state_container: AppContainer = request.app.state.container
        return FeedResponse.from_state(state_container.feed.state)

    @app.post("/feed/refresh")
    async def refresh_feed(request: Request) -> FeedResponse:
        """Invalidate the feed and query again."""
        state_container: AppContainer = request.app.state.container
        return FeedResponse.from_state(await state_container.feed.refresh())

    @app.get("/map")
    async def rescue_map(request: Request) -> MapResponse:
        """Return map markers for the cached feed."""
        state_container: AppContainer = request.app.state.container
        state = state_container.feed.state
        if isinstance(state, FeedLoading):
            state = await state_container.feed.load()
        if isinstance(state, FeedFailed):
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=f"Error loading map: {state.error}",
            )
        listings = state.listings if isinstance(state, FeedLoaded) else []
        view = map_view(
            listings,
            center=state_container.settings.origin,
            zoom=state_container.settings.map_zoom,
        )
        return MapResponse.from_view(view)

    @app.get("/session")
    async def session(request: Request) -> SessionResponse:
        """Return the active role, its tabs and requested pickups."""
        return _session_response(request.app.state.container)

    @app.post("/session/role/toggle")
    async def toggle_role(request: Request) -> SessionResponse:
        """Switch between donor and receiver mode."""
        state_container: AppContainer = request.app.state.container
        state_container.session.toggle_role()
        return _session_response(state_container)

    return app


def _session_response(container: AppContainer) -> SessionResponse:
    return SessionResponse(
        role=container.session.role,
        tabs=[TabResponse.from_tab(tab) for tab in container.session.tabs()],
        pickups=[
            ListingResponse.from_domain(item)
            for item in container.listing_service.pickups()
        ],
    )
