"""FastAPI application entry point."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .markets import MarketService, create_market_service, create_markets_router


def create_app(service: MarketService | None = None) -> FastAPI:
    """Build the app. A service is created from the environment if none is given."""
    service = service or create_market_service()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await service.aclose()

    app = FastAPI(title="Market Snapshots", lifespan=lifespan)
    app.include_router(create_markets_router(service))
    return app
