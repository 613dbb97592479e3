"""HTTP endpoints for market and crypto snapshots."""

from __future__ import annotations

from fastapi import APIRouter, Query

from .service import MarketService


def create_markets_router(service: MarketService) -> APIRouter:
    """Create the markets router bound to a MarketService.

    This factory pattern lets us inject the service without globals.
    All endpoints return best-effort data and never fail on provider errors.
    """
    router = APIRouter(prefix="/api/markets", tags=["markets"])

    @router.get("/quotes")
    async def get_quotes(
        symbols: str | None = Query(default=None, description="Comma-separated symbols"),
    ) -> dict:
        """Quotes for the given symbols, or the default watchlist.

        May return the last successful snapshot if every provider fails.
        """
        requested = symbols.split(",") if symbols else None
        quotes = await service.get_quotes(service.resolve_requests(requested) if requested else None)
        return {"quotes": [q.to_dict() for q in quotes]}

    @router.get("/quotes/{symbol}")
    async def get_quote(symbol: str) -> dict:
        """Quote for one symbol. price/change are null if no provider has it."""
        quote = await service.get_quote(symbol)
        return quote.to_dict()

    @router.get("/crypto")
    async def get_crypto() -> dict:
        """Prices for every configured coin, or an empty list on failure."""
        coins = await service.get_crypto()
        return {"crypto": [c.to_dict() for c in coins]}

    return router
