"""Market quote aggregation subsystem.

Public API:
    QuoteRequest         - Symbol plus presentation metadata to quote
    MarketQuote          - Canonical equity/index/commodity quote
    CryptoQuote          - Coin price and 24h change
    QuoteAggregator      - Routes, fans out and merges provider results
    StaleResultCache     - Last-known-good aggregation snapshot
    MarketService        - Session object owning aggregator, crypto client and transport
    create_market_service - Factory that configures a service from the environment
    create_markets_router - FastAPI router factory for the snapshot endpoints
"""

from .aggregator import QuoteAggregator
from .api import create_markets_router
from .cache import StaleResultCache
from .factory import create_market_service
from .models import CryptoQuote, MarketQuote, QuoteRequest
from .service import MarketService

__all__ = [
    "QuoteRequest",
    "MarketQuote",
    "CryptoQuote",
    "QuoteAggregator",
    "StaleResultCache",
    "MarketService",
    "create_market_service",
    "create_markets_router",
]
