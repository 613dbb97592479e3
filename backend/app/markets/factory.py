"""Factory for creating the market service from environment variables."""

from __future__ import annotations

import logging
import os

from .aggregator import QuoteAggregator
from .coingecko_client import CoinGeckoClient
from .finnhub_client import FinnhubQuoteProvider
from .service import MarketService
from .transport import HttpTransport
from .urls import ProviderUrls
from .yahoo_client import YahooQuoteProvider

logger = logging.getLogger(__name__)

DEFAULT_RELAY_URL = "http://localhost:3000"
DEFAULT_TIMEOUT = 10.0


def _env_number(name: str, default: float | None, cast: type = float) -> float | None:
    """Read a positive number from the environment, falling back on bad input."""
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = cast(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r", name, raw)
        return default
    if value <= 0:
        logger.warning("Ignoring non-positive %s=%r", name, raw)
        return default
    return value


def create_market_service() -> MarketService:
    """Create a MarketService wired to the provider relay.

    - MARKETS_RELAY_URL: base URL of the relay (default http://localhost:3000)
    - MARKETS_PROXY_URL: optional outbound HTTP proxy
    - MARKETS_HTTP_TIMEOUT: transport timeout in seconds (default 10)
    - MARKETS_SECONDARY_CONCURRENCY: cap on parallel per-symbol calls (default: none)

    Caller must await service.aclose() on shutdown.
    """
    relay_url = os.environ.get("MARKETS_RELAY_URL", "").strip() or DEFAULT_RELAY_URL
    proxy = os.environ.get("MARKETS_PROXY_URL", "").strip() or None
    timeout = _env_number("MARKETS_HTTP_TIMEOUT", DEFAULT_TIMEOUT)
    concurrency = _env_number("MARKETS_SECONDARY_CONCURRENCY", None, cast=int)

    transport = HttpTransport(timeout=timeout, proxy=proxy)
    urls = ProviderUrls(base_url=relay_url)
    aggregator = QuoteAggregator(
        primary=FinnhubQuoteProvider(transport, urls),
        secondary=YahooQuoteProvider(transport, urls),
        max_concurrency=concurrency,
    )

    logger.info(
        "Market service: relay %s%s, timeout %.1fs",
        relay_url,
        " via proxy" if proxy else "",
        timeout,
    )
    return MarketService(
        aggregator=aggregator,
        crypto=CoinGeckoClient(transport, urls),
        transport=transport,
    )
