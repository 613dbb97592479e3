"""Finnhub batch quote provider (primary source for equities)."""

from __future__ import annotations

import logging
from typing import Any

from .interface import BatchQuoteProvider, Fetcher
from .models import MarketQuote, ProviderResult, QuoteRequest
from .urls import ProviderUrls

logger = logging.getLogger(__name__)


class FinnhubQuoteProvider(BatchQuoteProvider):
    """BatchQuoteProvider backed by the relay's Finnhub batch endpoint.

    One GET returns ``{"quotes": [...], "error"?: str}`` where each quote has
    ``symbol``, ``price``, ``changePercent`` and an optional ``error``.
    Indices and futures are not served by Finnhub's free tier; route those to
    the secondary provider instead.
    """

    def __init__(self, fetch: Fetcher, urls: ProviderUrls) -> None:
        self._fetch = fetch
        self._urls = urls

    async def fetch_quotes(self, requests: list[QuoteRequest]) -> ProviderResult:
        if not requests:
            return ProviderResult.success()

        try:
            response = await self._fetch(self._urls.primary(r.symbol for r in requests))
            if not response.is_success:
                logger.warning("Finnhub returned %d", response.status_code)
                return ProviderResult.failure(f"HTTP {response.status_code}")

            payload = response.json()
            if payload.get("error"):
                logger.warning("Finnhub error: %s", payload["error"])
                return ProviderResult.failure(str(payload["error"]))

            quotes = self._parse_quotes(payload["quotes"], requests)
        except Exception as e:
            # Common failures: network errors, non-JSON bodies, missing "quotes".
            logger.warning("Finnhub fetch failed: %s", e)
            return ProviderResult.failure(str(e) or type(e).__name__)

        logger.debug("Finnhub: %d/%d symbols quoted", len(quotes), len(requests))
        return ProviderResult.success(quotes)

    @staticmethod
    def _parse_quotes(raw_quotes: list[dict[str, Any]], requests: list[QuoteRequest]) -> list[MarketQuote]:
        """Drop unusable entries and join the rest back to their request metadata."""
        by_symbol = {r.symbol: r for r in requests}
        quotes: list[MarketQuote] = []
        for raw in raw_quotes:
            symbol = raw.get("symbol")
            price = raw.get("price")
            if raw.get("error"):
                logger.debug("Skipping %s: %s", symbol, raw["error"])
                continue
            # Zero/negative prices are placeholders for symbols Finnhub has no data on
            if isinstance(price, bool) or not isinstance(price, (int, float)) or price <= 0:
                logger.debug("Skipping %s: invalid price %r", symbol, price)
                continue

            info = by_symbol.get(symbol)
            quotes.append(
                MarketQuote(
                    symbol=symbol,
                    name=(info.name if info else None) or symbol,
                    display=(info.display if info else None) or symbol,
                    price=price,
                    change=raw.get("changePercent") or 0.0,
                )
            )
        return quotes
