"""Yahoo Finance chart provider (secondary source for indices and futures)."""

from __future__ import annotations

import logging
from typing import Any

from .interface import Fetcher, SingleQuoteProvider
from .models import MarketQuote, ProviderResult, QuoteRequest
from .urls import ProviderUrls

logger = logging.getLogger(__name__)


class YahooQuoteProvider(SingleQuoteProvider):
    """SingleQuoteProvider backed by the relay's Yahoo Finance chart endpoint.

    Reads ``chart.result[0].meta`` and derives the percent change from the
    previous close, since the chart payload carries no change field.
    """

    def __init__(self, fetch: Fetcher, urls: ProviderUrls) -> None:
        self._fetch = fetch
        self._urls = urls

    async def fetch_quote(self, request: QuoteRequest) -> ProviderResult:
        try:
            response = await self._fetch(self._urls.secondary(request.symbol))
            if not response.is_success:
                logger.warning("Yahoo returned %d for %s", response.status_code, request.symbol)
                return ProviderResult.failure(f"HTTP {response.status_code}")

            quote = self._parse_chart(response.json(), request)
        except Exception as e:
            logger.warning("Yahoo fetch failed for %s: %s", request.symbol, e)
            return ProviderResult.failure(str(e) or type(e).__name__)

        if quote is None:
            logger.debug("Yahoo: no data for %s", request.symbol)
            return ProviderResult.success()
        return ProviderResult.success([quote])

    @staticmethod
    def _parse_chart(payload: dict[str, Any], request: QuoteRequest) -> MarketQuote | None:
        """Build a quote from a chart payload, or None if it has no usable meta block."""
        results = (payload.get("chart") or {}).get("result") or []
        meta = results[0].get("meta") if results else None
        if not meta:
            return None

        price = meta.get("regularMarketPrice")
        if price is None:
            return None

        # Falls back to the current price when no close is known, giving a change of 0
        prev_close = meta.get("chartPreviousClose") or meta.get("previousClose") or price
        change = (price - prev_close) / prev_close * 100 if prev_close else 0.0

        return MarketQuote(
            symbol=request.symbol,
            name=request.name,
            display=request.display,
            price=price,
            change=change,
        )
