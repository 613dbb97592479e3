"""Multi-provider quote aggregation with stale-data fallback."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from .cache import StaleResultCache
from .interface import BatchQuoteProvider, SingleQuoteProvider
from .models import MarketQuote, ProviderResult, QuoteRequest
from .router import is_secondary_only, partition_requests
from .symbols import SECONDARY_ONLY_SYMBOLS

logger = logging.getLogger(__name__)

BatchCallback = Callable[[list[MarketQuote]], None]


class QuoteAggregator:
    """Fans quote requests out to the primary and secondary providers.

    Symbols in ``secondary_only`` go to the per-symbol provider, everything
    else to the batch provider. Results are merged in that order: the
    primary contribution first (provider order), then the secondary
    contribution (order not guaranteed).

    If an aggregation yields nothing, the last non-empty result is returned
    instead. Callers cannot tell fresh results from stale ones by the return
    value; check ``cache.updated_at`` if that matters.

    Usage:
        aggregator = QuoteAggregator(primary, secondary)
        quotes = await aggregator.aggregate(requests, on_batch=render)
        quote = await aggregator.fetch_one("AAPL", "Apple", "AAPL")
    """

    def __init__(
        self,
        primary: BatchQuoteProvider,
        secondary: SingleQuoteProvider,
        cache: StaleResultCache | None = None,
        secondary_only: frozenset[str] = SECONDARY_ONLY_SYMBOLS,
        max_concurrency: int | None = None,
    ) -> None:
        self._primary = primary
        self._secondary = secondary
        self._cache = cache if cache is not None else StaleResultCache()
        self._secondary_only = secondary_only
        # None = every secondary call in flight at once
        self._semaphore = asyncio.Semaphore(max_concurrency) if max_concurrency else None

    @property
    def cache(self) -> StaleResultCache:
        return self._cache

    async def aggregate(
        self,
        requests: list[QuoteRequest],
        on_batch: BatchCallback | None = None,
    ) -> list[MarketQuote]:
        """Quote every request, reporting progress after each provider stage.

        ``on_batch`` is called once per non-empty partition with everything
        gathered so far. It is never called with fewer quotes than before.
        Never raises.
        """
        routed = partition_requests(requests, self._secondary_only)
        results: list[MarketQuote] = []

        if routed.primary:
            outcome = await self._fetch_primary(routed.primary)
            if not outcome.ok:
                logger.warning(
                    "Primary provider failed for %d symbols: %s", len(routed.primary), outcome.error
                )
            results.extend(outcome.quotes)
            self._notify(on_batch, results)

        if routed.secondary:
            results.extend(await self._fetch_secondary(routed.secondary))
            self._notify(on_batch, results)

        if results:
            self._cache.store(results)
            logger.debug("Aggregated %d/%d quotes", len(results), len(requests))
            return results

        stale = self._cache.get()
        if stale:
            logger.warning(
                "No fresh quotes for %d symbols, serving %d stale quotes", len(requests), len(stale)
            )
        return stale

    async def fetch_one(self, symbol: str, name: str, display: str) -> MarketQuote:
        """Quote a single symbol. Returns a placeholder with no price if unresolved.

        Kept for callers that predate batch aggregation. Does not read or
        write the stale cache.
        """
        request = QuoteRequest(symbol=symbol, name=name, display=display)
        if is_secondary_only(symbol, self._secondary_only):
            outcome = await self._fetch_secondary_one(request)
        else:
            outcome = await self._fetch_primary([request])

        if outcome.quotes:
            return outcome.quotes[0]
        return MarketQuote.placeholder(symbol, name, display)

    # --- Internal ---

    async def _fetch_secondary(self, requests: list[QuoteRequest]) -> list[MarketQuote]:
        """Quote each symbol concurrently; one failure never cancels the others."""
        outcomes = await asyncio.gather(
            *(self._fetch_secondary_one(r) for r in requests),
            return_exceptions=True,
        )

        quotes: list[MarketQuote] = []
        for request, outcome in zip(requests, outcomes):
            if isinstance(outcome, BaseException):
                logger.error("Secondary provider raised for %s: %r", request.symbol, outcome)
                continue
            quotes.extend(outcome.quotes)
        logger.debug("Secondary provider: %d/%d symbols quoted", len(quotes), len(requests))
        return quotes

    async def _fetch_primary(self, requests: list[QuoteRequest]) -> ProviderResult:
        try:
            return await self._primary.fetch_quotes(requests)
        except Exception as e:
            logger.error("Primary provider raised for %d symbols: %r", len(requests), e)
            return ProviderResult.failure(str(e) or type(e).__name__)

    async def _fetch_secondary_one(self, request: QuoteRequest) -> ProviderResult:
        try:
            if self._semaphore is None:
                return await self._secondary.fetch_quote(request)
            async with self._semaphore:
                return await self._secondary.fetch_quote(request)
        except Exception as e:
            logger.error("Secondary provider raised for %s: %r", request.symbol, e)
            return ProviderResult.failure(str(e) or type(e).__name__)

    @staticmethod
    def _notify(on_batch: BatchCallback | None, results: list[MarketQuote]) -> None:
        if on_batch is None:
            return
        try:
            on_batch(list(results))
        except Exception:
            logger.exception("on_batch callback failed")
