"""Session object tying the market components to one transport."""

from __future__ import annotations

import logging
from collections.abc import Callable

from .aggregator import QuoteAggregator
from .coingecko_client import CoinGeckoClient
from .models import CryptoQuote, MarketQuote, QuoteRequest
from .symbols import DEFAULT_MARKET_SYMBOLS
from .transport import HttpTransport

logger = logging.getLogger(__name__)


class MarketService:
    """Owns the aggregator, the crypto client and the transport they share.

    Each instance has its own stale-result cache, so two services never
    serve each other's stale data.
    """

    def __init__(
        self,
        aggregator: QuoteAggregator,
        crypto: CoinGeckoClient,
        transport: HttpTransport | None = None,
        default_symbols: list[QuoteRequest] | None = None,
    ) -> None:
        self.aggregator = aggregator
        self.crypto = crypto
        self._transport = transport
        self._default_symbols = list(default_symbols or DEFAULT_MARKET_SYMBOLS)

    @property
    def default_symbols(self) -> list[QuoteRequest]:
        return list(self._default_symbols)

    def resolve_requests(self, symbols: list[str] | None) -> list[QuoteRequest]:
        """Turn bare symbols into requests, borrowing names from the default watchlist.

        Symbols not on the watchlist use the symbol as name and display.
        Duplicates are dropped, first occurrence wins.
        """
        if not symbols:
            return self.default_symbols
        requests: list[QuoteRequest] = []
        seen: set[str] = set()
        for symbol in symbols:
            symbol = symbol.strip().upper()
            if not symbol or symbol in seen:
                continue
            seen.add(symbol)
            requests.append(self._request_for(symbol))
        return requests

    def _request_for(self, symbol: str) -> QuoteRequest:
        for request in self._default_symbols:
            if request.symbol == symbol:
                return request
        return QuoteRequest(symbol=symbol, name=symbol, display=symbol)

    async def get_quotes(
        self,
        requests: list[QuoteRequest] | None = None,
        on_batch: Callable[[list[MarketQuote]], None] | None = None,
    ) -> list[MarketQuote]:
        if requests is None:
            requests = self.default_symbols
        return await self.aggregator.aggregate(requests, on_batch=on_batch)

    async def get_quote(self, symbol: str) -> MarketQuote:
        request = self._request_for(symbol.strip().upper())
        return await self.aggregator.fetch_one(request.symbol, request.name, request.display)

    async def get_crypto(self) -> list[CryptoQuote]:
        return await self.crypto.fetch_crypto()

    async def aclose(self) -> None:
        """Release the transport. Safe to call multiple times."""
        if self._transport is not None:
            await self._transport.aclose()
        logger.info("Market service closed")
