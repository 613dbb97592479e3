"""Last-known-good snapshot of an aggregation result."""

from __future__ import annotations

import time

from .models import MarketQuote


class StaleResultCache:
    """Single-slot memory of the most recent non-empty aggregation.

    Writer: QuoteAggregator, after every aggregation that produced quotes.
    Reader: QuoteAggregator, when a fresh aggregation produced nothing.

    The slot is not keyed by request. A fallback may return quotes for a
    different set of symbols than the one just requested.
    """

    def __init__(self) -> None:
        self._quotes: list[MarketQuote] = []
        self._updated_at: float | None = None

    def store(self, quotes: list[MarketQuote], timestamp: float | None = None) -> bool:
        """Replace the snapshot. Empty lists are ignored. Returns True if stored."""
        if not quotes:
            return False
        self._quotes = list(quotes)
        self._updated_at = timestamp or time.time()
        return True

    def get(self) -> list[MarketQuote]:
        """Copy of the snapshot, or an empty list if nothing was ever stored."""
        return list(self._quotes)

    def clear(self) -> None:
        self._quotes = []
        self._updated_at = None

    @property
    def updated_at(self) -> float | None:
        """Unix seconds of the last store, or None."""
        return self._updated_at

    def __len__(self) -> int:
        return len(self._quotes)
