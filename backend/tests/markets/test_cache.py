"""Tests for StaleResultCache."""

from app.markets.cache import StaleResultCache
from app.markets.models import MarketQuote


def _quote(symbol: str, price: float = 100.0) -> MarketQuote:
    return MarketQuote(symbol=symbol, name=symbol, display=symbol, price=price, change=0.0)


class TestStaleResultCache:
    """Unit tests for the StaleResultCache."""

    def test_starts_empty(self):
        """Test that a new cache has nothing to serve."""
        cache = StaleResultCache()
        assert cache.get() == []
        assert len(cache) == 0
        assert cache.updated_at is None

    def test_store_and_get(self):
        """Test storing and reading a snapshot."""
        cache = StaleResultCache()
        quotes = [_quote("AAPL"), _quote("MSFT")]
        assert cache.store(quotes) is True
        assert cache.get() == quotes

    def test_store_overwrites(self):
        """Test that a new snapshot fully replaces the previous one."""
        cache = StaleResultCache()
        cache.store([_quote("AAPL"), _quote("MSFT")])
        cache.store([_quote("^GSPC")])
        assert [q.symbol for q in cache.get()] == ["^GSPC"]

    def test_empty_store_ignored(self):
        """Test that an empty result never clears the snapshot."""
        cache = StaleResultCache()
        cache.store([_quote("AAPL")])
        assert cache.store([]) is False
        assert [q.symbol for q in cache.get()] == ["AAPL"]

    def test_get_returns_copy(self):
        """Test that mutating a returned list does not affect the cache."""
        cache = StaleResultCache()
        cache.store([_quote("AAPL")])
        cache.get().clear()
        assert len(cache) == 1

    def test_store_copies_input(self):
        """Test that mutating the stored list afterwards does not affect the cache."""
        cache = StaleResultCache()
        quotes = [_quote("AAPL")]
        cache.store(quotes)
        quotes.append(_quote("MSFT"))
        assert len(cache) == 1

    def test_empty_store_keeps_timestamp(self):
        """Test that an ignored store does not refresh updated_at."""
        cache = StaleResultCache()
        cache.store([_quote("AAPL")], timestamp=100.0)
        cache.store([], timestamp=200.0)
        assert cache.updated_at == 100.0

    def test_custom_timestamp(self):
        """Test storing with a custom timestamp."""
        cache = StaleResultCache()
        cache.store([_quote("AAPL")], timestamp=1234567890.0)
        assert cache.updated_at == 1234567890.0

    def test_clear(self):
        """Test that clear() empties the slot."""
        cache = StaleResultCache()
        cache.store([_quote("AAPL")])
        cache.clear()
        assert cache.get() == []
        assert cache.updated_at is None

    def test_instances_are_independent(self):
        """Test that two caches never share state."""
        a = StaleResultCache()
        b = StaleResultCache()
        a.store([_quote("AAPL")])
        assert b.get() == []
