"""Tests for YahooQuoteProvider (fake relay)."""

import httpx
import pytest

from app.markets.models import QuoteRequest
from app.markets.yahoo_client import YahooQuoteProvider

SP500 = QuoteRequest(symbol="^GSPC", name="S&P 500", display="SPX")


def _chart(price, chart_previous_close=None, previous_close=None) -> dict:
    """Minimal chart payload with only the meta fields the provider reads."""
    meta = {"regularMarketPrice": price}
    if chart_previous_close is not None:
        meta["chartPreviousClose"] = chart_previous_close
    if previous_close is not None:
        meta["previousClose"] = previous_close
    return {"chart": {"result": [{"meta": meta}], "error": None}}


@pytest.mark.asyncio
class TestYahooQuoteProvider:
    """Unit tests for the secondary single-symbol provider."""

    async def test_change_from_chart_previous_close(self, fetcher, urls):
        """Test that chartPreviousClose takes precedence."""
        fetcher.add("symbol=^GSPC", json=_chart(5050.0, chart_previous_close=5000.0, previous_close=4000.0))
        provider = YahooQuoteProvider(fetcher, urls)

        result = await provider.fetch_quote(SP500)

        (quote,) = result.quotes
        assert quote.price == 5050.0
        assert quote.change == pytest.approx(1.0)
        assert (quote.symbol, quote.name, quote.display) == ("^GSPC", "S&P 500", "SPX")

    async def test_change_from_previous_close(self, fetcher, urls):
        """Test fallback to previousClose when chartPreviousClose is absent."""
        fetcher.add("symbol=^GSPC", json=_chart(90.0, previous_close=100.0))
        provider = YahooQuoteProvider(fetcher, urls)

        result = await provider.fetch_quote(SP500)

        assert result.quotes[0].change == pytest.approx(-10.0)

    async def test_no_previous_close_gives_zero_change(self, fetcher, urls):
        """Test that a missing close falls back to the price itself."""
        fetcher.add("symbol=^GSPC", json=_chart(5000.0))
        provider = YahooQuoteProvider(fetcher, urls)

        result = await provider.fetch_quote(SP500)

        assert result.quotes[0].change == 0

    async def test_zero_previous_close_falls_through(self, fetcher, urls):
        """Test that a zero chartPreviousClose is skipped like a missing one."""
        fetcher.add("symbol=^GSPC", json=_chart(110.0, chart_previous_close=0, previous_close=100.0))
        provider = YahooQuoteProvider(fetcher, urls)

        result = await provider.fetch_quote(SP500)

        assert result.quotes[0].change == pytest.approx(10.0)

    async def test_missing_meta_is_no_result(self, fetcher, urls):
        """Test that an empty result list is 'no data', not a failure."""
        fetcher.add("symbol=^GSPC", json={"chart": {"result": [], "error": None}})
        provider = YahooQuoteProvider(fetcher, urls)

        result = await provider.fetch_quote(SP500)

        assert result.ok
        assert result.quotes == ()

    async def test_null_result_is_no_result(self, fetcher, urls):
        """Test that chart.result = null is 'no data'."""
        fetcher.add("symbol=^GSPC", json={"chart": {"result": None, "error": {"code": "Not Found"}}})
        provider = YahooQuoteProvider(fetcher, urls)

        result = await provider.fetch_quote(SP500)

        assert result.ok
        assert result.quotes == ()

    async def test_missing_price_is_no_result(self, fetcher, urls):
        """Test that a meta block without a market price yields nothing."""
        fetcher.add("symbol=^GSPC", json={"chart": {"result": [{"meta": {"previousClose": 100.0}}]}})
        provider = YahooQuoteProvider(fetcher, urls)

        result = await provider.fetch_quote(SP500)

        assert result.quotes == ()

    async def test_http_error_is_failure(self, fetcher, urls):
        """Test that a non-success status is a failure for this symbol."""
        fetcher.add("symbol=^GSPC", status=429, json={})
        provider = YahooQuoteProvider(fetcher, urls)

        result = await provider.fetch_quote(SP500)

        assert not result.ok
        assert result.error == "HTTP 429"

    async def test_network_error_is_failure(self, fetcher, urls):
        """Test that transport exceptions don't escape the provider."""
        fetcher.add("symbol=^GSPC", exc=httpx.ReadTimeout("timed out"))
        provider = YahooQuoteProvider(fetcher, urls)

        result = await provider.fetch_quote(SP500)

        assert not result.ok
        assert result.quotes == ()

    async def test_requests_one_symbol(self, fetcher, urls):
        """Test that the request URL names only the given symbol."""
        fetcher.add("symbol=GC=F", json=_chart(2300.0))
        provider = YahooQuoteProvider(fetcher, urls)

        await provider.fetch_quote(QuoteRequest(symbol="GC=F", name="Gold", display="GOLD"))

        assert fetcher.calls == ["http://relay.test/api/yahoo-finance?symbol=GC=F"]
