"""URL builders for the provider relay endpoints."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from urllib.parse import quote, urlencode


@dataclass(frozen=True, slots=True)
class ProviderUrls:
    """Builds request URLs against a relay that fronts each upstream provider.

    The relay holds the provider API keys, so none appear in these URLs.
    """

    base_url: str

    def _url(self, path: str, params: dict[str, str]) -> str:
        # The relay splits symbol lists on literal commas
        query = urlencode(params, safe=",", quote_via=quote)
        return f"{self.base_url.rstrip('/')}{path}?{query}"

    def primary(self, symbols: Iterable[str]) -> str:
        """Batch quote URL for the primary provider."""
        return self._url("/api/finnhub", {"symbols": ",".join(symbols)})

    def secondary(self, symbol: str) -> str:
        """Chart URL for one symbol on the secondary provider."""
        return self._url("/api/yahoo-finance", {"symbol": symbol})

    def crypto(self, coin_ids: Iterable[str]) -> str:
        """Simple-price URL for the crypto provider (USD with 24h change)."""
        return self._url(
            "/api/coingecko",
            {
                "ids": ",".join(coin_ids),
                "vs_currencies": "usd",
                "include_24hr_change": "true",
            },
        )
