"""CoinGecko simple-price client for the crypto ticker."""

from __future__ import annotations

import logging

from .interface import Fetcher
from .models import CryptoQuote
from .symbols import CRYPTO_MAP
from .urls import ProviderUrls

logger = logging.getLogger(__name__)


class CoinGeckoClient:
    """Fetches USD prices and 24h change for every configured coin in one call.

    Output follows ``coins`` (not the response), so every configured coin is
    always present; coins the provider omits get price and change 0. Any
    failure yields an empty list. Unlike equities there is no stale fallback.
    """

    def __init__(
        self,
        fetch: Fetcher,
        urls: ProviderUrls,
        coins: dict[str, dict[str, str]] = CRYPTO_MAP,
    ) -> None:
        self._fetch = fetch
        self._urls = urls
        self._coins = coins

    async def fetch_crypto(self) -> list[CryptoQuote]:
        try:
            response = await self._fetch(self._urls.crypto(self._coins))
            if not response.is_success:
                raise ValueError(f"HTTP {response.status_code}")
            payload = response.json()
            if not isinstance(payload, dict):
                raise ValueError(f"unexpected payload type {type(payload).__name__}")

            quotes = []
            for coin_id, info in self._coins.items():
                entry = payload.get(coin_id)
                coin = entry if isinstance(entry, dict) else {}
                price = coin.get("usd")
                change = coin.get("usd_24h_change")
                quotes.append(
                    CryptoQuote(
                        name=info["name"],
                        symbol=info["symbol"],
                        price=price if price is not None else 0.0,
                        change=change if change is not None else 0.0,
                    )
                )
        except Exception as e:
            logger.error("Failed to fetch crypto: %s", e)
            return []

        return quotes
