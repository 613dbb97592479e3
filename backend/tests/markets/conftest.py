"""Fixtures for market data tests.

Provides a fake fetcher so providers can be exercised against canned relay
responses without any network access.
"""

import asyncio
from urllib.parse import unquote

import httpx
import pytest

from app.markets.urls import ProviderUrls


class FakeFetcher:
    """Async stand-in for HttpTransport.

    Routes are matched by substring against the decoded URL, first match wins.
    Unmatched URLs get a 404. Tracks every call and peak concurrency.
    """

    def __init__(self) -> None:
        self.routes: list[tuple[str, object]] = []
        self.calls: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0
        self.delay = 0.0

    def add(self, match: str, *, json=None, status: int = 200, exc: Exception | None = None) -> None:
        outcome = exc if exc is not None else httpx.Response(status, json=json)
        self.routes.append((match, outcome))

    async def __call__(self, url: str) -> httpx.Response:
        decoded = unquote(url)
        self.calls.append(decoded)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            for match, outcome in self.routes:
                if match in decoded:
                    if isinstance(outcome, Exception):
                        raise outcome
                    return outcome
            return httpx.Response(404, json={"error": "not found"})
        finally:
            self.in_flight -= 1


@pytest.fixture
def fetcher() -> FakeFetcher:
    return FakeFetcher()


@pytest.fixture
def urls() -> ProviderUrls:
    return ProviderUrls(base_url="http://relay.test")
