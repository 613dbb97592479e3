"""Abstract interfaces for quote providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable

import httpx

from .models import ProviderResult, QuoteRequest

# Fetch collaborator: takes a fully-formed URL, returns the HTTP response.
# May raise on network errors; providers treat that as a failed call.
Fetcher = Callable[[str], Awaitable[httpx.Response]]


class BatchQuoteProvider(ABC):
    """Contract for providers that quote many symbols in a single call.

    Implementations must never raise. Transport errors, non-success statuses
    and provider-reported errors all come back as ``ProviderResult.failure``.
    Entries the provider could not price are dropped, not returned as
    placeholders.
    """

    @abstractmethod
    async def fetch_quotes(self, requests: list[QuoteRequest]) -> ProviderResult:
        """Quote all requested symbols with one upstream call.

        Quotes are returned in the provider's response order.
        """


class SingleQuoteProvider(ABC):
    """Contract for providers that quote one symbol per call.

    The caller is responsible for running calls for different symbols
    concurrently. A failure for one symbol must not affect any other.
    """

    @abstractmethod
    async def fetch_quote(self, request: QuoteRequest) -> ProviderResult:
        """Quote a single symbol.

        Returns a success with no quotes when the provider has no data for
        the symbol, and a failure on transport or parse errors.
        """
