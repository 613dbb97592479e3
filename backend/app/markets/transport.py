"""HTTP transport shared by all quote providers."""

from __future__ import annotations

import logging

import httpx

logger = logging.getLogger(__name__)


class HttpTransport:
    """Thin wrapper over ``httpx.AsyncClient`` used as the providers' fetcher.

    Instances are callables: ``await transport(url)`` returns the raw
    response. Status handling and JSON decoding are left to the providers.
    Timeout and proxy policy live here, not in the aggregation core.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        proxy: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=timeout,
            proxy=proxy,
            headers={"Accept": "application/json"},
            follow_redirects=True,
        )

    async def __call__(self, url: str) -> httpx.Response:
        logger.debug("GET %s", url)
        return await self._client.get(url)

    async def aclose(self) -> None:
        """Close the underlying client if this transport created it. Safe to call twice."""
        if self._owns_client and not self._client.is_closed:
            await self._client.aclose()
            logger.info("HTTP transport closed")
