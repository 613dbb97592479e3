"""Routing of quote requests to the provider that can serve them."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

from .models import QuoteRequest
from .symbols import SECONDARY_ONLY_SYMBOLS


class RoutedRequests(NamedTuple):
    """Requests split by provider. Both lists keep the input order."""

    primary: list[QuoteRequest]
    secondary: list[QuoteRequest]


def is_secondary_only(symbol: str, secondary_only: frozenset[str] = SECONDARY_ONLY_SYMBOLS) -> bool:
    return symbol in secondary_only


def partition_requests(
    requests: Iterable[QuoteRequest],
    secondary_only: frozenset[str] = SECONDARY_ONLY_SYMBOLS,
) -> RoutedRequests:
    """Split requests into primary-eligible and secondary-only partitions.

    Every request lands in exactly one partition.
    """
    routed = RoutedRequests(primary=[], secondary=[])
    for request in requests:
        if is_secondary_only(request.symbol, secondary_only):
            routed.secondary.append(request)
        else:
            routed.primary.append(request)
    return routed
