"""Data models for market quotes."""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True, slots=True)
class QuoteRequest:
    """A symbol to quote, plus presentation metadata carried through untouched."""

    symbol: str
    name: str
    display: str


@dataclass(frozen=True, slots=True)
class MarketQuote:
    """Canonical quote record for equities, indices and commodities.

    ``price`` and ``change`` are None only for placeholder quotes produced by
    the single-symbol lookup when no provider resolved the symbol.
    """

    symbol: str
    name: str
    display: str
    price: float | None
    change: float | None  # Percent change vs. previous close

    @classmethod
    def placeholder(cls, symbol: str, name: str, display: str) -> MarketQuote:
        """Quote with no price data, for symbols no provider could resolve."""
        return cls(symbol=symbol, name=name, display=display, price=None, change=None)

    def to_dict(self) -> dict:
        """Serialize for JSON transmission."""
        return asdict(self)


@dataclass(frozen=True, slots=True)
class CryptoQuote:
    """Quote for a configured coin. Missing provider data defaults to 0."""

    name: str
    symbol: str
    price: float = 0.0
    change: float = 0.0  # 24h percent change

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class ProviderResult:
    """Outcome of a single provider call.

    A successful call carries zero or more quotes. A failed call carries the
    reason and no quotes; callers decide how to treat it.
    """

    quotes: tuple[MarketQuote, ...] = ()
    error: str | None = None

    @classmethod
    def success(cls, quotes: list[MarketQuote] | tuple[MarketQuote, ...] = ()) -> ProviderResult:
        return cls(quotes=tuple(quotes))

    @classmethod
    def failure(cls, reason: str) -> ProviderResult:
        return cls(error=reason)

    @property
    def ok(self) -> bool:
        return self.error is None
