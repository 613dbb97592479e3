"""Static symbol tables: provider routing, crypto coins and the default watchlist."""

from .models import QuoteRequest

# Indices and futures the primary provider's free tier does not cover.
# These are always quoted through the secondary (per-symbol) provider.
SECONDARY_ONLY_SYMBOLS: frozenset[str] = frozenset(
    {
        "^GSPC",
        "^DJI",
        "^IXIC",
        "^VIX",
        "GC=F",  # Gold futures
        "CL=F",  # Crude oil futures
        "NG=F",  # Natural gas futures
        "SI=F",  # Silver futures
        "HG=F",  # Copper futures
    }
)

# Coin id (as the crypto provider names it) -> display info.
# Output order of the crypto pipeline follows this table.
CRYPTO_MAP: dict[str, dict[str, str]] = {
    "bitcoin": {"name": "Bitcoin", "symbol": "BTC"},
    "ethereum": {"name": "Ethereum", "symbol": "ETH"},
    "solana": {"name": "Solana", "symbol": "SOL"},
}

# Quoted when a caller does not name its own symbols
DEFAULT_MARKET_SYMBOLS: list[QuoteRequest] = [
    QuoteRequest(symbol="^GSPC", name="S&P 500", display="SPX"),
    QuoteRequest(symbol="^DJI", name="Dow Jones", display="DOW"),
    QuoteRequest(symbol="^IXIC", name="NASDAQ", display="NDX"),
    QuoteRequest(symbol="^VIX", name="Volatility Index", display="VIX"),
    QuoteRequest(symbol="AAPL", name="Apple", display="AAPL"),
    QuoteRequest(symbol="MSFT", name="Microsoft", display="MSFT"),
    QuoteRequest(symbol="NVDA", name="NVIDIA", display="NVDA"),
    QuoteRequest(symbol="GOOGL", name="Alphabet", display="GOOGL"),
    QuoteRequest(symbol="AMZN", name="Amazon", display="AMZN"),
    QuoteRequest(symbol="META", name="Meta", display="META"),
    QuoteRequest(symbol="TSLA", name="Tesla", display="TSLA"),
    QuoteRequest(symbol="JPM", name="JPMorgan Chase", display="JPM"),
    QuoteRequest(symbol="GC=F", name="Gold", display="GOLD"),
    QuoteRequest(symbol="CL=F", name="Crude Oil", display="OIL"),
    QuoteRequest(symbol="NG=F", name="Natural Gas", display="NATGAS"),
    QuoteRequest(symbol="SI=F", name="Silver", display="SILVER"),
    QuoteRequest(symbol="HG=F", name="Copper", display="COPPER"),
]
