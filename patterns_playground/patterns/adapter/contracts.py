"""Legacy and modern market data interfaces."""
from typing import Protocol, Tuple

from patterns_playground.domain import Quote

# (symbol, bid, ask, unix timestamp in milliseconds)
LegacyQuote = Tuple[str, float, float, int]


class LegacyMarketDataSource(Protocol):
    """Old synchronous API returning a bare tuple."""

    def get_quote_data(self, symbol: str) -> LegacyQuote:
        ...


class MarketDataProvider(Protocol):
    """Modern async API returning a Quote."""

    async def get_quote(self, symbol: str) -> Quote:
        ...
