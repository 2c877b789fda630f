"""Adapter: legacy market data behind a modern async interface."""
from .contracts import LegacyMarketDataSource, LegacyQuote, MarketDataProvider
from .market_data import LegacyMarketDataProvider, MarketDataAdapter
from .scenario import AdapterScenario

__all__ = [
    "AdapterScenario",
    "LegacyMarketDataProvider",
    "LegacyMarketDataSource",
    "LegacyQuote",
    "MarketDataAdapter",
    "MarketDataProvider",
]
