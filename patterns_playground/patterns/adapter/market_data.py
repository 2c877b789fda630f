"""
Legacy market data feed and the adapter that modernizes it.

The legacy feed is blocking and returns floats plus a millisecond
epoch timestamp; the adapter runs it off the event loop and converts
the tuple into a Quote with Decimal prices and an aware datetime.
"""
import asyncio
import random
import threading
import time
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

import structlog

from patterns_playground.domain import Quote

from .contracts import LegacyMarketDataSource, LegacyQuote

logger = structlog.get_logger(__name__)


class LegacyMarketDataProvider:
    """Simulated legacy feed: base price in [100, 150) with a fixed 1.0 spread."""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng if rng is not None else random.Random(50)
        self._lock = threading.Lock()

    def get_quote_data(self, symbol: str) -> LegacyQuote:
        with self._lock:
            base_price = 100.0 + self._rng.random() * 50
        timestamp_ms = int(time.time() * 1000)
        return symbol, base_price - 0.5, base_price + 0.5, timestamp_ms


class MarketDataAdapter:
    """Exposes a legacy source through the async MarketDataProvider interface."""

    def __init__(self, legacy_source: LegacyMarketDataSource):
        self.legacy_source = legacy_source

    async def get_quote(self, symbol: str) -> Quote:
        symbol, bid, ask, timestamp_ms = await asyncio.to_thread(
            self.legacy_source.get_quote_data, symbol
        )

        quote = Quote(
            symbol=symbol,
            bid=_to_decimal(bid),
            ask=_to_decimal(ask),
            last=_to_decimal((bid + ask) / 2),
            timestamp=datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc),
        )
        logger.debug("legacy_quote_adapted", symbol=symbol, bid=str(quote.bid), ask=str(quote.ask))
        return quote


def _to_decimal(value: float) -> Decimal:
    return Decimal(str(round(value, 4)))
