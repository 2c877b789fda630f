"""
Unit tests for the market data adapter.
"""
import random
from decimal import Decimal

import pytest

from patterns_playground.patterns.adapter import LegacyMarketDataProvider, MarketDataAdapter


class FixedLegacySource:
    def get_quote_data(self, symbol: str):
        return symbol, 99.5, 100.5, 1_700_000_000_000


class TestMarketDataAdapter:
    """Test suite for MarketDataAdapter."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_converts_legacy_tuple(self) -> None:
        """Test the legacy tuple becomes a Decimal quote with a UTC timestamp."""
        quote = await MarketDataAdapter(FixedLegacySource()).get_quote("AAPL")

        assert quote.symbol == "AAPL"
        assert quote.bid == Decimal("99.5")
        assert quote.ask == Decimal("100.5")
        assert quote.last == Decimal("100.0")
        assert quote.timestamp.year == 2023
        assert quote.timestamp.tzinfo is not None

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_legacy_provider_spread(self) -> None:
        """Test the simulated legacy feed keeps a one-unit spread in range."""
        adapter = MarketDataAdapter(LegacyMarketDataProvider(rng=random.Random(1)))

        quote = await adapter.get_quote("MSFT")

        assert abs(quote.spread - Decimal("1")) <= Decimal("0.0001")
        assert Decimal("99.5") <= quote.bid < Decimal("149.5")
