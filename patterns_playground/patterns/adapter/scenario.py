"""Adapter demo and self-test."""
from patterns_playground.domain import (
    PatternDemoResponse,
    PatternTestResponse,
    check,
    utc_now,
)

from .contracts import MarketDataProvider

PATTERN = "Adapter"


class AdapterScenario:
    def __init__(self, provider: MarketDataProvider):
        self.provider = provider

    async def run_demo(self) -> PatternDemoResponse:
        quotes = []
        for symbol in ("AAPL", "MSFT", "GOOGL"):
            quote = await self.provider.get_quote(symbol)
            quotes.append(
                {
                    "symbol": quote.symbol,
                    "bid": quote.bid,
                    "ask": quote.ask,
                    "last": quote.last,
                    "spread": quote.spread,
                    "timestamp": quote.timestamp,
                }
            )

        return PatternDemoResponse(
            pattern=PATTERN,
            description=(
                "Demonstrates adapter pattern: a legacy synchronous tuple-based market "
                "data API exposed through a modern async Quote interface."
            ),
            result=quotes,
            metadata={
                "legacy_format": "(symbol, bid, ask, timestamp_ms)",
                "modern_format": "Quote",
            },
        )

    async def run_tests(self) -> PatternTestResponse:
        checks = []

        quote = await self.provider.get_quote("TEST")
        checks.append(
            check("Adapter Returns Quote", quote.symbol == "TEST", f"Retrieved quote for {quote.symbol}")
        )
        checks.append(
            check(
                "Quote Values Valid",
                quote.bid > 0 and quote.ask > quote.bid,
                f"Bid={quote.bid}, Ask={quote.ask}, Spread={quote.spread}",
            )
        )

        age = (utc_now() - quote.timestamp).total_seconds()
        checks.append(
            check("Quote Timestamp Recent", age < 5, f"Timestamp is {age:.2f} seconds ago")
        )

        return PatternTestResponse.from_checks(PATTERN, checks)
