"""Strategy demo and self-test."""
from decimal import Decimal

from patterns_playground.domain import (
    Order,
    OrderSide,
    PatternDemoResponse,
    PatternTestResponse,
    Quote,
    check,
)

from .pricing import PricingStrategySelector

PATTERN = "Strategy"


def _buy(order_id: str, symbol: str, quantity: str, price: str) -> Order:
    return Order(
        order_id=order_id,
        account_id="ACC-001",
        symbol=symbol,
        side=OrderSide.BUY,
        quantity=Decimal(quantity),
        price=Decimal(price),
    )


class StrategyScenario:
    def __init__(self, selector: PricingStrategySelector):
        self.selector = selector

    def run_demo(self) -> PatternDemoResponse:
        quote = Quote(
            symbol="AAPL", bid=Decimal("150"), ask=Decimal("150.5"), last=Decimal("150.25")
        )

        results = []
        for strategy in self.selector.strategies:
            order = _buy(f"ORD-{strategy.name}", "AAPL", "100", "150")
            results.append(
                {
                    "strategy": strategy.name,
                    "order_value": order.value,
                    "calculated_price": strategy.calculate_price(order, quote),
                    "market_bid": quote.bid,
                    "market_ask": quote.ask,
                }
            )

        large_order = _buy("ORD-LARGE", "MSFT", "10000", "300")
        results.append(
            {
                "selection": "Strategy Selection",
                "order_value": large_order.value,
                "selected_strategy": self.selector.select_strategy(large_order).name,
            }
        )

        return PatternDemoResponse(
            pattern=PATTERN,
            description=(
                "Demonstrates strategy pattern: different pricing algorithms selected "
                "at runtime based on order characteristics."
            ),
            result=results,
            metadata={
                "strategy_count": len(self.selector.strategies),
                "runtime_selection": True,
            },
        )

    def run_tests(self) -> PatternTestResponse:
        checks = []
        quote = Quote(
            symbol="TEST", bid=Decimal("100"), ask=Decimal("100.5"), last=Decimal("100.25")
        )
        order = _buy("ORD-TEST", "TEST", "10", "100")

        for strategy in self.selector.strategies:
            price = strategy.calculate_price(order, quote)
            checks.append(
                check(
                    f"{strategy.name} Calculates Price",
                    price > 0,
                    f"{strategy.name} calculated price: {price}",
                )
            )

        expectations = [
            (_buy("ORD-RISK", "TEST", "10000", "100"), "RiskAdjusted"),
            (order, "LimitPrice"),
            (_buy("ORD-VWAP", "TEST", "2000", "0"), "VWAP"),
            (_buy("ORD-MKT", "TEST", "10", "0"), "MarketPrice"),
        ]
        for candidate, expected in expectations:
            selected = self.selector.select_strategy(candidate).name
            checks.append(
                check(
                    f"Selects {expected}",
                    selected == expected,
                    f"Order value {candidate.value}, quantity {candidate.quantity}: {selected}",
                )
            )

        return PatternTestResponse.from_checks(PATTERN, checks)
