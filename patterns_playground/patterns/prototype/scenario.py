"""Prototype demo and self-test."""
from decimal import Decimal

from patterns_playground.domain import (
    Money,
    Order,
    OrderSide,
    PatternDemoResponse,
    PatternTestResponse,
    check,
)

from .snapshots import OrderSnapshot, PortfolioSnapshot

PATTERN = "Prototype"

DEMO_PRICES = {"AAPL": Decimal("155"), "MSFT": Decimal("310")}


def _order(order_id: str, symbol: str, quantity: int, price: int) -> Order:
    return Order(
        order_id=order_id,
        account_id="ACC-001",
        symbol=symbol,
        side=OrderSide.BUY,
        quantity=Decimal(quantity),
        price=Decimal(price),
    )


class PrototypeScenario:
    def run_demo(self) -> PatternDemoResponse:
        original = OrderSnapshot(
            _order("ORD-PROTO-001", "AAPL", 100, 150),
            {"strategy": "momentum", "backtest_run": 1},
        )
        clone = original.clone()
        clone.metadata["backtest_run"] = 2

        portfolio = PortfolioSnapshot(
            account_id="ACC-001",
            orders=[original, OrderSnapshot(_order("ORD-PROTO-002", "MSFT", 50, 300))],
            positions={"AAPL": Decimal("100"), "MSFT": Decimal("50")},
            cash_balance=Money(amount=Decimal("100000"), currency="USD"),
        )
        scenario_copy = portfolio.clone()
        scenario_copy.positions["AAPL"] = Decimal("200")

        return PatternDemoResponse(
            pattern=PATTERN,
            description=(
                "Demonstrates prototype pattern: snapshots are cloned so backtests can "
                "mutate copies without touching the original."
            ),
            result={
                "original_snapshot": original.to_dict(),
                "cloned_snapshot": clone.to_dict(),
                "portfolio_value": portfolio.total_position_value(DEMO_PRICES),
                "what_if_portfolio_value": scenario_copy.total_position_value(DEMO_PRICES),
            },
            metadata={"copy_semantics": "deep", "use_case": "Backtesting and what-if analysis"},
        )

    def run_tests(self) -> PatternTestResponse:
        checks = []

        original = OrderSnapshot(_order("ORD-PROTO-TEST", "TEST", 10, 100), {"tags": ["a"]})
        clone = original.clone()
        clone.metadata["tags"].append("b")
        clone.metadata["extra"] = True
        checks.append(
            check(
                "Metadata Independence",
                original.metadata == {"tags": ["a"]},
                f"Original metadata after mutating clone: {original.metadata}",
            )
        )

        checks.append(
            check(
                "Order Copied",
                clone.order == original.order and clone.order is not original.order,
                f"Cloned order {clone.order.order_id}",
            )
        )

        portfolio = PortfolioSnapshot(
            account_id="ACC-TEST",
            orders=[original],
            positions={"TEST": Decimal("10")},
            cash_balance=Money.zero("USD"),
        )
        portfolio_clone = portfolio.clone()
        portfolio_clone.positions["TEST"] = Decimal("99")
        checks.append(
            check(
                "Portfolio Independence",
                portfolio.positions["TEST"] == Decimal("10"),
                f"Original position: {portfolio.positions['TEST']}",
            )
        )

        value = portfolio.total_position_value({"TEST": Decimal("5")})
        checks.append(
            check(
                "Position Valuation",
                value.amount == Decimal("50") and value.currency == "USD",
                f"Portfolio value: {value.amount} {value.currency}",
            )
        )

        return PatternTestResponse.from_checks(PATTERN, checks)
