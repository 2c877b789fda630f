"""Chain of Responsibility demo and self-test."""
from decimal import Decimal

from patterns_playground.domain import (
    Order,
    OrderSide,
    PatternDemoResponse,
    PatternTestResponse,
    check,
)

from .contracts import OrderValidationHandler

PATTERN = "Chain of Responsibility"


def _order(order_id: str, account_id: str, quantity: str, price: str, symbol: str = "AAPL") -> Order:
    return Order(
        order_id=order_id,
        account_id=account_id,
        symbol=symbol,
        side=OrderSide.BUY,
        quantity=Decimal(quantity),
        price=Decimal(price),
    )


class ChainOfResponsibilityScenario:
    def __init__(self, chain: OrderValidationHandler):
        self.chain = chain

    async def run_demo(self) -> PatternDemoResponse:
        cases = [
            ("Valid Order", _order("ORD-COR-001", "ACC-001", "100", "150")),
            ("Invalid Quantity", _order("ORD-COR-002", "ACC-001", "0", "150")),
            ("Exceeds Risk Limit", _order("ORD-COR-003", "ACC-001", "10000", "150")),
            ("Unknown Account", _order("ORD-COR-004", "ACC-999", "100", "150")),
        ]

        results = []
        for name, order in cases:
            outcome = await self.chain.handle(order)
            results.append(
                {
                    "case": name,
                    "order_id": order.order_id,
                    "is_valid": outcome.is_valid,
                    "errors": outcome.errors,
                }
            )

        return PatternDemoResponse(
            pattern=PATTERN,
            description=(
                "Demonstrates chain of responsibility: each validator handles its own "
                "concern and passes the order on, stopping at the first failure."
            ),
            result=results,
            metadata={"chain": ["Basic", "Risk", "Account"]},
        )

    async def run_tests(self) -> PatternTestResponse:
        checks = []

        valid = await self.chain.handle(_order("ORD-COR-T1", "ACC-001", "10", "100"))
        checks.append(check("Valid Order Passes", valid.is_valid, f"Errors: {valid.errors}"))

        oversized = await self.chain.handle(_order("ORD-COR-T2", "ACC-001", "10000", "150"))
        checks.append(
            check(
                "Risk Limit Enforced",
                not oversized.is_valid
                and len(oversized.errors) == 1
                and "exceeds maximum" in oversized.errors[0],
                f"Errors: {oversized.errors}",
            )
        )

        unknown = await self.chain.handle(_order("ORD-COR-T3", "ACC-999", "10", "100"))
        checks.append(
            check(
                "Account Must Exist",
                unknown.errors == ["Account ACC-999 not found"],
                f"Errors: {unknown.errors}",
            )
        )

        stops_early = await self.chain.handle(_order("ORD-COR-T4", "ACC-999", "0", "100"))
        checks.append(
            check(
                "Stops At First Failure",
                stops_early.errors == ["Quantity must be greater than zero"],
                f"Errors: {stops_early.errors}",
            )
        )

        return PatternTestResponse.from_checks(PATTERN, checks)
