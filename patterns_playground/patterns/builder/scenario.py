"""Builder demo and self-test."""
from typing import Callable

from patterns_playground.domain import (
    OrderSide,
    PatternDemoResponse,
    PatternTestResponse,
    check,
)

from .contracts import OrderBuildError
from .order_builder import OrderBuilder

PATTERN = "Builder"


class BuilderScenario:
    def __init__(self, builder_factory: Callable[[], OrderBuilder] = OrderBuilder):
        self.builder_factory = builder_factory

    def run_demo(self) -> PatternDemoResponse:
        builder = self.builder_factory()

        simple = (
            builder.reset()
            .with_account("ACC-001")
            .with_symbol("AAPL")
            .with_side(OrderSide.BUY)
            .with_quantity(100)
            .with_price(150)
            .build()
        )
        limit = (
            builder.reset()
            .with_account("ACC-002")
            .with_symbol("MSFT")
            .with_side(OrderSide.SELL)
            .with_quantity(500)
            .with_limit_price(305)
            .build()
        )

        return PatternDemoResponse(
            pattern=PATTERN,
            description=(
                "Demonstrates builder pattern: fluent interface for constructing "
                "complex Order objects step-by-step."
            ),
            result=[
                {"type": "Simple Order", "order": simple},
                {"type": "Limit Order", "order": limit},
            ],
            metadata={
                "fluent_interface": True,
                "validation": "Builder validates required fields before building",
            },
        )

    def run_tests(self) -> PatternTestResponse:
        checks = []
        builder = self.builder_factory()

        order = (
            builder.reset()
            .with_account("ACC-TEST")
            .with_symbol("TEST")
            .with_side(OrderSide.BUY)
            .with_quantity(10)
            .with_price(100)
            .build()
        )
        checks.append(
            check(
                "Builder Creates Valid Order",
                order.order_id.startswith("ORD-"),
                f"Created order {order.order_id}",
            )
        )
        checks.append(
            check(
                "Order Values Correct",
                order.account_id == "ACC-TEST" and order.symbol == "TEST" and order.quantity == 10,
                f"Order values match: account={order.account_id}, symbol={order.symbol}, "
                f"quantity={order.quantity}",
            )
        )

        try:
            builder.reset().with_account("ACC-TEST").build()
            checks.append(
                check("Builder Validation", False, "Builder should reject missing required fields")
            )
        except OrderBuildError as e:
            checks.append(check("Builder Validation", True, f"Builder rejected order: {e}"))

        return PatternTestResponse.from_checks(PATTERN, checks)
