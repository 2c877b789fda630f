"""Factory Method demo and self-test."""
from decimal import Decimal

from patterns_playground.domain import (
    Order,
    OrderSide,
    PatternDemoResponse,
    PatternTestResponse,
    check,
)

from .contracts import OrderValidatorFactory

PATTERN = "Factory Method"


def _order(order_id: str, symbol: str, quantity: int, price: int) -> Order:
    return Order(
        order_id=order_id,
        account_id="ACC-001",
        symbol=symbol,
        side=OrderSide.BUY,
        quantity=Decimal(quantity),
        price=Decimal(price),
    )


class FactoryMethodScenario:
    def __init__(self, factory: OrderValidatorFactory):
        self.factory = factory

    def run_demo(self) -> PatternDemoResponse:
        results = []
        for label, order in (
            ("Standard", _order("ORD-001", "AAPL", 100, 150)),
            ("Large", _order("ORD-002", "MSFT", 1000, 300)),
        ):
            validator = self.factory.create_validator(order)
            outcome = validator.validate(order)
            results.append(
                {
                    "order_type": label,
                    "order_value": order.value,
                    "validator_type": validator.validator_type,
                    "is_valid": outcome.is_valid,
                    "errors": outcome.errors,
                }
            )

        return PatternDemoResponse(
            pattern=PATTERN,
            description=(
                "Demonstrates factory method pattern: different validators created "
                "based on order characteristics."
            ),
            result=results,
            metadata={
                "factory_type": type(self.factory).__name__,
                "extensibility": "New validator types plug in without touching callers",
            },
        )

    def run_tests(self) -> PatternTestResponse:
        checks = []

        standard_order = _order("TEST-001", "AAPL", 10, 100)
        standard = self.factory.create_validator(standard_order)
        checks.append(
            check(
                "Standard Order Validator",
                standard.validator_type == "Standard",
                f"Created {standard.validator_type} validator for standard order",
            )
        )

        large_order = _order("TEST-002", "MSFT", 1000, 200)
        large = self.factory.create_validator(large_order)
        checks.append(
            check(
                "Large Order Validator",
                large.validator_type == "LargeOrder",
                f"Created {large.validator_type} validator for large order "
                f"(value: {large_order.value})",
            )
        )

        outcome = standard.validate(standard_order)
        checks.append(
            check(
                "Validation Works",
                outcome.is_valid,
                f"Standard validator returned is_valid={outcome.is_valid}",
            )
        )

        bad_order = _order("TEST-003", "AAPL", 0, 100)
        rejected = self.factory.create_validator(bad_order).validate(bad_order)
        checks.append(
            check(
                "Rejects Zero Quantity",
                not rejected.is_valid,
                f"Errors: {', '.join(rejected.errors)}",
            )
        )

        return PatternTestResponse.from_checks(PATTERN, checks)
