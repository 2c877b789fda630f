"""Facade demo and self-test."""
from decimal import Decimal

from patterns_playground.domain import (
    CancelOrderRequest,
    OrderSide,
    PatternDemoResponse,
    PatternTestResponse,
    PlaceOrderRequest,
    ReplaceOrderRequest,
    check,
)

from .trading_facade import TradingFacade

PATTERN = "Facade"


class FacadeScenario:
    def __init__(self, facade: TradingFacade):
        self.facade = facade

    async def run_demo(self) -> PatternDemoResponse:
        placed = await self.facade.place_order(
            PlaceOrderRequest(
                account_id="ACC-001",
                symbol="AAPL",
                side=OrderSide.BUY,
                quantity=Decimal("100"),
                limit_price=Decimal("150"),
            )
        )
        steps = [{"action": "Place Order", "result": placed}]

        if placed.success and placed.order is not None:
            replaced = await self.facade.replace_order(
                ReplaceOrderRequest(
                    order_id=placed.order.order_id,
                    account_id="ACC-001",
                    new_price=Decimal("149.50"),
                )
            )
            steps.append({"action": "Replace Order", "result": replaced})

            cancelled = await self.facade.cancel_order(
                CancelOrderRequest(order_id=placed.order.order_id, account_id="ACC-001")
            )
            steps.append({"action": "Cancel Order", "result": cancelled})

        return PatternDemoResponse(
            pattern=PATTERN,
            description=(
                "Demonstrates facade pattern: one trading interface over validation, "
                "command execution, persistence and event publishing."
            ),
            result=steps,
            metadata={
                "subsystems": ["Validator Factory", "Command Handler", "Order Repository", "Event Bus"],
            },
        )

    async def run_tests(self) -> PatternTestResponse:
        checks = []

        placed = await self.facade.place_order(
            PlaceOrderRequest(
                account_id="ACC-TEST",
                symbol="TEST",
                side=OrderSide.BUY,
                quantity=Decimal("10"),
                limit_price=Decimal("100"),
            )
        )
        checks.append(
            check(
                "Place Valid Order",
                placed.success and placed.order is not None,
                f"Order placed: {placed.success}",
            )
        )

        rejected = await self.facade.place_order(
            PlaceOrderRequest(
                account_id="ACC-TEST",
                symbol="",
                side=OrderSide.BUY,
                quantity=Decimal("-10"),
                limit_price=Decimal("100"),
            )
        )
        checks.append(
            check(
                "Reject Invalid Order",
                not rejected.success and len(rejected.errors) > 0,
                f"Validation errors: {rejected.errors}",
            )
        )

        if placed.order is not None:
            foreign = await self.facade.cancel_order(
                CancelOrderRequest(order_id=placed.order.order_id, account_id="ACC-OTHER")
            )
            checks.append(
                check(
                    "Cancel Requires Owner",
                    not foreign.success and foreign.error_message == "Unauthorized",
                    f"Cancel by another account: {foreign.error_message}",
                )
            )

            cancelled = await self.facade.cancel_order(
                CancelOrderRequest(order_id=placed.order.order_id, account_id="ACC-TEST")
            )
            checks.append(
                check("Cancel Order", cancelled.success, f"Order cancelled: {cancelled.success}")
            )
        else:
            checks.append(check("Cancel Order", False, "No order was placed to cancel"))

        return PatternTestResponse.from_checks(PATTERN, checks)
