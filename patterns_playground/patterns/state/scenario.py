"""State demo and self-test."""
from decimal import Decimal
from typing import Callable, List

from patterns_playground.domain import (
    Order,
    OrderSide,
    OrderStatus,
    PatternCheck,
    PatternDemoResponse,
    PatternTestResponse,
    check,
)

from .contracts import InvalidStateTransitionError
from .order_states import OrderStateMachine

PATTERN = "State"


def _order(order_id: str) -> Order:
    return Order(
        order_id=order_id,
        account_id="ACC-001",
        symbol="AAPL",
        side=OrderSide.BUY,
        quantity=Decimal("100"),
        price=Decimal("150"),
    )


def _raises(action: Callable[[], Order]) -> bool:
    try:
        action()
    except InvalidStateTransitionError:
        return True
    return False


class StateScenario:
    def run_demo(self) -> PatternDemoResponse:
        machine = OrderStateMachine(_order("ORD-STATE-001"))
        steps = [{"step": "Created", "status": machine.order.status}]

        machine.place()
        steps.append({"step": "Place", "status": machine.order.status})

        machine.fill(Decimal("40"))
        steps.append({"step": "Fill 40", "status": machine.order.status})

        machine.fill(Decimal("100"))
        steps.append({"step": "Fill 100", "status": machine.order.status})

        try:
            machine.cancel()
        except InvalidStateTransitionError as e:
            steps.append({"step": "Cancel", "error": str(e)})

        return PatternDemoResponse(
            pattern=PATTERN,
            description=(
                "Demonstrates state pattern: order behaviour changes with its lifecycle "
                "state and invalid transitions are refused."
            ),
            result=steps,
            metadata={
                "states": [status.value for status in OrderStatus if status != OrderStatus.VALIDATED],
                "terminal_states": ["Filled", "Cancelled", "Rejected"],
                "row_version": machine.order.row_version,
            },
        )

    def run_tests(self) -> PatternTestResponse:
        checks: List[PatternCheck] = []

        machine = OrderStateMachine(_order("ORD-STATE-TEST"))
        checks.append(
            check(
                "Pending Cannot Fill",
                _raises(lambda: machine.fill(Decimal("10"))),
                "Fill before place is refused",
            )
        )

        placed = machine.place()
        checks.append(
            check("Place Order", placed.status == OrderStatus.PLACED, f"Status: {placed.status.value}")
        )

        partial = machine.fill(Decimal("25"))
        checks.append(
            check(
                "Partial Fill",
                partial.status == OrderStatus.PARTIALLY_FILLED,
                f"Status: {partial.status.value}",
            )
        )

        filled = machine.fill(Decimal("100"))
        checks.append(
            check("Full Fill", filled.status == OrderStatus.FILLED, f"Status: {filled.status.value}")
        )

        terminal = all(
            _raises(action)
            for action in (machine.cancel, lambda: machine.fill(Decimal("1")), machine.reject)
        )
        checks.append(
            check("Filled Is Terminal", terminal, "Cancel, fill and reject all refused after fill")
        )

        rejected = OrderStateMachine(_order("ORD-STATE-REJ")).reject()
        checks.append(
            check(
                "Reject Pending Order",
                rejected.status == OrderStatus.REJECTED,
                f"Status: {rejected.status.value}",
            )
        )

        return PatternTestResponse.from_checks(PATTERN, checks)
