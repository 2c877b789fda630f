"""
Concrete order states and the machine that drives them.

Transitions:
    Pending         -> Placed | Cancelled | Rejected
    Placed          -> Filled | PartiallyFilled | Cancelled
    PartiallyFilled -> Filled | PartiallyFilled | Cancelled
    Filled, Cancelled, Rejected are terminal
"""
from decimal import Decimal

import structlog

from patterns_playground.domain import Order, OrderStatus

from .contracts import InvalidStateTransitionError, OrderState

logger = structlog.get_logger(__name__)


def _fill_status(order: Order, quantity: Decimal) -> OrderStatus:
    if quantity >= order.quantity:
        return OrderStatus.FILLED
    return OrderStatus.PARTIALLY_FILLED


class PendingOrderState(OrderState):
    status = OrderStatus.PENDING

    def place(self, order: Order) -> Order:
        return order.transition(OrderStatus.PLACED)

    def fill(self, order: Order, quantity: Decimal) -> Order:
        raise InvalidStateTransitionError(
            "Cannot fill order in Pending state. Must place order first."
        )

    def cancel(self, order: Order) -> Order:
        return order.transition(OrderStatus.CANCELLED)

    def reject(self, order: Order) -> Order:
        return order.transition(OrderStatus.REJECTED)


class PlacedOrderState(OrderState):
    status = OrderStatus.PLACED

    def place(self, order: Order) -> Order:
        raise InvalidStateTransitionError("Order is already placed.")

    def fill(self, order: Order, quantity: Decimal) -> Order:
        return order.transition(_fill_status(order, quantity))

    def cancel(self, order: Order) -> Order:
        return order.transition(OrderStatus.CANCELLED)

    def reject(self, order: Order) -> Order:
        raise InvalidStateTransitionError(
            "Cannot reject order in Placed state. Use Cancel instead."
        )


class PartiallyFilledOrderState(OrderState):
    status = OrderStatus.PARTIALLY_FILLED

    def place(self, order: Order) -> Order:
        raise InvalidStateTransitionError("Order is already placed.")

    def fill(self, order: Order, quantity: Decimal) -> Order:
        return order.transition(_fill_status(order, quantity))

    def cancel(self, order: Order) -> Order:
        return order.transition(OrderStatus.CANCELLED)

    def reject(self, order: Order) -> Order:
        raise InvalidStateTransitionError(
            "Cannot reject order in PartiallyFilled state. Use Cancel instead."
        )


class TerminalOrderState(OrderState):
    """Filled, Cancelled and Rejected: every operation raises."""

    @property
    def is_terminal(self) -> bool:
        return True

    def _refuse(self, operation: str) -> InvalidStateTransitionError:
        return InvalidStateTransitionError(
            f"Cannot {operation} order in {self.status.value} state (terminal)."
        )

    def place(self, order: Order) -> Order:
        raise self._refuse("place")

    def fill(self, order: Order, quantity: Decimal) -> Order:
        raise self._refuse("fill")

    def cancel(self, order: Order) -> Order:
        raise self._refuse("cancel")

    def reject(self, order: Order) -> Order:
        raise self._refuse("reject")


class FilledOrderState(TerminalOrderState):
    status = OrderStatus.FILLED


class CancelledOrderState(TerminalOrderState):
    status = OrderStatus.CANCELLED


class RejectedOrderState(TerminalOrderState):
    status = OrderStatus.REJECTED


class OrderStateFactory:
    _states = {
        OrderStatus.PENDING: PendingOrderState,
        OrderStatus.PLACED: PlacedOrderState,
        OrderStatus.PARTIALLY_FILLED: PartiallyFilledOrderState,
        OrderStatus.FILLED: FilledOrderState,
        OrderStatus.CANCELLED: CancelledOrderState,
        OrderStatus.REJECTED: RejectedOrderState,
    }

    @classmethod
    def create_state(cls, status: OrderStatus) -> OrderState:
        """State object for the status; unknown statuses start as Pending."""
        return cls._states.get(status, PendingOrderState)()


class OrderStateMachine:
    """Holds an order and applies transitions through its current state."""

    def __init__(self, order: Order):
        self.order = order
        self.state = OrderStateFactory.create_state(order.status)

    def _apply(self, new_order: Order) -> Order:
        logger.info(
            "order_state_transition",
            order_id=new_order.order_id,
            from_status=self.order.status.value,
            to_status=new_order.status.value,
        )
        self.order = new_order
        self.state = OrderStateFactory.create_state(new_order.status)
        return new_order

    def place(self) -> Order:
        return self._apply(self.state.place(self.order))

    def fill(self, quantity: Decimal) -> Order:
        return self._apply(self.state.fill(self.order, quantity))

    def cancel(self) -> Order:
        return self._apply(self.state.cancel(self.order))

    def reject(self) -> Order:
        return self._apply(self.state.reject(self.order))
