"""State: order lifecycle as a set of state objects."""
from .contracts import InvalidStateTransitionError, OrderState
from .order_states import (
    CancelledOrderState,
    FilledOrderState,
    OrderStateFactory,
    OrderStateMachine,
    PartiallyFilledOrderState,
    PendingOrderState,
    PlacedOrderState,
    RejectedOrderState,
)
from .scenario import StateScenario

__all__ = [
    "CancelledOrderState",
    "FilledOrderState",
    "InvalidStateTransitionError",
    "OrderState",
    "OrderStateFactory",
    "OrderStateMachine",
    "PartiallyFilledOrderState",
    "PendingOrderState",
    "PlacedOrderState",
    "RejectedOrderState",
    "StateScenario",
]
