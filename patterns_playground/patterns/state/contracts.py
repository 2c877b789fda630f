"""Order lifecycle state contract."""
from abc import ABC, abstractmethod
from decimal import Decimal

from patterns_playground.domain import Order, OrderStatus


class InvalidStateTransitionError(Exception):
    """Raised when an operation is not allowed in the order's current state."""

    pass


class OrderState(ABC):
    """One state of the order lifecycle; each operation returns a new Order."""

    status: OrderStatus

    @abstractmethod
    def place(self, order: Order) -> Order:
        ...

    @abstractmethod
    def fill(self, order: Order, quantity: Decimal) -> Order:
        ...

    @abstractmethod
    def cancel(self, order: Order) -> Order:
        ...

    @abstractmethod
    def reject(self, order: Order) -> Order:
        ...

    @property
    def is_terminal(self) -> bool:
        return False
