"""Contract for the fluent order builder."""
from decimal import Decimal
from typing import Optional, Protocol

from patterns_playground.domain import Order, OrderSide


class OrderBuildError(Exception):
    """Raised when an order is built with a missing or invalid field."""

    pass


class OrderBuilderContract(Protocol):
    def with_account(self, account_id: str) -> "OrderBuilderContract":
        ...

    def with_symbol(self, symbol: str) -> "OrderBuilderContract":
        ...

    def with_side(self, side: OrderSide) -> "OrderBuilderContract":
        ...

    def with_quantity(self, quantity: Decimal) -> "OrderBuilderContract":
        ...

    def with_price(self, price: Decimal) -> "OrderBuilderContract":
        ...

    def with_limit_price(self, limit_price: Optional[Decimal]) -> "OrderBuilderContract":
        ...

    def reset(self) -> "OrderBuilderContract":
        ...

    def build(self) -> Order:
        """Validate the collected fields and create a Pending order."""
        ...
