"""
Fluent order builder.

Not safe to share between concurrent callers: create one per use.
"""
import uuid
from decimal import Decimal
from typing import Optional, Union

from patterns_playground.domain import Order, OrderSide, OrderStatus

from .contracts import OrderBuildError

Number = Union[Decimal, int, str]


class OrderBuilder:
    """Collects order fields step by step and validates them in build()."""

    def __init__(self) -> None:
        self.reset()

    def with_account(self, account_id: str) -> "OrderBuilder":
        self._account_id: Optional[str] = account_id
        return self

    def with_symbol(self, symbol: str) -> "OrderBuilder":
        self._symbol: Optional[str] = symbol
        return self

    def with_side(self, side: OrderSide) -> "OrderBuilder":
        self._side: Optional[OrderSide] = side
        return self

    def with_quantity(self, quantity: Number) -> "OrderBuilder":
        self._quantity: Optional[Decimal] = Decimal(str(quantity))
        return self

    def with_price(self, price: Number) -> "OrderBuilder":
        self._price: Optional[Decimal] = Decimal(str(price))
        return self

    def with_limit_price(self, limit_price: Optional[Number]) -> "OrderBuilder":
        self._limit_price: Optional[Decimal] = (
            Decimal(str(limit_price)) if limit_price is not None else None
        )
        return self

    def reset(self) -> "OrderBuilder":
        self._account_id = None
        self._symbol = None
        self._side = None
        self._quantity = None
        self._price = None
        self._limit_price = None
        return self

    def build(self) -> Order:
        """
        Create a Pending order from the collected fields.

        A limit price stands in for the price when no explicit price was set.

        Raises:
            OrderBuildError: If a required field is missing or not positive
        """
        price = self._price if self._price is not None else self._limit_price

        if not self._account_id or not self._account_id.strip():
            raise OrderBuildError("Account ID is required")
        if not self._symbol or not self._symbol.strip():
            raise OrderBuildError("Symbol is required")
        if self._side is None:
            raise OrderBuildError("Side is required")
        if self._quantity is None or self._quantity <= 0:
            raise OrderBuildError("Quantity must be greater than zero")
        if price is None or price <= 0:
            raise OrderBuildError("Price must be greater than zero")

        return Order(
            order_id=f"ORD-{uuid.uuid4().hex}",
            account_id=self._account_id,
            symbol=self._symbol,
            side=self._side,
            quantity=self._quantity,
            price=price,
            status=OrderStatus.PENDING,
        )
