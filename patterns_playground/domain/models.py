"""
Shared domain records for the order management and payment demos.

Orders are immutable: every lifecycle transition produces a new copy
with a bumped row_version, so earlier snapshots can never be changed
behind a caller's back.
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class CurrencyMismatchError(Exception):
    """Raised when combining money amounts in different currencies."""

    pass


class OrderSide(str, Enum):
    """Order side."""
    BUY = "Buy"
    SELL = "Sell"


class OrderStatus(str, Enum):
    """Order status in the lifecycle state machine."""
    PENDING = "Pending"
    VALIDATED = "Validated"
    PLACED = "Placed"
    PARTIALLY_FILLED = "PartiallyFilled"
    FILLED = "Filled"
    CANCELLED = "Cancelled"
    REJECTED = "Rejected"


class Order(BaseModel):
    """A trading order in the order management system."""

    order_id: str
    account_id: str
    symbol: str
    side: OrderSide
    quantity: Decimal
    price: Decimal
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: Optional[datetime] = None
    row_version: int = 0

    model_config = {"frozen": True}

    @property
    def value(self) -> Decimal:
        """Notional value (quantity x price)."""
        return self.quantity * self.price

    def transition(self, status: OrderStatus, **changes: Any) -> Order:
        """Return a copy in the new status with the concurrency counter bumped."""
        return self.model_copy(
            update={
                "status": status,
                "updated_at": utc_now(),
                "row_version": self.row_version + 1,
                **changes,
            }
        )


class Account(BaseModel):
    """A trading account with balance information."""

    account_id: str
    account_name: str
    balance: Decimal
    currency: str
    created_at: datetime = Field(default_factory=utc_now)

    model_config = {"frozen": True}


class Money(BaseModel):
    """
    Money value object with currency.

    Arithmetic only works within one currency.
    """

    amount: Decimal
    currency: str

    model_config = {"frozen": True}

    @classmethod
    def zero(cls, currency: str) -> Money:
        return cls(amount=Decimal("0"), currency=currency)

    def add(self, other: Money) -> Money:
        if self.currency != other.currency:
            raise CurrencyMismatchError(f"Cannot add {self.currency} and {other.currency}")
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def subtract(self, other: Money) -> Money:
        if self.currency != other.currency:
            raise CurrencyMismatchError(
                f"Cannot subtract {self.currency} and {other.currency}"
            )
        return Money(amount=self.amount - other.amount, currency=self.currency)

    __add__ = add
    __sub__ = subtract

    def __repr__(self) -> str:
        return f"Money({self.amount}, {self.currency})"


class LedgerEntry(BaseModel):
    """Ledger entry for tracking financial transactions against an account."""

    entry_id: str
    account_id: str
    amount: Money
    description: str
    timestamp: datetime = Field(default_factory=utc_now)
    transaction_id: str

    model_config = {"frozen": True}


class Quote(BaseModel):
    """Market quote for a symbol."""

    symbol: str
    bid: Decimal
    ask: Decimal
    last: Decimal
    timestamp: datetime = Field(default_factory=utc_now)

    model_config = {"frozen": True}

    @property
    def mid(self) -> Decimal:
        return (self.bid + self.ask) / 2

    @property
    def spread(self) -> Decimal:
        return self.ask - self.bid
