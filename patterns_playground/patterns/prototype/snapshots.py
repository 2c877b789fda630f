"""
Order and portfolio snapshots for backtesting.

clone() returns a fully independent copy: mutating a clone's metadata,
orders or positions never shows through to the original.
"""
import copy
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional

from patterns_playground.domain import Money, Order, utc_now


class OrderSnapshot:
    def __init__(self, order: Order, metadata: Optional[Dict[str, Any]] = None):
        self.order = order
        self.metadata: Dict[str, Any] = metadata if metadata is not None else {}
        self.snapshot_at: datetime = utc_now()

    def clone(self) -> "OrderSnapshot":
        return OrderSnapshot(copy.deepcopy(self.order), copy.deepcopy(self.metadata))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "order": self.order,
            "metadata": self.metadata,
            "snapshot_at": self.snapshot_at,
        }


class PortfolioSnapshot:
    def __init__(
        self,
        account_id: str,
        orders: List[OrderSnapshot],
        positions: Dict[str, Decimal],
        cash_balance: Money,
    ):
        self.account_id = account_id
        self.orders = orders
        self.positions = positions
        self.cash_balance = cash_balance
        self.snapshot_at: datetime = utc_now()

    def clone(self) -> "PortfolioSnapshot":
        return PortfolioSnapshot(
            account_id=self.account_id,
            orders=[snapshot.clone() for snapshot in self.orders],
            positions=dict(self.positions),
            cash_balance=self.cash_balance,
        )

    def total_position_value(self, prices: Mapping[str, Decimal]) -> Money:
        """Mark positions to the given prices; symbols without a price count as zero."""
        total = sum(
            (quantity * prices.get(symbol, Decimal("0")) for symbol, quantity in self.positions.items()),
            Decimal("0"),
        )
        return Money(amount=total, currency=self.cash_balance.currency)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "account_id": self.account_id,
            "orders": [snapshot.to_dict() for snapshot in self.orders],
            "positions": self.positions,
            "cash_balance": self.cash_balance,
            "snapshot_at": self.snapshot_at,
        }
