"""Order commands and the in-memory order store they act on."""
import threading
from typing import Dict, List, Optional

import structlog

from patterns_playground.domain import Order

from .contracts import Command, CommandResult, OrderStore

logger = structlog.get_logger(__name__)


class InMemoryOrderRepository:
    """Dict-backed order store keyed by order id."""

    def __init__(self) -> None:
        self._orders: Dict[str, Order] = {}
        self._lock = threading.Lock()

    def get_by_id(self, order_id: str) -> Optional[Order]:
        with self._lock:
            return self._orders.get(order_id)

    def list_all(self) -> List[Order]:
        with self._lock:
            return list(self._orders.values())

    def add(self, order: Order) -> None:
        with self._lock:
            self._orders[order.order_id] = order

    def update(self, order: Order) -> None:
        with self._lock:
            self._orders[order.order_id] = order

    def delete(self, order_id: str) -> None:
        with self._lock:
            self._orders.pop(order_id, None)


class PlaceOrderCommand(Command):
    """Stores an order, remembering what it replaced so it can be undone."""

    supports_undo = True

    def __init__(self, order: Order, repository: OrderStore):
        super().__init__()
        self.order = order
        self.repository = repository
        self._previous: Optional[Order] = None

    async def execute(self) -> CommandResult:
        try:
            logger.info(
                "place_order_command_executing",
                command_id=self.command_id,
                order_id=self.order.order_id,
            )
            self._previous = self.repository.get_by_id(self.order.order_id)
            self.repository.add(self.order)
            return CommandResult(success=True, data={"order_id": self.order.order_id})
        except Exception as e:
            logger.error(
                "place_order_command_failed", command_id=self.command_id, error=str(e)
            )
            return CommandResult(success=False, error_message=str(e))

    async def undo(self) -> CommandResult:
        try:
            if self._previous is None:
                self.repository.delete(self.order.order_id)
            else:
                self.repository.update(self._previous)
            logger.info("place_order_command_undone", command_id=self.command_id)
            return CommandResult(success=True)
        except Exception as e:
            logger.error("place_order_command_undo_failed", command_id=self.command_id, error=str(e))
            return CommandResult(success=False, error_message=str(e))
