"""Subscribers reacting to order lifecycle events."""
from abc import ABC, abstractmethod
from typing import List

import structlog

from .contracts import DomainEvent, OrderCancelledEvent, OrderFilledEvent, OrderPlacedEvent

logger = structlog.get_logger(__name__)


class RecordingHandler(ABC):
    """Keeps the events it has handled so callers can inspect them."""

    event_type = ""

    def __init__(self) -> None:
        self.handled: List[DomainEvent] = []

    async def __call__(self, event: DomainEvent) -> None:
        self.on_event(event)
        self.handled.append(event)

    @abstractmethod
    def on_event(self, event: DomainEvent) -> None:
        """React to one event of this handler's type."""


class OrderPlacedHandler(RecordingHandler):
    event_type = "OrderPlaced"

    def on_event(self, event: OrderPlacedEvent) -> None:
        logger.info(
            "order_placed_event_handled",
            order_id=event.order_id,
            symbol=event.symbol,
            quantity=str(event.quantity),
            price=str(event.price),
        )


class OrderFilledHandler(RecordingHandler):
    event_type = "OrderFilled"

    def on_event(self, event: OrderFilledEvent) -> None:
        logger.info(
            "order_filled_event_handled",
            order_id=event.order_id,
            filled_quantity=str(event.filled_quantity),
            fill_price=str(event.fill_price),
        )


class OrderCancelledHandler(RecordingHandler):
    event_type = "OrderCancelled"

    def on_event(self, event: OrderCancelledEvent) -> None:
        logger.info(
            "order_cancelled_event_handled",
            order_id=event.order_id,
            reason=event.reason,
        )


def default_handlers() -> List[RecordingHandler]:
    return [OrderPlacedHandler(), OrderFilledHandler(), OrderCancelledHandler()]
