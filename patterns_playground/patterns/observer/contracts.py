"""Domain events and the interfaces for publishing and handling them."""
import uuid
from datetime import datetime
from decimal import Decimal
from typing import Awaitable, Callable, Protocol

from pydantic import BaseModel, Field

from patterns_playground.domain import utc_now


def new_event_id() -> str:
    return f"EVT-{uuid.uuid4().hex}"


class DomainEvent(BaseModel):
    """Base class for everything published on the event bus."""

    event_id: str = Field(default_factory=new_event_id)
    event_type: str
    occurred_at: datetime = Field(default_factory=utc_now)

    model_config = {"frozen": True}


class OrderPlacedEvent(DomainEvent):
    event_type: str = "OrderPlaced"
    order_id: str
    account_id: str
    symbol: str
    quantity: Decimal
    price: Decimal


class OrderFilledEvent(DomainEvent):
    event_type: str = "OrderFilled"
    order_id: str
    account_id: str
    filled_quantity: Decimal
    fill_price: Decimal


class OrderCancelledEvent(DomainEvent):
    event_type: str = "OrderCancelled"
    order_id: str
    account_id: str
    reason: str = "User request"


EventHandler = Callable[[DomainEvent], Awaitable[None]]


class EventPublisher(Protocol):
    async def publish(self, event: DomainEvent) -> None:
        ...

    def subscribe(self, event_type: str, handler: EventHandler) -> None:
        ...
