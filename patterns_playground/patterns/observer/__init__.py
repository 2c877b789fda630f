"""Observer: domain events fanned out to subscribers and a broker."""
from .contracts import (
    DomainEvent,
    EventHandler,
    EventPublisher,
    OrderCancelledEvent,
    OrderFilledEvent,
    OrderPlacedEvent,
)
from .event_bus import InMemoryEventBus, topic_for
from .handlers import (
    OrderCancelledHandler,
    OrderFilledHandler,
    OrderPlacedHandler,
    RecordingHandler,
    default_handlers,
)
from .scenario import ObserverScenario

__all__ = [
    "DomainEvent",
    "EventHandler",
    "EventPublisher",
    "InMemoryEventBus",
    "ObserverScenario",
    "OrderCancelledEvent",
    "OrderCancelledHandler",
    "OrderFilledEvent",
    "OrderFilledHandler",
    "OrderPlacedEvent",
    "OrderPlacedHandler",
    "RecordingHandler",
    "default_handlers",
    "topic_for",
]
