"""
In-process event bus.

Subscribers run first, one at a time, in subscription order. A failing
subscriber is logged and skipped so the rest still see the event. The
event is then forwarded to the external producer on the topic
domain-events.<event type>.
"""
import threading
from collections import defaultdict
from typing import DefaultDict, List

import structlog

from patterns_playground.infrastructure import EventProducer
from patterns_playground.monitoring.metrics import metrics

from .contracts import DomainEvent, EventHandler

logger = structlog.get_logger(__name__)

TOPIC_PREFIX = "domain-events"


def topic_for(event_type: str) -> str:
    return f"{TOPIC_PREFIX}.{event_type.lower()}"


class InMemoryEventBus:
    def __init__(self, producer: EventProducer):
        self.producer = producer
        self._handlers: DefaultDict[str, List[EventHandler]] = defaultdict(list)
        self._lock = threading.Lock()

    def subscribe(self, event_type: str, handler: EventHandler) -> None:
        with self._lock:
            self._handlers[event_type].append(handler)
        logger.info("event_handler_subscribed", event_type=event_type)

    def subscription_count(self) -> int:
        """Number of event types with at least one subscriber."""
        with self._lock:
            return sum(1 for handlers in self._handlers.values() if handlers)

    async def publish(self, event: DomainEvent) -> None:
        with self._lock:
            handlers = list(self._handlers.get(event.event_type, ()))

        logger.info(
            "domain_event_publishing",
            event_id=event.event_id,
            event_type=event.event_type,
            handler_count=len(handlers),
        )

        for handler in handlers:
            try:
                await handler(event)
            except Exception as e:
                logger.error(
                    "event_handler_failed",
                    event_id=event.event_id,
                    event_type=event.event_type,
                    handler=getattr(handler, "__qualname__", repr(handler)),
                    error=str(e),
                    exc_info=True,
                )

        try:
            await self.producer.publish(topic_for(event.event_type), event)
        except Exception as e:
            logger.warning(
                "event_external_publish_failed",
                event_id=event.event_id,
                topic=topic_for(event.event_type),
                error=str(e),
            )

        metrics.record_domain_event(event.event_type)
