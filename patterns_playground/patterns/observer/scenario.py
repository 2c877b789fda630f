"""Observer demo and self-test."""
import uuid
from decimal import Decimal
from typing import List

from patterns_playground.domain import PatternDemoResponse, PatternTestResponse, check
from patterns_playground.infrastructure import FakeKafkaProducer

from .contracts import DomainEvent, OrderCancelledEvent, OrderFilledEvent, OrderPlacedEvent
from .event_bus import InMemoryEventBus, topic_for
from .handlers import RecordingHandler

PATTERN = "Observer"


class ObserverScenario:
    def __init__(
        self,
        event_bus: InMemoryEventBus,
        handlers: List[RecordingHandler],
        producer: FakeKafkaProducer,
    ):
        self.event_bus = event_bus
        self.handlers = handlers
        self.producer = producer

    async def run_demo(self) -> PatternDemoResponse:
        order_id = f"ORD-OBS-{uuid.uuid4().hex[:8]}"
        events: List[DomainEvent] = [
            OrderPlacedEvent(
                order_id=order_id,
                account_id="ACC-001",
                symbol="AAPL",
                quantity=Decimal("100"),
                price=Decimal("150"),
            ),
            OrderFilledEvent(
                order_id=order_id,
                account_id="ACC-001",
                filled_quantity=Decimal("100"),
                fill_price=Decimal("150.25"),
            ),
            OrderCancelledEvent(order_id=order_id, account_id="ACC-001"),
        ]

        published = []
        for event in events:
            await self.event_bus.publish(event)
            published.append(
                {
                    "event_id": event.event_id,
                    "event_type": event.event_type,
                    "topic": topic_for(event.event_type),
                }
            )

        return PatternDemoResponse(
            pattern=PATTERN,
            description=(
                "Demonstrates observer pattern: domain events are pushed to every "
                "subscribed handler and forwarded to the message broker."
            ),
            result={
                "published": published,
                "handled": {
                    type(handler).__name__: len(handler.handled) for handler in self.handlers
                },
            },
            metadata={
                "subscribed_event_types": self.event_bus.subscription_count(),
                "broker_messages": len(self.producer.published_messages()),
            },
        )

    async def run_tests(self) -> PatternTestResponse:
        checks = []

        producer = FakeKafkaProducer()
        bus = InMemoryEventBus(producer)
        received: List[DomainEvent] = []

        async def failing(event: DomainEvent) -> None:
            raise RuntimeError("handler exploded")

        async def recording(event: DomainEvent) -> None:
            received.append(event)

        bus.subscribe("OrderPlaced", failing)
        bus.subscribe("OrderPlaced", recording)

        event = OrderPlacedEvent(
            order_id="ORD-OBS-TEST",
            account_id="ACC-TEST",
            symbol="TEST",
            quantity=Decimal("1"),
            price=Decimal("1"),
        )
        await bus.publish(event)

        checks.append(
            check(
                "Handlers Notified",
                received == [event],
                f"Recording handler received {len(received)} event(s)",
            )
        )
        checks.append(
            check(
                "Failing Handler Isolated",
                len(received) == 1,
                "A raising subscriber did not stop later subscribers",
            )
        )

        topics = [message.topic for message in producer.published_messages()]
        checks.append(
            check(
                "Broker Topic",
                topics == ["domain-events.orderplaced"],
                f"Published to {topics}",
            )
        )

        checks.append(
            check(
                "Event Identity",
                event.event_id.startswith("EVT-") and event.event_type == "OrderPlaced",
                f"{event.event_type} {event.event_id}",
            )
        )

        return PatternTestResponse.from_checks(PATTERN, checks)
