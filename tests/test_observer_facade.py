"""
Unit tests for the event bus and the trading facade.
"""
from decimal import Decimal
from typing import List

import pytest

from patterns_playground.container import ServiceContainer
from patterns_playground.domain import (
    CancelOrderRequest,
    OrderSide,
    OrderStatus,
    PlaceOrderRequest,
    ReplaceOrderRequest,
)
from patterns_playground.infrastructure import FakeKafkaProducer
from patterns_playground.patterns.observer import (
    DomainEvent,
    InMemoryEventBus,
    OrderCancelledEvent,
    OrderPlacedEvent,
    OrderPlacedHandler,
    RecordingHandler,
    topic_for,
)


def _placed_event() -> OrderPlacedEvent:
    return OrderPlacedEvent(
        order_id="ORD-1",
        account_id="ACC-001",
        symbol="AAPL",
        quantity=Decimal("100"),
        price=Decimal("150"),
    )


class BrokenProducer:
    async def publish(self, topic: str, message: object) -> None:
        raise ConnectionError("broker down")


class TestEventBus:
    """Test suite for InMemoryEventBus."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_failing_handler_does_not_stop_others(self) -> None:
        """Test a raising subscriber is skipped and later subscribers still run."""
        bus = InMemoryEventBus(FakeKafkaProducer())
        received: List[DomainEvent] = []

        async def failing(event: DomainEvent) -> None:
            raise RuntimeError("boom")

        async def recording(event: DomainEvent) -> None:
            received.append(event)

        bus.subscribe("OrderPlaced", failing)
        bus.subscribe("OrderPlaced", recording)
        event = _placed_event()

        await bus.publish(event)

        assert received == [event]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_forwards_to_broker_topic(self) -> None:
        """Test events are published to domain-events.<type>."""
        producer = FakeKafkaProducer()
        bus = InMemoryEventBus(producer)

        await bus.publish(OrderCancelledEvent(order_id="ORD-1", account_id="ACC-001"))

        messages = producer.published_messages()
        assert [m.topic for m in messages] == ["domain-events.ordercancelled"]
        assert messages[0].message.reason == "User request"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_broker_failure_is_swallowed(self) -> None:
        """Test a producer failure does not fail publish."""
        bus = InMemoryEventBus(BrokenProducer())
        received: List[DomainEvent] = []

        async def recording(event: DomainEvent) -> None:
            received.append(event)

        bus.subscribe("OrderPlaced", recording)
        await bus.publish(_placed_event())

        assert len(received) == 1

    @pytest.mark.unit
    def test_event_identity(self) -> None:
        """Test events carry an id and their type."""
        event = _placed_event()
        assert event.event_id.startswith("EVT-")
        assert event.event_type == "OrderPlaced"
        assert topic_for(event.event_type) == "domain-events.orderplaced"

    @pytest.mark.unit
    def test_container_subscribes_handlers(self, container: ServiceContainer) -> None:
        """Test the startup wiring subscribes all three lifecycle handlers."""
        assert container.event_bus.subscription_count() == 3


class TestRecordingHandler:
    """Test suite for the lifecycle handler base."""

    @pytest.mark.unit
    def test_base_cannot_be_instantiated(self) -> None:
        """Test a handler must define on_event."""
        with pytest.raises(TypeError):
            RecordingHandler()  # type: ignore[abstract]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_handled_events_are_recorded(self) -> None:
        """Test a concrete handler keeps every event it handled."""
        handler = OrderPlacedHandler()
        event = _placed_event()

        await handler(event)

        assert handler.handled == [event]


class TestTradingFacade:
    """Test suite for TradingFacade."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_place_valid_order(self, container: ServiceContainer) -> None:
        """Test a valid limit order is validated, stored and announced."""
        facade = container.trading_facade

        result = await facade.place_order(
            PlaceOrderRequest(
                account_id="ACC-001",
                symbol="AAPL",
                side=OrderSide.BUY,
                quantity=Decimal("100"),
                limit_price=Decimal("150"),
            )
        )

        assert result.success
        assert result.order is not None
        assert container.order_store.get_by_id(result.order.order_id) == result.order
        placed_handler = container.event_handlers[0]
        assert [e.order_id for e in placed_handler.handled] == [result.order.order_id]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_invalid_order_returns_errors(self, container: ServiceContainer) -> None:
        """Test an invalid request fails with validation errors and nothing is stored."""
        result = await container.trading_facade.place_order(
            PlaceOrderRequest(
                account_id="ACC-001",
                symbol="",
                side=OrderSide.BUY,
                quantity=Decimal("-10"),
                limit_price=Decimal("100"),
            )
        )

        assert not result.success
        assert "Quantity must be greater than zero" in result.errors
        assert "Symbol is required" in result.errors
        assert container.order_store.list_all() == []

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_market_order_without_price_is_rejected(self, container: ServiceContainer) -> None:
        """Test an order without a limit price has price zero and fails validation."""
        result = await container.trading_facade.place_order(
            PlaceOrderRequest(account_id="ACC-001", symbol="AAPL", side=OrderSide.BUY, quantity=Decimal("1"))
        )

        assert result.errors == ["Price must be greater than zero"]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_cancel_rules(self, container: ServiceContainer) -> None:
        """Test cancel checks existence and ownership before cancelling."""
        facade = container.trading_facade
        placed = await facade.place_order(
            PlaceOrderRequest(
                account_id="ACC-001",
                symbol="AAPL",
                side=OrderSide.SELL,
                quantity=Decimal("10"),
                limit_price=Decimal("100"),
            )
        )
        order_id = placed.order.order_id

        missing = await facade.cancel_order(CancelOrderRequest(order_id="ORD-NOPE", account_id="ACC-001"))
        foreign = await facade.cancel_order(CancelOrderRequest(order_id=order_id, account_id="ACC-002"))
        cancelled = await facade.cancel_order(CancelOrderRequest(order_id=order_id, account_id="ACC-001"))

        assert missing.error_message == "Order not found"
        assert foreign.error_message == "Unauthorized"
        assert cancelled.success
        assert container.order_store.get_by_id(order_id).status == OrderStatus.CANCELLED

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_replace_order(self, container: ServiceContainer) -> None:
        """Test replace updates price and refuses cancelled orders."""
        facade = container.trading_facade
        placed = await facade.place_order(
            PlaceOrderRequest(
                account_id="ACC-001",
                symbol="AAPL",
                side=OrderSide.BUY,
                quantity=Decimal("10"),
                limit_price=Decimal("100"),
            )
        )
        order_id = placed.order.order_id

        replaced = await facade.replace_order(
            ReplaceOrderRequest(order_id=order_id, account_id="ACC-001", new_price=Decimal("101"))
        )
        assert replaced.success
        assert replaced.order.price == Decimal("101")
        assert replaced.order.quantity == Decimal("10")
        assert replaced.order.row_version == 1

        await facade.cancel_order(CancelOrderRequest(order_id=order_id, account_id="ACC-001"))
        refused = await facade.replace_order(
            ReplaceOrderRequest(order_id=order_id, account_id="ACC-001", new_quantity=Decimal("5"))
        )
        assert refused.errors == ["Order cannot be replaced in Cancelled state"]
