"""
Unit tests for the generic repository, unit of work and mediator.
"""
from decimal import Decimal

import pytest
from pydantic import BaseModel

from patterns_playground.container import ServiceContainer
from patterns_playground.domain import Order, OrderSide, OrderStatus
from patterns_playground.patterns.mediator import (
    CreateOrderRequest,
    GetOrderRequest,
    HandlerNotFoundError,
    Mediator,
)
from patterns_playground.patterns.repository import (
    EntityNotFoundError,
    InMemoryRepository,
    InMemoryUnitOfWork,
    order_repository,
)


class TestInMemoryRepository:
    """Test suite for InMemoryRepository."""

    @pytest.mark.unit
    def test_add_then_get(self, sample_order: Order) -> None:
        """Test added entities can be read back by key."""
        repository = order_repository()
        repository.add(sample_order)

        assert repository.get_by_id(sample_order.order_id) == sample_order
        assert repository.exists(sample_order.order_id)
        assert repository.get_all() == [sample_order]

    @pytest.mark.unit
    def test_update_missing_raises(self, sample_order: Order) -> None:
        """Test updating an unknown key raises."""
        with pytest.raises(EntityNotFoundError, match="Entity with key ORD-TEST-001 not found"):
            order_repository().update(sample_order)

    @pytest.mark.unit
    def test_delete_removes(self, sample_order: Order) -> None:
        """Test delete removes the entity and is a no-op for unknown keys."""
        repository = order_repository()
        repository.add(sample_order)

        repository.delete(sample_order.order_id)
        repository.delete("ORD-UNKNOWN")

        assert repository.get_by_id(sample_order.order_id) is None

    @pytest.mark.unit
    def test_generic_over_entity(self) -> None:
        """Test the repository works for any entity with a key selector."""
        repository: InMemoryRepository[int, dict] = InMemoryRepository(lambda d: d["id"])
        repository.add({"id": 1, "name": "a"})
        repository.update({"id": 1, "name": "b"})

        assert repository.get_by_id(1) == {"id": 1, "name": "b"}


class TestUnitOfWork:
    """Test suite for InMemoryUnitOfWork."""

    @pytest.mark.unit
    def test_changes_buffered_until_save(self, sample_order: Order) -> None:
        """Test changes registered in a transaction apply on save."""
        repository = order_repository()
        uow = InMemoryUnitOfWork()

        uow.begin_transaction()
        uow.register_change(lambda: repository.add(sample_order))
        assert not repository.exists(sample_order.order_id)

        assert uow.save_changes() == 1
        assert repository.exists(sample_order.order_id)
        assert not uow.in_transaction

    @pytest.mark.unit
    def test_rollback_discards(self, sample_order: Order) -> None:
        """Test rollback drops pending changes."""
        repository = order_repository()
        uow = InMemoryUnitOfWork()

        uow.begin_transaction()
        uow.register_change(lambda: repository.add(sample_order))
        uow.rollback()

        assert uow.save_changes() == 0
        assert not repository.exists(sample_order.order_id)

    @pytest.mark.unit
    def test_outside_transaction_applies_immediately(self, sample_order: Order) -> None:
        """Test changes apply at once when no transaction is open."""
        repository = order_repository()
        InMemoryUnitOfWork().register_change(lambda: repository.add(sample_order))

        assert repository.exists(sample_order.order_id)


class UnregisteredRequest(BaseModel):
    pass


class TestMediator:
    """Test suite for Mediator."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_create_then_get(self, container: ServiceContainer) -> None:
        """Test requests are routed to their registered handlers."""
        mediator = container.mediator

        created = await mediator.send(
            CreateOrderRequest(
                account_id="ACC-001",
                symbol="AAPL",
                side=OrderSide.BUY,
                quantity=Decimal("10"),
                price=Decimal("150"),
            )
        )
        fetched = await mediator.send(GetOrderRequest(order_id=created.order_id))

        assert created.status == OrderStatus.PENDING
        assert fetched == created

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_unregistered_request_raises(self) -> None:
        """Test sending an unknown request type raises."""
        with pytest.raises(HandlerNotFoundError, match="No handler found for request type UnregisteredRequest"):
            await Mediator().send(UnregisteredRequest())

    @pytest.mark.unit
    def test_duplicate_registration_rejected(self, container: ServiceContainer) -> None:
        """Test a request type can only have one handler."""
        with pytest.raises(ValueError):
            container.mediator.register(GetOrderRequest, object())
