"""
Unit tests for the order state machine and the validation chain.
"""
from decimal import Decimal

import pytest

from patterns_playground.domain import Order, OrderStatus
from patterns_playground.patterns.chain_of_responsibility import (
    AccountValidationHandler,
    BasicValidationHandler,
    InMemoryAccountRepository,
    RiskValidationHandler,
    build_validation_chain,
)
from patterns_playground.patterns.state import (
    InvalidStateTransitionError,
    OrderStateFactory,
    OrderStateMachine,
    PendingOrderState,
)


class TestOrderStateMachine:
    """Test suite for OrderStateMachine."""

    @pytest.mark.unit
    def test_full_lifecycle(self, sample_order: Order) -> None:
        """Test Pending -> Placed -> Filled and terminal refusals."""
        machine = OrderStateMachine(sample_order)

        placed = machine.place()
        filled = machine.fill(Decimal("100"))

        assert placed.status == OrderStatus.PLACED
        assert filled.status == OrderStatus.FILLED
        assert filled.row_version == 2
        assert machine.state.is_terminal

        with pytest.raises(InvalidStateTransitionError, match="terminal"):
            machine.cancel()
        with pytest.raises(InvalidStateTransitionError):
            machine.fill(Decimal("1"))
        with pytest.raises(InvalidStateTransitionError):
            machine.reject()

    @pytest.mark.unit
    def test_partial_fill(self, sample_order: Order) -> None:
        """Test a smaller fill leaves the order partially filled and still cancellable."""
        machine = OrderStateMachine(sample_order)
        machine.place()

        partial = machine.fill(Decimal("40"))
        cancelled = machine.cancel()

        assert partial.status == OrderStatus.PARTIALLY_FILLED
        assert cancelled.status == OrderStatus.CANCELLED

    @pytest.mark.unit
    def test_pending_cannot_fill(self, sample_order: Order) -> None:
        """Test filling an unplaced order raises and leaves it unchanged."""
        machine = OrderStateMachine(sample_order)

        with pytest.raises(InvalidStateTransitionError):
            machine.fill(Decimal("10"))

        assert machine.order.status == OrderStatus.PENDING

    @pytest.mark.unit
    def test_placed_cannot_reject(self, sample_order: Order) -> None:
        """Test a placed order must be cancelled rather than rejected."""
        machine = OrderStateMachine(sample_order)
        machine.place()

        with pytest.raises(InvalidStateTransitionError, match="Use Cancel instead"):
            machine.reject()

    @pytest.mark.unit
    def test_original_order_untouched(self, sample_order: Order) -> None:
        """Test transitions produce copies."""
        OrderStateMachine(sample_order).place()

        assert sample_order.status == OrderStatus.PENDING
        assert sample_order.row_version == 0

    @pytest.mark.unit
    def test_factory_defaults_to_pending(self) -> None:
        """Test statuses without a state object map to Pending."""
        assert isinstance(OrderStateFactory.create_state(OrderStatus.VALIDATED), PendingOrderState)


class RecordingLink(BasicValidationHandler):
    def __init__(self) -> None:
        super().__init__()
        self.seen = 0

    async def validate(self, order: Order):
        self.seen += 1
        return await super().validate(order)


class TestValidationChain:
    """Test suite for the order validation chain."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_valid_order_passes(self, sample_order: Order) -> None:
        """Test an order passing every link is valid."""
        chain = build_validation_chain(InMemoryAccountRepository())

        result = await chain.handle(sample_order)

        assert result.is_valid
        assert result.errors == []

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_oversized_order_fails_risk(self, sample_order: Order) -> None:
        """Test the risk link rejects orders above the value limit."""
        order = sample_order.model_copy(update={"quantity": Decimal("10000"), "price": Decimal("200")})
        chain = build_validation_chain(InMemoryAccountRepository())

        result = await chain.handle(order)

        assert result.errors == ["Order value 2000000 exceeds maximum 1000000"]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_unknown_account(self, sample_order: Order) -> None:
        """Test the account link rejects unknown accounts."""
        order = sample_order.model_copy(update={"account_id": "ACC-404"})
        chain = build_validation_chain(InMemoryAccountRepository())

        result = await chain.handle(order)

        assert result.errors == ["Account ACC-404 not found"]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_stops_at_first_failure(self, sample_order: Order) -> None:
        """Test later links are not consulted once a link fails."""
        order = sample_order.model_copy(update={"quantity": Decimal("0")})
        head = BasicValidationHandler()
        tail = RecordingLink()
        head.set_next(RiskValidationHandler()).set_next(tail)

        result = await head.handle(order)

        assert not result.is_valid
        assert "Quantity must be greater than zero" in result.errors
        assert tail.seen == 0

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_account_link_alone(self, sample_order: Order) -> None:
        """Test a single link works without a successor."""
        result = await AccountValidationHandler(InMemoryAccountRepository()).handle(sample_order)

        assert result.is_valid
