"""
Unit tests for the shared domain records.
"""
from decimal import Decimal

import pytest
from pydantic import ValidationError

from patterns_playground.domain import (
    CurrencyMismatchError,
    Money,
    Order,
    OrderStatus,
    PatternTestResponse,
    Quote,
    check,
)


class TestOrder:
    """Test suite for Order."""

    @pytest.mark.unit
    def test_value_is_quantity_times_price(self, sample_order: Order) -> None:
        """Test notional value."""
        assert sample_order.value == Decimal("15000")

    @pytest.mark.unit
    def test_transition_returns_new_order(self, sample_order: Order) -> None:
        """Test transition bumps the row version and leaves the original untouched."""
        placed = sample_order.transition(OrderStatus.PLACED)

        assert placed.status == OrderStatus.PLACED
        assert placed.row_version == sample_order.row_version + 1
        assert placed.updated_at is not None
        assert sample_order.status == OrderStatus.PENDING

    @pytest.mark.unit
    def test_order_is_frozen(self, sample_order: Order) -> None:
        """Test orders cannot be mutated in place."""
        with pytest.raises(ValidationError):
            sample_order.quantity = Decimal("1")  # type: ignore[misc]


class TestMoney:
    """Test suite for Money."""

    @pytest.mark.unit
    def test_add_same_currency(self) -> None:
        """Test adding amounts in one currency."""
        total = Money(amount=Decimal("10.50"), currency="USD") + Money(
            amount=Decimal("4.50"), currency="USD"
        )
        assert total == Money(amount=Decimal("15.00"), currency="USD")

    @pytest.mark.unit
    def test_subtract_same_currency(self) -> None:
        """Test subtracting amounts in one currency."""
        remaining = Money(amount=Decimal("10"), currency="EUR") - Money(
            amount=Decimal("3"), currency="EUR"
        )
        assert remaining.amount == Decimal("7")

    @pytest.mark.unit
    def test_currency_mismatch(self) -> None:
        """Test mixing currencies raises."""
        with pytest.raises(CurrencyMismatchError, match="Cannot add USD and EUR"):
            Money(amount=Decimal("1"), currency="USD").add(Money(amount=Decimal("1"), currency="EUR"))

    @pytest.mark.unit
    def test_zero(self) -> None:
        """Test zero constructor."""
        assert Money.zero("GBP").amount == Decimal("0")


class TestResponses:
    """Test suite for the pattern response envelopes."""

    @pytest.mark.unit
    def test_quote_mid_and_spread(self) -> None:
        """Test derived quote prices."""
        quote = Quote(symbol="AAPL", bid=Decimal("150"), ask=Decimal("150.5"), last=Decimal("150.25"))
        assert quote.mid == Decimal("150.25")
        assert quote.spread == Decimal("0.5")

    @pytest.mark.unit
    def test_status_fails_if_any_check_fails(self) -> None:
        """Test PASS requires every check to pass."""
        passing = PatternTestResponse.from_checks("X", [check("a", True, ""), check("b", True, "")])
        failing = PatternTestResponse.from_checks("X", [check("a", True, ""), check("b", False, "")])

        assert passing.status == "PASS"
        assert failing.status == "FAIL"

    @pytest.mark.unit
    def test_check_serializes_pass_alias(self) -> None:
        """Test checks are rendered with a 'pass' key."""
        dumped = check("a", True, "ok").model_dump(by_alias=True)
        assert dumped == {"name": "a", "pass": True, "details": "ok"}
