"""
Order validators and the value-based validator factory.

Orders worth at least LARGE_ORDER_THRESHOLD get the stricter
LargeOrderValidator, which also caps value at ten times the threshold.
"""
from decimal import Decimal
from typing import List

import structlog

from patterns_playground.domain import Order

from .contracts import OrderValidator, ValidationResult

logger = structlog.get_logger(__name__)

LARGE_ORDER_THRESHOLD = Decimal("100000")


def basic_order_errors(order: Order) -> List[str]:
    """Checks shared by every validator."""
    errors = []
    if order.quantity <= 0:
        errors.append("Quantity must be greater than zero")
    if order.price <= 0:
        errors.append("Price must be greater than zero")
    if not order.symbol or not order.symbol.strip():
        errors.append("Symbol is required")
    return errors


class StandardOrderValidator:
    """Basic validation for ordinary orders."""

    validator_type = "Standard"

    def validate(self, order: Order) -> ValidationResult:
        return ValidationResult.from_errors(basic_order_errors(order))


class LargeOrderValidator:
    """Validation with an extra ceiling for high-value orders."""

    validator_type = "LargeOrder"

    def validate(self, order: Order) -> ValidationResult:
        errors = basic_order_errors(order)
        if order.value > LARGE_ORDER_THRESHOLD * 10:
            errors.append("Order value exceeds maximum allowed (10x threshold)")
        return ValidationResult.from_errors(errors)


class ValueBasedValidatorFactory:
    """Factory method: picks the validator from the order's notional value."""

    def __init__(self, threshold: Decimal = LARGE_ORDER_THRESHOLD):
        self.threshold = threshold

    def create_validator(self, order: Order) -> OrderValidator:
        if order.value >= self.threshold:
            validator: OrderValidator = LargeOrderValidator()
        else:
            validator = StandardOrderValidator()

        logger.debug(
            "order_validator_selected",
            order_id=order.order_id,
            order_value=str(order.value),
            validator_type=validator.validator_type,
        )
        return validator
