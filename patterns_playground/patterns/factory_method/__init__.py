"""Factory Method: pick an order validator from the order's value."""
from .contracts import OrderValidator, OrderValidatorFactory, ValidationResult
from .scenario import FactoryMethodScenario
from .validators import (
    LARGE_ORDER_THRESHOLD,
    LargeOrderValidator,
    StandardOrderValidator,
    ValueBasedValidatorFactory,
    basic_order_errors,
)

__all__ = [
    "FactoryMethodScenario",
    "LARGE_ORDER_THRESHOLD",
    "LargeOrderValidator",
    "OrderValidator",
    "OrderValidatorFactory",
    "StandardOrderValidator",
    "ValidationResult",
    "ValueBasedValidatorFactory",
    "basic_order_errors",
]
