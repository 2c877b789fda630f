"""Decorator: logging, metrics and retry layered around a payment service."""
from .contracts import PaymentService
from .payment_service import (
    CorePaymentService,
    LoggingPaymentDecorator,
    MetricsPaymentDecorator,
    RetryPaymentDecorator,
    build_payment_pipeline,
)
from .scenario import DecoratorScenario

__all__ = [
    "CorePaymentService",
    "DecoratorScenario",
    "LoggingPaymentDecorator",
    "MetricsPaymentDecorator",
    "PaymentService",
    "RetryPaymentDecorator",
    "build_payment_pipeline",
]
