"""In-memory stand-ins for brokers, gateways and metrics backends."""
from .kafka import EventProducer, FakeKafkaProducer, PublishedMessage
from .metrics import InMemoryMetrics, Metrics, metric_key
from .payment_gateway import (
    FakePayPalGateway,
    FakeStripeGateway,
    PaymentGateway,
    PaymentRequest,
    PaymentResult,
    SimulatedGateway,
)

__all__ = [
    "EventProducer",
    "FakeKafkaProducer",
    "FakePayPalGateway",
    "FakeStripeGateway",
    "InMemoryMetrics",
    "Metrics",
    "PaymentGateway",
    "PaymentRequest",
    "PaymentResult",
    "PublishedMessage",
    "SimulatedGateway",
    "metric_key",
]
