"""Abstract Factory: payment gateway families (gateway + configuration)."""
from .contracts import GatewayConfig, PaymentGatewayFactory
from .factories import PayPalGatewayFactory, StripeGatewayFactory
from .scenario import AbstractFactoryScenario

__all__ = [
    "AbstractFactoryScenario",
    "GatewayConfig",
    "PayPalGatewayFactory",
    "PaymentGatewayFactory",
    "StripeGatewayFactory",
]
