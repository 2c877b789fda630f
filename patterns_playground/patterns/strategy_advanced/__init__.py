"""Strategy with a resolver: payment providers looked up by key."""
from .contracts import (
    PaymentProvider,
    PaymentProviderError,
    PaymentValidationError,
    ProviderInfo,
    ProviderNotFoundError,
    ProviderPaymentResult,
    ProviderResolver,
)
from .providers import (
    CryptoPaymentProvider,
    PayPalPaymentProvider,
    SimulatedPaymentProvider,
    StripePaymentProvider,
)
from .resolver import PaymentProviderResolver, ProviderPaymentService
from .scenario import StrategyAdvancedScenario

__all__ = [
    "CryptoPaymentProvider",
    "PayPalPaymentProvider",
    "PaymentProvider",
    "PaymentProviderError",
    "PaymentProviderResolver",
    "PaymentValidationError",
    "ProviderInfo",
    "ProviderNotFoundError",
    "ProviderPaymentResult",
    "ProviderPaymentService",
    "ProviderResolver",
    "SimulatedPaymentProvider",
    "StrategyAdvancedScenario",
    "StripePaymentProvider",
]
