"""Stripe and PayPal gateway families."""
import random
from typing import Optional

from patterns_playground.infrastructure import (
    FakePayPalGateway,
    FakeStripeGateway,
    PaymentGateway,
)

from .contracts import GatewayConfig, PaymentGatewayFactory


class StripeGatewayFactory(PaymentGatewayFactory):
    factory_type = "Stripe"

    def __init__(self, rng: Optional[random.Random] = None, simulate_latency: bool = True):
        self._rng = rng if rng is not None else random.Random(FakeStripeGateway.default_seed)
        self._simulate_latency = simulate_latency

    def create_payment_gateway(self) -> PaymentGateway:
        return FakeStripeGateway(rng=self._rng, simulate_latency=self._simulate_latency)

    def create_configuration(self) -> GatewayConfig:
        return GatewayConfig(
            provider_name="Stripe",
            settings={
                "ApiKey": "sk_test_...",
                "WebhookSecret": "whsec_...",
                "Timeout": "30s",
                "RetryPolicy": "exponential-backoff",
            },
        )


class PayPalGatewayFactory(PaymentGatewayFactory):
    factory_type = "PayPal"

    def __init__(self, rng: Optional[random.Random] = None, simulate_latency: bool = True):
        self._rng = rng if rng is not None else random.Random(FakePayPalGateway.default_seed)
        self._simulate_latency = simulate_latency

    def create_payment_gateway(self) -> PaymentGateway:
        return FakePayPalGateway(rng=self._rng, simulate_latency=self._simulate_latency)

    def create_configuration(self) -> GatewayConfig:
        return GatewayConfig(
            provider_name="PayPal",
            settings={
                "ClientId": "client_id_...",
                "ClientSecret": "client_secret_...",
                "Mode": "sandbox",
                "Timeout": "45s",
                "RetryPolicy": "linear",
            },
        )
