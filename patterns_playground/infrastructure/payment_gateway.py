"""
Payment gateway contract and simulated Stripe/PayPal gateways.

The fakes sleep to mimic network latency and succeed with a fixed
probability. Each gateway owns an injected random.Random so outcomes
are reproducible per instance and never depend on shared global state.
"""
import asyncio
import random
from datetime import datetime
from decimal import Decimal
from typing import Dict, Optional, Protocol

import structlog
from pydantic import BaseModel, Field

from patterns_playground.domain.models import utc_now

logger = structlog.get_logger(__name__)


class PaymentRequest(BaseModel):
    """Payment request sent to a gateway."""

    transaction_id: str
    amount: Decimal
    currency: str
    account_id: str
    metadata: Optional[Dict[str, str]] = None


class PaymentResult(BaseModel):
    """Outcome of a gateway call."""

    success: bool
    transaction_id: str
    error_message: Optional[str] = None
    processed_at: datetime = Field(default_factory=utc_now)


class PaymentGateway(Protocol):
    """Interface for payment processors."""

    @property
    def provider_name(self) -> str:
        ...

    async def process_payment(self, request: PaymentRequest) -> PaymentResult:
        ...


class SimulatedGateway:
    """Base for fake gateways with latency and a fixed success rate."""

    provider_name = "Simulated"
    default_seed = 0
    delay_seconds = 0.0
    success_rate = 1.0
    failure_message = "Payment failed"

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        simulate_latency: bool = True,
    ):
        """
        Initialize the gateway.

        Args:
            rng: Random source deciding success; seeded per gateway when omitted
            simulate_latency: Sleep for delay_seconds on each call
        """
        self._rng = rng if rng is not None else random.Random(self.default_seed)
        self.simulate_latency = simulate_latency

    async def process_payment(self, request: PaymentRequest) -> PaymentResult:
        if self.simulate_latency:
            await asyncio.sleep(self.delay_seconds)

        if self._rng.random() < self.success_rate:
            logger.info(
                "gateway_payment_processed",
                provider=self.provider_name,
                transaction_id=request.transaction_id,
                amount=str(request.amount),
                currency=request.currency,
            )
            return PaymentResult(success=True, transaction_id=request.transaction_id)

        logger.warning(
            "gateway_payment_failed",
            provider=self.provider_name,
            transaction_id=request.transaction_id,
        )
        return PaymentResult(
            success=False,
            transaction_id=request.transaction_id,
            error_message=self.failure_message,
        )


class FakeStripeGateway(SimulatedGateway):
    provider_name = "Stripe"
    default_seed = 42
    delay_seconds = 0.05
    success_rate = 0.95
    failure_message = "Insufficient funds"


class FakePayPalGateway(SimulatedGateway):
    provider_name = "PayPal"
    default_seed = 43
    delay_seconds = 0.08
    success_rate = 0.90
    failure_message = "Payment declined"
