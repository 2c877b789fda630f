"""
Simulated payment providers.

Each provider declares its key, minimum amount and currencies, sleeps
to mimic network latency and succeeds with a fixed probability drawn
from its own seeded random.Random.
"""
import asyncio
import random
import threading
import uuid
from decimal import Decimal
from typing import Optional, Tuple

import structlog

from .contracts import ProviderPaymentResult

logger = structlog.get_logger(__name__)


class SimulatedPaymentProvider:
    key = ""
    display_name = ""
    minimum_amount = Decimal("0")
    supported_currencies: Tuple[str, ...] = ()
    delay_seconds = 0.0
    success_rate = 1.0
    default_seed = 0

    def __init__(self, rng: Optional[random.Random] = None, simulate_latency: bool = True):
        self._rng = rng if rng is not None else random.Random(self.default_seed)
        self._rng_lock = threading.Lock()
        self.simulate_latency = simulate_latency

    def validate(self, amount: Decimal, currency: str) -> bool:
        if amount < self.minimum_amount:
            logger.warning(
                "payment_below_minimum",
                provider=self.key,
                amount=str(amount),
                minimum_amount=str(self.minimum_amount),
            )
            return False
        if currency.upper() not in self.supported_currencies:
            logger.warning("currency_not_supported", provider=self.key, currency=currency)
            return False
        return True

    async def process(
        self, amount: Decimal, currency: str, customer_email: str
    ) -> ProviderPaymentResult:
        logger.info(
            "provider_payment_processing",
            provider=self.key,
            amount=str(amount),
            currency=currency,
            customer_email=customer_email,
        )
        if self.simulate_latency:
            await asyncio.sleep(self.delay_seconds)

        with self._rng_lock:
            success = self._rng.random() < self.success_rate
        transaction_id = f"{self.key}_txn_{uuid.uuid4().hex}"

        if success:
            logger.info("provider_payment_succeeded", provider=self.key, transaction_id=transaction_id)
            return ProviderPaymentResult(
                transaction_id=transaction_id,
                status="Success",
                provider_used=self.key,
                message=f"Payment processed successfully via {self.display_name}",
            )

        logger.warning("provider_payment_failed", provider=self.key, transaction_id=transaction_id)
        return ProviderPaymentResult(
            transaction_id=transaction_id,
            status="Failed",
            provider_used=self.key,
            message="Payment processing failed",
        )


class StripePaymentProvider(SimulatedPaymentProvider):
    key = "stripe"
    display_name = "Stripe"
    minimum_amount = Decimal("1.00")
    supported_currencies = ("USD", "EUR", "GBP")
    delay_seconds = 0.05
    success_rate = 0.95
    default_seed = 42


class PayPalPaymentProvider(SimulatedPaymentProvider):
    key = "paypal"
    display_name = "PayPal"
    minimum_amount = Decimal("0.50")
    supported_currencies = ("USD", "EUR", "CAD")
    delay_seconds = 0.08
    success_rate = 0.90
    default_seed = 43


class CryptoPaymentProvider(SimulatedPaymentProvider):
    key = "crypto"
    display_name = "Crypto"
    minimum_amount = Decimal("10.00")
    supported_currencies = ("BTC", "ETH", "USDT")
    delay_seconds = 0.2
    success_rate = 0.85
    default_seed = 44
