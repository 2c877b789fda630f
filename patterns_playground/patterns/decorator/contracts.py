"""Contract shared by the core payment service and its decorators."""
from typing import Protocol

from patterns_playground.infrastructure import PaymentRequest, PaymentResult


class PaymentService(Protocol):
    async def process_payment(self, request: PaymentRequest) -> PaymentResult:
        ...
