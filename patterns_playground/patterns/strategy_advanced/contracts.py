"""Contracts and errors for key-resolved payment providers."""
from datetime import datetime
from decimal import Decimal
from typing import Iterable, List, Optional, Protocol, Tuple

from pydantic import BaseModel, Field

from patterns_playground.domain import utc_now


class PaymentProviderError(Exception):
    """Base exception for provider resolution and validation errors."""

    def __init__(self, message: str, provider_key: str):
        super().__init__(message)
        self.provider_key = provider_key


class ProviderNotFoundError(PaymentProviderError):
    """Raised when no provider is registered under the requested key."""

    pass


class PaymentValidationError(PaymentProviderError):
    """Raised when a provider rejects the amount or currency."""

    pass


class ProviderPaymentResult(BaseModel):
    transaction_id: str
    status: str  # Success, Failed
    provider_used: str
    processed_at: datetime = Field(default_factory=utc_now)
    message: Optional[str] = None


class ProviderInfo(BaseModel):
    key: str
    minimum_amount: Decimal
    supported_currencies: List[str]


class PaymentProvider(Protocol):
    @property
    def key(self) -> str:
        ...

    @property
    def minimum_amount(self) -> Decimal:
        ...

    @property
    def supported_currencies(self) -> Tuple[str, ...]:
        ...

    def validate(self, amount: Decimal, currency: str) -> bool:
        ...

    async def process(
        self, amount: Decimal, currency: str, customer_email: str
    ) -> ProviderPaymentResult:
        ...


class ProviderResolver(Protocol):
    def resolve(self, key: Optional[str]) -> Optional[PaymentProvider]:
        ...

    def list_available(self) -> Iterable[PaymentProvider]:
        ...
