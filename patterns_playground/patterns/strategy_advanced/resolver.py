"""
Provider resolver and the payment service built on it.

The resolver's table is built once in __init__ and exposed read-only,
so lookups need no locking. Keys are matched case-insensitively.
Adding a provider means passing one more instance at construction.
"""
import time
from decimal import Decimal
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional

import structlog

from patterns_playground.monitoring.metrics import metrics

from .contracts import (
    PaymentProvider,
    PaymentValidationError,
    ProviderInfo,
    ProviderNotFoundError,
    ProviderPaymentResult,
    ProviderResolver,
)

logger = structlog.get_logger(__name__)


class PaymentProviderResolver:
    def __init__(self, providers: Iterable[PaymentProvider]):
        table = {}
        for provider in providers:
            normalized = provider.key.lower()
            if normalized in table:
                raise ValueError(f"Duplicate payment provider key '{provider.key}'")
            table[normalized] = provider
        self._providers: Mapping[str, PaymentProvider] = MappingProxyType(table)

        logger.info(
            "payment_provider_resolver_initialized",
            provider_count=len(self._providers),
            providers=self.keys(),
        )

    def resolve(self, key: Optional[str]) -> Optional[PaymentProvider]:
        if not key or not key.strip():
            logger.warning("payment_provider_key_empty")
            return None

        provider = self._providers.get(key.strip().lower())
        if provider is None:
            logger.warning(
                "payment_provider_not_found",
                provider_key=key,
                available_providers=self.keys(),
            )
        return provider

    def list_available(self) -> List[PaymentProvider]:
        return list(self._providers.values())

    def keys(self) -> List[str]:
        return [provider.key for provider in self._providers.values()]


class ProviderPaymentService:
    """Resolves a provider by key, validates against it, then delegates."""

    def __init__(self, resolver: ProviderResolver):
        self.resolver = resolver

    async def process_payment(
        self,
        amount: Decimal,
        currency: str,
        provider_key: str,
        customer_email: str,
    ) -> ProviderPaymentResult:
        """
        Process a payment through the provider registered under provider_key.

        Raises:
            ProviderNotFoundError: If no provider matches the key
            PaymentValidationError: If the provider rejects amount or currency
        """
        start_time = time.time()
        logger.info(
            "provider_payment_request",
            provider_key=provider_key,
            amount=str(amount),
            currency=currency,
        )

        provider = self.resolver.resolve(provider_key)
        if provider is None:
            metrics.record_provider_request("unknown", "not_found")
            available = ", ".join(p.key for p in self.resolver.list_available())
            raise ProviderNotFoundError(
                f"Payment provider '{provider_key}' not found. Available providers: {available}",
                provider_key,
            )

        if not provider.validate(amount, currency):
            metrics.record_provider_request(provider.key, "invalid")
            raise PaymentValidationError(
                f"Payment validation failed for provider '{provider_key}'",
                provider_key,
            )

        result = await provider.process(amount, currency, customer_email)
        metrics.record_provider_request(provider.key, result.status)

        logger.info(
            "provider_payment_processed",
            transaction_id=result.transaction_id,
            status=result.status,
            duration_seconds=time.time() - start_time,
        )
        return result

    def get_available_providers(self) -> List[ProviderInfo]:
        return [
            ProviderInfo(
                key=provider.key,
                minimum_amount=provider.minimum_amount,
                supported_currencies=list(provider.supported_currencies),
            )
            for provider in self.resolver.list_available()
        ]
