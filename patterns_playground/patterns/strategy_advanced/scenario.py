"""Advanced Strategy (provider resolver) demo and self-test."""
from decimal import Decimal

from patterns_playground.domain import PatternDemoResponse, PatternTestResponse, check

from .contracts import PaymentValidationError, ProviderNotFoundError
from .resolver import PaymentProviderResolver, ProviderPaymentService

PATTERN = "Strategy (Advanced)"

DEMO_PAYMENTS = (
    ("STRIPE", Decimal("100.00"), "USD"),
    ("paypal", Decimal("50.00"), "EUR"),
    ("Crypto", Decimal("25.00"), "BTC"),
)


class StrategyAdvancedScenario:
    def __init__(self, resolver: PaymentProviderResolver, service: ProviderPaymentService):
        self.resolver = resolver
        self.service = service

    async def run_demo(self) -> PatternDemoResponse:
        payments = []
        for key, amount, currency in DEMO_PAYMENTS:
            result = await self.service.process_payment(
                amount=amount,
                currency=currency,
                provider_key=key,
                customer_email="demo@example.com",
            )
            payments.append({"requested_key": key, "amount": amount, "currency": currency, "result": result})

        return PatternDemoResponse(
            pattern=PATTERN,
            description=(
                "Demonstrates strategy pattern with a resolver: payment providers are "
                "looked up by key in a table built once at startup."
            ),
            result={
                "providers": self.service.get_available_providers(),
                "payments": payments,
            },
            metadata={
                "lookup": "case-insensitive, O(1)",
                "open_closed": "Register a new provider at startup; resolver and service are unchanged",
            },
        )

    async def run_tests(self) -> PatternTestResponse:
        checks = []

        upper = self.resolver.resolve("STRIPE")
        lower = self.resolver.resolve("stripe")
        checks.append(
            check(
                "Case-Insensitive Resolution",
                upper is not None and upper is lower,
                f"STRIPE and stripe resolve to {getattr(lower, 'key', None)}",
            )
        )

        checks.append(
            check(
                "Unknown Provider Not Found",
                self.resolver.resolve("unknown") is None,
                "Resolving 'unknown' returned no provider",
            )
        )

        keys = self.resolver.keys()
        try:
            await self.service.process_payment(Decimal("10"), "USD", "unknown", "test@example.com")
            checks.append(check("Not Found Lists Providers", False, "Expected ProviderNotFoundError"))
        except ProviderNotFoundError as e:
            checks.append(
                check(
                    "Not Found Lists Providers",
                    all(key in str(e) for key in keys),
                    str(e),
                )
            )

        try:
            await self.service.process_payment(Decimal("0.10"), "USD", "stripe", "test@example.com")
            checks.append(check("Validation Rejects Small Amount", False, "Expected PaymentValidationError"))
        except PaymentValidationError as e:
            checks.append(check("Validation Rejects Small Amount", True, str(e)))

        result = await self.service.process_payment(Decimal("20"), "CAD", "PayPal", "test@example.com")
        checks.append(
            check(
                "Delegates To Resolved Provider",
                result.provider_used == "paypal" and result.transaction_id.startswith("paypal_txn_"),
                f"{result.transaction_id}: {result.status}",
            )
        )

        return PatternTestResponse.from_checks(PATTERN, checks)
