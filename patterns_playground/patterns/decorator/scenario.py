"""Decorator demo and self-test."""
from decimal import Decimal

from patterns_playground.domain import PatternDemoResponse, PatternTestResponse, check
from patterns_playground.infrastructure import InMemoryMetrics, PaymentRequest

from .contracts import PaymentService

PATTERN = "Decorator"
DECORATOR_STACK = "Retry -> Metrics -> Logging -> Core"


class DecoratorScenario:
    def __init__(self, service: PaymentService, metrics: InMemoryMetrics):
        self.service = service
        self.metrics = metrics

    async def run_demo(self) -> PatternDemoResponse:
        request = PaymentRequest(
            transaction_id="TXN-DEC-001",
            amount=Decimal("250.75"),
            currency="USD",
            account_id="ACC-001",
        )
        result = await self.service.process_payment(request)

        return PatternDemoResponse(
            pattern=PATTERN,
            description=(
                "Demonstrates decorator pattern: adds cross-cutting concerns (logging, "
                "metrics, retries) dynamically without modifying core service."
            ),
            result={
                "payment": result,
                "metrics": self.metrics.snapshot(),
            },
            metadata={
                "decorator_stack": DECORATOR_STACK,
                "separation_of_concerns": True,
            },
        )

    async def run_tests(self) -> PatternTestResponse:
        checks = []
        request = PaymentRequest(
            transaction_id="TXN-TEST-DEC",
            amount=Decimal("100.00"),
            currency="USD",
            account_id="ACC-TEST",
        )

        before = sum(self.metrics.snapshot()["counters"].values())
        result = await self.service.process_payment(request)
        after = sum(self.metrics.snapshot()["counters"].values())

        checks.append(
            check("Payment Processing", result is not None, f"Payment processed: success={result.success}")
        )
        checks.append(
            check("Metrics Recording", after > before, "Metrics were recorded by decorator")
        )
        checks.append(
            check(
                "Decorator Chain",
                result.transaction_id == request.transaction_id,
                "Decorator chain preserved request/response flow",
            )
        )

        return PatternTestResponse.from_checks(PATTERN, checks)
