"""Abstract Factory demo and self-test."""
import uuid
from decimal import Decimal
from typing import List

import structlog

from patterns_playground.domain import (
    LedgerEntry,
    Money,
    PatternDemoResponse,
    PatternTestResponse,
    check,
)
from patterns_playground.infrastructure import PaymentRequest

from .contracts import PaymentGatewayFactory

logger = structlog.get_logger(__name__)

PATTERN = "Abstract Factory"


class AbstractFactoryScenario:
    def __init__(self, factories: List[PaymentGatewayFactory]):
        self.factories = {factory.factory_type: factory for factory in factories}

    async def run_demo(self) -> PatternDemoResponse:
        results = []
        for factory_type, factory in self.factories.items():
            gateway = factory.create_payment_gateway()
            results.append(
                {
                    "factory": factory_type,
                    "gateway": gateway.provider_name,
                    "config": factory.create_configuration(),
                }
            )

        request = PaymentRequest(
            transaction_id="TXN-STRIPE-001",
            amount=Decimal("100.50"),
            currency="USD",
            account_id="ACC-001",
        )
        payment = await self.factories["Stripe"].create_payment_gateway().process_payment(request)
        entry = None
        if payment.success:
            entry = LedgerEntry(
                entry_id=f"LED-{uuid.uuid4().hex[:12]}",
                account_id=request.account_id,
                amount=Money(amount=request.amount, currency=request.currency),
                description="Card payment via Stripe",
                transaction_id=payment.transaction_id,
            )
        results.append({"payment": "Stripe Payment", "result": payment, "ledger_entry": entry})

        logger.info(
            "abstract_factory_demo_completed",
            factories=list(self.factories),
            payment_success=payment.success,
        )

        return PatternDemoResponse(
            pattern=PATTERN,
            description=(
                "Demonstrates abstract factory pattern: creates families of related "
                "objects (gateway + config)."
            ),
            result=results,
            metadata={
                "factory_count": len(self.factories),
                "extensibility": "New gateway families plug in without touching existing ones",
            },
        )

    def run_tests(self) -> PatternTestResponse:
        checks = []
        for factory_type, factory in self.factories.items():
            gateway = factory.create_payment_gateway()
            checks.append(
                check(
                    f"{factory_type} Factory Creates {factory_type} Gateway",
                    gateway.provider_name == factory_type,
                    f"Created {gateway.provider_name} gateway",
                )
            )
            config = factory.create_configuration()
            checks.append(
                check(
                    f"{factory_type} Config Matches Gateway",
                    config.provider_name == gateway.provider_name,
                    f"Config provider {config.provider_name} matches gateway "
                    f"{gateway.provider_name}",
                )
            )
        return PatternTestResponse.from_checks(PATTERN, checks)
