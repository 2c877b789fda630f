"""Mediator demo and self-test."""
from decimal import Decimal

from pydantic import BaseModel

from patterns_playground.domain import OrderSide, PatternDemoResponse, PatternTestResponse, check

from .contracts import HandlerNotFoundError
from .mediator import Mediator
from .requests import CreateOrderRequest, GetOrderRequest

PATTERN = "Mediator"


class UnregisteredRequest(BaseModel):
    pass


class MediatorScenario:
    def __init__(self, mediator: Mediator):
        self.mediator = mediator

    async def run_demo(self) -> PatternDemoResponse:
        created = await self.mediator.send(
            CreateOrderRequest(
                account_id="ACC-001",
                symbol="AAPL",
                side=OrderSide.BUY,
                quantity=Decimal("100"),
                price=Decimal("150"),
            )
        )
        fetched = await self.mediator.send(GetOrderRequest(order_id=created.order_id))

        return PatternDemoResponse(
            pattern=PATTERN,
            description=(
                "Demonstrates mediator pattern: requests are routed to their handlers "
                "without callers knowing who handles them."
            ),
            result=[
                {"action": "Create Order", "request": "CreateOrderRequest", "order": created},
                {
                    "action": "Get Order",
                    "request": "GetOrderRequest",
                    "found": fetched is not None,
                    "order_id": fetched.order_id if fetched else None,
                },
            ],
            metadata={"registered_requests": self.mediator.registered_types()},
        )

    async def run_tests(self) -> PatternTestResponse:
        checks = []

        created = await self.mediator.send(
            CreateOrderRequest(
                account_id="ACC-TEST",
                symbol="TEST",
                side=OrderSide.SELL,
                quantity=Decimal("5"),
                price=Decimal("20"),
            )
        )
        checks.append(
            check(
                "Create Via Mediator",
                created.order_id.startswith("ORD-") and created.symbol == "TEST",
                f"Created order {created.order_id}",
            )
        )

        fetched = await self.mediator.send(GetOrderRequest(order_id=created.order_id))
        checks.append(
            check(
                "Get Via Mediator",
                fetched is not None and fetched.order_id == created.order_id,
                f"Fetched order {fetched.order_id if fetched else None}",
            )
        )

        missing = await self.mediator.send(GetOrderRequest(order_id="ORD-DOES-NOT-EXIST"))
        checks.append(check("Get Missing Order", missing is None, "Unknown order id returns nothing"))

        try:
            await self.mediator.send(UnregisteredRequest())
            checks.append(check("Unregistered Request", False, "Expected HandlerNotFoundError"))
        except HandlerNotFoundError as e:
            checks.append(check("Unregistered Request", True, str(e)))

        return PatternTestResponse.from_checks(PATTERN, checks)
