"""Command demo and self-test."""
import uuid
from decimal import Decimal

from patterns_playground.domain import (
    Order,
    OrderSide,
    PatternDemoResponse,
    PatternTestResponse,
    check,
)

from .commands import InMemoryOrderRepository, PlaceOrderCommand
from .handler import CommandHandler

PATTERN = "Command"


class CommandScenario:
    def __init__(self, handler: CommandHandler, repository: InMemoryOrderRepository):
        self.handler = handler
        self.repository = repository

    async def run_demo(self) -> PatternDemoResponse:
        results = []

        order = Order(
            order_id="ORD-CMD-001",
            account_id="ACC-001",
            symbol="AAPL",
            side=OrderSide.BUY,
            quantity=Decimal("100"),
            price=Decimal("150"),
        )
        command = PlaceOrderCommand(order, self.repository)
        outcome = await self.handler.execute(command)
        results.append(
            {"action": "Execute Command", "command_id": command.command_id, "result": outcome}
        )

        queued_order = Order(
            order_id="ORD-CMD-002",
            account_id="ACC-001",
            symbol="MSFT",
            side=OrderSide.SELL,
            quantity=Decimal("50"),
            price=Decimal("300"),
        )
        queued = PlaceOrderCommand(queued_order, self.repository)
        await self.handler.queue(queued)
        results.append(
            {
                "action": "Queue Command",
                "command_id": queued.command_id,
                "queue_count": self.handler.get_queue_count(),
            }
        )

        trail = [
            entry
            for entry in self.handler.get_audit_log()
            if entry.command_id in (command.command_id, queued.command_id)
        ]
        results.append({"action": "Audit Log", "entries": trail})

        return PatternDemoResponse(
            pattern=PATTERN,
            description=(
                "Demonstrates command pattern: encapsulates requests as objects with "
                "retry, queue, and audit support."
            ),
            result=results,
            metadata={
                "retry_support": True,
                "max_attempts": self.handler.max_attempts,
                "queue_support": True,
                "audit_support": True,
                "undo_support": True,
            },
        )

    async def run_tests(self) -> PatternTestResponse:
        checks = []

        order = Order(
            order_id=f"ORD-TEST-{uuid.uuid4().hex[:8]}",
            account_id="ACC-TEST",
            symbol="TEST",
            side=OrderSide.BUY,
            quantity=Decimal("10"),
            price=Decimal("100"),
        )
        command = PlaceOrderCommand(order, self.repository)
        outcome = await self.handler.execute(command)
        checks.append(
            check(
                "Command Execution",
                outcome.success,
                f"Command {command.command_id} executed: {outcome.success}",
            )
        )

        stored = self.repository.get_by_id(order.order_id)
        checks.append(
            check(
                "Order Persisted",
                stored is not None and stored.order_id == order.order_id,
                f"Order {order.order_id} was persisted",
            )
        )

        actions = [
            entry.action
            for entry in self.handler.get_audit_log()
            if entry.command_id == command.command_id
        ]
        checks.append(
            check("Audit Trail", actions == ["EXECUTE", "SUCCESS"], f"Audit actions: {actions}")
        )

        undone = await command.undo()
        checks.append(
            check(
                "Command Undo",
                undone.success and self.repository.get_by_id(order.order_id) is None,
                f"Command undo: {undone.success}",
            )
        )

        before = self.handler.get_queue_count()
        await self.handler.queue(PlaceOrderCommand(order, self.repository))
        after = self.handler.get_queue_count()
        checks.append(
            check("Command Queue", after == before + 1, f"Commands in queue: {after}")
        )

        return PatternTestResponse.from_checks(PATTERN, checks)
