"""Repository demo and self-test."""
from decimal import Decimal
from typing import Callable

from patterns_playground.domain import (
    Order,
    OrderSide,
    OrderStatus,
    PatternDemoResponse,
    PatternTestResponse,
    check,
)

from .contracts import EntityNotFoundError
from .in_memory import InMemoryRepository, InMemoryUnitOfWork

PATTERN = "Repository"


def order_repository() -> "InMemoryRepository[str, Order]":
    return InMemoryRepository(lambda order: order.order_id)


def _order(order_id: str, account_id: str, symbol: str, side: OrderSide, quantity: int, price: int) -> Order:
    return Order(
        order_id=order_id,
        account_id=account_id,
        symbol=symbol,
        side=side,
        quantity=Decimal(quantity),
        price=Decimal(price),
    )


class RepositoryScenario:
    def __init__(
        self,
        repository: "InMemoryRepository[str, Order]",
        unit_of_work_factory: Callable[[], InMemoryUnitOfWork] = InMemoryUnitOfWork,
    ):
        self.repository = repository
        self.unit_of_work_factory = unit_of_work_factory

    def run_demo(self) -> PatternDemoResponse:
        results = []

        order = _order("ORD-REPO-001", "ACC-001", "AAPL", OrderSide.BUY, 100, 150)
        self.repository.add(order)
        results.append({"action": "Add Order", "order": order})

        retrieved = self.repository.get_by_id(order.order_id)
        results.append(
            {
                "action": "Retrieve Order",
                "found": retrieved is not None,
                "order_id": retrieved.order_id if retrieved else None,
            }
        )

        if retrieved is not None:
            updated = retrieved.transition(OrderStatus.PLACED)
            self.repository.update(updated)
            results.append(
                {"action": "Update Order", "order_id": updated.order_id, "new_status": updated.status}
            )

        uow = self.unit_of_work_factory()
        uow.begin_transaction()
        second = _order("ORD-REPO-002", "ACC-001", "MSFT", OrderSide.SELL, 50, 300)
        third = _order("ORD-REPO-003", "ACC-001", "GOOGL", OrderSide.BUY, 20, 140)
        uow.register_change(lambda: self.repository.add(second))
        uow.register_change(lambda: self.repository.add(third))
        saved = uow.save_changes()
        uow.commit()
        results.append(
            {
                "action": "Unit of Work",
                "description": "Multiple operations in transaction",
                "changes_saved": saved,
                "order_ids": [second.order_id, third.order_id],
            }
        )

        results.append({"action": "List Orders", "count": len(self.repository.get_all())})

        return PatternDemoResponse(
            pattern=PATTERN,
            description=(
                "Demonstrates repository pattern: abstracts data access, enables testing. "
                "Includes Unit of Work for transaction coordination."
            ),
            result=results,
            metadata={
                "abstraction": "Data access abstracted from business logic",
                "testability": "Easy to mock or use in-memory implementation",
                "unit_of_work": "Coordinates multiple repository operations in transactions",
            },
        )

    def run_tests(self) -> PatternTestResponse:
        checks = []
        repository = order_repository()

        order = _order("ORD-TEST-001", "ACC-TEST", "TEST", OrderSide.BUY, 10, 100)
        repository.add(order)
        retrieved = repository.get_by_id(order.order_id)
        checks.append(
            check(
                "Repository Add and Retrieve",
                retrieved is not None and retrieved.order_id == order.order_id,
                f"Retrieved order {retrieved.order_id if retrieved else None}",
            )
        )

        repository.update(order.transition(OrderStatus.PLACED))
        updated = repository.get_by_id(order.order_id)
        checks.append(
            check(
                "Repository Update",
                updated is not None and updated.status == OrderStatus.PLACED,
                f"Updated order status to {updated.status.value if updated else None}",
            )
        )

        try:
            repository.update(_order("ORD-MISSING", "ACC-TEST", "TEST", OrderSide.BUY, 1, 1))
            checks.append(check("Update Missing Raises", False, "Expected EntityNotFoundError"))
        except EntityNotFoundError as e:
            checks.append(check("Update Missing Raises", True, str(e)))

        repository.delete(order.order_id)
        checks.append(
            check(
                "Repository Delete",
                not repository.exists(order.order_id),
                "Order was deleted",
            )
        )

        uow = self.unit_of_work_factory()
        uow.begin_transaction()
        buffered = _order("ORD-TEST-002", "ACC-TEST", "TEST", OrderSide.BUY, 10, 100)
        uow.register_change(lambda: repository.add(buffered))
        pending_invisible = not repository.exists(buffered.order_id)
        saved = uow.save_changes()
        uow.commit()
        checks.append(
            check(
                "Unit of Work",
                pending_invisible and saved == 1 and repository.exists(buffered.order_id),
                f"Unit of Work saved {saved} change(s)",
            )
        )

        uow.begin_transaction()
        discarded = _order("ORD-TEST-003", "ACC-TEST", "TEST", OrderSide.BUY, 10, 100)
        uow.register_change(lambda: repository.add(discarded))
        uow.rollback()
        checks.append(
            check(
                "Unit of Work Rollback",
                not repository.exists(discarded.order_id),
                "Rolled back change was not applied",
            )
        )

        return PatternTestResponse.from_checks(PATTERN, checks)
