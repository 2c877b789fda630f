"""Order validation links and the account store the last one consults."""
import threading
from decimal import Decimal
from typing import Dict, Optional

import structlog

from patterns_playground.domain import Account, Order
from patterns_playground.patterns.factory_method import ValidationResult, basic_order_errors

from .contracts import AccountLookup, OrderValidationHandler

logger = structlog.get_logger(__name__)

MAX_ORDER_VALUE = Decimal("1000000")


class InMemoryAccountRepository:
    """Account store seeded with a single test account."""

    def __init__(self) -> None:
        self._accounts: Dict[str, Account] = {
            "ACC-001": Account(
                account_id="ACC-001",
                account_name="Test Account",
                balance=Decimal("100000"),
                currency="USD",
            )
        }
        self._lock = threading.Lock()

    async def get_by_id(self, account_id: str) -> Optional[Account]:
        with self._lock:
            return self._accounts.get(account_id)

    async def add(self, account: Account) -> None:
        with self._lock:
            self._accounts[account.account_id] = account


class BasicValidationHandler(OrderValidationHandler):
    async def validate(self, order: Order) -> ValidationResult:
        return ValidationResult.from_errors(basic_order_errors(order))


class RiskValidationHandler(OrderValidationHandler):
    def __init__(self, max_order_value: Decimal = MAX_ORDER_VALUE):
        super().__init__()
        self.max_order_value = max_order_value

    async def validate(self, order: Order) -> ValidationResult:
        errors = []
        if order.value > self.max_order_value:
            errors.append(f"Order value {order.value} exceeds maximum {self.max_order_value}")
            logger.warning(
                "risk_limit_exceeded",
                order_id=order.order_id,
                order_value=str(order.value),
                max_order_value=str(self.max_order_value),
            )
        return ValidationResult.from_errors(errors)


class AccountValidationHandler(OrderValidationHandler):
    def __init__(self, accounts: AccountLookup):
        super().__init__()
        self.accounts = accounts

    async def validate(self, order: Order) -> ValidationResult:
        errors = []
        if await self.accounts.get_by_id(order.account_id) is None:
            errors.append(f"Account {order.account_id} not found")
        return ValidationResult.from_errors(errors)


def build_validation_chain(
    accounts: AccountLookup, max_order_value: Decimal = MAX_ORDER_VALUE
) -> OrderValidationHandler:
    """Basic -> Risk -> Account; returns the head of the chain."""
    head = BasicValidationHandler()
    head.set_next(RiskValidationHandler(max_order_value)).set_next(AccountValidationHandler(accounts))
    return head
