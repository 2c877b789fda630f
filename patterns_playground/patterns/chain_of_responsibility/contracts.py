"""Validation chain contracts."""
from abc import ABC, abstractmethod
from typing import Optional, Protocol

from patterns_playground.domain import Account, Order
from patterns_playground.patterns.factory_method import ValidationResult


class AccountLookup(Protocol):
    async def get_by_id(self, account_id: str) -> Optional[Account]:
        ...


class OrderValidationHandler(ABC):
    """
    A link in the validation chain.

    handle() runs this link's check and passes the order on only when it
    passes, so the first failing link decides the result.
    """

    def __init__(self) -> None:
        self._next: Optional["OrderValidationHandler"] = None

    def set_next(self, handler: "OrderValidationHandler") -> "OrderValidationHandler":
        """Attach the next link and return it, so calls can be chained."""
        self._next = handler
        return handler

    async def handle(self, order: Order) -> ValidationResult:
        result = await self.validate(order)
        if not result.is_valid or self._next is None:
            return result
        return await self._next.handle(order)

    @abstractmethod
    async def validate(self, order: Order) -> ValidationResult:
        ...
