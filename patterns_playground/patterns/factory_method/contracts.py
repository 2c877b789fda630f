"""Contracts for order validators and the factory that picks them."""
from typing import List, Protocol

from pydantic import BaseModel, Field

from patterns_playground.domain import Order


class ValidationResult(BaseModel):
    """Outcome of validating an order; errors never escape as exceptions."""

    is_valid: bool
    errors: List[str] = Field(default_factory=list)

    @classmethod
    def from_errors(cls, errors: List[str]) -> "ValidationResult":
        return cls(is_valid=not errors, errors=errors)


class OrderValidator(Protocol):
    @property
    def validator_type(self) -> str:
        ...

    def validate(self, order: Order) -> ValidationResult:
        ...


class OrderValidatorFactory(Protocol):
    def create_validator(self, order: Order) -> OrderValidator:
        """Choose a validator suited to the order."""
        ...
