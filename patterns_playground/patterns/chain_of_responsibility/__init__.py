"""Chain of Responsibility: order validation as linked handlers."""
from .contracts import AccountLookup, OrderValidationHandler
from .handlers import (
    MAX_ORDER_VALUE,
    AccountValidationHandler,
    BasicValidationHandler,
    InMemoryAccountRepository,
    RiskValidationHandler,
    build_validation_chain,
)
from .scenario import ChainOfResponsibilityScenario

__all__ = [
    "AccountLookup",
    "AccountValidationHandler",
    "BasicValidationHandler",
    "ChainOfResponsibilityScenario",
    "InMemoryAccountRepository",
    "MAX_ORDER_VALUE",
    "OrderValidationHandler",
    "RiskValidationHandler",
    "build_validation_chain",
]
