"""Command: requests as objects, with retry, audit, queue and undo."""
from .commands import InMemoryOrderRepository, PlaceOrderCommand
from .contracts import Command, CommandAuditEntry, CommandResult, OrderStore
from .handler import CommandHandler
from .scenario import CommandScenario

__all__ = [
    "Command",
    "CommandAuditEntry",
    "CommandHandler",
    "CommandResult",
    "CommandScenario",
    "InMemoryOrderRepository",
    "OrderStore",
    "PlaceOrderCommand",
]
