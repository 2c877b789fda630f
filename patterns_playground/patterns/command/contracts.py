"""Command contracts: commands, their results and the audit trail."""
import uuid
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Optional, Protocol

from pydantic import BaseModel, Field

from patterns_playground.domain import Order, utc_now


class CommandResult(BaseModel):
    """Outcome of executing or undoing a command."""

    success: bool
    error_message: Optional[str] = None
    data: Optional[Any] = None


class CommandAuditEntry(BaseModel):
    """One line of the command audit trail."""

    command_id: str
    action: str  # EXECUTE, SUCCESS, FAILED, EXCEPTION, QUEUED
    timestamp: datetime = Field(default_factory=utc_now)
    retry_count: int = 0
    duration_ms: Optional[float] = None

    model_config = {"frozen": True}


class Command(ABC):
    """A request captured as an object, with optional undo."""

    supports_undo: bool = False

    def __init__(self) -> None:
        self.command_id = f"CMD-{uuid.uuid4().hex}"

    @abstractmethod
    async def execute(self) -> CommandResult:
        """Perform the request. Report expected failures in the result."""

    async def undo(self) -> CommandResult:
        return CommandResult(success=False, error_message="Undo not supported")


class OrderStore(Protocol):
    def get_by_id(self, order_id: str) -> Optional[Order]:
        ...

    def add(self, order: Order) -> None:
        ...

    def update(self, order: Order) -> None:
        ...

    def delete(self, order_id: str) -> None:
        ...
