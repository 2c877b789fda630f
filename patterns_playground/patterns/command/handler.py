"""
Command handler with bounded retry, an audit trail and a FIFO queue.

Retry policy (tenacity):
- Up to max_attempts attempts per command
- Linear backoff: attempt n is followed by a wait of n * retry_delay_seconds
- Reported failures and raised exceptions share the same budget
- Exceptions never escape execute(); they become a failed CommandResult

Audit trail:
- EXECUTE before every attempt, tagged with the attempts made so far
- SUCCESS (with duration) on the first successful attempt
- FAILED or EXCEPTION once the budget is exhausted, tagged with the attempt count
- QUEUED when a command is queued

The queue is inspection-only: nothing consumes it.
"""
import asyncio
import threading
import time
from collections import deque
from typing import Awaitable, Callable, Deque, List, Optional

import structlog
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    retry_if_result,
    stop_after_attempt,
    wait_incrementing,
)

from patterns_playground.monitoring.metrics import metrics

from .contracts import Command, CommandAuditEntry, CommandResult

logger = structlog.get_logger(__name__)

Sleep = Callable[[float], Awaitable[None]]


class CommandHandler:
    """Executes commands with retry and keeps an audit trail."""

    def __init__(
        self,
        max_attempts: int = 3,
        retry_delay_seconds: float = 0.1,
        max_audit_entries: Optional[int] = None,
        sleep: Sleep = asyncio.sleep,
    ):
        """
        Initialize command handler.

        Args:
            max_attempts: Attempts per command before giving up
            retry_delay_seconds: Backoff step; attempt n waits n * step
            max_audit_entries: Keep only the newest entries (unbounded if None)
            sleep: Coroutine used to wait between attempts
        """
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.max_attempts = max_attempts
        self.retry_delay_seconds = retry_delay_seconds
        self._sleep = sleep
        self._audit_log: Deque[CommandAuditEntry] = deque(maxlen=max_audit_entries)
        self._audit_lock = threading.Lock()
        self._queue: Deque[Command] = deque()

    async def execute(self, command: Command) -> CommandResult:
        """
        Execute a command, retrying failures.

        Returns:
            CommandResult: The successful result, the last failed result, or a
            failure carrying the final exception's message
        """
        start_time = time.monotonic()
        attempts_made = 0

        def before_attempt(retry_state: RetryCallState) -> None:
            nonlocal attempts_made
            attempts_made = retry_state.attempt_number - 1
            self._audit(command, "EXECUTE", attempts_made)

        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_incrementing(
                start=self.retry_delay_seconds, increment=self.retry_delay_seconds
            ),
            retry=(
                retry_if_exception_type(Exception)
                | retry_if_result(lambda result: not result.success)
            ),
            before=before_attempt,
            before_sleep=lambda retry_state: self._log_retry(command, retry_state),
            retry_error_callback=lambda retry_state: self._give_up(command, retry_state),
            sleep=self._sleep,
        )
        result = await retrying(command.execute)

        if result.success:
            duration_ms = (time.monotonic() - start_time) * 1000
            self._audit(command, "SUCCESS", attempts_made, duration_ms)
            metrics.record_command_execution("success")
            logger.info(
                "command_executed",
                command_id=command.command_id,
                retry_count=attempts_made,
                duration_ms=duration_ms,
            )
        return result

    async def queue(self, command: Command) -> None:
        self._queue.append(command)
        self._audit(command, "QUEUED", 0)
        logger.info("command_queued", command_id=command.command_id, queue_count=len(self._queue))

    def get_audit_log(self) -> List[CommandAuditEntry]:
        with self._audit_lock:
            return list(self._audit_log)

    def get_queue_count(self) -> int:
        return len(self._queue)

    def _log_retry(self, command: Command, retry_state: RetryCallState) -> None:
        outcome = retry_state.outcome
        assert outcome is not None

        if outcome.failed:
            logger.error(
                "command_exception",
                command_id=command.command_id,
                attempt=retry_state.attempt_number,
                max_attempts=self.max_attempts,
                error=str(outcome.exception()),
            )
            return
        logger.warning(
            "command_retrying",
            command_id=command.command_id,
            attempt=retry_state.attempt_number,
            max_attempts=self.max_attempts,
            error=outcome.result().error_message,
        )

    def _give_up(self, command: Command, retry_state: RetryCallState) -> CommandResult:
        outcome = retry_state.outcome
        assert outcome is not None
        attempts = retry_state.attempt_number

        if outcome.failed:
            error = outcome.exception()
            self._audit(command, "EXCEPTION", attempts)
            metrics.record_command_execution("exception")
            logger.error(
                "command_exception",
                command_id=command.command_id,
                attempt=attempts,
                max_attempts=self.max_attempts,
                error=str(error),
            )
            return CommandResult(success=False, error_message=str(error))

        result: CommandResult = outcome.result()
        self._audit(command, "FAILED", attempts)
        metrics.record_command_execution("failed")
        logger.warning(
            "command_failed",
            command_id=command.command_id,
            attempts=attempts,
            error=result.error_message,
        )
        return result

    def _audit(
        self,
        command: Command,
        action: str,
        retry_count: int,
        duration_ms: Optional[float] = None,
    ) -> None:
        entry = CommandAuditEntry(
            command_id=command.command_id,
            action=action,
            retry_count=retry_count,
            duration_ms=duration_ms,
        )
        with self._audit_lock:
            self._audit_log.append(entry)
            size = len(self._audit_log)
        metrics.set_command_audit_size(size)
