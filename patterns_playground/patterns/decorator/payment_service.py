"""
Core payment service and its cross-cutting decorators.

Each decorator wraps another PaymentService and adds one concern:
- LoggingPaymentDecorator: structured request/response logging
- MetricsPaymentDecorator: duration and count metrics
- RetryPaymentDecorator: bounded retry with incrementing backoff (tenacity)

Standard stack, outermost first: Retry -> Metrics -> Logging -> Core.
"""
import time
from typing import Any

import structlog
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    retry_if_result,
    stop_after_attempt,
    wait_incrementing,
)

from patterns_playground.infrastructure import (
    Metrics,
    PaymentGateway,
    PaymentRequest,
    PaymentResult,
)

from .contracts import PaymentService

logger = structlog.get_logger(__name__)


class CorePaymentService:
    """Delegates straight to the gateway."""

    def __init__(self, gateway: PaymentGateway):
        self.gateway = gateway

    async def process_payment(self, request: PaymentRequest) -> PaymentResult:
        return await self.gateway.process_payment(request)


class LoggingPaymentDecorator:
    def __init__(self, inner: PaymentService):
        self.inner = inner

    async def process_payment(self, request: PaymentRequest) -> PaymentResult:
        logger.info(
            "payment_request_started",
            transaction_id=request.transaction_id,
            amount=str(request.amount),
            currency=request.currency,
        )
        result = await self.inner.process_payment(request)
        logger.info(
            "payment_request_completed",
            transaction_id=request.transaction_id,
            success=result.success,
        )
        return result


class MetricsPaymentDecorator:
    """Records payment.process.duration and payment.process.count."""

    def __init__(self, inner: PaymentService, metrics: Metrics):
        self.inner = inner
        self.metrics = metrics

    async def process_payment(self, request: PaymentRequest) -> PaymentResult:
        start_time = time.monotonic()
        try:
            result = await self.inner.process_payment(request)
        except Exception:
            self.metrics.record_duration(
                "payment.process.duration",
                time.monotonic() - start_time,
                {"success": "false", "error": "exception"},
            )
            self.metrics.increment_counter("payment.process.count", {"success": "false"})
            raise

        success = str(result.success).lower()
        self.metrics.record_duration(
            "payment.process.duration",
            time.monotonic() - start_time,
            {"success": success, "currency": request.currency},
        )
        self.metrics.increment_counter("payment.process.count", {"success": success})
        return result


class RetryPaymentDecorator:
    """
    Retries failed results and exceptions.

    Attempt n is followed by a wait of n * base_delay_seconds. Once the
    budget is spent, the last failed result is returned as-is; a final
    exception is turned into a failed PaymentResult.
    """

    def __init__(
        self,
        inner: PaymentService,
        max_attempts: int = 3,
        base_delay_seconds: float = 0.1,
    ):
        self.inner = inner
        self.max_attempts = max_attempts
        self.base_delay_seconds = base_delay_seconds

    async def process_payment(self, request: PaymentRequest) -> PaymentResult:
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_incrementing(
                start=self.base_delay_seconds, increment=self.base_delay_seconds
            ),
            retry=(
                retry_if_exception_type(Exception)
                | retry_if_result(lambda result: not result.success)
            ),
            before_sleep=self._log_retry,
            retry_error_callback=lambda state: self._give_up(request, state),
        )
        return await retrying(self.inner.process_payment, request)

    def _log_retry(self, retry_state: RetryCallState) -> None:
        outcome = retry_state.outcome
        error: Any = None
        if outcome is not None:
            error = outcome.exception() if outcome.failed else outcome.result().error_message
        logger.warning(
            "payment_retrying",
            attempt=retry_state.attempt_number,
            max_attempts=self.max_attempts,
            error=str(error),
        )

    def _give_up(self, request: PaymentRequest, retry_state: RetryCallState) -> PaymentResult:
        outcome = retry_state.outcome
        assert outcome is not None

        if outcome.failed:
            error = outcome.exception()
            logger.error(
                "payment_failed_after_retries",
                transaction_id=request.transaction_id,
                attempts=retry_state.attempt_number,
                error=str(error),
            )
            return PaymentResult(
                success=False,
                transaction_id=request.transaction_id,
                error_message=str(error),
            )

        logger.warning(
            "payment_declined_after_retries",
            transaction_id=request.transaction_id,
            attempts=retry_state.attempt_number,
        )
        return outcome.result()


def build_payment_pipeline(
    gateway: PaymentGateway,
    metrics: Metrics,
    max_attempts: int = 3,
    base_delay_seconds: float = 0.1,
) -> PaymentService:
    """Assemble Retry -> Metrics -> Logging -> Core around a gateway."""
    service: PaymentService = CorePaymentService(gateway)
    service = LoggingPaymentDecorator(service)
    service = MetricsPaymentDecorator(service, metrics)
    return RetryPaymentDecorator(service, max_attempts, base_delay_seconds)
