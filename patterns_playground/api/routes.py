"""
API routes for the pattern demos, provider payments and monitoring.
"""
import inspect
import time
from typing import Any, Callable, Dict, List

import structlog
from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from patterns_playground.container import ServiceContainer, get_container
from patterns_playground.domain import PatternDemoResponse, PatternTestResponse
from patterns_playground.monitoring.health import HealthCheck
from patterns_playground.monitoring.logging import bind_pattern_context
from patterns_playground.monitoring.metrics import metrics
from patterns_playground.patterns.strategy_advanced import (
    PaymentValidationError,
    ProviderInfo,
    ProviderNotFoundError,
    ProviderPaymentResult,
)

from .schemas import (
    ErrorResponse,
    HealthCheckResponse,
    PatternListResponse,
    PatternRoutes,
    ProcessPaymentRequest,
)

logger = structlog.get_logger(__name__)

# Create routers
patterns_router = APIRouter(prefix="/api/patterns", tags=["patterns"])
strategy_advanced_router = APIRouter(prefix="/api/strategy-advanced", tags=["strategy-advanced"])
monitoring_router = APIRouter(tags=["monitoring"])


def get_health_check(container: ServiceContainer = Depends(get_container)) -> HealthCheck:
    return HealthCheck(container)


def _scenario_for(container: ServiceContainer, name: str) -> Any:
    try:
        return container.scenario(name)
    except KeyError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Pattern '{name}' not found",
        )


async def _call(run: Callable[[], Any]) -> Any:
    """Scenarios are sync or async; await only when needed."""
    result = run()
    if inspect.isawaitable(result):
        result = await result
    return result


@patterns_router.get(
    "",
    response_model=PatternListResponse,
    summary="List patterns",
    description="List every pattern with its demo and self-test endpoints",
)
async def list_patterns(container: ServiceContainer = Depends(get_container)) -> Dict[str, Any]:
    names = container.pattern_names()
    return {
        "count": len(names),
        "patterns": [
            PatternRoutes(
                name=name,
                demo=f"{patterns_router.prefix}/{name}/demo",
                test=f"{patterns_router.prefix}/{name}/test",
            )
            for name in names
        ],
    }


@patterns_router.get(
    "/{name}/demo",
    response_model=PatternDemoResponse,
    summary="Run pattern demo",
    description="Run the demonstration scenario for a pattern",
)
async def run_pattern_demo(
    name: str,
    container: ServiceContainer = Depends(get_container),
) -> PatternDemoResponse:
    scenario = _scenario_for(container, name)
    start_time = time.time()

    bind_pattern_context(name, "demo")
    logger.info("pattern_demo_requested")
    response = await _call(scenario.run_demo)

    metrics.record_pattern_request(name, "demo", time.time() - start_time)
    return response


@patterns_router.get(
    "/{name}/test",
    response_model=PatternTestResponse,
    summary="Run pattern self-test",
    description="Run the self-test checks for a pattern; status is PASS only if every check passes",
)
async def run_pattern_test(
    name: str,
    container: ServiceContainer = Depends(get_container),
) -> PatternTestResponse:
    scenario = _scenario_for(container, name)
    start_time = time.time()

    bind_pattern_context(name, "test")
    logger.info("pattern_test_requested")
    response = await _call(scenario.run_tests)

    metrics.record_pattern_request(name, "test", time.time() - start_time)
    metrics.record_pattern_test(name, response.status)

    if response.status != "PASS":
        logger.warning(
            "pattern_test_failed",
            pattern=name,
            failed_checks=[c.name for c in response.checks if not c.passed],
        )
    return response


@strategy_advanced_router.post(
    "/process-payment",
    response_model=ProviderPaymentResult,
    summary="Process a payment",
    description="Process a payment through the provider registered under providerKey",
    responses={
        404: {"model": ErrorResponse, "description": "Provider not found"},
        400: {"model": ErrorResponse, "description": "Provider rejected amount or currency"},
    },
)
async def process_payment(
    request: ProcessPaymentRequest,
    container: ServiceContainer = Depends(get_container),
) -> Any:
    try:
        return await container.provider_payment_service.process_payment(
            amount=request.amount,
            currency=request.currency,
            provider_key=request.provider_key,
            customer_email=request.customer_email,
        )

    except ProviderNotFoundError as e:
        logger.warning("api_provider_not_found", provider_key=e.provider_key)
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=ErrorResponse(error=str(e), provider_key=e.provider_key).model_dump(mode="json", by_alias=True),
        )

    except PaymentValidationError as e:
        logger.warning("api_payment_validation_failed", provider_key=e.provider_key)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(error=str(e), provider_key=e.provider_key).model_dump(mode="json", by_alias=True),
        )


@strategy_advanced_router.get(
    "/providers",
    response_model=List[ProviderInfo],
    summary="List payment providers",
    description="Registered providers with their minimum amount and currencies",
)
async def list_providers(container: ServiceContainer = Depends(get_container)) -> List[ProviderInfo]:
    return container.provider_payment_service.get_available_providers()


@monitoring_router.get(
    "/health",
    response_model=HealthCheckResponse,
    summary="Health check",
    description="Check overall system health",
)
async def health(health_check: HealthCheck = Depends(get_health_check)) -> Dict[str, Any]:
    """Health check endpoint for monitoring."""
    try:
        return await health_check.check_all()
    except Exception as e:
        logger.error("health_check_error", error=str(e))
        return {
            "status": "unhealthy",
            "checks": {"error": str(e)},
        }


@monitoring_router.get(
    "/health/live",
    response_model=HealthCheckResponse,
    summary="Liveness probe",
    description="Kubernetes liveness probe endpoint",
)
async def liveness(health_check: HealthCheck = Depends(get_health_check)) -> Dict[str, Any]:
    """Liveness probe endpoint."""
    return await health_check.liveness()


@monitoring_router.get(
    "/health/ready",
    response_model=HealthCheckResponse,
    summary="Readiness probe",
    description="Kubernetes readiness probe endpoint",
)
async def readiness(health_check: HealthCheck = Depends(get_health_check)) -> Dict[str, Any]:
    """Readiness probe endpoint."""
    result = await health_check.readiness()
    if result["status"] != "healthy":
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=result)
    return result


@monitoring_router.get(
    "/metrics",
    summary="Prometheus metrics",
    description="Expose Prometheus metrics",
    include_in_schema=False,
)
async def prometheus_metrics() -> Response:
    """Expose Prometheus metrics."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
