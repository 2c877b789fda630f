"""
FastAPI application for the Design Patterns Playground.

Routers:
- /api/patterns: list, demo and self-test for each pattern
- /api/strategy-advanced: provider payments and provider listing
- /health, /metrics: probes and Prometheus exposition

Every request gets an id (taken from X-Request-ID when the caller sends
one) that is bound into the structlog context and echoed back.
"""
import time
import uuid
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict

import structlog
from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from patterns_playground import __version__
from patterns_playground.config import get_settings
from patterns_playground.container import get_container
from patterns_playground.monitoring.logging import setup_logging

from .routes import monitoring_router, patterns_router, strategy_advanced_router

REQUEST_ID_HEADER = "X-Request-ID"

setup_logging()
logger = structlog.get_logger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, Any]:
    """
    Build the service container before serving and report on it at shutdown.
    """
    container = get_container()
    logger.info(
        "application_startup",
        env=settings.app_env,
        patterns=container.pattern_names(),
        providers=container.provider_resolver.keys(),
        mediator_requests=container.mediator.registered_types(),
    )

    yield

    logger.info(
        "application_shutdown",
        command_audit_entries=len(container.command_handler.get_audit_log()),
        queued_commands=container.command_handler.get_queue_count(),
        events_forwarded=len(container.kafka_producer.published_messages()),
    )


app = FastAPI(
    title="Design Patterns Playground API",
    description=(
        "Sixteen design patterns demonstrated on an order management and payment "
        "processing domain. Every pattern exposes a demo and a self-test endpoint."
    ),
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[REQUEST_ID_HEADER],
)


@app.middleware("http")
async def request_context_middleware(request: Request, call_next: Any) -> Response:
    """Bind the request id into the log context and time the request."""
    request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
    started = time.perf_counter()

    structlog.contextvars.bind_contextvars(
        request_id=request_id,
        method=request.method,
        path=request.url.path,
    )
    request.state.request_id = request_id

    try:
        response = await call_next(request)
    except Exception as e:
        logger.error(
            "request_failed",
            error=str(e),
            duration_seconds=time.perf_counter() - started,
        )
        raise
    else:
        response.headers[REQUEST_ID_HEADER] = request_id
        logger.info(
            "request_completed",
            status_code=response.status_code,
            duration_seconds=time.perf_counter() - started,
        )
        return response
    finally:
        structlog.contextvars.clear_contextvars()


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Anything a route did not map becomes a 500 carrying the request id."""
    request_id = getattr(request.state, "request_id", None)
    logger.error(
        "unhandled_exception",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
        request_id=request_id,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "message": "An unexpected error occurred. Please try again later.",
            "request_id": request_id,
        },
    )


app.include_router(patterns_router)
app.include_router(strategy_advanced_router)
app.include_router(monitoring_router)


@app.get("/", tags=["root"])
async def root() -> Dict[str, Any]:
    """Service information and entry points."""
    return {
        "service": settings.app_name,
        "version": __version__,
        "status": "operational",
        "environment": settings.app_env,
        "docs": app.docs_url,
        "patterns": patterns_router.prefix,
        "providers": f"{strategy_advanced_router.prefix}/providers",
        "health": "/health",
        "metrics": "/metrics",
    }


def main() -> None:
    """Console entry point: serve the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "patterns_playground.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        workers=1 if settings.debug else settings.api_workers,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
