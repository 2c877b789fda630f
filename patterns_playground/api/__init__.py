"""FastAPI application and routes."""
from .main import app
from .schemas import (
    ErrorResponse,
    HealthCheckResponse,
    PatternListResponse,
    PatternRoutes,
    ProcessPaymentRequest,
)

__all__ = [
    "app",
    "ErrorResponse",
    "HealthCheckResponse",
    "PatternListResponse",
    "PatternRoutes",
    "ProcessPaymentRequest",
]
