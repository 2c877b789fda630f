"""Monitoring and observability package."""
from .health import HealthCheck, HealthCheckError
from .logging import bind_pattern_context, setup_logging
from .metrics import metrics

__all__ = ["bind_pattern_context", "metrics", "setup_logging", "HealthCheck", "HealthCheckError"]
