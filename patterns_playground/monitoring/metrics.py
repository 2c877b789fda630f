"""
Prometheus metrics for the patterns playground.

Tracks:
- Demo/test endpoint request counts and durations per pattern
- Pattern self-test outcomes
- Command handler executions and audit log size
- Payment provider requests
- Domain events published to the event bus
"""
from prometheus_client import Counter, Gauge, Histogram

# Endpoint metrics
pattern_requests_total = Counter(
    "pattern_requests_total",
    "Total number of pattern endpoint requests",
    ["pattern", "endpoint"],  # endpoint: demo, test
)

pattern_request_duration_seconds = Histogram(
    "pattern_request_duration_seconds",
    "Pattern endpoint duration in seconds",
    ["pattern", "endpoint"],
    buckets=(0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
)

pattern_test_results_total = Counter(
    "pattern_test_results_total",
    "Pattern self-test outcomes",
    ["pattern", "status"],  # PASS, FAIL
)

# Command metrics
command_executions_total = Counter(
    "command_executions_total",
    "Total command executions by final outcome",
    ["status"],  # success, failed, exception
)

command_audit_entries = Gauge(
    "command_audit_entries",
    "Number of entries in the command audit log",
)

# Payment provider metrics
payment_provider_requests_total = Counter(
    "payment_provider_requests_total",
    "Total payment requests routed through the provider resolver",
    ["provider", "status"],  # Success, Failed, not_found, invalid
)

# Event bus metrics
domain_events_published_total = Counter(
    "domain_events_published_total",
    "Total domain events published on the event bus",
    ["event_type"],
)


class MetricsCollector:
    """Helper class for collecting metrics."""

    @staticmethod
    def record_pattern_request(pattern: str, endpoint: str, duration_seconds: float) -> None:
        """Record a demo or test endpoint call."""
        pattern_requests_total.labels(pattern=pattern, endpoint=endpoint).inc()
        pattern_request_duration_seconds.labels(pattern=pattern, endpoint=endpoint).observe(
            duration_seconds
        )

    @staticmethod
    def record_pattern_test(pattern: str, status: str) -> None:
        """Record a pattern self-test outcome."""
        pattern_test_results_total.labels(pattern=pattern, status=status).inc()

    @staticmethod
    def record_command_execution(status: str) -> None:
        """Record the final outcome of a command execution."""
        command_executions_total.labels(status=status).inc()

    @staticmethod
    def set_command_audit_size(size: int) -> None:
        """Set the command audit log size."""
        command_audit_entries.set(size)

    @staticmethod
    def record_provider_request(provider: str, status: str) -> None:
        """Record a payment provider request."""
        payment_provider_requests_total.labels(provider=provider, status=status).inc()

    @staticmethod
    def record_domain_event(event_type: str) -> None:
        """Record a published domain event."""
        domain_events_published_total.labels(event_type=event_type).inc()


# Export singleton instance
metrics = MetricsCollector()
