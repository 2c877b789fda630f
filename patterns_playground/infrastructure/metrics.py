"""
Pattern-level metrics sink.

Distinct from the process-wide Prometheus registry in
monitoring.metrics: this sink is inspectable from a demo response,
so the Decorator pattern can show exactly what it recorded.
"""
import threading
from collections import defaultdict
from typing import Any, Dict, List, Optional, Protocol

import structlog

logger = structlog.get_logger(__name__)

Tags = Optional[Dict[str, str]]


class Metrics(Protocol):
    """Interface for observability hooks."""

    def increment_counter(self, name: str, tags: Tags = None) -> None:
        ...

    def record_duration(self, name: str, seconds: float, tags: Tags = None) -> None:
        ...

    def set_gauge(self, name: str, value: float, tags: Tags = None) -> None:
        ...


def metric_key(name: str, tags: Tags = None) -> str:
    """Flatten a metric name and its tags into a single key, e.g. ``name[a=1,b=2]``."""
    if not tags:
        return name
    rendered = ",".join(f"{k}={v}" for k, v in tags.items())
    return f"{name}[{rendered}]"


class InMemoryMetrics:
    """Thread-safe in-memory metrics sink."""

    def __init__(self) -> None:
        self._counters: Dict[str, int] = defaultdict(int)
        self._durations: Dict[str, List[float]] = defaultdict(list)
        self._gauges: Dict[str, float] = {}
        self._lock = threading.Lock()

    def increment_counter(self, name: str, tags: Tags = None) -> None:
        key = metric_key(name, tags)
        with self._lock:
            self._counters[key] += 1
            count = self._counters[key]
        logger.debug("counter_incremented", metric=key, count=count)

    def record_duration(self, name: str, seconds: float, tags: Tags = None) -> None:
        key = metric_key(name, tags)
        with self._lock:
            self._durations[key].append(seconds)
        logger.debug("duration_recorded", metric=key, duration_ms=seconds * 1000)

    def set_gauge(self, name: str, value: float, tags: Tags = None) -> None:
        key = metric_key(name, tags)
        with self._lock:
            self._gauges[key] = value
        logger.debug("gauge_set", metric=key, value=value)

    def snapshot(self) -> Dict[str, Any]:
        """Copy of all metrics; durations are reported in milliseconds."""
        with self._lock:
            return {
                "counters": dict(self._counters),
                "durations": {
                    key: [round(s * 1000, 3) for s in values]
                    for key, values in self._durations.items()
                },
                "gauges": dict(self._gauges),
            }
