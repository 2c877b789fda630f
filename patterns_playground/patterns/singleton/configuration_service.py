"""
Application-lifetime configuration service.

One instance is created by the service container and handed to every
collaborator that needs it. That gives one instance per process, not
per deployment: several API replicas each own their own copy, so this
is no tool for cross-instance coordination.
"""
import itertools
import threading
import uuid
from typing import Dict, List, Optional

import structlog

from patterns_playground.config import Settings, get_settings

logger = structlog.get_logger(__name__)

_instance_numbers = itertools.count(1)
_instance_numbers_lock = threading.Lock()


def _next_instance_number() -> int:
    with _instance_numbers_lock:
        return next(_instance_numbers)


class ConfigurationService:
    """Configuration values backed by application settings."""

    def __init__(self, settings: Optional[Settings] = None):
        settings = settings or get_settings()
        self._instance_id = f"ConfigService-{_next_instance_number()}-{uuid.uuid4().hex[:8]}"
        self._values: Dict[str, str] = {
            "trading_api_url": settings.trading_api_url,
            "risk_check_enabled": str(settings.risk_check_enabled).lower(),
            "max_order_size": str(settings.max_order_size),
            "default_currency": settings.default_currency,
            "kafka_bootstrap_servers": settings.kafka_bootstrap_servers,
        }
        self._access_count = 0
        self._lock = threading.Lock()

        logger.info("configuration_service_created", instance_id=self._instance_id)

    @property
    def instance_id(self) -> str:
        return self._instance_id

    @property
    def access_count(self) -> int:
        return self._access_count

    def get_value(self, key: str) -> str:
        with self._lock:
            self._access_count += 1
        return self._values.get(key, "")

    def keys(self) -> List[str]:
        return sorted(self._values)
