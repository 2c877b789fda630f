"""In-memory stand-in for a Kafka producer."""
import threading
from datetime import datetime
from typing import Any, List, NamedTuple, Protocol

import structlog

from patterns_playground.domain.models import utc_now

logger = structlog.get_logger(__name__)


class PublishedMessage(NamedTuple):
    topic: str
    message: Any
    timestamp: datetime


class EventProducer(Protocol):
    """Interface for event publishing."""

    async def publish(self, topic: str, message: Any) -> None:
        ...


class FakeKafkaProducer:
    """Records published messages instead of talking to brokers."""

    def __init__(self) -> None:
        self._messages: List[PublishedMessage] = []
        self._lock = threading.Lock()

    async def publish(self, topic: str, message: Any) -> None:
        with self._lock:
            self._messages.append(PublishedMessage(topic, message, utc_now()))
        logger.info(
            "kafka_message_published",
            topic=topic,
            message_type=type(message).__name__,
        )

    def published_messages(self) -> List[PublishedMessage]:
        with self._lock:
            return list(self._messages)
