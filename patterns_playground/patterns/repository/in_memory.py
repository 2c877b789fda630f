"""
In-memory repository and unit of work.

The repository is generic over key and entity; a key selector pulls the
key out of each entity. The unit of work buffers changes registered
inside a transaction and applies them on save_changes. Outside a
transaction changes apply immediately.
"""
import threading
from typing import Callable, Dict, Generic, List, Optional

import structlog

from .contracts import Change, EntityNotFoundError, TEntity, TKey

logger = structlog.get_logger(__name__)


class InMemoryRepository(Generic[TKey, TEntity]):
    def __init__(self, key_selector: Callable[[TEntity], TKey]):
        self._key_selector = key_selector
        self._store: Dict[TKey, TEntity] = {}
        self._lock = threading.Lock()

    def get_by_id(self, key: TKey) -> Optional[TEntity]:
        with self._lock:
            return self._store.get(key)

    def get_all(self) -> List[TEntity]:
        with self._lock:
            return list(self._store.values())

    def add(self, entity: TEntity) -> None:
        key = self._key_selector(entity)
        with self._lock:
            self._store[key] = entity
        logger.debug("repository_entity_added", key=str(key))

    def update(self, entity: TEntity) -> None:
        key = self._key_selector(entity)
        with self._lock:
            if key not in self._store:
                raise EntityNotFoundError(f"Entity with key {key} not found")
            self._store[key] = entity
        logger.debug("repository_entity_updated", key=str(key))

    def delete(self, key: TKey) -> None:
        with self._lock:
            self._store.pop(key, None)
        logger.debug("repository_entity_deleted", key=str(key))

    def exists(self, key: TKey) -> bool:
        with self._lock:
            return key in self._store


class InMemoryUnitOfWork:
    def __init__(self) -> None:
        self._in_transaction = False
        self._pending: List[Change] = []
        self._lock = threading.Lock()

    @property
    def in_transaction(self) -> bool:
        return self._in_transaction

    def begin_transaction(self) -> None:
        with self._lock:
            self._in_transaction = True
            self._pending.clear()
        logger.debug("unit_of_work_begun")

    def register_change(self, change: Change) -> None:
        with self._lock:
            if self._in_transaction:
                self._pending.append(change)
                return
        change()

    def save_changes(self) -> int:
        """Apply buffered changes and return how many were applied."""
        with self._lock:
            pending = list(self._pending)
            self._pending.clear()
            self._in_transaction = False

        for change in pending:
            change()

        logger.debug("unit_of_work_saved", change_count=len(pending))
        return len(pending)

    def commit(self) -> None:
        with self._lock:
            self._pending.clear()
            self._in_transaction = False
        logger.debug("unit_of_work_committed")

    def rollback(self) -> None:
        with self._lock:
            discarded = len(self._pending)
            self._pending.clear()
            self._in_transaction = False
        logger.info("unit_of_work_rolled_back", discarded_changes=discarded)
