"""Repository and unit-of-work contracts."""
from typing import Callable, List, Optional, Protocol, TypeVar

TKey = TypeVar("TKey")
TEntity = TypeVar("TEntity")

Change = Callable[[], None]


class EntityNotFoundError(Exception):
    """Raised when updating an entity whose key is not stored."""

    pass


class Repository(Protocol[TKey, TEntity]):
    def get_by_id(self, key: TKey) -> Optional[TEntity]:
        ...

    def get_all(self) -> List[TEntity]:
        ...

    def add(self, entity: TEntity) -> None:
        ...

    def update(self, entity: TEntity) -> None:
        ...

    def delete(self, key: TKey) -> None:
        ...

    def exists(self, key: TKey) -> bool:
        ...


class UnitOfWork(Protocol):
    def begin_transaction(self) -> None:
        ...

    def register_change(self, change: Change) -> None:
        ...

    def save_changes(self) -> int:
        ...

    def commit(self) -> None:
        ...

    def rollback(self) -> None:
        ...
