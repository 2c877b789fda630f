"""Repository: data access behind a collection-like interface."""
from .contracts import EntityNotFoundError, Repository, UnitOfWork
from .in_memory import InMemoryRepository, InMemoryUnitOfWork
from .scenario import RepositoryScenario, order_repository

__all__ = [
    "EntityNotFoundError",
    "InMemoryRepository",
    "InMemoryUnitOfWork",
    "Repository",
    "RepositoryScenario",
    "UnitOfWork",
    "order_repository",
]
