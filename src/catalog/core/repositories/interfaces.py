"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.

Every method runs inside the transaction opened by the caller; the
repository never commits on its own.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Product``).
    """

    @abstractmethod
    def get_by_id(self, id: int) -> Optional[T]:
        """Retrieve an entity by its primary key."""

    @abstractmethod
    def list(self) -> List[T]:
        """List all entities in ascending primary-key order."""

    @abstractmethod
    def exists_by_id(self, id: int) -> bool:
        """Return whether an entity with the given primary key exists."""

    @abstractmethod
    def insert(self, entity: T) -> T:
        """Persist a new entity, assigning its id and timestamps."""

    @abstractmethod
    def update(self, entity: T) -> T:
        """Persist changes to an existing entity, refreshing ``updated_at``."""

    @abstractmethod
    def delete(self, id: int) -> None:
        """Permanently remove an entity by ID.  No-op when absent."""
