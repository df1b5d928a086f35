"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, Sequence, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Product``).
    """

    @abstractmethod
    def list(
        self, order_by: Optional[Sequence[str]] = None, limit: Optional[int] = None
    ) -> List[T]:
        """List entities in the given order, capped at ``limit`` rows."""

    @abstractmethod
    def get_by_id(self, id: int) -> Optional[T]:
        """Retrieve an entity by its primary key, or ``None``."""

    @abstractmethod
    def create(self, **fields: Any) -> T:
        """Insert a new entity built from ``fields``."""

    @abstractmethod
    def save(self, entity: T, update_fields: Optional[Sequence[str]] = None) -> T:
        """Persist an existing entity; ``update_fields`` limits the columns written."""

    @abstractmethod
    def delete(self, entity: T) -> None:
        """Remove an entity permanently."""
