"""
Repository port.

Business code depends on this interface; MongoRepository is the
MongoDB-backed implementation.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Mapping, Optional, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """CRUD contract over entities of a single shape."""

    @abstractmethod
    async def create(self, entity: T) -> str:
        """
        Persist a new entity.

        Returns:
            Identifier assigned by the store
        """

    @abstractmethod
    async def get(
        self,
        filter: Optional[Mapping[str, Any]] = None,
        skip: Optional[int] = None,
        take: Optional[int] = None,
    ) -> list[T]:
        """
        Find entities matching a filter.

        Args:
            filter: Field -> expected value; empty matches everything
            skip: Matches to discard from the start
            take: Maximum matches to return
        """

    @abstractmethod
    async def get_by_id(self, id: str) -> T:
        """Find a single entity by identifier."""

    @abstractmethod
    async def update(self, id: str, entity: T) -> None:
        """Overwrite the stored fields of an entity."""

    @abstractmethod
    async def delete(self, id: str) -> None:
        """Remove an entity."""
