"""Abstract repository interfaces (ports): define the contract, not the implementation."""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from bson import ObjectId

T = TypeVar("T")


class CrudRepository(ABC, Generic[T]):
    """Port for document persistence of one record type ``T``.

    Implementations raise ``InternalError`` when the underlying store fails.
    """

    @abstractmethod
    async def list_with_filter(self, filter_doc: dict[str, Any]) -> list[T]:
        """Return every record matching ``filter_doc`` in storage order ({} matches all)."""
        ...

    @abstractmethod
    async def save(self, record: T) -> str:
        """Insert a new record and return its identifier as a hex string."""
        ...

    @abstractmethod
    async def update_by_id(self, record_id: ObjectId, record: T) -> int:
        """Merge the non-null fields of ``record`` into the stored one. Returns the modified count."""
        ...

    @abstractmethod
    async def remove_by_id(self, record_id: ObjectId) -> int:
        """Delete a record. Returns the deleted count (0 when it did not exist)."""
        ...
