"""Repository capability contracts.

Three narrow, independent interfaces instead of one CRUD interface. An
entity repository implements only the ones that make sense for it, and
consumers depend on the smallest capability they need (a read-only
consumer only needs ``TargetReader``).
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

IdT = TypeVar("IdT")
OwnerIdT = TypeVar("OwnerIdT")
PayloadT = TypeVar("PayloadT")
ResultT = TypeVar("ResultT")


class TargetReader(ABC, Generic[IdT, ResultT]):
    """Single-row lookup by primary key."""

    @abstractmethod
    async def read(self, id: IdT) -> ResultT:
        """Return the entity stored under ``id``.

        Raises the entity's not-found error if there is no such row.
        """


class AllReader(ABC, Generic[OwnerIdT, ResultT]):
    """Multi-row lookup by owner."""

    @abstractmethod
    async def read_all(self, owner_id: OwnerIdT) -> ResultT:
        """Return every entity owned by ``owner_id``, in store order."""


class Writer(TargetReader[IdT, ResultT], Generic[PayloadT, IdT, ResultT]):
    """Insert, update and delete, with read-back after every write.

    Implementations provide the raw row primitives (``insert_row``,
    ``update_row``, ``delete``) plus ``read``. ``insert`` and ``update``
    are built on top of them and return what the store holds after the
    write, not the payload that was passed in.
    """

    async def insert(self, payload: PayloadT) -> ResultT:
        entity_id = await self.insert_row(payload)
        return await self.read(entity_id)

    async def update(self, id: IdT, payload: PayloadT) -> ResultT:
        await self.update_row(id, payload)
        return await self.read(id)

    @abstractmethod
    async def insert_row(self, payload: PayloadT) -> IdT:
        """Store a new row and return its identifier."""

    @abstractmethod
    async def update_row(self, id: IdT, payload: PayloadT) -> None:
        """Replace the mutable fields of the row stored under ``id``."""

    @abstractmethod
    async def delete(self, id: IdT) -> None:
        """Remove the row stored under ``id``."""
