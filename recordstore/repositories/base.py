"""
CRUD repository interface (Abstract Base Class).

Defines the contract for item persistence and retrieval independent of
the underlying storage mechanism.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from recordstore.domain.entities import Item, ItemIdentifier

V = TypeVar("V")


class CRUDRepository(ABC, Generic[V]):
    """
    Abstract repository interface for items carrying payloads of type V.

    Identifiers are supplied by the caller; the repository never generates them.
    """

    @abstractmethod
    async def create(self, item: Item[V]) -> None:
        """
        Store an item, overwriting any existing record with the same identifier.

        Args:
            item: Item to persist
        """
        pass

    @abstractmethod
    async def read(self, identifier: ItemIdentifier) -> V:
        """
        Get the payload stored for an identifier.

        Args:
            identifier: Item identifier

        Returns:
            The stored payload

        Raises:
            RecordNotFoundException: If no record exists
        """
        pass

    @abstractmethod
    async def update(self, item: Item[V]) -> None:
        """
        Replace the record of an existing item.

        Args:
            item: Item carrying the new payload

        Raises:
            RecordNotFoundException: If no record exists
        """
        pass

    @abstractmethod
    async def delete(self, identifier: ItemIdentifier) -> None:
        """
        Remove the record of an existing item.

        Args:
            identifier: Item identifier

        Raises:
            RecordNotFoundException: If no record exists
        """
        pass

    async def read_item(self, identifier: ItemIdentifier) -> Item[V]:
        """Get the stored payload wrapped back into an Item."""
        return Item(identifier=identifier, value=await self.read(identifier))
