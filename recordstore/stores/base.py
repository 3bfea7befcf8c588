"""
Key-value store interface (Abstract Base Class).

Defines the contract for byte persistence by string key, independent of
the underlying medium (process memory, local files, Redis, ...).
"""

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStore(ABC):
    """
    Abstract interface for a durable string -> bytes mapping.

    The store has no notion of records that "must exist": deleting a missing
    key is a no-op. Existence rules are enforced by the repository layer.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[bytes]:
        """
        Get the bytes stored under a key.

        Args:
            key: Storage key

        Returns:
            Stored bytes, or None if the key is absent
        """
        pass

    @abstractmethod
    async def set(self, key: str, data: bytes) -> None:
        """
        Store bytes under a key, overwriting any existing value.

        Args:
            key: Storage key
            data: Bytes to store
        """
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        """
        Remove a key if present.

        Args:
            key: Storage key
        """
        pass

    async def exists(self, key: str) -> bool:
        """Check whether a key is present."""
        return await self.get(key) is not None
