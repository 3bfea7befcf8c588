"""
In-memory key-value store.

Reference backend for tests and single-process use. Contents live as long
as the store instance and are never evicted.
"""

from typing import Dict, Optional

from recordstore.logging_config import get_logger
from recordstore.stores.base import KeyValueStore

logger = get_logger(__name__)


class MemoryKeyValueStore(KeyValueStore):
    """
    Dict-backed key-value store.

    Attributes:
        data: Mapping of storage key to stored bytes
        hits: Number of reads that found a key
        misses: Number of reads that found nothing
    """

    def __init__(self, initial: Optional[Dict[str, bytes]] = None):
        """
        Initialize memory store.

        Args:
            initial: Optional contents to pre-load
        """
        self.data: Dict[str, bytes] = dict(initial or {})

        # Statistics
        self.hits = 0
        self.misses = 0

        logger.info(f"Initialized MemoryKeyValueStore with {len(self.data)} keys")

    async def get(self, key: str) -> Optional[bytes]:
        data = self.data.get(key)

        if data is None:
            self.misses += 1
            logger.debug(f"Store MISS: {key}")
            return None

        self.hits += 1
        logger.debug(f"Store HIT: {key}")
        return data

    async def set(self, key: str, data: bytes) -> None:
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"Store values must be bytes, got {type(data).__name__}")
        self.data[key] = bytes(data)
        logger.debug(f"Store SET: {key} ({len(data)} bytes)")

    async def delete(self, key: str) -> None:
        if self.data.pop(key, None) is not None:
            logger.debug(f"Store DELETE: {key}")

    async def exists(self, key: str) -> bool:
        return key in self.data

    def clear(self) -> None:
        """Remove every key."""
        count = len(self.data)
        self.data.clear()
        logger.info(f"Cleared {count} keys from memory store")

    def __len__(self) -> int:
        return len(self.data)

    def get_stats(self) -> Dict[str, int]:
        """
        Get store statistics.

        Returns:
            Dictionary with store statistics
        """
        total_requests = self.hits + self.misses
        hit_rate = (self.hits / total_requests * 100) if total_requests > 0 else 0

        return {
            "size": len(self.data),
            "hits": self.hits,
            "misses": self.misses,
            "total_requests": total_requests,
            "hit_rate_percent": int(round(hit_rate)),
        }
