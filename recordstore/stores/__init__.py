"""Store module initialization."""

from recordstore.stores.base import KeyValueStore
from recordstore.stores.file_store import FileKeyValueStore
from recordstore.stores.memory_store import MemoryKeyValueStore
from recordstore.stores.redis_store import RedisKeyValueStore

__all__ = [
    "FileKeyValueStore",
    "KeyValueStore",
    "MemoryKeyValueStore",
    "RedisKeyValueStore",
]
