"""
Factory functions wiring stores and repositories.

Stores are built explicitly from settings and passed to repositories;
nothing here keeps a global instance.
"""

from typing import Optional, TypeVar

from recordstore.codecs.base import Codec
from recordstore.config import Settings
from recordstore.logging_config import get_logger, setup_logging
from recordstore.repositories.kv_repository import KeyValueRepository
from recordstore.stores.base import KeyValueStore
from recordstore.stores.file_store import FileKeyValueStore
from recordstore.stores.memory_store import MemoryKeyValueStore
from recordstore.stores.redis_store import RedisKeyValueStore

logger = get_logger(__name__)

V = TypeVar("V")


def create_store(settings: Optional[Settings] = None) -> KeyValueStore:
    """
    Build the key-value store selected by ``STORE_BACKEND``.

    A Redis store is returned unconnected; await ``connect()`` before use.

    Args:
        settings: Settings to read (loaded from the environment if None)

    Returns:
        Configured store instance
    """
    settings = settings or Settings()
    backend = settings.STORE_BACKEND

    if backend == "memory":
        store: KeyValueStore = MemoryKeyValueStore()
    elif backend == "file":
        store = FileKeyValueStore(settings.FILE_STORE_DIR)
    elif backend == "redis":
        store = RedisKeyValueStore(
            redis_url=settings.REDIS_URL,
            prefix=settings.REDIS_KEY_PREFIX,
            max_connections=settings.REDIS_MAX_CONNECTIONS,
            socket_timeout=settings.REDIS_SOCKET_TIMEOUT,
            socket_connect_timeout=settings.REDIS_CONNECT_TIMEOUT,
        )
    else:
        raise ValueError(f"Unknown store backend: {backend}")

    logger.info(f"Created {backend} store")
    return store


def create_repository(
    table_name: str, codec: Codec[V], store: KeyValueStore
) -> KeyValueRepository[V]:
    """Wire a repository for one table."""
    return KeyValueRepository(table_name=table_name, codec=codec, store=store)


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Apply ``LOG_LEVEL`` and ``SERVICE_NAME`` to stdlib logging and structlog."""
    settings = settings or Settings()
    setup_logging(log_level=settings.LOG_LEVEL, service_name=settings.SERVICE_NAME)
