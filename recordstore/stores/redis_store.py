"""
Key-value store implementation using Redis.

Provides a shared backend that works across multiple processes. Unlike a
cache, records are stored without TTL and every Redis failure is raised to
the caller.
"""

from typing import Optional

import redis.asyncio as redis
from redis.asyncio import Redis
from redis.exceptions import RedisError

from recordstore.domain.exceptions import StoreException
from recordstore.logging_config import get_logger
from recordstore.stores.base import KeyValueStore

logger = get_logger(__name__)


class RedisKeyValueStore(KeyValueStore):
    """
    Key-value store backed by Redis strings.

    Either pass an existing async client, or a URL and call ``connect()``
    before use.
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379/0",
        prefix: str = "",
        max_connections: int = 50,
        socket_timeout: int = 5,
        socket_connect_timeout: int = 5,
        client: Optional[Redis] = None,
    ):
        """
        Initialize Redis store.

        Args:
            redis_url: Redis connection URL
            prefix: Key prefix for namespacing
            max_connections: Maximum connections in pool
            socket_timeout: Socket read/write timeout
            socket_connect_timeout: Socket connection timeout
            client: Already connected client to use instead of ``redis_url``
        """
        self.redis_url = redis_url
        self.prefix = prefix
        self.max_connections = max_connections
        self.socket_timeout = socket_timeout
        self.socket_connect_timeout = socket_connect_timeout
        self.client: Optional[Redis] = client

    async def connect(self) -> None:
        """Establish Redis connection with connection pooling."""
        if self.client is not None:
            return

        client = redis.from_url(
            self.redis_url,
            max_connections=self.max_connections,
            socket_timeout=self.socket_timeout,
            socket_connect_timeout=self.socket_connect_timeout,
            decode_responses=False,
        )
        try:
            await client.ping()
        except RedisError as e:
            logger.error(f"Failed to connect to Redis: {e}")
            await client.aclose()
            raise StoreException("connect", reason=str(e)) from e

        self.client = client
        logger.info(
            "Redis store connected",
            extra={
                "extra_fields": {
                    "redis_url": self.redis_url.split("@")[-1],
                    "max_connections": self.max_connections,
                }
            },
        )

    async def disconnect(self) -> None:
        """Close Redis connection."""
        if self.client:
            await self.client.aclose()
            self.client = None
            logger.info("Redis store disconnected")

    async def health_check(self) -> bool:
        """
        Check Redis health.

        Returns:
            True if healthy, False otherwise
        """
        if not self.client:
            return False
        try:
            await self.client.ping()
            return True
        except RedisError as e:
            logger.error(f"Redis health check failed: {e}")
            return False

    def _make_key(self, key: str) -> str:
        """Generate namespaced Redis key."""
        return f"{self.prefix}{key}"

    def _require_client(self, operation: str, key: str) -> Redis:
        if self.client is None:
            raise StoreException(operation, key, "Redis not connected")
        return self.client

    async def get(self, key: str) -> Optional[bytes]:
        client = self._require_client("get", key)
        try:
            data = await client.get(self._make_key(key))
        except RedisError as e:
            logger.error(f"Redis error on get: {e}")
            raise StoreException("get", key, str(e)) from e

        logger.debug(f"Store {'HIT' if data is not None else 'MISS'}: {key}")
        return data

    async def set(self, key: str, data: bytes) -> None:
        client = self._require_client("set", key)
        try:
            await client.set(self._make_key(key), data)
        except RedisError as e:
            logger.error(f"Redis error on set: {e}")
            raise StoreException("set", key, str(e)) from e

        logger.debug(f"Store SET: {key} ({len(data)} bytes)")

    async def delete(self, key: str) -> None:
        client = self._require_client("delete", key)
        try:
            await client.delete(self._make_key(key))
        except RedisError as e:
            logger.error(f"Redis error on delete: {e}")
            raise StoreException("delete", key, str(e)) from e

        logger.debug(f"Store DELETE: {key}")

    async def exists(self, key: str) -> bool:
        client = self._require_client("exists", key)
        try:
            return await client.exists(self._make_key(key)) > 0
        except RedisError as e:
            logger.error(f"Redis error on exists: {e}")
            raise StoreException("exists", key, str(e)) from e
