"""
Key-value implementation of the CRUD repository.

Each item is stored as one codec-encoded record under a key namespaced by
table name. update and delete check existence before mutating; the check
and the mutation are separate store calls and are not atomic.
"""

from typing import TypeVar

import structlog

from recordstore.codecs.base import Codec
from recordstore.domain.entities import Item, ItemIdentifier
from recordstore.domain.exceptions import RecordNotFoundException
from recordstore.metrics import track_operation
from recordstore.repositories.base import CRUDRepository
from recordstore.stores.base import KeyValueStore

logger = structlog.get_logger(__name__)

V = TypeVar("V")


def derive_key(table_name: str, identifier: ItemIdentifier) -> str:
    """
    Build the storage key of an item.

    The format is shared with previously persisted data and must not change.

    Args:
        table_name: Repository table name
        identifier: Item identifier

    Returns:
        Key in format: database_{table}_item_{identifier}
    """
    return f"database_{table_name}_item_{identifier}"


class KeyValueRepository(CRUDRepository[V]):
    """
    CRUD repository over a key-value store.

    Attributes:
        table_name: Namespace for identifiers, fixed for the repository's lifetime
        codec: Converts payloads to and from bytes
        store: Backing key-value store
    """

    def __init__(self, table_name: str, codec: Codec[V], store: KeyValueStore):
        """
        Initialize repository.

        Args:
            table_name: Table namespace (must be non-empty)
            codec: Payload codec
            store: Backing store
        """
        if not table_name:
            raise ValueError("Table name must not be empty")

        self._table_name = table_name
        self.codec = codec
        self.store = store

    @property
    def table_name(self) -> str:
        return self._table_name

    def storage_key(self, identifier: ItemIdentifier) -> str:
        """Get the storage key for an identifier in this table."""
        return derive_key(self._table_name, identifier)

    async def create(self, item: Item[V]) -> None:
        key = self.storage_key(item.identifier)
        async with track_operation(self._table_name, "create"):
            data = self.codec.encode(item.value)
            await self.store.set(key, data)

        logger.info(
            "Record created", table=self._table_name, identifier=item.identifier, key=key
        )

    async def read(self, identifier: ItemIdentifier) -> V:
        key = self.storage_key(identifier)
        async with track_operation(self._table_name, "read"):
            data = await self.store.get(key)
            if data is None:
                logger.warning(
                    "Record not found", table=self._table_name, identifier=identifier, key=key
                )
                raise RecordNotFoundException(identifier)
            value = self.codec.decode(data)

        logger.debug("Record read", table=self._table_name, identifier=identifier, key=key)
        return value

    async def update(self, item: Item[V]) -> None:
        key = self.storage_key(item.identifier)
        async with track_operation(self._table_name, "update"):
            await self._ensure_exists(item.identifier, key)
            data = self.codec.encode(item.value)
            await self.store.set(key, data)

        logger.info(
            "Record updated", table=self._table_name, identifier=item.identifier, key=key
        )

    async def delete(self, identifier: ItemIdentifier) -> None:
        key = self.storage_key(identifier)
        async with track_operation(self._table_name, "delete"):
            await self._ensure_exists(identifier, key)
            await self.store.delete(key)

        logger.info("Record deleted", table=self._table_name, identifier=identifier, key=key)

    async def exists(self, identifier: ItemIdentifier) -> bool:
        """Check whether a record exists for an identifier."""
        return await self.store.exists(self.storage_key(identifier))

    async def _ensure_exists(self, identifier: ItemIdentifier, key: str) -> None:
        if not await self.store.exists(key):
            logger.warning(
                "Record not found", table=self._table_name, identifier=identifier, key=key
            )
            raise RecordNotFoundException(identifier)

    def __repr__(self) -> str:
        return (
            f"KeyValueRepository(table_name={self._table_name!r}, "
            f"codec={self.codec!r}, store={type(self.store).__name__})"
        )
