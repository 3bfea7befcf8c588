"""
Generic CRUD repositories over pluggable key-value stores and codecs.
"""

from recordstore.codecs import Codec, JSONCodec, PickleCodec
from recordstore.domain.entities import Item, ItemIdentifier
from recordstore.domain.exceptions import (
    DecodeException,
    EncodeException,
    RecordNotFoundException,
    RecordStoreException,
    StoreException,
)
from recordstore.repositories import CRUDRepository, KeyValueRepository, derive_key
from recordstore.stores import (
    FileKeyValueStore,
    KeyValueStore,
    MemoryKeyValueStore,
    RedisKeyValueStore,
)

__version__ = "0.1.0"

__all__ = [
    "CRUDRepository",
    "Codec",
    "DecodeException",
    "EncodeException",
    "FileKeyValueStore",
    "Item",
    "ItemIdentifier",
    "JSONCodec",
    "KeyValueRepository",
    "KeyValueStore",
    "MemoryKeyValueStore",
    "PickleCodec",
    "RecordNotFoundException",
    "RecordStoreException",
    "RedisKeyValueStore",
    "StoreException",
    "derive_key",
]
