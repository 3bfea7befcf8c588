"""
Repository layer - CRUD access to stored items.

This layer composes a codec and a key-value store behind a generic
create/read/update/delete contract keyed by item identifier.
"""

from recordstore.repositories.base import CRUDRepository
from recordstore.repositories.kv_repository import KeyValueRepository, derive_key

__all__ = ["CRUDRepository", "KeyValueRepository", "derive_key"]
