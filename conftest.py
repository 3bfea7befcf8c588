"""
Root conftest.py for the recordstore project.

Shared fixtures and payload models used across the test modules.
"""

from typing import Dict, List

import pytest
from pydantic import BaseModel

from recordstore.codecs.json_codec import JSONCodec
from recordstore.repositories.kv_repository import KeyValueRepository
from recordstore.stores.memory_store import MemoryKeyValueStore

CLIENTS_TABLE = "Clients Database"
ACTOR_ID = "Actor ID"


class Client(BaseModel):
    """Payload model used by the collection scenarios."""

    name: str


@pytest.fixture
def memory_store():
    """Create a fresh in-memory store."""
    return MemoryKeyValueStore()


@pytest.fixture
def value_repository(memory_store):
    """Repository storing plain mappings in the clients table."""
    return KeyValueRepository[Dict[str, str]](
        table_name=CLIENTS_TABLE,
        codec=JSONCodec(Dict[str, str]),
        store=memory_store,
    )


@pytest.fixture
def clients_repository(memory_store):
    """Repository storing lists of clients in the clients table."""
    return KeyValueRepository[List[Client]](
        table_name=CLIENTS_TABLE,
        codec=JSONCodec(List[Client]),
        store=memory_store,
    )
