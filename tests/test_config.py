"""
Tests for settings and store/repository factories.
"""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from recordstore.codecs.json_codec import JSONCodec
from recordstore.config import Settings
from recordstore.dependencies import configure_logging, create_repository, create_store
from recordstore.repositories.kv_repository import KeyValueRepository
from recordstore.stores.file_store import FileKeyValueStore
from recordstore.stores.memory_store import MemoryKeyValueStore
from recordstore.stores.redis_store import RedisKeyValueStore


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self, monkeypatch):
        """Test default values."""
        monkeypatch.delenv("STORE_BACKEND", raising=False)
        settings = Settings(_env_file=None)

        assert settings.STORE_BACKEND == "memory"
        assert settings.LOG_LEVEL == "INFO"
        assert settings.REDIS_URL == "redis://localhost:6379/0"

    def test_environment_override(self, monkeypatch):
        """Test variables are read from the environment."""
        monkeypatch.setenv("STORE_BACKEND", "redis")
        monkeypatch.setenv("REDIS_KEY_PREFIX", "crm:")
        monkeypatch.setenv("REDIS_MAX_CONNECTIONS", "8")

        settings = Settings(_env_file=None)

        assert settings.STORE_BACKEND == "redis"
        assert settings.REDIS_KEY_PREFIX == "crm:"
        assert settings.REDIS_MAX_CONNECTIONS == 8

    def test_invalid_backend(self, monkeypatch):
        """Test unknown backends are rejected."""
        monkeypatch.setenv("STORE_BACKEND", "cassandra")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestFactories:
    """Test store and repository wiring."""

    def test_memory_store(self):
        """Test memory backend selection."""
        store = create_store(Settings(_env_file=None, STORE_BACKEND="memory"))

        assert isinstance(store, MemoryKeyValueStore)

    def test_file_store(self, tmp_path):
        """Test file backend selection."""
        store = create_store(
            Settings(_env_file=None, STORE_BACKEND="file", FILE_STORE_DIR=str(tmp_path / "db"))
        )

        assert isinstance(store, FileKeyValueStore)
        assert store.base_dir == tmp_path / "db"

    def test_redis_store_is_unconnected(self):
        """Test redis backend selection passes settings through."""
        store = create_store(
            Settings(
                _env_file=None,
                STORE_BACKEND="redis",
                REDIS_URL="redis://cache:6379/2",
                REDIS_KEY_PREFIX="crm:",
                REDIS_SOCKET_TIMEOUT=2,
            )
        )

        assert isinstance(store, RedisKeyValueStore)
        assert store.client is None
        assert store.redis_url == "redis://cache:6379/2"
        assert store.prefix == "crm:"
        assert store.socket_timeout == 2

    def test_each_call_builds_new_store(self):
        """Test there is no shared store instance."""
        settings = Settings(_env_file=None)

        assert create_store(settings) is not create_store(settings)

    def test_create_repository(self):
        """Test repository wiring."""
        store = MemoryKeyValueStore()
        codec = JSONCodec()

        repository = create_repository("Clients Database", codec, store)

        assert isinstance(repository, KeyValueRepository)
        assert repository.table_name == "Clients Database"
        assert repository.codec is codec
        assert repository.store is store


class TestConfigureLogging:
    """Test logging is driven by settings."""

    def test_settings_passed_to_setup_logging(self):
        """Test LOG_LEVEL and SERVICE_NAME reach setup_logging."""
        settings = Settings(_env_file=None, LOG_LEVEL="DEBUG", SERVICE_NAME="crm-records")

        with patch("recordstore.dependencies.setup_logging") as setup_logging:
            configure_logging(settings)

        setup_logging.assert_called_once_with(log_level="DEBUG", service_name="crm-records")

    def test_settings_loaded_from_environment(self, monkeypatch):
        """Test settings are read from the environment when omitted."""
        monkeypatch.setenv("LOG_LEVEL", "WARNING")

        with patch("recordstore.dependencies.setup_logging") as setup_logging:
            configure_logging()

        assert setup_logging.call_args.kwargs["log_level"] == "WARNING"
