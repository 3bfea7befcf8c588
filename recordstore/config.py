"""
Configuration management for the record store.

Loads and validates environment variables selecting the storage backend.
"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Record store settings loaded from environment variables.

    All settings can be overridden via environment variables.
    """

    # Logging
    LOG_LEVEL: str = "INFO"
    SERVICE_NAME: str = "recordstore"

    # Store selection
    STORE_BACKEND: Literal["memory", "file", "redis"] = "memory"

    # File store
    FILE_STORE_DIR: str = ".recordstore"

    # Redis store
    REDIS_URL: str = "redis://localhost:6379/0"
    REDIS_KEY_PREFIX: str = ""
    REDIS_MAX_CONNECTIONS: int = 50
    REDIS_SOCKET_TIMEOUT: int = 5
    REDIS_CONNECT_TIMEOUT: int = 5

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )
