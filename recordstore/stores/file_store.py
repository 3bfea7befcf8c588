"""
Filesystem key-value store.

Persistent local backend: every key is one file under a base directory.
Writes go through a temporary file and an atomic rename, and are flushed
to disk before ``set`` returns.
"""

import asyncio
import hashlib
import os
import tempfile
from pathlib import Path
from typing import Optional, Union
from urllib.parse import quote

from recordstore.domain.exceptions import StoreException
from recordstore.logging_config import get_logger
from recordstore.stores.base import KeyValueStore

logger = get_logger(__name__)

TEMP_FILE_PREFIX = ".tmp-"
HASHED_NAME_PREFIX = "#sha256-"
MAX_FILE_NAME_LENGTH = 255


class FileKeyValueStore(KeyValueStore):
    """
    Key-value store keeping one file per key.

    File names are the percent-encoded key, so any string is a valid key.
    Keys whose encoded name exceeds the file name limit are stored under
    a SHA-256 digest instead.

    Attributes:
        base_dir: Directory holding the key files
    """

    def __init__(self, base_dir: Union[str, Path]):
        """
        Initialize file store.

        Args:
            base_dir: Directory for key files (created if missing)
        """
        self.base_dir = Path(base_dir)
        self.base_dir.mkdir(parents=True, exist_ok=True)
        logger.info(f"Initialized FileKeyValueStore at {self.base_dir}")

    def _path_for(self, key: str) -> Path:
        """Map a key to its file path."""
        name = quote(key, safe="")
        # Leading dots would clash with "." / ".." and with temp files
        if name.startswith("."):
            name = "%2E" + name[1:]
        # Quoted names are ASCII without "#", so hashed names cannot collide
        if len(name) > MAX_FILE_NAME_LENGTH:
            name = HASHED_NAME_PREFIX + hashlib.sha256(key.encode("utf-8")).hexdigest()
        return self.base_dir / name

    async def get(self, key: str) -> Optional[bytes]:
        path = self._path_for(key)
        try:
            data = await asyncio.to_thread(_read_file, path)
        except OSError as e:
            logger.error(f"File store error on get {key}: {e}")
            raise StoreException("get", key, str(e)) from e

        logger.debug(f"Store {'HIT' if data is not None else 'MISS'}: {key}")
        return data

    async def set(self, key: str, data: bytes) -> None:
        path = self._path_for(key)
        try:
            await asyncio.to_thread(_write_file_atomic, self.base_dir, path, data)
        except OSError as e:
            logger.error(f"File store error on set {key}: {e}")
            raise StoreException("set", key, str(e)) from e

        logger.debug(f"Store SET: {key} ({len(data)} bytes)")

    async def delete(self, key: str) -> None:
        path = self._path_for(key)
        try:
            await asyncio.to_thread(path.unlink, missing_ok=True)
        except OSError as e:
            logger.error(f"File store error on delete {key}: {e}")
            raise StoreException("delete", key, str(e)) from e

        logger.debug(f"Store DELETE: {key}")

    async def exists(self, key: str) -> bool:
        path = self._path_for(key)
        try:
            return await asyncio.to_thread(path.is_file)
        except OSError as e:
            raise StoreException("exists", key, str(e)) from e


def _read_file(path: Path) -> Optional[bytes]:
    try:
        return path.read_bytes()
    except FileNotFoundError:
        return None


def _write_file_atomic(directory: Path, path: Path, data: bytes) -> None:
    fd, tmp_name = tempfile.mkstemp(dir=directory, prefix=TEMP_FILE_PREFIX)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise
