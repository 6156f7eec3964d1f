"""
Local key-value persistence for session snapshots.

Two implementations of IKeyValueStore:
- InMemoryKeyValueStore: process-local, used in tests and previews
- JsonFileKeyValueStore: a JSON object on disk, used by the CLI client
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Optional

from .interfaces import IKeyValueStore

logger = logging.getLogger(__name__)


class InMemoryKeyValueStore(IKeyValueStore):
    """Key-value store backed by a dict."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._items: dict[str, str] = dict(initial or {})

    async def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    async def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    async def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class JsonFileKeyValueStore(IKeyValueStore):
    """
    Key-value store persisted as a single JSON object in a file.

    Writes go to a temporary file that replaces the original, so a crash
    mid-write never leaves a truncated file behind. A file that is not a
    JSON object is treated as empty and overwritten by the next write.
    """

    def __init__(self, path: Path):
        self._path = Path(path)
        self._lock = asyncio.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> tuple[dict[str, str], bool]:
        """Load the file; the flag is False when the content was unusable."""
        if not self._path.exists():
            return {}, True
        content = self._path.read_text(encoding="utf-8")
        if not content.strip():
            return {}, True
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            logger.warning(f"Ignoring unreadable session file {self._path}: {e}")
            return {}, False
        if not isinstance(data, dict):
            logger.warning(f"Ignoring session file {self._path}: expected a JSON object")
            return {}, False
        return data, True

    def _write_all(self, data: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(data), encoding="utf-8")
        tmp_path.replace(self._path)

    async def get_item(self, key: str) -> Optional[str]:
        async with self._lock:
            data, _ = await asyncio.to_thread(self._read_all)
        return data.get(key)

    async def set_item(self, key: str, value: str) -> None:
        async with self._lock:
            data, _ = await asyncio.to_thread(self._read_all)
            data[key] = value
            await asyncio.to_thread(self._write_all, data)
        logger.debug(f"Stored {key} in {self._path}")

    async def remove_item(self, key: str) -> None:
        async with self._lock:
            data, readable = await asyncio.to_thread(self._read_all)
            if key in data or not readable:
                data.pop(key, None)
                await asyncio.to_thread(self._write_all, data)
