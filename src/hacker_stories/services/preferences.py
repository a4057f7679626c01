"""
Persistent user preferences.

A ``KeyValueStore`` is any object with ``get``/``set`` over string keys and
values. ``SemiPersistentValue`` keeps one such value in memory and writes
every change through to the store on a best-effort basis.
"""

import json
import os
from typing import Dict, Optional, Protocol

from loguru import logger


class KeyValueStore(Protocol):
    """Minimal key/value backend used for preferences."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class InMemoryStore:
    """Dict-backed store; lives only as long as the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore:
    """
    Store persisted as a single JSON object on disk.

    Writes go to a temporary file first and replace the target atomically.
    A missing or unreadable file is treated as an empty store.
    """

    def __init__(self, path: str):
        self.path = path
        self._data: Dict[str, str] = self._load()

    def _load(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to load preferences from {self.path}: {str(e)}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring preferences file {self.path}: expected a JSON object")
            return {}
        return {str(k): str(v) for k, v in data.items() if v is not None}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        data = dict(self._data)
        data[key] = value

        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        tmp_path = self.path + ".tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        os.replace(tmp_path, self.path)

        self._data = data


class SemiPersistentValue:
    """
    A string value that survives restarts through a ``KeyValueStore``.

    The initial value is the stored one, falling back to ``default`` when the
    key is absent or holds an empty string. Failed writes are logged and
    otherwise ignored; the in-memory value is always updated.
    """

    def __init__(self, store: KeyValueStore, key: str, default: str):
        self.store = store
        self.key = key

        stored = None
        try:
            stored = store.get(key)
        except Exception as e:
            logger.warning(f"Could not read preference '{key}': {str(e)}")
        self._value = stored or default

    @property
    def value(self) -> str:
        return self._value

    def set(self, value: str) -> None:
        """Update the value and persist it."""
        self._value = value
        try:
            self.store.set(self.key, value)
        except Exception as e:
            logger.warning(f"Could not persist preference '{self.key}': {str(e)}")
