"""Key-value persistence for small session values such as the search term."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Protocol

from loguru import logger

SEARCH_TERM_KEY = "search"
DEFAULT_SEARCH_TERM = "React"


class KeyValueStore(Protocol):
    """Narrow persistence port: string values under string keys."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class InMemoryStore:
    """Process-local store, used for tests and throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class JsonFileStore:
    """Persist key-value pairs as a single JSON object file."""

    def __init__(self, path: Path):
        self.path = path.expanduser()

    def get(self, key: str) -> str | None:
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(f"{self.path.name}.tmp")
        tmp_path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        tmp_path.replace(self.path)

    def _load(self) -> dict:
        if not self.path.exists():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"Invalid store file {self.path}: root JSON payload must be an object")
        return data


class PersistentValue:
    """
    A string value mirrored to a key-value store.

    The value is read once at construction and written back on every change.
    The store is a convenience: when it fails, reads fall back to the default
    and writes are dropped, so callers never see a persistence error.
    """

    def __init__(self, store: KeyValueStore, key: str, default: str):
        self.store = store
        self.key = key
        self.default = default
        self._value = self._read()

    @property
    def value(self) -> str:
        return self._value

    @value.setter
    def value(self, new_value: str) -> None:
        if new_value == self._value:
            return
        self._value = new_value
        try:
            self.store.set(self.key, new_value)
        except Exception as e:
            logger.warning("Failed to persist {!r}: {}", self.key, e)

    def _read(self) -> str:
        try:
            stored = self.store.get(self.key)
        except Exception as e:
            logger.warning("Failed to read {!r}, using default: {}", self.key, e)
            return self.default
        return self.default if stored is None else stored
