from __future__ import annotations

from typing import Optional, Sequence

from .base import KeyValueStore


class InMemoryStore(KeyValueStore):
    """Process-local store, used by the testing settings."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None

    def keys(self) -> Sequence[str]:
        return sorted(self._data)
