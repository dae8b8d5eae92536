from __future__ import annotations

from typing import Optional, Protocol, Sequence


class KeyValueStore(Protocol):
    """Backend holding named JSON documents as raw text.

    The record store only ever reads a whole document and writes a whole
    document back; backends need no partial-update support.
    """

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> bool:
        raise NotImplementedError

    def keys(self) -> Sequence[str]:
        raise NotImplementedError
