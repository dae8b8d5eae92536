from __future__ import annotations

from typing import Callable, Hashable, Sequence, TypeVar

T = TypeVar("T")


def upsert(
    items: Sequence[T],
    key: Hashable,
    *,
    key_of: Callable[[T], Hashable],
    factory: Callable[[], T],
    mutator: Callable[[T], T],
) -> tuple[list[T], T]:
    """Create-if-absent-then-update over an immutable collection.

    Returns the new collection and the stored item. An existing item keeps
    its position; a new one is appended.
    """
    out = list(items)
    for idx, item in enumerate(out):
        if key_of(item) == key:
            updated = mutator(item)
            out[idx] = updated
            return out, updated

    created = mutator(factory())
    out.append(created)
    return out, created
