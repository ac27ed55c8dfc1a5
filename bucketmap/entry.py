from __future__ import annotations
from typing import Any, Generic, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


def key_hash(key: Any) -> int:
    """Hash code used for bucketing; ``None`` hashes to 0."""
    return 0 if key is None else hash(key)


class Entry(Generic[K, V]):
    """A single chain node in a :class:`HashMap` bucket.

    The key's hash is computed once at construction and cached, so chain
    walks can reject most non-matching nodes without calling ``__eq__``.
    """

    __slots__ = ("hash", "_key", "value", "next")

    def __init__(self, key: K, value: V, next: Optional["Entry[K, V]"] = None) -> None:
        self.hash: int = key_hash(key)
        self._key = key
        self.value = value
        self.next = next

    @property
    def key(self) -> K:
        return self._key

    def matches(self, key: K, hash_code: int) -> bool:
        """Return True if this entry holds *key* (whose hash is *hash_code*)."""
        if self.hash != hash_code:
            return False
        return self._key is key or self._key == key

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Entry({self._key!r}, {self.value!r})"
