"""Lazy iteration over a :class:`~bucketmap.hash_map.HashMap`.

Views (``KeysView``, ``ValuesView``, ``EntriesView``) are what
``HashMap.keys()`` / ``values()`` / ``entries()`` return. A view keeps a
non-owning reference to its table and hands out a fresh single-pass
iterator each time it is iterated. Nothing is copied: iterators read the
live bucket array, bucket by bucket, following each chain in order.

A structural change to the table (new key, removal, clear, growth) while an
iterator is still running makes its next ``__next__`` call raise
:class:`~bucketmap.errors.ConcurrentModificationError`.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Any, Generic, Iterator, Optional, Tuple, TypeVar

from .errors import ConcurrentModificationError

if TYPE_CHECKING:  # pragma: no cover
    from .entry import Entry
    from .hash_map import HashMap

K = TypeVar("K")
V = TypeVar("V")
T = TypeVar("T")


class HashIterator(Generic[T]):
    """Cursor over a table's buckets: (bucket index, current entry)."""

    __slots__ = ("_table", "_bucket_index", "_current", "_expected_mod_count")

    def __init__(self, table: "HashMap[Any, Any]") -> None:
        self._table = table
        self._expected_mod_count = table._mod_count
        self._bucket_index = -1
        self._current: Optional[Entry[Any, Any]] = None
        self._advance_bucket()

    def _advance_bucket(self) -> None:
        """Move to the head of the next non-empty bucket, if any."""
        buckets = self._table._buckets
        while self._current is None:
            self._bucket_index += 1
            if self._bucket_index >= len(buckets):
                return
            self._current = buckets[self._bucket_index]

    def has_next(self) -> bool:
        return self._current is not None

    def _next_entry(self) -> "Entry[Any, Any]":
        if self._current is None:
            raise StopIteration
        if self._table._mod_count != self._expected_mod_count:
            raise ConcurrentModificationError("HashMap changed size during iteration")
        entry = self._current
        self._current = entry.next
        if self._current is None:
            self._advance_bucket()
        return entry

    def _project(self, entry: "Entry[Any, Any]") -> T:
        raise NotImplementedError

    def __iter__(self) -> "HashIterator[T]":
        return self

    def __next__(self) -> T:
        return self._project(self._next_entry())


class KeyIterator(HashIterator[K]):
    __slots__ = ()

    def _project(self, entry: "Entry[Any, Any]") -> K:
        return entry.key


class ValueIterator(HashIterator[V]):
    __slots__ = ()

    def _project(self, entry: "Entry[Any, Any]") -> V:
        return entry.value


class EntryIterator(HashIterator[Tuple[K, V]]):
    __slots__ = ()

    def _project(self, entry: "Entry[Any, Any]") -> Tuple[K, V]:
        return (entry.key, entry.value)


class _View:
    __slots__ = ("_table",)

    def __init__(self, table: "HashMap[Any, Any]") -> None:
        self._table = table

    def __len__(self) -> int:
        return self._table.count()

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"{type(self).__name__}({list(self)!r})"  # type: ignore[call-overload]


class KeysView(_View, Generic[K]):
    __slots__ = ()

    def __iter__(self) -> Iterator[K]:
        return KeyIterator(self._table)


class ValuesView(_View, Generic[V]):
    __slots__ = ()

    def __iter__(self) -> Iterator[V]:
        return ValueIterator(self._table)


class EntriesView(_View, Generic[K, V]):
    __slots__ = ()

    def __iter__(self) -> Iterator[Tuple[K, V]]:
        return EntryIterator(self._table)
