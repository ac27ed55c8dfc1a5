from __future__ import annotations
import logging
from typing import Generic, Iterator, Optional, TypeVar

from .entry import Entry, key_hash
from .views import EntriesView, KeysView, ValuesView

K = TypeVar("K")
V = TypeVar("V")

logger = logging.getLogger(__name__)


class HashMap(Generic[K, V]):
    """A separate-chaining hash table.

    - Each bucket holds the head of a singly-linked chain of :class:`Entry`.
    - New keys are appended at the tail of their chain.
    - When the element count exceeds ``int(load_factor * capacity)`` the
      bucket array doubles and every entry is re-inserted.
    - Capacity never shrinks; :meth:`remove` and :meth:`clear` keep it.
    - ``None`` is a valid key and hashes to 0.

    Not thread-safe. Structural changes made while a view is being iterated
    are reported by the iterator as
    :class:`~bucketmap.errors.ConcurrentModificationError`.
    """

    __slots__ = ("_buckets", "_size", "_load", "_threshold", "_mod_count")

    DEFAULT_CAPACITY = 16
    DEFAULT_LOAD_FACTOR = 0.75
    GROWTH_FACTOR = 2

    def __init__(self, capacity: int = DEFAULT_CAPACITY, load_factor: float = DEFAULT_LOAD_FACTOR) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise TypeError(f"capacity must be an int, not {type(capacity).__name__}")
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        if not (0.0 < load_factor <= 1.0):
            raise ValueError("load_factor must be in (0.0, 1.0]")
        self._load: float = float(load_factor)
        self._buckets: list[Optional[Entry[K, V]]] = [None] * capacity
        self._threshold: int = int(self._load * capacity)
        self._size: int = 0
        self._mod_count: int = 0
        logger.debug("Created HashMap with %d buckets (threshold %d)", capacity, self._threshold)

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _bucket_index(self, hash_code: int) -> int:
        """Compute a non-negative bucket index (power-of-two optimization)."""
        cap = len(self._buckets)
        return hash_code & (cap - 1) if (cap & (cap - 1)) == 0 else hash_code % cap

    def _find_entry(self, key: K) -> Optional[Entry[K, V]]:
        h = key_hash(key)
        cur = self._buckets[self._bucket_index(h)]
        while cur is not None:
            if cur.matches(key, h):
                return cur
            cur = cur.next
        return None

    def _place_in_bucket(self, key: K, value: V) -> bool:
        h = key_hash(key)
        idx = self._bucket_index(h)
        last: Optional[Entry[K, V]] = None
        cur = self._buckets[idx]
        while cur is not None:
            if cur.matches(key, h):
                cur.value = value
                return True  # replaced
            last, cur = cur, cur.next

        entry = Entry(key, value)
        if last is None:
            self._buckets[idx] = entry
        else:
            last.next = entry
        self._size += 1
        self._mod_count += 1

        if self._size > self._threshold:
            self._resize()
        return False  # inserted new

    def _resize(self) -> None:
        """Grow the bucket array and re-insert every entry."""
        old_buckets = self._buckets
        new_cap = len(old_buckets) * self.GROWTH_FACTOR
        self._buckets = [None] * new_cap
        self._threshold = int(self._load * new_cap)
        self._size = 0
        logger.debug("Resizing HashMap from %d to %d buckets", len(old_buckets), new_cap)

        for head in old_buckets:
            cur = head
            while cur is not None:
                self._place_in_bucket(cur.key, cur.value)
                cur = cur.next

    # -----------------------------
    # Core operations
    # -----------------------------
    def count(self) -> int:
        """Number of key-value pairs stored."""
        return self._size

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Retrieve value for key or return default."""
        entry = self._find_entry(key)
        return default if entry is None else entry.value

    def contains(self, key: K) -> bool:
        """Check if key exists in the map (even when its value is None)."""
        return self._find_entry(key) is not None

    def place(self, key: K, value: V) -> bool:
        """Insert or update a key-value pair.

        Returns True if *key* was already present and its value was
        overwritten, False if a new entry was created.
        """
        return self._place_in_bucket(key, value)

    def remove(self, key: K) -> bool:
        """Remove key if present; return True if it was removed."""
        h = key_hash(key)
        idx = self._bucket_index(h)
        prev: Optional[Entry[K, V]] = None
        cur = self._buckets[idx]
        while cur is not None:
            if cur.matches(key, h):
                if prev is None:
                    self._buckets[idx] = cur.next
                else:
                    prev.next = cur.next
                cur.next = None
                self._size -= 1
                self._mod_count += 1
                return True
            prev, cur = cur, cur.next
        return False

    def clear(self) -> None:
        """Remove all entries. Keeps capacity and threshold."""
        for i in range(len(self._buckets)):
            self._buckets[i] = None
        self._size = 0
        self._mod_count += 1

    # -----------------------------
    # Introspection
    # -----------------------------
    @property
    def capacity(self) -> int:
        return len(self._buckets)

    @property
    def load_factor(self) -> float:
        return self._load

    @property
    def threshold(self) -> int:
        return self._threshold

    # -----------------------------
    # Iteration views
    # -----------------------------
    def keys(self) -> KeysView[K]:
        return KeysView(self)

    def values(self) -> ValuesView[V]:
        return ValuesView(self)

    def entries(self) -> EntriesView[K, V]:
        return EntriesView(self)

    # -----------------------------
    # Standard magic methods
    # -----------------------------
    def __len__(self) -> int:  # pragma: no cover - trivial
        return self._size

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys())

    def __repr__(self) -> str:  # pragma: no cover - trivial
        pairs = ", ".join(f"{k!r}: {v!r}" for k, v in self.entries())
        return f"HashMap({{{pairs}}})"
