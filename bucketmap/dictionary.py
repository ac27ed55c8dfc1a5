from __future__ import annotations
from typing import Generic, Iterable, Iterator, Optional, Tuple, TypeVar

from .hash_map import HashMap
from .views import EntriesView, KeysView, ValuesView

K = TypeVar("K")
V = TypeVar("V")


class Dictionary(Generic[K, V]):
    """A minimal mapping-like wrapper around :class:`HashMap`.

    Adds the subscript protocol (``d[k]``, ``d[k] = v``, ``del d[k]``) with
    ``KeyError`` for missing keys, on top of the table's own API.
    """

    __slots__ = ("_map",)

    def __init__(self, it: Optional[Iterable[Tuple[K, V]]] = None, **kwargs: V) -> None:
        self._map: HashMap[K, V] = HashMap()
        if it is not None:
            # Accept dict-like or iterable of pairs
            if hasattr(it, "items"):
                for k, v in it.items():  # type: ignore[attr-defined]
                    self[k] = v
            else:
                for k, v in it:
                    self[k] = v
        for k, v in kwargs.items():
            self[k] = v  # type: ignore[index]

    def __setitem__(self, key: K, value: V) -> None:
        self._map.place(key, value)

    def __getitem__(self, key: K) -> V:
        if not self._map.contains(key):
            raise KeyError(key)
        return self._map.get(key)  # type: ignore[return-value]

    def __delitem__(self, key: K) -> None:
        if not self._map.remove(key):
            raise KeyError(key)

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        return self._map.get(key, default)

    def __contains__(self, key: K) -> bool:  # pragma: no cover - trivial
        return self._map.contains(key)

    def clear(self) -> None:
        self._map.clear()

    def keys(self) -> KeysView[K]:
        return self._map.keys()

    def values(self) -> ValuesView[V]:
        return self._map.values()

    def items(self) -> EntriesView[K, V]:
        return self._map.entries()

    def __len__(self) -> int:  # pragma: no cover - trivial
        return len(self._map)

    def to_py(self) -> dict[K, V]:
        """Convert to a native *dict*; recursively uses ``to_py`` when present."""
        d: dict[K, V] = {}
        for k, v in self._map.entries():
            if hasattr(v, "to_py") and callable(getattr(v, "to_py")):
                d[k] = v.to_py()  # type: ignore[attr-defined]
            else:
                d[k] = v
        return d

    def __iter__(self) -> Iterator[K]:  # pragma: no cover - simple
        return iter(self._map.keys())

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Dictionary({self.to_py()!r})"
