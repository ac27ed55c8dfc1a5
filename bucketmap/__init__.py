from .entry import Entry, key_hash
from .errors import ConcurrentModificationError
from .hash_map import HashMap
from .views import (
    EntriesView,
    EntryIterator,
    HashIterator,
    KeyIterator,
    KeysView,
    ValueIterator,
    ValuesView,
)
from .dictionary import Dictionary

__all__ = [
    "Entry",
    "key_hash",
    "ConcurrentModificationError",
    "HashMap",
    "HashIterator",
    "KeyIterator",
    "ValueIterator",
    "EntryIterator",
    "KeysView",
    "ValuesView",
    "EntriesView",
    "Dictionary",
]
