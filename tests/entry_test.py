from bucketmap import Entry, key_hash


class FixedHash:
    """Key with a caller-chosen hash; equal when labels are equal."""

    def __init__(self, label, h):
        self.label = label
        self.h = h

    def __hash__(self):
        return self.h

    def __eq__(self, other):
        return isinstance(other, FixedHash) and other.label == self.label


def test_none_key_hashes_to_zero():
    assert key_hash(None) == 0
    assert Entry(None, "v").hash == 0


def test_hash_is_cached_at_construction():
    e = Entry("k", 1)
    assert e.hash == hash("k")
    e.value = 2
    assert e.hash == hash("k")


def test_matches_requires_hash_and_equality():
    e = Entry(FixedHash("a", 7), 1)
    assert e.matches(FixedHash("a", 7), 7)
    # same hash, different key
    assert not e.matches(FixedHash("b", 7), 7)
    # hash mismatch short-circuits even for an equal key
    assert not e.matches(FixedHash("a", 7), 8)


def test_none_key_matches_none():
    e = Entry(None, 1)
    assert e.matches(None, 0)
    assert not e.matches(0, 0)


def test_chain_link():
    tail = Entry("b", 2)
    head = Entry("a", 1, tail)
    assert head.next is tail
    assert tail.next is None
