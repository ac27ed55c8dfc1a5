import pytest

from bucketmap import Dictionary


def test_dict_like():
    d = Dictionary({"a": 1, "b": 2}, c=3)
    assert d["a"] == 1
    assert d.get("z") is None
    assert d.get("z", 0) == 0
    assert "b" in d
    assert len(d) == 3

    assert set(d.keys()) == {"a", "b", "c"}
    assert set(d.values()) == {1, 2, 3}
    assert set(d.items()) == {("a", 1), ("b", 2), ("c", 3)}
    assert sorted(d) == ["a", "b", "c"]

    assert d.to_py() == {"a": 1, "b": 2, "c": 3}


def test_from_pairs():
    d = Dictionary([("x", 1), ("y", 2), ("x", 3)])
    assert d.to_py() == {"x": 3, "y": 2}


def test_missing_key_raises():
    d = Dictionary()
    with pytest.raises(KeyError):
        d["nope"]
    with pytest.raises(KeyError):
        del d["nope"]


def test_none_value_is_not_missing():
    d = Dictionary()
    d["a"] = None
    assert d["a"] is None
    assert "a" in d


def test_delete_and_clear():
    d = Dictionary(a=1, b=2)
    del d["a"]
    assert "a" not in d
    assert len(d) == 1
    d.clear()
    assert len(d) == 0
    assert d.to_py() == {}


def test_to_py_recurses():
    inner = Dictionary(x=1)
    outer = Dictionary(inner=inner, plain=2)
    assert outer.to_py() == {"inner": {"x": 1}, "plain": 2}


def test_views_are_live():
    d = Dictionary(a=1)
    keys = d.keys()
    d["b"] = 2
    assert sorted(keys) == ["a", "b"]


def test_repr():
    assert repr(Dictionary(a=1)) == "Dictionary({'a': 1})"
