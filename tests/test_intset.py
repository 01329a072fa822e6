import pytest

from chapterkit.intset import IntSet


def test_example_one():
    x, y = IntSet(), IntSet()
    x.add(1)
    x.add(144)
    x.add(9)
    assert str(x) == "{1 9 144}"

    y.add(9)
    y.add(42)
    assert str(y) == "{9 42}"

    x.union_with(y)
    assert str(x) == "{1 9 42 144}"
    assert (x.has(9), x.has(123)) == (True, False)


def test_example_two():
    x = IntSet()
    for v in (1, 144, 9, 42):
        x.add(v)
    assert str(x) == "{1 9 42 144}"
    assert x.words == [4398046511618, 0, 65536]


def test_empty():
    s = IntSet()
    assert str(s) == "{}"
    assert not s.has(0)


def test_union_extends_shorter():
    small, big = IntSet(), IntSet()
    small.add(3)
    big.add(200)
    small.union_with(big)
    assert list(small) == [3, 200]
    assert 200 in small


def test_add_idempotent():
    s = IntSet()
    s.add(63)
    s.add(63)
    s.add(64)
    assert list(s) == [63, 64]


def test_negative_rejected():
    with pytest.raises(ValueError):
        IntSet().add(-1)