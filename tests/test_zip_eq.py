import pytest
from hypothesis import given
from hypothesis import strategies as st

from iteradapt.zip_eq import zip_eq


def test_pinned_pairs():
    data = [1, 2, 3, 4, 5]
    assert list(zip_eq(data[:-1], data[1:])) == [(1, 2), (2, 3), (3, 4), (4, 5)]


def test_empty():
    assert list(zip_eq([], [])) == []


def test_left_shorter_raises():
    it = zip_eq([1], [1, 2])
    assert next(it) == (1, 1)
    with pytest.raises(ValueError):
        next(it)


def test_right_shorter_raises():
    with pytest.raises(ValueError):
        list(zip_eq([1, 2, 3], [1, 2]))


@given(a=st.lists(st.integers()), b=st.lists(st.integers()))
def test_equal_zip_eq(a, b):
    n = min(len(a), len(b))
    assert list(zip_eq(a[:n], b[:n])) == list(zip(a[:n], b[:n]))