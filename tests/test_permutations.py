from itertools import islice
from math import perm
from operator import length_hint

import pytest
from hypothesis import given, settings, strategies as st

from iteradapt.permutations import Permutations, permutations


def _panicking_counter(limit=10_000):
    curr = 0
    while True:
        curr += 1
        assert curr != limit, "input reached its maximum, suggesting collection by the adaptor"
        yield None


def test_permutations_no_collect():
    taken = list(islice(permutations(_panicking_counter(), 5), 5))
    assert len(taken) == 5
    assert all(len(p) == 5 for p in taken)


def test_permutations_of_three_choose_two():
    assert list(permutations(range(3), 2)) == [
        [0, 1], [0, 2], [1, 0], [1, 2], [2, 0], [2, 1],
    ]


@settings(max_examples=60)
@given(st.sets(st.integers(), max_size=8), st.integers(0, 6))
def test_correct_permutations(vals, k):
    vals = set(list(vals)[:5])
    seen = set()
    for p in permutations(vals, k):
        assert len(p) == k
        assert all(x in vals for x in p)
        assert len(set(p)) == k
        assert tuple(p) not in seen
        seen.add(tuple(p))
    assert len(seen) == perm(len(vals), k)


@given(st.integers(0, 5), st.integers(0, 5))
def test_permutations_lexic_order(a, b):
    n, k = max(a, b), min(a, b)
    perms = list(permutations(range(n), k))
    assert perms[0] == list(range(k))
    assert all(x < y for x, y in zip(perms, perms[1:]))
    assert perms[-1] == list(range(n - k, n))[::-1]


def _assert_correct_count(make):
    total = sum(1 for _ in make())
    for consumed in range(total + 1):
        it = make()
        for _ in range(consumed):
            next(it)
        assert it.count() == total - consumed


@pytest.mark.parametrize("n", range(6))
@pytest.mark.parametrize("k", range(7))
def test_permutations_count(n, k):
    _assert_correct_count(lambda: permutations(range(n), k))


@settings(max_examples=60)
@given(st.lists(st.integers(), max_size=5), st.integers(0, 6))
def test_permutations_size_hint(values, k):
    remaining = len(list(permutations(values, k)))
    it = permutations(values, k)
    while True:
        assert length_hint(it) <= remaining
        try:
            next(it)
        except StopIteration:
            break
        remaining -= 1
    assert remaining == 0
    assert length_hint(it) == 0


@given(st.integers(0, 50))
def test_permutations_k0_yields_once(n):
    assert list(permutations(range(n), 0)) == [[]]


def test_exhausted_iterator_stays_exhausted():
    it = permutations([1], 0)
    assert list(it) == [[]]
    with pytest.raises(StopIteration):
        next(it)


def test_count_consumes_iterator():
    it = permutations(range(4), 2)
    next(it)
    assert it.count() == 11
    with pytest.raises(StopIteration):
        next(it)


def test_not_enough_elements_is_empty():
    it = Permutations([1, 2], 3)
    assert list(it) == []
    assert it.count() == 0


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        permutations([1, 2], -1)