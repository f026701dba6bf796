from hypothesis import given
from hypothesis import strategies as st

from iteradapt.merge_join import merge, merge_by, merge_join_by
from iteradapt.zip_longest import Both, Left, Right


def cmp(a, b):
    return (a > b) - (a < b)


def _recording_empty(calls):
    calls.append("start")
    return iter(())


def test_empty():
    assert list(merge_join_by([], [], cmp)) == []


def test_left_only():
    assert list(merge_join_by([1, 2, 3], [], cmp)) == [Left(1), Left(2), Left(3)]


def test_right_only():
    assert list(merge_join_by([], [1, 2, 3], cmp)) == [Right(1), Right(2), Right(3)]


def test_first_left_then_right():
    assert list(merge_join_by([1, 2, 3], [4, 5, 6], cmp)) == [
        Left(1), Left(2), Left(3), Right(4), Right(5), Right(6),
    ]


def test_first_right_then_left():
    assert list(merge_join_by([4, 5, 6], [1, 2, 3], cmp)) == [
        Right(1), Right(2), Right(3), Left(4), Left(5), Left(6),
    ]


def test_interspersed_left_and_right():
    assert list(merge_join_by([1, 3, 5], [2, 4, 6], cmp)) == [
        Left(1), Right(2), Left(3), Right(4), Left(5), Right(6),
    ]


def test_overlapping_left_and_right():
    assert list(merge_join_by([1, 3, 4, 6], [2, 3, 4, 5], cmp)) == [
        Left(1), Right(2), Both(3, 3), Both(4, 4), Right(5), Left(6),
    ]


def test_bool_mode_never_yields_both():
    assert list(merge_join_by([1], [1], lambda a, b: a <= b)) == [Left(1), Right(1)]


def test_merge_simple():
    assert list(merge([1, 2, 3], [2, 3, 4])) == [1, 2, 2, 3, 3, 4]


def test_merge_is_lazy_on_exhausted_side():
    calls = []
    result = merge_by(_recording_empty(calls), [1, 2], lambda a, b: a <= b)
    assert list(result) == [1, 2]
    assert calls == ["start"]


@given(st.lists(st.integers(-100, 100)), st.lists(st.integers(-100, 100)))
def test_equal_merge(a, b):
    a.sort()
    b.sort()
    assert list(merge(a, b)) == sorted(a + b)


@given(st.lists(st.integers(0, 255)), st.lists(st.integers(0, 255)))
def test_merge_join_by_ordering_vs_bool(a, b):
    has_equal = False
    flattened = []
    for item in merge_join_by(a, b, cmp):
        if isinstance(item, Both):
            has_equal = True
            flattened.extend([Left(item.left), Right(item.right)])
        else:
            flattened.append(item)
    by_bool = list(merge_join_by(a, b, lambda x, y: x <= y))
    assert len(flattened) == len(a) + len(b)
    assert len(by_bool) == len(a) + len(b)
    if not has_equal:
        assert flattened == by_bool


@given(st.lists(st.integers(0, 255)), st.lists(st.integers(0, 255)))
def test_merge_join_by_bool_unwrapped_is_merge_by(a, b):
    merged = list(merge_by(a, b, lambda x, y: x >= y))
    joined = [item.value for item in merge_join_by(a, b, lambda x, y: x >= y)]
    assert merged == joined