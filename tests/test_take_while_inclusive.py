from hypothesis import given, strategies as st

from iteradapt.take_while_inclusive import take_while_inclusive


def test_includes_first_failing_element():
    assert list(take_while_inclusive([1, 2, 3, 4, 5], lambda x: x < 3)) == [1, 2, 3]


def test_empty_input():
    assert list(take_while_inclusive([], lambda x: True)) == []


@given(st.lists(st.integers(-10, 10)), st.integers(-10, 10))
def test_result_is_prefix_with_expected_boundary(data, limit):
    pred = lambda x: x < limit  # noqa: E731
    result = list(take_while_inclusive(data, pred))
    assert result == data[: len(result)]
    assert all(pred(x) for x in result[:-1])
    if len(result) < len(data):
        assert not pred(result[-1])
    else:
        assert all(pred(x) for x in result[:-1])


@given(st.lists(st.integers()))
def test_always_true_takes_everything(data):
    assert list(take_while_inclusive(data, lambda x: True)) == data


def test_does_not_consume_past_stop():
    source = iter(range(10))
    taken = list(take_while_inclusive(source, lambda x: x != 4))
    assert taken == list(range(5))
    assert next(source) == 5


def test_stays_stopped():
    it = take_while_inclusive([0, 1, 0], lambda x: x == 0)
    assert list(it) == [0, 1]
    assert next(it, None) is None