import pytest
from hypothesis import given
from hypothesis import strategies as st

from iteradapt.process_results import process_results


@given(st.lists(st.integers()))
def test_all_values_pass_through(values):
    assert process_results(values, list) == values


@given(st.lists(st.integers()))
def test_sum_matches_builtin(values):
    assert process_results(values, sum) == sum(values)


def test_error_is_raised():
    error = ValueError("bad item")
    with pytest.raises(ValueError) as info:
        process_results([1, error, 2], list)
    assert info.value is error


def test_processor_sees_values_before_error():
    seen = []
    error = KeyError("missing")
    with pytest.raises(KeyError):
        process_results([1, 2, error, 3], seen.extend)
    assert seen == [1, 2]


def test_unconsumed_error_is_not_raised():
    items = ["first", RuntimeError("later")]
    assert process_results(items, next) == "first"


def test_processor_exception_propagates():
    def processor(values):
        raise LookupError("from processor")

    with pytest.raises(LookupError):
        process_results([1], processor)