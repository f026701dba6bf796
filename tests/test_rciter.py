import pytest

from iteradapt.rciter import rciter


class _Knot:
    handle = None

    def __iter__(self):
        return self

    def __next__(self):
        return next(self.handle)


def test_zip_with_itself():
    it = rciter(range(9))
    z = zip(it.clone(), it.clone())
    assert next(z) == (0, 1)
    assert next(z) == (2, 3)
    assert next(z) == (4, 5)
    assert next(it) == 6
    assert next(z) == (7, 8)
    assert next(z, None) is None


def test_clones_share_state():
    data = ["a", "b", "c", "d"]
    first = rciter(data)
    second = first.clone()
    assert next(first) == data[0]
    assert list(second) == data[1:]
    assert next(first, None) is None


def test_iter_returns_same_handle():
    it = rciter([1, 2])
    assert iter(it) is it


def test_reentry_raises():
    knot = _Knot()
    handle = rciter(knot)
    knot.handle = handle
    with pytest.raises(RuntimeError):
        handle.__next__()