"""Group the elements of an iterable into fixed-size tuples or sliding windows."""

from __future__ import annotations

from collections import deque
from itertools import islice
from typing import Any, Iterable, Iterator, List, Tuple


def _check_size(n: int) -> None:
    if n < 1:
        raise ValueError("tuple size must be at least 1")


class Tuples:
    """Yields consecutive, non-overlapping tuples of ``n`` elements.

    Elements left over at the end, too few to fill a tuple, are kept and
    can be retrieved with :meth:`into_buffer`.
    """

    def __init__(self, iterable: Iterable, n: int) -> None:
        _check_size(n)
        self._iter: Iterator = iter(iterable)
        self._n = n
        self._done = False
        self._buffer: List[Any] = []

    def __iter__(self) -> "Tuples":
        return self

    def __next__(self) -> Tuple[Any, ...]:
        if self._done:
            items: List[Any] = []
        else:
            items = list(islice(self._iter, self._n))
            if len(items) < self._n:
                self._done = True
        if len(items) == self._n:
            return tuple(items)
        # An incomplete group replaces whatever was buffered before.
        self._buffer = items
        raise StopIteration

    def into_buffer(self) -> Iterator[Any]:
        """Return an iterator over the elements that did not fill a whole tuple."""
        return iter(list(self._buffer))

    def __repr__(self) -> str:
        return f"Tuples(n={self._n}, buffer={self._buffer!r})"


def tuples(iterable: Iterable, n: int) -> Tuples:
    """Group the elements of ``iterable`` into tuples of ``n`` elements."""
    return Tuples(iterable, n)


def tuple_windows(iterable: Iterable, n: int) -> Iterator[Tuple[Any, ...]]:
    """Yield every window of ``n`` consecutive elements as a tuple."""
    _check_size(n)
    return _windows(iter(iterable), n)


def _windows(it: Iterator, n: int) -> Iterator[Tuple[Any, ...]]:
    window: deque = deque(islice(it, n - 1), maxlen=n)
    if len(window) < n - 1:
        return
    for item in it:
        window.append(item)
        yield tuple(window)


def circular_tuple_windows(iterable: Iterable, n: int) -> Iterator[Tuple[Any, ...]]:
    """Yield one window of ``n`` elements starting at each element, wrapping around the end."""
    _check_size(n)
    items = list(iterable)
    return _circular(items, n)


def _circular(items: List[Any], n: int) -> Iterator[Tuple[Any, ...]]:
    length = len(items)
    for start in range(length):
        yield tuple(items[(start + offset) % length] for offset in range(n))