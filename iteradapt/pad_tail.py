"""Pad an iterable to a minimum length."""

from __future__ import annotations

from operator import length_hint
from typing import Any, Callable, Iterable, Iterator


class _PadUsing:
    def __init__(self, iterable: Iterable, min_len: int, filler: Callable[[int], Any]) -> None:
        self._iter: Iterator = iter(iterable)
        self._done = False
        self._min = min_len
        self._pos = 0
        self._filler = filler

    def __iter__(self) -> "_PadUsing":
        return self

    def __next__(self) -> Any:
        if not self._done:
            try:
                item = next(self._iter)
            except StopIteration:
                self._done = True
            else:
                self._pos += 1
                return item
        if self._pos < self._min:
            value = self._filler(self._pos)
            self._pos += 1
            return value
        raise StopIteration

    def __length_hint__(self) -> int:
        tail = max(self._min - self._pos, 0)
        inner = 0 if self._done else length_hint(self._iter)
        return max(inner, tail)


def pad_using(iterable: Iterable, min_len: int, filler: Callable[[int], Any]) -> Iterator[Any]:
    """Yield the items of ``iterable``, then ``filler(index)`` until ``min_len`` items were given."""
    if min_len < 0:
        raise ValueError("minimum length must not be negative")
    return _PadUsing(iterable, min_len, filler)