"""Iterate two iterables side by side until both are exhausted."""

from __future__ import annotations

from dataclasses import dataclass
from operator import length_hint
from typing import Any, Iterable, Iterator, Union

_END = object()


@dataclass(frozen=True)
class Left:
    """Only the left side had an element."""

    value: Any


@dataclass(frozen=True)
class Right:
    """Only the right side had an element."""

    value: Any


@dataclass(frozen=True)
class Both:
    """Both sides had an element."""

    left: Any
    right: Any


class _ZipLongest:
    def __init__(self, a: Iterable, b: Iterable) -> None:
        self._a: Iterator = iter(a)
        self._b: Iterator = iter(b)
        self._a_done = False
        self._b_done = False

    def __iter__(self) -> "_ZipLongest":
        return self

    def _next_a(self) -> Any:
        if self._a_done:
            return _END
        item = next(self._a, _END)
        if item is _END:
            self._a_done = True
        return item

    def _next_b(self) -> Any:
        if self._b_done:
            return _END
        item = next(self._b, _END)
        if item is _END:
            self._b_done = True
        return item

    def __next__(self) -> Union[Left, Right, Both]:
        a = self._next_a()
        b = self._next_b()
        if a is _END and b is _END:
            raise StopIteration
        if b is _END:
            return Left(a)
        if a is _END:
            return Right(b)
        return Both(a, b)

    def __length_hint__(self) -> int:
        a_hint = 0 if self._a_done else length_hint(self._a)
        b_hint = 0 if self._b_done else length_hint(self._b)
        return max(a_hint, b_hint)


def zip_longest(a: Iterable, b: Iterable) -> Iterator[Union[Left, Right, Both]]:
    """Yield :class:`Both` while both sides last, then :class:`Left` or :class:`Right`.

    Each side is consulted no more after it has ended.
    """
    return _ZipLongest(a, b)