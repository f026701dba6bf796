"""Iterate two iterables in lock step, insisting they have the same length."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Tuple

_END = object()


def zip_eq(i: Iterable, j: Iterable) -> Iterator[Tuple[Any, Any]]:
    """Yield pairs from ``i`` and ``j``.

    Raises :class:`ValueError` if one ends before the other.
    """
    return _zip_eq(iter(i), iter(j))


def _zip_eq(a: Iterator, b: Iterator) -> Iterator[Tuple[Any, Any]]:
    while True:
        x = next(a, _END)
        y = next(b, _END)
        if x is _END and y is _END:
            return
        if x is _END or y is _END:
            raise ValueError("zip_eq reached the end of one iterable before the other")
        yield x, y