"""Find the minimum and maximum of an iterable in one pass."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional, Tuple


class MinMaxResult:
    """Outcome of a minmax search."""

    def into_option(self) -> Optional[Tuple[Any, Any]]:
        """Return ``(min, max)``, or ``None`` when there were no elements."""
        match self:
            case OneElement(value):
                return value, value
            case MinMax(low, high):
                return low, high
            case _:
                return None


@dataclass(frozen=True)
class NoElements(MinMaxResult):
    """The iterable was empty."""


@dataclass(frozen=True)
class OneElement(MinMaxResult):
    """The iterable held exactly one element."""

    value: Any


@dataclass(frozen=True)
class MinMax(MinMaxResult):
    """The iterable held several elements; ``min`` is not larger than ``max``."""

    min: Any
    max: Any


_Less = Callable[[Any, Any, Any, Any], bool]


def _minmax_impl(it: Iterator, key_for: Callable[[Any], Any], lt: _Less) -> MinMaxResult:
    try:
        x = next(it)
    except StopIteration:
        return NoElements()
    try:
        y = next(it)
    except StopIteration:
        return OneElement(x)

    xk, yk = key_for(x), key_for(y)
    if not lt(y, x, yk, xk):
        low, high, low_key, high_key = x, y, xk, yk
    else:
        low, high, low_key, high_key = y, x, yk, xk

    # Elements are taken in pairs: compare the pair first, then the smaller
    # against the minimum and the larger against the maximum.
    sentinel = object()
    for first in it:
        second = next(it, sentinel)
        first_key = key_for(first)
        if second is sentinel:
            if lt(first, low, first_key, low_key):
                low = first
            elif not lt(first, high, first_key, high_key):
                high = first
            break
        second_key = key_for(second)
        if not lt(second, first, second_key, first_key):
            small, small_key, large, large_key = first, first_key, second, second_key
        else:
            small, small_key, large, large_key = second, second_key, first, first_key
        if lt(small, low, small_key, low_key):
            low, low_key = small, small_key
        if not lt(large, high, large_key, high_key):
            high, high_key = large, large_key

    return MinMax(low, high)


def minmax(iterable: Iterable, key: Optional[Callable[[Any], Any]] = None) -> MinMaxResult:
    """Return the first minimum and the last maximum of ``iterable``.

    With ``key``, elements are compared by ``key(element)``.
    """
    if key is None:
        return _minmax_impl(iter(iterable), lambda _: None, lambda a, b, _ak, _bk: a < b)
    return _minmax_impl(iter(iterable), key, lambda _a, _b, ak, bk: ak < bk)


def minmax_by(iterable: Iterable, compare: Callable[[Any, Any], int]) -> MinMaxResult:
    """Like :func:`minmax`, ordering with ``compare(a, b)``, negative meaning less."""
    return _minmax_impl(iter(iterable), lambda _: None, lambda a, b, _ak, _bk: compare(a, b) < 0)