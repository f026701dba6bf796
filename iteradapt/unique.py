"""Filter out repeated elements, keeping the first occurrence of each."""

from __future__ import annotations

from typing import Any, Callable, Hashable, Iterable, Iterator


def unique_by(iterable: Iterable, key: Callable[[Any], Hashable]) -> Iterator[Any]:
    """Yield the elements of ``iterable`` whose ``key`` has not been seen before."""
    seen = set()
    for item in iterable:
        k = key(item)
        if k not in seen:
            seen.add(k)
            yield item


def unique(iterable: Iterable) -> Iterator[Any]:
    """Yield each distinct element of ``iterable`` once, at its first occurrence."""
    seen = set()
    for item in iterable:
        if item not in seen:
            seen.add(item)
            yield item