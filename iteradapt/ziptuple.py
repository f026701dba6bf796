"""Run any number of iterables in lock step."""

from __future__ import annotations

from operator import length_hint
from typing import Any, Iterable, Iterator, List, Tuple


class Zip:
    """Yields tuples of one element from each source until any source ends.

    Sources are advanced in order, so earlier sources may have given up one
    element more than later ones when iteration stops.
    """

    def __init__(self, *iterables: Iterable) -> None:
        if not iterables:
            raise TypeError("Zip needs at least one iterable")
        self._iters: List[Iterator] = [iter(x) for x in iterables]

    def __iter__(self) -> "Zip":
        return self

    def __next__(self) -> Tuple[Any, ...]:
        # A list comprehension lets StopIteration from any source propagate.
        return tuple([next(it) for it in self._iters])

    def __length_hint__(self) -> int:
        return min(length_hint(it) for it in self._iters)

    def __reversed__(self) -> Iterator[Tuple[Any, ...]]:
        # Longer sources are trimmed from the back to the shortest length.
        remaining = [list(it) for it in self._iters]
        self._iters = [iter(()) for _ in remaining]
        size = min(len(r) for r in remaining)
        for index in reversed(range(size)):
            yield tuple(r[index] for r in remaining)

    def __repr__(self) -> str:
        return f"Zip({self._iters!r})"


def multizip(*args: Iterable) -> Zip:
    """Iterate over several iterables side by side, yielding tuples."""
    return Zip(*args)