"""Lazily iterate over all ``k``-permutations of an iterable's elements."""

from __future__ import annotations

from enum import Enum, auto
from math import perm
from operator import length_hint
from typing import Any, Iterable, Iterator, List

from .size_hint import USIZE_MAX

_END = object()


class _State(Enum):
    START_UNKNOWN = auto()
    ONGOING_UNKNOWN = auto()
    COMPLETE_START = auto()
    COMPLETE = auto()
    DONE = auto()


class Permutations:
    """Yields every ``k``-permutation of the source elements as a list.

    Permutations come in lexicographic order of element positions. The
    source is read only as far as needed: while its length is unknown the
    permutations that vary only the last position are produced first.
    """

    def __init__(self, iterable: Iterable, k: int) -> None:
        if k < 0:
            raise ValueError("permutation length must not be negative")
        self._source: Iterator = iter(iterable)
        self._vals: List[Any] = []
        self._k = k
        self._min_n = 0
        self._n = 0
        self._indices: List[int] = []
        self._cycles: List[int] = []

        if k == 0:
            # A single empty permutation, whatever the source holds.
            self._state = _State.COMPLETE_START
            return
        while len(self._vals) < k:
            if not self._pull():
                self._state = _State.DONE
                return
        self._state = _State.START_UNKNOWN

    def __iter__(self) -> "Permutations":
        return self

    def _pull(self) -> bool:
        item = next(self._source, _END)
        if item is _END:
            self._source = iter(())
            return False
        self._vals.append(item)
        return True

    def _start_complete(self, n: int) -> None:
        self._n = n
        self._indices = list(range(n))
        self._cycles = list(range(n - 1, n - self._k - 1, -1))
        self._state = _State.COMPLETE

    def _advance_complete(self) -> bool:
        indices, cycles = self._indices, self._cycles
        n = len(indices)
        for i in reversed(range(len(cycles))):
            if cycles[i] == 0:
                cycles[i] = n - i - 1
                indices.append(indices.pop(i))
            else:
                j = n - cycles[i]
                indices[i], indices[j] = indices[j], indices[i]
                cycles[i] -= 1
                return True
        return False

    def _current(self) -> List[Any]:
        return [self._vals[i] for i in self._indices[: self._k]]

    def _finish(self) -> None:
        self._state = _State.DONE
        raise StopIteration

    def __next__(self) -> List[Any]:
        state, k = self._state, self._k
        if state is _State.START_UNKNOWN:
            self._state = _State.ONGOING_UNKNOWN
            self._min_n = k
            return self._vals[:k]
        if state is _State.ONGOING_UNKNOWN:
            if self._pull():
                self._min_n += 1
                return self._vals[: k - 1] + [self._vals[self._min_n - 1]]
            n = self._min_n
            self._start_complete(n)
            # Skip the permutations already produced while the length was unknown.
            for _ in range(n - k + 1):
                if not self._advance_complete():
                    self._finish()
            return self._current()
        if state is _State.COMPLETE_START:
            self._start_complete(self._n)
            return self._current()
        if state is _State.COMPLETE:
            if not self._advance_complete():
                self._finish()
            return self._current()
        raise StopIteration

    def _remaining_complete(self) -> int:
        n = len(self._indices)
        total = 0
        for i, c in enumerate(self._cycles):
            total = total * (n - i) + c
        return total

    def count(self) -> int:
        """Consume the iterator and return how many permutations were left."""
        state, k = self._state, self._k
        if state is _State.START_UNKNOWN:
            result = perm(len(self._vals) + sum(1 for _ in self._source), k)
        elif state is _State.ONGOING_UNKNOWN:
            n = len(self._vals) + sum(1 for _ in self._source)
            result = perm(n, k) - (self._min_n - k + 1)
        elif state is _State.COMPLETE_START:
            result = perm(self._n, k)
        elif state is _State.COMPLETE:
            result = self._remaining_complete()
        else:
            result = 0
        self._state = _State.DONE
        self._source = iter(())
        if result > USIZE_MAX:
            raise OverflowError("permutation count does not fit in a machine-sized integer")
        return result

    def __length_hint__(self) -> int:
        if self._state is _State.COMPLETE_START:
            return perm(self._n, self._k)
        if self._state is _State.COMPLETE:
            return self._remaining_complete()
        return 0

    def __repr__(self) -> str:
        return f"Permutations(k={self._k}, buffered={self._vals!r}, state={self._state.name})"


def permutations(iterable: Iterable, k: int) -> Permutations:
    """Return an iterator over all ``k``-permutations of ``iterable``."""
    return Permutations(iterable, k)

# Kept for symmetry with other size hints in the package.
_ = length_hint