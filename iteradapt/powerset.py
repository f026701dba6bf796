"""Lazily iterate over every subset of an iterable's elements."""

from __future__ import annotations

from operator import length_hint
from typing import Any, Iterable, Iterator, List

from .size_hint import pow_scalar_base, sub_scalar

_END = object()


class _Powerset:
    def __init__(self, iterable: Iterable) -> None:
        self._source: Iterator = iter(iterable)
        self._exhausted = False
        self._pool: List[Any] = []
        self._pos = 0
        self._subsets = self._generate()

    def __iter__(self) -> "_Powerset":
        return self

    def __next__(self) -> List[Any]:
        subset = next(self._subsets)
        self._pos += 1
        return subset

    def _pull(self) -> bool:
        if self._exhausted:
            return False
        item = next(self._source, _END)
        if item is _END:
            self._exhausted = True
            self._source = iter(())
            return False
        self._pool.append(item)
        return True

    def _combinations(self, k: int) -> Iterator[List[Any]]:
        pool = self._pool
        indices = list(range(k))
        yield [pool[i] for i in indices]
        while True:
            if indices[-1] == len(pool) - 1:
                self._pull()
            n = len(pool)
            i = k - 1
            while i >= 0 and indices[i] == i + n - k:
                i -= 1
            if i < 0:
                return
            indices[i] += 1
            for j in range(i + 1, k):
                indices[j] = indices[j - 1] + 1
            yield [pool[x] for x in indices]

    def _generate(self) -> Iterator[List[Any]]:
        yield []
        k = 1
        while True:
            while len(self._pool) < k:
                if not self._pull():
                    return
            yield from self._combinations(k)
            k += 1

    def __length_hint__(self) -> int:
        source_len = 0 if self._exhausted else length_hint(self._source)
        total = len(self._pool) + source_len
        low, _ = sub_scalar(pow_scalar_base(2, (total, total)), self._pos)
        return low


def powerset(iterable: Iterable) -> Iterator[List[Any]]:
    """Yield every subset of ``iterable`` as a list, smallest subsets first.

    Subsets of equal size come in lexicographic order of element positions.
    """
    return _Powerset(iterable)