"""A shareable handle to a single iterator."""

from __future__ import annotations

from typing import Any, Iterable, Iterator


class _Shared:
    def __init__(self, iterator: Iterator) -> None:
        self.iterator = iterator
        self.busy = False


class RcIter:
    """An iterator whose clones all advance the same underlying iterator.

    Re-entering the iterator from within its own ``next`` raises
    :class:`RuntimeError`.
    """

    def __init__(self, iterable: Iterable) -> None:
        self._shared = _Shared(iter(iterable))

    def __iter__(self) -> "RcIter":
        return self

    def __next__(self) -> Any:
        shared = self._shared
        if shared.busy:
            raise RuntimeError("RcIter re-entered while already advancing")
        shared.busy = True
        try:
            return next(shared.iterator)
        finally:
            shared.busy = False

    def clone(self) -> "RcIter":
        """Return another handle to the same underlying iterator."""
        other = RcIter.__new__(RcIter)
        other._shared = self._shared
        return other

    def __repr__(self) -> str:
        return f"RcIter({self._shared.iterator!r})"


def rciter(iterable: Iterable) -> RcIter:
    """Wrap ``iterable`` so that several handles can share one iterator."""
    return RcIter(iterable)