"""Split one iterator into two that yield the same elements."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from operator import length_hint
from typing import Any, Iterable, Iterator, Tuple


@dataclass
class _TeeBuffer:
    iterator: Iterator
    backlog: deque = field(default_factory=deque)
    # Which half reads from the backlog.
    owner: bool = False


class Tee:
    """One half of a pair of iterators that share a source.

    Elements pulled by one half are kept until the other half reads them.
    """

    def __init__(self, buffer: _TeeBuffer, ident: bool) -> None:
        self._buffer = buffer
        self._id = ident

    def __iter__(self) -> "Tee":
        return self

    def __next__(self) -> Any:
        buffer = self._buffer
        if buffer.owner == self._id and buffer.backlog:
            return buffer.backlog.popleft()
        item = next(buffer.iterator)
        buffer.backlog.append(item)
        buffer.owner = not self._id
        return item

    def __length_hint__(self) -> int:
        buffer = self._buffer
        hint = length_hint(buffer.iterator)
        if buffer.owner == self._id:
            return hint + len(buffer.backlog)
        return hint

    def __repr__(self) -> str:
        return f"Tee(id={self._id!r}, backlog={list(self._buffer.backlog)!r})"


def tee(iterable: Iterable) -> Tuple[Tee, Tee]:
    """Return two iterators that both yield every element of ``iterable``."""
    buffer = _TeeBuffer(iter(iterable))
    return Tee(buffer, True), Tee(buffer, False)