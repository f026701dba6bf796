"""Tag each element with its position in the sequence."""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Iterator, Tuple

_END = object()


class Position(Enum):
    """Where an element stands among the elements of an iterable."""

    FIRST = "first"
    MIDDLE = "middle"
    LAST = "last"
    ONLY = "only"


def with_position(iterable: Iterable) -> Iterator[Tuple[Position, Any]]:
    """Yield ``(position, item)`` pairs, looking one element ahead."""
    it = iter(iterable)
    current = next(it, _END)
    if current is _END:
        return
    first = True
    while True:
        following = next(it, _END)
        if following is _END:
            yield (Position.ONLY if first else Position.LAST), current
            return
        yield (Position.FIRST if first else Position.MIDDLE), current
        first = False
        current = following