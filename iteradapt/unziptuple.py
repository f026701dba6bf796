"""Split an iterable of tuples into one list per column."""

from __future__ import annotations

from typing import Any, Iterable, List, Tuple


def multiunzip(iterable: Iterable[Tuple[Any, ...]], arity: int) -> Tuple[List[Any], ...]:
    """Collect an iterable of ``arity``-tuples into ``arity`` lists, one per column.

    Raises :class:`ValueError` if an element does not have ``arity`` items.
    """
    if arity < 0:
        raise ValueError("arity must not be negative")
    columns: Tuple[List[Any], ...] = tuple([] for _ in range(arity))
    for row in iterable:
        row = tuple(row)
        if len(row) != arity:
            raise ValueError(f"expected a tuple of {arity} items, got {len(row)}")
        for column, value in zip(columns, row):
            column.append(value)
    return columns