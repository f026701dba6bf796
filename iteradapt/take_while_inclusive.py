"""Take elements while a predicate holds, including the first that fails it."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator


def take_while_inclusive(iterable: Iterable, predicate: Callable[[Any], bool]) -> Iterator[Any]:
    """Yield items while ``predicate`` is true, then the first item for which it is false."""
    for item in iterable:
        yield item
        if not predicate(item):
            return