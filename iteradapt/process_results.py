"""Process an iterable of values and errors as if it held values only."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Optional, TypeVar

R = TypeVar("R")


class _ProcessResults:
    """Yields the values of a stream, recording any exception instance it meets."""

    def __init__(self, iterable: Iterable) -> None:
        self._iter: Iterator = iter(iterable)
        self.error: Optional[Exception] = None

    def __iter__(self) -> "_ProcessResults":
        return self

    def __next__(self) -> Any:
        item = next(self._iter)
        if isinstance(item, Exception):
            self.error = item
            raise StopIteration
        return item


def process_results(iterable: Iterable, processor: Callable[[Iterator[Any]], R]) -> R:
    """Run ``processor`` over the values of ``iterable``.

    Elements of ``iterable`` that are exception instances count as errors.
    ``processor`` gets an iterator that stops at the first error; once it
    returns, that error is raised. Otherwise its result is returned.
    """
    stream = _ProcessResults(iterable)
    result = processor(stream)
    if stream.error is not None:
        raise stream.error
    return result