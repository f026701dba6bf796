"""Iterators that let the caller look ahead before consuming elements.

Every adaptor here offers ``peeking_next(accept)``: it hands the next
element to ``accept`` and consumes it only if ``accept`` returns true.
When the element is refused, or the iterator is exhausted,
``peeking_next`` raises :class:`StopIteration` and nothing is consumed.
"""

from __future__ import annotations

from collections import deque
from itertools import islice
from operator import length_hint
from typing import Any, Callable, Iterable, Iterator

_MISSING = object()

Accept = Callable[[Any], bool]


class _Fuse:
    """Wrap an iterator so that it stays exhausted once it has ended."""

    def __init__(self, iterable: Iterable) -> None:
        self._it: Iterator = iter(iterable)
        self._done = False

    def __iter__(self) -> "_Fuse":
        return self

    def __next__(self) -> Any:
        if self._done:
            raise StopIteration
        try:
            return next(self._it)
        except StopIteration:
            self._done = True
            self._it = iter(())
            raise

    def __length_hint__(self) -> int:
        return 0 if self._done else length_hint(self._it)


class PutBackN:
    """An iterator in front of which any number of items can be put back.

    Items put back are yielded most recent first.
    """

    def __init__(self, iterable: Iterable) -> None:
        self._top: list = []
        self._iter: Iterator = iter(iterable)

    def __iter__(self) -> "PutBackN":
        return self

    def __next__(self) -> Any:
        if self._top:
            return self._top.pop()
        return next(self._iter)

    def __length_hint__(self) -> int:
        return length_hint(self._iter) + len(self._top)

    def put_back(self, x: Any) -> None:
        """Put ``x`` in front of the iterator."""
        self._top.append(x)

    def peeking_next(self, accept: Accept) -> Any:
        """Consume and return the next item if ``accept`` approves of it."""
        item = next(self)
        if not accept(item):
            self.put_back(item)
            raise StopIteration
        return item

    def __repr__(self) -> str:
        return f"PutBackN(top={self._top!r})"


def put_back_n(iterable: Iterable) -> PutBackN:
    """Create an iterator that accepts several put-back values."""
    return PutBackN(iterable)


class MultiPeek:
    """An iterator that can peek at several upcoming elements.

    Each call to :meth:`peek` looks one element further ahead; the peek
    cursor goes back to the front on :meth:`reset_peek` and on every
    ``next``.
    """

    def __init__(self, iterable: Iterable) -> None:
        self._iter = _Fuse(iterable)
        self._buf: deque = deque()
        self._index = 0

    def __iter__(self) -> "MultiPeek":
        return self

    def __next__(self) -> Any:
        self._index = 0
        if self._buf:
            return self._buf.popleft()
        return next(self._iter)

    def __length_hint__(self) -> int:
        return length_hint(self._iter) + len(self._buf)

    def peek(self, default: Any = None) -> Any:
        """Return the element under the peek cursor and move the cursor on.

        Returns ``default`` when there is no element left to peek at.
        """
        if self._index < len(self._buf):
            item = self._buf[self._index]
        else:
            try:
                item = next(self._iter)
            except StopIteration:
                return default
            self._buf.append(item)
        self._index += 1
        return item

    def reset_peek(self) -> None:
        """Move the peek cursor back to the next element."""
        self._index = 0

    def peeking_next(self, accept: Accept) -> Any:
        """Consume and return the next item if ``accept`` approves of it."""
        if not self._buf:
            item = self.peek(_MISSING)
            if item is not _MISSING and not accept(item):
                raise StopIteration
        elif not accept(self._buf[0]):
            raise StopIteration
        return next(self)

    def __repr__(self) -> str:
        return f"MultiPeek(buffered={list(self._buf)!r}, index={self._index})"


def multipeek(iterable: Iterable) -> MultiPeek:
    """Create an iterator that can peek at several upcoming elements."""
    return MultiPeek(iterable)


class PeekNth:
    """An iterator that can look at the element ``n`` places ahead.

    Unlike :class:`MultiPeek`, peeking never moves a cursor: the same call
    returns the same element until ``next`` is called.
    """

    def __init__(self, iterable: Iterable) -> None:
        self._iter = _Fuse(iterable)
        self._buf: deque = deque()

    def __iter__(self) -> "PeekNth":
        return self

    def __next__(self) -> Any:
        if self._buf:
            return self._buf.popleft()
        return next(self._iter)

    def __length_hint__(self) -> int:
        return length_hint(self._iter) + len(self._buf)

    def peek(self, default: Any = None) -> Any:
        """Return the next element without consuming it, or ``default``."""
        return self.peek_nth(0, default)

    def peek_nth(self, n: int, default: Any = None) -> Any:
        """Return the element ``n`` places ahead without consuming it, or ``default``."""
        if n < 0:
            raise ValueError("peek position must not be negative")
        missing = n + 1 - len(self._buf)
        if missing > 0:
            self._buf.extend(islice(self._iter, missing))
        return self._buf[n] if n < len(self._buf) else default

    def peeking_next(self, accept: Accept) -> Any:
        """Consume and return the next item if ``accept`` approves of it."""
        item = self.peek(_MISSING)
        if item is _MISSING or not accept(item):
            raise StopIteration
        return next(self)

    def __repr__(self) -> str:
        return f"PeekNth(buffered={list(self._buf)!r})"


def peek_nth(iterable: Iterable) -> PeekNth:
    """Create an iterator that can look any number of elements ahead."""
    return PeekNth(iterable)


class PeekingTakeWhile:
    """Yields elements of a peekable iterator while ``predicate`` holds.

    The first element that fails the predicate stays in the underlying
    iterator.
    """

    def __init__(self, iterator: Any, predicate: Accept) -> None:
        self._iterator = iterator
        self._predicate = predicate

    def __iter__(self) -> "PeekingTakeWhile":
        return self

    def __next__(self) -> Any:
        return self._iterator.peeking_next(self._predicate)

    def peeking_next(self, accept: Accept) -> Any:
        """Consume the next item if both the predicate and ``accept`` approve of it."""
        predicate = self._predicate
        return self._iterator.peeking_next(lambda item: predicate(item) and accept(item))


def peeking_take_while(iterator: Any, predicate: Accept) -> PeekingTakeWhile:
    """Take elements from ``iterator`` while ``predicate`` holds, leaving the first refused one."""
    if not callable(getattr(iterator, "peeking_next", None)):
        raise TypeError(f"{type(iterator).__name__!r} object does not support peeking_next")
    return PeekingTakeWhile(iterator, predicate)