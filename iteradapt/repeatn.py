"""An iterator that yields one element a fixed number of times."""

from __future__ import annotations

from typing import Any


class RepeatN:
    """Yields ``element`` exactly ``n`` times; its length is always known."""

    def __init__(self, element: Any, n: int) -> None:
        if n < 0:
            raise ValueError("repeat count must not be negative")
        self._element = element if n else None
        self._n = n

    def __iter__(self) -> "RepeatN":
        return self

    def __next__(self) -> Any:
        if self._n == 0:
            raise StopIteration
        self._n -= 1
        element = self._element
        if self._n == 0:
            self._element = None
        return element

    def __len__(self) -> int:
        return self._n

    def __length_hint__(self) -> int:
        return self._n

    def __repr__(self) -> str:
        return f"RepeatN(element={self._element!r}, n={self._n})"


def repeat_n(element: Any, n: int) -> RepeatN:
    """Create an iterator that produces ``n`` repetitions of ``element``."""
    return RepeatN(element, n)