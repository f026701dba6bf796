"""Iterators that produce elements from parameters rather than from another iterator."""

from __future__ import annotations

import warnings
from typing import Any, Callable, Iterator, Optional, Tuple


def repeat_call(function: Callable[[], Any]) -> Iterator[Any]:
    """Yield ``function()`` forever.

    Deprecated: a generator expression over ``iter(int, 1)`` or a plain
    loop does the same.
    """
    warnings.warn(
        "repeat_call is deprecated; use a generator instead",
        DeprecationWarning,
        stacklevel=2,
    )

    def _calls() -> Iterator[Any]:
        while True:
            yield function()

    return _calls()


class Unfold:
    """An iterator driven by a step function over an explicit state.

    ``f(state)`` returns ``None`` to signal the end, or a pair
    ``(item, next_state)``.
    """

    def __init__(self, initial_state: Any, f: Callable[[Any], Optional[Tuple[Any, Any]]]) -> None:
        self.state = initial_state
        self._f = f

    def __iter__(self) -> "Unfold":
        return self

    def __next__(self) -> Any:
        step = self._f(self.state)
        if step is None:
            raise StopIteration
        item, self.state = step
        return item

    def __repr__(self) -> str:
        return f"Unfold(state={self.state!r})"


def unfold(initial_state: Any, f: Callable[[Any], Optional[Tuple[Any, Any]]]) -> Unfold:
    """Create an :class:`Unfold` iterator starting at ``initial_state``."""
    return Unfold(initial_state, f)


def iterate(initial_value: Any, f: Callable[[Any], Any]) -> Iterator[Any]:
    """Yield ``initial_value``, ``f(initial_value)``, ``f(f(initial_value))`` and so on."""
    state = initial_value
    while True:
        following = f(state)
        yield state
        state = following