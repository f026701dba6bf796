"""Merge two sorted iterables, or merge-join them by a comparison."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Union

from .zip_longest import Both, Left, Right

_END = object()


def merge_by(i: Iterable, j: Iterable, predicate: Callable[[Any, Any], bool]) -> Iterator[Any]:
    """Merge ``i`` and ``j``, taking from ``i`` whenever ``predicate(a, b)`` is true.

    Once one side is exhausted, the rest of the other side follows and the
    exhausted side is consulted no more.
    """
    a_it: Iterator = iter(i)
    b_it: Iterator = iter(j)
    a = next(a_it, _END)
    b = next(b_it, _END)
    while a is not _END and b is not _END:
        if predicate(a, b):
            yield a
            a = next(a_it, _END)
        else:
            yield b
            b = next(b_it, _END)
    if a is not _END:
        yield a
        yield from a_it
    elif b is not _END:
        yield b
        yield from b_it


def merge(i: Iterable, j: Iterable) -> Iterator[Any]:
    """Merge ``i`` and ``j`` in ascending order; sorted inputs give a sorted result."""
    return merge_by(i, j, lambda a, b: a <= b)


def merge_join_by(
    left: Iterable, right: Iterable, cmp_fn: Callable[[Any, Any], Any]
) -> Iterator[Union[Left, Right, Both]]:
    """Merge-join two sorted iterables.

    ``cmp_fn(l, r)`` returns either an ordering (a number: negative for
    less, zero for equal, positive for greater) or a ``bool``. With an
    ordering, equal pairs are yielded as :class:`Both`, smaller elements as
    :class:`Left` or :class:`Right`. With a ``bool``, ``True`` yields the
    left element as :class:`Left` and ``False`` the right one as
    :class:`Right`; :class:`Both` never occurs.
    """
    left_it: Iterator = iter(left)
    right_it: Iterator = iter(right)
    l_item = next(left_it, _END)
    r_item = next(right_it, _END)
    while l_item is not _END and r_item is not _END:
        result = cmp_fn(l_item, r_item)
        if isinstance(result, bool):
            if result:
                yield Left(l_item)
                l_item = next(left_it, _END)
            else:
                yield Right(r_item)
                r_item = next(right_it, _END)
        elif result < 0:
            yield Left(l_item)
            l_item = next(left_it, _END)
        elif result > 0:
            yield Right(r_item)
            r_item = next(right_it, _END)
        else:
            yield Both(l_item, r_item)
            l_item = next(left_it, _END)
            r_item = next(right_it, _END)
    if l_item is not _END:
        yield Left(l_item)
        yield from (Left(x) for x in left_it)
    elif r_item is not _END:
        yield Right(r_item)
        yield from (Right(x) for x in right_it)