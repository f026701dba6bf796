"""Arithmetic on size hints.

A size hint is a pair ``(lower, upper)`` where ``upper`` may be ``None``
when no upper bound is known. Values are bounded like machine-sized
unsigned integers: lower bounds saturate at :data:`USIZE_MAX`, and upper
bounds become ``None`` when they would exceed it.
"""

from __future__ import annotations

from typing import Optional, Tuple

SizeHint = Tuple[int, Optional[int]]

USIZE_MAX = 2**64 - 1
U32_MAX = 2**32 - 1


def _saturating(value: int) -> int:
    return min(max(value, 0), USIZE_MAX)


def _checked(value: int) -> Optional[int]:
    return value if 0 <= value <= USIZE_MAX else None


def _checked_pow(base: int, exp: int) -> Optional[int]:
    if base < 2:
        return base**exp
    if exp >= USIZE_MAX.bit_length():
        return None
    return _checked(base**exp)


def add(a: SizeHint, b: SizeHint) -> SizeHint:
    """Add two size hints."""
    low = _saturating(a[0] + b[0])
    if a[1] is not None and b[1] is not None:
        return low, _checked(a[1] + b[1])
    return low, None


def add_scalar(sh: SizeHint, x: int) -> SizeHint:
    """Add ``x`` to both bounds of a size hint."""
    low, hi = sh
    return _saturating(low + x), None if hi is None else _checked(hi + x)


def sub_scalar(sh: SizeHint, x: int) -> SizeHint:
    """Subtract ``x`` from both bounds of a size hint, stopping at zero."""
    low, hi = sh
    return _saturating(low - x), None if hi is None else _saturating(hi - x)


def mul(a: SizeHint, b: SizeHint) -> SizeHint:
    """Multiply two size hints."""
    low = _saturating(a[0] * b[0])
    a_hi, b_hi = a[1], b[1]
    if a_hi is not None and b_hi is not None:
        return low, _checked(a_hi * b_hi)
    if a_hi == 0 or b_hi == 0:
        return low, 0
    return low, None


def mul_scalar(sh: SizeHint, x: int) -> SizeHint:
    """Multiply both bounds of a size hint by ``x``."""
    low, hi = sh
    return _saturating(low * x), None if hi is None else _checked(hi * x)


def pow_scalar_base(base: int, exp: SizeHint) -> SizeHint:
    """Raise ``base`` to the power of a size hint."""
    low_exp = min(exp[0], U32_MAX)
    low_pow = _checked_pow(base, low_exp)
    low = USIZE_MAX if low_pow is None else low_pow
    hi = None if exp[1] is None else _checked_pow(base, min(exp[1], U32_MAX))
    return low, hi


def maximum(a: SizeHint, b: SizeHint) -> SizeHint:
    """Return the larger of two size hints, bound by bound."""
    lower = max(a[0], b[0])
    if a[1] is not None and b[1] is not None:
        return lower, max(a[1], b[1])
    return lower, None


def minimum(a: SizeHint, b: SizeHint) -> SizeHint:
    """Return the smaller of two size hints, bound by bound."""
    lower = min(a[0], b[0])
    if a[1] is not None and b[1] is not None:
        return lower, min(a[1], b[1])
    return lower, a[1] if a[1] is not None else b[1]