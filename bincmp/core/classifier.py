# bincmp/core/classifier.py
# Difference classifier -- decides whether a byte pair is reported.
#
# Pure functions over two ints in [0, 255]. No state, no I/O.
# Identical bytes are never a difference, in either mode.

from __future__ import annotations

from .domain import ComparisonMode


def is_bitflipped(a: int, b: int) -> bool:
    """
    True iff a and b differ in exactly one bit position.

    x & (x - 1) clears the lowest set bit; it is zero only when x had a
    single bit set. x == 0 (identical bytes) is excluded first.
    """
    x = (a ^ b) & 0xFF
    if x == 0:
        return False
    return x & (x - 1) == 0


def is_different(a: int, b: int, mode: ComparisonMode) -> bool:
    if mode == ComparisonMode.SINGLE_BITFLIP:
        return is_bitflipped(a, b)
    return a != b


__all__ = ["is_bitflipped", "is_different"]
