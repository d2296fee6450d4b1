"""Validation and parsing of the numbers given on the command line."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence

from pushswap.errors import PushSwapError

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_DIGITS = frozenset("0123456789")


def _split_sign(text: str) -> tuple[bool, str]:
    if text[:1] in ("+", "-"):
        return text[0] == "-", text[1:]
    return False, text


def is_valid_int(text: str) -> bool:
    """Return whether ``text`` is an optionally signed decimal that fits in 32 bits.

    A lone sign is accepted and reads as zero.
    """
    if not text:
        return False
    negative, digits = _split_sign(text)
    if not all(ch in _DIGITS for ch in digits):
        return False
    if not digits:
        return True
    value = int(digits)
    return value <= (-INT_MIN if negative else INT_MAX)


def _to_int(text: str) -> int:
    negative, digits = _split_sign(text)
    value = int(digits) if digits else 0
    return -value if negative else value


def validate_args(args: Sequence[str], max_inputs: int) -> None:
    """Check the argument list, counting the program name against ``max_inputs``.

    Raise PushSwapError when there are no arguments, too many, or a bad number.
    """
    if not args or len(args) + 1 > max_inputs:
        raise PushSwapError()
    if not all(is_valid_int(arg) for arg in args):
        raise PushSwapError()


def has_duplicates(values: Sequence[int]) -> bool:
    return len(set(values)) != len(values)


def compress(values: Sequence[int]) -> list[int]:
    """Replace each value by how many values are strictly smaller than it."""
    ordered = sorted(values)
    return [bisect_left(ordered, value) for value in values]


def parse_numbers(args: Sequence[str]) -> list[int]:
    """Parse ``args`` into ranks 0..n-1; raise PushSwapError on bad input or duplicates."""
    if not all(is_valid_int(arg) for arg in args):
        raise PushSwapError()
    values = [_to_int(arg) for arg in args]
    if has_duplicates(values):
        raise PushSwapError()
    return compress(values)