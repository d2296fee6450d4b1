"""Quicksorts on the stacks with one or two pivots."""

from __future__ import annotations

from collections.abc import Callable
from itertools import repeat

from pushswap.operations import Op, Stacks
from pushswap.small_sort import _play, _top, sort_small

_BASE_CASE = 3
_TWO_WAY_LEAF = 2


def _sort_with(stacks: Stacks, recurse: Callable[[Stacks, int], None]) -> None:
    size = len(stacks.a)
    if size <= 1:
        return
    if size <= _BASE_CASE:
        sort_small(stacks, size)
    else:
        recurse(stacks, size)


def _top_sorted(stacks: Stacks, length: int) -> list[int]:
    return sorted(_top(stacks, length))


def _two_way_partition(stacks: Stacks, length: int, pivot: int) -> int:
    smaller = 0
    for _ in range(length):
        if stacks.a.peek(0) < pivot:
            stacks.do(Op.PB)
            smaller += 1
        else:
            stacks.do(Op.RA)
    _play(stacks, repeat(Op.RRA, length - smaller))
    return smaller


def _quick_sort_top(stacks: Stacks, length: int) -> None:
    if length <= _TWO_WAY_LEAF:
        sort_small(stacks, length)
        return
    pivot = _top_sorted(stacks, length)[length // 2]
    smaller = _two_way_partition(stacks, length, pivot)
    if length - smaller > 1:
        _quick_sort_top(stacks, length - smaller)
    _play(stacks, repeat(Op.PA, smaller))
    if smaller > 1:
        _quick_sort_top(stacks, smaller)


def quick_sort(stacks: Stacks) -> None:
    """Sort A by splitting around the median of the top segment into B and back."""
    _sort_with(stacks, _quick_sort_top)


def _find_dual_pivots(stacks: Stacks, length: int) -> tuple[int, int]:
    ordered = _top_sorted(stacks, length)
    first = min(length // 3, length - 1)
    second = min((length * 2) // 3, length - 1)
    if first == second and length > 1:
        second = min(first + 1, length - 1)
    return ordered[first], ordered[second]


def _three_way_partition(
    stacks: Stacks, length: int, low_pivot: int, high_pivot: int
) -> tuple[int, int, int]:
    small = mid = large = 0
    for _ in range(length):
        current = stacks.a.peek(0)
        if current < low_pivot:
            stacks.do(Op.PB)
            small += 1
        elif current < high_pivot:
            _play(stacks, (Op.PB, Op.RB))
            mid += 1
        else:
            stacks.do(Op.RA)
            large += 1
    _play(stacks, repeat(Op.RRA, large))
    _play(stacks, repeat(Op.RRB, mid))
    return small, mid, large


def _quick_sort_3way_top(stacks: Stacks, length: int) -> None:
    if length <= _BASE_CASE:
        sort_small(stacks, length)
        return
    low_pivot, high_pivot = _find_dual_pivots(stacks, length)
    small, mid, large = _three_way_partition(stacks, length, low_pivot, high_pivot)
    if large > 1:
        _quick_sort_3way_top(stacks, large)
    for count in (mid, small):
        _play(stacks, repeat(Op.PA, count))
        if count > 1:
            _quick_sort_3way_top(stacks, count)


def quick_sort_3way(stacks: Stacks) -> None:
    """Sort A by splitting the top segment into thirds around two pivots."""
    _sort_with(stacks, _quick_sort_3way_top)