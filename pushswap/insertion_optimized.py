"""Insertion sort that first keeps a longest increasing subsequence aside."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence

from pushswap.operations import Op, Stacks
from pushswap.small_sort import sort_small

_BASE_CASE = 3


def _repeat(stacks: Stacks, op: Op, count: int) -> None:
    for _ in range(count):
        stacks.do(op)


def mark_lis(values: Sequence[int]) -> list[bool]:
    """Flag the members of one longest strictly increasing subsequence of ``values``."""
    tails: list[int] = []
    previous: list[int | None] = []
    for index, value in enumerate(values):
        slot = bisect_left(tails, value, key=lambda tail: values[tail])
        if slot == len(tails):
            tails.append(index)
        else:
            tails[slot] = index
        previous.append(tails[slot - 1] if slot else None)

    flags = [False] * len(values)
    current = tails[-1] if tails else None
    while current is not None:
        flags[current] = True
        current = previous[current]
    return flags


def move_lis_to_b(stacks: Stacks) -> None:
    """Push the subsequence members of A to B and rotate every other element of A."""
    for in_lis in mark_lis(list(stacks.a)):
        stacks.do(Op.PB if in_lis else Op.RA)


def _insert_position(b: Iterable[int], value: int) -> int:
    items = list(b)
    return next(
        (index for index, b_value in enumerate(items) if b_value < value),
        len(items),
    )


def _first_min_index(costs: Sequence[int]) -> int:
    return min(range(len(costs)), key=costs.__getitem__)


def _insert_cheapest(stacks: Stacks) -> None:
    b_size = len(stacks.b)
    positions = [_insert_position(stacks.b, value) for value in stacks.a]
    top_costs = [pos * 2 + depth + 1 for depth, pos in enumerate(positions)]
    bottom_costs = [
        (b_size - pos) * 2 + depth + 2 for depth, pos in enumerate(positions)
    ]
    top_index = _first_min_index(top_costs)
    bottom_index = _first_min_index(bottom_costs)

    if top_costs[top_index] < bottom_costs[bottom_index]:
        position = positions[top_index]
        _repeat(stacks, Op.RA, top_index)
        _repeat(stacks, Op.RB, position)
        stacks.do(Op.PB)
        _repeat(stacks, Op.RRB, position)
        return

    position = positions[bottom_index]
    _repeat(stacks, Op.RA, bottom_index)
    if position == b_size:
        # The new element is the smallest: it belongs at the bottom of B.
        stacks.do(Op.PB)
        stacks.do(Op.RB)
        return
    lifted = b_size - position
    _repeat(stacks, Op.RRB, lifted)
    stacks.do(Op.PB)
    _repeat(stacks, Op.RB, lifted + 1)


def lis_insertion_sort(stacks: Stacks) -> None:
    """Sort A: keep an increasing subsequence in B, insert the rest by cheapest cost."""
    size = len(stacks.a)
    if size <= 1:
        return
    if size <= _BASE_CASE:
        sort_small(stacks, size)
        return
    move_lis_to_b(stacks)
    while not stacks.a.is_empty():
        _insert_cheapest(stacks)
    while not stacks.b.is_empty():
        stacks.do(Op.PA)


def quicksort_array(values: Iterable[int]) -> list[int]:
    """Return ``values`` sorted ascending by quicksort with Hoare partitioning."""
    items = list(values)

    def partition(left: int, right: int) -> int:
        pivot = items[(left + right) // 2]
        i, j = left - 1, right + 1
        while True:
            i += 1
            while items[i] < pivot:
                i += 1
            j -= 1
            while items[j] > pivot:
                j -= 1
            if i >= j:
                return j
            items[i], items[j] = items[j], items[i]

    pending = [(0, len(items) - 1)]
    while pending:
        left, right = pending.pop()
        if left < right:
            middle = partition(left, right)
            pending.append((middle + 1, right))
            pending.append((left, middle))
    return items