"""Fixed move sequences for stacks of up to five elements."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise

from pushswap.operations import Op, Stacks

# Keyed by the relative order of the top three values (0 = smallest).
_THREE_ELEMENT_MOVES: dict[tuple[int, ...], tuple[Op, ...]] = {
    (0, 1, 2): (),
    (1, 0, 2): (Op.SA,),
    (0, 2, 1): (Op.PB, Op.SA, Op.PA),
    (2, 0, 1): (Op.SA, Op.PB, Op.SA, Op.PA),
    (1, 2, 0): (Op.PB, Op.PB, Op.RA, Op.PA, Op.PA, Op.RRA),
    (2, 1, 0): (Op.PB, Op.PB, Op.RA, Op.SB, Op.PA, Op.PA, Op.RRA),
}


def _play(stacks: Stacks, ops: Iterable[Op]) -> None:
    """Perform and record each operation in turn."""
    for op in ops:
        stacks.do(op)


def _top(stacks: Stacks, count: int) -> list[int]:
    """Return the top ``count`` values of A, top first."""
    return [stacks.a.peek(index) for index in range(count)]


def _is_ascending(values: Sequence[int]) -> bool:
    return all(x < y for x, y in pairwise(values))


def _relative_order(values: Sequence[int]) -> tuple[int, ...] | None:
    if len(set(values)) != len(values):
        return None
    ordered = sorted(values)
    return tuple(ordered.index(value) for value in values)


def _sort_two(stacks: Stacks) -> None:
    if stacks.a.peek(0) > stacks.a.peek(1):
        stacks.do(Op.SA)


def _sort_three(stacks: Stacks) -> None:
    pattern = _relative_order(_top(stacks, 3))
    _play(stacks, _THREE_ELEMENT_MOVES.get(pattern, ()))


def _sort_four(stacks: Stacks) -> None:
    a = _top(stacks, 4)
    if _is_ascending(a):
        return
    if a[0] > a[1] and a[1] < a[2] and a[2] < a[3] and a[0] < a[2]:
        stacks.do(Op.SA)
        return
    if a[3] >= max(a[:3]):
        _sort_three(stacks)
        return
    # Otherwise the top element is set aside in B.
    stacks.do(Op.PB)


def _sort_five(stacks: Stacks) -> None:
    if _is_ascending(_top(stacks, 5)):
        return
    stacks.do(Op.PB)
    _sort_four(stacks)
    stacks.do(Op.PA)


_SORTERS = {
    2: _sort_two,
    3: _sort_three,
    4: _sort_four,
    5: _sort_five,
}


def sort_small(stacks: Stacks, length: int) -> None:
    """Order the top ``length`` elements of A using the fixed sequences.

    Lengths outside 2..5 leave the stacks untouched.
    """
    sorter = _SORTERS.get(length)
    if sorter is not None:
        sorter(stacks)