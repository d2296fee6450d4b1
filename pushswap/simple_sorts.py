"""Bubble, insertion, selection and radix sorts expressed as stack operations."""

from __future__ import annotations

from itertools import repeat

from pushswap.operations import Op, Stacks
from pushswap.small_sort import _play, sort_small

_INSERTION_BASE_CASE = 2


def _return_all_to_a(stacks: Stacks) -> None:
    _play(stacks, repeat(Op.PA, len(stacks.b)))


def _bubble_pass(stacks: Stacks) -> bool:
    swapped = False
    for _ in range(len(stacks.a) - 1):
        if stacks.a.peek(0) > stacks.a.peek(1):
            stacks.do(Op.SA)
            swapped = True
        stacks.do(Op.RA)
    stacks.do(Op.RA)
    return swapped


def bubble_sort(stacks: Stacks) -> None:
    """Sort A by repeated swap-and-rotate passes until one pass makes no swap."""
    if len(stacks.a) <= 1:
        return
    while _bubble_pass(stacks):
        pass


def _insert_top_into_b(stacks: Stacks) -> None:
    value = stacks.a.peek(0)
    position = next(
        (index for index, b_value in enumerate(stacks.b) if value > b_value),
        len(stacks.b),
    )
    _play(stacks, [*repeat(Op.RB, position), Op.PB, *repeat(Op.RRB, position)])


def insertion_sort(stacks: Stacks) -> None:
    """Insert each element of A into B kept in descending order, then move back."""
    size = len(stacks.a)
    if size <= 1:
        return
    if size <= _INSERTION_BASE_CASE:
        sort_small(stacks, size)
        return
    while not stacks.a.is_empty():
        _insert_top_into_b(stacks)
    _return_all_to_a(stacks)


def selection_sort(stacks: Stacks) -> None:
    """Rotate the minimum of A to the top and push it to B until A is empty."""
    if len(stacks.a) <= 1:
        return
    while not stacks.a.is_empty():
        smallest = min(stacks.a)
        while stacks.a.peek(0) != smallest:
            stacks.do(Op.RA)
        stacks.do(Op.PB)
    _return_all_to_a(stacks)


def radix_sort(stacks: Stacks) -> None:
    """Binary LSD radix sort; A must hold the ranks 0..n-1."""
    size = len(stacks.a)
    if size <= 1:
        return
    for bit in range((size - 1).bit_length()):
        for _ in range(len(stacks.a)):
            stacks.do(Op.RA if (stacks.a.peek(0) >> bit) & 1 else Op.PB)
        _return_all_to_a(stacks)