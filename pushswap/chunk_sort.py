"""Chunk sort: split value ranges into thirds across the four stack ends."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from pushswap.operations import Op, Stacks
from pushswap.small_sort import sort_small

_BASE_CASE = 3


class Position(Enum):
    """One of the four ends where a chunk of values can lie."""

    TOP_A = "top_a"
    BOTTOM_A = "bottom_a"
    TOP_B = "top_b"
    BOTTOM_B = "bottom_b"


@dataclass
class Chunk:
    """A run of ``size`` values in ``min_val..max_val`` lying at ``position``."""

    position: Position
    size: int = 0
    min_val: int = 0
    max_val: int = 0


_SPLIT_LOCATIONS: dict[Position, tuple[Position, Position, Position]] = {
    Position.TOP_A: (Position.TOP_B, Position.BOTTOM_B, Position.BOTTOM_A),
    Position.BOTTOM_A: (Position.TOP_B, Position.BOTTOM_B, Position.TOP_A),
    Position.TOP_B: (Position.BOTTOM_A, Position.TOP_A, Position.BOTTOM_B),
    Position.BOTTOM_B: (Position.BOTTOM_A, Position.TOP_A, Position.TOP_B),
}

# Operations repeated once per element to carry a chunk between two ends.
# Pairs not listed move no elements; only the chunk's position is updated.
_MOVES: dict[tuple[Position, Position], tuple[Op, ...]] = {
    (Position.TOP_B, Position.TOP_A): (Op.PA,),
    (Position.BOTTOM_B, Position.TOP_A): (Op.RRB, Op.PA),
    (Position.BOTTOM_A, Position.TOP_A): (Op.RRA,),
    (Position.TOP_A, Position.TOP_B): (Op.PB,),
    (Position.BOTTOM_A, Position.TOP_B): (Op.RRA, Op.PB),
    (Position.TOP_A, Position.BOTTOM_A): (Op.RA,),
    (Position.TOP_B, Position.BOTTOM_B): (Op.RB,),
}


def calculate_pivots(chunk: Chunk) -> tuple[int, int]:
    """Return the small and big pivots that cut the chunk's value range in thirds."""
    span = chunk.max_val - chunk.min_val + 1
    if span <= 2:
        return chunk.min_val, chunk.max_val
    if span <= 3:
        return chunk.min_val, chunk.min_val + 1
    return chunk.min_val + span // 3, chunk.min_val + (span * 2) // 3


def split_locations(source: Position) -> tuple[Position, Position, Position]:
    """Return where the min, mid and max parts of a chunk at ``source`` are placed."""
    return _SPLIT_LOCATIONS[source]


def _chunk_values(stacks: Stacks, chunk: Chunk) -> list[int]:
    size = chunk.size
    if chunk.position is Position.TOP_A:
        return [stacks.a.peek(i) for i in range(size)]
    if chunk.position is Position.BOTTOM_A:
        start = len(stacks.a) - size
        return [stacks.a.peek(start + i) for i in range(size)]
    if chunk.position is Position.TOP_B:
        return [stacks.b.peek(i) for i in range(size)]
    start = len(stacks.b) - size
    return [stacks.b.peek(start + i) for i in range(size)]


def _ordered(values: Sequence[int], descending: bool) -> bool:
    pairs = zip(values, values[1:])
    if descending:
        return all(current >= following for current, following in pairs)
    return all(current <= following for current, following in pairs)


def is_chunk_sorted(stacks: Stacks, chunk: Chunk) -> bool:
    """Return whether the chunk reads ascending from the top in A or descending in B."""
    if chunk.size <= 1:
        return True
    descending = chunk.position in (Position.TOP_B, Position.BOTTOM_B)
    return _ordered(_chunk_values(stacks, chunk), descending)


def detect_sorted_portion(stacks: Stacks, chunk: Chunk) -> int:
    """Count the leading ascending steps of a chunk at the top of A; 0 elsewhere."""
    if chunk.position is not Position.TOP_A:
        return 0
    count = 0
    while count < chunk.size - 1 and stacks.a.peek(count) <= stacks.a.peek(count + 1):
        count += 1
    return count


def move_chunk(stacks: Stacks, chunk: Chunk, target: Position) -> None:
    """Carry the chunk to ``target`` and update its position."""
    if chunk.position is target:
        return
    pattern = _MOVES.get((chunk.position, target), ())
    for _ in range(chunk.size):
        for op in pattern:
            stacks.do(op)
    chunk.position = target


def split_chunk(stacks: Stacks, chunk: Chunk) -> tuple[Chunk, Chunk, Chunk]:
    """Split the chunk by its pivots; return the (min, mid, max) sub-chunks."""
    min_pos, mid_pos, max_pos = split_locations(chunk.position)
    low, high = calculate_pivots(chunk)
    move_chunk(stacks, chunk, Position.TOP_A)
    small = Chunk(min_pos, 0, chunk.min_val, low - 1)
    middle = Chunk(mid_pos, 0, low, high - 1)
    large = Chunk(max_pos, 0, high, chunk.max_val)
    for _ in range(chunk.size):
        current = stacks.a.peek(0)
        if current >= high:
            stacks.do(Op.RA)
            large.size += 1
        elif current >= low:
            stacks.do(Op.PB)
            middle.size += 1
        else:
            stacks.do(Op.PB)
            stacks.do(Op.RB)
            small.size += 1
    return small, middle, large


def chunk_sort(stacks: Stacks) -> None:
    """Sort A, which must hold the ranks 0..n-1, by recursive three-way chunk splits."""
    size = len(stacks.a)
    if size <= 1:
        return
    if size <= _BASE_CASE:
        sort_small(stacks, size)
        return
    pending = [Chunk(Position.TOP_A, size, 0, size - 1)]
    while pending:
        chunk = pending.pop()
        if chunk.size <= _BASE_CASE:
            move_chunk(stacks, chunk, Position.TOP_A)
            sort_small(stacks, chunk.size)
            continue
        small, middle, large = split_chunk(stacks, chunk)
        # Handled in the order max, mid, min.
        pending.extend(part for part in (small, middle, large) if part.size > 0)