"""Peephole optimisation and printing of operation lists."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from itertools import groupby

from pushswap.operations import Op

_PATTERNS: dict[tuple[Op, ...], tuple[Op, ...]] = {
    (Op.RA, Op.PB, Op.RRA): (Op.SA, Op.PB),
    (Op.RB, Op.PA, Op.RRB): (Op.SB, Op.PA),
}
_PATTERN_LENGTH = 3

_ROTATIONS = frozenset({Op.RA, Op.RRA, Op.RB, Op.RRB})
_PUSHES = frozenset({Op.PA, Op.PB})


def cancel_patterns(ops: Iterable[Op]) -> list[Op]:
    """Replace ``ra pb rra`` by ``sa pb`` and ``rb pa rrb`` by ``sb pa``."""
    items = [Op(op) for op in ops]
    result: list[Op] = []
    index = 0
    while index < len(items):
        replacement = _PATTERNS.get(tuple(items[index : index + _PATTERN_LENGTH]))
        if replacement is not None:
            result.extend(replacement)
            index += _PATTERN_LENGTH
        else:
            result.append(items[index])
            index += 1
    return result


def _kind(op: Op) -> str:
    if op in _ROTATIONS:
        return "rotation"
    if op in _PUSHES:
        return "push"
    return "other"


def _merge_rotation_run(run: list[Op]) -> list[Op]:
    counts = Counter(run)
    net_ra = max(counts[Op.RA] - counts[Op.RRA], 0)
    net_rra = max(counts[Op.RRA] - counts[Op.RA], 0)
    net_rb = max(counts[Op.RB] - counts[Op.RRB], 0)
    net_rrb = max(counts[Op.RRB] - counts[Op.RB], 0)
    both = min(net_ra, net_rb)
    both_reverse = min(net_rra, net_rrb)
    return (
        [Op.RR] * both
        + [Op.RRR] * both_reverse
        + [Op.RA] * (net_ra - both)
        + [Op.RB] * (net_rb - both)
        + [Op.RRA] * (net_rra - both_reverse)
        + [Op.RRB] * (net_rrb - both_reverse)
    )


def _merge_push_run(run: list[Op]) -> list[Op]:
    counts = Counter(run)
    difference = counts[Op.PA] - counts[Op.PB]
    if difference > 0:
        return [Op.PA] * difference
    return [Op.PB] * -difference


def merge_rotations(ops: Iterable[Op]) -> list[Op]:
    """Cancel opposite rotations and pushes within runs and combine rotations of both stacks.

    Each run of single-stack rotations becomes ``rr``, ``rrr``, ``ra``, ``rb``,
    ``rra``, ``rrb`` in that order; each run of pushes keeps only its surplus.
    """
    result: list[Op] = []
    for kind, group in groupby((Op(op) for op in ops), key=_kind):
        run = list(group)
        if kind == "rotation":
            result.extend(_merge_rotation_run(run))
        elif kind == "push":
            result.extend(_merge_push_run(run))
        else:
            result.extend(run)
    return result


def optimize(ops: Iterable[Op]) -> list[Op]:
    """Apply the pattern replacement, then the run merging twice."""
    return merge_rotations(merge_rotations(cancel_patterns(ops)))


def format_operations(ops: Iterable[Op]) -> str:
    """Return the operations one name per line, each line ending in a newline."""
    return "".join(f"{Op(op).text}\n" for op in ops)