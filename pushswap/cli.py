"""Command line entry point: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Sequence

from pushswap.chunk_sort import chunk_sort
from pushswap.errors import ERROR_MESSAGE, PushSwapError
from pushswap.insertion_optimized import lis_insertion_sort
from pushswap.operations import Op, Stacks
from pushswap.optimizer import format_operations, optimize
from pushswap.parsing import parse_numbers, validate_args
from pushswap.quick_sorts import quick_sort, quick_sort_3way
from pushswap.simple_sorts import bubble_sort, insertion_sort, radix_sort, selection_sort

MAX_INPUTS = 1001
DEFAULT_STRATEGY = "quick"

STRATEGIES: dict[str, Callable[[Stacks], None]] = {
    "bubble": bubble_sort,
    "insertion": insertion_sort,
    "lis": lis_insertion_sort,
    "selection": selection_sort,
    "radix": radix_sort,
    "quick": quick_sort,
    "quick3": quick_sort_3way,
    "chunk": chunk_sort,
}


def sort_values(values: Iterable[int], strategy: str = DEFAULT_STRATEGY) -> list[Op]:
    """Return the operations the named strategy records while sorting ranks ``values``."""
    try:
        sorter = STRATEGIES[strategy]
    except KeyError:
        raise ValueError(f"unknown strategy: {strategy!r}") from None
    stacks = Stacks.from_values(values)
    sorter(stacks)
    return list(stacks.ops)


def main(argv: Sequence[str] | None = None) -> int:
    """Validate the arguments, sort them and print the optimised operations."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        validate_args(args, MAX_INPUTS)
        ranks = parse_numbers(args)
        ops = sort_values(ranks)
    except PushSwapError:
        sys.stderr.write(f"{ERROR_MESSAGE}\n")
        return 1
    sys.stdout.write(format_operations(optimize(ops)))
    return 0


if __name__ == "__main__":
    sys.exit(main())