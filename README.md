# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a
fixed set of eleven operations. The `pushswap` command reads the numbers
from the command line and prints the operations that leave them sorted on
stack `a`, smallest on top.

## The operations

| Name  | Effect                                         |
|-------|------------------------------------------------|
| `sa`  | swap the top two elements of `a`               |
| `sb`  | swap the top two elements of `b`               |
| `ss`  | `sa` and `sb` together                         |
| `pa`  | move the top of `b` onto `a`                   |
| `pb`  | move the top of `a` onto `b`                   |
| `ra`  | rotate `a`: the top element goes to the bottom |
| `rb`  | rotate `b`                                     |
| `rr`  | `ra` and `rb` together                         |
| `rra` | reverse-rotate `a`: the bottom goes to the top |
| `rrb` | reverse-rotate `b`                             |
| `rrr` | `rra` and `rrb` together                       |

An operation on a stack with too few elements does nothing.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Using the command

```
pushswap 3 2 5 1 4
```

Each argument is one integer, optionally signed, that fits in a 32-bit
signed int (a lone `+` or `-` is read as zero). The command prints one
operation per line on standard output and exits with status 0.

The input is rejected, with `Error` on standard error and exit status 1,
when:

- no numbers are given, or more than 1000;
- an argument is empty or holds anything other than an optional sign and
  decimal digits;
- a number lies outside the 32-bit signed range;
- the same number appears twice.

Before sorting, the numbers are replaced by their ranks (0 for the
smallest, 1 for the next, and so on), so only their relative order matters.
The command always sorts with the quick sort strategy (`"quick"`).

Before printing, the operation list is tidied up: `ra pb rra` becomes
`sa pb` and `rb pa rrb` becomes `sb pa`; then, twice over, within each run
of rotations opposite rotations cancel and matching rotations of both
stacks are merged into `rr` and `rrr`, and within each run of pushes only
the surplus of `pa` or `pb` is kept.

## Using it as a library

- `pushswap.deque.BoundedDeque` is the fixed-capacity double-ended queue
  each stack is built on. Pushing onto a full one raises `OverflowError`,
  popping an empty one raises `IndexError`, and `peek` returns 0 for an
  index past the end.
- `pushswap.operations.Op` names the eleven operations (`Op.RA.text` is
  `"ra"`), and `pushswap.operations.Stacks` holds the two stacks and the
  list of recorded operations. `Stacks.from_values` builds them with the
  values in `a`, first value on top; `Stacks.apply` performs one operation;
  `Stacks.do` records it and performs it, raising `PushSwapError` once
  `max_ops` operations have been recorded, if a limit is set.
- `pushswap.parsing` checks and parses arguments: `is_valid_int`,
  `validate_args`, `has_duplicates`, `compress` (values to ranks) and
  `parse_numbers` (arguments to ranks).
- Sorting strategies work on a `Stacks` and record their operations in it:
  - `pushswap.simple_sorts`: `bubble_sort`, `insertion_sort`,
    `selection_sort` and `radix_sort` (the last needs the ranks 0..n-1 in
    `a`);
  - `pushswap.insertion_optimized`: `lis_insertion_sort`, which first sets
    a longest increasing subsequence aside in `b` (`mark_lis`,
    `move_lis_to_b`); the module also has `quicksort_array` for plain
    lists;
  - `pushswap.quick_sorts`: `quick_sort` and `quick_sort_3way`;
  - `pushswap.chunk_sort`: `chunk_sort` (needs the ranks 0..n-1 in `a`),
    with its helpers `Position`, `Chunk`, `calculate_pivots`,
    `split_locations`, `is_chunk_sorted`, `detect_sorted_portion`,
    `move_chunk` and `split_chunk`;
  - `pushswap.small_sort`: `sort_small`, fixed move sequences for the top
    two to five elements of `a`.
- `pushswap.optimizer` shortens an operation list (`cancel_patterns`,
  `merge_rotations`, `optimize`) and renders it as text, one name per line
  (`format_operations`).
- `pushswap.cli.sort_values(values, strategy)` runs a strategy on a list of
  ranks and returns the operations it recorded. The strategy names are
  `bubble`, `insertion`, `lis`, `selection`, `radix`, `quick` (the
  default), `quick3` and `chunk`; any other name raises `ValueError`.
  `pushswap.cli.main` is what the `pushswap` command runs.

Rejected input and invalid operations are raised as
`pushswap.errors.PushSwapError`.

## What it does not do

- There is no command that reads a list of operations and checks whether
  it sorts a given set of numbers.
- The command has no option to choose a strategy; other strategies are
  reached only through `pushswap.cli.sort_values` or by calling them
  directly.