import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pushswap.errors import PushSwapError
from pushswap.insertion_optimized import (
    lis_insertion_sort,
    mark_lis,
    move_lis_to_b,
    quicksort_array,
)
from pushswap.operations import Op, Stacks

# Ranks of a list of distinct integers: always a permutation of range(n).
rank_permutations = st.lists(st.integers(), unique=True, max_size=30).map(
    lambda xs: sorted(range(len(xs)), key=xs.__getitem__)
)


@pytest.mark.parametrize(
    ("values", "expected"),
    [
        ([1, 2, 3, 5, 4], [True, True, True, False, True]),
        ([], []),
        ([0, 1, 2, 3], [True, True, True, True]),
    ],
)
def test_mark_lis_examples(values, expected):
    assert mark_lis(values) == expected


@given(st.lists(st.integers(-50, 50), max_size=40))
def test_mark_lis_marks_strictly_increasing(values):
    flags = mark_lis(values)
    chosen = [v for v, flag in zip(values, flags) if flag]
    assert len(flags) == len(values)
    assert all(x < y for x, y in zip(chosen, chosen[1:]))
    assert bool(chosen) == bool(values)


@given(rank_permutations)
def test_move_lis_to_b_keeps_b_descending(values):
    stacks = Stacks.from_values(values)
    move_lis_to_b(stacks)
    b_items = list(stacks.b)
    assert b_items == sorted(b_items, reverse=True)
    assert len(stacks.ops) == len(values)
    assert sorted([*stacks.a, *b_items]) == sorted(values)


@settings(max_examples=60)
@given(rank_permutations)
def test_lis_insertion_sort_sorts(values):
    stacks = Stacks.from_values(values)
    lis_insertion_sort(stacks)
    assert list(stacks.a) == sorted(values)
    assert stacks.b.is_empty()
    fresh = Stacks.from_values(values)
    for op in stacks.ops:
        fresh.apply(op)
    assert list(fresh.a) == sorted(values)


@pytest.mark.parametrize(
    ("values", "expected_ops"), [([], []), ([7], []), ([1, 0], [Op.SA])]
)
def test_lis_insertion_sort_small_inputs(values, expected_ops):
    stacks = Stacks.from_values(values)
    lis_insertion_sort(stacks)
    assert stacks.ops == expected_ops
    assert list(stacks.a) == sorted(values)


def test_lis_insertion_sort_respects_limit():
    stacks = Stacks.from_values([4, 3, 2, 1, 0, 5])
    stacks.max_ops = 2
    with pytest.raises(PushSwapError):
        lis_insertion_sort(stacks)


@given(st.lists(st.integers(-1000, 1000), max_size=60))
def test_quicksort_array_sorts(values):
    assert quicksort_array(values) == sorted(values)


def test_quicksort_array_example_and_input_untouched():
    values = [1, 2, 3, 5, 4]
    assert quicksort_array(values) == [1, 2, 3, 4, 5]
    assert values == [1, 2, 3, 5, 4]