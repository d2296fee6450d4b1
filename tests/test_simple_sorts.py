import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pushswap.operations import Op, Stacks
from pushswap.simple_sorts import bubble_sort, insertion_sort, radix_sort, selection_sort

SORTS = [bubble_sort, insertion_sort, selection_sort, radix_sort]


def _run(sort, values):
    stacks = Stacks.from_values(values)
    sort(stacks)
    return stacks


@pytest.mark.parametrize("sort", SORTS)
@settings(max_examples=60, deadline=None)
@given(values=st.integers(0, 7).flatmap(lambda n: st.permutations(range(n))))
def test_sorts_leave_a_ascending_and_ops_replay(sort, values):
    stacks = _run(sort, values)
    expected = list(range(len(values)))
    assert list(stacks.a) == expected
    assert stacks.b.is_empty()
    replayed = Stacks.from_values(values)
    for op in stacks.ops:
        replayed.apply(op)
    assert list(replayed.a) == expected
    assert replayed.b.is_empty()


@pytest.mark.parametrize("sort", SORTS)
@pytest.mark.parametrize("values", [[], [0]])
def test_trivial_input_records_nothing(sort, values):
    stacks = _run(sort, values)
    assert stacks.ops == []
    assert list(stacks.a) == values


def test_bubble_sort_on_sorted_input_only_rotates_once_round():
    assert _run(bubble_sort, [0, 1, 2, 3, 4]).ops == [Op.RA] * 5


def test_insertion_sort_two_elements_uses_small_sort():
    assert _run(insertion_sort, [1, 0]).ops == [Op.SA]


def test_selection_sort_on_sorted_input_never_rotates():
    ops = _run(selection_sort, [0, 1, 2, 3]).ops
    assert Op.RA not in ops
    assert (ops.count(Op.PB), ops.count(Op.PA)) == (4, 4)


def test_radix_sort_pushes_and_returns_equally():
    stacks = _run(radix_sort, [3, 0, 2, 1, 4])
    assert stacks.ops.count(Op.PA) == stacks.ops.count(Op.PB)
    assert list(stacks.a) == [0, 1, 2, 3, 4]