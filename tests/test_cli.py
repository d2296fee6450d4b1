import itertools

import pytest

from pushswap.cli import STRATEGIES, main, sort_values
from pushswap.operations import Op, Stacks


def _replay(values, ops):
    stacks = Stacks.from_values(values)
    for op in ops:
        stacks.apply(op)
    return stacks


@pytest.mark.parametrize(
    "strategy", ["bubble", "insertion", "selection", "radix", "quick"]
)
@pytest.mark.parametrize("values", list(itertools.permutations(range(5))))
def test_strategies_sort(strategy, values):
    ops = sort_values(values, strategy)
    result = _replay(values, ops)
    assert list(result.a) == [0, 1, 2, 3, 4]
    assert result.b.is_empty()


@pytest.mark.parametrize("strategy", sorted(STRATEGIES))
def test_single_value_needs_no_ops(strategy):
    assert sort_values([0], strategy) == []


def test_unknown_strategy_rejected():
    with pytest.raises(ValueError):
        sort_values([1, 0], "bogus")


def test_main_prints_operations_that_sort(capsys):
    args = ["42", "-7", "0", "1000", "3", "-100"]
    assert main(args) == 0
    out = capsys.readouterr().out
    ops = [Op[line.upper()] for line in out.splitlines()]
    result = _replay([4, 1, 2, 5, 3, 0], ops)
    assert list(result.a) == [0, 1, 2, 3, 4, 5]
    assert result.b.is_empty()


def test_main_sorted_input_prints_nothing(capsys):
    assert main(["1", "2", "3"]) == 0
    assert capsys.readouterr().out == ""


def test_main_two_values_swaps(capsys):
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "sa\n"


@pytest.mark.parametrize(
    "args",
    [[], ["1", "1"], ["abc"], ["2147483648"], ["1", "2x"], [""]],
)
def test_main_reports_error(args, capsys):
    assert main(args) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""