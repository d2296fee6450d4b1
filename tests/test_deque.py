import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.deque import BoundedDeque


def test_push_front_and_back_order():
    d = BoundedDeque(5)
    d.push_back(1)
    d.push_back(2)
    d.push_front(3)
    assert list(d) == [3, 1, 2]
    assert len(d) == 3


def test_pop_front_and_back():
    d = BoundedDeque(4, [7, 8, 9])
    assert d.pop_front() == 7
    assert d.pop_back() == 9
    assert list(d) == [8]


def test_pop_from_empty_raises():
    d = BoundedDeque(2)
    with pytest.raises(IndexError):
        d.pop_front()
    with pytest.raises(IndexError):
        d.pop_back()


def test_push_when_full_raises():
    d = BoundedDeque(2, [1, 2])
    assert d.is_full()
    with pytest.raises(OverflowError):
        d.push_front(3)
    with pytest.raises(OverflowError):
        d.push_back(3)
    assert list(d) == [1, 2]


def test_peek_out_of_range_is_zero():
    d = BoundedDeque(3, [5, 6])
    assert d.peek(0) == 5
    assert d.peek(1) == 6
    assert d.peek(2) == 0
    assert d.peek(-1) == 0


def test_clear_empties():
    d = BoundedDeque(3, [1, 2, 3])
    d.clear()
    assert d.is_empty()
    assert len(d) == 0


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        BoundedDeque(-1)


_actions = st.lists(
    st.tuples(st.sampled_from(["pf", "pb", "of", "ob"]), st.integers(-100, 100)),
    max_size=60,
)


@given(st.integers(0, 8), _actions)
def test_matches_list_model(capacity, actions):
    d = BoundedDeque(capacity)
    model: list[int] = []
    for action, value in actions:
        if action == "pf":
            if len(model) == capacity:
                with pytest.raises(OverflowError):
                    d.push_front(value)
            else:
                d.push_front(value)
                model.insert(0, value)
        elif action == "pb":
            if len(model) == capacity:
                with pytest.raises(OverflowError):
                    d.push_back(value)
            else:
                d.push_back(value)
                model.append(value)
        elif action == "of":
            if model:
                assert d.pop_front() == model.pop(0)
            else:
                with pytest.raises(IndexError):
                    d.pop_front()
        else:
            if model:
                assert d.pop_back() == model.pop()
            else:
                with pytest.raises(IndexError):
                    d.pop_back()
        assert list(d) == model
        assert d.is_empty() == (not model)
        assert d.is_full() == (len(model) == capacity)