"""The two stacks and the eleven push_swap operations."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import IntEnum

from pushswap.deque import BoundedDeque
from pushswap.errors import PushSwapError


class Op(IntEnum):
    """A stack operation; ``text`` is the name printed for it."""

    SA = 1
    SB = 2
    SS = 3
    PA = 4
    PB = 5
    RA = 6
    RB = 7
    RR = 8
    RRA = 9
    RRB = 10
    RRR = 11

    @property
    def text(self) -> str:
        return self.name.lower()


def _swap(stack: BoundedDeque) -> None:
    if len(stack) < 2:
        return
    first = stack.pop_front()
    second = stack.pop_front()
    stack.push_front(first)
    stack.push_front(second)


def _push(src: BoundedDeque, dst: BoundedDeque) -> None:
    if not src.is_empty():
        dst.push_front(src.pop_front())


def _rotate(stack: BoundedDeque) -> None:
    if not stack.is_empty():
        stack.push_back(stack.pop_front())


def _reverse_rotate(stack: BoundedDeque) -> None:
    if not stack.is_empty():
        stack.push_front(stack.pop_back())


@dataclass
class Stacks:
    """Stacks A and B together with the operations recorded so far."""

    a: BoundedDeque
    b: BoundedDeque
    ops: list[Op] = field(default_factory=list)
    max_ops: int | None = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Stacks:
        """Build stacks with ``values`` in A (first value on top) and B empty."""
        items = list(values)
        capacity = len(items)
        return cls(a=BoundedDeque(capacity, items), b=BoundedDeque(capacity))

    def apply(self, op: Op) -> None:
        """Carry out ``op`` on the stacks without recording it."""
        try:
            op = Op(op)
        except ValueError as exc:
            raise PushSwapError() from exc
        a, b = self.a, self.b
        if op is Op.SA:
            _swap(a)
        elif op is Op.SB:
            _swap(b)
        elif op is Op.SS:
            _swap(a)
            _swap(b)
        elif op is Op.PA:
            _push(b, a)
        elif op is Op.PB:
            _push(a, b)
        elif op is Op.RA:
            _rotate(a)
        elif op is Op.RB:
            _rotate(b)
        elif op is Op.RR:
            _rotate(a)
            _rotate(b)
        elif op is Op.RRA:
            _reverse_rotate(a)
        elif op is Op.RRB:
            _reverse_rotate(b)
        else:
            _reverse_rotate(a)
            _reverse_rotate(b)

    def do(self, op: Op) -> None:
        """Record ``op`` and carry it out; raise when the limit is reached."""
        if self.max_ops is not None and len(self.ops) >= self.max_ops:
            raise PushSwapError()
        try:
            op = Op(op)
        except ValueError as exc:
            raise PushSwapError() from exc
        self.ops.append(op)
        self.apply(op)