"""The two stacks of the puzzle and the operations allowed on them."""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Deque, Iterable, List, Union


class Operation(str, Enum):
    """An instruction that acts on stack a, stack b or both."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def _swap(stack: Deque[int]) -> None:
    if len(stack) > 1:
        stack[0], stack[1] = stack[1], stack[0]


def _rotate(stack: Deque[int]) -> None:
    stack.rotate(-1)


def _reverse_rotate(stack: Deque[int]) -> None:
    stack.rotate(1)


def _push(dst: Deque[int], src: Deque[int]) -> None:
    if src:
        dst.appendleft(src.popleft())


class Stacks:
    """Stack a, stack b (initially empty) and the operations applied so far.

    The top of each stack is the left end of its deque.
    """

    def __init__(self, a: Iterable[int] = ()) -> None:
        self.a: Deque[int] = deque(a)
        self.b: Deque[int] = deque()
        self.history: List[Operation] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}(a={list(self.a)!r}, b={list(self.b)!r})"

    def apply(self, op: Union[Operation, str]) -> Operation:
        """Perform one operation and record it.

        Operations that cannot act (a swap on fewer than two items, a push
        from an empty stack) leave the stacks unchanged but are still
        recorded. Raises ValueError for an unknown operation name.
        """
        op = Operation(op)
        if op in (Operation.SA, Operation.SS):
            _swap(self.a)
        if op in (Operation.SB, Operation.SS):
            _swap(self.b)
        if op is Operation.PA:
            _push(self.a, self.b)
        if op is Operation.PB:
            _push(self.b, self.a)
        if op in (Operation.RA, Operation.RR):
            _rotate(self.a)
        if op in (Operation.RB, Operation.RR):
            _rotate(self.b)
        if op in (Operation.RRA, Operation.RRR):
            _reverse_rotate(self.a)
        if op in (Operation.RRB, Operation.RRR):
            _reverse_rotate(self.b)
        self.history.append(op)
        return op

    def run(self, op: Union[Operation, str], count: int) -> None:
        """Apply ``op`` ``count`` times; a count below one does nothing."""
        for _ in range(count):
            self.apply(op)

    def is_sorted(self) -> bool:
        """Return True when stack a is strictly ascending from top to bottom."""
        items = list(self.a)
        return all(x < y for x, y in zip(items, items[1:]))