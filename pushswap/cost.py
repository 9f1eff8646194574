"""Rotation costs for moving an element between the two stacks.

Stack b is kept as a rotation of a descending run, stack a as a rotation of
an ascending run; these functions find how far each stack must turn so an
element lands in its place.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple


class Direction(Enum):
    """Which way a stack is rotated."""

    DOWN = 0
    UP = 1


@dataclass(frozen=True)
class Moves:
    """Rotations of each stack, and their directions, before a push."""

    a_rots: int = 0
    b_rots: int = 0
    direction_a: Direction = Direction.UP
    direction_b: Direction = Direction.UP

    @property
    def rotation_count(self) -> int:
        """Number of rotation instructions needed, shared rotations counted once."""
        if self.direction_a is self.direction_b:
            return max(self.a_rots, self.b_rots)
        return self.a_rots + self.b_rots


def choose_directions(moves: Moves, size_a: int, size_b: int) -> Tuple[int, Moves]:
    """Pick the cheapest of the four direction combinations.

    ``moves`` holds upward rotation counts. Returns the number of rotation
    instructions and the moves with chosen directions and counts.
    """
    a_up, b_up = moves.a_rots, moves.b_rots
    a_down, b_down = size_a - a_up, size_b - b_up
    up, down = Direction.UP, Direction.DOWN
    if max(a_up, b_up) < max(a_down, b_down):
        total, dir_a, dir_b = max(a_up, b_up), up, up
    else:
        total, dir_a, dir_b = max(a_down, b_down), down, down
    if a_up + b_down < total:
        total, dir_a, dir_b = a_up + b_down, up, down
    if a_down + b_up < total:
        total, dir_a, dir_b = a_down + b_up, down, up
    chosen = Moves(
        a_rots=a_down if dir_a is down else a_up,
        b_rots=b_down if dir_b is down else b_up,
        direction_a=dir_a,
        direction_b=dir_b,
    )
    return total, chosen


def _following(values: List[int], position: int) -> Optional[int]:
    return values[position + 1] if position + 1 < len(values) else None


def _steps_above(values: List[int], start: int, index: int, floor: int) -> int:
    """Count items from ``start`` that exceed ``index``, if the first exceeds ``floor``."""
    if start >= len(values) or values[start] <= floor:
        return 0
    steps = 0
    for value in values[start:]:
        if not index < value:
            break
        steps += 1
    return steps


def _steps_below(values: List[int], start: int, index: int, ceiling: int) -> int:
    """Count items from ``start`` that are below both ``ceiling`` and ``index``."""
    steps = 0
    for value in values[start:]:
        if not (value < ceiling and index > value):
            break
        steps += 1
    return steps


def _run_length(values: List[int], descending: bool) -> int:
    length = 0
    for current, nxt in zip(values, values[1:]):
        if (current > nxt) if descending else (current < nxt):
            length += 1
        else:
            break
    return length


def b_rotations(
    stack_b: Sequence[int], index: int, a_rots: int, size_a: int
) -> Tuple[int, Moves]:
    """Cost of pushing ``index``, found ``a_rots`` deep in stack a, onto stack b.

    Returns the number of rotation instructions and the chosen moves.
    Raises ValueError when stack b is empty.
    """
    values = list(stack_b)
    if not values:
        raise ValueError("stack b is empty")
    last = values[-1]
    if values[0] > last:
        b_rots = _steps_above(values, 0, index, last)
    else:
        low = _run_length(values, descending=True)
        low_value = values[low]
        after_low = _following(values, low)
        b_rots = low + 1
        if index > last and after_low is not None and index < after_low:
            b_rots += _steps_above(values, low + 1, index, last)
        elif last > index > low_value:
            b_rots = _steps_above(values, 0, index, low_value)
    return choose_directions(Moves(a_rots, b_rots), size_a, len(values))


def a_rotations(stack_a: Sequence[int], index: int) -> Moves:
    """Rotations of stack a that bring the place for ``index`` to the top.

    Only ``a_rots`` and ``direction_a`` of the result are meaningful.
    Raises ValueError when stack a is empty.
    """
    values = list(stack_a)
    if not values:
        raise ValueError("stack a is empty")
    last = values[-1]
    if values[0] < last:
        rots = 0
        for value in values:
            if not index > value:
                break
            rots += 1
    else:
        peak = _run_length(values, descending=False)
        peak_value = values[peak]
        after_peak = _following(values, peak)
        rots = peak + 1
        if after_peak is not None and index < last and index > after_peak:
            rots += _steps_below(values, peak + 1, index, peak_value)
        elif peak_value > index > last:
            rots = _steps_below(values, 0, index, peak_value)
    down = len(values) - rots
    if down < rots:
        return Moves(a_rots=down, direction_a=Direction.DOWN)
    return Moves(a_rots=rots)


def cheapest_move(stack_a: Sequence[int], stack_b: Sequence[int]) -> Moves:
    """Return the moves for the element of stack a that is cheapest to push to b.

    On equal cost the element nearest the top wins. Raises ValueError when
    either stack is empty.
    """
    values_a = list(stack_a)
    values_b = list(stack_b)
    if not values_a:
        raise ValueError("stack a is empty")
    size_a = len(values_a)
    best_total: Optional[int] = None
    best = Moves()
    for depth, index in enumerate(values_a):
        total, moves = b_rotations(values_b, index, depth, size_a)
        if best_total is None or total < best_total:
            best_total, best = total, moves
    return best