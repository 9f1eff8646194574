"""Sort a list of distinct numbers with the two-stack instruction set."""

from __future__ import annotations

from typing import List, Sequence

from pushswap.cost import Direction, Moves, a_rotations, cheapest_move
from pushswap.parsing import rank
from pushswap.stack import Operation, Stacks


def apply_move(stacks: Stacks, moves: Moves) -> None:
    """Rotate both stacks as ``moves`` says, then push the top of a onto b."""
    a_rots, b_rots = moves.a_rots, moves.b_rots
    if moves.direction_a is moves.direction_b:
        shared = min(a_rots, b_rots)
        extra = abs(a_rots - b_rots)
        if moves.direction_a is Direction.UP:
            stacks.run(Operation.RR, shared)
            stacks.run(Operation.RA if a_rots > b_rots else Operation.RB, extra)
        else:
            stacks.run(Operation.RRR, shared)
            stacks.run(Operation.RRA if a_rots > b_rots else Operation.RRB, extra)
    elif moves.direction_a is Direction.UP:
        stacks.run(Operation.RA, a_rots)
        stacks.run(Operation.RRB, b_rots)
    else:
        stacks.run(Operation.RRA, a_rots)
        stacks.run(Operation.RB, b_rots)
    stacks.apply(Operation.PB)


def sort_top(stacks: Stacks) -> None:
    """Sort stack a when it holds at most three items."""
    if stacks.is_sorted():
        return
    size = len(stacks.a)

    def at(position: int) -> int:
        return stacks.a[min(position, len(stacks.a)) - 1]

    if size >= 3:
        if at(2) > at(1):
            stacks.apply(Operation.RRA)
        elif at(2) < at(3) < at(1):
            stacks.apply(Operation.RA)
    if at(1) > at(2):
        stacks.apply(Operation.SA)
    if size >= 3 and at(2) > at(3):
        stacks.apply(Operation.RRA)


def rotate_back(stacks: Stacks, size: int) -> None:
    """Insert every item of b into its place in a, then bring rank 0 to the top."""
    while stacks.b:
        moves = a_rotations(stacks.a, stacks.b[0])
        op = Operation.RA if moves.direction_a is Direction.UP else Operation.RRA
        stacks.run(op, moves.a_rots)
        stacks.apply(Operation.PA)
    smallest = next(
        (position for position, value in enumerate(stacks.a) if value == 0),
        len(stacks.a),
    )
    if size - smallest < smallest:
        stacks.run(Operation.RRA, size - smallest)
    else:
        stacks.run(Operation.RA, smallest)


def solve(numbers: Sequence[int]) -> List[Operation]:
    """Return the instructions that sort ``numbers`` ascending on stack a.

    Raises InputError when the numbers are not distinct.
    """
    stacks = Stacks(rank(numbers))
    if stacks.is_sorted():
        return []
    size = len(stacks.a)
    if size > 3:
        stacks.apply(Operation.PB)
    if size > 4:
        stacks.apply(Operation.PB)
    if len(stacks.a) <= 3:
        sort_top(stacks)
    while size > 5 and len(stacks.a) > 3:
        apply_move(stacks, cheapest_move(stacks.a, stacks.b))
    sort_top(stacks)
    rotate_back(stacks, size)
    return list(stacks.history)