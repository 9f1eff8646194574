import itertools
import random

import pytest

from pushswap.cost import Direction, Moves
from pushswap.parsing import InputError
from pushswap.solver import apply_move, rotate_back, solve, sort_top
from pushswap.stack import Operation, Stacks


def _replay(numbers, operations):
    stacks = Stacks(numbers)
    for op in operations:
        stacks.apply(op)
    return stacks


def test_apply_move_up_up_shares_rotations():
    stacks = Stacks([1, 2, 3, 4])
    stacks.b.extend([9, 8])
    apply_move(stacks, Moves(2, 1, Direction.UP, Direction.UP))
    assert stacks.history == [Operation.RR, Operation.RA, Operation.PB]


def test_apply_move_down_down_shares_reverse_rotations():
    stacks = Stacks([1, 2, 3, 4])
    stacks.b.extend([9, 8, 7])
    apply_move(stacks, Moves(1, 3, Direction.DOWN, Direction.DOWN))
    assert stacks.history == [Operation.RRR, Operation.RRB, Operation.RRB, Operation.PB]


def test_apply_move_opposite_directions():
    stacks = Stacks([1, 2, 3, 4])
    stacks.b.extend([9, 8])
    apply_move(stacks, Moves(2, 1, Direction.UP, Direction.DOWN))
    assert stacks.history == [Operation.RA, Operation.RA, Operation.RRB, Operation.PB]


@pytest.mark.parametrize("values", list(itertools.permutations([0, 1, 2])))
def test_sort_top_sorts_three(values):
    stacks = Stacks(values)
    sort_top(stacks)
    assert list(stacks.a) == [0, 1, 2]


@pytest.mark.parametrize("values", list(itertools.permutations([5, 9])))
def test_sort_top_sorts_two(values):
    stacks = Stacks(values)
    sort_top(stacks)
    assert list(stacks.a) == [5, 9]


def test_sort_top_leaves_sorted_stack_alone():
    stacks = Stacks([1, 2, 3])
    sort_top(stacks)
    assert stacks.history == []


def test_rotate_back_empties_b_and_sorts():
    stacks = Stacks([1, 2, 3])
    stacks.b.extend([0, 4])
    rotate_back(stacks, 5)
    assert list(stacks.a) == [0, 1, 2, 3, 4]
    assert list(stacks.b) == []


@pytest.mark.parametrize("numbers", [[], [7], [1, 2, 3], [-5, 0, 8, 100]])
def test_solve_sorted_input_needs_nothing(numbers):
    assert solve(numbers) == []


@pytest.mark.parametrize("size", [2, 3, 4, 5, 6])
def test_solve_every_permutation(size):
    for values in itertools.permutations(range(size)):
        stacks = _replay(values, solve(values))
        assert list(stacks.a) == list(range(size))
        assert list(stacks.b) == []


@pytest.mark.parametrize("size,seed", [(7, 0), (10, 1), (25, 2), (100, 3), (100, 4)])
def test_solve_random_numbers(size, seed):
    rng = random.Random(seed)
    numbers = rng.sample(range(-100_000, 100_000), size)
    stacks = _replay(numbers, solve(numbers))
    assert list(stacks.a) == sorted(numbers)
    assert list(stacks.b) == []


def test_solve_rejects_duplicates():
    with pytest.raises(InputError):
        solve([3, 1, 3])