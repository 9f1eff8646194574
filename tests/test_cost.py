import random

import pytest

from pushswap.cost import (
    Direction,
    Moves,
    a_rotations,
    b_rotations,
    cheapest_move,
    choose_directions,
)
from pushswap.solver import apply_move
from pushswap.stack import Operation, Stacks

ROTATIONS = {
    Operation.RA,
    Operation.RB,
    Operation.RR,
    Operation.RRA,
    Operation.RRB,
    Operation.RRR,
}


def _ascents(values):
    n = len(values)
    return sum(1 for i in range(n) if values[i] < values[(i + 1) % n])


def _descents(values):
    n = len(values)
    return sum(1 for i in range(n) if values[i] > values[(i + 1) % n])


def _rotated(values, k):
    return values[k:] + values[:k]


def _setup(seed, size_a, size_b):
    rng = random.Random(seed)
    pool = rng.sample(range(-500, 500), size_a + size_b)
    a = pool[:size_a]
    b_sorted = sorted(pool[size_a:], reverse=True)
    b = _rotated(b_sorted, rng.randrange(size_b))
    return a, b


def test_b_rotations_pinned_example():
    assert b_rotations([0, 5], 4, 0, 4) == (0, Moves())


def test_choose_directions_tie_prefers_down():
    result = choose_directions(Moves(2, 0), 4, 0)
    assert result == (2, Moves(2, 0, Direction.DOWN, Direction.DOWN))


def test_a_rotations_above_all_in_sorted_stack():
    assert a_rotations([1, 2, 3], 4) == Moves(0, 0, Direction.DOWN, Direction.UP)


@pytest.mark.parametrize("size_a", [1, 3, 6])
@pytest.mark.parametrize("size_b", [1, 2, 5])
def test_choose_directions_is_minimal_and_consistent(size_a, size_b):
    for a_up in range(size_a):
        for b_up in range(size_b + 1):
            total, moves = choose_directions(Moves(a_up, b_up), size_a, size_b)
            a_down, b_down = size_a - a_up, size_b - b_up
            assert total == moves.rotation_count
            assert total <= max(a_up, b_up)
            assert total <= max(a_down, b_down)
            assert total <= a_up + b_down
            assert total <= a_down + b_up
            expected_a = a_up if moves.direction_a is Direction.UP else a_down
            expected_b = b_up if moves.direction_b is Direction.UP else b_down
            assert moves.a_rots == expected_a
            assert moves.b_rots == expected_b


@pytest.mark.parametrize("seed", range(8))
def test_b_rotations_keeps_b_cyclically_descending(seed):
    a, b = _setup(seed, 7, 6)
    for depth, index in enumerate(a):
        total, moves = b_rotations(b, index, depth, len(a))
        stacks = Stacks(a)
        stacks.b.extend(b)
        apply_move(stacks, moves)
        new_b = list(stacks.b)
        assert new_b[0] == index
        assert _ascents(new_b) <= 1
        assert sorted(new_b) == sorted(b + [index])
        assert sum(op in ROTATIONS for op in stacks.history) == total
        assert total == moves.rotation_count


def test_b_rotations_rejects_empty_b():
    with pytest.raises(ValueError):
        b_rotations([], 1, 0, 3)


@pytest.mark.parametrize("seed", range(8))
def test_a_rotations_keeps_a_cyclically_ascending(seed):
    rng = random.Random(seed)
    pool = rng.sample(range(-500, 500), 12)
    base = sorted(pool[:9])
    a = _rotated(base, rng.randrange(len(base)))
    for value in pool[9:]:
        moves = a_rotations(a, value)
        stacks = Stacks(a)
        stacks.b.append(value)
        op = Operation.RA if moves.direction_a is Direction.UP else Operation.RRA
        stacks.run(op, moves.a_rots)
        stacks.apply(Operation.PA)
        new_a = list(stacks.a)
        assert new_a[0] == value
        assert _descents(new_a) <= 1
        assert moves.a_rots <= len(a) - moves.a_rots or moves.direction_a is Direction.UP


def test_a_rotations_rejects_empty_a():
    with pytest.raises(ValueError):
        a_rotations([], 1)


@pytest.mark.parametrize("seed", range(8))
def test_cheapest_move_is_no_costlier_than_any_candidate(seed):
    a, b = _setup(seed, 9, 5)
    best = cheapest_move(a, b)
    totals = [b_rotations(b, index, depth, len(a))[0] for depth, index in enumerate(a)]
    assert best.rotation_count == min(totals)


def test_cheapest_move_rejects_empty_stacks():
    with pytest.raises(ValueError):
        cheapest_move([], [1, 2])
    with pytest.raises(ValueError):
        cheapest_move([1, 2], [])