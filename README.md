# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
set of operations, and prints the sequence of operations that does it.

## Operations

| Name  | Effect                                          |
|-------|-------------------------------------------------|
| `sa`  | swap the top two elements of `a`                |
| `sb`  | swap the top two elements of `b`                |
| `ss`  | `sa` and `sb` together                          |
| `pa`  | move the top of `b` onto `a`                    |
| `pb`  | move the top of `a` onto `b`                    |
| `ra`  | rotate `a` up (the top becomes the bottom)      |
| `rb`  | rotate `b` up                                   |
| `rr`  | `ra` and `rb` together                          |
| `rra` | rotate `a` down (the bottom becomes the top)    |
| `rrb` | rotate `b` down                                 |
| `rrr` | `rra` and `rrb` together                        |

An operation that cannot act, such as a swap on fewer than two items or a
push from an empty stack, leaves the stacks unchanged.

## Command line

```
pip install .
push_swap 3 1 2
push_swap "5 4 3 2 1"
```

Numbers may be given as separate arguments or as space-separated words within
an argument. One operation is printed per line. Nothing is printed when the
input is already sorted or when no arguments are given.

Each number must be written canonically: an optional leading `-`, digits
only, no leading zeros, and within the 32-bit signed range. If a number is not
valid, an argument holds no number, or a number appears twice, `Error` is
written to standard error and the command exits with status 255.

## Library

```python
from pushswap.solver import solve

ops = solve([3, 1, 2])
print([op.value for op in ops])
```

`solve` returns a list of `pushswap.stack.Operation` members; it returns an
empty list for input that is already sorted and raises
`pushswap.parsing.InputError` when the numbers are not distinct.

`pushswap.stack.Stacks` holds the two stacks, applies operations to them
(`apply`, `run`) and records them in `history`, which is how you can check a
sequence yourself:

```python
from pushswap.stack import Stacks

stacks = Stacks([3, 1, 2])
for op in ops:
    stacks.apply(op)
assert stacks.is_sorted()
```

Other modules:

- `pushswap.parsing`: `parse_numbers` turns command-line style arguments into
  integers and raises `InputError` for bad input; `split_arguments`,
  `is_number`, `parse_int` and `rank` are the steps it is built from.
- `pushswap.cost`: rotation costs (`Moves`, `Direction`, `b_rotations`,
  `a_rotations`, `cheapest_move`, `choose_directions`) used to pick each move.
- `pushswap.solver`: `solve` and its steps `apply_move`, `sort_top` and
  `rotate_back`.
- `pushswap.cli`: `main(argv=None)`, the `push_swap` command.

`pushswap.libft` holds small general helpers: `chars` (ASCII
classification), `strings` (bounded string operations), `convert` (32-bit
`atoi`/`itoa` and `split`), `linkedlist` (`LinkedList`), `output` (writing to
file descriptors), `gnl` (`LineReader` and `get_next_line`), `printf` (a
printf supporting `c s p d i u x X %`) and `printf_format` (width, precision
and prefix calculations for conversion specs).

## What it does not do

There is no checker command: the package produces instructions but does not
read instructions from standard input to verify them. Use `Stacks` as shown
above for that. There are no raw-memory helpers in `pushswap.libft`.

## Tests

```
pip install ".[test]"
pytest
```