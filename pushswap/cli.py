"""Command line entry point: print the instructions that sort the arguments."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from pushswap.parsing import InputError, parse_numbers
from pushswap.solver import solve

EXIT_FAILURE = 255


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Sort the numbers given as arguments and print one instruction per line.

    Bad input prints ``Error`` to standard error and returns a failure status.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        operations = solve(parse_numbers(args))
    except InputError:
        sys.stderr.write("Error\n")
        return EXIT_FAILURE
    if operations:
        sys.stdout.write("".join(f"{op}\n" for op in operations))
    return 0


if __name__ == "__main__":
    sys.exit(main())