"""Turn command-line arguments into distinct 32-bit integers and rank them."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from pushswap.libft.chars import is_digit
from pushswap.libft.convert import atoi, itoa, split


class InputError(ValueError):
    """Raised when the arguments do not form a list of distinct integers."""


def split_arguments(args: Iterable[str]) -> List[str]:
    """Split every argument on spaces and return all the words in order.

    Raises InputError when an argument holds no word at all.
    """
    words: List[str] = []
    for arg in args:
        parts = split(arg, " ")
        if not parts:
            raise InputError(f"argument {arg!r} holds no number")
        words.extend(parts)
    return words


def is_number(text: str) -> bool:
    """Return True when ``text`` is an optional sign followed only by digits."""
    digits = text[1:] if text[:1] in ("-", "+") else text
    return all(is_digit(char) for char in digits)


def parse_int(text: str) -> int:
    """Parse a canonical decimal integer that fits in 32 signed bits.

    Signs other than a leading minus, leading zeros, ``-0`` and values out
    of range are rejected with InputError.
    """
    if not text or not is_number(text):
        raise InputError(f"{text!r} is not a number")
    value = atoi(text)
    if not itoa(value).startswith(text):
        raise InputError(f"{text!r} is not a valid integer")
    return value


def parse_numbers(args: Iterable[str]) -> List[int]:
    """Parse all numbers in ``args``; raise InputError on bad input or duplicates."""
    numbers = [parse_int(word) for word in split_arguments(args)]
    if len(set(numbers)) != len(numbers):
        raise InputError("duplicate numbers")
    return numbers


def rank(numbers: Sequence[int]) -> List[int]:
    """Replace each number by its position in ascending order, starting at 0."""
    if len(set(numbers)) != len(numbers):
        raise InputError("duplicate numbers")
    positions = {value: index for index, value in enumerate(sorted(numbers))}
    return [positions[value] for value in numbers]