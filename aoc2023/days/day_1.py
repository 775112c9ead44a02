from __future__ import annotations

import operator
import string

from aoc2023.errors import SolverFault
from aoc2023.registry import register
from aoc2023.solution import Solution
from aoc2023.stream import lines

WORD_DIGITS = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}

# Words first, then numerals. The order breaks ties between tokens starting at the same offset.
DIGIT_TOKENS = (*WORD_DIGITS, *string.digits)


def combine(first: str, last: str) -> int:
    """Read two digits as a two digit number, `first` being the tens."""
    number = f"{first}{last}"
    if len(number) != 2 or not all(c in string.digits for c in number):
        raise SolverFault(f"Cannot combine {first!r} and {last!r} into a two digit number")
    return int(number)


def calibration_value(line: str) -> int:
    """The first and last ASCII digit of a line as a two digit number, 0 if it has none."""
    first = next((c for c in line if c in string.digits), "0")
    last = next((c for c in reversed(line) if c in string.digits), "0")
    return combine(first, last)


def find_tokens(line: str) -> list[tuple[int, str]]:
    """Every (offset, token) pair where a digit token starts in `line`.

    All offsets are tried for all tokens, so spellings sharing letters (`eightwo`) both count.
    Pairs come ordered by offset, then by position in `DIGIT_TOKENS`.
    """
    return [
        (offset, token)
        for offset in range(len(line))
        for token in DIGIT_TOKENS
        if line.startswith(token, offset)
    ]


def token_digit(token: str) -> str:
    if token in WORD_DIGITS:
        return str(WORD_DIGITS[token])
    if len(token) == 1 and token in string.digits:
        return token
    raise SolverFault(f"Unknown digit token: {token!r}")


def spelled_calibration_value(line: str) -> int:
    """Like `calibration_value`, but digits may also be spelled out as `one` to `nine`."""
    matches = find_tokens(line)
    if not matches:
        raise SolverFault(f"No digit or digit word in line {line!r}")

    _, first = matches[0]
    last_offset = matches[-1][0]
    _, last = next(m for m in matches if m[0] == last_offset)
    return combine(token_digit(first), token_digit(last))


@register
class Trebuchet(Solution[int]):
    """--- Day 1: Trebuchet?! ---

    Each line of the calibration document hides a value: its first and last digit, read as a
    two digit number. Part 1 only counts numerals; part 2 also counts digits spelled out as
    words. The answer to both is the sum of the values of all lines.
    """

    day = 1
    title = "Trebuchet?!"

    async def part_1(self, puzzle: str) -> int:
        return await (lines(puzzle) / calibration_value).reduce(operator.add, 0)

    async def part_2(self, puzzle: str) -> int:
        return await (lines(puzzle) / spelled_calibration_value).reduce(operator.add, 0)
