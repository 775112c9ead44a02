from __future__ import annotations

from typing import Iterator

import pytest

from aoc2023.days.day_1 import Trebuchet
from aoc2023.errors import UnknownDayError
from aoc2023.registry import get_solution, register, registered_days, unregister
from aoc2023.solution import Solution


class Placeholder(Solution[str]):
    day = 25

    def part_1(self, puzzle: str) -> str:
        return puzzle.upper()

    def part_2(self, puzzle: str) -> str:
        return puzzle[::-1]


@pytest.fixture
def placeholder() -> Iterator[type[Placeholder]]:
    yield register(Placeholder)
    unregister(Placeholder.day)


def test_day_1_is_registered() -> None:
    assert 1 in registered_days()
    assert isinstance(get_solution(1), Trebuchet)


def test_register(placeholder: type[Placeholder]) -> None:
    assert registered_days()[-1] == 25
    solution = get_solution(25)
    assert isinstance(solution, Placeholder)
    assert repr(solution) == "Placeholder(day=25)"


def test_register_is_idempotent_for_the_same_class(placeholder: type[Placeholder]) -> None:
    assert register(Placeholder) is Placeholder


def test_register_rejects_a_second_class_for_a_day(placeholder: type[Placeholder]) -> None:
    class Other(Placeholder):
        pass

    with pytest.raises(ValueError, match="already registered"):
        register(Other)


def test_register_requires_a_day() -> None:
    class NoDay(Placeholder):
        day = 0

    with pytest.raises(ValueError, match="positive integer"):
        register(NoDay)


def test_unknown_day() -> None:
    with pytest.raises(UnknownDayError) as excinfo:
        get_solution(42)

    assert isinstance(excinfo.value, KeyError)
    assert str(excinfo.value) == "No solution registered for day 42"
