from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import timedelta
from typing import ClassVar, Generic

from .protocols.type_aliases import AnswerT, CoroT


@dataclass(frozen=True)
class SolveResult(Generic[AnswerT]):
    """The outcome of running one part of a solution.

    Exactly one of `output` and `error` is set. `elapsed` only covers the solving call itself.
    """

    part: int
    elapsed: timedelta
    output: AnswerT | None = None
    error: Exception | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @property
    def seconds(self) -> float:
        return self.elapsed.total_seconds()


class Solution(ABC, Generic[AnswerT]):
    """The two parts of an Advent of Code day.

    Subclasses set `day` (the puzzle number, without padding) and implement `part_1` and
    `part_2`. Both receive the same unmodified puzzle text and may be plain methods or
    coroutine methods. Both parts should return the same type; when they naturally differ,
    pick a common one such as `str`.
    """

    day: ClassVar[int]
    title: ClassVar[str] = ""

    @abstractmethod
    def part_1(self, puzzle: str) -> AnswerT | CoroT[AnswerT]:
        ...

    @abstractmethod
    def part_2(self, puzzle: str) -> AnswerT | CoroT[AnswerT]:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(day={self.day})"


__all__ = (
    "SolveResult",
    "Solution",
)
