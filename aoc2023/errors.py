from __future__ import annotations


class Aoc2023Error(Exception):
    """Base class for the errors raised by this package."""


class SolverFault(Aoc2023Error):
    """A solver found its input in a state its own invariants rule out.

    Raised instead of returning a made-up answer, e.g. when a line yields no digit to combine.
    """


class UnknownDayError(Aoc2023Error, KeyError):
    """No solution is registered for the requested day."""

    def __init__(self, day: int) -> None:
        super().__init__(day)
        self.day = day

    def __str__(self) -> str:
        return f"No solution registered for day {self.day}"


__all__ = (
    "Aoc2023Error",
    "SolverFault",
    "UnknownDayError",
)
