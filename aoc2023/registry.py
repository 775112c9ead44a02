from __future__ import annotations

from typing import Any, TypeVar

from loguru import logger

from .errors import UnknownDayError
from .solution import Solution

_SolutionT = TypeVar("_SolutionT", bound=type[Solution[Any]])

_registry: dict[int, type[Solution[Any]]] = {}


def register(cls: _SolutionT) -> _SolutionT:
    """Class decorator recording a `Solution` subclass under its `day`."""
    day = getattr(cls, "day", None)
    if not isinstance(day, int) or day < 1:
        raise ValueError(f"{cls.__name__} must define a positive integer `day`, got {day!r}")
    if (existing := _registry.get(day)) is not None and existing is not cls:
        raise ValueError(f"Day {day} is already registered to {existing.__name__}")

    _registry[day] = cls
    logger.debug(f"Registered {cls.__name__} for day {day}")
    return cls


def unregister(day: int) -> None:
    _registry.pop(day, None)


def get_solution(day: int) -> Solution[Any]:
    """Instantiate the solution registered for `day`.

    Raises:
        UnknownDayError: If no solution is registered for that day.
    """
    try:
        cls = _registry[day]
    except KeyError:
        raise UnknownDayError(day) from None
    return cls()


def registered_days() -> list[int]:
    return sorted(_registry)


__all__ = (
    "register",
    "unregister",
    "get_solution",
    "registered_days",
)
