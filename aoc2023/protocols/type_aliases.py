from __future__ import annotations

from typing import (
    TypeVar,
    TypeAlias,
    Coroutine,
    Any,
    ParamSpec,
    NewType,
    Protocol,
    Union,
    Callable,
)

T = TypeVar("T")

P = ParamSpec("P")

CoroT: TypeAlias = Coroutine[Any, Any, T]


class SupportsStr(Protocol):
    def __str__(self) -> str: ...


# Anything the harness can print and write to a report file.
AnswerT = TypeVar("AnswerT", bound=SupportsStr)

# A solving part may be a plain function or a coroutine function of the puzzle text.
PartFn: TypeAlias = Union[Callable[[str], T], Callable[[str], CoroT[T]]]


class SentinelType:
    pass


_NoValueSentinelT = NewType("_NoValueSentinelT", SentinelType)
NoValueSentinel = _NoValueSentinelT(SentinelType())  # noqa
