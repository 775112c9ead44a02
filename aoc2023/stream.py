from __future__ import annotations

from types import NotImplementedType
from typing import *

from .protocols.type_aliases import NoValueSentinel
from .utils import ensure_coro_fn, ensure_async_iterator

_T = TypeVar("_T")
_R = TypeVar("_R")

_P = ParamSpec("_P")

CoroFn: TypeAlias = Callable[_P, Coroutine[object, object, _R]]
SyncFn: TypeAlias = Callable[_P, _R]
EitherIterable: TypeAlias = Union[Iterable[_T], AsyncIterable[_T]]


class Stream(AsyncIterator[_T]):
    """An async iterator that can be mapped with `/` and folded with `reduce`.

    Example:
        >>> total = await (lines("1\\n2\\n3") / int).reduce(operator.add, 0)
    """

    def __init__(self, src: EitherIterable[_T]) -> None:
        self._src = ensure_async_iterator(src)

    def __aiter__(self) -> AsyncIterator[_T]:
        return self

    async def __anext__(self) -> _T:
        return await self._src.__anext__()

    @overload
    def __truediv__(self, other: CoroFn[[_T], _R]) -> Stream[_R]:
        ...

    @overload
    def __truediv__(self, other: SyncFn[[_T], _R]) -> Stream[_R]:
        ...

    @overload
    def __truediv__(self, other: object) -> Stream[_R] | NotImplementedType:
        ...

    def __truediv__(
        self, other: SyncFn[[_T], _R] | CoroFn[[_T], _R] | object
    ) -> Stream[_R] | NotImplementedType:
        """Map the stream using the given function or async function."""
        if not callable(other):
            return NotImplemented

        _fn = cast(Callable[[_T], Coroutine[Any, Any, _R]], ensure_coro_fn(other))

        async def _map() -> AsyncIterator[_R]:
            async for item in self:
                yield await _fn(item)

        cls_ = cast(Type[Stream[_R]], type(self))
        return cls_(_map())

    async def reduce(
        self,
        fn: SyncFn[[_R, _T], _R] | CoroFn[[_R, _T], _R],
        initial: _R | object = NoValueSentinel,
    ) -> _R:
        """Fold the stream from the left.

        Args:
            fn: The function combining the accumulated value with the next item.
            initial: The starting value. If omitted, the first item is used, and reducing an
                empty stream raises `ValueError`.

        Returns:
            The accumulated value.
        """
        _fn = cast(Callable[[_R, _T], Coroutine[Any, Any, _R]], ensure_coro_fn(fn))

        if initial is NoValueSentinel:
            try:
                acc = cast(_R, await self.__anext__())
            except StopAsyncIteration:
                raise ValueError("reduce() of empty stream with no initial value") from None
        else:
            acc = cast(_R, initial)

        async for item in self:
            acc = await _fn(acc, item)
        return acc


def lines(text: str) -> Stream[str]:
    """A stream over the lines of a puzzle input, without line terminators."""
    return Stream(text.splitlines())


__all__ = [
    "Stream",
    "lines",
]
