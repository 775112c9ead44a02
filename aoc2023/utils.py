from __future__ import annotations

import asyncio
import functools
import inspect
from typing import *

from aoc2023.protocols.type_aliases import P, CoroT, T


def run_sync(f: Callable[P, Coroutine[Any, Any, T]]) -> Callable[P, T]:
    """Given a function, return a new function that runs the original one with asyncio.

    This can be used to transparently wrap asynchronous functions. It is used to expose the
    asynchronous harness as the entry point of the `Typer` CLI.

    Args:
        f: The function to run synchronously.

    Returns:
        A new function that runs the original one with `asyncio.run`.
    """

    @functools.wraps(f)
    def decorated(*args: P.args, **kwargs: P.kwargs) -> T:
        return asyncio.run(f(*args, **kwargs))

    return decorated


def iter_to_aiter(iterable: Iterable[T]) -> AsyncIterator[T]:
    """Convert an iterable to an async iterable.

    Items are handed over as they are produced, without yielding control to the event loop in
    between, so a stream over puzzle lines runs as a plain sequential scan.

    Args:
        iterable: The iterable to convert.

    Returns:
        An async iterable.
    """

    async def _inner() -> AsyncIterator[T]:
        for it in iterable:
            yield it

    return _inner()


@overload
def ensure_coro_fn(fn: Callable[P, CoroT[T]]) -> Callable[P, CoroT[T]]:
    ...


@overload
def ensure_coro_fn(fn: Callable[P, T]) -> Callable[P, CoroT[T]]:
    ...


def ensure_coro_fn(fn: Callable[P, T] | Callable[P, CoroT[T]]) -> Callable[P, CoroT[T]]:
    """Given a sync or async function, return an async function.

    Args:
        fn: The function to ensure is async.

    Returns:
        An async function that runs the original function.
    """

    if inspect.iscoroutinefunction(fn):
        return fn

    _sync_fn = cast(Callable[P, T], fn)

    @functools.wraps(_sync_fn)
    async def _async_fn(*args: P.args, **kwargs: P.kwargs) -> T:
        return _sync_fn(*args, **kwargs)

    return _async_fn


def ensure_async_iterator(iterable: Iterable[T] | AsyncIterable[T]) -> AsyncIterator[T]:
    """Given an iterable or async iterable, return an async iterator."""

    if isinstance(iterable, AsyncIterable):
        return aiter(iterable)

    return aiter(iter_to_aiter(iterable))


__all__ = (
    "run_sync",
    "iter_to_aiter",
    "ensure_coro_fn",
    "ensure_async_iterator",
)
