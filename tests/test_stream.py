from __future__ import annotations

import operator

import pytest

from aoc2023.stream import Stream, lines
from aoc2023.utils import ensure_coro_fn, run_sync


@pytest.mark.asyncio
async def test_stream() -> None:
    expected = iter(range(10))
    async for i in Stream(range(10)):
        assert i == next(expected)

    assert next(expected, None) is None


@pytest.mark.asyncio
async def test_stream_map() -> None:
    expected = iter(map(lambda x: x * 2, range(10)))
    async for i in Stream(range(10)) / (lambda x: x * 2):
        assert i == next(expected)

    assert next(expected, None) is None


@pytest.mark.asyncio
async def test_stream_map_async_fn() -> None:
    async def _double(x: int) -> int:
        return x * 2

    assert await (Stream(range(5)) / _double).reduce(operator.add) == 20


def test_stream_map_rejects_non_callables() -> None:
    with pytest.raises(TypeError):
        Stream(range(3)) / 3  # type: ignore[operator]


@pytest.mark.asyncio
async def test_reduce() -> None:
    assert await Stream(range(10)).reduce(operator.add) == 45
    assert await Stream(["a", "b", "c"]).reduce(operator.add, "") == "abc"


@pytest.mark.asyncio
async def test_reduce_empty() -> None:
    assert await Stream([]).reduce(operator.add, 0) == 0
    with pytest.raises(ValueError):
        await Stream([]).reduce(operator.add)


@pytest.mark.asyncio
async def test_lines() -> None:
    collected = [line async for line in lines("a\nb\r\n\nc\n")]
    assert collected == ["a", "b", "", "c"]


def test_run_sync() -> None:
    async def _add(a: int, b: int) -> int:
        return a + b

    assert run_sync(_add)(1, 2) == 3
    assert run_sync(ensure_coro_fn(operator.mul))(3, 4) == 12
