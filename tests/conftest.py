from __future__ import annotations

import io
import sys
from pathlib import Path
from typing import Iterator

import pytest
from loguru import logger
from rich.console import Console

from aoc2023.config import HarnessConfig
from aoc2023.harness import Harness
from aoc2023.storage import MemoryStorage

PART_1_EXAMPLE = """\
1abc2
pqr3stu8vwx
a1b2c3d4e5f
treb7uchet
"""

PART_2_EXAMPLE = """\
two1nine
eightwothree
abcone2threexyz
xtwone3four
4nineeightseven2
zoneight234
7pqrstsixteen
"""


@pytest.fixture(autouse=True)
def reset_logger() -> Iterator[None]:
    """The CLI swaps loguru's sinks; put the default one back after every test."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def console_file() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(console_file: io.StringIO) -> Console:
    return Console(file=console_file, width=200, color_system=None)


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def config() -> HarnessConfig:
    return HarnessConfig(base_dir=Path("puzzles"))


@pytest.fixture
def harness(config: HarnessConfig, storage: MemoryStorage, console: Console) -> Harness:
    return Harness(config, storage=storage, console=console)
