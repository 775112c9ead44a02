from __future__ import annotations

from aoc2023 import config, errors, harness, registry, solution, storage, stream, utils
from aoc2023.config import *
from aoc2023.errors import *
from aoc2023.harness import *
from aoc2023.registry import *
from aoc2023.solution import *
from aoc2023.storage import *
from aoc2023.stream import *
from aoc2023.utils import *

__all__ = (
    *config.__all__,
    *errors.__all__,
    *harness.__all__,
    *registry.__all__,
    *solution.__all__,
    *storage.__all__,
    *stream.__all__,
    *utils.__all__,
)
