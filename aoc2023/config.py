from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

from .storage import FileStorage

BASE_DIR_ENV_VAR = "AOC_BASE_DIR"


@dataclass(frozen=True)
class HarnessConfig:
    """Where the harness looks for puzzle inputs and puts reports.

    `base_dir` is resolved once, when the config is built, instead of being read from the
    process working directory at every file access.
    """

    base_dir: Path = field(default_factory=Path.cwd)
    input_dir: str = "input"
    output_dir: str = "output"

    def input_path(self, day: int) -> PurePosixPath:
        return PurePosixPath(self.input_dir, f"{day}.txt")

    def output_path(self, day: int) -> PurePosixPath:
        return PurePosixPath(self.output_dir, f"{day}.txt")

    def storage(self) -> FileStorage:
        return FileStorage(self.base_dir)


__all__ = (
    "BASE_DIR_ENV_VAR",
    "HarnessConfig",
)
