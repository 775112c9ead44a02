from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Protocol, runtime_checkable


@runtime_checkable
class Storage(Protocol):
    """Reads and writes text files addressed by paths relative to some base."""

    def read_text(self, path: PurePosixPath) -> str:
        ...

    def write_text(self, path: PurePosixPath, text: str) -> None:
        ...


class FileStorage:
    """UTF-8 text files on disk, below `base_dir`."""

    def __init__(self, base_dir: Path) -> None:
        self.base_dir = base_dir

    def resolve(self, path: PurePosixPath) -> Path:
        return self.base_dir.joinpath(*path.parts)

    def read_text(self, path: PurePosixPath) -> str:
        return self.resolve(path).read_text(encoding="utf-8")

    def write_text(self, path: PurePosixPath, text: str) -> None:
        target = self.resolve(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        # Opening with "w" truncates, so a previous report never survives a shorter one.
        with target.open("w", encoding="utf-8") as f:
            f.write(text)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.base_dir)!r})"


class MemoryStorage:
    """A dict of path to text, standing in for the filesystem."""

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self.files: dict[PurePosixPath, str] = {
            PurePosixPath(p): text for p, text in (files or {}).items()
        }

    def read_text(self, path: PurePosixPath) -> str:
        try:
            return self.files[PurePosixPath(path)]
        except KeyError:
            raise FileNotFoundError(f"No such file: '{path}'") from None

    def write_text(self, path: PurePosixPath, text: str) -> None:
        self.files[PurePosixPath(path)] = text

    def __getitem__(self, path: str) -> str:
        """Lookup by plain string path, for assertions in tests."""
        return self.files[PurePosixPath(path)]

    def __contains__(self, path: object) -> bool:
        """Membership by plain string path, for assertions in tests."""
        return isinstance(path, (str, PurePosixPath)) and PurePosixPath(path) in self.files


__all__ = (
    "Storage",
    "FileStorage",
    "MemoryStorage",
)
