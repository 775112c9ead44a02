from __future__ import annotations

from pathlib import Path, PurePosixPath

import pytest

from aoc2023.config import HarnessConfig
from aoc2023.storage import FileStorage, MemoryStorage, Storage


def test_config_paths() -> None:
    config = HarnessConfig(base_dir=Path("/puzzles"))

    assert config.input_path(1) == PurePosixPath("input/1.txt")
    assert config.output_path(12) == PurePosixPath("output/12.txt")
    assert config.storage().base_dir == Path("/puzzles")


def test_config_defaults_to_working_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    assert HarnessConfig().base_dir.resolve() == tmp_path.resolve()


@pytest.mark.parametrize("storage", (FileStorage(Path(".")), MemoryStorage()))
def test_implements_protocol(storage: Storage) -> None:
    assert isinstance(storage, Storage)


def test_file_storage(tmp_path: Path) -> None:
    storage = FileStorage(tmp_path)
    path = PurePosixPath("output/1.txt")

    storage.write_text(path, "a much longer first report\n")
    storage.write_text(path, "short\n")

    assert (tmp_path / "output" / "1.txt").read_text() == "short\n"
    assert storage.read_text(path) == "short\n"


def test_file_storage_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        FileStorage(tmp_path).read_text(PurePosixPath("input/1.txt"))


def test_memory_storage() -> None:
    storage = MemoryStorage({"input/1.txt": "1abc2"})

    assert storage.read_text(PurePosixPath("input/1.txt")) == "1abc2"
    assert "input/1.txt" in storage
    assert "output/1.txt" not in storage

    storage.write_text(PurePosixPath("output/1.txt"), "report")
    assert storage["output/1.txt"] == "report"

    with pytest.raises(FileNotFoundError, match="input/2.txt"):
        storage.read_text(PurePosixPath("input/2.txt"))
