from __future__ import annotations

import time
from datetime import timedelta
from typing import Any, Iterable

from loguru import logger
from rich.console import Console
from rich.markup import escape

from .config import HarnessConfig
from .protocols.type_aliases import AnswerT, PartFn
from .solution import Solution, SolveResult
from .storage import Storage
from .utils import ensure_coro_fn

RULE = "=" * 20


def format_report(results: Iterable[SolveResult[Any]]) -> str:
    """Render results in the layout of the `output/<day>.txt` report file."""
    chunks = []
    for result in results:
        if result.succeeded:
            header = f"Part {result.part} (time: {result.seconds} s)"
            body = str(result.output)
        else:
            header = f"Part {result.part} (failed after {result.seconds} s)"
            body = f"{type(result.error).__name__}: {result.error}"
        chunks.append(f"{header}\n{RULE}\n{body}\n{RULE}\n\n")
    return "".join(chunks)


class Harness:
    """Runs solutions: reads the input, times both parts, reports and writes the results.

    Args:
        config: Where inputs and reports live.
        storage: Where files are read from and written to. Defaults to the files below
            `config.base_dir`.
        console: Where the report is printed. Defaults to a new `rich` console on stdout.
    """

    def __init__(
        self,
        config: HarnessConfig | None = None,
        storage: Storage | None = None,
        console: Console | None = None,
    ) -> None:
        self.config = config if config is not None else HarnessConfig()
        self.storage = storage if storage is not None else self.config.storage()
        self.console = console if console is not None else Console()

    def read_input(self, day: int) -> str:
        return self.storage.read_text(self.config.input_path(day))

    def write_output(self, day: int, results: Iterable[SolveResult[Any]]) -> None:
        self.storage.write_text(self.config.output_path(day), format_report(results))

    async def timed_execute(
        self,
        part: int,
        fn: PartFn[AnswerT],
        puzzle: str,
    ) -> SolveResult[AnswerT]:
        """Run one part and time it.

        Only the call itself is timed. An exception raised by the part is kept in the result
        instead of propagating, so the other part and the other days still run.
        """
        _fn = ensure_coro_fn(fn)

        start = time.perf_counter()
        try:
            output = await _fn(puzzle)
        except Exception as e:
            elapsed = timedelta(seconds=time.perf_counter() - start)
            logger.exception(f"Part {part} raised after {elapsed.total_seconds()} s")
            return SolveResult(part=part, elapsed=elapsed, error=e)
        elapsed = timedelta(seconds=time.perf_counter() - start)

        logger.info(f"Part {part} finished in {elapsed.total_seconds()} s")
        return SolveResult(part=part, elapsed=elapsed, output=output)

    async def execute(self, solution: Solution[AnswerT]) -> list[SolveResult[AnswerT]]:
        """Read the day's input, run both parts, print the report and write the report file.

        Returns:
            The results of part 1 and part 2, or an empty list if the input could not be read.
        """
        day = solution.day
        self.console.print(f"Executing solution for day {day}... ", end="")

        results: list[SolveResult[AnswerT]] = []
        try:
            puzzle = self.read_input(day)
        except (OSError, UnicodeDecodeError) as why:
            logger.warning(f"Could not read input file for day {day}: {why}")
            self.console.print(
                "[red]❌ Failed.[/] "
                f"[bright_black]Could not read input file: {escape(str(why))}[/]"
            )
        else:
            results.append(await self.timed_execute(1, solution.part_1, puzzle))
            results.append(await self.timed_execute(2, solution.part_2, puzzle))

            failed = [r for r in results if not r.succeeded]
            if failed:
                self.console.print(
                    "[red]❌ Failed.[/] "
                    f"[bright_black]{len(failed)} of {len(results)} parts raised an error.[/]"
                )
            else:
                self.console.print("[green]✅ Passed.[/]")

        self.print_results(results)

        try:
            self.write_output(day, results)
        except OSError as why:
            logger.warning(f"Could not write output file for day {day}: {why}")
            self.console.print(
                "[yellow]❗ Warning.[/] "
                f"[bright_black]Could not write output file: {escape(str(why))}[/]"
            )

        return results

    async def execute_many(
        self, solutions: Iterable[Solution[Any]]
    ) -> dict[int, list[SolveResult[Any]]]:
        """Execute several days one after another."""
        return {solution.day: await self.execute(solution) for solution in solutions}

    def print_results(self, results: Iterable[SolveResult[Any]]) -> None:
        for result in results:
            if result.succeeded:
                self.console.print(f"Part {result.part} ran for {result.seconds} s.")
                self.console.print("[bright_black]====== Output ======[/]")
                self.console.print(str(result.output), markup=False, highlight=False)
            else:
                self.console.print(
                    f"[red]Part {result.part} failed after {result.seconds} s.[/]"
                )
                self.console.print("[bright_black]====== Error =======[/]")
                self.console.print(
                    f"{type(result.error).__name__}: {result.error}",
                    markup=False,
                    highlight=False,
                )
            self.console.print(f"[bright_black]{RULE}[/]\n")


__all__ = (
    "RULE",
    "format_report",
    "Harness",
)
