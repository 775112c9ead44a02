import sys
from pathlib import Path
from typing import Annotated, List, Optional

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape

from . import days as _days  # noqa: F401  (registers the solutions)
from .banner import print_header
from .config import BASE_DIR_ENV_VAR, HarnessConfig
from .errors import UnknownDayError
from .harness import Harness
from .registry import get_solution, registered_days
from .utils import run_sync

app = typer.Typer(help="Run Advent of Code 2023 solutions.", no_args_is_help=True)


def configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log timings and tracebacks to stderr.")
    ] = False,
) -> None:
    configure_logging(verbose)


@app.command("run")
def run(
    days: Annotated[
        Optional[List[int]],
        typer.Argument(help="Days to run. Runs every registered day when omitted.", show_default=False),
    ] = None,
    base_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--base-dir",
            envvar=BASE_DIR_ENV_VAR,
            file_okay=False,
            help="Directory holding `input/` and `output/`. Defaults to the working directory.",
        ),
    ] = None,
    header: Annotated[bool, typer.Option("--header/--no-header", help="Print the banner.")] = True,
) -> None:
    """Run solutions, print their reports and write them to `output/<day>.txt`."""
    console = Console()

    try:
        solutions = [get_solution(day) for day in (days or registered_days())]
    except UnknownDayError as e:
        console.print(f"[red]❌ {escape(str(e))}.[/] Registered days: {escape(str(registered_days()))}")
        raise typer.Exit(code=2)

    if base_dir is None:
        try:
            base_dir = Path.cwd()
        except OSError as e:
            logger.error(f"Cannot determine the working directory: {e}")
            console.print(f"[red]❌ Cannot determine the working directory:[/] {escape(str(e))}")
            raise typer.Exit(code=1)

    harness = Harness(HarnessConfig(base_dir=base_dir), console=console)
    logger.debug(f"Running days {[s.day for s in solutions]} from {harness.storage!r}")

    if header:
        print_header(console)

    with logger.catch(reraise=True):
        run_sync(harness.execute_many)(solutions)


@app.command("list")
def list_days() -> None:
    """List the registered days."""
    console = Console()
    for day in registered_days():
        solution = get_solution(day)
        console.print(f"Day {day}: {solution.title or type(solution).__name__}")
