from __future__ import annotations

import logging
from concurrent.futures import Executor, ProcessPoolExecutor
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from fuzzy_rank import __version__
from fuzzy_rank.exceptions import InputValidationError, RankingTimeoutError
from fuzzy_rank.models import RankingRequest, ScoredCandidate
from fuzzy_rank.reader import parse_ranking_input
from fuzzy_rank.rendering import build_results_table, render_results
from fuzzy_rank.search import rank_by_similarity
from fuzzy_rank.tui import FuzzyRankTui

__all__ = [
    "FuzzyRankTui",
    "cli",
    "create_pool",
    "run",
]

logger = logging.getLogger("fuzzy_rank")


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(f"fuzzy-rank {__version__}")
    raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def create_pool(jobs: int) -> Executor:
    return ProcessPoolExecutor(max_workers=jobs)


def _terminate_workers(pool: Executor) -> None:
    # shutdown() leaves running tasks alone and interpreter exit joins them.
    processes = getattr(pool, "_processes", None) or {}
    for process in list(processes.values()):
        process.terminate()


def _rank(
    request: RankingRequest, *, jobs: int, timeout: float | None
) -> list[ScoredCandidate]:
    if jobs <= 1 and timeout is None:
        return rank_by_similarity(request.candidates, request.query)

    pool = create_pool(jobs)
    try:
        return rank_by_similarity(
            request.candidates,
            request.query,
            pool=pool,
            timeout=timeout,
        )
    except RankingTimeoutError:
        _terminate_workers(pool)
        raise
    finally:
        pool.shutdown(wait=False, cancel_futures=True)


cli = typer.Typer(
    add_completion=False,
    help=(
        "Rank candidate strings by similarity to a query. Reads a candidate "
        "count, that many candidates and the query, whitespace-delimited."
    ),
)


@cli.callback(invoke_without_command=True)
def run(
    query: str | None = typer.Option(
        None,
        "--query",
        "-q",
        help="Search query. When given, the input holds only the count and candidates.",
    ),
    input_path: Path | None = typer.Option(
        None,
        "--input",
        exists=True,
        dir_okay=False,
        readable=True,
        help="Read input from a file instead of standard input.",
    ),
    jobs: int = typer.Option(
        1,
        "--jobs",
        "-j",
        min=1,
        envvar="FUZZY_RANK_JOBS",
        help="Worker processes used to score candidates.",
    ),
    timeout: float | None = typer.Option(
        None,
        "--timeout",
        min=0.0,
        envvar="FUZZY_RANK_TIMEOUT",
        help="Deadline in seconds for scoring the whole batch.",
    ),
    table: bool = typer.Option(
        False,
        "--table",
        help="Render the ranking as a table.",
    ),
    interactive: bool = typer.Option(
        False,
        "--interactive",
        "-i",
        help="Browse the ranking interactively. Requires --input.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log debug output to stderr.",
    ),
    _version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    _configure_logging(verbose)
    if interactive and input_path is None:
        raise typer.BadParameter(
            "--interactive reads candidates from --input", param_hint="--interactive"
        )

    if input_path is not None:
        text = input_path.read_text(encoding="utf-8")
    else:
        text = typer.get_text_stream("stdin").read()

    try:
        request = parse_ranking_input(
            text,
            query=query,
            default_query="" if interactive else None,
        )
    except InputValidationError as exc:
        typer.echo(f"Invalid input: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    if interactive:
        selected = FuzzyRankTui(
            request.candidates,
            initial_query=request.query,
        ).run()
        if selected is not None:
            typer.echo(selected)
        return

    try:
        results = _rank(request, jobs=jobs, timeout=timeout)
    except RankingTimeoutError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    if table:
        Console().print(build_results_table(results, query=request.query))
        return
    typer.echo(render_results(results), nl=False)


if __name__ == "__main__":
    cli()
