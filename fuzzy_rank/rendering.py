from __future__ import annotations

from collections.abc import Iterable

from rich.markup import escape
from rich.table import Table
from rich.text import Text

from fuzzy_rank.models import ScoredCandidate


def format_result_line(result: ScoredCandidate) -> str:
    return f"{result.candidate}\t{result.score}"


def render_results(results: Iterable[ScoredCandidate]) -> str:
    lines = [format_result_line(result) for result in results]
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def build_results_table(results: Iterable[ScoredCandidate], *, query: str) -> Table:
    table = Table(title=f"Matches for {escape(query)}" if query else "Matches")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Candidate")
    table.add_column("Score", justify="right", style="bold")
    for rank, result in enumerate(results, start=1):
        table.add_row(str(rank), escape(result.candidate), str(result.score))
    return table


def score_column_width(results: Iterable[ScoredCandidate]) -> int:
    return max((len(str(result.score)) for result in results), default=1)


def format_option_label(result: ScoredCandidate, score_width: int) -> Text:
    label = Text()
    label.append(f"{result.score:>{score_width}}", style="bold red")
    label.append("  ")
    label.append(result.candidate)
    return label
