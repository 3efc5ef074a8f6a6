from __future__ import annotations

from collections.abc import Iterable

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Input, OptionList, Static

from fuzzy_rank.models import ScoredCandidate
from fuzzy_rank.rendering import format_option_label, score_column_width
from fuzzy_rank.search import rank_by_similarity


class FuzzyRankTui(App[str | None]):
    CSS = """
    #sidebar {
        border: round $accent;
    }
    #results-list {
        height: 1fr;
    }
    #status {
        height: auto;
        color: $text-muted;
    }
    """
    ENABLE_COMMAND_PALETTE = False
    BINDINGS = [
        Binding("escape", "cancel", "Quit"),
        Binding("ctrl+c", "cancel", show=False),
    ]

    def __init__(
        self,
        candidates: Iterable[str],
        *,
        initial_query: str = "",
    ) -> None:
        super().__init__()
        self.theme = "rose-pine"
        self._candidates: list[str] = list(candidates)
        self._search_query = initial_query
        self._results: list[ScoredCandidate] = []

    def compose(self) -> ComposeResult:
        with Vertical(id="sidebar"):
            yield Static("Candidates", id="sidebar-title")
            yield Input(
                value=self._search_query,
                placeholder="Type a query...",
                id="query-input",
            )
            yield OptionList(id="results-list")
            yield Static("", id="status")

    def on_mount(self) -> None:
        self._refresh_results()
        self.query_one("#query-input", Input).focus()

    def _refresh_results(self) -> None:
        self._results = rank_by_similarity(self._candidates, self._search_query)
        self._render_result_options()
        self._update_status()

    def _render_result_options(self) -> None:
        results_list = self.query_one("#results-list", OptionList)
        results_list.clear_options()
        if not self._results:
            results_list.add_option("No candidates loaded")
            return
        score_width = score_column_width(self._results)
        results_list.add_options(
            format_option_label(result, score_width) for result in self._results
        )
        results_list.action_first()

    def _status_text(self) -> Text:
        status = Text()
        status.append(f"{len(self._results)} candidates ranked")
        if self._search_query:
            status.append(" for ")
            status.append(self._search_query, style="bold white")
        status.append(". Enter selects, ")
        status.append("esc", style="bold red")
        status.append(" quits.")
        return status

    def _update_status(self) -> None:
        self.query_one("#status", Static).update(self._status_text())

    def on_input_changed(self, event: Input.Changed) -> None:
        self._search_query = event.value
        self._refresh_results()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        del event
        self._select_result(self.query_one("#results-list", OptionList).highlighted)

    def on_option_list_option_selected(
        self, event: OptionList.OptionSelected
    ) -> None:
        self._select_result(event.option_index)

    def _select_result(self, index: int | None) -> None:
        if index is None or not 0 <= index < len(self._results):
            return
        self.exit(self._results[index].candidate)

    def action_cancel(self) -> None:
        self.exit(None)
