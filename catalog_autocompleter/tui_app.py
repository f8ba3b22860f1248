# tui_app.py - Catalog Autocompleter TUI Application
# -------------------------------------------------------
# Text based terminal UI over the AutoCompleter facade.
# Features:
#  - Live suggestions as you type
#  - Up/Down moves the cursor, Enter picks it, TAB picks the top suggestion
#  - A picked term shows its category ids
#  - Latency readout for the last suggest() call
#  - Ctrl+R reloads the catalog snapshot
# -------------------------------------------------------

from __future__ import annotations

import argparse
import time
from typing import List, Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.reactive import reactive
from textual.widgets import Footer, Header, Input, Static

from catalog_autocompleter.core.autocompleter import AutoCompleter
from catalog_autocompleter.utils.config_manager import Config
from catalog_autocompleter.utils.logger_utils import setup_logging


class SuggestionPanel(Static):
    """
    Right-side suggestion panel, best first.
    The row under the cursor is marked with ▶.
    """

    def update_suggestions(self, suggestions: List[str], cursor: int = 0) -> None:
        if not suggestions:
            self.update("[dim]No suggestions[/dim]")
            return
        lines = []
        for i, term in enumerate(suggestions):
            if i == cursor:
                lines.append(f"[b]▶ [green]{term}[/green][/b]")
            else:
                lines.append(f"  [cyan]{term}[/cyan]")
        self.update("\n".join(lines))


class CategoryView(Static):
    """Categories of the last picked term."""

    def show(self, term: str, categories: List[str]) -> None:
        if not categories:
            self.update(f"[dim]No categories for[/dim] {term}")
            return
        self.update(f"[b]{term}[/b] → " + ", ".join(categories))


class TypingLatency(Static):
    """Bottom-left readout showing how long the last suggest() took."""

    def set_latency(self, seconds: float) -> None:
        self.update(f"[dim]Latency:[/dim] {seconds * 1000:.2f}ms")


# Main Application -----------------------------------------------------------------
class TUIAutocompleter(App):
    """
    Architecture:
     - UI events to AutoCompleter
     - AutoCompleter results to reactive state
     - reactive state to UI updates
    """

    CSS_PATH = "tui_style.css"
    TITLE = "Catalog Autocompleter"

    BINDINGS = [
        # priority: otherwise the screen's focus-next binding takes TAB
        Binding("tab", "pick_top", "Pick top", priority=True),
        Binding("down", "cursor(1)", "Next", show=False),
        Binding("up", "cursor(-1)", "Previous", show=False),
        Binding("ctrl+r", "reload", "Reload catalog"),
    ]

    suggestions = reactive(list, init=False)  # most recent suggest() result
    cursor = reactive(0, init=False)  # highlighted suggestion
    latency = reactive(0.0, init=False)  # seconds spent in the last suggest()

    def __init__(self, ac: AutoCompleter, catalog_path: Optional[str] = None):
        super().__init__()
        self.ac = ac
        self.catalog_path = catalog_path
        self.picked: Optional[str] = None

    # UI --------------------------------------------------------------------
    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal():
            with Container(id="left"):
                yield Input(placeholder="Start typing a product…", id="text_input")
                yield CategoryView(id="categories")
            with Container(id="right"):
                yield SuggestionPanel(id="suggestions")
        with Horizontal(id="bottom"):
            yield TypingLatency(id="latency")
            yield Static(id="status")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one(SuggestionPanel).update_suggestions([])
        self.query_one(Input).focus()
        self.query_one("#status", Static).update(f"[dim]{len(self.ac.store.current())} terms indexed[/dim]")

    async def on_input_changed(self, event: Input.Changed) -> None:
        """Re-run suggest() every time the text changes."""
        start = time.perf_counter()
        hits = self.ac.suggest(event.value)
        self.latency = time.perf_counter() - start
        self.cursor = 0
        self.suggestions = hits

    async def on_input_submitted(self, event: Input.Submitted) -> None:
        if self.suggestions:
            self.pick(self.suggestions[self.cursor])

    # Reactive state (watchers) ---------------------------------------
    def watch_suggestions(self, suggestions: List[str]) -> None:
        self._refresh_panel()

    def watch_cursor(self, cursor: int) -> None:
        self._refresh_panel()

    def watch_latency(self, latency: float) -> None:
        self.query_one(TypingLatency).set_latency(latency)

    def _refresh_panel(self) -> None:
        self.query_one(SuggestionPanel).update_suggestions(self.suggestions, self.cursor)

    # Actions ----------------------------------------------------------------------
    def action_pick_top(self) -> None:
        if self.suggestions:
            self.pick(self.suggestions[0])

    def action_cursor(self, step: int) -> None:
        if self.suggestions:
            self.cursor = (self.cursor + step) % len(self.suggestions)

    def action_reload(self) -> None:
        if not self.catalog_path:
            return
        ok = self.ac.warm_up(self.catalog_path)
        status = "[green]Catalog reloaded[/green]" if ok else "[red]Reload failed[/red]"
        self.query_one("#status", Static).update(status)

    def pick(self, term: str) -> None:
        """Show the categories of `term` and put it in the input box."""
        self.picked = term
        self.query_one(CategoryView).show(term, sorted(self.ac.categories_for(term)))
        self.query_one(Input).value = term


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="catalog-autocompleter-tui")
    parser.add_argument("--catalog", default=None)
    parser.add_argument("--config", default="config.json")
    args = parser.parse_args(argv)

    cfg = Config(args.config)
    # console logging would draw over the UI
    setup_logging(cfg["log_level"], console=False)
    catalog_path = args.catalog or cfg["catalog_path"]
    ac = AutoCompleter.from_config(cfg)
    ac.warm_up(catalog_path)
    TUIAutocompleter(ac, catalog_path).run()


if __name__ == "__main__":
    main()
