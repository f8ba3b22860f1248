"""
cli.py - command line interface for the catalog autocompleter
Features:
- One-shot commands: suggest, categories, stats, contribute
- Interactive loop (repl) with live suggestions for each typed fragment
- Catalog warm-up from a JSON snapshot, config file for engine limits
- Latency metrics per session
- Uses Rich for tables and formatting
"""

import argparse
import sys
import time
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from catalog_autocompleter.catalog.loader import save_catalog
from catalog_autocompleter.core.autocompleter import AutoCompleter
from catalog_autocompleter.utils.config_manager import Config
from catalog_autocompleter.utils.logger_utils import DEFAULT_LOG_PATH, setup_logging
from catalog_autocompleter.utils.metrics_tracker import Metrics

HELP = "Commands: /quit /stats /metrics /config /reload /add <product>[|<category>]  ?<term> = categories\n"


class CLI:
    """Interactive session over one AutoCompleter and its catalog file."""

    def __init__(
        self,
        ac: AutoCompleter,
        cfg: Config,
        catalog_path: str,
        console: Optional[Console] = None,
        loaded: bool = True,
    ):
        self.ac = ac
        self.cfg = cfg
        self.catalog_path = catalog_path
        # catalog file loaded; contributions write it back, so they need this
        self.loaded = loaded
        self.console = console or Console()
        self.metrics = Metrics()
        self.running = True

    def run(self):
        """
        Main interactive loop:
        - prompts for a fragment
        - slash commands are dispatched, everything else is suggested
        """
        self.console.rule("[bold magenta]Catalog Autocompleter[/bold magenta]")
        self.console.print("[cyan]Type part of a product name to get suggestions.[/cyan]")
        self.console.print(HELP)

        while self.running:
            try:
                line = Prompt.ask("[green]Search[/green]", default="", console=self.console)
            except (EOFError, KeyboardInterrupt):
                break
            self.handle_line(line)
        self.console.rule("[red]Exiting[/red]")

    def handle_line(self, line: str) -> bool:
        """Process one line of input. Returns False once the session should end."""
        line = line.strip()
        if not line:
            return self.running
        if line.startswith("/"):
            self._handle_command(line)
        elif line.startswith("?"):
            self.show_categories(line[1:])
        else:
            self.show_suggestions(line)
        return self.running

    # COMMAND HANDLING -----------------------------------------------------------
    def _handle_command(self, cmd: str):
        name, _, arg = cmd.partition(" ")
        if name == "/quit":
            self.running = False
        elif name == "/stats":
            self.show_stats()
        elif name == "/metrics":
            self.console.print(self.metrics.table())
        elif name == "/config":
            self.cfg.show(self.console)
        elif name == "/reload":
            self.loaded = self.ac.warm_up(self.catalog_path)
            if self.loaded:
                self.console.print("[green]Catalog reloaded.[/green]")
            else:
                self.console.print("[red]Reload failed, previous index kept.[/red]")
        elif name == "/add":
            product, _, category = arg.partition("|")
            self.contribute(product, category.strip() or None)
        else:
            self.console.print(f"[red]Unknown command:[/red] {cmd}")

    # DISPLAY -------------------------------------------------------------------------------
    def show_suggestions(self, fragment: str):
        t0 = time.perf_counter()
        hits = self.ac.suggest_with_categories(fragment)
        self.metrics.record("suggest_time", time.perf_counter() - t0)

        if not hits:
            self.console.print("[dim](no suggestions)[/dim]")
            return

        table = Table(title="Suggestions", box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Term", style="bold")
        table.add_column("Categories", style="magenta")
        for i, (term, cats) in enumerate(hits, 1):
            table.add_row(str(i), term, ", ".join(cats))
        self.console.print(table)

    def show_categories(self, term: str):
        cats = sorted(self.ac.categories_for(term))
        if not cats:
            self.console.print(f"[dim](no categories for {term.strip()!r})[/dim]")
            return
        self.console.print(f"[bold]{term.strip()}[/bold] -> " + ", ".join(cats))

    def show_stats(self):
        t = Table(title="Index Stats", box=box.MINIMAL)
        t.add_column("Metric", style="cyan")
        t.add_column("Value", style="white")
        for k, v in self.ac.stats().items():
            t.add_row(k, str(v))
        self.console.print(t)

    def contribute(self, name: str, category_id: Optional[str] = None, save: bool = True) -> bool:
        if not self.loaded:
            self.console.print(
                f"[red]Cannot add product:[/red] catalog did not load ({self.catalog_path}), "
                "fix it and /reload first"
            )
            return False
        try:
            product = self.ac.contribute_product(name, category_id)
        except ValueError as e:
            self.console.print(f"[red]Cannot add product:[/red] {e}")
            return False
        if save:
            save_catalog(self.ac.catalog, self.catalog_path)
        self.console.print(
            Panel(
                f"id: {product.id}\ncategory: {product.category_id}\n"
                f"keywords: {', '.join(product.search_terms) or '(none)'}",
                title=f"Added {product.name}",
                border_style="green",
            )
        )
        return True


# ENTRY POINT ---------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="catalog-autocompleter", description="Catalog autocomplete engine")
    parser.add_argument("--catalog", help="catalog snapshot (JSON); defaults to the config value")
    parser.add_argument("--config", default="config.json", help="config file")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    parser.add_argument("--log-file", default=DEFAULT_LOG_PATH, help="log file ('' to disable)")

    sub = parser.add_subparsers(dest="command")
    p = sub.add_parser("suggest", help="ranked suggestions for a term")
    p.add_argument("term")
    p = sub.add_parser("categories", help="category ids for an exact term")
    p.add_argument("term")
    sub.add_parser("stats", help="catalog and index counts")
    p = sub.add_parser("contribute", help="add a user product")
    p.add_argument("name")
    p.add_argument("--category", default=None)
    p.add_argument("--no-save", action="store_true", help="do not write the catalog file back")
    sub.add_parser("repl", help="interactive session (default)")
    return parser


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = Config(args.config)
    setup_logging(args.log_level or cfg["log_level"], path=args.log_file or None)

    catalog_path = args.catalog or cfg["catalog_path"]
    ac = AutoCompleter.from_config(cfg)
    loaded = ac.warm_up(catalog_path)

    cli = CLI(ac, cfg, catalog_path, console=console, loaded=loaded)
    command = args.command or "repl"
    if command == "suggest":
        cli.show_suggestions(args.term)
    elif command == "categories":
        cli.show_categories(args.term)
    elif command == "stats":
        cli.show_stats()
    elif command == "contribute":
        return 0 if cli.contribute(args.name, args.category, save=not args.no_save) else 1
    else:
        cli.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
