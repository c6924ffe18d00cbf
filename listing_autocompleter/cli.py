"""
cli.py - command line front end for the listing autocompleter
Features:
- Builds the vocabulary from the configured listing exports on start-up
- One-shot mode (--prefix) prints matches one per line and exits
- Interactive prompt: type a prefix, get completions; slash commands for settings
- Uses Rich for the prompt and the stats table
"""

from __future__ import annotations
import argparse
import shlex
import sys
from typing import List, Optional

# ui styling with Rich
from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table
from rich import box

from listing_autocompleter import __version__
from listing_autocompleter.autocompleter import AutoCompleter
from listing_autocompleter.core.trie import ORDERS
from listing_autocompleter.ingest.sources import DEFAULT_DATA_DIR, UnknownSourceError, resolve_sources
from listing_autocompleter.utils.config_manager import Config
from listing_autocompleter.utils.logger_utils import log

HELP = (
    "Type a prefix to list completions, or just Enter for every word.\n"
    "Commands: /order <alpha|frequency>  /limit <n|none>  /counts  /stats  /help  /quit"
)


class CLI:
    """Interactive prompt over a built AutoCompleter."""

    def __init__(self, ac: AutoCompleter, console: Optional[Console] = None, show_counts: bool = False):
        self.ac = ac
        self.console = console or Console()
        self.show_counts = show_counts
        self.running = True

    def run(self):
        """
        Main loop: prompt for a prefix, print completions.
        Ends on /quit, EOF or Ctrl-C.
        """
        self.console.rule("[bold magenta]Listing Autocompleter[/bold magenta]")
        self.console.print(f"[cyan]{len(self.ac.index)} words indexed.[/cyan] {HELP}\n")

        while self.running:
            try:
                line = Prompt.ask("[green]Enter a prefix[/green]", console=self.console, default="")
            except (EOFError, KeyboardInterrupt):
                self.console.print("\nbye.")
                break
            self.handle(line)

    # COMMAND HANDLING -----------------------------------------------------------
    def handle(self, line: str):
        # an empty line lists the whole vocabulary
        line = line.strip()
        if line.startswith("/"):
            self._command(line)
            return
        self.show_suggestions(line)

    def _command(self, line: str):
        try:
            p = shlex.split(line)
        except ValueError as e:
            self.console.print(f"[red]bad command:[/red] {e}")
            return
        c = p[0].lower()

        if c in ("/q", "/quit", "/exit"):
            self.running = False
            self.console.print("bye.")
            return

        if c == "/help":
            self.console.print(HELP)
            return

        if c == "/order" and len(p) > 1:
            try:
                self.ac.set_order(p[1])
            except ValueError:
                self.console.print(f"[red]order must be one of:[/red] {', '.join(ORDERS)}")
                return
            self.console.print(f"order = {self.ac.order}")
            return

        if c == "/limit" and len(p) > 1:
            if p[1].lower() == "none":
                self.ac.set_limit(None)
            elif p[1].isdigit():
                self.ac.set_limit(int(p[1]))
            else:
                self.console.print("[red]usage:[/red] /limit <n|none>")
                return
            self.console.print(f"limit = {self.ac.limit or 'none'}")
            return

        if c == "/counts":
            self.show_counts = not self.show_counts
            self.console.print(f"counts {'on' if self.show_counts else 'off'}")
            return

        if c == "/stats":
            self._show_stats()
            return

        self.console.print(f"[red]Unknown command:[/red] {line}")

    # DISPLAY -------------------------------------------------------------------------------
    def show_suggestions(self, prefix: str):
        matches = self.ac.suggest_with_counts(prefix)
        if not matches:
            self.console.print("[dim](no suggestions)[/dim]")
            return
        self.console.print("Suggestions:")
        print_matches(self.console, matches, self.show_counts)

    def _show_stats(self):
        st = self.ac.stats()
        table = Table(title="Vocabulary", box=box.SIMPLE)
        table.add_column("stat", style="cyan")
        table.add_column("value", justify="right")
        for key in ("words", "insertions", "nodes", "order", "limit"):
            table.add_row(key, str(st[key]))
        for key, m in st["metrics"].items():
            table.add_row(f"{key} (avg ms)", f"{m['avg'] * 1000:.3f}")
        self.console.print(table)


def print_matches(console: Console, matches, show_counts: bool = False):
    for word, freq in matches:
        text = f"{word}\t{freq}" if show_counts else word
        console.print(text, markup=False, highlight=False, soft_wrap=True)


# ENTRY POINT ---------------------------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="listing-autocomplete",
        description="Prefix completion over words harvested from listing exports.",
    )
    ap.add_argument("--config", default="config.json", help="JSON config file (created with defaults if missing)")
    ap.add_argument("--data-dir", help="folder holding the preset source files")
    ap.add_argument(
        "--source",
        action="append",
        default=[],
        metavar="NAME[=PATH]",
        help="preset source to read, optionally from another path (repeatable)",
    )
    ap.add_argument("--order", choices=ORDERS, help="result ordering")
    ap.add_argument("--limit", type=int, help="max completions shown (0 = all)")
    ap.add_argument("--parallel", action="store_true", help="read sources concurrently")
    ap.add_argument("--counts", action="store_true", help="print insert counts next to words")
    ap.add_argument("--prefix", help="print completions for PREFIX and exit")
    ap.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    ap.add_argument("-v", "--verbose", action="store_true", help="echo log lines to stderr")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = Config(args.config)

    log.set_level(args.log_level or cfg.get("log_level", "INFO"))
    log.echo = args.verbose

    data_dir = args.data_dir or cfg.get("data_dir") or DEFAULT_DATA_DIR
    try:
        specs = resolve_sources(args.source or cfg.get("sources") or [], data_dir=data_dir)
    except (UnknownSourceError, ValueError, TypeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    order = args.order or cfg.get("order", "alpha")
    limit = args.limit if args.limit is not None else cfg.limit
    ac = AutoCompleter(order=order, limit=limit)
    report = ac.build(specs, parallel=args.parallel or bool(cfg.get("parallel_ingest")))
    for name in report.failed:
        print(f"warning: source {name} could not be read (see log)", file=sys.stderr)

    console = Console()
    if args.prefix is not None:
        print_matches(console, ac.suggest_with_counts(args.prefix), args.counts)
        return 0

    CLI(ac, console=console, show_counts=args.counts).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
