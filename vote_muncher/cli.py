"""
cli.py - command line vote counter
Features:
- Reads a log, tallies "vote => <name>" lines with typo-tolerant matching
- Consolidates spelling variants into canonical names
- Prints a ranked table with Rich (or plain "name: votes" lines)
- Records elapsed times and tree stats through Log
- Optional JSON export of the results
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

# ui styling with Rich
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from vote_muncher.pipeline import VoteMuncher
from vote_muncher.utils.config_manager import Config
from vote_muncher.utils.logger_utils import Log

# initialise console for rich output
console = Console()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vote-muncher",
        description="Count votes in a log, merging misspelled names",
    )
    parser.add_argument("logfile", type=str, help="Path to the log (one entry per line)")
    parser.add_argument("--config", type=str, default=None, help="JSON config file")
    parser.add_argument("--noise", type=str, default=None, help="Alphabet to strip (latin, cyrillic, none)")
    parser.add_argument("--primary", type=str, default=None, help="Alphabet names are written in")
    parser.add_argument("--online-radius", type=int, default=None, help="Edit radius while streaming")
    parser.add_argument("--consolidate-radius", type=int, default=None, help="Edit radius for consolidation")
    parser.add_argument("--top", type=int, default=None, help="Show only the N best (0 = all)")
    parser.add_argument("--plain", action="store_true", help="Plain 'name: votes' output")
    parser.add_argument("--export", type=str, default=None, help="Write results as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def load_config(args: argparse.Namespace) -> Config:
    """Config file first, then command line overrides."""
    cfg = Config(args.config)
    overrides = {
        "noise_alphabet": args.noise,
        "primary_alphabet": args.primary,
        "online_max_distance": args.online_radius,
        "consolidate_max_distance": args.consolidate_radius,
        "top": args.top,
    }
    for key, val in overrides.items():
        if val is not None:
            cfg.set(key, val)
    return cfg


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


# DISPLAY ---------------------------------------------------------------------
def render_table(rows: List[Tuple[str, int]], total: int) -> Table:
    table = Table(title="Votes", box=box.SIMPLE_HEAVY, show_footer=True)
    table.add_column("#", justify="right", style="dim", footer="")
    table.add_column("Name", style="cyan", footer="Total")
    table.add_column("Votes", justify="right", style="bold green", footer=str(total))
    for i, (name, votes) in enumerate(rows, 1):
        table.add_row(str(i), Text(name), str(votes))
    return table


def print_results(rows: List[Tuple[str, int]], total: int, elapsed: float, plain: bool = False) -> None:
    if plain:
        for name, votes in rows:
            console.print(f"{name}: {votes}", markup=False, highlight=False)
        console.print(f"\nTotal votes: {total}", highlight=False)
        console.print(f"Elapsed: {elapsed:.2f}s", highlight=False)
        return
    console.print(render_table(rows, total))
    console.print(f"[dim]Elapsed: {elapsed:.2f}s[/dim]")


def export_results(path: str, muncher: VoteMuncher, elapsed: float) -> None:
    data = {
        "results": [{"name": n, "votes": v} for n, v in muncher.results()],
        "total_votes": muncher.total_votes,
        "matched_lines": muncher.matched,
        "skipped_lines": muncher.skipped,
        "elapsed_seconds": round(elapsed, 3),
    }
    with open(path, "w", encoding="utf8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        cfg = load_config(args)
        muncher = VoteMuncher.from_config(cfg)
    except ValueError as e:
        console.print(f"[red]Config error:[/red] {e}")
        return 2

    log = Log(path=cfg["log_path"], level="DEBUG" if args.verbose else "INFO", echo=args.verbose)

    if not Path(args.logfile).is_file():
        console.print(f"[red]Log not found:[/red] {args.logfile}")
        log.error(f"log not found: {args.logfile}")
        return 1

    with log.time_block("total") as total_timer:
        with log.time_block("ingest"):
            muncher.process_file(args.logfile)
        with log.time_block("consolidate"):
            rows = muncher.results(top=cfg["top"])

    tree = muncher.ledger.tree
    log.info(f"{args.logfile}: {muncher.matched} votes, {muncher.skipped} other lines")
    log.metric("tree size", len(tree))
    log.metric("tree depth", tree.depth())
    log.metric("participants", len(muncher.consolidate()))

    print_results(rows, muncher.total_votes, total_timer.elapsed, plain=args.plain)

    if args.export:
        export_results(args.export, muncher, total_timer.elapsed)
        console.print(f"exported -> {args.export}", highlight=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
