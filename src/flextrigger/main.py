from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from flextrigger.config import AppConfig
from flextrigger.context.detector import TriggerDetector
from flextrigger.context.match import TriggerMatch
from flextrigger.snippets import SnippetFileError


console = Console()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Config file (default: ~/.config/flextrigger/flextrigger.json).",
    )
    common.add_argument(
        "-s",
        "--snippets",
        type=Path,
        default=None,
        help="Snippet JSON file; overrides the config.",
    )
    common.add_argument(
        "--max-trigger-length",
        type=int,
        default=None,
        help="Longest trigger considered.",
    )
    common.add_argument(
        "--ignore-case",
        action="store_true",
        help="Match triggers case-insensitively.",
    )
    common.add_argument(
        "--log-level",
        default=None,
        help="Logging level (DEBUG, INFO, WARNING, ...).",
    )

    parser = argparse.ArgumentParser(
        prog="flextrigger",
        description="Trigger detection for text expansion.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    scan = sub.add_parser("scan", parents=[common], help="Classify the text before the cursor.")
    scan.add_argument("text", help="Text of the editable surface.")
    scan.add_argument(
        "-c",
        "--cursor",
        type=int,
        default=None,
        help="Cursor offset (default: end of text).",
    )

    sub.add_parser("stats", parents=[common], help="Show catalog statistics.")
    sub.add_parser("tui", parents=[common], help="Open the interactive expander.")

    return parser


def load_config(args: argparse.Namespace) -> AppConfig:
    """Merge the config file, ``FLEXTRIGGER_*`` variables and CLI flags."""
    config = AppConfig.load(args.config).apply_env(os.environ)
    if args.snippets is not None:
        config.snippets_path = args.snippets
    if args.max_trigger_length is not None:
        config.max_trigger_length = args.max_trigger_length
    if args.ignore_case:
        config.case_sensitive = False
    if args.log_level:
        config.log_level = args.log_level.upper()
    return config


def render_match(result: TriggerMatch) -> Table:
    table = Table(show_header=False, box=None)
    table.add_column(style="bold")
    table.add_column()
    table.add_row("state", result.state.value)
    table.add_row("is_match", str(result.is_match))
    if result.potential_trigger is not None:
        table.add_row("potential_trigger", result.potential_trigger)
    if result.possible_completions:
        table.add_row("possible_completions", ", ".join(result.possible_completions))
    if result.is_match:
        table.add_row("trigger", result.trigger)
        table.add_row("content", str(result.content))
        table.add_row("match_end", str(result.match_end))
    return table


def render_stats(detector: TriggerDetector) -> Table:
    table = Table(show_header=False, box=None)
    table.add_column(style="bold")
    table.add_column()
    for key, value in detector.stats().items():
        table.add_row(key, str(value))
    return table


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args)
        logging.basicConfig(level=config.log_level, format=LOG_FORMAT)
        detector = config.detector()
    except (SnippetFileError, ValueError) as exc:
        raise SystemExit(f"flextrigger: {exc}")

    if args.command == "scan":
        console.print(render_match(detector.scan(args.text, args.cursor)))
    elif args.command == "stats":
        console.print(render_stats(detector))
    elif args.command == "tui":
        from flextrigger.window import ExpanderApp

        ExpanderApp(detector=detector).run()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
