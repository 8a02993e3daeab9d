#!/usr/bin/env python3
"""
jisho-cli - look up a term, English or Japanese, on jisho.org.

Usage:
  jisho-cli [options] <term>
  jisho-cli [options] -i [<term>]
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Optional, Sequence

from . import __version__
from .config import LOGGING, load_config
from .console import COLOR_CHOICES, StatusLine, setup_console, should_use_color
from .errors import JishoError
from .lookup import JishoClient
from .rendering import Painter, print_entries, render_json

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jisho-cli",
        description="Look up a term, English or Japanese, on jisho.org.",
    )
    parser.add_argument("term", nargs="?", help="Term to look up")
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="If set, the application executes interactively. Faster when looking up multiple terms.",
    )
    parser.add_argument(
        "-c",
        "--color",
        choices=COLOR_CHOICES,
        default="auto",
        help="Enables or disables color output. 'auto' (default) enables coloring for TTYs.",
    )
    parser.add_argument(
        "-r",
        "--reverse",
        action="store_true",
        help="Show results top to bottom.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the parsed entries as JSON instead of formatted text.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _enable_line_editing() -> None:
    # Importing readline gives input() history and line editing where available.
    try:
        import readline  # noqa: F401
    except ImportError:
        logger.debug("readline is not available; line editing disabled")


def run(
    client: JishoClient,
    args: argparse.Namespace,
    *,
    color: bool,
    read_input: Callable[[str], str] = input,
) -> int:
    """Look up terms until the input runs out. Returns the exit status."""
    paint = Painter(color)
    status = StatusLine(sys.stdout)
    pending: Optional[str] = args.term
    failed = False

    while True:
        if pending is not None:
            raw_term, pending = pending, None
        else:
            try:
                raw_term = read_input(paint("Search term: ", "light_yellow"))
            except (EOFError, KeyboardInterrupt):
                print()
                break

        term = raw_term.strip()
        if not term:
            break

        status.show(paint("Searching...", "yellow"))
        try:
            entries = client.look_up(term)
        except JishoError as e:
            status.clear()
            logger.debug("Lookup for %r failed", term, exc_info=True)
            print("An error occurred fetching the results.", file=sys.stderr)
            print(e, file=sys.stderr)
            failed = True
        else:
            status.clear()
            if args.json:
                print(render_json(entries))
            else:
                print_entries(
                    entries,
                    top_to_bottom=args.reverse,
                    color=color,
                    base_url=client.config.base_url,
                )

        if not args.interactive:
            break

    return 1 if failed and not args.interactive else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.interactive and not args.term:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=LOGGING['verbose_level'] if args.verbose else LOGGING['level'],
        format=LOGGING['format'],
    )
    setup_console()

    try:
        config = load_config()
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    color = should_use_color(args.color, sys.stdout)
    if args.interactive:
        _enable_line_editing()

    with JishoClient(config) as client:
        return run(client, args, color=color)


if __name__ == "__main__":
    sys.exit(main())
