#!/usr/bin/env python3
"""
INIFOLD CLI - Fold & Unfold Explorer
------------------------------------
Command line front-end for the value folding suite. Shows how a value is
folded under a given key and boundary, and how physical lines unfold back
into a logical value.

    inifold fold "bar baz qux" --key foo --boundary 10
    inifold unfold "bar" " baz qux"

Author: IniFold Team
Date: 2026-10-19
"""

import sys
import logging
import argparse
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel

from inifold.cli.formatter import FoldFormatter
from inifold.core.config import FoldSettings, load_settings
from inifold.core.errors import IniValueError
from inifold.core.models import ValueOrigin
from inifold.folding.comment import IniComment
from inifold.folding.lines import add_to_arrays, create_arrays
from inifold.folding.value import ValueObject

VERSION = "1.0.0"

# Global console for consistent styling across the application
console = Console()


class IniFoldCLI:
    """
    CLI wrapper that translates user commands into value object actions.
    """

    def __init__(self, out: Optional[Console] = None):
        """Initializes the CLI and sets up the argument parser."""
        self.console = out or console
        self.formatter = FoldFormatter(self.console)
        self.parser = argparse.ArgumentParser(
            prog="inifold",
            description="IniFold - lossless INI value folding",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        self._setup_args()

    def _setup_args(self):
        """Configures the command-line flags and subcommands."""
        self.parser.add_argument("-v", "--version", action="version", version=f"inifold v{VERSION}")
        self.parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
        subparsers = self.parser.add_subparsers(dest="command", metavar="Command")

        # 'fold' subcommand - programmatic path
        fold_parser = subparsers.add_parser("fold", help="Fold a value under a key")
        fold_parser.add_argument("value", help="Logical value to fold")
        fold_parser.add_argument("--key", required=True, help="Key the value belongs to")
        fold_parser.add_argument("--boundary", type=int, default=None, help="Column boundary (default: 80)")
        fold_parser.add_argument("--comment", action="append", default=[], help="Comment line to attach (repeatable)")
        fold_parser.add_argument("--config", help="YAML settings file")

        # 'unfold' subcommand - file-parse path
        unfold_parser = subparsers.add_parser("unfold", help="Unfold physical lines into a value")
        unfold_parser.add_argument("lines", nargs="+", help="Physical lines, continuation lines included")
        unfold_parser.add_argument("--line", type=int, default=1, help="Source line number of the key")

    def print_header(self, subtitle: str):
        self.console.print(Panel.fit(
            f"[bold cyan]IniFold v{VERSION}[/bold cyan]",
            title=f"[bold white]{subtitle}[/bold white]",
            border_style="cyan"
        ))

    def _settings(self, args: argparse.Namespace) -> FoldSettings:
        settings = load_settings(args.config) if args.config else FoldSettings()
        if args.boundary is not None:
            if args.boundary < 0:
                self.parser.error("--boundary must not be negative")
            settings.boundary = args.boundary
        return settings

    def _run_fold(self, args: argparse.Namespace) -> int:
        settings = self._settings(args)
        comment = IniComment(args.comment) if args.comment else None
        key = args.key.encode("utf-8")

        vo = ValueObject.from_string(
            args.value,
            origin=settings.origin,
            key_len=len(key),
            boundary=settings.boundary,
            comment=comment
        )

        self.formatter.show_lines(vo, title=f"{args.key} @ boundary {settings.boundary}")
        self.formatter.show_serialized(vo.serialize(key, terminator=settings.terminator_bytes), args.key)
        vo.destroy()
        return 0

    def _run_unfold(self, args: argparse.Namespace) -> int:
        raw_lines, raw_lengths = create_arrays()
        for line in args.lines:
            add_to_arrays(line, raw_lines, raw_lengths)

        vo = ValueObject.from_lines(raw_lines, raw_lengths, args.line, origin=ValueOrigin.READ)

        self.formatter.show_lines(vo)
        self.formatter.show_value(vo)
        vo.destroy()
        return 0

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Primary routing entry point. Returns the process exit status."""
        argv = sys.argv[1:] if argv is None else argv
        if not argv:
            self.print_header("INI Value Folding")
            self.parser.print_help()
            return 0

        args = self.parser.parse_args(argv)
        logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

        try:
            if args.command == "fold":
                return self._run_fold(args)
            if args.command == "unfold":
                return self._run_unfold(args)
        except IniValueError as e:
            self.formatter.show_error(str(e))
            return 1

        self.parser.print_help()
        return 0


def main():
    """Application entry point with interrupt handling."""
    try:
        sys.exit(IniFoldCLI().run())
    except KeyboardInterrupt:
        console.print("\n[bold red]Terminated by user.[/bold red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
