"""Command-line interface for unitree."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from .config import UnitreeSettings
from .reports.console import ConsoleReporter
from .testing.runner import Runner


def configure_logging(console: Console, verbosity: int) -> None:
    """Route log records through Rich: WARNING by default, INFO with -v, DEBUG with -vv."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = RichHandler(console=console, show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    root = logging.getLogger("unitree")
    root.handlers[:] = [handler]
    root.setLevel(level)


class CLIApplication:
    """Top-level command: build the test tree, run it, print results."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()
        self.parser = argparse.ArgumentParser(
            prog="unitree",
            description="Discover and run a tree of *_ut test cases and *_uts suites.",
        )
        self.parser.add_argument(
            "tests",
            nargs="*",
            help="Directories, test files, or test identifiers (name or name:test_method). "
            "Discovers from --home when omitted.",
        )
        self.parser.add_argument(
            "--home",
            default=None,
            help="Root directory for discovery and identifier lookup (default: current directory)",
        )
        self.parser.add_argument(
            "--failures-only",
            dest="failures_only",
            action="store_true",
            default=None,
            help="Only print the branches of the tree that contain failures.",
        )
        self.parser.add_argument(
            "--no-reload",
            dest="reload",
            action="store_false",
            default=None,
            help="Do not reload test definitions from disk before building them.",
        )
        self.parser.add_argument(
            "-v",
            "--verbose",
            action="count",
            default=0,
            help="Increase log output (-vv for debug).",
        )
        self.parser.add_argument(
            "-q",
            "--quiet",
            action="store_true",
            help="Hide passing and skipped tests.",
        )

    def build_settings(self, args: argparse.Namespace) -> UnitreeSettings:
        overrides = {}
        if args.reload is not None:
            overrides["reload"] = args.reload
        if args.failures_only is not None:
            overrides["failures_only"] = args.failures_only
        return UnitreeSettings(**overrides)

    def run(self, argv: Sequence[str] | None = None) -> int:
        load_dotenv(Path.cwd() / ".env")
        args = self.parser.parse_args(argv)
        configure_logging(self.console, args.verbose)

        try:
            settings = self.build_settings(args)
        except ValidationError as e:
            self.console.print(f"[red]Invalid configuration:[/red]\n{e}")
            return 2

        reporter = ConsoleReporter(self.console, verbosity=-1 if args.quiet else 0)
        runner = Runner(reporter, settings=settings)
        result = runner.run(args.tests, home=args.home)
        return 0 if result.passed else 1


def main(argv: Sequence[str] | None = None) -> None:
    sys.exit(CLIApplication().run(argv))


if __name__ == "__main__":
    main()
