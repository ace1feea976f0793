"""Console reporter for unitree test output using Rich."""

from __future__ import annotations

import sys

from rich.console import Console
from rich.markup import escape

from unitree.reports.base import Reporter
from unitree.testing.models import RunResult, TestStatus


_STATUS_CONFIG: dict[TestStatus, tuple[str, str, str]] = {
    TestStatus.PASSED: ("✓", "green", "passed"),
    TestStatus.FAILED: ("✗", "red", "failed"),
    TestStatus.SKIPPED: ("-", "yellow", "skipped"),
}

INDENT = "  "


class ConsoleReporter(Reporter):
    """Reporter that prints the test tree to the console using Rich formatting.

    Verbosity below zero hides passing and skipped tests; failures, suite
    headers and the summary are always printed.
    """

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        self.console = console or Console(file=sys.__stdout__)
        self.verbosity = verbosity

    def _status_symbol(self, status: TestStatus) -> str:
        return _STATUS_CONFIG[status][0]

    def _status_color(self, status: TestStatus) -> str:
        return _STATUS_CONFIG[status][1]

    def _status_label(self, status: TestStatus) -> str:
        return _STATUS_CONFIG[status][2]

    def _indent(self, level: int) -> str:
        return INDENT * level

    def _print_section_header(self, title: str) -> None:
        width = self.console.width
        header_title = f" {title} "
        fill = max(width - len(header_title), 0)
        left = fill // 2
        right = fill - left
        self.console.print("=" * left + header_title + "=" * right)

    def _format_counts(self, npass: int, nfail: int, nskip: int) -> str:
        parts = []
        if npass:
            parts.append(f"[green]{npass} passed[/green]")
        if nfail:
            parts.append(f"[red]{nfail} failed[/red]")
        if nskip:
            parts.append(f"[yellow]{nskip} skipped[/yellow]")
        return ", ".join(parts) if parts else "[dim]0 tests[/dim]"

    def _print_result_line(self, npass: int, nfail: int, nskip: int, level: int) -> None:
        total = npass + nfail + nskip
        self.console.print(
            f"{self._indent(level)}[dim]Results:[/dim] {npass} / {total} tests passed, "
            f"{nskip} skipped"
        )

    def report_suite_start(self, name: str, ntestcases: int, ntests: int, level: int) -> None:
        self.console.print(
            f"{self._indent(level)}[bold]{escape(name)}[/bold] "
            f"[dim]suite: {ntestcases} test cases, {ntests} tests[/dim]"
        )

    def report_suite_result(self, npass: int, nfail: int, nskip: int, level: int) -> None:
        self._print_result_line(npass, nfail, nskip, level)

    def report_test_case_start(self, name: str, ntests: int, level: int) -> None:
        self.console.print(f"{self._indent(level)}• [bold]{escape(name)}[/bold] [dim]({ntests} tests)[/dim]")

    def report_test_case_result(self, npass: int, nfail: int, nskip: int, level: int) -> None:
        if self.verbosity < 0 and not nfail:
            return
        self._print_result_line(npass, nfail, nskip, level + 1)

    def report_test_start(self, name: str, level: int) -> None:
        """Tests are printed as a single line once their result is known."""

    def report_test_result(self, name: str, status: TestStatus, message: str, level: int) -> None:
        if self.verbosity < 0 and not status.is_failure:
            return
        color = self._status_color(status)
        symbol = f"[{color}]{self._status_symbol(status)}[/{color}]"
        label = f"[{color}]{self._status_label(status)}[/{color}]"
        line = f"{self._indent(level + 1)}{symbol} {escape(name)}: {label}"
        if message:
            line += f' [dim]"{escape(message)}"[/dim]'
        self.console.print(line)

    def report_construction_error(self, identifier: str, message: str, level: int) -> None:
        self.console.print(
            f"{self._indent(level)}[yellow]! Error building {escape(identifier)}: {escape(message)}[/yellow]"
        )

    def report_run_complete(self, result: RunResult) -> None:
        self.console.print()
        self._print_section_header("SUMMARY")
        summary = self._format_counts(result.npass, result.nfail, result.nskip)
        self.console.print(
            f"[bold]{summary}[/bold] out of {result.ntests} tests",
            justify="center",
        )
        if result.construction_errors:
            self.console.print(
                f"[yellow]{result.construction_errors} test type(s) could not be built[/yellow]",
                justify="center",
            )
        self.console.print("=" * self.console.width)
