"""Shared fixtures for unitree tests."""

import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest

from unitree.config import UnitreeSettings
from unitree.reports.base import Reporter
from unitree.testing.registry import NodeRegistry, clear_registry


class RecordingReporter(Reporter):
    """Reporter that records every notification as a tuple."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def report_suite_start(self, name, ntestcases, ntests, level):
        self.calls.append(("suite_start", name, ntestcases, ntests, level))

    def report_suite_result(self, npass, nfail, nskip, level):
        self.calls.append(("suite_result", npass, nfail, nskip, level))

    def report_test_case_start(self, name, ntests, level):
        self.calls.append(("case_start", name, ntests, level))

    def report_test_case_result(self, npass, nfail, nskip, level):
        self.calls.append(("case_result", npass, nfail, nskip, level))

    def report_test_start(self, name, level):
        self.calls.append(("test_start", name, level))

    def report_test_result(self, name, status, message, level):
        self.calls.append(("test_result", name, status, message, level))

    def report_construction_error(self, identifier, message, level):
        self.calls.append(("construction_error", identifier, message, level))

    def report_run_complete(self, result):
        self.calls.append(("run_complete", result))

    def kinds(self) -> list[str]:
        return [call[0] for call in self.calls]

    def of_kind(self, kind: str) -> list[tuple]:
        return [call for call in self.calls if call[0] == kind]


@pytest.fixture(autouse=True)
def clean_registry():
    """Clear the global registry before and after each test."""
    clear_registry()
    yield
    clear_registry()


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def registry() -> NodeRegistry:
    return NodeRegistry()


@pytest.fixture
def settings() -> UnitreeSettings:
    return UnitreeSettings()


def case_source(class_name: str, passing: int = 0, failing: int = 0, skipping: int = 0) -> str:
    """Source of a TestCase subclass with the requested number of outcomes."""
    lines = ["from unitree import TestCase, skip", "", "", f"class {class_name}(TestCase):"]
    for i in range(passing):
        lines += [f"    def test_pass_{i}(self):", "        assert True", ""]
    for i in range(failing):
        lines += [f"    def test_fail_{i}(self):", f"        assert False, 'failure {i}'", ""]
    for i in range(skipping):
        lines += [f"    def test_skip_{i}(self):", f"        skip('skipped {i}')", ""]
    if not (passing or failing or skipping):
        lines.append("    pass")
    return "\n".join(lines) + "\n"


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write ``source`` to ``tmp_path / relative`` and return the path."""

    def write(relative: str, source: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(source), encoding="utf-8")
        return path

    return write


@pytest.fixture
def write_case(write_file) -> Callable[..., Path]:
    """Write a generated TestCase module, e.g. ``write_case("math/add_ut.py", "AddUt", passing=2)``."""

    def write(relative: str, class_name: str, passing: int = 0, failing: int = 0, skipping: int = 0) -> Path:
        return write_file(relative, case_source(class_name, passing, failing, skipping))

    return write
