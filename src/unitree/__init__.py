"""Unitree - hierarchical unit-test organizer and runner."""

from .config import UnitreeSettings, get_settings
from .errors import ConstructionError, ReloadError, UnitreeError
from .testing import (
    FailTest,
    Runner,
    RunResult,
    SkipTest,
    Suite,
    TestCase,
    TestNode,
    TestStatus,
    fail,
    register,
    run,
    skip,
)
from .reports import ConsoleReporter, Reporter
from .version import __version__


__all__ = [
    # Core testing
    "Suite",
    "TestCase",
    "TestNode",
    "TestStatus",
    "Runner",
    "RunResult",
    "run",
    "register",
    # Outcomes
    "skip",
    "fail",
    "SkipTest",
    "FailTest",
    # Reporting
    "Reporter",
    "ConsoleReporter",
    # Configuration and errors
    "UnitreeSettings",
    "get_settings",
    "UnitreeError",
    "ConstructionError",
    "ReloadError",
]
