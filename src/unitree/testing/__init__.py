"""Hierarchical test tree: suites, cases, discovery and execution.

Provides convention-based discovery of ``*_ut`` cases and ``*_uts`` suites.
"""

from .case import TestCase
from .models import RunResult, TestOutcome, TestStatus
from .node import NodeProperty, TestNode, canonical_name
from .outcomes import FailTest, SkipTest, fail, skip
from .registry import NodeRegistry, clear_registry, get_registry, register
from .runner import Runner, run
from .suite import Suite


__all__ = [
    "FailTest",
    "NodeProperty",
    "NodeRegistry",
    "RunResult",
    "Runner",
    "SkipTest",
    "Suite",
    "TestCase",
    "TestNode",
    "TestOutcome",
    "TestStatus",
    "canonical_name",
    "clear_registry",
    "fail",
    "get_registry",
    "register",
    "run",
    "skip",
]
