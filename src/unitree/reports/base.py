"""Reporter interface driven by the test tree."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from unitree.testing.models import RunResult, TestStatus


class Reporter(ABC):
    """Output sink for structured notifications from suites and cases.

    A reporter has no knowledge of the tree. It receives start/result pairs in
    depth-first order and uses ``level`` for indentation.
    """

    @abstractmethod
    def report_suite_start(self, name: str, ntestcases: int, ntests: int, level: int) -> None: ...

    @abstractmethod
    def report_suite_result(self, npass: int, nfail: int, nskip: int, level: int) -> None: ...

    @abstractmethod
    def report_test_case_start(self, name: str, ntests: int, level: int) -> None: ...

    @abstractmethod
    def report_test_case_result(self, npass: int, nfail: int, nskip: int, level: int) -> None: ...

    @abstractmethod
    def report_test_start(self, name: str, level: int) -> None: ...

    @abstractmethod
    def report_test_result(self, name: str, status: TestStatus, message: str, level: int) -> None: ...

    def report_construction_error(self, identifier: str, message: str, level: int) -> None:
        """Called when a child test type could not be built."""

    def report_run_complete(self, result: RunResult) -> None:
        """Called once after the root suite has run."""
