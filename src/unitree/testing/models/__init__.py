from .result import RunResult, TestOutcome, TestStatus


__all__ = [
    "RunResult",
    "TestOutcome",
    "TestStatus",
]
