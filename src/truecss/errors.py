"""Exceptions raised by the assertion engine."""


class EngineError(RuntimeError):
    """Broken engine invariant (unbalanced context stack, missing collaborator).

    Fatal: counters and output produced after one of these are meaningless,
    so the run is aborted rather than reported.
    """


class AssertionUsageError(ValueError):
    """An assertion helper was called outside the block it belongs to."""


class TestFailuresError(Exception):
    """Raised by the summary report when ``fail_on_error`` is set and tests failed."""

    __test__ = False

    def __init__(self, failed: int, total: int):
        self.failed = failed
        self.total = total
        super().__init__(f"{failed} of {total} test(s) failed")
