"""Summary block written at the end of a run."""

from __future__ import annotations

from truecss.errors import TestFailuresError
from truecss.session import ReportSession

_RULE = "-" * 10


def summary_lines(session: ReportSession) -> list[str]:
    stats = session.stats
    passed = sum(1 for t in session.tests if t.passed)
    failed = len(session.tests) - passed

    return [
        f"# SUMMARY {_RULE}",
        f"{len(session.tests)} Tests:",
        f" - {passed} Passed",
        f" - {failed} Failed",
        "Stats:",
        f" - {stats['modules']} Modules",
        f" - {stats['tests']} Tests",
        f" - {stats['assertions']} Assertions",
        _RULE * 2,
    ]


def report(
    session: ReportSession,
    terminal: bool | None = None,
    fail_on_error: bool | None = None,
) -> list[str]:
    """Emit the summary as comments and optionally to the terminal.

    Raises TestFailuresError when ``fail_on_error`` is set (explicitly or in
    the session config) and any test failed.
    """
    if terminal is None:
        terminal = session.config.terminal_output
    if fail_on_error is None:
        fail_on_error = session.config.fail_on_error

    lines = summary_lines(session)
    for line in lines:
        session.message(line, "comment")
    if terminal:
        session.logger.info("\n".join(lines))

    failed = [t for t in session.tests if not t.passed]
    if fail_on_error and failed:
        raise TestFailuresError(len(failed), len(session.tests))
    return lines
