"""Module and test scopes that group assertions in the report."""

from __future__ import annotations

from typing import Callable

from truecss.errors import EngineError
from truecss.session import ContextKind, ReportSession


def _pop_expected(session: ReportSession, kind: ContextKind, label: str) -> None:
    frame = session.context_pop()
    if frame.kind is not kind or frame.label != label:
        raise EngineError(
            f"Unbalanced context stack: expected to close {kind.value} '{label}', "
            f"found {frame.kind.value} '{frame.label}'"
        )


def describe(session: ReportSession, name: str, body: Callable[[], None]) -> None:
    """Run ``body`` as a named module of tests."""
    session.context(ContextKind.MODULE, name)
    heading = f"# Module: {name}"
    session.message(heading, "comment")
    session.message("-" * len(heading), "comment")
    session.message(f"Module: {name}", "debug")

    body()

    session.update_stats_count("modules")
    _pop_expected(session, ContextKind.MODULE, name)


def it(session: ReportSession, name: str, body: Callable[[], None]) -> None:
    """Run ``body`` as a single named test."""
    depth = len(session.stack)
    session.context(ContextKind.TEST, name)
    record = session.stack[-1].record
    session.message(f"Test: {name}", "comment")

    body()

    if len(session.stack) != depth + 1:
        raise EngineError(
            f"Test '{name}' left {len(session.stack) - depth - 1} unclosed frame(s)"
        )

    session.update_stats_count("tests")
    if record.passed:
        session.update_stats_count("passed")
    else:
        session.update_stats_count("failed")
    session.message("", "comment")
    _pop_expected(session, ContextKind.TEST, name)
