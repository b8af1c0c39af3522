"""Opening and closing assertion scopes on the session's context stack."""

from __future__ import annotations

from truecss.assertions.base import Result
from truecss.errors import EngineError
from truecss.session import ContextKind, ReportSession


def effective_description(session: ReportSession, description: str | None) -> str:
    """The explicit description, else the label of the enclosing test."""
    return description or session.context(ContextKind.TEST) or ""


def setup(session: ReportSession, name: str, description: str | None = None) -> str:
    """Push an assertion frame labelled ``[name] description`` and return the label."""
    description = effective_description(session, description)
    label = f"[{name}] {description}".rstrip()
    session.context(ContextKind.ASSERT, label)
    session.logger.debug(f"Assertion started: {label} (depth {len(session.stack)})")
    return label


def strike(session: ReportSession, result: Result, reset_output: bool = False) -> None:
    """Close the innermost assertion: record, count, pop, optionally reset output."""
    if not session.stack:
        raise EngineError("strike() called with an empty context stack")
    frame = session.stack[-1]
    if frame.kind is not ContextKind.ASSERT:
        raise EngineError(
            f"strike() called without a matching setup(): innermost frame is "
            f"{frame.kind.value} '{frame.label}'"
        )

    session.update_test(result)
    session.update_stats_count("assertions")
    session.context_pop()
    if reset_output:
        session.output_context(None)

    session.logger.debug(f"Assertion finished: {frame.label} -> {result.value}")
