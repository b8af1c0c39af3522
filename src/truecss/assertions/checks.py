"""User-facing assertions built on the lifecycle, evaluator and formatter."""

from __future__ import annotations

from typing import Any, Callable

from truecss.assertions.base import Result
from truecss.assertions.content import wrap_block, wrap_string
from truecss.assertions.evaluate import evaluate
from truecss.assertions.lifecycle import effective_description, setup
from truecss.errors import AssertionUsageError
from truecss.session import OutputMode, ReportSession
from truecss.values import FALSE, NULL, TRUE, boolean, inspect, is_truthy, list_of, string


def assert_true(session: ReportSession, value: Any, description: str | None = None) -> Result:
    setup(session, OutputMode.ASSERT_TRUE.value, description)
    return evaluate(session, boolean(is_truthy(value)), TRUE)


def assert_false(session: ReportSession, value: Any, description: str | None = None) -> Result:
    setup(session, OutputMode.ASSERT_FALSE.value, description)
    return evaluate(session, boolean(is_truthy(value)), FALSE)


def assert_equal(
    session: ReportSession,
    actual: Any,
    expected: Any,
    description: str | None = None,
    inspect_values: bool = False,
) -> Result:
    """Pass when ``actual`` equals ``expected``.

    With ``inspect_values`` both sides are compared by their printed form,
    which makes e.g. ``1px`` and ``"1px"`` distinguishable in the report
    but equal when they print alike.
    """
    setup(session, OutputMode.ASSERT_EQUAL.value, description)
    if inspect_values:
        actual, expected = string(inspect(actual)), string(inspect(expected))
    return evaluate(session, actual, expected)


def assert_unequal(
    session: ReportSession,
    actual: Any,
    expected: Any,
    description: str | None = None,
    inspect_values: bool = False,
) -> Result:
    setup(session, OutputMode.ASSERT_UNEQUAL.value, description)
    if inspect_values:
        actual, expected = string(inspect(actual)), string(inspect(expected))
    return evaluate(session, actual, expected, invert=True)


# --- CSS output assertions ---


def _require_mode(session: ReportSession, mode: OutputMode, helper: str) -> None:
    if session.mode is not mode:
        current = getattr(session.mode, "value", session.mode) or "none"
        raise AssertionUsageError(
            f"{helper}() must be used inside a '{mode.value}' block (current: {current})"
        )


def _normalize(lines: list[str]) -> list[str]:
    return [line.strip() for line in lines if line.strip()]


def _captured_block(
    session: ReportSession,
    mode: OutputMode,
    run: Callable[[], None],
) -> None:
    start = len(session.lines)
    run()
    # Drop the start and end marker lines
    session.captures[mode] = _normalize(session.lines[start + 1 : -1])


def output(session: ReportSession, body: Callable[[], None], selector: bool = True) -> None:
    """Emit the CSS under test."""
    _require_mode(session, OutputMode.ASSERT, "output")
    _captured_block(
        session,
        OutputMode.OUTPUT,
        lambda: wrap_block(session, OutputMode.OUTPUT, body, selector=selector),
    )


def expect(session: ReportSession, body: Callable[[], None], selector: bool = True) -> None:
    """Emit the CSS the output must match exactly."""
    _require_mode(session, OutputMode.OUTPUT, "expect")
    _captured_block(
        session,
        OutputMode.EXPECT,
        lambda: wrap_block(session, OutputMode.EXPECT, body, selector=selector),
    )


def contains(session: ReportSession, body: Callable[[], None], selector: bool = True) -> None:
    """Emit CSS whose lines must all occur in the output."""
    _require_mode(session, OutputMode.OUTPUT, "contains")
    _captured_block(
        session,
        OutputMode.CONTAINS,
        lambda: wrap_block(session, OutputMode.CONTAINS, body, selector=selector),
    )


def contains_string(session: ReportSession, needle: str) -> None:
    """Require ``needle`` to occur somewhere in the output text."""
    _require_mode(session, OutputMode.OUTPUT, "contains_string")
    wrap_string(session, OutputMode.CONTAINS_STRING, needle)
    session.captures[OutputMode.CONTAINS_STRING] = [needle]


def _css_values(session: ReportSession) -> tuple[Any, Any]:
    captures = session.captures
    if OutputMode.OUTPUT not in captures:
        raise AssertionUsageError("assert_block() body must call output()")
    produced = captures[OutputMode.OUTPUT]

    if OutputMode.EXPECT in captures:
        return list_of(produced), list_of(captures[OutputMode.EXPECT])
    if OutputMode.CONTAINS in captures:
        wanted = captures[OutputMode.CONTAINS]
        return list_of([line for line in wanted if line in produced]), list_of(wanted)
    if OutputMode.CONTAINS_STRING in captures:
        needle = captures[OutputMode.CONTAINS_STRING][0]
        found = string(needle) if needle in "\n".join(produced) else NULL
        return found, string(needle)
    raise AssertionUsageError(
        "assert_block() body must call expect(), contains() or contains_string()"
    )


def assert_block(
    session: ReportSession,
    body: Callable[[], None],
    description: str | None = None,
    output_detail: bool = True,
) -> Result:
    """Compare generated CSS blocks emitted by ``body``.

    ``body`` calls :func:`output` followed by one of :func:`expect`,
    :func:`contains` or :func:`contains_string`.
    """
    description = effective_description(session, description)
    setup(session, OutputMode.ASSERT.value, description)
    session.captures = {}
    wrap_block(session, OutputMode.ASSERT, body, selector=False, description=description)

    actual, expected = _css_values(session)
    session.captures = {}
    return evaluate(session, actual, expected, output_detail=output_detail, reset_output=True)
