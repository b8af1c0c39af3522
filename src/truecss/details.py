"""Pass/fail detail rendering for finished assertions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from truecss.session import ContextKind
from truecss.values import ListSeparator, Value, ValueKind, inspect, type_of

if TYPE_CHECKING:
    from truecss.session import ReportSession


def mismatch_detail(actual: Any, expected: Any) -> str | None:
    """Explain why two values that print alike may still differ."""
    actual = Value.coerce(actual)
    expected = Value.coerce(expected)

    if actual.kind is not expected.kind:
        return (
            "variable types do not match"
            f" (expected {type_of(expected)}, got {type_of(actual)})"
        )
    if actual.kind is ValueKind.NUMBER and actual.unit != expected.unit:
        return (
            "numbers have different units"
            f" (expected '{expected.unit}', got '{actual.unit}')"
        )
    if (
        actual.kind is ValueKind.LIST
        and len(actual.data) > 1
        and len(expected.data) > 1
        and actual.separator is not expected.separator
    ):
        sep = {ListSeparator.COMMA: "comma", ListSeparator.SPACE: "space"}
        return (
            "list separators do not match"
            f" (expected {sep[expected.separator]}, got {sep[actual.separator]})"
        )
    if actual.kind is ValueKind.LIST and len(actual.data) != len(expected.data):
        return (
            "list lengths do not match"
            f" (expected {len(expected.data)}, got {len(actual.data)})"
        )
    return None


class DetailRenderer:
    """Writes the per-assertion verdict lines into the report."""

    def pass_details(self, session: ReportSession) -> None:
        label = session.context(ContextKind.ASSERT)
        session.message(f"{session.config.pass_symbol} {label}", "comment")
        session.message(f"PASSED: {label}", "debug")

    def fail_details(
        self,
        session: ReportSession,
        actual: Any,
        expected: Any,
        show_detail: bool = True,
        unequal: bool = False,
    ) -> None:
        label = session.context(ContextKind.ASSERT)
        expected_text = inspect(expected)
        if unequal:
            expected_text = f"not {expected_text}"
        actual_text = inspect(actual)

        lines = [f"{session.config.fail_symbol} FAILED: {label}"]
        if show_detail:
            lines.append(f"- Expected: {expected_text}")
            lines.append(f"- Actual: {actual_text}")
            detail = None if unequal else mismatch_detail(actual, expected)
            if detail:
                lines.append(f"- Details: {detail}")
        module = session.context(ContextKind.MODULE)
        if module:
            lines.append(f"- Module: {module}")
        test = session.context(ContextKind.TEST)
        if test:
            lines.append(f"- Test: {test}")

        for line in lines:
            session.message(line, "comment")
        session.message(" ".join(lines), "warn")

        session.failure_summary = f"Expected: {expected_text}, Actual: {actual_text}"
