"""Start/end comment markers around blocks of generated output."""

from __future__ import annotations

from typing import Callable

from truecss.assertions.lifecycle import effective_description
from truecss.session import OutputMode, ReportSession

ASSERT_MARKER = "ASSERT"

_MARKERS = {
    "assert": ASSERT_MARKER,
    "output": "OUTPUT",
    "expect": "EXPECTED",
    "contains": "CONTAINED",
    "contains-string": "CONTAINS_STRING",
}


def marker_for(block_type: OutputMode | str) -> str:
    name = getattr(block_type, "value", block_type)
    return _MARKERS.get(name, name.upper().replace("-", "_"))


def start_marker(
    session: ReportSession, block_type: OutputMode | str, description: str | None = None
) -> str:
    """Return the start marker text for a block.

    The generic ASSERT block always carries a description (falling back to
    the current test); other blocks only when one is given.
    """
    marker = marker_for(block_type)
    if description or marker == ASSERT_MARKER:
        return f"{marker}: {effective_description(session, description)}"
    return marker


def wrap_block(
    session: ReportSession,
    block_type: OutputMode | str,
    body: Callable[[], None],
    selector: bool = True,
    description: str | None = None,
) -> None:
    """Emit ``body`` between start and end markers.

    With ``selector`` the body is nested in the configured container rule.
    """
    session.output_context(block_type)
    marker = marker_for(block_type)

    session.message(start_marker(session, block_type, description), "comment")
    if selector:
        session.emit(f"{session.config.selector} {{")
        session.depth += 1
        try:
            body()
        finally:
            session.depth -= 1
        session.emit("}")
    else:
        body()
    session.message(f"END_{marker}", "comment")


def wrap_string(
    session: ReportSession,
    block_type: OutputMode | str,
    needle: str,
    description: str | None = None,
) -> None:
    """Emit ``needle`` as a comment line between start and end markers."""
    session.output_context(block_type)
    marker = marker_for(block_type)

    session.message(start_marker(session, block_type, description), "comment")
    session.message(needle, "comment")
    session.message(f"END_{marker}", "comment")
