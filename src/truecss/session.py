"""Shared state of one evaluation run: context stack, output mode, counters, text."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from truecss.assertions.base import AssertionResult, Result
from truecss.config import ReportConfig
from truecss.errors import EngineError
from truecss.values import values_equal

if TYPE_CHECKING:
    from truecss.details import DetailRenderer


class ContextKind(str, Enum):
    MODULE = "module"
    TEST = "test"
    ASSERT = "assert"


class OutputMode(str, Enum):
    ASSERT = "assert"
    OUTPUT = "output"
    EXPECT = "expect"
    CONTAINS = "contains"
    CONTAINS_STRING = "contains-string"
    ASSERT_TRUE = "assert-true"
    ASSERT_FALSE = "assert-false"
    ASSERT_EQUAL = "assert-equal"
    ASSERT_UNEQUAL = "assert-unequal"


_KNOWN_MODES = {mode.value: mode for mode in OutputMode}


@dataclass
class TestRecord:
    """Assertion outcomes collected for one test."""

    __test__ = False

    name: str
    module: str | None = None
    assertions: list[AssertionResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(a.passed for a in self.assertions)


@dataclass
class ContextFrame:
    kind: ContextKind
    label: str
    record: TestRecord | None = None


LOOSE_TEST_NAME = "(no test)"


class ReportSession:
    """Single mutable store for one run.

    Every assertion operation receives the session explicitly; nothing is
    kept in module globals, so independent sessions can coexist in one
    process.
    """

    def __init__(
        self,
        config: ReportConfig | None = None,
        renderer: DetailRenderer | None = None,
        logger: logging.Logger | None = None,
    ):
        if renderer is None:
            from truecss.details import DetailRenderer

            renderer = DetailRenderer()

        self.config = config or ReportConfig()
        self.renderer = renderer
        self.logger = logger or logging.getLogger("truecss")
        self.stack: list[ContextFrame] = []
        self.mode: OutputMode | str | None = None
        self.stats: Counter[str] = Counter()
        self.tests: list[TestRecord] = []
        self.lines: list[str] = []
        self.captures: dict[OutputMode, list[str]] = {}
        self.failure_summary: str = ""
        self.depth = 0

    # -- output mode -------------------------------------------------------

    def output_context(self, mode: OutputMode | str | None) -> None:
        """Set the current output mode.

        Known modes are stored as ``OutputMode``; other block types are kept
        as given.
        """
        if mode is None:
            self.mode = None
            return
        self.mode = _KNOWN_MODES.get(getattr(mode, "value", mode), mode)

    # -- context stack -----------------------------------------------------

    def context(self, kind: ContextKind | str, label: str | None = None) -> str | None:
        """Push a frame of ``kind`` when ``label`` is given.

        Without a label, return the label of the innermost frame of that
        kind, or ``None`` when there is none.
        """
        kind = ContextKind(kind)
        if label is None:
            frame = self._innermost(kind)
            return frame.label if frame else None

        record = None
        if kind is ContextKind.TEST:
            record = TestRecord(name=label, module=self.context(ContextKind.MODULE))
            self.tests.append(record)
        self.stack.append(ContextFrame(kind, label, record))
        return label

    def context_pop(self) -> ContextFrame:
        if not self.stack:
            raise EngineError("Cannot pop the context stack: it is empty")
        return self.stack.pop()

    def _innermost(self, kind: ContextKind) -> ContextFrame | None:
        for frame in reversed(self.stack):
            if frame.kind is kind:
                return frame
        return None

    def current_test(self) -> TestRecord:
        frame = self._innermost(ContextKind.TEST)
        if frame is not None and frame.record is not None:
            return frame.record

        # Assertions made outside any test share one record
        for record in self.tests:
            if record.name == LOOSE_TEST_NAME and record.module is None:
                return record
        record = TestRecord(name=LOOSE_TEST_NAME)
        self.tests.append(record)
        return record

    # -- results and counters ----------------------------------------------

    def get_result(self, actual: Any, expected: Any, invert: bool = False) -> Result:
        equal = values_equal(actual, expected)
        return Result.PASS if equal != invert else Result.FAIL

    def update_test(self, result: Result) -> None:
        """Record ``result`` for the innermost assertion against its test."""
        if not self.stack or self.stack[-1].kind is not ContextKind.ASSERT:
            raise EngineError("No open assertion to record a result for")

        passed = result is Result.PASS
        self.current_test().assertions.append(
            AssertionResult(
                name=self.stack[-1].label,
                passed=passed,
                message="" if passed else self.failure_summary,
            )
        )
        self.failure_summary = ""

    def update_stats_count(self, name: str) -> None:
        self.stats[name] += 1

    # -- text output -------------------------------------------------------

    def emit(self, text: str) -> None:
        """Append a raw line of generated CSS at the current nesting depth."""
        self.lines.append(f"{self.config.indent * self.depth}{text}")

    def message(self, text: str, category: str = "comment") -> None:
        """Emit a line of report text.

        ``comment`` lines go into the generated CSS; ``debug`` and ``warn``
        go to the terminal logger when terminal output is enabled.
        """
        if category == "comment":
            close = self.config.comment_close
            # A closing delimiter inside the text would end the comment early
            text = text.replace(close, f"{close[:-1]}\\{close[-1]}")
            self.emit(f"{self.config.comment_open} {text} {close}")
        elif category == "debug":
            if self.config.terminal_output:
                self.logger.debug(text)
        elif category == "warn":
            if self.config.terminal_output:
                self.logger.warning(text)
        else:
            raise ValueError(f"Unknown message category: '{category}'")

    def getvalue(self) -> str:
        return "\n".join(self.lines) + "\n" if self.lines else ""
