"""Assertion reporting for build-time stylesheet tests."""

from truecss.session import ContextKind, OutputMode, ReportSession
from truecss.assertions.base import AssertionResult, Result
from truecss.assertions.checks import (
    assert_block,
    assert_equal,
    assert_false,
    assert_true,
    assert_unequal,
    contains,
    contains_string,
    expect,
    output,
)
from truecss.assertions.content import wrap_block, wrap_string
from truecss.assertions.evaluate import evaluate
from truecss.assertions.lifecycle import setup, strike
from truecss.errors import AssertionUsageError, EngineError, TestFailuresError
from truecss.report import report
from truecss.suite import describe, it
from truecss.values import Value, is_truthy, values_equal

__all__ = [
    "AssertionResult",
    "AssertionUsageError",
    "ContextKind",
    "EngineError",
    "OutputMode",
    "ReportSession",
    "Result",
    "TestFailuresError",
    "Value",
    "assert_block",
    "assert_equal",
    "assert_false",
    "assert_true",
    "assert_unequal",
    "contains",
    "contains_string",
    "describe",
    "evaluate",
    "expect",
    "is_truthy",
    "it",
    "output",
    "report",
    "setup",
    "strike",
    "values_equal",
    "wrap_block",
    "wrap_string",
]
