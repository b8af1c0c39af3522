"""Assertion system: lifecycle, result evaluation and block formatting."""

from truecss.assertions.base import AssertionResult, Result

__all__ = ["AssertionResult", "Result"]
