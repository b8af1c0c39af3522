"""Base data structures for the assertion system."""

from dataclasses import dataclass
from enum import Enum


class Result(str, Enum):
    PASS = "pass"
    FAIL = "fail"


@dataclass
class AssertionResult:
    """Recorded outcome of a single assertion.

    Attributes:
        name: Assertion label (e.g. "[assert-equal] adds numbers").
        passed: Whether the assertion passed.
        message: One-line failure summary; empty for passing assertions.
    """

    name: str
    passed: bool
    message: str = ""
