"""Tests for the user-facing assertion helpers."""

import pytest

from truecss.assertions.base import Result
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
from truecss.errors import AssertionUsageError
from truecss.session import ContextKind
from truecss.values import number, string


@pytest.fixture
def in_test(session):
    session.context(ContextKind.TEST, "my test")
    return session


# --- value assertions ---


def test_assert_true(in_test):
    assert assert_true(in_test, [0]) is Result.PASS
    assert assert_true(in_test, []) is Result.FAIL
    labels = [a.name for a in in_test.tests[0].assertions]
    assert labels == ["[assert-true] my test", "[assert-true] my test"]


def test_assert_false(in_test):
    assert assert_false(in_test, "") is Result.PASS
    assert assert_false(in_test, "0", "zero string") is Result.FAIL
    assert in_test.tests[0].assertions[1].name == "[assert-false] zero string"


def test_assert_equal(in_test):
    assert assert_equal(in_test, 5, 5) is Result.PASS
    assert assert_equal(in_test, 5, 6, "off by one") is Result.FAIL
    assert in_test.stats["assertions"] == 2


def test_assert_equal_inspect_compares_printed_form(in_test):
    assert assert_equal(in_test, number(1, "px"), string("1px", quoted=False)) is Result.FAIL
    assert (
        assert_equal(
            in_test, number(1, "px"), string("1px", quoted=False), inspect_values=True
        )
        is Result.PASS
    )


def test_assert_unequal(in_test):
    assert assert_unequal(in_test, 1, 2) is Result.PASS
    assert assert_unequal(in_test, 1, 1) is Result.FAIL


def test_value_assertions_leave_stack_balanced(in_test):
    assert_true(in_test, True)
    assert_equal(in_test, [1], [2])
    assert len(in_test.stack) == 1


# --- CSS block assertions ---


def test_assert_block_expect_pass(in_test, emit):
    def body():
        output(in_test, emit("color: red;"))
        expect(in_test, emit("color: red;"))

    result = assert_block(in_test, body, "basic add")

    assert result is Result.PASS
    assert in_test.lines == [
        "/* ASSERT: basic add */",
        "/* OUTPUT */",
        ".test-output {",
        "  color: red;",
        "}",
        "/* END_OUTPUT */",
        "/* EXPECTED */",
        ".test-output {",
        "  color: red;",
        "}",
        "/* END_EXPECTED */",
        "/* END_ASSERT */",
        "/* ✔ [assert] basic add */",
    ]
    assert in_test.mode is None
    assert len(in_test.stack) == 1


def test_assert_block_description_defaults_to_test(in_test, emit):
    def body():
        output(in_test, emit("a: b;"))
        expect(in_test, emit("a: b;"))

    assert_block(in_test, body)
    assert in_test.lines[0] == "/* ASSERT: my test */"
    assert in_test.tests[0].assertions[0].name == "[assert] my test"


def test_assert_block_expect_ignores_indentation(in_test, emit):
    def body():
        output(in_test, emit("color: red;"))
        expect(in_test, emit("   color: red;   ", ""))

    assert assert_block(in_test, body) is Result.PASS


def test_assert_block_expect_fail(in_test, emit):
    def body():
        output(in_test, emit("color: red;"))
        expect(in_test, emit("color: blue;"))

    assert assert_block(in_test, body, "wrong color") is Result.FAIL
    assert "/* ✖ FAILED: [assert] wrong color */" in in_test.lines
    assert in_test.mode is None


def test_assert_block_contains(in_test, emit):
    def passing():
        output(in_test, emit("color: red;", "margin: 0;"))
        contains(in_test, emit("margin: 0;"))

    def failing():
        output(in_test, emit("color: red;"))
        contains(in_test, emit("margin: 0;"))

    assert assert_block(in_test, passing) is Result.PASS
    assert assert_block(in_test, failing) is Result.FAIL
    assert any(line.startswith("/* CONTAINED") for line in in_test.lines)


def test_assert_block_contains_string(in_test, emit):
    def passing():
        output(in_test, emit("color: red;"))
        contains_string(in_test, "color: red;")

    def failing():
        output(in_test, emit("color: red;"))
        contains_string(in_test, "color: blue;")

    assert assert_block(in_test, passing) is Result.PASS
    assert assert_block(in_test, failing) is Result.FAIL
    assert "/* - Actual: null */" in in_test.lines


def test_contains_string_never_wraps_in_selector(in_test, emit):
    def body():
        output(in_test, emit("color: red;"), selector=False)
        contains_string(in_test, "color: red;")

    assert_block(in_test, body, "string")
    start = in_test.lines.index("/* CONTAINS_STRING */")
    assert in_test.lines[start : start + 3] == [
        "/* CONTAINS_STRING */",
        "/* color: red; */",
        "/* END_CONTAINS_STRING */",
    ]


def test_output_outside_assert_block_is_usage_error(in_test, emit):
    with pytest.raises(AssertionUsageError, match="output"):
        output(in_test, emit("a: b;"))


def test_expect_before_output_is_usage_error(in_test, emit):
    def body():
        expect(in_test, emit("a: b;"))

    with pytest.raises(AssertionUsageError, match="expect"):
        assert_block(in_test, body)


def test_assert_block_without_expectation_is_usage_error(in_test, emit):
    def body():
        output(in_test, emit("a: b;"))

    with pytest.raises(AssertionUsageError, match="expect"):
        assert_block(in_test, body)


def test_assert_block_without_output_is_usage_error(in_test):
    with pytest.raises(AssertionUsageError, match="output"):
        assert_block(in_test, lambda: None)
