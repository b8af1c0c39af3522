from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class ReportConfig(BaseModel):
    """Symbols and switches used when rendering the report."""

    model_config = ConfigDict(extra="forbid")
    pass_symbol: str = "✔"
    fail_symbol: str = "✖"
    selector: str = ".test-output"
    comment_open: str = "/*"
    comment_close: str = "*/"
    indent: str = "  "
    terminal_output: bool = True
    fail_on_error: bool = False

    @field_validator("selector", "comment_open", "comment_close")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class TruthSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")
    value: Any = None
    description: str | None = None


class EqualitySpec(BaseModel):
    model_config = ConfigDict(extra="forbid")
    actual: Any = None
    expected: Any = None
    description: str | None = None
    inspect: bool = False


CSS_EXPECTATIONS = ("expect", "contains", "contains_string")


class CssSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")
    description: str | None = None
    selector: bool = True
    output: list[str]
    expect: list[str] | None = None
    contains: list[str] | None = None
    contains_string: str | None = None

    @model_validator(mode="after")
    def exactly_one_expectation(self) -> "CssSpec":
        given = [
            name
            for name in CSS_EXPECTATIONS
            if getattr(self, name) is not None
        ]
        if len(given) != 1:
            raise ValueError(
                "assert_css needs exactly one of expect, contains, contains_string"
                f" (got: {', '.join(given) or 'none'})"
            )
        return self


class AssertTrueAssertion(BaseModel):
    model_config = ConfigDict(extra="forbid")
    assert_true: TruthSpec


class AssertFalseAssertion(BaseModel):
    model_config = ConfigDict(extra="forbid")
    assert_false: TruthSpec


class AssertEqualAssertion(BaseModel):
    model_config = ConfigDict(extra="forbid")
    assert_equal: EqualitySpec


class AssertUnequalAssertion(BaseModel):
    model_config = ConfigDict(extra="forbid")
    assert_unequal: EqualitySpec


class AssertCssAssertion(BaseModel):
    model_config = ConfigDict(extra="forbid")
    assert_css: CssSpec


Assertion = (
    AssertTrueAssertion
    | AssertFalseAssertion
    | AssertEqualAssertion
    | AssertUnequalAssertion
    | AssertCssAssertion
)


class TestConfig(BaseModel):
    __test__ = False

    name: str
    assertions: list[Assertion]

    @field_validator("assertions")
    @classmethod
    def assertions_must_not_be_empty(cls, v: list) -> list:
        if not v:
            raise ValueError("assertions must not be empty")
        return v


class ModuleConfig(BaseModel):
    name: str
    tests: list[TestConfig]

    @field_validator("tests")
    @classmethod
    def tests_must_not_be_empty(cls, v: list) -> list:
        if not v:
            raise ValueError("tests must not be empty")
        return v


class SuiteConfig(BaseModel):
    settings: ReportConfig = ReportConfig()
    modules: list[ModuleConfig]

    @model_validator(mode="after")
    def modules_must_not_be_empty(self) -> SuiteConfig:
        if not self.modules:
            raise ValueError("modules must not be empty")
        return self


def load_suite(path: Path) -> SuiteConfig:
    """Load and validate a test suite from a YAML file."""
    with open(path) as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"{path} is not valid YAML: {e}") from e

    if not isinstance(raw, dict):
        raise ValueError(f"{path} does not contain a suite mapping")

    return SuiteConfig(**raw)
