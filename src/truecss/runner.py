from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel

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
from truecss.config import CssSpec, ModuleConfig, SuiteConfig, TestConfig
from truecss.report import report
from truecss.reporting.junit import write_junit
from truecss.session import ReportSession
from truecss.suite import describe, it
from truecss.verbose import setup_logger


def _declarations(session: ReportSession, lines: list[str]):
    def body() -> None:
        for line in lines:
            line = line.strip()
            if line and not line.endswith((";", "{", "}")):
                line += ";"
            session.emit(line)

    return body


def run_css_assertion(session: ReportSession, spec: CssSpec) -> Result:
    def body() -> None:
        output(session, _declarations(session, spec.output), selector=spec.selector)
        if spec.expect is not None:
            expect(session, _declarations(session, spec.expect), selector=spec.selector)
        elif spec.contains is not None:
            contains(
                session, _declarations(session, spec.contains), selector=spec.selector
            )
        else:
            contains_string(session, spec.contains_string)

    return assert_block(session, body, description=spec.description)


def run_assertion(session: ReportSession, assertion: dict[str, Any] | BaseModel) -> Result:
    """Dispatch a suite assertion entry to the matching assertion helper.

    Supported formats:
        {"assert_true": {"value": ..., "description": ...}}
        {"assert_false": {"value": ...}}
        {"assert_equal": {"actual": ..., "expected": ..., "inspect": false}}
        {"assert_unequal": {"actual": ..., "expected": ...}}
        {"assert_css": {"output": [...], "expect": [...]}}

    Raises ValueError for unknown assertion types.
    """
    if not assertion:
        raise ValueError("Empty assertion entry")

    if isinstance(assertion, BaseModel):
        assertion = assertion.model_dump()

    atype = next(iter(assertion))
    value = assertion[atype]

    if atype == "assert_true":
        return assert_true(session, value.get("value"), value.get("description"))
    if atype == "assert_false":
        return assert_false(session, value.get("value"), value.get("description"))
    if atype in ("assert_equal", "assert_unequal"):
        check = assert_equal if atype == "assert_equal" else assert_unequal
        return check(
            session,
            value.get("actual"),
            value.get("expected"),
            description=value.get("description"),
            inspect_values=value.get("inspect", False),
        )
    if atype == "assert_css":
        return run_css_assertion(session, CssSpec(**value))
    raise ValueError(f"Unknown assertion type: '{atype}'")


def run_suite(suite: SuiteConfig, session: ReportSession) -> ReportSession:
    """Run every module and test of ``suite`` into ``session``."""

    def run_test(test: TestConfig):
        def body() -> None:
            for assertion in test.assertions:
                run_assertion(session, assertion)

        return body

    def run_module(module: ModuleConfig):
        def body() -> None:
            for test in module.tests:
                it(session, test.name, run_test(test))

        return body

    for module in suite.modules:
        describe(session, module.name, run_module(module))
    return session


class SuiteRunner:
    """Runs a suite file and writes its report files."""

    def __init__(
        self,
        suite: SuiteConfig,
        output_dir: Path,
        verbose: bool = False,
    ):
        self.suite = suite
        self.output_dir = output_dir
        self.verbose = verbose
        self.session: ReportSession | None = None

    @property
    def failed_tests(self) -> int:
        if self.session is None:
            return 0
        return sum(1 for t in self.session.tests if not t.passed)

    def execute(self) -> Path:
        """Run the suite. Returns the run directory."""
        run_id = datetime.now(timezone.utc).strftime("%Y-%m-%d_%H%M%S")
        run_dir = self.output_dir / run_id
        run_dir.mkdir(parents=True, exist_ok=True)

        # note: logger name must be unique per run directory to avoid handler collision
        logger = setup_logger(
            run_dir / "debug.log",
            verbose=self.verbose,
            logger_name=f"truecss_run_{run_dir.resolve()}",
        )
        logger.debug(f"Starting suite run with {len(self.suite.modules)} module(s)")

        session = ReportSession(config=self.suite.settings, logger=logger)
        self.session = session
        try:
            run_suite(self.suite, session)

            for record in session.tests:
                status = "PASS" if record.passed else "FAIL"
                n_passed = sum(1 for a in record.assertions if a.passed)
                print(
                    f"  {status}  {record.module} / {record.name} "
                    f"({n_passed}/{len(record.assertions)} assertions)"
                )

            # Failures surface through failed_tests
            report(session, fail_on_error=False)
            self._write_results(run_dir, session)
        finally:
            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()

        return run_dir

    def _write_results(self, run_dir: Path, session: ReportSession) -> None:
        """Write output.css, junit.xml and meta.yaml to the run directory."""
        (run_dir / "output.css").write_text(session.getvalue(), encoding="utf-8")
        write_junit(run_dir, session)

        try:
            import importlib.metadata

            version = importlib.metadata.version("truecss")
        except Exception:
            version = "unknown"

        meta: dict[str, Any] = {
            "run_id": run_dir.name,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "modules": [m.name for m in self.suite.modules],
            "stats": dict(session.stats),
            "truecss_version": version,
        }
        (run_dir / "meta.yaml").write_text(yaml.dump(meta, default_flow_style=False))
        session.logger.debug(f"Wrote results to {run_dir}")
