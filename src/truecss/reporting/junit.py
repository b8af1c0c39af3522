from __future__ import annotations

from pathlib import Path

from junitparser import Failure, JUnitXml, TestCase, TestSuite

from truecss.session import ReportSession


def build_junit(session: ReportSession) -> JUnitXml:
    """One suite per module, one test case per assertion."""
    xml = JUnitXml()
    suites: dict[str, TestSuite] = {}

    for record in session.tests:
        suite_name = record.module or "(no module)"
        suite = suites.get(suite_name)
        if suite is None:
            suite = TestSuite(suite_name)
            suites[suite_name] = suite

        for assertion in record.assertions:
            case = TestCase(assertion.name)
            case.classname = record.name
            if not assertion.passed:
                case.result = [Failure(assertion.message)]
            suite.add_testcase(case)

    for suite in suites.values():
        suite.add_property("tests", str(len({c.classname for c in suite})))
        # Use append (not +=) to preserve properties
        xml.append(suite)
    return xml


def write_junit(run_dir: Path, session: ReportSession) -> Path:
    """Write junit.xml for the session's results, return path."""
    junit_path = run_dir / "junit.xml"
    build_junit(session).write(str(junit_path), pretty=True)
    return junit_path
