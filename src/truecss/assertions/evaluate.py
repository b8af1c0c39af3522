from __future__ import annotations

from typing import Any

from truecss.assertions.base import Result
from truecss.assertions.lifecycle import strike
from truecss.errors import EngineError
from truecss.session import ReportSession
from truecss.values import Value


def evaluate(
    session: ReportSession,
    actual: Any,
    expected: Any,
    invert: bool = False,
    output_detail: bool = True,
    reset_output: bool = False,
) -> Result:
    """Classify ``actual`` against ``expected``, report it and close the assertion.

    With ``invert`` the assertion passes when the values differ. A failing
    assertion is returned as ``Result.FAIL``; only a broken engine raises.
    """
    if session is None:
        raise EngineError("No report session to record the assertion against")
    if session.renderer is None:
        raise EngineError("Report session has no detail renderer")

    actual = Value.coerce(actual)
    expected = Value.coerce(expected)

    result = session.get_result(actual, expected, invert)
    if result is Result.PASS:
        session.renderer.pass_details(session)
    else:
        session.renderer.fail_details(
            session, actual, expected, output_detail, unequal=invert
        )

    strike(session, result, reset_output=reset_output)
    return result
