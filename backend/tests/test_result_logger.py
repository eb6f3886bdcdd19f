"""Result logger tests."""

import pytest
from structlog.testing import capture_logs

from amp_validator.validators.marshaller import validate
from amp_validator.validators.result_logger import (
    HAD_ERRORS_MESSAGE,
    HAD_WARNINGS_MESSAGE,
    PUBLISHING_CHECKLIST_MESSAGE,
    SUCCESS_MESSAGE,
    UNKNOWN_STATUS_MESSAGE,
    format_error_line,
    report,
)

from engine_fakes import (
    DISALLOWED_TAG,
    ERROR,
    FAIL,
    PASS,
    WARNING,
    WARNING_EXTENSION_UNUSED,
    FakeEngine,
    ready_context,
)

URL = "https://example.com/page.html#development=1"
SOURCE = "https://example.com/page.html"
SEE_ALSO = "See also https://validator.amp.dev/?experimental_wasm=1#url=https%3A%2F%2Fexample.com%2Fpage.html"


def _report(engine):
    context = ready_context(engine)
    result = validate(context, "<html>")
    with capture_logs() as logs:
        report(context, result, URL)
    return [(entry["log_level"], entry["event"]) for entry in logs]


def _levels(lines, level):
    return [event for lvl, event in lines if lvl == level]


def test_pass_without_errors_logs_a_single_info_line():
    lines = _report(FakeEngine(status=PASS))

    assert lines == [("info", f"{SUCCESS_MESSAGE} {PUBLISHING_CHECKLIST_MESSAGE}")]


def test_pass_with_warning_logs_success_then_warning():
    lines = _report(
        FakeEngine(status=PASS, errors=[{"severity": WARNING, "code": WARNING_EXTENSION_UNUSED, "params": ["amp-bind"]}])
    )

    assert lines[0] == ("info", f"{SUCCESS_MESSAGE} {PUBLISHING_CHECKLIST_MESSAGE}")
    assert _levels(lines, "warning") == [f"{SOURCE}:1:0 WARNING_EXTENSION_UNUSED: amp-bind"]
    assert _levels(lines, "error") == [HAD_WARNINGS_MESSAGE]
    assert lines[-1] == ("info", SEE_ALSO)


def test_fail_logs_header_error_lines_and_link():
    lines = _report(
        FakeEngine(
            status=FAIL,
            errors=[
                {
                    "severity": ERROR,
                    "code": DISALLOWED_TAG,
                    "params": ["foo"],
                    "line": 5,
                    "col": 10,
                    "spec_url": "https://x/y",
                }
            ],
        )
    )

    assert lines == [
        ("error", HAD_ERRORS_MESSAGE),
        ("error", f"{SOURCE}:5:10 DISALLOWED_TAG: foo (see https://x/y)"),
        ("info", SEE_ALSO),
    ]


def test_error_line_without_spec_url_or_position():
    context = ready_context(FakeEngine(status=FAIL, errors=[{"severity": ERROR, "code": DISALLOWED_TAG, "params": ["foo"]}]))
    error = validate(context, "<html>").errors[0]

    assert format_error_line(context, URL, error) == f"{SOURCE}:1:0 DISALLOWED_TAG: foo"


def test_error_line_without_spec_url_keeps_position():
    context = ready_context(
        FakeEngine(status=FAIL, errors=[{"severity": ERROR, "code": DISALLOWED_TAG, "params": ["foo"], "line": 5, "col": 10}])
    )
    error = validate(context, "<html>").errors[0]

    assert format_error_line(context, URL, error) == f"{SOURCE}:5:10 DISALLOWED_TAG: foo"


def test_fail_without_errors_logs_header_only():
    lines = _report(FakeEngine(status=FAIL))

    assert lines == [("error", HAD_ERRORS_MESSAGE)]


@pytest.mark.parametrize("status", [0, 9])
def test_unknown_status_is_flagged_then_reported_like_fail(status):
    # Unknown statuses fall through to per-error reporting, headed "had warnings".
    lines = _report(
        FakeEngine(
            status=status,
            errors=[
                {"severity": ERROR, "code": DISALLOWED_TAG, "params": ["foo"], "line": 2, "col": 3},
                {"severity": WARNING, "code": WARNING_EXTENSION_UNUSED, "params": ["amp-bind"]},
            ],
        )
    )

    assert lines == [
        ("error", UNKNOWN_STATUS_MESSAGE),
        ("error", HAD_WARNINGS_MESSAGE),
        ("error", f"{SOURCE}:2:3 DISALLOWED_TAG: foo"),
        ("warning", f"{SOURCE}:1:0 WARNING_EXTENSION_UNUSED: amp-bind"),
        ("info", SEE_ALSO),
    ]
