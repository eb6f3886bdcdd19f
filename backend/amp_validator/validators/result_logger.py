"""Result logger: writes a validation outcome as human-readable diagnostic lines.

Lines go to the info / warning / error levels of a structlog logger, with the
line text as the event. Errors with severity ERROR use the error level;
everything else uses the warning level.
"""

from urllib.parse import quote

import structlog

from amp_validator.services.engine_context import ValidatorContext
from amp_validator.validators.models import ValidationError, ValidationResult
from amp_validator.validators.reporter import render_message
from amp_validator.validators.urls import remove_fragment

logger = structlog.get_logger()

SUCCESS_MESSAGE = "AMP validation successful."
PUBLISHING_CHECKLIST_MESSAGE = (
    "Review our 'publishing checklist' to ensure successful AMP document "
    "distribution. See https://go.amp.dev/publishing-checklist"
)
UNKNOWN_STATUS_MESSAGE = (
    "AMP validation had unknown results. This indicates a validator bug. "
    "Please report at https://github.com/ampproject/amphtml/issues ."
)
HAD_ERRORS_MESSAGE = "AMP validation had errors:"
HAD_WARNINGS_MESSAGE = "AMP validation had warnings:"
WEB_VALIDATOR_URL = "https://validator.amp.dev/?experimental_wasm=1#url={url}"

# Same unreserved set as JavaScript's encodeURIComponent.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def format_error_line(context: ValidatorContext, source_label: str, error: ValidationError) -> str:
    """Render '<source>:<line>:<col> <message>[ (see <specUrl>)]' for one error."""
    line = error.line if error.line is not None else 1
    col = error.col if error.col is not None else 0
    text = f"{remove_fragment(source_label)}:{line}:{col} {render_message(context, error)}"
    if error.spec_url:
        text += f" (see {error.spec_url})"
    return text


def web_validator_link(source_label: str) -> str:
    """Link to the web validator for the given document URL."""
    return WEB_VALIDATOR_URL.format(
        url=quote(remove_fragment(source_label), safe=_URI_COMPONENT_SAFE)
    )


def report(
    context: ValidatorContext,
    result: ValidationResult,
    source_label: str,
    log=None,
) -> None:
    """Log a validation result, distinguishing warnings from errors.

    A passing result logs one info line (success plus the publishing
    checklist reminder). A status other than PASS or FAIL is flagged and then
    reported the same way as FAIL, except that the header reads "had warnings".
    """
    log = log or logger

    if result.status == "PASS":
        log.info(f"{SUCCESS_MESSAGE} {PUBLISHING_CHECKLIST_MESSAGE}")
        if not result.errors:
            return
    elif result.status != "FAIL":
        log.error(UNKNOWN_STATUS_MESSAGE)

    if result.status == "FAIL":
        log.error(HAD_ERRORS_MESSAGE)
    else:
        log.error(HAD_WARNINGS_MESSAGE)

    for error in result.errors:
        if error.severity == "ERROR":
            log.error(format_error_line(context, source_label, error))
        else:
            log.warning(format_error_line(context, source_label, error))

    if result.errors:
        log.info(f"See also {web_validator_link(source_label)}")
