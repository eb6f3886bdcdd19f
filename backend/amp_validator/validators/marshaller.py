"""Result marshaller: turns engine wire bytes into plain validation records and back.

Usage:
    result = validate(context, html, "AMP4EMAIL")
    for error in result.errors:
        print(error.code, error.params)
"""

import time
from typing import Any, Mapping, Optional

import structlog

from amp_validator.config import get_settings
from amp_validator.services.engine_context import ValidatorContext
from amp_validator.validators import wire
from amp_validator.validators.enums import CODE, SEVERITY, STATUS
from amp_validator.validators.models import ValidationError, ValidationResult

logger = structlog.get_logger()

# Passed to the engine to request every error it finds.
UNLIMITED_ERRORS = -1


def normalize_format(format_hint: Optional[str]) -> str:
    """Uppercase a format hint, falling back to the configured default."""
    if not format_hint:
        return get_settings().DEFAULT_FORMAT.upper()
    return format_hint.upper()


def _wire_error_fields(wire_error, unknown: list[tuple[str, int]]) -> dict[str, Any]:
    """Map every field of a wire ValidationError onto plain record fields.

    Each field is listed here explicitly; a field the schema gains later is
    not carried over until it is mapped. Enum numbers with no known name are
    appended to ``unknown`` as (enum, number) pairs.
    """
    severity = SEVERITY.name_of(wire_error.severity)
    code = CODE.name_of(wire_error.code)
    if severity is None:
        unknown.append(("severity", wire_error.severity))
    if code is None:
        unknown.append(("code", wire_error.code))

    return {
        "severity": severity,
        "code": code,
        "params": tuple(wire_error.params),
        "line": wire_error.line if wire_error.HasField("line") else None,
        "col": wire_error.col if wire_error.HasField("col") else None,
        "spec_url": wire_error.spec_url if wire_error.HasField("spec_url") else None,
    }


def validate(
    context: ValidatorContext,
    document_text: str,
    format_hint: Optional[str] = None,
) -> ValidationResult:
    """Validate a document with the engine and return the plain result tree.

    Args:
        context: Engine context; must be READY
        document_text: Document source to validate
        format_hint: Validation format such as "AMP" or "AMP4EMAIL"; defaults to "AMP"

    Returns:
        ValidationResult with errors in the order the engine reported them
    """
    engine = context.require_engine()
    format_name = normalize_format(format_hint)

    start_time = time.perf_counter()
    payload = wire.coerce_wire_bytes(
        engine.validate_string(document_text, format_name, UNLIMITED_ERRORS)
    )
    wire_result = wire.decode_result(payload)

    unknown: list[tuple[str, int]] = []
    status = STATUS.name_of(wire_result.status)
    if status is None:
        unknown.append(("status", wire_result.status))

    errors = tuple(
        ValidationError.with_wire_payload(
            wire.encode(wire_error), **_wire_error_fields(wire_error, unknown)
        )
        for wire_error in wire_result.errors
    )
    result = ValidationResult.with_wire_payload(payload, status=status, errors=errors)

    # Schema skew is reported once per decode, not once per error
    if unknown:
        logger.warning(
            "enum_value_not_found",
            values=sorted({f"{enum}={number}" for enum, number in unknown}),
        )

    logger.debug(
        "validation_complete",
        format=format_name,
        status=status,
        total_errors=len(errors),
        duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
    )
    return result


def to_wire_record(error: ValidationError) -> dict[str, Any]:
    """Numeric-coded form of a plain error, for handing back across an enum-number boundary.

    Needs no engine. Unknown names map to None, same as the forward direction.
    """
    record: dict[str, Any] = {
        "severity": SEVERITY.number_of(error.severity),
        "code": CODE.number_of(error.code),
        "params": list(error.params),
    }
    if error.line is not None:
        record["line"] = error.line
    if error.col is not None:
        record["col"] = error.col
    if error.spec_url is not None:
        record["specUrl"] = error.spec_url
    return record


def from_wire_record(record: Mapping[str, Any]) -> ValidationError:
    """Plain error from a numeric-coded record; the inverse of to_wire_record.

    The result carries no wire payload, so the engine cannot render it.
    """
    return ValidationError(
        severity=SEVERITY.name_of(record.get("severity")),
        code=CODE.name_of(record.get("code")),
        params=tuple(record.get("params", ())),
        line=record.get("line"),
        col=record.get("col"),
        spec_url=record.get("specUrl"),
    )
