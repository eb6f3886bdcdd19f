"""Error reporter: renders messages by replaying original wire bytes through the engine.

The engine owns the rule metadata behind each message, so rendering always
goes through the record's wire payload and never through its plain fields.
"""

from amp_validator.errors import MissingWirePayloadError
from amp_validator.services.engine_context import ValidatorContext
from amp_validator.validators.models import ValidationError, ValidationResult


def render_message(context: ValidatorContext, error: ValidationError) -> str:
    """Render the human-readable message for a single error."""
    engine = context.require_engine()
    if error.wire_payload is None:
        raise MissingWirePayloadError("Cannot render an error that was not produced by validate()")
    return engine.render_error_message(error.wire_payload)


def render_inline_annotated_document(
    context: ValidatorContext,
    result: ValidationResult,
    filename: str,
    document_text: str,
) -> str:
    """Return a copy of the document with the engine's inline error markers.

    Args:
        context: Engine context; must be READY
        result: Result returned by validate() for this document
        filename: Name used in rendered error messages
        document_text: The exact text that was validated
    """
    engine = context.require_engine()
    if result.wire_payload is None:
        raise MissingWirePayloadError("Cannot render a result that was not produced by validate()")
    return engine.render_inline_result(result.wire_payload, filename, document_text)
