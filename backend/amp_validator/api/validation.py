"""Validation API: validate documents and render inline annotations."""

from fastapi import APIRouter, Request

import structlog

from amp_validator.models.requests import RenderInlineRequest, ValidateRequest
from amp_validator.models.responses import (
    RenderInlineResponse,
    ValidateResponse,
    ValidationErrorResponse,
)
from amp_validator.validators import marshaller, reporter

logger = structlog.get_logger()

router = APIRouter()


@router.post("/validate", response_model=ValidateResponse)
async def validate_document(body: ValidateRequest, request: Request):
    """Validate a document and return every finding with its rendered message."""
    context = request.app.state.validator_context
    await context.init()

    format_name = marshaller.normalize_format(body.format)
    result = marshaller.validate(context, body.html, format_name)

    logger.info(
        "api_validation",
        format=format_name,
        status=result.status,
        total_errors=len(result.errors),
    )

    return ValidateResponse(
        status=result.status,
        format=format_name,
        errors=[
            ValidationErrorResponse(
                severity=error.severity,
                code=error.code,
                params=list(error.params),
                line=error.line,
                col=error.col,
                spec_url=error.spec_url,
                message=reporter.render_message(context, error),
            )
            for error in result.errors
        ],
    )


@router.post("/render-inline", response_model=RenderInlineResponse)
async def render_inline(body: RenderInlineRequest, request: Request):
    """Validate a document and return it annotated with the engine's inline markers."""
    context = request.app.state.validator_context
    await context.init()

    result = marshaller.validate(context, body.html, body.format)
    annotated = reporter.render_inline_annotated_document(context, result, body.filename, body.html)

    return RenderInlineResponse(status=result.status, filename=body.filename, annotated=annotated)
