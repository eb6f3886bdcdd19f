"""AMP validator bridge: plain results and reports from the external validator engine.

Usage:
    from amp_validator import validators

    await validators.init()
    result = validators.validate_document_text(html, "AMP4EMAIL")
    for error in result.errors:
        print(validators.render_message(error))

Every function takes an optional ``context``; without one the module-level
default context is used.
"""

import asyncio
from typing import Optional

import httpx
import structlog

from amp_validator.errors import CacheUrlError, FetchError
from amp_validator.services.engine_context import ValidatorContext, default_context
from amp_validator.services.fetcher import fetch_document
from amp_validator.validators import marshaller, reporter, result_logger
from amp_validator.validators.models import ValidationError, ValidationResult
from amp_validator.validators.urls import is_known_cache_url, select_format_from_url

logger = structlog.get_logger()


async def init(context: Optional[ValidatorContext] = None) -> None:
    """Load the validator engine. Safe to call many times and concurrently."""
    await (context or default_context).init()


def validate_document_text(
    text: str,
    format_hint: Optional[str] = None,
    context: Optional[ValidatorContext] = None,
) -> ValidationResult:
    """Validate a document given as a string."""
    return marshaller.validate(context or default_context, text, format_hint)


def render_message(error: ValidationError, context: Optional[ValidatorContext] = None) -> str:
    """Render the engine's message for a single error."""
    return reporter.render_message(context or default_context, error)


def render_inline_annotated_document(
    result: ValidationResult,
    filename: str,
    text: str,
    context: Optional[ValidatorContext] = None,
) -> str:
    """Render the document with the engine's inline error annotations."""
    return reporter.render_inline_annotated_document(context or default_context, result, filename, text)


async def validate_url_and_report(
    url: str,
    context: Optional[ValidatorContext] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> ValidationResult:
    """Fetch a URL, validate it, and log the result.

    The fetch and the engine load run concurrently; both must finish before
    validation starts. Cache URLs and non-200 responses are rejected.
    """
    if is_known_cache_url(url):
        raise CacheUrlError(url)

    context = context or default_context
    document, _ = await asyncio.gather(fetch_document(url, client=client), context.init())
    if document.status_code != 200:
        logger.error("document_fetch_failed", url=url, status_code=document.status_code)
        raise FetchError(url, document.status_code)

    result = marshaller.validate(context, document.text, select_format_from_url(url))
    result_logger.report(context, result, url)
    return result


__all__ = [
    "init",
    "validate_document_text",
    "render_message",
    "render_inline_annotated_document",
    "validate_url_and_report",
    "ValidatorContext",
    "default_context",
    "ValidationError",
    "ValidationResult",
]
