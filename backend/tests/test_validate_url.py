"""URL validation flow tests: fetch + load fan-in, validate, report."""

import httpx
import pytest
from structlog.testing import capture_logs

from amp_validator import validators
from amp_validator.errors import CacheUrlError, FetchError
from amp_validator.services.engine_context import ValidatorContext
from amp_validator.validators.result_logger import HAD_ERRORS_MESSAGE

from engine_fakes import FakeEngine, fail_engine, loader_for


def _client(status_code=200, text="<html amp></html>", seen=None):
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(str(request.url))
        return httpx.Response(status_code, text=text)

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


async def test_fetches_loads_validates_and_reports():
    engine = fail_engine()
    context = ValidatorContext(loader_for(engine))

    async with _client() as client:
        with capture_logs() as logs:
            result = await validators.validate_url_and_report(
                "https://example.com/page.html#development=amp4email", context=context, client=client
            )

    assert context.is_ready
    assert result.status == "FAIL"
    assert engine.validate_calls == [("<html amp></html>", "AMP4EMAIL", -1)]
    events = [entry["event"] for entry in logs]
    assert HAD_ERRORS_MESSAGE in events
    assert "https://example.com/page.html:5:10 DISALLOWED_TAG: foo (see https://x/y)" in events


async def test_development_one_selects_amp():
    engine = FakeEngine()
    context = ValidatorContext(loader_for(engine))

    async with _client() as client:
        await validators.validate_url_and_report("https://example.com/#development=1", context=context, client=client)

    assert engine.validate_calls[0][1] == "AMP"


async def test_non_200_is_a_hard_failure():
    engine = FakeEngine()
    context = ValidatorContext(loader_for(engine))
    seen = []

    async with _client(status_code=404, seen=seen) as client:
        with pytest.raises(FetchError) as exc_info:
            await validators.validate_url_and_report("https://example.com/missing", context=context, client=client)

    assert exc_info.value.status_code == 404
    assert len(seen) == 1
    assert engine.validate_calls == []


async def test_cache_urls_are_rejected_before_fetching():
    seen = []
    context = ValidatorContext(loader_for(FakeEngine()))

    async with _client(seen=seen) as client:
        with pytest.raises(CacheUrlError):
            await validators.validate_url_and_report(
                "https://cdn.ampproject.org/c/s/example.com/", context=context, client=client
            )

    assert seen == []
    assert not context.is_ready


async def test_facade_uses_given_context():
    engine = fail_engine()
    context = ValidatorContext(loader_for(engine))
    await validators.init(context)

    result = validators.validate_document_text("<html>", "amp", context=context)

    assert validators.render_message(result.errors[0], context=context) == "DISALLOWED_TAG: foo"
    assert validators.render_inline_annotated_document(result, "a.html", "<html>", context=context).startswith("a.html")
