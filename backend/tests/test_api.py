"""HTTP surface tests."""

from fastapi.testclient import TestClient

from amp_validator.main import create_app
from amp_validator.services.engine_context import ValidatorContext

from engine_fakes import FakeEngine, fail_engine, loader_for


def _client(engine) -> TestClient:
    return TestClient(create_app(ValidatorContext(loader_for(engine))))


def test_health_reports_engine_state():
    with _client(FakeEngine()) as client:
        before = client.get("/api/v1/health").json()
        client.post("/api/v1/validate", json={"html": "<html>"})
        after = client.get("/api/v1/health").json()

    assert (before["status"], before["engine"]) == ("degraded", "uninitialized")
    assert (after["status"], after["engine"]) == ("healthy", "ready")


def test_validate_returns_plain_errors_with_messages():
    engine = fail_engine()
    with _client(engine) as client:
        response = client.post("/api/v1/validate", json={"html": "<html>", "format": "amp4ads"})

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "FAIL"
    assert body["format"] == "AMP4ADS"
    assert body["errors"][0] == {
        "severity": "ERROR",
        "code": "DISALLOWED_TAG",
        "params": ["foo"],
        "line": 5,
        "col": 10,
        "specUrl": "https://x/y",
        "message": "DISALLOWED_TAG: foo",
    }
    assert body["errors"][1]["line"] is None
    assert engine.validate_calls == [("<html>", "AMP4ADS", -1)]


def test_render_inline_returns_annotated_document():
    with _client(fail_engine()) as client:
        response = client.post("/api/v1/render-inline", json={"html": "<html>", "filename": "page.html"})

    assert response.status_code == 200
    assert response.json() == {
        "status": "FAIL",
        "filename": "page.html",
        "annotated": "page.html\n<html>\n>> 2 issue(s)",
    }


def test_engine_load_failure_maps_to_503():
    async def broken_loader():
        raise RuntimeError("no engine")

    with TestClient(create_app(ValidatorContext(broken_loader))) as client:
        response = client.post("/api/v1/validate", json={"html": "<html>"})

    assert response.status_code == 503
    assert response.json()["error"] == "engine_unavailable"
