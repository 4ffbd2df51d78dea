"""Summarize API: upload flow, validation, fallback reporting, cleanup, health/status."""
import io

import pytest

from docsummary.extraction.errors import ExtractionError, ExtractionErrorCode
from docsummary.llm.errors import LLMUnavailable


def _upload(client, *, filename="doc.pdf", mime="application/pdf", length="short", payload=b"%PDF-1.4 fake"):
    data = {"document": (io.BytesIO(payload), filename, mime)}
    if length is not None:
        data["summaryLength"] = length
    return client.post("/api/upload-and-summarize", data=data, content_type="multipart/form-data")


def test_upload_extractive_when_unconfigured(client, extractor) -> None:
    resp = _upload(client)
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    data = body["data"]
    assert data["method"] == "Extractive"
    assert data["summaryLength"] == "short"
    assert data["summary"].endswith(".")
    assert data["wordCount"]["original"] == len(extractor.text.split())
    assert data["wordCount"]["summary"] == len(data["summary"].split())
    assert data["originalText"].endswith("...")
    assert len(data["originalText"]) == 503
    assert isinstance(data["processingTime"], int)


def test_upload_generative_when_configured(make_app, extractor, fake_llm_client_cls) -> None:
    llm = fake_llm_client_cls(text="Generated overview.")
    client = make_app(extractor, api_key="test-key", llm_client=llm).test_client()
    data = _upload(client, length="long").get_json()["data"]
    assert data["method"] == "Generative"
    assert data["summary"] == "Generated overview."
    assert llm.calls == 1


def test_upload_falls_back_when_remote_fails(make_app, extractor, fake_llm_client_cls) -> None:
    llm = fake_llm_client_cls(exc=LLMUnavailable("503"))
    client = make_app(extractor, api_key="test-key", llm_client=llm).test_client()
    resp = _upload(client)
    assert resp.status_code == 200
    assert resp.get_json()["data"]["method"] == "Extractive"


def test_temp_file_removed_after_success(client, extractor) -> None:
    _upload(client)
    path, mime, existed = extractor.seen[0]
    assert existed is True
    assert mime == "application/pdf"
    assert path.suffix == ".pdf"
    assert not path.exists()


def test_temp_file_removed_after_failure(make_app, fake_extractor_cls) -> None:
    extractor = fake_extractor_cls(exc=ExtractionError("PDF processing failed: bad xref"))
    resp = _upload(make_app(extractor).test_client())
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "PDF processing failed: bad xref", "success": False}
    assert not extractor.seen[0][0].exists()


def test_missing_file(client) -> None:
    resp = client.post("/api/upload-and-summarize", data={"summaryLength": "short"}, content_type="multipart/form-data")
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "No file uploaded"


def test_invalid_type(client, extractor) -> None:
    resp = _upload(client, filename="notes.txt", mime="text/plain")
    assert resp.status_code == 400
    assert "Invalid file type" in resp.get_json()["error"]
    assert extractor.seen == []


def test_image_upload(client, extractor) -> None:
    resp = _upload(client, filename="scan.png", mime="image/png")
    assert resp.status_code == 200
    assert extractor.seen[0][1] == "image/png"


def test_no_text_extracted(make_app, fake_extractor_cls) -> None:
    resp = _upload(make_app(fake_extractor_cls(text="   ")).test_client())
    assert resp.status_code == 400
    assert "No text could be extracted" in resp.get_json()["error"]


def test_insufficient_text(make_app, fake_extractor_cls) -> None:
    resp = _upload(make_app(fake_extractor_cls(text="A short note only.")).test_client())
    assert resp.status_code == 400
    assert "insufficient text" in resp.get_json()["error"]


def test_no_sentences_is_terminal_error(make_app, fake_extractor_cls) -> None:
    resp = _upload(make_app(fake_extractor_cls(text="Tiny bit. " * 30)).test_client())
    assert resp.status_code == 500
    body = resp.get_json()
    assert body["success"] is False
    assert "No valid sentences" in body["error"]


def test_extractor_size_error_maps_to_400(make_app, fake_extractor_cls) -> None:
    extractor = fake_extractor_cls(exc=ExtractionError("too big", code=ExtractionErrorCode.FILE_TOO_LARGE))
    resp = _upload(make_app(extractor).test_client())
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "File too large. Maximum size allowed is 10MB."


def test_request_body_over_limit(make_app, extractor) -> None:
    app = make_app(extractor)
    app.config["MAX_CONTENT_LENGTH"] = 1024
    resp = _upload(app.test_client(), payload=b"x" * 4096)
    assert resp.status_code == 400
    assert "File too large" in resp.get_json()["error"]


@pytest.mark.parametrize(("given", "expected"), [(None, "medium"), ("LONG", "long"), ("huge", "medium")])
def test_summary_length_coercion(client, given, expected) -> None:
    resp = _upload(client, length=given)
    assert resp.get_json()["data"]["summaryLength"] == expected


def test_cors_headers(client) -> None:
    resp = client.get("/api/health")
    assert resp.headers["Access-Control-Allow-Origin"] == "http://localhost:3000"
    assert resp.headers["Access-Control-Allow-Credentials"] == "true"


def test_preflight(client) -> None:
    resp = client.options("/api/upload-and-summarize")
    assert resp.status_code == 204
    assert "POST" in resp.headers["Access-Control-Allow-Methods"]


def test_health_unconfigured(client) -> None:
    body = client.get("/api/health").get_json()
    assert body["status"] == "OK"
    assert body["availableMethods"] == ["Extractive"]
    assert body["activeMethod"] == "Extractive"
    assert body["uptime"] >= 0


def test_health_configured(make_app, extractor) -> None:
    body = make_app(extractor, api_key="test-key").test_client().get("/api/health").get_json()
    assert body["availableMethods"] == ["Generative", "Extractive"]
    assert body["model"].startswith("gemini/")


def test_status(client) -> None:
    body = client.get("/api/status").get_json()
    assert body["features"]["generative_summarization"] is False
    assert body["limits"]["max_file_size"] == "10MB"
    assert body["ai_models"]["extractive"] == "always available"


def test_unknown_route(client) -> None:
    resp = client.get("/api/nope")
    assert resp.status_code == 404
    assert resp.get_json()["error"] == "Endpoint not found"
