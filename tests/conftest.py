"""Pytest config and fixtures for API and CLI tests. No network, no docling."""
from __future__ import annotations

from pathlib import Path

import pytest

from docsummary.api.app import create_app
from docsummary.api.settings import AppSettings
from docsummary.extraction.errors import ExtractionError
from docsummary.extraction.settings import ExtractionSettings
from docsummary.llm.settings import LLMSettings
from docsummary.llm.types import LLMResponse
from docsummary.summarizer.factory import create_orchestrator
from docsummary.summarizer.settings import SummarizerSettings

SAMPLE_TEXT = " ".join(
    f"Paragraph {i} of the annual review describes how the operations group improved "
    f"delivery times for customers in region{i}."
    for i in range(12)
)


class FakeExtractor:
    """Returns fixed text (or raises) and records the uploaded paths it saw."""

    def __init__(self, text: str = SAMPLE_TEXT, exc: ExtractionError | None = None) -> None:
        self.text = text
        self.exc = exc
        self.seen: list[tuple[Path, str, bool]] = []

    def extract(self, path: Path, mime_type: str) -> str:
        self.seen.append((path, mime_type, path.exists()))
        if self.exc is not None:
            raise self.exc
        return self.text


class FakeLLMClient:
    def __init__(self, text: str = "Generated overview of the review.", exc: Exception | None = None) -> None:
        self.text = text
        self.exc = exc
        self.calls = 0

    async def acompletion(self, provider, model, req, *, timeout_s=None, api_base=None, api_key=None):
        self.calls += 1
        if self.exc is not None:
            raise self.exc
        return LLMResponse(text=self.text, provider=provider, model=model, latency_ms=1)


@pytest.fixture
def extractor() -> FakeExtractor:
    return FakeExtractor()


@pytest.fixture
def make_app(monkeypatch: pytest.MonkeyPatch):
    """Build a test app; api_key=None means the generative path is not configured."""
    monkeypatch.delenv("LLM_GEMINI_API_KEY", raising=False)

    def _make(extractor: FakeExtractor, *, api_key: str | None = None, llm_client: FakeLLMClient | None = None):
        llm_settings = LLMSettings(_env_file=None, gemini_api_key=api_key)
        summarizer_settings = SummarizerSettings(_env_file=None)
        app = create_app(
            AppSettings(_env_file=None, frontend_url="http://localhost:3000"),
            llm_settings=llm_settings,
            summarizer_settings=summarizer_settings,
            extraction_settings=ExtractionSettings(_env_file=None),
            extractor=extractor,
            orchestrator=create_orchestrator(llm_settings, summarizer_settings, client=llm_client or FakeLLMClient()),
        )
        app.config["TESTING"] = True
        return app

    return _make


@pytest.fixture
def fake_extractor_cls() -> type[FakeExtractor]:
    return FakeExtractor


@pytest.fixture
def fake_llm_client_cls() -> type[FakeLLMClient]:
    return FakeLLMClient


@pytest.fixture
def client(make_app, extractor):
    return make_app(extractor).test_client()
