"""Fixtures for summarizer tests: sample documents and a fake LLM client."""
from __future__ import annotations

import pytest

from docsummary.llm.settings import LLMSettings
from docsummary.llm.types import LLMProvider, LLMRequest, LLMResponse


def _make_document(count: int) -> str:
    """`count` distinct sentences of about 15 words each."""
    return " ".join(
        f"The section{i} report explains how regional teams coordinate budget planning "
        f"and quarterly delivery across connected departments{i}."
        for i in range(count)
    )


class FakeLLMClient:
    """Records calls; returns `text` or raises `exc`."""

    def __init__(self, text: str = "A generated summary.", exc: Exception | None = None) -> None:
        self.text = text
        self.exc = exc
        self.calls: list[dict] = []

    async def acompletion(
        self,
        provider: LLMProvider,
        model: str,
        req: LLMRequest,
        *,
        timeout_s: float | None = None,
        api_base: str | None = None,
        api_key: str | None = None,
    ) -> LLMResponse:
        self.calls.append(
            {"provider": provider, "model": model, "req": req, "timeout_s": timeout_s, "api_key": api_key}
        )
        if self.exc is not None:
            raise self.exc
        return LLMResponse(text=self.text, provider=provider, model=model, latency_ms=3)


@pytest.fixture
def llm_settings() -> LLMSettings:
    return LLMSettings(_env_file=None, gemini_api_key="test-key")


@pytest.fixture
def unconfigured_llm_settings(monkeypatch: pytest.MonkeyPatch) -> LLMSettings:
    monkeypatch.delenv("LLM_GEMINI_API_KEY", raising=False)
    return LLMSettings(_env_file=None)


@pytest.fixture
def make_document():
    return _make_document


@pytest.fixture
def document() -> str:
    return _make_document(10)


@pytest.fixture
def fake_client_cls() -> type[FakeLLMClient]:
    return FakeLLMClient
