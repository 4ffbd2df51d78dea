"""Fallback policy: generative when configured and healthy, extractive otherwise."""
import logging

import pytest

from docsummary.llm.errors import LLMAuthError, LLMUnavailable
from docsummary.summarizer.errors import InsufficientTextError, NoSentencesError
from docsummary.summarizer.extractive import summarize_extractive
from docsummary.summarizer.factory import create_orchestrator
from docsummary.summarizer.generative import GenerativeSummarizer
from docsummary.summarizer.orchestrator import SummaryOrchestrator
from docsummary.summarizer.settings import SummarizerSettings
from docsummary.summarizer.types import LengthTier, SummaryMethod


@pytest.mark.asyncio
async def test_unconfigured_goes_straight_to_extractive(llm_settings, document, fake_client_cls) -> None:
    client = fake_client_cls()
    orch = SummaryOrchestrator(GenerativeSummarizer(llm_settings, client=client))
    result = await orch.summarize(document, LengthTier.SHORT, generative_configured=False)
    assert result.method == SummaryMethod.EXTRACTIVE
    assert result.summary_text == summarize_extractive(document, LengthTier.SHORT)
    assert client.calls == []


@pytest.mark.asyncio
async def test_generative_success(llm_settings, document, fake_client_cls) -> None:
    orch = SummaryOrchestrator(GenerativeSummarizer(llm_settings, client=fake_client_cls(text="AI summary.")))
    result = await orch.summarize(document, "long", generative_configured=True)
    assert result.method == SummaryMethod.GENERATIVE
    assert result.to_payload() == {"summary": "AI summary.", "method": "Generative"}


@pytest.mark.asyncio
@pytest.mark.parametrize("exc", [LLMUnavailable("down"), LLMAuthError()])
async def test_remote_failure_falls_back(llm_settings, document, fake_client_cls, exc, caplog) -> None:
    orch = SummaryOrchestrator(GenerativeSummarizer(llm_settings, client=fake_client_cls(exc=exc)))
    with caplog.at_level(logging.WARNING):
        result = await orch.summarize(document, LengthTier.SHORT, generative_configured=True)
    assert result.method == SummaryMethod.EXTRACTIVE
    assert result.summary_text == summarize_extractive(document, LengthTier.SHORT)
    assert "extractive fallback" in caplog.text


@pytest.mark.asyncio
async def test_foreign_client_error_falls_back(llm_settings, document, fake_client_cls) -> None:
    orch = SummaryOrchestrator(GenerativeSummarizer(llm_settings, client=fake_client_cls(exc=KeyError("choices"))))
    result = await orch.summarize(document, LengthTier.SHORT, generative_configured=True)
    assert result.method == SummaryMethod.EXTRACTIVE
    assert result.summary_text == summarize_extractive(document, LengthTier.SHORT)


@pytest.mark.asyncio
async def test_empty_response_falls_back(llm_settings, document, fake_client_cls) -> None:
    orch = SummaryOrchestrator(GenerativeSummarizer(llm_settings, client=fake_client_cls(text="")))
    result = await orch.summarize(document, LengthTier.MEDIUM, generative_configured=True)
    assert result.method == SummaryMethod.EXTRACTIVE


@pytest.mark.asyncio
async def test_configured_flag_without_provider_falls_back(unconfigured_llm_settings, document, fake_client_cls) -> None:
    client = fake_client_cls()
    orch = SummaryOrchestrator(GenerativeSummarizer(unconfigured_llm_settings, client=client))
    result = await orch.summarize(document, LengthTier.SHORT, generative_configured=True)
    assert result.method == SummaryMethod.EXTRACTIVE
    assert client.calls == []


@pytest.mark.asyncio
async def test_missing_generative_summarizer_falls_back(document) -> None:
    result = await SummaryOrchestrator().summarize(document, LengthTier.SHORT, generative_configured=True)
    assert result.method == SummaryMethod.EXTRACTIVE


@pytest.mark.asyncio
async def test_no_sentences_propagates_after_fallback(llm_settings, fake_client_cls) -> None:
    text = "Short bit. " * 20
    orch = SummaryOrchestrator(GenerativeSummarizer(llm_settings, client=fake_client_cls(exc=LLMUnavailable())))
    with pytest.raises(NoSentencesError):
        await orch.summarize(text, LengthTier.SHORT, generative_configured=True)


@pytest.mark.asyncio
async def test_rejects_short_text() -> None:
    with pytest.raises(InsufficientTextError) as exc_info:
        await SummaryOrchestrator().summarize("Too little text to summarize.", LengthTier.SHORT, False)
    assert exc_info.value.code == "INSUFFICIENT_TEXT"
    assert exc_info.value.minimum == 100


@pytest.mark.asyncio
async def test_min_text_chars_is_configurable(document) -> None:
    orch = SummaryOrchestrator(settings=SummarizerSettings(_env_file=None, min_text_chars=5000))
    with pytest.raises(InsufficientTextError):
        await orch.summarize(document, LengthTier.SHORT, False)


def test_factory_skips_generative_when_unconfigured(unconfigured_llm_settings) -> None:
    orch = create_orchestrator(unconfigured_llm_settings, SummarizerSettings(_env_file=None))
    assert orch.generative is None


def test_factory_attaches_generative_when_configured(llm_settings, fake_client_cls) -> None:
    orch = create_orchestrator(llm_settings, SummarizerSettings(_env_file=None), client=fake_client_cls())
    assert orch.generative is not None
    assert orch.generative.configured is True
