"""Summary orchestrator: generative first when configured, extractive as the fallback."""
from __future__ import annotations

import logging

from docsummary.summarizer.errors import GenerativeError, InsufficientTextError, ServiceUnavailableError
from docsummary.summarizer.extractive import summarize_extractive
from docsummary.summarizer.generative import GenerativeSummarizer
from docsummary.summarizer.settings import SummarizerSettings
from docsummary.summarizer.types import LengthTier, SummaryMethod, SummaryResult

logger = logging.getLogger(__name__)


class SummaryOrchestrator:
    """Single recovery point for the fallback chain. Holds no per-request state."""

    def __init__(
        self,
        generative: GenerativeSummarizer | None = None,
        settings: SummarizerSettings | None = None,
    ) -> None:
        self._generative = generative
        self._settings = settings or SummarizerSettings()

    @property
    def generative(self) -> GenerativeSummarizer | None:
        return self._generative

    async def summarize(
        self,
        text: str,
        tier: LengthTier | str,
        generative_configured: bool,
    ) -> SummaryResult:
        """
        Summarize text. Generative failures are logged and absorbed; only
        NoSentencesError from the extractive path (or too-short input) propagates.
        """
        tier = LengthTier.coerce(tier)
        if len(text.strip()) < self._settings.min_text_chars:
            raise InsufficientTextError(len(text.strip()), self._settings.min_text_chars)

        if generative_configured:
            try:
                summary = await self._summarize_generative(text, tier)
                return SummaryResult(summary_text=summary, method=SummaryMethod.GENERATIVE)
            except GenerativeError as e:
                logger.warning("Generative summary failed (%s: %s); using extractive fallback", e.code, e)

        summary = summarize_extractive(text, tier)
        return SummaryResult(summary_text=summary, method=SummaryMethod.EXTRACTIVE)

    async def _summarize_generative(self, text: str, tier: LengthTier) -> str:
        if self._generative is None:
            raise ServiceUnavailableError("Generative summarizer not provided")
        return await self._generative.summarize(text, tier)
