"""Summarization core: normalizer, extractive and generative summarizers, fallback orchestrator."""
from docsummary.summarizer.errors import (
    EmptyResponseError,
    GenerativeError,
    InsufficientTextError,
    NoSentencesError,
    RemoteCallError,
    ServiceUnavailableError,
    SummarizationError,
)
from docsummary.summarizer.extractive import summarize_extractive
from docsummary.summarizer.generative import GenerativeSummarizer
from docsummary.summarizer.normalize import normalize
from docsummary.summarizer.orchestrator import SummaryOrchestrator
from docsummary.summarizer.settings import SummarizerSettings
from docsummary.summarizer.types import LengthTier, SummaryMethod, SummaryResult

__all__ = [
    "normalize",
    "summarize_extractive",
    "GenerativeSummarizer",
    "SummaryOrchestrator",
    "SummarizerSettings",
    "LengthTier",
    "SummaryMethod",
    "SummaryResult",
    "SummarizationError",
    "NoSentencesError",
    "InsufficientTextError",
    "GenerativeError",
    "ServiceUnavailableError",
    "RemoteCallError",
    "EmptyResponseError",
]
