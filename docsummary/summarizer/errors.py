"""Summarization exceptions. Generative errors are always recovered by the orchestrator."""
from __future__ import annotations


class SummarizationError(Exception):
    """Base for summarization failures."""

    def __init__(self, message: str, *, code: str = "SUMMARIZATION_ERROR") -> None:
        super().__init__(message)
        self.code = code


class NoSentencesError(SummarizationError):
    """No sentence survived the minimum-viable-sentence filter. Terminal."""

    def __init__(self, message: str = "No valid sentences found for summarization") -> None:
        super().__init__(message, code="NO_SENTENCES")


class InsufficientTextError(SummarizationError):
    """Input is shorter than the minimum summarizable length."""

    def __init__(self, length: int, minimum: int) -> None:
        super().__init__(
            f"Document contains insufficient text for summarization ({length} < {minimum} characters)",
            code="INSUFFICIENT_TEXT",
        )
        self.length = length
        self.minimum = minimum


class GenerativeError(SummarizationError):
    """Base for generative-path failures."""


class ServiceUnavailableError(GenerativeError):
    """No text-generation provider is configured."""

    def __init__(self, message: str = "Generative summarizer not configured") -> None:
        super().__init__(message, code="SERVICE_UNAVAILABLE")


class RemoteCallError(GenerativeError):
    """Transport or API failure of the remote call. llm_code keeps the LLMError code."""

    def __init__(self, message: str, *, llm_code: str = "UNKNOWN") -> None:
        super().__init__(message, code="REMOTE_CALL_FAILED")
        self.llm_code = llm_code


class EmptyResponseError(GenerativeError):
    """The remote call succeeded but returned blank text."""

    def __init__(self, message: str = "Empty response from text-generation service") -> None:
        super().__init__(message, code="EMPTY_RESPONSE")
