"""Provider adapters: build kwargs for Gemini and Ollama from settings."""
from __future__ import annotations

from typing import Any

from docsummary.llm.providers.gemini import gemini_kwargs
from docsummary.llm.providers.ollama import ollama_kwargs
from docsummary.llm.settings import LLMSettings
from docsummary.llm.types import LLMProvider


def provider_kwargs(settings: LLMSettings, provider: LLMProvider | None = None) -> dict[str, Any]:
    """Kwargs (model, api_key / api_base) for the given or selected provider."""
    provider = provider or settings.provider
    if provider == LLMProvider.OLLAMA:
        return ollama_kwargs(settings)
    return gemini_kwargs(settings)


__all__ = ["gemini_kwargs", "ollama_kwargs", "provider_kwargs"]
