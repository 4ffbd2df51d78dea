"""Gemini (Google AI Studio) provider: build LiteLLM kwargs. API key passed explicitly."""
from __future__ import annotations

from typing import Any

from docsummary.llm.settings import LLMSettings


def gemini_kwargs(settings: LLMSettings) -> dict[str, Any]:
    """Build provider kwargs for Gemini. Pass api_key explicitly (no os.environ in adapter)."""
    out: dict[str, Any] = {
        "model": settings.gemini_model,
    }
    if settings.has_gemini_key:
        out["api_key"] = settings.gemini_api_key
    return out
