"""Typed request/response models for the LLM layer (Pydantic v2)."""
from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel


class LLMProvider(str, Enum):
    """Supported text-generation providers."""

    GEMINI = "gemini"
    OLLAMA = "ollama"


class LLMMessage(BaseModel):
    """Single message in OpenAI-style format."""

    role: Literal["system", "user", "assistant"]
    content: str


class LLMRequest(BaseModel):
    """One completion request. Sampling params left as None are not sent."""

    messages: list[LLMMessage]
    temperature: float | None = None
    max_output_tokens: int | None = None
    top_p: float | None = None
    top_k: int | None = None
    safety_settings: list[dict[str, str]] | None = None


class LLMUsage(BaseModel):
    """Token usage as reported by the provider."""

    input_tokens: int = 0
    output_tokens: int = 0
    total_tokens: int = 0


class LLMResponse(BaseModel):
    """Normalized response from any provider."""

    text: str
    usage: LLMUsage | None = None
    provider: LLMProvider
    model: str
    latency_ms: int
    finish_reason: str | None = None
