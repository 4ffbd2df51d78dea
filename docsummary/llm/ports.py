"""Port interface for the LLM layer. The summarizer depends on this, not on LiteLLM."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from docsummary.llm.types import LLMProvider, LLMRequest, LLMResponse


@runtime_checkable
class LLMClientPort(Protocol):
    """Low-level, provider-agnostic completion."""

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
        """Execute one completion for the given provider/model. Raises LLMError on failure."""
        ...
