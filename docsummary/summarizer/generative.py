"""Generative summarizer: one remote text-generation call per summary, no retries."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from docsummary.llm.client_litellm import LiteLLMClient
from docsummary.llm.errors import LLMError
from docsummary.llm.ports import LLMClientPort
from docsummary.llm.providers import provider_kwargs
from docsummary.llm.settings import LLMSettings
from docsummary.llm.telemetry import log_llm_call, redact_preview
from docsummary.llm.types import LLMMessage, LLMProvider, LLMRequest
from docsummary.summarizer.errors import EmptyResponseError, RemoteCallError, ServiceUnavailableError
from docsummary.summarizer.types import LengthTier

logger = logging.getLogger(__name__)

DEFAULT_MAX_INPUT_CHARS = 8000
TRUNCATION_MARKER = "..."


@dataclass(frozen=True)
class TierPrompt:
    instruction: str
    max_output_tokens: int


TIER_PROMPTS: dict[LengthTier, TierPrompt] = {
    LengthTier.SHORT: TierPrompt("in 2-3 concise sentences (50-80 words)", 100),
    LengthTier.MEDIUM: TierPrompt("in a well-structured paragraph (120-200 words)", 250),
    LengthTier.LONG: TierPrompt("in a comprehensive paragraph (250-400 words)", 450),
}


def truncate_input(text: str, max_chars: int = DEFAULT_MAX_INPUT_CHARS) -> str:
    if len(text) <= max_chars:
        return text
    return text[:max_chars] + TRUNCATION_MARKER


def build_prompt(text: str, tier: LengthTier, max_chars: int = DEFAULT_MAX_INPUT_CHARS) -> str:
    instruction = TIER_PROMPTS[tier].instruction
    return (
        f"Please provide an intelligent summary of the following document {instruction}. "
        "Focus on the key points, main arguments, and essential information. "
        "Make the summary coherent, informative, and well-written:\n\n"
        f"Document text:\n{truncate_input(text, max_chars)}"
    )


def build_request(
    text: str,
    tier: LengthTier,
    settings: LLMSettings,
    max_chars: int = DEFAULT_MAX_INPUT_CHARS,
) -> LLMRequest:
    """Request for one summary; sampling params come from settings, token ceiling from the tier."""
    return LLMRequest(
        messages=[LLMMessage(role="user", content=build_prompt(text, tier, max_chars))],
        temperature=settings.temperature,
        max_output_tokens=TIER_PROMPTS[tier].max_output_tokens,
        top_p=settings.top_p,
        top_k=settings.top_k,
        safety_settings=settings.gemini_safety_settings if settings.provider == LLMProvider.GEMINI else None,
    )


class GenerativeSummarizer:
    """Wraps the LLM client with tier-to-prompt mapping. Caller owns timeouts and fallback."""

    def __init__(
        self,
        settings: LLMSettings,
        *,
        client: LLMClientPort | None = None,
        max_input_chars: int = DEFAULT_MAX_INPUT_CHARS,
    ) -> None:
        self._settings = settings
        self._client = client or LiteLLMClient(drop_params=settings.drop_unsupported_params)
        self._max_input_chars = max_input_chars

    @property
    def configured(self) -> bool:
        return self._settings.generative_configured

    async def summarize(self, text: str, tier: LengthTier | str) -> str:
        """Return the trimmed model output.

        Raises ServiceUnavailableError, RemoteCallError or EmptyResponseError.
        """
        if not self.configured:
            raise ServiceUnavailableError()
        tier = LengthTier.coerce(tier)
        provider = self._settings.provider
        kwargs = provider_kwargs(self._settings, provider)
        req = build_request(text, tier, self._settings, self._max_input_chars)

        logger.info("Generating summary with %s (%s)", kwargs["model"], tier.value)
        try:
            resp = await self._client.acompletion(
                provider,
                kwargs["model"],
                req,
                timeout_s=self._settings.request_timeout_s,
                api_base=kwargs.get("api_base"),
                api_key=kwargs.get("api_key"),
            )
        except Exception as e:  # noqa: BLE001
            # Injected clients may break the port contract; anything not an LLMError is UNKNOWN.
            if isinstance(e, LLMError):
                llm_code, message = e.code, str(e)
            else:
                llm_code, message = "UNKNOWN", redact_preview(str(e)) or type(e).__name__
            log_llm_call(
                provider=provider.value,
                model=kwargs["model"],
                latency_ms=0,
                status="FAILED",
                stage="summarize",
                error_code=llm_code,
            )
            raise RemoteCallError(message, llm_code=llm_code) from e

        summary = (resp.text or "").strip()
        log_llm_call(
            provider=resp.provider.value,
            model=resp.model,
            latency_ms=resp.latency_ms,
            status="SUCCEEDED" if summary else "EMPTY",
            stage="summarize",
            output_chars=len(summary),
        )
        if not summary:
            raise EmptyResponseError()
        return summary
