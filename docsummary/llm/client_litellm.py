"""
LiteLLM client wrapper: normalize request/response, exception mapping.
One call per acompletion(); retries and fallback belong to the caller.
Exception mapping (LiteLLM → LLMError):
  - APITimeoutError / Timeout → LLMTimeout
  - RateLimitError → LLMRateLimited
  - AuthenticationError / PermissionDeniedError → LLMAuthError
  - BadRequestError / InvalidRequestError / ContentPolicyViolationError → LLMBadRequest
  - APIError / ServiceUnavailableError / APIConnectionError / InternalServerError → LLMUnavailable
  - unknown → LLMUnavailable on 5xx status or "timeout" in message, else LLMError(UNKNOWN)
"""
from __future__ import annotations

import time
from typing import Any

from litellm import acompletion

from docsummary.llm.errors import (
    LLMAuthError,
    LLMBadRequest,
    LLMError,
    LLMRateLimited,
    LLMTimeout,
    LLMUnavailable,
)
from docsummary.llm.telemetry import redact_preview
from docsummary.llm.types import LLMProvider, LLMRequest, LLMResponse, LLMUsage


def _map_exception(e: Exception, provider: LLMProvider) -> LLMError:
    """Map LiteLLM/provider exceptions to LLMError. Uses class name so it works across import paths."""
    if isinstance(e, LLMError):
        return e
    exc_name = type(e).__name__
    message = redact_preview(str(e))
    if exc_name in ("APITimeoutError", "Timeout"):
        return LLMTimeout(details=exc_name, provider=provider)
    if exc_name == "RateLimitError":
        return LLMRateLimited(details=exc_name, provider=provider)
    if exc_name in ("AuthenticationError", "PermissionDeniedError"):
        return LLMAuthError(details=exc_name, provider=provider)
    if exc_name in ("BadRequestError", "InvalidRequestError", "ContentPolicyViolationError"):
        return LLMBadRequest(message or "LLM bad request", details=exc_name, provider=provider)
    if exc_name in ("ServiceUnavailableError", "APIConnectionError", "APIError", "InternalServerError"):
        return LLMUnavailable(message or "LLM unavailable", details=exc_name, provider=provider)
    if getattr(e, "status_code", None) in (500, 502, 503, 504) or "timeout" in str(e).lower():
        return LLMUnavailable(message or "LLM unavailable", details=exc_name, provider=provider)
    return LLMError(
        message or exc_name,
        code="UNKNOWN",
        provider=provider,
        details=exc_name,
    )


def _request_to_kwargs(req: LLMRequest, model: str, timeout_s: float | None) -> dict[str, Any]:
    """Build LiteLLM completion kwargs from LLMRequest."""
    kwargs: dict[str, Any] = {
        "model": model,
        "messages": [m.model_dump() for m in req.messages],
    }
    if timeout_s is not None:
        kwargs["timeout"] = timeout_s
    if req.temperature is not None:
        kwargs["temperature"] = req.temperature
    if req.max_output_tokens is not None:
        kwargs["max_tokens"] = req.max_output_tokens
    if req.top_p is not None:
        kwargs["top_p"] = req.top_p
    if req.top_k is not None:
        kwargs["top_k"] = req.top_k
    if req.safety_settings is not None:
        kwargs["safety_settings"] = req.safety_settings
    return kwargs


def _response_from_completion(
    raw: Any,
    provider: LLMProvider,
    model: str,
    latency_ms: int,
) -> LLMResponse:
    """Build LLMResponse from LiteLLM response object."""
    text = ""
    usage = None
    finish_reason = None
    if getattr(raw, "choices", None):
        c0 = raw.choices[0]
        msg = getattr(c0, "message", None)
        if msg is not None:
            text = getattr(msg, "content", None) or ""
        else:
            text = getattr(c0, "text", None) or ""
        finish_reason = getattr(c0, "finish_reason", None)
    if getattr(raw, "usage", None):
        u = raw.usage
        usage = LLMUsage(
            input_tokens=getattr(u, "prompt_tokens", None) or 0,
            output_tokens=getattr(u, "completion_tokens", None) or 0,
            total_tokens=getattr(u, "total_tokens", None) or 0,
        )
    return LLMResponse(
        text=text,
        usage=usage,
        provider=provider,
        model=model,
        latency_ms=latency_ms,
        finish_reason=finish_reason,
    )


class LiteLLMClient:
    """Async LiteLLM wrapper: optional timeout, request/response normalization."""

    def __init__(self, *, drop_params: bool = True) -> None:
        self._drop_params = drop_params

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
        """Execute exactly one completion. Raises LLMError on failure."""
        kwargs = _request_to_kwargs(req, model, timeout_s)
        if self._drop_params:
            kwargs["drop_params"] = True
        if api_base is not None:
            kwargs["api_base"] = api_base
        if api_key is not None:
            kwargs["api_key"] = api_key

        t0 = time.perf_counter()
        try:
            raw = await acompletion(**kwargs)
            latency_ms = int((time.perf_counter() - t0) * 1000)
            return _response_from_completion(raw, provider, model, latency_ms)
        except Exception as e:  # noqa: BLE001
            raise _map_exception(e, provider) from e
