"""Error taxonomy for the LLM layer. Codes are stable so callers can branch and log on them."""
from __future__ import annotations

from docsummary.llm.types import LLMProvider


class LLMError(Exception):
    """Base for all LLM errors. details must not leak secrets."""

    def __init__(
        self,
        message: str,
        *,
        code: str = "UNKNOWN",
        provider: LLMProvider | None = None,
        details: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.provider = provider
        self.details = details or ""


class LLMTimeout(LLMError):
    """Request timed out."""

    def __init__(self, message: str = "LLM request timed out", **kwargs: object) -> None:
        super().__init__(message, code="TIMEOUT", **kwargs)


class LLMRateLimited(LLMError):
    """Rate limit (429) or quota exceeded."""

    def __init__(self, message: str = "LLM rate limited", **kwargs: object) -> None:
        super().__init__(message, code="RATE_LIMITED", **kwargs)


class LLMBadRequest(LLMError):
    """Invalid request (e.g. params, blocked content)."""

    def __init__(self, message: str = "LLM bad request", **kwargs: object) -> None:
        super().__init__(message, code="BAD_REQUEST", **kwargs)


class LLMAuthError(LLMError):
    """Authentication or authorization failure."""

    def __init__(self, message: str = "LLM auth error", **kwargs: object) -> None:
        super().__init__(message, code="AUTH_ERROR", **kwargs)


class LLMUnavailable(LLMError):
    """Service unavailable (5xx, connection, etc.)."""

    def __init__(self, message: str = "LLM unavailable", **kwargs: object) -> None:
        super().__init__(message, code="UNAVAILABLE", **kwargs)
