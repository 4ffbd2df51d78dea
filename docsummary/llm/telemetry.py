"""Observability: redaction and structured logging for LLM calls."""
from __future__ import annotations

import logging
import re
from typing import Any

logger = logging.getLogger(__name__)

# Redaction: patterns to mask (never log raw)
_SECRET_PATTERNS = [
    re.compile(r"\b(?:sk-[a-zA-Z0-9]{20,})\b", re.IGNORECASE),  # OpenAI-style
    re.compile(r"\b(?:AIza[a-zA-Z0-9_-]{35})\b"),  # Google API key style
    re.compile(r"\bBearer\s+[a-zA-Z0-9_.-]+\b", re.IGNORECASE),
]
_PII_PATTERN = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Z|a-z]{2,}\b")  # email
_PREVIEW_MAX_CHARS = 200


def redact_preview(text: str) -> str:
    """Redact secrets and PII, then truncate. Use for error messages and response previews."""
    if not text:
        return ""
    out = text
    for pat in _SECRET_PATTERNS:
        out = pat.sub("[REDACTED]", out)
    out = _PII_PATTERN.sub("[EMAIL]", out)
    if len(out) > _PREVIEW_MAX_CHARS:
        out = out[:_PREVIEW_MAX_CHARS] + "..."
    return out


def log_llm_call(
    *,
    provider: str,
    model: str,
    latency_ms: int,
    status: str,
    stage: str | None = None,
    output_chars: int | None = None,
    error_code: str | None = None,
) -> None:
    """Emit structured log for one LLM call. Never log prompt text or API keys."""
    extra: dict[str, Any] = {
        "provider": provider,
        "model": model,
        "latency_ms": latency_ms,
        "status": status,
    }
    if stage is not None:
        extra["stage"] = stage
    if output_chars is not None:
        extra["output_chars"] = output_chars
    if error_code is not None:
        extra["error_code"] = error_code
    level = logging.INFO if status == "SUCCEEDED" else logging.WARNING
    logger.log(level, "llm_call %s %s status=%s latency_ms=%s", provider, model, status, latency_ms, extra=extra)
