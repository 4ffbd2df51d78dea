"""
LLM layer: one typed async interface for the remote text-generation call.
Other modules must not call LiteLLM or provider SDKs directly.
"""
from docsummary.llm.client_litellm import LiteLLMClient
from docsummary.llm.errors import (
    LLMAuthError,
    LLMBadRequest,
    LLMError,
    LLMRateLimited,
    LLMTimeout,
    LLMUnavailable,
)
from docsummary.llm.ports import LLMClientPort
from docsummary.llm.settings import LLMSettings
from docsummary.llm.types import (
    LLMMessage,
    LLMProvider,
    LLMRequest,
    LLMResponse,
    LLMUsage,
)

__all__ = [
    "LiteLLMClient",
    "LLMClientPort",
    "LLMSettings",
    "LLMRequest",
    "LLMResponse",
    "LLMMessage",
    "LLMProvider",
    "LLMUsage",
    "LLMError",
    "LLMTimeout",
    "LLMRateLimited",
    "LLMBadRequest",
    "LLMAuthError",
    "LLMUnavailable",
]
