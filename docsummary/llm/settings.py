"""LLM layer configuration. Env prefix: LLM_. Gemini key: LLM_GEMINI_API_KEY."""
from __future__ import annotations

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from docsummary.llm.types import LLMProvider

# Value shipped in .env.example; treated as "no key".
PLACEHOLDER_API_KEY = "your_gemini_api_key_here"

DEFAULT_SAFETY_SETTINGS: list[dict[str, str]] = [
    {"category": "HARM_CATEGORY_HARASSMENT", "threshold": "BLOCK_MEDIUM_AND_ABOVE"},
    {"category": "HARM_CATEGORY_HATE_SPEECH", "threshold": "BLOCK_MEDIUM_AND_ABOVE"},
]


class LLMSettings(BaseSettings):
    """Settings for the generative summarizer's remote call. All overridable via LLM_* env vars."""

    model_config = SettingsConfigDict(
        env_prefix="LLM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    provider: LLMProvider = Field(default=LLMProvider.GEMINI, description="Provider used for summaries")
    request_timeout_s: float | None = Field(
        default=None,
        gt=0,
        description="Optional request timeout; unset means the call is awaited without one",
    )
    drop_unsupported_params: bool = Field(
        default=True,
        description="Drop params the provider does not support (e.g. top_k)",
    )

    temperature: float = Field(default=0.3, ge=0, le=2, description="Sampling temperature")
    top_p: float = Field(default=0.95, gt=0, le=1)
    top_k: int = Field(default=40, ge=1)

    gemini_enabled: bool = Field(default=True, description="Enable Gemini (Google AI Studio)")
    gemini_api_key: str | None = Field(default=None, description="API key (env: LLM_GEMINI_API_KEY)")
    gemini_model: str = Field(default="gemini/gemini-1.5-flash", description="Gemini model (gemini/ prefix)")
    gemini_safety_settings: list[dict[str, str]] | None = Field(
        default_factory=lambda: [dict(s) for s in DEFAULT_SAFETY_SETTINGS],
        description="Safety settings sent with every Gemini request",
    )

    ollama_enabled: bool = Field(default=False, description="Enable Ollama provider")
    ollama_api_base: str = Field(default="http://localhost:11434", description="Ollama server URL")
    ollama_model: str = Field(default="ollama/llama3.2", description="Ollama model (ollama/ prefix)")

    @model_validator(mode="after")
    def validate_models(self) -> "LLMSettings":
        if self.gemini_enabled and not (self.gemini_model or "").strip():
            raise ValueError("gemini_enabled=True requires non-empty gemini_model")
        if self.ollama_enabled and not (self.ollama_model or "").strip():
            raise ValueError("ollama_enabled=True requires non-empty ollama_model")
        return self

    @property
    def has_gemini_key(self) -> bool:
        key = (self.gemini_api_key or "").strip()
        return bool(key) and key != PLACEHOLDER_API_KEY

    @property
    def generative_configured(self) -> bool:
        """True when the selected provider can be called."""
        if self.provider == LLMProvider.GEMINI:
            return self.gemini_enabled and self.has_gemini_key
        if self.provider == LLMProvider.OLLAMA:
            return self.ollama_enabled
        return False

    def model_for(self, provider: LLMProvider | None = None) -> str:
        """Return the model string for the given provider (default: the selected one)."""
        provider = provider or self.provider
        if provider == LLMProvider.GEMINI:
            return self.gemini_model
        if provider == LLMProvider.OLLAMA:
            return self.ollama_model
        raise ValueError(f"Unknown provider: {provider}")
