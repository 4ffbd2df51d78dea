"""HTTP app configuration. Env prefix: APP_."""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Server, CORS and response settings."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    service_name: str = Field(default="Document Summary Assistant API")
    version: str = Field(default="2.0.0")
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=5000, ge=1, le=65535)
    frontend_url: str = Field(default="http://localhost:3000", description="Allowed CORS origin")
    log_level: str = Field(default="INFO")
    original_preview_chars: int = Field(default=500, ge=0, description="Extracted text echoed back in responses")
    multipart_overhead_bytes: int = Field(
        default=64 * 1024,
        description="Slack added to the file size limit for form fields and multipart boundaries",
    )
