"""Extraction configuration (Pydantic settings)."""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PDF_MIME = "application/pdf"
IMAGE_MIMES = ("image/jpeg", "image/jpg", "image/png")


class ExtractionSettings(BaseSettings):
    """Upload limits and parse guardrails. Env prefix EXTRACT_."""

    model_config = SettingsConfigDict(
        env_prefix="EXTRACT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    allowed_mime_types: list[str] = Field(
        default=[PDF_MIME, *IMAGE_MIMES],
        description="Accepted upload types",
    )
    max_file_size_bytes: int = Field(default=10 * 1024 * 1024, description="Max upload size (10 MB)")
    max_num_pages: int = Field(default=200, description="Max pages per document")
    parse_timeout_seconds: float = Field(default=300.0, gt=0, description="Timeout for conversion + OCR")
    do_ocr: bool = Field(default=True, description="Run OCR on images and scanned pages")
