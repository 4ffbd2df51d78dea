"""Extraction module: uploaded PDF/image -> normalized text via docling (PDF parsing + OCR)."""
from docsummary.extraction.converter import DoclingTextExtractor, check_upload, extract_text
from docsummary.extraction.errors import ExtractionError, ExtractionErrorCode
from docsummary.extraction.ports import TextExtractorPort
from docsummary.extraction.settings import ExtractionSettings

__all__ = [
    "DoclingTextExtractor",
    "ExtractionError",
    "ExtractionErrorCode",
    "ExtractionSettings",
    "TextExtractorPort",
    "check_upload",
    "extract_text",
]
