"""Port interface for text extraction (the API depends on this, not on docling)."""
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class TextExtractorPort(Protocol):
    """Turn an uploaded file into normalized plain text."""

    def extract(self, path: Path, mime_type: str) -> str:
        """Raises ExtractionError on failure."""
        ...
