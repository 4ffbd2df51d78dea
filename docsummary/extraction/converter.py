"""Docling conversion: uploaded PDF/image -> normalized plain text. Only module that imports docling."""
from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FuturesTimeoutError
from pathlib import Path
from typing import Any

from docsummary.extraction.errors import ExtractionError, ExtractionErrorCode
from docsummary.extraction.settings import PDF_MIME, ExtractionSettings
from docsummary.summarizer.normalize import normalize

logger = logging.getLogger(__name__)

# Lazy converter singleton per process
_converter_instance: Any = None


def _get_converter(settings: ExtractionSettings):
    global _converter_instance
    if _converter_instance is not None:
        return _converter_instance
    from docling.datamodel.base_models import InputFormat
    from docling.datamodel.pipeline_options import PdfPipelineOptions
    from docling.document_converter import DocumentConverter, PdfFormatOption

    pdf_options = PdfPipelineOptions(do_ocr=settings.do_ocr)
    _converter_instance = DocumentConverter(
        allowed_formats=[InputFormat.PDF, InputFormat.IMAGE],
        format_options={InputFormat.PDF: PdfFormatOption(pipeline_options=pdf_options)},
    )
    return _converter_instance


def check_upload(mime_type: str | None, size_bytes: int, settings: ExtractionSettings) -> None:
    """Reject unsupported types and oversized files before conversion."""
    if not mime_type or mime_type not in settings.allowed_mime_types:
        raise ExtractionError(
            "Invalid file type. Only PDF, JPG, PNG files are allowed.",
            code=ExtractionErrorCode.UNSUPPORTED_TYPE,
        )
    if size_bytes > settings.max_file_size_bytes:
        raise ExtractionError(
            f"File size {size_bytes} exceeds max {settings.max_file_size_bytes}",
            code=ExtractionErrorCode.FILE_TOO_LARGE,
        )


def extract_text(path: Path, mime_type: str, settings: ExtractionSettings | None = None) -> str:
    """Convert the file with docling and return normalized text. Raises ExtractionError."""
    settings = settings or ExtractionSettings()
    path = Path(path)
    try:
        size = path.stat().st_size
    except OSError as e:
        raise ExtractionError(str(e)[:4096], code=ExtractionErrorCode.STORAGE_READ_FAILED) from e
    check_upload(mime_type, size, settings)

    kind = "PDF" if mime_type == PDF_MIME else "OCR"
    logger.info("Starting %s text extraction: %s", kind, path.name)
    converter = _get_converter(settings)

    def _do_convert() -> Any:
        return converter.convert(
            path,
            max_file_size=settings.max_file_size_bytes,
            max_num_pages=settings.max_num_pages,
        )

    t0 = time.perf_counter()
    ex = ThreadPoolExecutor(max_workers=1)
    try:
        result = ex.submit(_do_convert).result(timeout=settings.parse_timeout_seconds)
    except FuturesTimeoutError as e:
        raise ExtractionError(
            f"Parse exceeded {settings.parse_timeout_seconds}s",
            code=ExtractionErrorCode.TIMEOUT_PARSE,
        ) from e
    except Exception as e:  # noqa: BLE001
        raise ExtractionError(
            f"{kind} processing failed: {str(e)[:4096]}",
            code=ExtractionErrorCode.PARSE_FAILED,
        ) from e
    finally:
        ex.shutdown(wait=False)

    document = getattr(result, "document", None)
    if document is None:
        raise ExtractionError("Conversion produced no document", code=ExtractionErrorCode.PARSE_FAILED)

    text = normalize(document.export_to_text())
    logger.info(
        "%s extraction complete: %d characters in %.2fs",
        kind,
        len(text),
        time.perf_counter() - t0,
    )
    return text


class DoclingTextExtractor:
    """TextExtractorPort backed by docling."""

    def __init__(self, settings: ExtractionSettings | None = None) -> None:
        self._settings = settings or ExtractionSettings()

    @property
    def settings(self) -> ExtractionSettings:
        return self._settings

    def extract(self, path: Path, mime_type: str) -> str:
        return extract_text(path, mime_type, self._settings)
