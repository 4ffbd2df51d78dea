"""Summarize API: POST /api/upload-and-summarize, GET /api/health, GET /api/status."""
from __future__ import annotations

import asyncio
import logging
import os
import tempfile
import time
from datetime import datetime, timezone
from pathlib import Path

from flask import Blueprint, current_app, jsonify, request

from docsummary.extraction.errors import ExtractionError, ExtractionErrorCode
from docsummary.summarizer.errors import InsufficientTextError, SummarizationError
from docsummary.summarizer.normalize import word_count
from docsummary.summarizer.types import LengthTier, SummaryMethod

logger = logging.getLogger(__name__)

bp = Blueprint("summarize", __name__, url_prefix="/api")

_STARTED_AT = time.monotonic()


def _services():
    return current_app.extensions["docsummary"]


def _error(message: str, status: int):
    return jsonify({"error": message, "success": False}), status


def _file_too_large_message() -> str:
    mb = _services().extraction_settings.max_file_size_bytes // (1024 * 1024)
    return f"File too large. Maximum size allowed is {mb}MB."


def _cleanup(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
        logger.info("Cleaned up file: %s", path.name)
    except OSError as e:
        logger.warning("Cleanup error for %s: %s", path.name, e)


def _available_methods() -> list[str]:
    methods = []
    if _services().generative_configured:
        methods.append(SummaryMethod.GENERATIVE.value)
    methods.append(SummaryMethod.EXTRACTIVE.value)
    return methods


@bp.route("/upload-and-summarize", methods=["POST"])
def upload_and_summarize():
    """Multipart: document (PDF/JPEG/PNG), summaryLength (short|medium|long)."""
    services = _services()
    started = time.perf_counter()

    upload = request.files.get("document")
    if upload is None or not upload.filename:
        return _error("No file uploaded", 400)

    summary_length = request.form.get("summaryLength") or services.summarizer_settings.default_tier.value
    tier = LengthTier.coerce(summary_length)
    mime_type = upload.mimetype
    logger.info("Processing file: %s (%s), summary length: %s", upload.filename, mime_type, tier.value)

    if mime_type not in services.extraction_settings.allowed_mime_types:
        return _error("Invalid file type. Only PDF, JPG, PNG files are allowed.", 400)

    fd, tmp_name = tempfile.mkstemp(prefix="document-", suffix=Path(upload.filename).suffix)
    os.close(fd)
    path = Path(tmp_name)
    try:
        upload.save(path)
        text = services.extractor.extract(path, mime_type)
        if not text.strip():
            return _error(
                "No text could be extracted from the document. "
                "Please ensure the document contains readable text.",
                400,
            )
        if len(text.strip()) < services.summarizer_settings.min_text_chars:
            return _error(
                "Document contains insufficient text for meaningful summarization. "
                "Please upload a document with more content.",
                400,
            )
        logger.info("Extracted text: %d characters", len(text))

        result = asyncio.run(
            services.orchestrator.summarize(text, tier, services.generative_configured)
        )
    except ExtractionError as e:
        if e.code == ExtractionErrorCode.FILE_TOO_LARGE:
            return _error(_file_too_large_message(), 400)
        if e.code == ExtractionErrorCode.UNSUPPORTED_TYPE:
            return _error(str(e), 400)
        logger.error("Extraction failed (%s): %s", e.code.value, e)
        return _error(str(e), 500)
    except InsufficientTextError as e:
        return _error(str(e), 400)
    except SummarizationError as e:
        logger.error("Summarization failed (%s): %s", e.code, e)
        return _error(str(e), 500)
    finally:
        _cleanup(path)

    preview_chars = services.app_settings.original_preview_chars
    original = text if len(text) <= preview_chars else text[:preview_chars] + "..."
    processing_ms = int((time.perf_counter() - started) * 1000)
    logger.info("Processing completed with %s in %dms", result.method.value, processing_ms)

    return jsonify(
        {
            "success": True,
            "data": {
                "summary": result.summary_text,
                "originalText": original,
                "summaryLength": tier.value,
                "wordCount": {
                    "original": word_count(text),
                    "summary": word_count(result.summary_text),
                },
                "processingTime": processing_ms,
                "method": result.method.value,
            },
        }
    )


@bp.route("/health", methods=["GET"])
def health():
    services = _services()
    methods = _available_methods()
    return jsonify(
        {
            "status": "OK",
            "message": f"{services.app_settings.service_name} is running",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "uptime": round(time.monotonic() - _STARTED_AT, 3),
            "availableMethods": methods,
            "activeMethod": methods[0],
            "model": services.llm_settings.model_for(),
        }
    )


@bp.route("/status", methods=["GET"])
def status():
    services = _services()
    configured = services.generative_configured
    max_mb = services.extraction_settings.max_file_size_bytes // (1024 * 1024)
    return jsonify(
        {
            "service": services.app_settings.service_name,
            "version": services.app_settings.version,
            "features": {
                "pdf_processing": True,
                "ocr_processing": True,
                "generative_summarization": configured,
                "file_upload": True,
                "extractive_summarization": True,
            },
            "limits": {
                "max_file_size": f"{max_mb}MB",
                "supported_formats": ["PDF", "JPG", "PNG"],
            },
            "ai_models": {
                "generative": "available" if configured else "not configured",
                "model": services.llm_settings.model_for(),
                "extractive": "always available",
            },
        }
    )
