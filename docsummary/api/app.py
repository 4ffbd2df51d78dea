"""Flask app factory: wires settings, extractor and orchestrator into the summarize blueprint."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException, NotFound, RequestEntityTooLarge

from docsummary.api.settings import AppSettings
from docsummary.api.summarize import bp as summarize_bp
from docsummary.extraction.converter import DoclingTextExtractor
from docsummary.extraction.ports import TextExtractorPort
from docsummary.extraction.settings import ExtractionSettings
from docsummary.llm.settings import LLMSettings
from docsummary.summarizer.factory import create_orchestrator
from docsummary.summarizer.orchestrator import SummaryOrchestrator
from docsummary.summarizer.settings import SummarizerSettings

logger = logging.getLogger(__name__)


@dataclass
class ApiServices:
    """Per-app collaborators, stored in app.extensions["docsummary"]."""

    app_settings: AppSettings
    llm_settings: LLMSettings
    summarizer_settings: SummarizerSettings
    extraction_settings: ExtractionSettings
    extractor: TextExtractorPort
    orchestrator: SummaryOrchestrator

    @property
    def generative_configured(self) -> bool:
        return self.llm_settings.generative_configured and self.orchestrator.generative is not None


def create_app(
    settings: AppSettings | None = None,
    *,
    llm_settings: LLMSettings | None = None,
    summarizer_settings: SummarizerSettings | None = None,
    extraction_settings: ExtractionSettings | None = None,
    extractor: TextExtractorPort | None = None,
    orchestrator: SummaryOrchestrator | None = None,
) -> Flask:
    settings = settings or AppSettings()
    llm_settings = llm_settings or LLMSettings()
    summarizer_settings = summarizer_settings or SummarizerSettings()
    extraction_settings = extraction_settings or ExtractionSettings()

    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = extraction_settings.max_file_size_bytes + settings.multipart_overhead_bytes
    app.extensions["docsummary"] = ApiServices(
        app_settings=settings,
        llm_settings=llm_settings,
        summarizer_settings=summarizer_settings,
        extraction_settings=extraction_settings,
        extractor=extractor or DoclingTextExtractor(extraction_settings),
        orchestrator=orchestrator or create_orchestrator(llm_settings, summarizer_settings),
    )
    app.register_blueprint(summarize_bp)

    @app.before_request
    def _preflight():
        if request.method == "OPTIONS":
            return "", 204
        return None

    @app.after_request
    def _cors_headers(response):
        response.headers["Access-Control-Allow-Origin"] = settings.frontend_url
        response.headers["Access-Control-Allow-Credentials"] = "true"
        response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
        response.headers["Access-Control-Allow-Headers"] = "Content-Type"
        return response

    @app.errorhandler(RequestEntityTooLarge)
    def _too_large(_e):
        mb = extraction_settings.max_file_size_bytes // (1024 * 1024)
        return jsonify({"error": f"File too large. Maximum size allowed is {mb}MB.", "success": False}), 400

    @app.errorhandler(NotFound)
    def _not_found(_e):
        return jsonify(
            {"error": "Endpoint not found", "message": "The requested API endpoint does not exist"}
        ), 404

    @app.errorhandler(HTTPException)
    def _http_error(e: HTTPException):
        return jsonify({"error": e.description, "success": False}), e.code

    @app.errorhandler(Exception)
    def _unhandled(e: Exception):
        logger.exception("Unhandled error: %s", e)
        return jsonify({"error": "Internal server error. Please try again.", "success": False}), 500

    methods = ["Generative", "Extractive"] if app.extensions["docsummary"].generative_configured else ["Extractive"]
    logger.info("Summarization methods available: %s", ", ".join(methods))
    return app
