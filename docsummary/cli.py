"""CLI harness: summarize a local file, run the API server, show available methods."""
from __future__ import annotations

import argparse
import asyncio
import logging
import mimetypes
import sys
from pathlib import Path

from docsummary.api.settings import AppSettings
from docsummary.extraction.converter import extract_text
from docsummary.extraction.errors import ExtractionError
from docsummary.extraction.settings import ExtractionSettings
from docsummary.llm.settings import LLMSettings
from docsummary.summarizer.errors import SummarizationError
from docsummary.summarizer.factory import create_orchestrator
from docsummary.summarizer.settings import SummarizerSettings
from docsummary.summarizer.types import LengthTier

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    numeric = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=numeric, format=LOG_FORMAT, handlers=[logging.StreamHandler(sys.stdout)])
    # basicConfig is a no-op once the root logger has handlers.
    logging.getLogger().setLevel(numeric)


def _cmd_summarize(args: argparse.Namespace) -> int:
    file_path = Path(args.file).resolve()
    if not file_path.exists():
        print(f"Error: file not found: {file_path}", file=sys.stderr)
        return 1
    mime_type = args.mime or mimetypes.guess_type(file_path.name)[0] or ""

    llm_settings = LLMSettings()
    orch = create_orchestrator(llm_settings, SummarizerSettings())
    try:
        text = extract_text(file_path, mime_type, ExtractionSettings())
        result = asyncio.run(orch.summarize(text, args.length, llm_settings.generative_configured))
    except (ExtractionError, SummarizationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(result.summary_text)
    print(f"\nmethod={result.method.value}")
    return 0


def _cmd_serve(args: argparse.Namespace) -> int:
    from docsummary.api.app import create_app

    settings = AppSettings()
    app = create_app(settings)
    app.run(host=args.host or settings.host, port=args.port or settings.port)
    return 0


def _cmd_status(args: argparse.Namespace) -> int:
    llm_settings = LLMSettings()
    if llm_settings.generative_configured:
        print(f"Generative: available ({llm_settings.model_for()})")
    else:
        print("Generative: not configured (set LLM_GEMINI_API_KEY)")
    print("Extractive: always available")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="docsummary", description="Document summary assistant")
    parser.add_argument("--log-level", help="Overrides APP_LOG_LEVEL (default INFO)")
    sub = parser.add_subparsers(dest="command", required=True)

    p_sum = sub.add_parser("summarize", help="Summarize a PDF or image")
    p_sum.add_argument("file")
    p_sum.add_argument("--length", choices=[t.value for t in LengthTier], default=LengthTier.MEDIUM.value)
    p_sum.add_argument("--mime", help="Override the detected MIME type")
    p_sum.set_defaults(func=_cmd_summarize)

    p_serve = sub.add_parser("serve", help="Run the HTTP API")
    p_serve.add_argument("--host")
    p_serve.add_argument("--port", type=int)
    p_serve.set_defaults(func=_cmd_serve)

    p_status = sub.add_parser("status", help="Show available summarization methods")
    p_status.set_defaults(func=_cmd_status)

    args = parser.parse_args(argv)
    configure_logging(args.log_level or AppSettings().log_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
