"""Extraction error codes and exception."""
from enum import Enum


class ExtractionErrorCode(str, Enum):
    UNSUPPORTED_TYPE = "UNSUPPORTED_TYPE"
    FILE_TOO_LARGE = "FILE_TOO_LARGE"
    STORAGE_READ_FAILED = "STORAGE_READ_FAILED"
    PARSE_FAILED = "PARSE_FAILED"
    TIMEOUT_PARSE = "TIMEOUT_PARSE"


class ExtractionError(Exception):
    """Text could not be extracted from the uploaded file."""

    def __init__(self, message: str, *, code: ExtractionErrorCode = ExtractionErrorCode.PARSE_FAILED) -> None:
        super().__init__(message)
        self.code = code
