"""Request-level error codes and the failure envelope.

Every user-visible failure carries a stable code, a fixed message and a
timestamp. Internal exception detail is logged, never returned.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable identifiers for request failures."""

    # Validation
    INVALID_INPUT = "invalid_input"
    CONTENT_TOO_LONG = "content_too_long"
    TOO_MANY_TEXTS = "too_many_texts"
    INVALID_TEXT_CONTENT = "invalid_text_content"
    NO_URLS_PROVIDED = "no_urls_provided"
    TOO_MANY_URLS = "too_many_urls"

    # Processing
    ANALYSIS_FAILED = "analysis_failed"
    CONTENT_ANALYSIS_FAILED = "content_analysis_failed"
    FACT_CHECK_FAILED = "fact_check_failed"
    SOURCE_CHECK_FAILED = "source_check_failed"
    BATCH_ANALYSIS_FAILED = "batch_analysis_failed"


# Fixed messages for processing failures
FAILURE_MESSAGES = {
    ErrorCode.ANALYSIS_FAILED: "An error occurred during content analysis",
    ErrorCode.CONTENT_ANALYSIS_FAILED: "An error occurred during content analysis",
    ErrorCode.FACT_CHECK_FAILED: "An error occurred during fact checking",
    ErrorCode.SOURCE_CHECK_FAILED: "An error occurred during source analysis",
    ErrorCode.BATCH_ANALYSIS_FAILED: "An error occurred during batch processing",
}

BATCH_ITEM_FAILURE = "Analysis failed for this text"


class RequestValidationError(Exception):
    """Raised when a request is rejected before any processing."""

    def __init__(self, code: ErrorCode, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def to_envelope(self) -> dict[str, Any]:
        return error_envelope(self.code, self.message)


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def error_envelope(code: ErrorCode, message: str = "") -> dict[str, Any]:
    """Build the failure envelope for ``code``."""
    return {
        "success": False,
        "error": code.value,
        "message": message or FAILURE_MESSAGES.get(code, ""),
        "timestamp": utc_timestamp(),
    }
