"""Request layer: validation, URL handling, error envelopes.

Provides:
- CredibilityPipeline: analyze, analyze_content, fact_check, source_check,
  batch and health operations
- ErrorCode / RequestValidationError: stable failure codes
"""

from truthguard.pipeline.analysis_pipeline import CredibilityPipeline
from truthguard.pipeline.errors import ErrorCode, RequestValidationError, error_envelope
from truthguard.pipeline.url_utils import dedupe_urls, extract_urls

__all__ = [
    "CredibilityPipeline",
    "ErrorCode",
    "RequestValidationError",
    "dedupe_urls",
    "error_envelope",
    "extract_urls",
]
