"""Request validation, applied before any analyzer runs."""

from typing import Any, Optional, Sequence

from truthguard.config.settings import settings
from truthguard.pipeline.errors import ErrorCode, RequestValidationError


def _is_blank(text: Any) -> bool:
    return not isinstance(text, str) or not text.strip()


def validate_text(text: Any, max_length: Optional[int] = None) -> str:
    """
    Require a non-empty string no longer than ``max_length`` characters.

    Raises:
        RequestValidationError: invalid_input or content_too_long
    """
    limit = max_length or settings.max_text_length
    if _is_blank(text):
        raise RequestValidationError(
            ErrorCode.INVALID_INPUT,
            "Text content is required and must be a non-empty string",
        )
    if len(text) > limit:
        raise RequestValidationError(
            ErrorCode.CONTENT_TOO_LONG,
            f"Text content must be less than {limit:,} characters",
        )
    return text


def validate_batch(texts: Any, max_texts: Optional[int] = None) -> list[str]:
    """
    Require a non-empty list of at most ``max_texts`` non-empty strings.

    Every entry is checked before any is processed, so one bad entry
    rejects the whole batch.

    Raises:
        RequestValidationError: invalid_input, too_many_texts or
            invalid_text_content
    """
    limit = max_texts or settings.max_batch_texts
    if not isinstance(texts, (list, tuple)) or not texts:
        raise RequestValidationError(
            ErrorCode.INVALID_INPUT,
            "An array of text content is required",
        )
    if len(texts) > limit:
        raise RequestValidationError(
            ErrorCode.TOO_MANY_TEXTS,
            f"Maximum {limit} texts allowed per batch request",
        )
    for index, text in enumerate(texts):
        if _is_blank(text):
            raise RequestValidationError(
                ErrorCode.INVALID_TEXT_CONTENT,
                f"Text at index {index} is invalid or empty",
            )
    return list(texts)


def validate_urls(urls: Sequence[str], max_urls: Optional[int] = None) -> list[str]:
    """
    Require between one and ``max_urls`` URLs.

    Raises:
        RequestValidationError: no_urls_provided or too_many_urls
    """
    limit = max_urls or settings.max_urls_per_request
    if not urls:
        raise RequestValidationError(
            ErrorCode.NO_URLS_PROVIDED,
            "At least one URL is required for source analysis",
        )
    if len(urls) > limit:
        raise RequestValidationError(
            ErrorCode.TOO_MANY_URLS,
            f"Maximum {limit} URLs allowed per request",
        )
    return list(urls)
