"""Application settings using Pydantic BaseSettings for environment variable management."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings

APP_VERSION = "1.0.0"


class Settings(BaseSettings):
    """
    Global application settings loaded from environment variables.

    Attributes:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Log output format (json for production, console for dev)
        max_text_length: Maximum characters accepted per analysed text
        max_batch_texts: Maximum texts accepted per batch request
        max_urls_per_request: Maximum URLs accepted per source-check request
        text_preview_length: Characters kept in batch failure previews
        max_claims: Maximum claims verified per text
        external_check_delay: Simulated fact-check API latency in seconds
        domain_analysis_delay: Simulated WHOIS/technical analysis latency in seconds
        max_concurrent_checks: Concurrency cap for claim and source checks
        random_seed: Seed for the simulated providers (None = nondeterministic)
        trim_url_punctuation: Strip sentence punctuation from extracted URLs
    """

    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    log_format: str = Field(
        default="json",
        description="Log output format: json or console"
    )
    max_text_length: int = Field(
        default=50_000,
        description="Maximum characters per analysed text"
    )
    max_batch_texts: int = Field(
        default=10,
        description="Maximum texts per batch request"
    )
    max_urls_per_request: int = Field(
        default=20,
        description="Maximum URLs per source-check request"
    )
    text_preview_length: int = Field(
        default=100,
        description="Characters kept when previewing a text in batch results"
    )
    max_claims: int = Field(
        default=8,
        description="Maximum claims extracted and verified per text"
    )
    external_check_delay: float = Field(
        default=0.1,
        description="Simulated external fact-check latency (seconds)"
    )
    domain_analysis_delay: float = Field(
        default=0.5,
        description="Simulated domain analysis latency (seconds)"
    )
    max_concurrent_checks: int = Field(
        default=8,
        description="Concurrent claim verifications / source checks"
    )
    random_seed: Optional[int] = Field(
        default=None,
        description="Seed for simulated providers; unset for nondeterministic draws"
    )
    trim_url_punctuation: bool = Field(
        default=True,
        description="Trim trailing sentence punctuation from extracted URLs"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Singleton instance - import this throughout the application
settings = Settings()
