"""Abstract base class for the credibility analyzers.

Analyzers turn raw text or URLs into bounded scores and labels:
- ContentAnalyzer: text -> ContentAnalysis
- FactVerifier: text -> FactCheckSummary
- SourceChecker: URLs -> SourceReliability / SourceAssessment
- CredibilityScorer: text + URLs -> CredibilityScore

Analyzers hold only immutable configuration plus processing counters used
by the health report; all per-request state stays local to each call.
"""

import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone

from truthguard.config.logging import get_logger


class BaseAnalyzer(ABC):
    """
    Abstract base defining identification, logging and stats for analyzers.

    Attributes:
        analyzer_id: Unique UUID identifier for this analyzer instance
        name: Human-readable analyzer name
        description: Brief description of analyzer purpose
        logger: Loguru logger bound with analyzer context
        created_at: UTC timestamp of instantiation
        processed_count: Number of successfully processed requests
        error_count: Number of failed requests
    """

    def __init__(self, name: str, description: str = ""):
        self.analyzer_id = str(uuid.uuid4())
        self.name = name
        self.description = description
        self.logger = get_logger(name, analyzer_id=self.analyzer_id)
        self.created_at = datetime.now(timezone.utc)
        self.processed_count: int = 0
        self.error_count: int = 0

    @abstractmethod
    def get_capabilities(self) -> list[str]:
        """Return capability identifiers advertised in the health report."""

    def record_success(self) -> None:
        self.processed_count += 1

    def record_failure(self) -> None:
        self.error_count += 1

    def get_stats(self) -> dict:
        """
        Return processing statistics.

        Returns:
            Dict with processed_count, error_count, and error_rate.
        """
        total = self.processed_count + self.error_count
        error_rate = self.error_count / total if total > 0 else 0.0
        return {
            "processed_count": self.processed_count,
            "error_count": self.error_count,
            "error_rate": error_rate,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, id={self.analyzer_id[:8]})"
