"""Module-level entry points for the four credibility operations.

Each function uses a shared, lazily built analyzer so repeated calls
share processing counters. Callers validate their own input.

Usage:
    from truthguard.api import score_credibility
    score = await score_credibility(text, ["https://apnews.com/x"])
"""

from typing import Any, Mapping, Optional, Sequence

from truthguard.analyzers.content_analyzer import ContentAnalyzer
from truthguard.analyzers.facts.fact_verifier import FactVerifier
from truthguard.analyzers.scoring.credibility_scorer import CredibilityScorer
from truthguard.analyzers.sources.source_checker import SourceChecker
from truthguard.pipeline.url_utils import extract_urls
from truthguard.schemas import (
    ContentAnalysis,
    CredibilityScore,
    FactCheckSummary,
    SourceAssessment,
    SourceReliability,
)

_scorer: Optional[CredibilityScorer] = None


def _get_scorer() -> CredibilityScorer:
    """Lazy-init the shared scorer and its component analyzers."""
    global _scorer
    if _scorer is None:
        _scorer = CredibilityScorer(
            content_analyzer=ContentAnalyzer(),
            fact_verifier=FactVerifier(),
            source_checker=SourceChecker(),
        )
    return _scorer


def analyze_content(text: str) -> ContentAnalysis:
    return _get_scorer().content_analyzer.analyze(text)


async def verify_facts(text: str) -> FactCheckSummary:
    return await _get_scorer().fact_verifier.verify(text)


async def check_sources(urls: Sequence[str]) -> list[SourceReliability]:
    return await _get_scorer().source_checker.check_bulk(urls)


def aggregate_sources(sources: Sequence[SourceReliability]) -> SourceAssessment:
    return _get_scorer().source_checker.aggregate(sources)


async def score_credibility(
    text: str,
    urls: Optional[Sequence[str]] = None,
    weights: Optional[Mapping[str, Any]] = None,
) -> CredibilityScore:
    return await _get_scorer().score(text, urls, weights)


__all__ = [
    "aggregate_sources",
    "analyze_content",
    "check_sources",
    "extract_urls",
    "score_credibility",
    "verify_facts",
]
