"""Schema package for content, fact-check, source and credibility results.

This package provides Pydantic models for every result the analyzers
produce. Result models are frozen: they are built once per analysis and
never mutated afterwards.

Primary exports:
- ContentAnalysis: tone, clickbait score, entities, suspicious patterns
- FactCheckSummary / FactCheckResult: claim-level verification
- SourceReliability / SourceAssessment: per-domain and aggregate reliability
- CredibilityScore: final weighted verdict with risk and explanation data

Usage:
    from truthguard.schemas import CredibilityScore, Classification
    if score.classification is Classification.FAKE:
        ...
"""

from truthguard.schemas.content_schema import (
    ContentAnalysis,
    ContentEntity,
    EntityType,
    Tone,
)
from truthguard.schemas.fact_check_schema import (
    ClaimStatus,
    FactCheckResult,
    FactCheckSummary,
)
from truthguard.schemas.source_schema import (
    BiasRating,
    FactualReporting,
    SourceAssessment,
    SourceMetadata,
    SourceReliability,
    SourceRisk,
)
from truthguard.schemas.credibility_schema import (
    Classification,
    CredibilityComparison,
    CredibilityScore,
    DetailedAnalysis,
    ReliabilityDistribution,
    RiskAssessment,
    RiskLevel,
    ScoreBreakdown,
    ScoringWeights,
    WeightedScores,
)

__all__ = [
    # Content
    "ContentAnalysis",
    "ContentEntity",
    "EntityType",
    "Tone",
    # Fact check
    "ClaimStatus",
    "FactCheckResult",
    "FactCheckSummary",
    # Sources
    "BiasRating",
    "FactualReporting",
    "SourceAssessment",
    "SourceMetadata",
    "SourceReliability",
    "SourceRisk",
    # Credibility
    "Classification",
    "CredibilityComparison",
    "CredibilityScore",
    "DetailedAnalysis",
    "ReliabilityDistribution",
    "RiskAssessment",
    "RiskLevel",
    "ScoreBreakdown",
    "ScoringWeights",
    "WeightedScores",
]
