"""Credibility scoring schemas.

CredibilityScore is the final output of the scoring pipeline: computed once
per analysis request and frozen after construction. Every numeric field is
range-constrained so out-of-range values fail at construction instead of
reaching consumers.
"""

from enum import Enum
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, Field

from truthguard.config.scoring import DEFAULT_WEIGHTS


class Classification(str, Enum):
    """Three-way verdict derived from overall_score (>=70, >=40, else)."""

    RELIABLE = "Reliable"
    SUSPICIOUS = "Suspicious"
    FAKE = "Fake"


class RiskLevel(str, Enum):
    """Severity of relying on the analysed content."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ScoringWeights(BaseModel):
    """Component weights and adjustment factors.

    Caller-supplied weights are shallow-merged over the defaults; the three
    component weights are not required to sum to 1.0.
    """

    content_analysis: float = Field(default=DEFAULT_WEIGHTS["content_analysis"])
    fact_verification: float = Field(default=DEFAULT_WEIGHTS["fact_verification"])
    source_reliability: float = Field(default=DEFAULT_WEIGHTS["source_reliability"])
    bias_penalty: float = Field(default=DEFAULT_WEIGHTS["bias_penalty"])
    recency_bonus: float = Field(default=DEFAULT_WEIGHTS["recency_bonus"])

    model_config = {"frozen": True}

    def merged(
        self,
        overrides: Optional[Union["ScoringWeights", Mapping[str, Any]]] = None,
    ) -> "ScoringWeights":
        """Return a validated copy with ``overrides`` applied; unknown keys are ignored."""
        if overrides is None:
            return self
        if isinstance(overrides, ScoringWeights):
            return overrides
        known = {
            key: value
            for key, value in overrides.items()
            if key in type(self).model_fields
        }
        return self.model_validate({**self.model_dump(), **known})


class WeightedScores(BaseModel):
    """Component weights actually applied to a score."""

    content_weight: float
    fact_weight: float
    source_weight: float

    model_config = {"frozen": True}


class ScoreBreakdown(BaseModel):
    """Rounded component scores and the weights used to combine them."""

    content_analysis_score: int = Field(..., ge=0, le=100)
    fact_verification_score: int = Field(..., ge=0, le=100)
    source_reliability_score: int = Field(..., ge=0, le=100)
    weighted_scores: WeightedScores

    model_config = {"frozen": True}


class RiskAssessment(BaseModel):
    """Risk level with the factors behind it and paired recommendations."""

    level: RiskLevel
    factors: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}


class DetailedAnalysis(BaseModel):
    """Human-readable synthesis of every analyzer's findings."""

    content_flags: list[str] = Field(default_factory=list)
    fact_check_summary: str = ""
    source_assessment: str = ""
    credibility_indicators: list[str] = Field(default_factory=list)
    warning_signs: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}


class CredibilityScore(BaseModel):
    """Final credibility verdict for one text."""

    overall_score: int = Field(..., ge=0, le=100, description="Adjusted weighted score")
    classification: Classification
    confidence_level: float = Field(
        ..., ge=0.0, le=1.0, description="Confidence in the verdict (0.1-1.0)"
    )
    breakdown: ScoreBreakdown
    risk_assessment: RiskAssessment
    detailed_analysis: DetailedAnalysis

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "overall_score": 78,
                    "classification": "Reliable",
                    "confidence_level": 0.85,
                    "breakdown": {
                        "content_analysis_score": 80,
                        "fact_verification_score": 75,
                        "source_reliability_score": 98,
                        "weighted_scores": {
                            "content_weight": 0.3,
                            "fact_weight": 0.45,
                            "source_weight": 0.25,
                        },
                    },
                    "risk_assessment": {
                        "level": "low",
                        "factors": [],
                        "recommendations": [
                            "Generally reliable, but always good to verify important claims"
                        ],
                    },
                    "detailed_analysis": {
                        "content_flags": [],
                        "fact_check_summary": "2 verified, 1 disputed, 1 unverified, 0 false claims out of 4 total claims analyzed.",
                        "source_assessment": "1 sources analyzed with average reliability of 98%.",
                        "credibility_indicators": ["Neutral, factual tone"],
                        "warning_signs": [],
                    },
                }
            ]
        },
    }


class ReliabilityDistribution(BaseModel):
    """Count of scores per classification."""

    reliable: int = 0
    suspicious: int = 0
    fake: int = 0


class CredibilityComparison(BaseModel):
    """Comparison across several credibility scores."""

    most_reliable: CredibilityScore
    least_reliable: CredibilityScore
    average_score: int = Field(..., ge=0, le=100)
    reliability_distribution: ReliabilityDistribution
