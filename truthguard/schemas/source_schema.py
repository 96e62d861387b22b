"""Source reliability schemas.

SourceReliability describes one resolved URL (one per input URL, keyed by
normalized domain); SourceAssessment aggregates a set of them.
"""

from enum import Enum

from pydantic import BaseModel, Field


class BiasRating(str, Enum):
    """Coarse political lean of a domain."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    UNKNOWN = "unknown"


class FactualReporting(str, Enum):
    """Track record of factual reporting."""

    VERY_HIGH = "very-high"
    HIGH = "high"
    MIXED = "mixed"
    LOW = "low"
    VERY_LOW = "very-low"


class SourceRisk(str, Enum):
    """Overall risk of relying on an assessed source set."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SourceMetadata(BaseModel):
    """Observed or simulated domain signals."""

    domain_age: float = Field(default=0.0, ge=0.0, description="Domain age in years")
    ssl_certificate: bool = False
    social_media_presence: bool = False
    editorial_transparency: bool = False
    correction_policy: bool = False
    funding_transparency: bool = False

    model_config = {"frozen": True}


class SourceReliability(BaseModel):
    """Reliability profile for a single source URL."""

    domain: str = Field(..., description="Normalized domain, or 'Invalid URL'")
    reliability_score: int = Field(..., ge=0, le=100, description="Reliability (0-100)")
    bias_rating: BiasRating = Field(default=BiasRating.UNKNOWN)
    factual_reporting: FactualReporting = Field(...)
    notes: list[str] = Field(default_factory=list)
    metadata: SourceMetadata = Field(default_factory=SourceMetadata)
    risk_factors: list[str] = Field(default_factory=list)
    trust_indicators: list[str] = Field(default_factory=list)

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "domain": "reuters.com",
                    "reliability_score": 98,
                    "bias_rating": "center",
                    "factual_reporting": "very-high",
                    "notes": [
                        "Tier 1: Highest reliability and editorial standards",
                        "Minimal bias, strong fact-checking protocols",
                        "Excellent source for factual information",
                    ],
                    "metadata": {
                        "domain_age": 25,
                        "ssl_certificate": True,
                        "social_media_presence": True,
                        "editorial_transparency": True,
                        "correction_policy": True,
                        "funding_transparency": True,
                    },
                    "risk_factors": [],
                    "trust_indicators": [
                        "Top-tier journalism",
                        "Strong editorial standards",
                        "Fact-checking protocols",
                    ],
                }
            ]
        },
    }


class SourceAssessment(BaseModel):
    """Aggregate reliability of a set of sources."""

    average_score: int = Field(..., ge=0, le=100, description="Rounded mean reliability")
    high_reliability_count: int = Field(default=0, ge=0, description="Sources scoring >= 80")
    medium_reliability_count: int = Field(default=0, ge=0, description="Sources scoring 50-79")
    low_reliability_count: int = Field(default=0, ge=0, description="Sources scoring < 50")
    risk_assessment: SourceRisk = Field(...)

    model_config = {"frozen": True}
