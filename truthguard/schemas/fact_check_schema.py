"""Fact verification schemas.

One FactCheckResult is produced per extracted claim (at most 8 per text);
FactCheckSummary aggregates them into status counts and an overall
credibility percentage.

Status weights for overall_credibility:
- VERIFIED: 100
- DISPUTED: 50
- UNVERIFIED: 25
- FALSE: 0 (reserved; no resolution path emits it yet)
"""

from enum import Enum

from pydantic import BaseModel, Field


class ClaimStatus(str, Enum):
    """Verification status of a single claim.

    VERIFIED: Knowledge base, external check or corroborating sources agree.
    DISPUTED: Contradicting sources or a disputed external verdict.
    UNVERIFIED: No signal strong enough either way.
    FALSE: Reserved for a future refutation path.
    """

    VERIFIED = "verified"
    DISPUTED = "disputed"
    UNVERIFIED = "unverified"
    FALSE = "false"


class FactCheckResult(BaseModel):
    """Verification outcome for one claim."""

    claim: str = Field(..., description="Claim text as extracted from the input")
    status: ClaimStatus = Field(..., description="Resolved verification status")
    sources: list[str] = Field(
        default_factory=list,
        max_length=4,
        description="Fact-checking domains relevant to the claim",
    )
    confidence: float = Field(
        ..., ge=0.0, le=1.0, description="Verification confidence, two decimals"
    )
    evidence: list[str] = Field(default_factory=list, description="Supporting notes")
    contradictions: list[str] = Field(
        default_factory=list, description="Known misinformation patterns the claim matches"
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "claim": "Climate change is caused by human activities",
                    "status": "verified",
                    "sources": ["nasa.gov", "nature.com", "science.org", "reuters.com"],
                    "confidence": 0.79,
                    "evidence": [
                        "Verified against established scientific consensus",
                        "Supported by 3 authoritative sources",
                        "Last updated: 2024-01-10",
                    ],
                    "contradictions": [],
                }
            ]
        },
    }


class FactCheckSummary(BaseModel):
    """Aggregate of every claim verified in one text."""

    overall_credibility: int = Field(
        ..., ge=0, le=100, description="Status-weighted average, 50 when no claims"
    )
    verified_claims: int = Field(default=0, ge=0)
    disputed_claims: int = Field(default=0, ge=0)
    unverified_claims: int = Field(default=0, ge=0)
    false_claims: int = Field(default=0, ge=0)
    detailed_results: list[FactCheckResult] = Field(
        default_factory=list, description="Per-claim results in source order"
    )

    model_config = {"frozen": True}

    @property
    def total_claims(self) -> int:
        return len(self.detailed_results)
