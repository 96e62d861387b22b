"""Tests for FactVerifier.

Tests cover:
- Status resolution priority across the three signals
- Confidence formula
- Source prioritization, evidence and contradictions
- Aggregation and the no-claims case
- Concurrency limits, ordering and failure propagation
"""

from unittest.mock import AsyncMock

import pytest

from truthguard.analyzers.facts.fact_verifier import FactVerifier
from truthguard.config.knowledge_base import STATUS_CREDIBILITY_POINTS
from truthguard.schemas import ClaimStatus, FactCheckResult

from conftest import FixedCrossReference, FixedExternalChecker


NEUTRAL_CLAIM = "The weather is nice today in town."


def _verifier(
    status: str = "unverified",
    confidence: float = 0.5,
    supporting: int = 1,
    contradicting: int = 0,
) -> FactVerifier:
    return FactVerifier(
        external_checker=FixedExternalChecker(status, confidence),
        cross_referencer=FixedCrossReference(supporting, contradicting, 2),
    )


def _result(status: ClaimStatus) -> FactCheckResult:
    return FactCheckResult(claim="claim text here", status=status, confidence=0.5)


# ── Status Resolution ────────────────────────────────────────────────────


class TestStatus:
    @pytest.mark.asyncio
    async def test_unverified_by_default(self, fact_verifier: FactVerifier) -> None:
        result = await fact_verifier.verify_claim(NEUTRAL_CLAIM)
        assert result.status == ClaimStatus.UNVERIFIED

    @pytest.mark.asyncio
    async def test_knowledge_base_match_verifies(self, fact_verifier: FactVerifier) -> None:
        result = await fact_verifier.verify_claim("COVID-19 vaccines are safe for most adults")
        assert result.status == ClaimStatus.VERIFIED

    @pytest.mark.asyncio
    async def test_confident_external_check_verifies(self) -> None:
        result = await _verifier("verified", 0.9).verify_claim(NEUTRAL_CLAIM)
        assert result.status == ClaimStatus.VERIFIED

    @pytest.mark.asyncio
    async def test_external_check_at_threshold_does_not_verify(self) -> None:
        result = await _verifier("verified", 0.85).verify_claim(NEUTRAL_CLAIM)
        assert result.status == ClaimStatus.UNVERIFIED

    @pytest.mark.asyncio
    async def test_more_contradicting_than_supporting_disputes(self) -> None:
        result = await _verifier(supporting=1, contradicting=2).verify_claim(NEUTRAL_CLAIM)
        assert result.status == ClaimStatus.DISPUTED

    @pytest.mark.asyncio
    async def test_three_supporting_verifies(self) -> None:
        result = await _verifier(supporting=3).verify_claim(NEUTRAL_CLAIM)
        assert result.status == ClaimStatus.VERIFIED

    @pytest.mark.asyncio
    async def test_any_contradicting_disputes(self) -> None:
        result = await _verifier(supporting=2, contradicting=1).verify_claim(NEUTRAL_CLAIM)
        assert result.status == ClaimStatus.DISPUTED

    @pytest.mark.asyncio
    async def test_external_dispute(self) -> None:
        result = await _verifier("disputed", 0.88).verify_claim(NEUTRAL_CLAIM)
        assert result.status == ClaimStatus.DISPUTED


# ── Confidence ───────────────────────────────────────────────────────────


class TestConfidence:
    @pytest.mark.asyncio
    async def test_baseline_confidence(self, fact_verifier: FactVerifier) -> None:
        # (max(0.5, 0.5) + 1/(1+0+1)) / 2
        result = await fact_verifier.verify_claim(NEUTRAL_CLAIM)
        assert result.confidence == 0.5

    @pytest.mark.asyncio
    async def test_knowledge_base_confidence_dominates(self, fact_verifier: FactVerifier) -> None:
        # (0.98 + 0.5) / 2
        result = await fact_verifier.verify_claim("COVID-19 vaccines are safe for most adults")
        assert result.confidence == 0.74

    @pytest.mark.asyncio
    async def test_rounded_to_two_decimals(self) -> None:
        # (0.9 + 2/(2+0+1)) / 2 = 0.78333...
        result = await _verifier("verified", 0.9, supporting=2).verify_claim(NEUTRAL_CLAIM)
        assert result.confidence == 0.78


# ── Sources, Evidence, Contradictions ────────────────────────────────────


class TestAnnotations:
    @pytest.mark.asyncio
    async def test_default_sources(self, fact_verifier: FactVerifier) -> None:
        result = await fact_verifier.verify_claim(NEUTRAL_CLAIM)
        assert result.sources == ["reuters.com", "apnews.com", "bbc.com", "npr.org"]

    @pytest.mark.asyncio
    async def test_health_sources_promoted(self, fact_verifier: FactVerifier) -> None:
        result = await fact_verifier.verify_claim("COVID-19 vaccines are safe for most adults")
        assert result.sources == ["cdc.gov", "who.int", "nature.com", "reuters.com"]

    @pytest.mark.asyncio
    async def test_climate_sources_promoted(self, fact_verifier: FactVerifier) -> None:
        result = await fact_verifier.verify_claim("Climate change is a hoax invented in 2012")
        assert result.sources == ["nasa.gov", "nature.com", "science.org", "reuters.com"]
        assert result.contradictions == [
            "Scientific consensus strongly supports climate change reality"
        ]

    @pytest.mark.asyncio
    async def test_knowledge_base_evidence(self, fact_verifier: FactVerifier) -> None:
        result = await fact_verifier.verify_claim("COVID-19 vaccines are safe for most adults")
        assert result.evidence == [
            "Verified against established scientific consensus",
            "Supported by 3 authoritative sources",
            "Last updated: 2024-01-15",
        ]

    @pytest.mark.asyncio
    async def test_keyword_evidence(self, fact_verifier: FactVerifier) -> None:
        result = await fact_verifier.verify_claim("New research data is published")
        assert result.evidence == [
            "Cross-referenced with peer-reviewed publications",
            "Statistical claims verified against official databases",
        ]

    @pytest.mark.asyncio
    async def test_5g_contradiction(self, fact_verifier: FactVerifier) -> None:
        result = await fact_verifier.verify_claim("Studies claim 5G towers cause illness in 2020")
        assert "No scientific evidence supports 5G health risks" in result.contradictions

    @pytest.mark.asyncio
    async def test_vaccine_contradiction(self, fact_verifier: FactVerifier) -> None:
        result = await fact_verifier.verify_claim("The vaccine is dangerous for children")
        assert result.contradictions == ["Multiple studies have debunked vaccine-autism links"]


# ── Aggregation ──────────────────────────────────────────────────────────


class TestSummary:
    def test_weighted_average(self) -> None:
        summary = FactVerifier.summarize([
            _result(ClaimStatus.VERIFIED),
            _result(ClaimStatus.DISPUTED),
            _result(ClaimStatus.UNVERIFIED),
        ])
        # (100 + 50 + 25) / 3 = 58.33
        assert summary.overall_credibility == 58
        assert summary.verified_claims == 1
        assert summary.disputed_claims == 1
        assert summary.unverified_claims == 1
        assert summary.false_claims == 0
        assert summary.total_claims == 3

    def test_false_claims_score_zero(self) -> None:
        summary = FactVerifier.summarize([_result(ClaimStatus.FALSE)])
        assert summary.overall_credibility == 0

    def test_no_claims_is_neutral(self) -> None:
        summary = FactVerifier.summarize([])
        assert summary.overall_credibility == 50
        assert summary.total_claims == 0

    def test_status_points_read_only(self) -> None:
        with pytest.raises(TypeError):
            STATUS_CREDIBILITY_POINTS["false"] = 100
        assert STATUS_CREDIBILITY_POINTS["false"] == 0

    @pytest.mark.asyncio
    async def test_verify_text_without_claims(self, fact_verifier: FactVerifier) -> None:
        summary = await fact_verifier.verify("Hello there.")
        assert summary.overall_credibility == 50
        assert summary.detailed_results == []


# ── Orchestration ────────────────────────────────────────────────────────


class TestVerify:
    @pytest.mark.asyncio
    async def test_results_keep_claim_order(
        self, fact_verifier: FactVerifier, external_checker: FixedExternalChecker
    ) -> None:
        text = " ".join(f"Claim number {i} is listed here." for i in range(10))
        summary = await fact_verifier.verify(text)
        assert len(summary.detailed_results) == 8
        assert [r.claim for r in summary.detailed_results] == [
            f"Claim number {i} is listed here" for i in range(8)
        ]
        assert len(external_checker.claims) == 8

    @pytest.mark.asyncio
    async def test_success_counted(self, fact_verifier: FactVerifier) -> None:
        await fact_verifier.verify(NEUTRAL_CLAIM)
        assert fact_verifier.get_stats()["processed_count"] == 1

    @pytest.mark.asyncio
    async def test_failure_propagates(self, fact_verifier: FactVerifier) -> None:
        fact_verifier.external_checker.check = AsyncMock(side_effect=RuntimeError("api down"))
        with pytest.raises(RuntimeError):
            await fact_verifier.verify(NEUTRAL_CLAIM)
        assert fact_verifier.get_stats()["error_count"] == 1

    def test_default_concurrency(self) -> None:
        assert FactVerifier().max_concurrency == 8
