"""Claim-level fact verification.

Verification flow per text:
1. Extract up to 8 candidate claims (ClaimExtractor)
2. For each claim, concurrently:
   a. Look the claim up in the knowledge base (KnowledgeBaseMatcher)
   b. Ask the external fact checker (ExternalFactChecker, simulated latency)
   c. Cross-reference independent sources (CrossReferenceProvider)
3. Resolve each claim's status and confidence
4. Aggregate statuses into an overall credibility percentage

Status resolution, first rule wins:
- knowledge-base match with confidence > 0.9        -> VERIFIED
- external check verified with confidence > 0.85    -> VERIFIED
- contradicting sources > supporting sources        -> DISPUTED
- supporting sources >= 3                           -> VERIFIED
- external check disputed or any contradicting      -> DISPUTED
- otherwise                                         -> UNVERIFIED

Usage:
    verifier = FactVerifier()
    summary = await verifier.verify(text)
"""

import asyncio
from typing import Iterable, Optional

from truthguard.analyzers.base_analyzer import BaseAnalyzer
from truthguard.analyzers.facts.claim_extractor import ClaimExtractor
from truthguard.analyzers.facts.knowledge_base import KnowledgeBaseMatcher
from truthguard.analyzers.facts.providers import (
    CrossReferenceProvider,
    CrossReferenceResult,
    ExternalCheckResult,
    ExternalFactChecker,
    SimulatedCrossReference,
    SimulatedExternalFactChecker,
)
from truthguard.config.knowledge_base import (
    CONTRADICTION_RULES,
    EVIDENCE_RULES,
    MAX_SOURCES_PER_CLAIM,
    NEUTRAL_CREDIBILITY,
    STATUS_CREDIBILITY_POINTS,
    TOPIC_PRIORITY_SOURCES,
    TRUSTED_SOURCES,
    KeywordRule,
    KnowledgeBaseEntry,
)
from truthguard.config.settings import settings
from truthguard.schemas import ClaimStatus, FactCheckResult, FactCheckSummary
from truthguard.utils.logging import get_structured_logger
from truthguard.utils.numeric import clamp, round_half_up, round_score


class FactVerifier(BaseAnalyzer):
    """Verifies the factual claims of a text against three independent signals.

    Attributes:
        claim_extractor: Sentence-level claim extraction
        knowledge_base: Knowledge-base matcher
        external_checker: External fact-check capability
        cross_referencer: Cross-reference capability
        trusted_sources: Default fact-checking domains
        max_concurrency: Claims verified at once
    """

    KB_VERIFIED_CONFIDENCE = 0.9
    EXTERNAL_VERIFIED_CONFIDENCE = 0.85
    MIN_SUPPORTING_SOURCES = 3
    BASE_CONFIDENCE = 0.5

    def __init__(
        self,
        claim_extractor: Optional[ClaimExtractor] = None,
        knowledge_base: Optional[KnowledgeBaseMatcher] = None,
        external_checker: Optional[ExternalFactChecker] = None,
        cross_referencer: Optional[CrossReferenceProvider] = None,
        trusted_sources: Optional[Iterable[str]] = None,
        evidence_rules: Optional[Iterable[KeywordRule]] = None,
        contradiction_rules: Optional[Iterable[KeywordRule]] = None,
        max_concurrency: Optional[int] = None,
    ):
        super().__init__(
            name="fact_verifier",
            description="Claim extraction and multi-signal verification",
        )
        self.claim_extractor = claim_extractor or ClaimExtractor()
        self.knowledge_base = knowledge_base or KnowledgeBaseMatcher()
        self.external_checker = external_checker or SimulatedExternalFactChecker()
        self.cross_referencer = cross_referencer or SimulatedCrossReference()
        self.trusted_sources = tuple(
            trusted_sources if trusted_sources is not None else TRUSTED_SOURCES
        )
        self.evidence_rules = tuple(
            evidence_rules if evidence_rules is not None else EVIDENCE_RULES
        )
        self.contradiction_rules = tuple(
            contradiction_rules if contradiction_rules is not None else CONTRADICTION_RULES
        )
        self.max_concurrency = max_concurrency or settings.max_concurrent_checks
        self._events = get_structured_logger(self.name, analyzer_id=self.analyzer_id)

    def get_capabilities(self) -> list[str]:
        return ["claim_extraction", "knowledge_base_lookup", "external_fact_check", "cross_reference"]

    async def verify(self, text: str) -> FactCheckSummary:
        """
        Verify every claim in ``text`` and aggregate the outcome.

        Args:
            text: Raw, non-empty text

        Returns:
            FactCheckSummary with status counts, overall credibility
            (50 when no claims were found) and per-claim results
        """
        try:
            results = await self.verify_claims(text)
        except Exception:
            self.record_failure()
            raise

        summary = self.summarize(results)
        self.record_success()
        self._events.info(
            "fact_check_complete",
            total_claims=summary.total_claims,
            verified=summary.verified_claims,
            disputed=summary.disputed_claims,
            unverified=summary.unverified_claims,
            overall_credibility=summary.overall_credibility,
        )
        return summary

    async def verify_claims(self, text: str) -> list[FactCheckResult]:
        """Extract claims and verify them concurrently, keeping claim order."""
        claims = self.claim_extractor.extract(text)
        if not claims:
            self.logger.debug("No factual claims extracted")
            return []

        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def verify_with_semaphore(claim: str) -> FactCheckResult:
            async with semaphore:
                return await self.verify_claim(claim)

        return list(await asyncio.gather(*[verify_with_semaphore(c) for c in claims]))

    async def verify_claim(self, claim: str) -> FactCheckResult:
        """Verify a single claim through all three signals."""
        knowledge_match = self.knowledge_base.match(claim)
        cross_reference = self.cross_referencer.cross_reference(claim)
        external_check = await self.external_checker.check(claim)

        status = self.determine_status(knowledge_match, external_check, cross_reference)
        result = FactCheckResult(
            claim=claim,
            status=status,
            sources=self.relevant_sources(claim),
            confidence=self.calculate_confidence(knowledge_match, external_check, cross_reference),
            evidence=self.gather_evidence(claim, knowledge_match),
            contradictions=self.find_contradictions(claim),
        )

        self.logger.debug(
            "Claim verified",
            claim=claim[:50],
            status=status.value,
            knowledge_match=knowledge_match.fact if knowledge_match else None,
            external_status=external_check.status,
            supporting=cross_reference.supporting_sources,
            contradicting=cross_reference.contradicting_sources,
        )
        return result

    def determine_status(
        self,
        knowledge_match: Optional[KnowledgeBaseEntry],
        external_check: ExternalCheckResult,
        cross_reference: CrossReferenceResult,
    ) -> ClaimStatus:
        if knowledge_match and knowledge_match.confidence > self.KB_VERIFIED_CONFIDENCE:
            return ClaimStatus.VERIFIED

        if (
            external_check.status == "verified"
            and external_check.confidence > self.EXTERNAL_VERIFIED_CONFIDENCE
        ):
            return ClaimStatus.VERIFIED

        supporting = cross_reference.supporting_sources
        contradicting = cross_reference.contradicting_sources

        if contradicting > supporting:
            return ClaimStatus.DISPUTED

        if supporting >= self.MIN_SUPPORTING_SOURCES:
            return ClaimStatus.VERIFIED

        if external_check.status == "disputed" or contradicting > 0:
            return ClaimStatus.DISPUTED

        return ClaimStatus.UNVERIFIED

    def calculate_confidence(
        self,
        knowledge_match: Optional[KnowledgeBaseEntry],
        external_check: ExternalCheckResult,
        cross_reference: CrossReferenceResult,
    ) -> float:
        """Mean of the strongest single-signal confidence and the support ratio."""
        confidence = self.BASE_CONFIDENCE
        if knowledge_match:
            confidence = max(confidence, knowledge_match.confidence)
        confidence = max(confidence, external_check.confidence)

        confidence = (confidence + cross_reference.support_ratio) / 2
        return clamp(round_half_up(confidence, 2), 0.0, 1.0)

    def relevant_sources(self, claim: str) -> list[str]:
        """Trusted domains for the claim, topical authorities first."""
        claim_lower = claim.lower()
        sources = list(self.trusted_sources)

        for keywords, priority in TOPIC_PRIORITY_SOURCES:
            if any(keyword in claim_lower for keyword in keywords):
                sources = list(priority) + [s for s in sources if s not in priority]
                break

        return sources[:MAX_SOURCES_PER_CLAIM]

    def gather_evidence(
        self,
        claim: str,
        knowledge_match: Optional[KnowledgeBaseEntry],
    ) -> list[str]:
        evidence = []
        if knowledge_match:
            evidence.append("Verified against established scientific consensus")
            evidence.append(f"Supported by {len(knowledge_match.sources)} authoritative sources")
            evidence.append(f"Last updated: {knowledge_match.last_updated.isoformat()}")

        claim_lower = claim.lower()
        evidence.extend(rule.message for rule in self.evidence_rules if rule.matches(claim_lower))
        return evidence

    def find_contradictions(self, claim: str) -> list[str]:
        claim_lower = claim.lower()
        return [rule.message for rule in self.contradiction_rules if rule.matches(claim_lower)]

    @staticmethod
    def summarize(results: list[FactCheckResult]) -> FactCheckSummary:
        """
        Aggregate per-claim results.

        overall_credibility = (verified*100 + disputed*50 + unverified*25
        + false*0) / total, rounded; 50 when there are no claims.
        """
        counts = {status: 0 for status in ClaimStatus}
        for result in results:
            counts[result.status] += 1

        if results:
            points = sum(
                STATUS_CREDIBILITY_POINTS[status.value] * count
                for status, count in counts.items()
            )
            credibility = round_score(points / len(results))
        else:
            credibility = NEUTRAL_CREDIBILITY

        return FactCheckSummary(
            overall_credibility=credibility,
            verified_claims=counts[ClaimStatus.VERIFIED],
            disputed_claims=counts[ClaimStatus.DISPUTED],
            unverified_claims=counts[ClaimStatus.UNVERIFIED],
            false_claims=counts[ClaimStatus.FALSE],
            detailed_results=results,
        )
