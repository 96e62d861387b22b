"""Weighted credibility scoring over the three analyzers.

Scoring flow:
1. Fan out: content analysis, fact verification and (when URLs are given)
   bulk source checks run concurrently
2. Convert each output to a 0-100 component score
3. Weighted base = sum(component score x weight)
4. Adjust: bias penalty, recency bonus, suspicious-content penalty; clamp
5. Classify, estimate confidence, assess risk, synthesize narrative

Usage:
    scorer = CredibilityScorer()
    score = await scorer.score(text, ["https://reuters.com/a"])
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Union

from truthguard.analyzers.base_analyzer import BaseAnalyzer
from truthguard.analyzers.content_analyzer import ContentAnalyzer
from truthguard.analyzers.facts.fact_verifier import FactVerifier
from truthguard.analyzers.scoring.risk_assessor import RiskAssessor
from truthguard.analyzers.sources.source_checker import SourceChecker
from truthguard.config.scoring import (
    BIASED_RATINGS,
    CLICKBAIT_PENALTY_FACTOR,
    CONFIDENCE_BASE,
    CONFIDENCE_MAX,
    CONFIDENCE_MIN,
    CONTENT_BASE_SCORE,
    DISPUTED_PENALTY,
    DISPUTED_RATIO_LIMIT,
    HIGH_QUALITY_SOURCE_BONUS,
    HIGH_QUALITY_SOURCE_SCORE,
    MANY_CLAIMS_BONUS,
    MANY_CLAIMS_THRESHOLD,
    MANY_SOURCES_BONUS,
    MANY_SOURCES_THRESHOLD,
    NEUTRAL_COMPONENT_SCORE,
    RECENCY_MIN_BASE_SCORE,
    RECENT_DOMAIN_AGE_YEARS,
    RELIABLE_THRESHOLD,
    SUSPICIOUS_CONTENT_PENALTY,
    SUSPICIOUS_PATTERN_LIMIT,
    SUSPICIOUS_PATTERN_PENALTY,
    SUSPICIOUS_THRESHOLD,
    TONE_ADJUSTMENTS,
)
from truthguard.schemas import (
    Classification,
    ContentAnalysis,
    CredibilityScore,
    FactCheckSummary,
    ScoreBreakdown,
    ScoringWeights,
    SourceAssessment,
    SourceReliability,
    WeightedScores,
)
from truthguard.utils.numeric import clamp, round_half_up, round_score

WeightsInput = Optional[Union[ScoringWeights, Mapping[str, Any]]]


@dataclass(frozen=True)
class ScoringRun:
    """A credibility score together with the analyzer outputs behind it.

    Attributes:
        score: Final credibility verdict
        content: Content analysis of the text
        facts: Fact-check summary of the text
        sources: Per-URL reliability, in input order
        source_assessment: Aggregate of ``sources``
        weights: Weights actually applied
    """

    score: CredibilityScore
    content: ContentAnalysis
    facts: FactCheckSummary
    sources: list[SourceReliability]
    source_assessment: SourceAssessment
    weights: ScoringWeights


class CredibilityScorer(BaseAnalyzer):
    """
    Combines content, fact and source analysis into one credibility score.

    Attributes:
        content_analyzer: Tone/clickbait analysis
        fact_verifier: Claim verification
        source_checker: Source reliability
        risk_assessor: Risk and narrative synthesis
        default_weights: Weights used when a call supplies none
    """

    def __init__(
        self,
        content_analyzer: Optional[ContentAnalyzer] = None,
        fact_verifier: Optional[FactVerifier] = None,
        source_checker: Optional[SourceChecker] = None,
        risk_assessor: Optional[RiskAssessor] = None,
        default_weights: Optional[ScoringWeights] = None,
    ):
        super().__init__(
            name="credibility_scorer",
            description="Weighted aggregation of content, fact and source analysis",
        )
        self.content_analyzer = content_analyzer or ContentAnalyzer()
        self.fact_verifier = fact_verifier or FactVerifier()
        self.source_checker = source_checker or SourceChecker()
        self.risk_assessor = risk_assessor or RiskAssessor()
        self.default_weights = default_weights or ScoringWeights()

    def get_capabilities(self) -> list[str]:
        return ["weighted_scoring", "classification", "confidence_estimation", "risk_assessment"]

    async def score(
        self,
        text: str,
        urls: Optional[Sequence[str]] = None,
        weights: WeightsInput = None,
    ) -> CredibilityScore:
        """Score ``text`` with optional source ``urls`` and weight overrides."""
        run = await self.evaluate(text, urls, weights)
        return run.score

    async def evaluate(
        self,
        text: str,
        urls: Optional[Sequence[str]] = None,
        weights: WeightsInput = None,
    ) -> ScoringRun:
        """
        Score ``text`` and keep every analyzer output.

        Args:
            text: Raw, non-empty text
            urls: Source URLs (duplicates are checked individually)
            weights: Partial or full weight overrides

        Returns:
            ScoringRun with the score and the component outputs
        """
        urls = list(urls or [])
        applied = self.default_weights.merged(weights)

        try:
            content, facts, sources = await asyncio.gather(
                self._analyze_content(text),
                self.fact_verifier.verify(text),
                self._check_sources(urls),
            )
        except Exception:
            self.record_failure()
            raise

        source_assessment = self.source_checker.aggregate(sources)

        content_score = self.content_score(content)
        fact_score = self.fact_score(facts)
        source_score = (
            source_assessment.average_score if sources else NEUTRAL_COMPONENT_SCORE
        )

        base = (
            content_score * applied.content_analysis
            + fact_score * applied.fact_verification
            + source_score * applied.source_reliability
        )
        overall = round_score(self.apply_adjustments(base, content, sources, applied))

        score = CredibilityScore(
            overall_score=overall,
            classification=self.classify(overall),
            confidence_level=self.confidence(facts, sources),
            breakdown=ScoreBreakdown(
                content_analysis_score=round_score(content_score),
                fact_verification_score=round_score(fact_score),
                source_reliability_score=round_score(source_score),
                weighted_scores=WeightedScores(
                    content_weight=applied.content_analysis,
                    fact_weight=applied.fact_verification,
                    source_weight=applied.source_reliability,
                ),
            ),
            risk_assessment=self.risk_assessor.assess(overall, content, facts, source_assessment),
            detailed_analysis=self.risk_assessor.detailed_analysis(content, facts, sources),
        )

        self.record_success()
        self.logger.info(
            "Credibility scored",
            overall_score=overall,
            classification=score.classification.value,
            claims=facts.total_claims,
            sources=len(sources),
        )
        return ScoringRun(
            score=score,
            content=content,
            facts=facts,
            sources=sources,
            source_assessment=source_assessment,
            weights=applied,
        )

    async def _analyze_content(self, text: str) -> ContentAnalysis:
        return self.content_analyzer.analyze(text)

    async def _check_sources(self, urls: list[str]) -> list[SourceReliability]:
        if not urls:
            return []
        return await self.source_checker.check_bulk(urls)

    @staticmethod
    def content_score(content: ContentAnalysis) -> float:
        score = CONTENT_BASE_SCORE + TONE_ADJUSTMENTS.get(content.tone.value, 0)
        score -= content.clickbait_score * CLICKBAIT_PENALTY_FACTOR
        score -= len(content.suspicious_patterns) * SUSPICIOUS_PATTERN_PENALTY
        return clamp(score)

    @staticmethod
    def fact_score(facts: FactCheckSummary) -> float:
        if not facts.detailed_results:
            return NEUTRAL_COMPONENT_SCORE
        return facts.overall_credibility

    @staticmethod
    def apply_adjustments(
        base: float,
        content: ContentAnalysis,
        sources: Sequence[SourceReliability],
        weights: ScoringWeights,
    ) -> float:
        adjusted = base

        biased = sum(1 for s in sources if s.bias_rating.value in BIASED_RATINGS)
        if biased > len(sources) * 0.5:
            adjusted -= weights.bias_penalty * 100

        recent = any(s.metadata.domain_age < RECENT_DOMAIN_AGE_YEARS for s in sources)
        if recent and base > RECENCY_MIN_BASE_SCORE:
            adjusted += weights.recency_bonus * 100

        if len(content.suspicious_patterns) > SUSPICIOUS_PATTERN_LIMIT:
            adjusted -= SUSPICIOUS_CONTENT_PENALTY

        return clamp(adjusted)

    @staticmethod
    def classify(overall_score: int) -> Classification:
        if overall_score >= RELIABLE_THRESHOLD:
            return Classification.RELIABLE
        if overall_score >= SUSPICIOUS_THRESHOLD:
            return Classification.SUSPICIOUS
        return Classification.FAKE

    @staticmethod
    def confidence(facts: FactCheckSummary, sources: Sequence[SourceReliability]) -> float:
        confidence = CONFIDENCE_BASE
        total_claims = len(facts.detailed_results)

        if total_claims > MANY_CLAIMS_THRESHOLD:
            confidence += MANY_CLAIMS_BONUS
        if len(sources) > MANY_SOURCES_THRESHOLD:
            confidence += MANY_SOURCES_BONUS

        high_quality = sum(1 for s in sources if s.reliability_score > HIGH_QUALITY_SOURCE_SCORE)
        confidence += high_quality * HIGH_QUALITY_SOURCE_BONUS

        if total_claims > 0 and facts.disputed_claims / total_claims > DISPUTED_RATIO_LIMIT:
            confidence -= DISPUTED_PENALTY

        return round_half_up(clamp(confidence, CONFIDENCE_MIN, CONFIDENCE_MAX), 2)
