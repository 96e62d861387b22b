"""Risk assessment and human-readable synthesis for credibility scores.

RiskAssessor turns the scored component outputs into:
- RiskAssessment: level from overall_score plus red-flag factors, each
  paired with a recommendation where one applies
- DetailedAnalysis: content flags, credibility indicators, warning signs
  and two summary sentences
"""

from typing import Sequence

from truthguard.config.scoring import (
    CLICKBAIT_FLAG_THRESHOLD,
    CRITICAL_RISK_BELOW,
    EXCELLENT_SOURCE_SCORE,
    HIGH_RISK_BELOW,
    MEDIUM_RISK_BELOW,
    MULTIPLE_PATTERNS_THRESHOLD,
    POOR_SOURCE_SCORE,
)
from truthguard.schemas import (
    ContentAnalysis,
    DetailedAnalysis,
    FactCheckSummary,
    RiskAssessment,
    RiskLevel,
    SourceAssessment,
    SourceReliability,
    Tone,
)
from truthguard.utils.numeric import round_score

# level -> (primary factor or None, primary recommendation)
RISK_LEVEL_GUIDANCE = {
    RiskLevel.CRITICAL: (
        "Extremely low credibility score",
        "Do not share or rely on this information",
    ),
    RiskLevel.HIGH: (
        "Low credibility score",
        "Verify through multiple independent sources",
    ),
    RiskLevel.MEDIUM: (
        "Moderate credibility concerns",
        "Cross-reference key claims before sharing",
    ),
    RiskLevel.LOW: (
        None,
        "Generally reliable, but always good to verify important claims",
    ),
}


class RiskAssessor:
    """Derives risk level, factors and narrative from analyzer outputs."""

    @staticmethod
    def risk_level(overall_score: int) -> RiskLevel:
        if overall_score < CRITICAL_RISK_BELOW:
            return RiskLevel.CRITICAL
        if overall_score < HIGH_RISK_BELOW:
            return RiskLevel.HIGH
        if overall_score < MEDIUM_RISK_BELOW:
            return RiskLevel.MEDIUM
        return RiskLevel.LOW

    def assess(
        self,
        overall_score: int,
        content: ContentAnalysis,
        facts: FactCheckSummary,
        source_assessment: SourceAssessment,
    ) -> RiskAssessment:
        level = self.risk_level(overall_score)
        primary_factor, primary_recommendation = RISK_LEVEL_GUIDANCE[level]

        factors = [primary_factor] if primary_factor else []
        recommendations = [primary_recommendation]

        if content.suspicious_patterns:
            factors.append(f"{len(content.suspicious_patterns)} suspicious content patterns detected")

        if facts.false_claims > 0:
            factors.append(f"{facts.false_claims} false claims identified")
            recommendations.append("Be especially cautious of factual claims")

        if source_assessment.low_reliability_count > 0:
            factors.append(f"{source_assessment.low_reliability_count} low-reliability sources")
            recommendations.append("Seek additional sources for verification")

        if content.tone == Tone.SENSATIONAL:
            factors.append("Sensational language detected")
            recommendations.append("Look for more neutral reporting on the same topic")

        return RiskAssessment(level=level, factors=factors, recommendations=recommendations)

    def detailed_analysis(
        self,
        content: ContentAnalysis,
        facts: FactCheckSummary,
        sources: Sequence[SourceReliability],
    ) -> DetailedAnalysis:
        content_flags = []
        if content.clickbait_score > CLICKBAIT_FLAG_THRESHOLD:
            content_flags.append(f"High clickbait score: {content.clickbait_score}%")
        if content.tone != Tone.NEUTRAL:
            content_flags.append(f"Non-neutral tone detected: {content.tone.value}")
        content_flags.extend(content.suspicious_patterns)

        indicators = []
        if facts.verified_claims > 0:
            indicators.append(f"{facts.verified_claims} claims verified against trusted sources")
        if any(s.reliability_score > EXCELLENT_SOURCE_SCORE for s in sources):
            indicators.append("High-reliability sources present")
        if content.tone == Tone.NEUTRAL:
            indicators.append("Neutral, factual tone")

        warnings = []
        if facts.false_claims > 0:
            warnings.append(f"{facts.false_claims} false claims detected")
        if any(s.reliability_score < POOR_SOURCE_SCORE for s in sources):
            warnings.append("Low-reliability sources present")
        if len(content.suspicious_patterns) > MULTIPLE_PATTERNS_THRESHOLD:
            warnings.append("Multiple suspicious content patterns")

        return DetailedAnalysis(
            content_flags=content_flags,
            fact_check_summary=self.fact_check_summary(facts),
            source_assessment=self.source_summary(sources),
            credibility_indicators=indicators,
            warning_signs=warnings,
        )

    @staticmethod
    def fact_check_summary(facts: FactCheckSummary) -> str:
        return (
            f"{facts.verified_claims} verified, {facts.disputed_claims} disputed, "
            f"{facts.unverified_claims} unverified, {facts.false_claims} false claims "
            f"out of {len(facts.detailed_results)} total claims analyzed."
        )

    @staticmethod
    def source_summary(sources: Sequence[SourceReliability]) -> str:
        if not sources:
            return "No sources provided for analysis."
        average = round_score(sum(s.reliability_score for s in sources) / len(sources))
        return f"{len(sources)} sources analyzed with average reliability of {average}%."
