"""Plain-language explanation and comparison of credibility scores."""

from typing import Sequence

from truthguard.schemas import (
    Classification,
    CredibilityComparison,
    CredibilityScore,
    ReliabilityDistribution,
    RiskLevel,
)
from truthguard.utils.numeric import round_score

CAUTION_LEVELS = frozenset({RiskLevel.HIGH, RiskLevel.CRITICAL})


def _weight_percent(weight: float) -> int:
    return round_score(weight * 100)


def generate_score_explanation(score: CredibilityScore) -> str:
    """
    Summarize a score in one paragraph.

    Names the overall score and classification, each component score with
    its weight, and closes with the risk level.
    """
    breakdown = score.breakdown
    weights = breakdown.weighted_scores
    level = score.risk_assessment.level

    explanation = (
        f"This content received a credibility score of {score.overall_score}/100, "
        f'classified as "{score.classification.value}". '
        f"The score is based on content analysis ({breakdown.content_analysis_score}/100, "
        f"{_weight_percent(weights.content_weight)}% weight), "
        f"fact verification ({breakdown.fact_verification_score}/100, "
        f"{_weight_percent(weights.fact_weight)}% weight), "
        f"and source reliability ({breakdown.source_reliability_score}/100, "
        f"{_weight_percent(weights.source_weight)}% weight). "
    )

    if level in CAUTION_LEVELS:
        explanation += f"This content poses a {level.value} risk and should be treated with caution."
    else:
        explanation += f"The risk level is assessed as {level.value}."

    return explanation


def compare_credibility_scores(scores: Sequence[CredibilityScore]) -> CredibilityComparison:
    """
    Compare several scores.

    Ties keep input order: the first highest score is most reliable, the
    last lowest score is least reliable.

    Raises:
        ValueError: If ``scores`` is empty
    """
    if not scores:
        raise ValueError("No scores to compare")

    ranked = sorted(scores, key=lambda s: s.overall_score, reverse=True)
    average = sum(s.overall_score for s in scores) / len(scores)

    distribution = {classification: 0 for classification in Classification}
    for s in scores:
        distribution[s.classification] += 1

    return CredibilityComparison(
        most_reliable=ranked[0],
        least_reliable=ranked[-1],
        average_score=round_score(average),
        reliability_distribution=ReliabilityDistribution(
            reliable=distribution[Classification.RELIABLE],
            suspicious=distribution[Classification.SUSPICIOUS],
            fake=distribution[Classification.FAKE],
        ),
    )
