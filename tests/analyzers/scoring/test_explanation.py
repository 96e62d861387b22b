"""Tests for score explanation and comparison."""

import pytest

from truthguard.analyzers.scoring.explanation import (
    compare_credibility_scores,
    generate_score_explanation,
)
from truthguard.analyzers.scoring.credibility_scorer import CredibilityScorer
from truthguard.analyzers.scoring.risk_assessor import RiskAssessor
from truthguard.schemas import (
    CredibilityScore,
    DetailedAnalysis,
    RiskAssessment,
    ScoreBreakdown,
    WeightedScores,
)


def _score(overall: int) -> CredibilityScore:
    return CredibilityScore(
        overall_score=overall,
        classification=CredibilityScorer.classify(overall),
        confidence_level=0.5,
        breakdown=ScoreBreakdown(
            content_analysis_score=80,
            fact_verification_score=25,
            source_reliability_score=50,
            weighted_scores=WeightedScores(
                content_weight=0.3, fact_weight=0.45, source_weight=0.25
            ),
        ),
        risk_assessment=RiskAssessment(level=RiskAssessor.risk_level(overall)),
        detailed_analysis=DetailedAnalysis(),
    )


class TestExplanation:
    def test_high_risk_template(self) -> None:
        assert generate_score_explanation(_score(48)) == (
            "This content received a credibility score of 48/100, "
            'classified as "Suspicious". '
            "The score is based on content analysis (80/100, 30% weight), "
            "fact verification (25/100, 45% weight), "
            "and source reliability (50/100, 25% weight). "
            "This content poses a high risk and should be treated with caution."
        )

    def test_medium_risk_closing(self) -> None:
        explanation = generate_score_explanation(_score(60))
        assert explanation.endswith("The risk level is assessed as medium.")

    def test_critical_risk_closing(self) -> None:
        explanation = generate_score_explanation(_score(10))
        assert explanation.endswith(
            "This content poses a critical risk and should be treated with caution."
        )


class TestCompare:
    def test_extremes_and_average(self) -> None:
        scores = [_score(48), _score(85), _score(15)]
        comparison = compare_credibility_scores(scores)
        assert comparison.most_reliable.overall_score == 85
        assert comparison.least_reliable.overall_score == 15
        assert comparison.average_score == 49
        assert comparison.reliability_distribution.reliable == 1
        assert comparison.reliability_distribution.suspicious == 1
        assert comparison.reliability_distribution.fake == 1

    def test_ties_keep_input_order(self) -> None:
        first, second = _score(60), _score(60)
        comparison = compare_credibility_scores([first, second])
        assert comparison.most_reliable is first
        assert comparison.least_reliable is second

    def test_empty_rejected(self) -> None:
        with pytest.raises(ValueError, match="No scores to compare"):
            compare_credibility_scores([])
