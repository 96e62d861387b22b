"""Credibility scoring submodule.

Components:
- CredibilityScorer: fan-out over the analyzers, weighting, adjustments
- RiskAssessor: risk level, factors, recommendations, narrative
- generate_score_explanation / compare_credibility_scores
"""

from truthguard.analyzers.scoring.credibility_scorer import CredibilityScorer, ScoringRun
from truthguard.analyzers.scoring.explanation import (
    compare_credibility_scores,
    generate_score_explanation,
)
from truthguard.analyzers.scoring.risk_assessor import RiskAssessor

__all__ = [
    "CredibilityScorer",
    "RiskAssessor",
    "ScoringRun",
    "compare_credibility_scores",
    "generate_score_explanation",
]
