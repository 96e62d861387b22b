"""Credibility analyzers.

- ContentAnalyzer: tone, clickbait, entities, suspicious patterns
- FactVerifier: claim extraction and verification
- SourceChecker: domain reliability
- CredibilityScorer: weighted combination of the three
"""

from truthguard.analyzers.base_analyzer import BaseAnalyzer
from truthguard.analyzers.content_analyzer import ContentAnalyzer
from truthguard.analyzers.facts import FactVerifier
from truthguard.analyzers.scoring import CredibilityScorer, RiskAssessor, ScoringRun
from truthguard.analyzers.sources import SourceChecker

__all__ = [
    "BaseAnalyzer",
    "ContentAnalyzer",
    "CredibilityScorer",
    "FactVerifier",
    "RiskAssessor",
    "ScoringRun",
    "SourceChecker",
]
