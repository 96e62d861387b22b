"""Fact verification submodule.

Components:
- ClaimExtractor: sentence-level candidate claims
- KnowledgeBaseMatcher: lookup against vetted facts
- ExternalFactChecker / CrossReferenceProvider: simulated external signals
- FactVerifier: orchestrates extraction, verification and aggregation
"""

from truthguard.analyzers.facts.claim_extractor import ClaimExtractor
from truthguard.analyzers.facts.fact_verifier import FactVerifier
from truthguard.analyzers.facts.knowledge_base import KnowledgeBaseMatcher
from truthguard.analyzers.facts.providers import (
    CrossReferenceProvider,
    CrossReferenceResult,
    ExternalCheckResult,
    ExternalFactChecker,
    SimulatedCrossReference,
    SimulatedExternalFactChecker,
)

__all__ = [
    "ClaimExtractor",
    "CrossReferenceProvider",
    "CrossReferenceResult",
    "ExternalCheckResult",
    "ExternalFactChecker",
    "FactVerifier",
    "KnowledgeBaseMatcher",
    "SimulatedCrossReference",
    "SimulatedExternalFactChecker",
]
