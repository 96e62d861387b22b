"""Source reliability submodule.

Components:
- DomainIntelligenceProvider: capability for unlisted domains (simulated)
- SourceChecker: table lookup, unknown-domain scoring, aggregation
"""

from truthguard.analyzers.sources.domain_intelligence import (
    ContentSignals,
    DomainAnalysis,
    DomainIntelligenceProvider,
    SimulatedDomainIntelligence,
    TechnicalSignals,
    WhoisRecord,
)
from truthguard.analyzers.sources.source_checker import INVALID_URL_DOMAIN, SourceChecker

__all__ = [
    "ContentSignals",
    "DomainAnalysis",
    "DomainIntelligenceProvider",
    "INVALID_URL_DOMAIN",
    "SimulatedDomainIntelligence",
    "SourceChecker",
    "TechnicalSignals",
    "WhoisRecord",
]
