"""Shared fixtures and deterministic doubles for the simulated capabilities."""

from datetime import date

import pytest

from truthguard.analyzers.content_analyzer import ContentAnalyzer
from truthguard.analyzers.facts.fact_verifier import FactVerifier
from truthguard.analyzers.facts.providers import (
    CrossReferenceProvider,
    CrossReferenceResult,
    ExternalCheckResult,
    ExternalFactChecker,
)
from truthguard.analyzers.scoring.credibility_scorer import CredibilityScorer
from truthguard.analyzers.sources.domain_intelligence import (
    ContentSignals,
    DomainAnalysis,
    DomainIntelligenceProvider,
    TechnicalSignals,
    WhoisRecord,
)
from truthguard.analyzers.sources.source_checker import SourceChecker
from truthguard.pipeline.analysis_pipeline import CredibilityPipeline


# ── Doubles ──────────────────────────────────────────────────────────────


class FixedExternalChecker(ExternalFactChecker):
    """Answers every claim with the same verdict and records the claims."""

    def __init__(self, status: str = "unverified", confidence: float = 0.5):
        self.result = ExternalCheckResult(status, confidence, "Test Checker")
        self.claims: list[str] = []

    async def check(self, claim: str) -> ExternalCheckResult:
        self.claims.append(claim)
        return self.result


class FixedCrossReference(CrossReferenceProvider):
    """Returns the same source counts for every claim."""

    def __init__(self, supporting: int = 1, contradicting: int = 0, neutral: int = 2):
        self.result = CrossReferenceResult(supporting, contradicting, neutral)

    def cross_reference(self, claim: str) -> CrossReferenceResult:
        return self.result


def make_domain_analysis(
    ssl_valid: bool = True,
    security_headers: bool = True,
    mobile_friendly: bool = True,
    page_speed: int = 80,
    has_about_page: bool = True,
    has_contact_info: bool = True,
    has_privacy_policy: bool = True,
    editorial_standards: bool = True,
    social_media_presence: bool = True,
    domain_age: float = 10.0,
) -> DomainAnalysis:
    return DomainAnalysis(
        whois=WhoisRecord(
            creation_date=date(2015, 1, 1),
            registrar="Test Registrar",
            country="US",
        ),
        technical=TechnicalSignals(
            ssl_valid=ssl_valid,
            security_headers=security_headers,
            mobile_friendly=mobile_friendly,
            page_speed=page_speed,
        ),
        content=ContentSignals(
            has_about_page=has_about_page,
            has_contact_info=has_contact_info,
            has_privacy_policy=has_privacy_policy,
            editorial_standards=editorial_standards,
            social_media_presence=social_media_presence,
        ),
        domain_age=domain_age,
    )


class FixedDomainIntelligence(DomainIntelligenceProvider):
    """Returns one canned analysis and a fixed age estimate."""

    def __init__(self, analysis: DomainAnalysis | None = None, age: float = 10.0):
        self.analysis = analysis or make_domain_analysis()
        self.age = age
        self.analyzed: list[str] = []

    async def analyze(self, domain: str, url: str) -> DomainAnalysis:
        self.analyzed.append(domain)
        return self.analysis

    def estimate_domain_age(self, domain: str) -> float:
        return self.age


# ── Fixtures ─────────────────────────────────────────────────────────────


@pytest.fixture
def external_checker() -> FixedExternalChecker:
    return FixedExternalChecker()


@pytest.fixture
def cross_reference() -> FixedCrossReference:
    return FixedCrossReference()


@pytest.fixture
def domain_intelligence() -> FixedDomainIntelligence:
    return FixedDomainIntelligence()


@pytest.fixture
def content_analyzer() -> ContentAnalyzer:
    return ContentAnalyzer()


@pytest.fixture
def fact_verifier(
    external_checker: FixedExternalChecker,
    cross_reference: FixedCrossReference,
) -> FactVerifier:
    return FactVerifier(external_checker=external_checker, cross_referencer=cross_reference)


@pytest.fixture
def source_checker(domain_intelligence: FixedDomainIntelligence) -> SourceChecker:
    return SourceChecker(intelligence=domain_intelligence)


@pytest.fixture
def scorer(
    content_analyzer: ContentAnalyzer,
    fact_verifier: FactVerifier,
    source_checker: SourceChecker,
) -> CredibilityScorer:
    return CredibilityScorer(
        content_analyzer=content_analyzer,
        fact_verifier=fact_verifier,
        source_checker=source_checker,
    )


@pytest.fixture
def pipeline(scorer: CredibilityScorer) -> CredibilityPipeline:
    return CredibilityPipeline(scorer=scorer)
