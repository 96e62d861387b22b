"""Static fact-checking knowledge for the fact verifier.

Contents:
- KNOWLEDGE_BASE: vetted facts with sources, last review date and confidence
- TRUSTED_SOURCES: default fact-checking domains, in citation order
- TOPIC_PRIORITY_SOURCES: domains promoted to the front for topical claims
- EXTERNAL_CHECK_RULES: deterministic simulated fact-check verdicts
- EVIDENCE_RULES / CONTRADICTION_RULES: keyword-triggered annotations

All entries are immutable; FactVerifier accepts substitutes at construction.
"""

from dataclasses import dataclass
from datetime import date
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class KnowledgeBaseEntry:
    """A vetted fact with provenance.

    Attributes:
        fact: Canonical statement of the fact
        sources: Domains backing the fact
        last_updated: Date the entry was last reviewed
        confidence: Confidence in the fact (0.0-1.0)
    """

    fact: str
    sources: tuple[str, ...]
    last_updated: date
    confidence: float


@dataclass(frozen=True)
class ExternalCheckRule:
    """Deterministic verdict for claims mentioning any of ``keywords``."""

    keywords: tuple[str, ...]
    status: str
    confidence: float
    source: str


@dataclass(frozen=True)
class KeywordRule:
    """Annotation emitted when every group has at least one keyword present."""

    keyword_groups: tuple[tuple[str, ...], ...]
    message: str

    def matches(self, claim_lower: str) -> bool:
        return all(
            any(keyword in claim_lower for keyword in group)
            for group in self.keyword_groups
        )


KNOWLEDGE_BASE: tuple[KnowledgeBaseEntry, ...] = (
    KnowledgeBaseEntry(
        fact="COVID-19 vaccines are safe and effective",
        sources=("cdc.gov", "who.int", "nature.com"),
        last_updated=date(2024, 1, 15),
        confidence=0.98,
    ),
    KnowledgeBaseEntry(
        fact="Climate change is caused by human activities",
        sources=("nasa.gov", "nature.com", "science.org"),
        last_updated=date(2024, 1, 10),
        confidence=0.97,
    ),
    KnowledgeBaseEntry(
        fact="The Earth is approximately 4.5 billion years old",
        sources=("nasa.gov", "science.org"),
        last_updated=date(2023, 12, 1),
        confidence=0.99,
    ),
    KnowledgeBaseEntry(
        fact="5G networks do not cause health problems",
        sources=("who.int", "cdc.gov"),
        last_updated=date(2024, 1, 5),
        confidence=0.95,
    ),
)

TRUSTED_SOURCES: tuple[str, ...] = (
    "reuters.com",
    "apnews.com",
    "bbc.com",
    "npr.org",
    "factcheck.org",
    "snopes.com",
    "politifact.com",
    "who.int",
    "cdc.gov",
    "nasa.gov",
    "nature.com",
    "science.org",
)

# (trigger keywords, domains promoted to the front); first match wins
TOPIC_PRIORITY_SOURCES: tuple[tuple[tuple[str, ...], tuple[str, ...]], ...] = (
    (("health", "medical", "vaccine"), ("cdc.gov", "who.int", "nature.com")),
    (("climate", "environment"), ("nasa.gov", "nature.com", "science.org")),
)

MAX_SOURCES_PER_CLAIM = 4

# Knowledge-base matching
KEYWORD_MIN_LENGTH = 3
SIMILARITY_THRESHOLD = 0.6

EXTERNAL_CHECK_RULES: tuple[ExternalCheckRule, ...] = (
    ExternalCheckRule(("vaccine", "covid"), "verified", 0.92, "FactCheck.org API"),
    ExternalCheckRule(("climate", "global warming"), "verified", 0.95, "Climate Fact Database"),
    ExternalCheckRule(("5g", "radiation"), "disputed", 0.88, "Health Claims Verifier"),
)
GENERAL_CHECK_SOURCE = "General Fact Check API"

EVIDENCE_RULES: tuple[KeywordRule, ...] = (
    KeywordRule((("study", "research"),), "Cross-referenced with peer-reviewed publications"),
    KeywordRule((("statistics", "data"),), "Statistical claims verified against official databases"),
)

CONTRADICTION_RULES: tuple[KeywordRule, ...] = (
    KeywordRule((("5g",), ("cause",)), "No scientific evidence supports 5G health risks"),
    KeywordRule(
        (("vaccine",), ("autism", "dangerous")),
        "Multiple studies have debunked vaccine-autism links",
    ),
    KeywordRule(
        (("climate",), ("hoax",)),
        "Scientific consensus strongly supports climate change reality",
    ),
)

# Claim-status weights for the overall credibility percentage
STATUS_CREDIBILITY_POINTS: Mapping[str, int] = MappingProxyType({
    "verified": 100,
    "disputed": 50,
    "unverified": 25,
    "false": 0,
})
NEUTRAL_CREDIBILITY = 50
