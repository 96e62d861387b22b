"""Source domain reliability tables for the source checker.

Three static tables drive domain classification, consulted in this order:
1. Blacklist: known fabricated-news domains, always scored 0
2. Reliable domains: tiered outlets with score, bias and factual rating
3. Suspicious domains: score plus a human-readable reason

Tier hierarchy (reliable table):
1. Wire services, public broadcasters, journals, agencies: 90-100
2. Established national newsrooms: 80-89
3. Moderate reliability outlets: 60-79

Domains missing from every table go through simulated domain analysis.
All tables are read-only; inject substitutes into SourceChecker for tests.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class ReliableDomain:
    """Profile of a vetted news/reference domain."""

    score: int
    bias: str
    factual: str
    tier: int


@dataclass(frozen=True)
class SuspiciousDomain:
    """Profile of a domain with known reliability concerns."""

    score: int
    reason: str


RELIABLE_DOMAINS: Mapping[str, ReliableDomain] = MappingProxyType({
    # Tier 1: Highest reliability
    "reuters.com": ReliableDomain(98, "center", "very-high", 1),
    "apnews.com": ReliableDomain(97, "center", "very-high", 1),
    "bbc.com": ReliableDomain(94, "center", "very-high", 1),
    "npr.org": ReliableDomain(92, "center", "very-high", 1),
    "pbs.org": ReliableDomain(91, "center", "very-high", 1),

    # Tier 2: High reliability
    "cnn.com": ReliableDomain(83, "left", "high", 2),
    "foxnews.com": ReliableDomain(65, "right", "mixed", 3),
    "wsj.com": ReliableDomain(87, "center", "high", 2),
    "nytimes.com": ReliableDomain(85, "left", "high", 2),
    "washingtonpost.com": ReliableDomain(84, "left", "high", 2),

    # Tier 3: Moderate reliability
    "usatoday.com": ReliableDomain(78, "center", "high", 3),
    "cbsnews.com": ReliableDomain(76, "center", "high", 3),
    "abcnews.go.com": ReliableDomain(75, "center", "high", 3),

    # Scientific / academic
    "nature.com": ReliableDomain(99, "center", "very-high", 1),
    "science.org": ReliableDomain(98, "center", "very-high", 1),
    "nejm.org": ReliableDomain(97, "center", "very-high", 1),

    # Government / intergovernmental
    "cdc.gov": ReliableDomain(96, "center", "very-high", 1),
    "who.int": ReliableDomain(95, "center", "very-high", 1),
    "nasa.gov": ReliableDomain(97, "center", "very-high", 1),
})

SUSPICIOUS_DOMAINS: Mapping[str, SuspiciousDomain] = MappingProxyType({
    # Known misinformation sites
    "naturalnews.com": SuspiciousDomain(15, "Promotes pseudoscience and conspiracy theories"),
    "infowars.com": SuspiciousDomain(10, "Known for spreading conspiracy theories and misinformation"),
    "breitbart.com": SuspiciousDomain(35, "Mixed factual reporting with strong bias"),
    "beforeitsnews.com": SuspiciousDomain(20, "User-generated content with no editorial oversight"),
    "worldnewsdailyreport.com": SuspiciousDomain(5, "Satirical fake news site"),
    # Satire is labelled, so it scores high despite being listed here
    "theonion.com": SuspiciousDomain(100, "Legitimate satirical news (clearly labeled)"),
    "clickhole.com": SuspiciousDomain(95, "Legitimate satirical content"),

    # Questionable sources
    "dailymail.co.uk": SuspiciousDomain(45, "Sensationalized reporting, mixed factual accuracy"),
    "rt.com": SuspiciousDomain(30, "State-controlled media with propaganda concerns"),
    "sputniknews.com": SuspiciousDomain(25, "State-controlled media with bias issues"),
})

BLACKLISTED_DOMAINS: frozenset[str] = frozenset({
    "fake-news-generator.com",
    "totally-real-news.net",
    "conspiracy-central.org",
    "miracle-cures-daily.com",
    "political-rage-bait.info",
})

# Known registration ages (years); other listed domains get an estimate
ESTABLISHED_DOMAIN_AGES: Mapping[str, int] = MappingProxyType({
    "reuters.com": 25,
    "bbc.com": 28,
    "cnn.com": 26,
    "nytimes.com": 27,
})

# Reliability buckets used by aggregation
HIGH_RELIABILITY_THRESHOLD: int = 80
MEDIUM_RELIABILITY_THRESHOLD: int = 50

# Unknown-domain composite score weights
UNKNOWN_DOMAIN_BASE_SCORE: int = 50
UNKNOWN_DOMAIN_WEIGHTS: Mapping[str, int] = MappingProxyType({
    "ssl_valid": 10,
    "security_headers": 5,
    "mobile_friendly": 3,
    "fast_page": 5,
    "has_about_page": 8,
    "has_contact_info": 7,
    "has_privacy_policy": 5,
    "editorial_standards": 12,
})
FAST_PAGE_SPEED: int = 70
