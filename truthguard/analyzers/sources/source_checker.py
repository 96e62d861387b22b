"""Source reliability checks for URLs.

Classification order per URL:
1. Blacklist -> score 0, "Avoid this source entirely"
2. Reliable domains -> tiered score, bias and factual rating
3. Suspicious domains -> score plus reason
4. Unknown domains -> composite score from a DomainIntelligenceProvider

Malformed URLs never raise; they resolve to an "Invalid URL" result with
score 0.

Usage:
    checker = SourceChecker()
    sources = await checker.check_bulk(["https://reuters.com/a"])
    assessment = checker.aggregate(sources)
"""

import functools
import re
from typing import Iterable, Mapping, Optional, Sequence

import aiometer
from yarl import URL

from truthguard.analyzers.base_analyzer import BaseAnalyzer
from truthguard.analyzers.sources.domain_intelligence import (
    DomainAnalysis,
    DomainIntelligenceProvider,
    SimulatedDomainIntelligence,
)
from truthguard.config.domain_reliability import (
    BLACKLISTED_DOMAINS,
    FAST_PAGE_SPEED,
    HIGH_RELIABILITY_THRESHOLD,
    MEDIUM_RELIABILITY_THRESHOLD,
    RELIABLE_DOMAINS,
    SUSPICIOUS_DOMAINS,
    UNKNOWN_DOMAIN_BASE_SCORE,
    UNKNOWN_DOMAIN_WEIGHTS,
    ReliableDomain,
    SuspiciousDomain,
)
from truthguard.config.settings import settings
from truthguard.schemas import (
    BiasRating,
    FactualReporting,
    SourceAssessment,
    SourceMetadata,
    SourceReliability,
    SourceRisk,
)
from truthguard.utils.numeric import clamp, round_score

INVALID_URL_DOMAIN = "Invalid URL"

# Hostname characters; colons admit bare IPv6 hosts
VALID_HOST = re.compile(r"[\w.:-]+")

TIER_TRUST_INDICATORS = {
    1: ["Top-tier journalism", "Strong editorial standards", "Fact-checking protocols"],
    2: ["Established newsroom", "Professional journalism", "Editorial oversight"],
}

TIER_NOTES = {
    1: [
        "Tier 1: Highest reliability and editorial standards",
        "Minimal bias, strong fact-checking protocols",
    ],
    2: [
        "Tier 2: High reliability with professional journalism",
        "Generally trustworthy with some potential bias",
    ],
    3: [
        "Tier 3: Moderate reliability",
        "Cross-reference important claims",
    ],
}


class SourceChecker(BaseAnalyzer):
    """
    Assigns reliability profiles to source URLs and aggregates them.

    Attributes:
        reliable_domains: Tiered reliable domain table
        suspicious_domains: Suspicious domain table
        blacklisted_domains: Domains always scored 0
        intelligence: Provider for unknown domains and age estimates
        max_concurrency: Bulk checks in flight at once
    """

    def __init__(
        self,
        reliable_domains: Optional[Mapping[str, ReliableDomain]] = None,
        suspicious_domains: Optional[Mapping[str, SuspiciousDomain]] = None,
        blacklisted_domains: Optional[Iterable[str]] = None,
        intelligence: Optional[DomainIntelligenceProvider] = None,
        max_concurrency: Optional[int] = None,
    ):
        super().__init__(
            name="source_checker",
            description="Domain reliability lookup and unknown-domain analysis",
        )
        self.reliable_domains = (
            reliable_domains if reliable_domains is not None else RELIABLE_DOMAINS
        )
        self.suspicious_domains = (
            suspicious_domains if suspicious_domains is not None else SUSPICIOUS_DOMAINS
        )
        self.blacklisted_domains = frozenset(
            blacklisted_domains if blacklisted_domains is not None else BLACKLISTED_DOMAINS
        )
        self.intelligence = intelligence or SimulatedDomainIntelligence()
        self.max_concurrency = max_concurrency or settings.max_concurrent_checks

    def get_capabilities(self) -> list[str]:
        return ["domain_lookup", "blacklist_check", "unknown_domain_analysis", "source_aggregation"]

    @staticmethod
    def resolve_domain(url: str) -> Optional[str]:
        """
        Extract the lowercased host of an absolute URL without a leading ``www.``.

        Returns None for relative, host-less or unparseable URLs and for hosts
        containing whitespace, percent escapes or other non-hostname characters.
        """
        try:
            parsed = URL(url)
            host = parsed.host
        except (ValueError, TypeError):
            return None

        if not parsed.is_absolute() or not parsed.scheme or not host:
            return None

        host = host.lower()
        if not VALID_HOST.fullmatch(host):
            return None
        if host.startswith("www."):
            host = host[len("www."):]
        return host or None

    async def check_one(self, url: str) -> SourceReliability:
        """Return the reliability profile for a single URL."""
        domain = self.resolve_domain(url)
        if domain is None:
            self.logger.debug("Invalid URL", url=url[:80])
            result = self.invalid_url_result()
        elif domain in self.blacklisted_domains:
            result = self.blacklisted_result(domain)
        elif domain in self.reliable_domains:
            result = self.reliable_result(domain, self.reliable_domains[domain])
        elif domain in self.suspicious_domains:
            result = self.suspicious_result(domain, self.suspicious_domains[domain])
        else:
            analysis = await self.intelligence.analyze(domain, url)
            result = self.unknown_result(domain, analysis)

        self.record_success()
        self.logger.debug(
            "Source checked",
            domain=result.domain,
            reliability_score=result.reliability_score,
        )
        return result

    async def check_bulk(self, urls: Sequence[str]) -> list[SourceReliability]:
        """Check every URL, returning results in input order (duplicates kept)."""
        if not urls:
            return []

        results = await aiometer.run_all(
            [functools.partial(self.check_one, url) for url in urls],
            max_at_once=self.max_concurrency,
        )
        self.logger.info("Bulk source check complete", urls=len(urls))
        return list(results)

    def aggregate(self, sources: Sequence[SourceReliability]) -> SourceAssessment:
        """
        Aggregate source profiles.

        Risk is low when the average is >= 80 with no low sources, high when
        the average is < 50 or low sources exceed half, medium otherwise.
        An empty set scores 0 with high risk.
        """
        if not sources:
            return SourceAssessment(average_score=0, risk_assessment=SourceRisk.HIGH)

        scores = [source.reliability_score for source in sources]
        average = sum(scores) / len(scores)

        high = sum(1 for s in scores if s >= HIGH_RELIABILITY_THRESHOLD)
        medium = sum(
            1 for s in scores if MEDIUM_RELIABILITY_THRESHOLD <= s < HIGH_RELIABILITY_THRESHOLD
        )
        low = sum(1 for s in scores if s < MEDIUM_RELIABILITY_THRESHOLD)

        risk = SourceRisk.MEDIUM
        if average >= HIGH_RELIABILITY_THRESHOLD and low == 0:
            risk = SourceRisk.LOW
        elif average < MEDIUM_RELIABILITY_THRESHOLD or low > len(scores) / 2:
            risk = SourceRisk.HIGH

        return SourceAssessment(
            average_score=round_score(average),
            high_reliability_count=high,
            medium_reliability_count=medium,
            low_reliability_count=low,
            risk_assessment=risk,
        )

    # ── Result builders ────────────────────────────────────────────────

    @staticmethod
    def invalid_url_result() -> SourceReliability:
        return SourceReliability(
            domain=INVALID_URL_DOMAIN,
            reliability_score=0,
            bias_rating=BiasRating.UNKNOWN,
            factual_reporting=FactualReporting.VERY_LOW,
            notes=["Invalid or malformed URL", "Cannot assess reliability"],
            risk_factors=["Invalid URL format"],
        )

    @staticmethod
    def blacklisted_result(domain: str) -> SourceReliability:
        return SourceReliability(
            domain=domain,
            reliability_score=0,
            bias_rating=BiasRating.UNKNOWN,
            factual_reporting=FactualReporting.VERY_LOW,
            notes=["Domain is blacklisted for spreading misinformation", "Avoid this source entirely"],
            risk_factors=["Blacklisted domain", "Known misinformation source", "No editorial standards"],
        )

    def reliable_result(self, domain: str, info: ReliableDomain) -> SourceReliability:
        risk_factors = []
        if info.bias != BiasRating.CENTER.value:
            risk_factors.append(f"{info.bias.capitalize()} political bias")

        transparent = info.tier <= 2
        return SourceReliability(
            domain=domain,
            reliability_score=info.score,
            bias_rating=BiasRating(info.bias),
            factual_reporting=FactualReporting(info.factual),
            notes=self.generate_notes(info.score, info.tier),
            metadata=SourceMetadata(
                domain_age=self.intelligence.estimate_domain_age(domain),
                ssl_certificate=True,
                social_media_presence=True,
                editorial_transparency=transparent,
                correction_policy=transparent,
                funding_transparency=transparent,
            ),
            risk_factors=risk_factors,
            trust_indicators=list(TIER_TRUST_INDICATORS.get(info.tier, [])),
        )

    def suspicious_result(self, domain: str, info: SuspiciousDomain) -> SourceReliability:
        return SourceReliability(
            domain=domain,
            reliability_score=info.score,
            bias_rating=BiasRating.UNKNOWN,
            factual_reporting=FactualReporting.MIXED if info.score > 40 else FactualReporting.LOW,
            notes=[info.reason, "Verify claims independently", "Consider alternative sources"],
            metadata=SourceMetadata(
                domain_age=self.intelligence.estimate_domain_age(domain),
                ssl_certificate=info.score > 30,
                social_media_presence=info.score > 20,
            ),
            risk_factors=[
                "Questionable editorial standards",
                "Potential bias",
                "Mixed factual accuracy",
            ],
            trust_indicators=["Some legitimate content"] if info.score > 40 else [],
        )

    def unknown_result(self, domain: str, analysis: DomainAnalysis) -> SourceReliability:
        score = self.unknown_domain_score(analysis)
        technical = analysis.technical
        content = analysis.content

        risk_factors = []
        if not technical.ssl_valid:
            risk_factors.append("No valid SSL certificate")
        if not content.has_about_page:
            risk_factors.append("Missing about page")
        if not content.has_contact_info:
            risk_factors.append("No contact information")

        trust_indicators = []
        if content.editorial_standards:
            trust_indicators.append("Editorial standards present")
        if technical.security_headers:
            trust_indicators.append("Good security practices")

        if score > 70:
            factual = FactualReporting.MIXED
        elif score > 40:
            factual = FactualReporting.LOW
        else:
            factual = FactualReporting.VERY_LOW

        return SourceReliability(
            domain=domain,
            reliability_score=score,
            bias_rating=BiasRating.UNKNOWN,
            factual_reporting=factual,
            notes=[
                "Unknown source - limited information available",
                "Verify claims through multiple sources",
                f"Domain analysis score: {score}/100",
            ],
            metadata=SourceMetadata(
                domain_age=analysis.domain_age,
                ssl_certificate=technical.ssl_valid,
                social_media_presence=content.social_media_presence,
                editorial_transparency=content.editorial_standards,
                correction_policy=content.has_about_page,
                funding_transparency=False,
            ),
            risk_factors=risk_factors,
            trust_indicators=trust_indicators,
        )

    @staticmethod
    def unknown_domain_score(analysis: DomainAnalysis) -> int:
        """Composite score for an unlisted domain, clamped to 0-100."""
        technical = analysis.technical
        content = analysis.content
        signals = {
            "ssl_valid": technical.ssl_valid,
            "security_headers": technical.security_headers,
            "mobile_friendly": technical.mobile_friendly,
            "fast_page": technical.page_speed > FAST_PAGE_SPEED,
            "has_about_page": content.has_about_page,
            "has_contact_info": content.has_contact_info,
            "has_privacy_policy": content.has_privacy_policy,
            "editorial_standards": content.editorial_standards,
        }
        score = UNKNOWN_DOMAIN_BASE_SCORE + sum(
            UNKNOWN_DOMAIN_WEIGHTS[name] for name, present in signals.items() if present
        )

        # Very new domains are suspicious
        if analysis.domain_age > 5:
            score += 8
        elif analysis.domain_age > 2:
            score += 4
        elif analysis.domain_age < 0.5:
            score -= 10

        return int(clamp(score))

    @staticmethod
    def generate_notes(score: int, tier: Optional[int] = None) -> list[str]:
        notes = list(TIER_NOTES.get(tier, []))

        if score >= 90:
            notes.append("Excellent source for factual information")
        elif score >= 70:
            notes.append("Generally reliable source")
        elif score >= 50:
            notes.append("Mixed reliability - verify claims")
        else:
            notes.append("Low reliability - use with caution")

        return notes
