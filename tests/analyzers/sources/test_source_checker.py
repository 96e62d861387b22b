"""Tests for SourceChecker.

Tests cover:
- Domain resolution and invalid URLs
- Blacklisted, reliable and suspicious table lookups
- Unknown-domain composite scoring
- Bulk checks and aggregation
"""

import pytest

from truthguard.analyzers.sources.source_checker import INVALID_URL_DOMAIN, SourceChecker
from truthguard.schemas import (
    BiasRating,
    FactualReporting,
    SourceReliability,
    SourceRisk,
)

from conftest import FixedDomainIntelligence, make_domain_analysis


def _source(score: int) -> SourceReliability:
    return SourceReliability(
        domain="example.org",
        reliability_score=score,
        factual_reporting=FactualReporting.MIXED,
    )


# ── Domain Resolution ────────────────────────────────────────────────────


class TestResolveDomain:
    def test_strips_www(self) -> None:
        assert SourceChecker.resolve_domain("https://www.reuters.com/world") == "reuters.com"

    def test_lowercases_host(self) -> None:
        assert SourceChecker.resolve_domain("https://NEWS.Example.ORG/a") == "news.example.org"

    def test_relative_url_rejected(self) -> None:
        assert SourceChecker.resolve_domain("reuters.com/news") is None

    def test_plain_text_rejected(self) -> None:
        assert SourceChecker.resolve_domain("not a url") is None

    def test_empty_rejected(self) -> None:
        assert SourceChecker.resolve_domain("") is None

    @pytest.mark.parametrize("url", ["https://exa mple.com", "http://%zz.com", "https://bad<host>.com"])
    def test_non_hostname_characters_rejected(self, url: str) -> None:
        assert SourceChecker.resolve_domain(url) is None

    def test_hyphen_and_digits_kept(self) -> None:
        assert SourceChecker.resolve_domain("https://news-24.example.com/a") == "news-24.example.com"


# ── Table Lookups ────────────────────────────────────────────────────────


class TestCheckOne:
    @pytest.mark.asyncio
    async def test_invalid_url(self, source_checker: SourceChecker) -> None:
        result = await source_checker.check_one("not a url")
        assert result.domain == INVALID_URL_DOMAIN
        assert result.reliability_score == 0
        assert result.factual_reporting == FactualReporting.VERY_LOW
        assert result.risk_factors == ["Invalid URL format"]

    @pytest.mark.asyncio
    async def test_tier_one_domain(self, source_checker: SourceChecker) -> None:
        result = await source_checker.check_one("https://www.reuters.com/world/article")
        assert result.domain == "reuters.com"
        assert result.reliability_score == 98
        assert result.bias_rating == BiasRating.CENTER
        assert result.factual_reporting == FactualReporting.VERY_HIGH
        assert result.notes == [
            "Tier 1: Highest reliability and editorial standards",
            "Minimal bias, strong fact-checking protocols",
            "Excellent source for factual information",
        ]
        assert result.trust_indicators[0] == "Top-tier journalism"
        assert result.risk_factors == []
        assert result.metadata.funding_transparency is True

    @pytest.mark.asyncio
    async def test_known_domain_age_used(self) -> None:
        checker = SourceChecker(intelligence=FixedDomainIntelligence(age=3.0))
        result = await checker.check_one("https://apnews.com/x")
        assert result.metadata.domain_age == 3.0

    @pytest.mark.asyncio
    async def test_biased_domain(self, source_checker: SourceChecker) -> None:
        result = await source_checker.check_one("https://cnn.com/politics")
        assert result.bias_rating == BiasRating.LEFT
        assert result.risk_factors == ["Left political bias"]

    @pytest.mark.asyncio
    async def test_tier_three_domain(self, source_checker: SourceChecker) -> None:
        result = await source_checker.check_one("https://foxnews.com/a")
        assert result.reliability_score == 65
        assert result.notes == [
            "Tier 3: Moderate reliability",
            "Cross-reference important claims",
            "Mixed reliability - verify claims",
        ]
        assert result.trust_indicators == []
        assert result.metadata.editorial_transparency is False

    @pytest.mark.asyncio
    async def test_suspicious_domain(self, source_checker: SourceChecker) -> None:
        result = await source_checker.check_one("https://infowars.com/story")
        assert result.reliability_score == 10
        assert result.factual_reporting == FactualReporting.LOW
        assert result.notes[0] == "Known for spreading conspiracy theories and misinformation"
        assert result.trust_indicators == []
        assert result.metadata.ssl_certificate is False

    @pytest.mark.asyncio
    async def test_suspicious_domain_with_some_legitimate_content(
        self, source_checker: SourceChecker
    ) -> None:
        result = await source_checker.check_one("https://www.dailymail.co.uk/news")
        assert result.reliability_score == 45
        assert result.factual_reporting == FactualReporting.MIXED
        assert result.trust_indicators == ["Some legitimate content"]

    @pytest.mark.asyncio
    async def test_blacklisted_domain(
        self, source_checker: SourceChecker, domain_intelligence: FixedDomainIntelligence
    ) -> None:
        result = await source_checker.check_one("https://fake-news-generator.com/x")
        assert result.reliability_score == 0
        assert result.notes[-1] == "Avoid this source entirely"
        assert domain_intelligence.analyzed == []

    @pytest.mark.asyncio
    async def test_never_raises_for_garbage(self, source_checker: SourceChecker) -> None:
        result = await source_checker.check_one("http://")
        assert result.domain == INVALID_URL_DOMAIN

    @pytest.mark.asyncio
    @pytest.mark.parametrize("url", ["https://exa mple.com", "http://%zz.com"])
    async def test_malformed_host_is_invalid(
        self,
        source_checker: SourceChecker,
        domain_intelligence: FixedDomainIntelligence,
        url: str,
    ) -> None:
        result = await source_checker.check_one(url)
        assert result.domain == INVALID_URL_DOMAIN
        assert result.reliability_score == 0
        assert domain_intelligence.analyzed == []


# ── Unknown Domains ──────────────────────────────────────────────────────


class TestUnknownDomains:
    @pytest.mark.asyncio
    async def test_all_signals_clamped(self, source_checker: SourceChecker) -> None:
        result = await source_checker.check_one("https://example.org/a")
        assert result.reliability_score == 100
        assert result.factual_reporting == FactualReporting.MIXED
        assert result.notes[-1] == "Domain analysis score: 100/100"
        assert result.trust_indicators == [
            "Editorial standards present",
            "Good security practices",
        ]

    @pytest.mark.asyncio
    async def test_young_domain_without_signals(self) -> None:
        analysis = make_domain_analysis(
            ssl_valid=False,
            security_headers=False,
            mobile_friendly=False,
            page_speed=10,
            has_about_page=False,
            has_contact_info=False,
            has_privacy_policy=False,
            editorial_standards=False,
            social_media_presence=False,
            domain_age=0.2,
        )
        checker = SourceChecker(intelligence=FixedDomainIntelligence(analysis))
        result = await checker.check_one("https://brand-new.example/a")
        assert result.reliability_score == 40
        assert result.factual_reporting == FactualReporting.VERY_LOW
        assert result.risk_factors == [
            "No valid SSL certificate",
            "Missing about page",
            "No contact information",
        ]

    def test_ssl_only_mid_age(self) -> None:
        analysis = make_domain_analysis(
            security_headers=False,
            mobile_friendly=False,
            page_speed=10,
            has_about_page=False,
            has_contact_info=False,
            has_privacy_policy=False,
            editorial_standards=False,
            domain_age=3.0,
        )
        # 50 base + 10 ssl + 4 age
        assert SourceChecker.unknown_domain_score(analysis) == 64


# ── Bulk and Aggregation ─────────────────────────────────────────────────


class TestBulk:
    @pytest.mark.asyncio
    async def test_order_and_duplicates_kept(self, source_checker: SourceChecker) -> None:
        urls = [
            "https://infowars.com/a",
            "https://reuters.com/b",
            "https://infowars.com/a",
        ]
        results = await source_checker.check_bulk(urls)
        assert [r.domain for r in results] == ["infowars.com", "reuters.com", "infowars.com"]

    @pytest.mark.asyncio
    async def test_empty(self, source_checker: SourceChecker) -> None:
        assert await source_checker.check_bulk([]) == []


class TestAggregate:
    def test_mixed_sources(self, source_checker: SourceChecker) -> None:
        assessment = source_checker.aggregate([_source(98), _source(10)])
        assert assessment.average_score == 54
        assert assessment.high_reliability_count == 1
        assert assessment.medium_reliability_count == 0
        assert assessment.low_reliability_count == 1
        assert assessment.risk_assessment == SourceRisk.MEDIUM

    def test_strong_sources(self, source_checker: SourceChecker) -> None:
        assessment = source_checker.aggregate([_source(98), _source(65)])
        assert assessment.average_score == 82
        assert assessment.medium_reliability_count == 1
        assert assessment.risk_assessment == SourceRisk.LOW

    def test_majority_low_is_high_risk(self, source_checker: SourceChecker) -> None:
        assessment = source_checker.aggregate([_source(100), _source(40), _source(45)])
        assert assessment.risk_assessment == SourceRisk.HIGH

    def test_empty(self, source_checker: SourceChecker) -> None:
        assessment = source_checker.aggregate([])
        assert assessment.average_score == 0
        assert assessment.risk_assessment == SourceRisk.HIGH
