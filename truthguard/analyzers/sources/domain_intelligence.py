"""Domain intelligence capability for domains missing from the static tables.

A provider answers two questions about a domain:
- analyze(): WHOIS-style registration data plus technical and content signals
- estimate_domain_age(): registration age for listed domains without a known age

SimulatedDomainIntelligence stands in for WHOIS lookups and page crawls.
It draws every signal from an injected ``random.Random`` and awaits a
configurable delay to model network latency.
"""

import asyncio
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Mapping, Optional

from truthguard.config.domain_reliability import ESTABLISHED_DOMAIN_AGES
from truthguard.config.settings import settings

EARLIEST_CREATION_DATE = date(2000, 1, 1)
DAYS_PER_YEAR = 365


@dataclass(frozen=True)
class WhoisRecord:
    """Registration data for a domain."""

    creation_date: date
    registrar: str
    country: str

    def age_years(self, today: date) -> float:
        return (today - self.creation_date).days / DAYS_PER_YEAR


@dataclass(frozen=True)
class TechnicalSignals:
    """Transport and page-quality signals."""

    ssl_valid: bool
    security_headers: bool
    mobile_friendly: bool
    page_speed: int


@dataclass(frozen=True)
class ContentSignals:
    """Publisher transparency signals."""

    has_about_page: bool
    has_contact_info: bool
    has_privacy_policy: bool
    editorial_standards: bool
    social_media_presence: bool


@dataclass(frozen=True)
class DomainAnalysis:
    """Everything known about an unlisted domain.

    Attributes:
        whois: Registration record
        technical: Transport and page-quality signals
        content: Publisher transparency signals
        domain_age: Age in years at analysis time
    """

    whois: WhoisRecord
    technical: TechnicalSignals
    content: ContentSignals
    domain_age: float


class DomainIntelligenceProvider(ABC):
    """Capability: inspect a domain the static tables do not cover."""

    @abstractmethod
    async def analyze(self, domain: str, url: str) -> DomainAnalysis:
        """Return registration, technical and content signals for ``domain``."""

    @abstractmethod
    def estimate_domain_age(self, domain: str) -> float:
        """Return an age estimate in years for a listed domain."""


class SimulatedDomainIntelligence(DomainIntelligenceProvider):
    """
    Seeded stand-in for WHOIS and crawl-based domain analysis.

    Signal probabilities: SSL 0.8, security headers 0.6, mobile-friendly 0.7,
    about page 0.7, contact info 0.6, privacy policy 0.5, editorial
    standards 0.4, social presence 0.5. Creation dates are uniform between
    2000-01-01 and ``today``.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        delay: Optional[float] = None,
        today: Optional[date] = None,
        known_ages: Optional[Mapping[str, int]] = None,
    ):
        self.rng = rng or random.Random(settings.random_seed)
        self.delay = settings.domain_analysis_delay if delay is None else delay
        self._today = today
        self.known_ages = known_ages if known_ages is not None else ESTABLISHED_DOMAIN_AGES

    @property
    def today(self) -> date:
        return self._today or date.today()

    async def analyze(self, domain: str, url: str) -> DomainAnalysis:
        # Draw before sleeping so concurrent lookups consume the rng in call order
        analysis = self._draw(domain)
        if self.delay > 0:
            await asyncio.sleep(self.delay)
        return analysis

    def estimate_domain_age(self, domain: str) -> float:
        if domain in self.known_ages:
            return float(self.known_ages[domain])
        return float(self.rng.randint(1, 15))

    def _draw(self, domain: str) -> DomainAnalysis:
        today = self.today
        span = (today - EARLIEST_CREATION_DATE).days
        whois = WhoisRecord(
            creation_date=EARLIEST_CREATION_DATE + timedelta(days=self.rng.randint(0, max(span, 0))),
            registrar="Random Registrar Inc.",
            country="US",
        )
        technical = TechnicalSignals(
            ssl_valid=self.rng.random() > 0.2,
            security_headers=self.rng.random() > 0.4,
            mobile_friendly=self.rng.random() > 0.3,
            page_speed=int(self.rng.random() * 100),
        )
        content = ContentSignals(
            has_about_page=self.rng.random() > 0.3,
            has_contact_info=self.rng.random() > 0.4,
            has_privacy_policy=self.rng.random() > 0.5,
            editorial_standards=self.rng.random() > 0.6,
            social_media_presence=self.rng.random() > 0.5,
        )
        return DomainAnalysis(
            whois=whois,
            technical=technical,
            content=content,
            domain_age=whois.age_years(today),
        )
