"""External fact-check and cross-reference capabilities.

Both capabilities stand in for network services. The simulated
implementations draw from an injected ``random.Random`` so a seeded
instance reproduces the same verdicts; tests substitute fixed doubles.

Usage:
    checker = SimulatedExternalFactChecker(rng=random.Random(7), delay=0)
    result = await checker.check("Vaccines are tested in trials")
"""

import asyncio
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Optional

from truthguard.config.knowledge_base import (
    EXTERNAL_CHECK_RULES,
    GENERAL_CHECK_SOURCE,
    ExternalCheckRule,
)
from truthguard.config.settings import settings


@dataclass(frozen=True)
class ExternalCheckResult:
    """Verdict from an external fact-checking service.

    Attributes:
        status: verified, unverified or disputed
        confidence: Service confidence (0.0-1.0)
        source: Name of the answering service
    """

    status: str
    confidence: float
    source: str


@dataclass(frozen=True)
class CrossReferenceResult:
    """Counts of sources supporting, contradicting or neutral on a claim."""

    supporting_sources: int
    contradicting_sources: int
    neutral_sources: int

    @property
    def total_sources(self) -> int:
        return self.supporting_sources + self.contradicting_sources + self.neutral_sources

    @property
    def support_ratio(self) -> float:
        return self.supporting_sources / (
            self.supporting_sources + self.contradicting_sources + 1
        )


class ExternalFactChecker(ABC):
    """Capability: ask an external service about a claim."""

    @abstractmethod
    async def check(self, claim: str) -> ExternalCheckResult:
        """Return the service's verdict for ``claim``."""


class CrossReferenceProvider(ABC):
    """Capability: count how independent sources treat a claim."""

    @abstractmethod
    def cross_reference(self, claim: str) -> CrossReferenceResult:
        """Return supporting/contradicting/neutral source counts."""


def _default_rng() -> random.Random:
    return random.Random(settings.random_seed)


class SimulatedExternalFactChecker(ExternalFactChecker):
    """
    Simulated fact-check API.

    Topic rules answer deterministically (vaccines, climate, 5G); any other
    claim gets a seeded draw: verified with probability 0.6, confidence
    uniform in [0.5, 0.9). Each call awaits ``delay`` seconds to model
    network latency.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        delay: Optional[float] = None,
        rules: Optional[Iterable[ExternalCheckRule]] = None,
    ):
        self.rng = rng or _default_rng()
        self.delay = settings.external_check_delay if delay is None else delay
        self.rules = tuple(rules if rules is not None else EXTERNAL_CHECK_RULES)

    async def check(self, claim: str) -> ExternalCheckResult:
        # Draw before sleeping so concurrent checks consume the rng in call order
        result = self._verdict(claim)
        if self.delay > 0:
            await asyncio.sleep(self.delay)
        return result

    def _verdict(self, claim: str) -> ExternalCheckResult:
        claim_lower = claim.lower()
        for rule in self.rules:
            if any(keyword in claim_lower for keyword in rule.keywords):
                return ExternalCheckResult(rule.status, rule.confidence, rule.source)

        status = "verified" if self.rng.random() > 0.4 else "unverified"
        confidence = self.rng.random() * 0.4 + 0.5
        return ExternalCheckResult(status, confidence, GENERAL_CHECK_SOURCE)


class SimulatedCrossReference(CrossReferenceProvider):
    """
    Simulated multi-source cross-reference.

    Draws 3-10 sources; 20-80% of them support the claim and a random share
    of the remainder contradicts it.
    """

    MIN_SOURCES = 3
    MAX_SOURCES = 10

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or _default_rng()

    def cross_reference(self, claim: str) -> CrossReferenceResult:
        total = self.rng.randint(self.MIN_SOURCES, self.MAX_SOURCES)
        supporting = int(total * (self.rng.random() * 0.6 + 0.2))
        contradicting = int((total - supporting) * self.rng.random())
        return CrossReferenceResult(
            supporting_sources=supporting,
            contradicting_sources=contradicting,
            neutral_sources=total - supporting - contradicting,
        )


__all__ = [
    "CrossReferenceProvider",
    "CrossReferenceResult",
    "ExternalCheckResult",
    "ExternalFactChecker",
    "SimulatedCrossReference",
    "SimulatedExternalFactChecker",
]
