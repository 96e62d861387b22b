"""Pattern-based linguistic analysis of raw text.

Derives four signals from the text alone, with no randomness:
- Tone: sensational when more than two whitespace tokens are sensational words
- Clickbait score: 25 points per matching clickbait template, capped at 100
- Entities: four-digit years (DATE) and known agency acronyms (ORG)
- Suspicious patterns: heavy sensational language, clickbait, "!!!"

Empty or whitespace-only text is rejected by the caller, not here.
"""

import re
from typing import Iterable, Optional

from truthguard.analyzers.base_analyzer import BaseAnalyzer
from truthguard.config.content_patterns import (
    CLICKBAIT_FLAG,
    CLICKBAIT_PATTERNS,
    CLICKBAIT_POINTS_PER_MATCH,
    DATE_ENTITY_CONFIDENCE,
    EXCESSIVE_PUNCTUATION_FLAG,
    ORG_ENTITY_CONFIDENCE,
    ORGANIZATION_ACRONYMS,
    SENSATIONAL_LANGUAGE_FLAG,
    SENSATIONAL_WORDS,
    YEAR_PATTERN,
)
from truthguard.schemas import ContentAnalysis, ContentEntity, EntityType, Tone


class ContentAnalyzer(BaseAnalyzer):
    """
    Scores tone, clickbait and suspicious patterns of a text.

    Usage:
        analyzer = ContentAnalyzer()
        analysis = analyzer.analyze("Breaking: Scientists discover new planet!!!")

    Attributes:
        sensational_words: Vocabulary counted toward a sensational tone
        clickbait_patterns: Compiled case-insensitive clickbait templates
        organization_acronyms: Acronyms tagged as ORG entities
    """

    SENSATIONAL_TONE_THRESHOLD = 2
    SENSATIONAL_FLAG_THRESHOLD = 3
    CLICKBAIT_FLAG_THRESHOLD = 50

    def __init__(
        self,
        sensational_words: Optional[Iterable[str]] = None,
        clickbait_patterns: Optional[Iterable[str]] = None,
        organization_acronyms: Optional[Iterable[str]] = None,
    ):
        super().__init__(
            name="content_analyzer",
            description="Tone, clickbait and entity analysis",
        )
        self.sensational_words = frozenset(
            sensational_words if sensational_words is not None else SENSATIONAL_WORDS
        )
        self.clickbait_patterns = [
            re.compile(p, re.IGNORECASE)
            for p in (clickbait_patterns if clickbait_patterns is not None else CLICKBAIT_PATTERNS)
        ]
        self.organization_acronyms = tuple(
            organization_acronyms if organization_acronyms is not None else ORGANIZATION_ACRONYMS
        )
        self._year_pattern = re.compile(YEAR_PATTERN)

    def get_capabilities(self) -> list[str]:
        return ["tone_detection", "clickbait_detection", "entity_extraction"]

    def analyze(self, text: str) -> ContentAnalysis:
        """
        Analyse a text.

        Args:
            text: Raw, non-empty text

        Returns:
            ContentAnalysis; identical input always yields an identical result
        """
        sensational_count = self.count_sensational_words(text)
        clickbait_score = self.score_clickbait(text)

        suspicious_patterns = []
        if sensational_count > self.SENSATIONAL_FLAG_THRESHOLD:
            suspicious_patterns.append(SENSATIONAL_LANGUAGE_FLAG)
        if clickbait_score > self.CLICKBAIT_FLAG_THRESHOLD:
            suspicious_patterns.append(CLICKBAIT_FLAG)
        if "!!!" in text:
            suspicious_patterns.append(EXCESSIVE_PUNCTUATION_FLAG)

        tone = (
            Tone.SENSATIONAL
            if sensational_count > self.SENSATIONAL_TONE_THRESHOLD
            else Tone.NEUTRAL
        )

        analysis = ContentAnalysis(
            tone=tone,
            clickbait_score=clickbait_score,
            entities=self.extract_entities(text),
            suspicious_patterns=suspicious_patterns,
        )
        self.record_success()
        self.logger.debug(
            "Content analysed",
            tone=tone.value,
            clickbait_score=clickbait_score,
            pattern_count=len(suspicious_patterns),
        )
        return analysis

    def count_sensational_words(self, text: str) -> int:
        return sum(1 for word in text.lower().split() if word in self.sensational_words)

    def score_clickbait(self, text: str) -> int:
        score = sum(
            CLICKBAIT_POINTS_PER_MATCH
            for pattern in self.clickbait_patterns
            if pattern.search(text)
        )
        return min(score, 100)

    def extract_entities(self, text: str) -> list[ContentEntity]:
        """
        Extract DATE and ORG entities by pattern.

        Years come first in order of appearance (repeats kept), then each
        acronym present anywhere in the text, in table order.
        """
        entities = [
            ContentEntity(text=match.group(0), type=EntityType.DATE, confidence=DATE_ENTITY_CONFIDENCE)
            for match in self._year_pattern.finditer(text)
        ]
        entities.extend(
            ContentEntity(text=org, type=EntityType.ORG, confidence=ORG_ENTITY_CONFIDENCE)
            for org in self.organization_acronyms
            if org in text
        )
        return entities
