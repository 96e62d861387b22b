"""Candidate claim extraction from free text.

A claim is a sentence longer than 15 characters carrying at least one
factual signal:
- numbers: any digit
- factual_words: study, research, data, scientists, evidence, ...
- definitive_statements: is/are/will/causes/prevents/... anywhere in the
  sentence, so "this" or "island" also count
- percentages: "%" or "percent"

Only the first ``max_claims`` qualifying sentences are kept, in source order.
"""

import re
from typing import Mapping, Optional

from truthguard.config.content_patterns import (
    CLAIM_SIGNAL_PATTERNS,
    MIN_CLAIM_LENGTH,
    SENTENCE_SPLIT_PATTERN,
)
from truthguard.config.settings import settings


class ClaimExtractor:
    """Splits text into sentences and keeps those that read as factual claims."""

    def __init__(
        self,
        max_claims: Optional[int] = None,
        min_length: int = MIN_CLAIM_LENGTH,
        signal_patterns: Optional[Mapping[str, str]] = None,
    ):
        self.max_claims = max_claims if max_claims is not None else settings.max_claims
        self.min_length = min_length
        patterns = signal_patterns if signal_patterns is not None else CLAIM_SIGNAL_PATTERNS
        self.signal_patterns = {
            name: re.compile(pattern, re.IGNORECASE) for name, pattern in patterns.items()
        }
        self._sentence_split = re.compile(SENTENCE_SPLIT_PATTERN)

    def extract(self, text: str) -> list[str]:
        """Return up to ``max_claims`` stripped claim sentences in order."""
        claims: list[str] = []
        for sentence in self._sentence_split.split(text):
            sentence = sentence.strip()
            if len(sentence) <= self.min_length:
                continue
            if not self.matched_signals(sentence):
                continue
            claims.append(sentence)
            if len(claims) >= self.max_claims:
                break
        return claims

    def matched_signals(self, sentence: str) -> list[str]:
        """Names of the factual signals present in ``sentence``."""
        return [
            name for name, pattern in self.signal_patterns.items() if pattern.search(sentence)
        ]
