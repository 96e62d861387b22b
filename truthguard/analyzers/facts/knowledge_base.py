"""Knowledge-base lookup for extracted claims."""

from typing import Iterable, Optional

from truthguard.config.knowledge_base import (
    KEYWORD_MIN_LENGTH,
    KNOWLEDGE_BASE,
    SIMILARITY_THRESHOLD,
    KnowledgeBaseEntry,
)


class KnowledgeBaseMatcher:
    """
    Finds the first knowledge-base entry related to a claim.

    An entry matches when any of its keywords (tokens longer than three
    characters) occurs in the lowercased claim, or when word-overlap
    similarity exceeds the threshold.
    """

    def __init__(
        self,
        entries: Optional[Iterable[KnowledgeBaseEntry]] = None,
        similarity_threshold: float = SIMILARITY_THRESHOLD,
    ):
        self.entries = tuple(entries if entries is not None else KNOWLEDGE_BASE)
        self.similarity_threshold = similarity_threshold

    def match(self, claim: str) -> Optional[KnowledgeBaseEntry]:
        claim_lower = claim.lower()
        for entry in self.entries:
            fact_lower = entry.fact.lower()
            keywords = [word for word in fact_lower.split(" ") if len(word) > KEYWORD_MIN_LENGTH]
            if any(keyword in claim_lower for keyword in keywords):
                return entry
            if self.similarity(claim_lower, fact_lower) > self.similarity_threshold:
                return entry
        return None

    @staticmethod
    def similarity(first: str, second: str) -> float:
        """Share of ``first``'s words found in ``second``, over the longer word count."""
        words_first = first.split(" ")
        words_second = second.split(" ")
        common = [word for word in words_first if word in words_second]
        return len(common) / max(len(words_first), len(words_second))
