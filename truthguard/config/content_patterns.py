"""Lexical patterns for content analysis and claim extraction.

Patterns are raw regex strings; analyzers compile them at construction
(case-insensitive unless noted) so substitute pattern sets can be injected.
"""

# Whitespace tokens counted as sensational vocabulary.
# "must see" is a two-word entry and never equals a single token.
SENSATIONAL_WORDS = (
    "shocking",
    "unbelievable",
    "breaking",
    "exclusive",
    "urgent",
    "must see",
)

CLICKBAIT_PATTERNS = (
    r"you won't believe",
    r"doctors hate",
    r"this one trick",
    r"number \d+ will shock you",
)

CLICKBAIT_POINTS_PER_MATCH = 25

# Four-digit years 1900-2099
YEAR_PATTERN = r"\b(?:19|20)\d{2}\b"

# Case-sensitive substring match
ORGANIZATION_ACRONYMS = ("NASA", "WHO", "CDC", "FBI", "CIA", "UN", "EU")

DATE_ENTITY_CONFIDENCE = 0.9
ORG_ENTITY_CONFIDENCE = 0.95

# Suspicious-pattern flags
SENSATIONAL_LANGUAGE_FLAG = "High use of sensational language"
CLICKBAIT_FLAG = "Clickbait patterns detected"
EXCESSIVE_PUNCTUATION_FLAG = "Excessive punctuation"

# Claim extraction
SENTENCE_SPLIT_PATTERN = r"[.!?]+"
MIN_CLAIM_LENGTH = 15

CLAIM_SIGNAL_PATTERNS = {
    "numbers": r"\d+",
    "factual_words": (
        r"study|research|report|according|data|statistics|scientists|experts"
        r"|proven|evidence|shows|indicates|confirms|reveals"
    ),
    "definitive_statements": (
        r"is|are|will|causes|prevents|increases|decreases|leads to"
    ),
    "percentages": r"%|\bpercent\b",
}

__all__ = [
    "SENSATIONAL_WORDS",
    "CLICKBAIT_PATTERNS",
    "CLICKBAIT_POINTS_PER_MATCH",
    "YEAR_PATTERN",
    "ORGANIZATION_ACRONYMS",
    "DATE_ENTITY_CONFIDENCE",
    "ORG_ENTITY_CONFIDENCE",
    "SENSATIONAL_LANGUAGE_FLAG",
    "CLICKBAIT_FLAG",
    "EXCESSIVE_PUNCTUATION_FLAG",
    "SENTENCE_SPLIT_PATTERN",
    "MIN_CLAIM_LENGTH",
    "CLAIM_SIGNAL_PATTERNS",
]
