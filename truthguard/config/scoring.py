"""Credibility scoring constants.

Component weights (sum to 1.0 by default, not enforced):
- content_analysis: 0.30
- fact_verification: 0.45 (most important)
- source_reliability: 0.25

Adjustments applied after weighting:
- bias_penalty x 100 when over half the sources lean left/right
- recency_bonus x 100 when a source is under a year old and base > 60
- flat SUSPICIOUS_CONTENT_PENALTY when more than 3 suspicious patterns
"""

from types import MappingProxyType
from typing import Mapping

DEFAULT_WEIGHTS: Mapping[str, float] = MappingProxyType({
    "content_analysis": 0.30,
    "fact_verification": 0.45,
    "source_reliability": 0.25,
    "bias_penalty": 0.10,
    "recency_bonus": 0.05,
})

NEUTRAL_COMPONENT_SCORE = 50

# Content score
CONTENT_BASE_SCORE = 70
TONE_ADJUSTMENTS: Mapping[str, int] = MappingProxyType({
    "neutral": 10,
    "sensational": -20,
    "manipulative": -35,
})
CLICKBAIT_PENALTY_FACTOR = 0.3
SUSPICIOUS_PATTERN_PENALTY = 8

# Adjustments
BIASED_RATINGS = frozenset({"left", "right"})
RECENT_DOMAIN_AGE_YEARS = 1
RECENCY_MIN_BASE_SCORE = 60
SUSPICIOUS_PATTERN_LIMIT = 3
SUSPICIOUS_CONTENT_PENALTY = 15

# Classification thresholds on overall_score
RELIABLE_THRESHOLD = 70
SUSPICIOUS_THRESHOLD = 40

# Risk level thresholds (upper bounds, exclusive)
CRITICAL_RISK_BELOW = 30
HIGH_RISK_BELOW = 50
MEDIUM_RISK_BELOW = 70

# Confidence
CONFIDENCE_BASE = 0.5
CONFIDENCE_MIN = 0.1
CONFIDENCE_MAX = 1.0
MANY_CLAIMS_THRESHOLD = 3
MANY_CLAIMS_BONUS = 0.2
MANY_SOURCES_THRESHOLD = 2
MANY_SOURCES_BONUS = 0.15
HIGH_QUALITY_SOURCE_SCORE = 80
HIGH_QUALITY_SOURCE_BONUS = 0.1
DISPUTED_RATIO_LIMIT = 0.3
DISPUTED_PENALTY = 0.2

# Detailed analysis thresholds
CLICKBAIT_FLAG_THRESHOLD = 50
EXCELLENT_SOURCE_SCORE = 90
POOR_SOURCE_SCORE = 30
MULTIPLE_PATTERNS_THRESHOLD = 2
