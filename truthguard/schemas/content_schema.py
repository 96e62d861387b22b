"""Content analysis schemas.

ContentAnalysis is produced fresh per call by ContentAnalyzer and is frozen
once returned. Tone and entity type enums keep values no current code path
produces (MANIPULATIVE, PERSON, GPE, MONEY) so consumers can match on the
full vocabulary.
"""

from enum import Enum

from pydantic import BaseModel, Field


class Tone(str, Enum):
    """Overall tone of the analysed text.

    NEUTRAL: Sensational vocabulary used at most twice.
    SENSATIONAL: Sensational vocabulary used three times or more.
    MANIPULATIVE: Reserved; no detector currently emits it.
    """

    NEUTRAL = "neutral"
    SENSATIONAL = "sensational"
    MANIPULATIVE = "manipulative"


class EntityType(str, Enum):
    """Entity categories. Only DATE and ORG are extracted today."""

    PERSON = "PERSON"
    ORG = "ORG"
    GPE = "GPE"
    DATE = "DATE"
    MONEY = "MONEY"


class ContentEntity(BaseModel):
    """A pattern-matched entity mention."""

    text: str = Field(..., description="Matched surface text")
    type: EntityType = Field(..., description="Entity category")
    confidence: float = Field(
        ..., ge=0.0, le=1.0, description="Extraction confidence (0.0-1.0)"
    )

    model_config = {"frozen": True}


class ContentAnalysis(BaseModel):
    """Linguistic analysis of a single text."""

    tone: Tone = Field(..., description="Detected tone")
    clickbait_score: int = Field(
        ..., ge=0, le=100, description="25 points per clickbait template matched, capped at 100"
    )
    entities: list[ContentEntity] = Field(
        default_factory=list, description="Entities in order of extraction"
    )
    suspicious_patterns: list[str] = Field(
        default_factory=list, description="Human-readable suspicious pattern flags"
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "tone": "neutral",
                    "clickbait_score": 0,
                    "entities": [
                        {"text": "2024", "type": "DATE", "confidence": 0.9},
                        {"text": "NASA", "type": "ORG", "confidence": 0.95},
                    ],
                    "suspicious_patterns": ["Excessive punctuation"],
                }
            ]
        },
    }
