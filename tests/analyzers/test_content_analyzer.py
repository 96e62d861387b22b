"""Tests for ContentAnalyzer.

Tests cover:
- Tone detection from sensational vocabulary
- Clickbait scoring and cap
- Entity extraction order (DATE then ORG)
- Suspicious pattern flags and their order
- Determinism and injected vocabularies
"""

import pytest

from truthguard.analyzers.content_analyzer import ContentAnalyzer
from truthguard.schemas import EntityType, Tone


SCENARIO_TEXT = (
    "Breaking: Scientists discover new planet!!! "
    "According to NASA, the study shows 2024 data."
)


@pytest.fixture
def analyzer() -> ContentAnalyzer:
    return ContentAnalyzer()


class TestTone:
    def test_neutral_text(self, analyzer: ContentAnalyzer) -> None:
        result = analyzer.analyze("The council approved the budget on Tuesday.")
        assert result.tone == Tone.NEUTRAL

    def test_three_sensational_words_is_sensational(self, analyzer: ContentAnalyzer) -> None:
        result = analyzer.analyze("shocking and unbelievable breaking news")
        assert result.tone == Tone.SENSATIONAL

    def test_two_sensational_words_stay_neutral(self, analyzer: ContentAnalyzer) -> None:
        result = analyzer.analyze("shocking and unbelievable news")
        assert result.tone == Tone.NEUTRAL

    def test_tokens_with_punctuation_do_not_count(self, analyzer: ContentAnalyzer) -> None:
        # "breaking:" is not the token "breaking"
        assert analyzer.count_sensational_words("Breaking: shocking! urgent,") == 0

    def test_counting_is_case_insensitive(self, analyzer: ContentAnalyzer) -> None:
        assert analyzer.count_sensational_words("SHOCKING Urgent exclusive") == 3


class TestClickbait:
    def test_single_template(self, analyzer: ContentAnalyzer) -> None:
        assert analyzer.score_clickbait("You won't believe what happened") == 25

    def test_templates_are_case_insensitive(self, analyzer: ContentAnalyzer) -> None:
        assert analyzer.score_clickbait("DOCTORS HATE him") == 25

    def test_all_templates_hit_cap(self, analyzer: ContentAnalyzer) -> None:
        text = (
            "You won't believe this one trick doctors hate. "
            "Number 7 will shock you."
        )
        assert analyzer.score_clickbait(text) == 100

    def test_no_clickbait(self, analyzer: ContentAnalyzer) -> None:
        assert analyzer.score_clickbait("Quarterly results were published.") == 0


class TestEntities:
    def test_years_then_acronyms(self, analyzer: ContentAnalyzer) -> None:
        entities = analyzer.extract_entities("In 1999 the FBI and NASA met; again in 2021.")
        assert [(e.text, e.type) for e in entities] == [
            ("1999", EntityType.DATE),
            ("2021", EntityType.DATE),
            ("NASA", EntityType.ORG),
            ("FBI", EntityType.ORG),
        ]

    def test_duplicate_years_kept(self, analyzer: ContentAnalyzer) -> None:
        entities = analyzer.extract_entities("2020, then 2020 again")
        assert [e.text for e in entities] == ["2020", "2020"]

    def test_confidences(self, analyzer: ContentAnalyzer) -> None:
        entities = analyzer.extract_entities("CDC report from 2023")
        assert entities[0].confidence == 0.9
        assert entities[1].confidence == 0.95

    def test_acronyms_are_case_sensitive(self, analyzer: ContentAnalyzer) -> None:
        assert analyzer.extract_entities("nasa and who said so") == []

    def test_out_of_range_years_ignored(self, analyzer: ContentAnalyzer) -> None:
        assert analyzer.extract_entities("In 1850 and 2150 nothing happened") == []


class TestSuspiciousPatterns:
    def test_flags_in_order(self, analyzer: ContentAnalyzer) -> None:
        text = (
            "shocking unbelievable breaking exclusive news!!! "
            "You won't believe this one trick doctors hate"
        )
        result = analyzer.analyze(text)
        assert result.suspicious_patterns == [
            "High use of sensational language",
            "Clickbait patterns detected",
            "Excessive punctuation",
        ]

    def test_three_sensational_words_not_flagged(self, analyzer: ContentAnalyzer) -> None:
        result = analyzer.analyze("shocking unbelievable breaking news")
        assert "High use of sensational language" not in result.suspicious_patterns

    def test_clickbait_at_fifty_not_flagged(self, analyzer: ContentAnalyzer) -> None:
        result = analyzer.analyze("You won't believe this one trick")
        assert result.clickbait_score == 50
        assert result.suspicious_patterns == []


class TestScenario:
    def test_breaking_news_scenario(self, analyzer: ContentAnalyzer) -> None:
        result = analyzer.analyze(SCENARIO_TEXT)
        pairs = [(e.text, e.type) for e in result.entities]
        assert ("2024", EntityType.DATE) in pairs
        assert ("NASA", EntityType.ORG) in pairs
        assert "Excessive punctuation" in result.suspicious_patterns

    def test_breaking_news_scenario_tone_follows_token_count(
        self, analyzer: ContentAnalyzer
    ) -> None:
        # Only "Breaking:" is present, which is not a sensational token
        result = analyzer.analyze(SCENARIO_TEXT)
        assert result.tone == Tone.NEUTRAL

    def test_idempotent(self, analyzer: ContentAnalyzer) -> None:
        assert analyzer.analyze(SCENARIO_TEXT) == analyzer.analyze(SCENARIO_TEXT)


class TestInjection:
    def test_custom_vocabulary(self) -> None:
        analyzer = ContentAnalyzer(sensational_words=["wow"])
        result = analyzer.analyze("wow wow wow")
        assert result.tone == Tone.SENSATIONAL

    def test_custom_acronyms(self) -> None:
        analyzer = ContentAnalyzer(organization_acronyms=["ESA"])
        entities = analyzer.extract_entities("ESA and NASA")
        assert [e.text for e in entities] == ["ESA"]

    def test_success_counted(self, analyzer: ContentAnalyzer) -> None:
        analyzer.analyze("Plain text here.")
        assert analyzer.get_stats()["processed_count"] == 1
