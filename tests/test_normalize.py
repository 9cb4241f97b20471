"""Tests for phrase tokenization."""

from pronunciation_feedback.normalize import comparison_key, normalize, words_from_transcript
from pronunciation_feedback.types import WordScoreType


class TestNormalize:
    """Tests for normalize()."""

    def test_splits_on_whitespace_runs(self) -> None:
        """Tabs, newlines and repeated spaces all separate tokens."""
        tokens = normalize("get  along\twith\nme")
        assert [t.text for t in tokens] == ["get", "along", "with", "me"]

    def test_ordinals_are_sequential(self) -> None:
        tokens = normalize("  look forward to  ")
        assert [t.ordinal for t in tokens] == [0, 1, 2]

    def test_lowercases_but_keeps_display_text(self) -> None:
        """Comparison key is lower case, display text keeps casing."""
        tokens = normalize("Hello WORLD")
        assert tokens[0].text == "hello"
        assert tokens[0].display_text == "Hello"
        assert tokens[1].text == "world"
        assert tokens[1].display_text == "WORLD"

    def test_empty_input(self) -> None:
        assert normalize("") == []
        assert normalize("   \t ") == []

    def test_punctuation_kept_by_default(self) -> None:
        tokens = normalize("Hello, world.")
        assert [t.text for t in tokens] == ["hello,", "world."]

    def test_strip_punctuation(self) -> None:
        """Punctuation is dropped except apostrophes inside words."""
        tokens = normalize("Don't stop, now - please.", strip_punctuation=True)
        assert [t.text for t in tokens] == ["don't", "stop", "now", "please"]
        # Dropping "-" renumbers the following token
        assert [t.ordinal for t in tokens] == [0, 1, 2, 3]
        assert tokens[1].display_text == "stop,"


class TestComparisonKey:
    """Tests for comparison_key()."""

    def test_case_insensitive(self) -> None:
        assert comparison_key("  With ") == "with"

    def test_strip_punctuation(self) -> None:
        assert comparison_key("Hello!", strip_punctuation=True) == "hello"
        assert comparison_key("Hello!") == "hello!"


class TestWordsFromTranscript:
    """Tests for words_from_transcript()."""

    def test_words_are_scored_correct(self) -> None:
        words = words_from_transcript("get along with")

        assert [w.text for w in words] == ["get", "along", "with"]
        assert all(w.score_type == WordScoreType.CORRECT for w in words)
        assert all(w.nativeness_score == 1.0 for w in words)

    def test_index_span_is_ordinal(self) -> None:
        words = words_from_transcript("  one   two ")
        assert [(w.start_index, w.end_index) for w in words] == [(0, 0), (1, 1)]

    def test_empty_transcript(self) -> None:
        assert words_from_transcript("") == []
