"""Tests for forced-alignment response parsing."""

import pytest

from pronunciation_feedback.errors import MalformedInputError
from pronunciation_feedback.types import Severity, WordScoreType
from pronunciation_feedback.wire import (
    ForcedAlignmentResponse,
    PhonemeData,
    WordData,
    parse_forced_alignment,
)


class TestWordData:
    """Tests for WordData."""

    def test_user_nativeness_alias(self) -> None:
        data = WordData.model_validate(
            {"word": "hi", "start_index": 0, "end_index": 1, "nativeness_score_user": 0.4}
        )
        assert data.nativeness_score == 0.4

    def test_plain_nativeness_field(self) -> None:
        data = WordData.model_validate(
            {"word": "hi", "start_index": 0, "end_index": 1, "nativeness_score": 0.8}
        )
        assert data.nativeness_score == 0.8

    def test_original_casing_is_preferred(self) -> None:
        data = WordData(word="paris", word_orig="Paris", start_index=0, end_index=4)
        assert data.to_recognized_word().text == "Paris"

    def test_falls_back_to_word(self) -> None:
        data = WordData(word="paris", start_index=0, end_index=4)
        assert data.to_recognized_word().text == "paris"

    def test_score_type(self) -> None:
        data = WordData.model_validate(
            {"word": "hi", "start_index": 0, "end_index": 1, "score_type": "almost_correct"}
        )
        assert data.to_recognized_word().score_type == WordScoreType.ALMOST_CORRECT

    def test_inverted_span_fails_on_conversion(self) -> None:
        data = WordData(word="hi", start_index=4, end_index=1)
        with pytest.raises(MalformedInputError):
            data.to_recognized_word()


class TestPhonemeData:
    """Tests for PhonemeData."""

    def test_phoneme_alias(self) -> None:
        data = PhonemeData.model_validate(
            {"phoneme": "th", "start_index": 2, "end_index": 3, "score_type": "warning"}
        )
        phoneme = data.to_phoneme()

        assert phoneme.text == "th"
        assert phoneme.score_type == Severity.WARNING

    def test_negative_index_fails_on_conversion(self) -> None:
        data = PhonemeData(text="a", start_index=-1, end_index=0)
        with pytest.raises(MalformedInputError):
            data.to_phoneme()


class TestParseForcedAlignment:
    """Tests for parse_forced_alignment()."""

    def test_parses_payload(self, forced_alignment_payload: dict) -> None:
        response = parse_forced_alignment(forced_alignment_payload)

        assert response.sentence == "get along with"
        assert [w.text for w in response.recognized_words()] == ["Get", "along", "with"]
        assert len(response.phoneme_list()) == 10

    def test_null_lists_are_empty(self) -> None:
        response = parse_forced_alignment({"sentence": "", "words": None, "phonemes": None})

        assert response.recognized_words() == []
        assert response.phoneme_list() == []

    def test_missing_lists_are_empty(self) -> None:
        assert parse_forced_alignment({}) == ForcedAlignmentResponse()

    def test_unknown_score_type(self) -> None:
        payload = {"words": [{"word": "hi", "start_index": 0, "end_index": 1, "score_type": "great"}]}
        with pytest.raises(MalformedInputError):
            parse_forced_alignment(payload)

    def test_missing_index(self) -> None:
        with pytest.raises(MalformedInputError, match="forced-alignment"):
            parse_forced_alignment({"phonemes": [{"phoneme": "a", "start_index": 0}]})
