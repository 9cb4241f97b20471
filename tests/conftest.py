"""Pytest configuration and fixtures for pronunciation_feedback tests."""

import pytest

from pronunciation_feedback.types import (
    Phoneme,
    RecognizedWord,
    Severity,
    WordScoreType,
)


@pytest.fixture
def technology_word() -> RecognizedWord:
    """The word "technology" spanning phoneme indices 0..9."""
    return RecognizedWord(
        text="technology",
        start_index=0,
        end_index=9,
        nativeness_score=0.4,
        score_type=WordScoreType.ALMOST_CORRECT,
    )


@pytest.fixture
def technology_phonemes() -> list[Phoneme]:
    """Phonemes of "technology" with an error on the first three indices."""
    return [
        Phoneme(text="t", start_index=0, end_index=2, score_type=Severity.ERROR, nativeness_score=0.2),
        Phoneme(text="eh", start_index=3, end_index=6, score_type=Severity.NORMAL, nativeness_score=0.9),
        Phoneme(text="k", start_index=7, end_index=9, score_type=Severity.NORMAL, nativeness_score=0.95),
    ]


@pytest.fixture
def forced_alignment_payload() -> dict:
    """Raw forced-alignment response for "get along with".

    "along" is heard but scored poorly, with an error on its first phoneme.
    """
    return {
        "success": True,
        "sentence": "get along with",
        "words": [
            {"word": "get", "word_orig": "Get", "start_index": 0, "end_index": 2,
             "score_type": "correct", "nativeness_score_user": 0.95},
            {"word": "along", "word_orig": "along", "start_index": 3, "end_index": 6,
             "score_type": "incorrect", "nativeness_score_user": 0.35},
            {"word": "with", "word_orig": "with", "start_index": 7, "end_index": 9,
             "score_type": "correct", "nativeness_score_user": 0.9},
        ],
        "phonemes": [
            {"phoneme": "g", "start_index": 0, "end_index": 0, "score_type": "normal", "nativeness_score": 0.9},
            {"phoneme": "eh", "start_index": 1, "end_index": 1, "score_type": "normal", "nativeness_score": 0.9},
            {"phoneme": "t", "start_index": 2, "end_index": 2, "score_type": "normal", "nativeness_score": 0.9},
            {"phoneme": "ah", "start_index": 3, "end_index": 3, "score_type": "error", "nativeness_score": 0.1},
            {"phoneme": "l", "start_index": 4, "end_index": 4, "score_type": "normal", "nativeness_score": 0.8},
            {"phoneme": "ao", "start_index": 5, "end_index": 5, "score_type": "normal", "nativeness_score": 0.8},
            {"phoneme": "ng", "start_index": 6, "end_index": 6, "score_type": "normal", "nativeness_score": 0.8},
            {"phoneme": "w", "start_index": 7, "end_index": 7, "score_type": "normal", "nativeness_score": 0.9},
            {"phoneme": "ih", "start_index": 8, "end_index": 8, "score_type": "normal", "nativeness_score": 0.9},
            {"phoneme": "th", "start_index": 9, "end_index": 9, "score_type": "normal", "nativeness_score": 0.9},
        ],
    }
