"""Phrase tokenization and comparison keys."""

import re

from .errors import MalformedInputError
from .types import RecognizedWord, Token, WordScoreType

_WHITESPACE = re.compile(r"\s+")
# Apostrophes inside words survive ("don't"), other punctuation does not.
_NON_WORD = re.compile(r"[^\w']+")


def _require_str(name: str, value: object) -> None:
    if not isinstance(value, str):
        raise MalformedInputError(f"{name} must be a string, got {type(value).__name__}")


def comparison_key(text: str, strip_punctuation: bool = False) -> str:
    """Return the case-insensitive key used to compare two words.

    Args:
        text: Word as written or recognized.
        strip_punctuation: Drop punctuation other than apostrophes.

    Returns:
        Lower-cased, stripped key.
    """
    key = text.strip().lower()
    if strip_punctuation:
        key = _NON_WORD.sub("", key)
    return key


def normalize(phrase: str, strip_punctuation: bool = False) -> list[Token]:
    """Split a phrase into word tokens.

    Splits on runs of whitespace and drops empty pieces. Each token keeps
    its original casing in ``display_text``.

    Example: "Get along  WITH" -> [get, along, with]

    Args:
        phrase: The phrase to tokenize.
        strip_punctuation: Drop punctuation from comparison keys. Tokens
            that are only punctuation are discarded.

    Returns:
        Tokens with 0-based ordinals, in reading order.

    Raises:
        MalformedInputError: If the phrase is not a string.
    """
    _require_str("phrase", phrase)
    tokens: list[Token] = []
    for raw in _WHITESPACE.split(phrase.strip()):
        if not raw:
            continue
        key = comparison_key(raw, strip_punctuation)
        if not key:
            continue
        tokens.append(Token(text=key, ordinal=len(tokens), display_text=raw))
    return tokens


def words_from_transcript(transcript: str) -> list[RecognizedWord]:
    """Adapt a plain ASR transcript to recognizer words.

    A transcript carries no acoustic scores, so every word is reported as
    correct with full nativeness and an index span equal to its ordinal.
    """
    _require_str("transcript", transcript)
    return [
        RecognizedWord(
            text=raw,
            start_index=i,
            end_index=i,
            nativeness_score=1.0,
            score_type=WordScoreType.CORRECT,
        )
        for i, raw in enumerate(r for r in _WHITESPACE.split(transcript.strip()) if r)
    ]
