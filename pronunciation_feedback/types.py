"""Type definitions and data structures for pronunciation feedback."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from .errors import MalformedInputError


class WordScoreType(str, Enum):
    """Word-level verdict reported by the forced aligner."""

    CORRECT = "correct"
    INCORRECT = "incorrect"
    ALMOST_CORRECT = "almost_correct"


class Severity(str, Enum):
    """Severity of a phoneme or character segment."""

    ERROR = "error"
    WARNING = "warning"
    NORMAL = "normal"

    @property
    def rank(self) -> int:
        """Higher is worse."""
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {Severity.NORMAL: 0, Severity.WARNING: 1, Severity.ERROR: 2}


class ComparisonStatus(str, Enum):
    """Outcome of aligning one word position."""

    MATCH = "match"
    SUBSTITUTION = "substitution"
    DELETION = "deletion"  # expected word was not spoken
    INSERTION = "insertion"  # spoken word was not expected


def _check_text(kind: str, text: object) -> None:
    if not isinstance(text, str):
        raise MalformedInputError(f"{kind} text must be a string, got {type(text).__name__}")


def _check_span(kind: str, text: str, start: int, end: int) -> None:
    if not isinstance(start, int) or not isinstance(end, int):
        raise MalformedInputError(f"{kind} {text!r} is missing an index ({start}..{end})")
    if start < 0 or end < 0:
        raise MalformedInputError(
            f"{kind} {text!r} has a negative index ({start}..{end})"
        )
    if start > end:
        raise MalformedInputError(
            f"{kind} {text!r} has start index {start} after end index {end}"
        )


@dataclass(frozen=True)
class Token:
    """One normalized word of a phrase.

    ``text`` is the lower-cased comparison key, ``display_text`` keeps the
    casing found in the source phrase.
    """

    text: str
    ordinal: int
    display_text: str

    def __post_init__(self) -> None:
        _check_text("token", self.text)
        _check_text("token", self.display_text)


@dataclass(frozen=True)
class RecognizedWord:
    """One word reported by the external recognizer."""

    text: str
    start_index: int
    end_index: int
    nativeness_score: float = 1.0  # 0..1
    score_type: WordScoreType = WordScoreType.CORRECT

    def __post_init__(self) -> None:
        _check_text("word", self.text)
        _check_span("word", self.text, self.start_index, self.end_index)


@dataclass(frozen=True)
class Phoneme:
    """One phoneme unit reported by the external aligner.

    Indices live in the recognizer's phoneme index space, shared with
    the word spans, not in character space.
    """

    text: str
    start_index: int
    end_index: int
    score_type: Severity = Severity.NORMAL
    nativeness_score: float = 1.0

    def __post_init__(self) -> None:
        _check_text("phoneme", self.text)
        _check_span("phoneme", self.text, self.start_index, self.end_index)


@dataclass(frozen=True)
class WordComparison:
    """Alignment outcome for one position of the merged sequence.

    ``is_acoustically_correct`` is False when the recognizer heard the
    right word but scored its pronunciation below the acoustic threshold.
    The status stays ``MATCH`` in that case.
    """

    status: ComparisonStatus
    expected_word: str | None
    actual_word: str | None
    position: int
    is_acoustically_correct: bool = True
    expected_index: int | None = None  # ordinal in the expected tokens
    recognized_index: int | None = None  # index in the recognized words

    @property
    def is_correct(self) -> bool:
        return self.status == ComparisonStatus.MATCH and self.is_acoustically_correct

    @property
    def needs_practice(self) -> bool:
        """True for every position the learner should revisit."""
        return not self.is_correct

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "expected_word": self.expected_word,
            "actual_word": self.actual_word,
            "position": self.position,
            "is_acoustically_correct": self.is_acoustically_correct,
        }


@dataclass(frozen=True)
class PhonemeGroup:
    """Run of adjacent phonemes sharing one severity."""

    start_idx: int
    end_idx: int
    severity: Severity


@dataclass(frozen=True)
class CharSegment:
    """Substring of a word rendered with a single severity."""

    text: str
    severity: Severity

    def to_dict(self) -> dict[str, str]:
        return {"text": self.text, "severity": self.severity.value}


@dataclass(frozen=True)
class WordEntry:
    """Inventory entry for a correct, missing or extra word."""

    word: str
    position: int


@dataclass(frozen=True)
class WrongWord:
    """Inventory entry for a substituted or mispronounced word."""

    expected: str
    actual: str
    position: int


@dataclass(frozen=True)
class AlignmentReport:
    """Result of aligning one recording against its expected phrase."""

    accuracy_percent: float  # 0..100
    total_expected: int
    total_correct: int
    word_comparisons: tuple[WordComparison, ...]
    char_segments_by_position: Mapping[int, tuple[CharSegment, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    feedback_summary: str = ""

    @property
    def correct_words(self) -> list[WordEntry]:
        return [
            WordEntry(word=c.expected_word or "", position=c.position)
            for c in self.word_comparisons
            if c.is_correct
        ]

    @property
    def wrong_words(self) -> list[WrongWord]:
        return [
            WrongWord(
                expected=c.expected_word or "",
                actual=c.actual_word or "",
                position=c.position,
            )
            for c in self.word_comparisons
            if c.status == ComparisonStatus.SUBSTITUTION
            or (c.status == ComparisonStatus.MATCH and not c.is_acoustically_correct)
        ]

    @property
    def missing_words(self) -> list[WordEntry]:
        return [
            WordEntry(word=c.expected_word or "", position=c.position)
            for c in self.word_comparisons
            if c.status == ComparisonStatus.DELETION
        ]

    @property
    def extra_words(self) -> list[WordEntry]:
        return [
            WordEntry(word=c.actual_word or "", position=c.position)
            for c in self.word_comparisons
            if c.status == ComparisonStatus.INSERTION
        ]

    @property
    def wrong_count(self) -> int:
        return len(self.wrong_words)

    @property
    def missing_count(self) -> int:
        return len(self.missing_words)

    @property
    def extra_count(self) -> int:
        return len(self.extra_words)

    def segments_for(self, position: int) -> tuple[CharSegment, ...]:
        """Segments for a comparison position, empty if none were built."""
        return self.char_segments_by_position.get(position, ())

    def to_dict(self) -> dict[str, Any]:
        """JSON-safe representation for the rendering layer."""
        return {
            "accuracy_percent": self.accuracy_percent,
            "total_expected": self.total_expected,
            "total_correct": self.total_correct,
            "word_comparisons": [c.to_dict() for c in self.word_comparisons],
            "char_segments": [
                {
                    "position": position,
                    "segments": [s.to_dict() for s in segments],
                }
                for position, segments in sorted(self.char_segments_by_position.items())
            ],
            "wrong_count": self.wrong_count,
            "missing_count": self.missing_count,
            "extra_count": self.extra_count,
            "feedback_summary": self.feedback_summary,
        }


@dataclass(frozen=True)
class WordFeedback:
    """Phoneme-level feedback for a single practiced word."""

    word: str
    segments: tuple[CharSegment, ...]
    phoneme_accuracy: float  # 0..100, share of normal phonemes
    phonemes: tuple[Phoneme, ...]
