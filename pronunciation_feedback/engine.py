"""Pronunciation alignment and feedback engine.

This module provides the PronunciationEngine class that integrates:
- Tokenization of the expected phrase
- Word alignment (greedy lookahead or edit distance)
- Phoneme segmentation of mispronounced words
- Aggregation into an AlignmentReport

Every call is a pure function of its inputs; the engine keeps no state
between calls and can be shared across threads.
"""

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Any, Literal

from .aggregate import FeedbackAggregator
from .align import DEFAULT_ACOUSTIC_THRESHOLD, EditDistanceAligner, LookaheadAligner, WordAligner
from .normalize import normalize, words_from_transcript
from .segment import PhonemeSegmenter, has_phoneme_errors, phoneme_accuracy, phonemes_in_span
from .types import (
    AlignmentReport,
    CharSegment,
    ComparisonStatus,
    Phoneme,
    RecognizedWord,
    Severity,
    WordComparison,
    WordFeedback,
)
from .wire import ForcedAlignmentResponse, parse_forced_alignment

logger = logging.getLogger(__name__)


@dataclass
class EngineConfig:
    """Configuration for the engine."""

    aligner_type: Literal["lookahead", "edit_distance"] = "lookahead"
    acoustic_threshold: float = DEFAULT_ACOUSTIC_THRESHOLD
    strip_punctuation: bool = False
    segment_correct_words: bool = True  # also split correct words with phoneme errors


class PronunciationEngine:
    """Aligns a recognition result against the expected phrase.

    The engine:
    1. Tokenizes the expected phrase
    2. Aligns expected tokens with recognized words
    3. Splits words with phoneme errors into character segments
    4. Falls back to whole-word highlighting everywhere else
    5. Aggregates counts, accuracy and summary text

    Components are swappable, e.g. to replace the linear phoneme mapping
    with a grapheme-aware one.
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        aligner: WordAligner | None = None,
        segmenter: PhonemeSegmenter | None = None,
        aggregator: FeedbackAggregator | None = None,
    ):
        """Initialize engine with optional custom components.

        Args:
            config: Engine configuration.
            aligner: Custom aligner (overrides config.aligner_type).
            segmenter: Custom phoneme segmenter.
            aggregator: Custom report aggregator.

        Raises:
            ValueError: If the configuration is invalid.
        """
        self.config = config or EngineConfig()

        if not 0.0 <= self.config.acoustic_threshold <= 1.0:
            raise ValueError(
                f"acoustic_threshold must be within [0, 1], got {self.config.acoustic_threshold}"
            )

        if aligner is not None:
            self.aligner = aligner
        elif self.config.aligner_type == "edit_distance":
            self.aligner = EditDistanceAligner(
                self.config.acoustic_threshold, self.config.strip_punctuation
            )
        elif self.config.aligner_type == "lookahead":
            self.aligner = LookaheadAligner(
                self.config.acoustic_threshold, self.config.strip_punctuation
            )
        else:
            raise ValueError(f"Unknown aligner_type: {self.config.aligner_type!r}")

        self.segmenter = segmenter or PhonemeSegmenter()
        self.aggregator = aggregator or FeedbackAggregator()

    @property
    def name(self) -> str:
        """Return engine name for logging."""
        return f"engine_{self.aligner.name}_{self.segmenter.name}"

    def assess(
        self,
        expected_phrase: str,
        recognized: list[RecognizedWord],
        phonemes: list[Phoneme] | None = None,
    ) -> AlignmentReport:
        """Assess a recognition result against the expected phrase.

        Args:
            expected_phrase: Reference phrase the learner tried to say.
            recognized: Words reported by the recognizer, in spoken order.
            phonemes: Optional phoneme scores covering the recognized words.

        Returns:
            AlignmentReport with one segment list per comparison position.
        """
        expected = normalize(expected_phrase, self.config.strip_punctuation)
        comparisons = self.aligner.align(expected, recognized)

        if phonemes:
            orphans = _count_orphans(recognized, phonemes)
            if orphans:
                logger.warning(f"{orphans} phonemes fall outside every recognized word span")

        segments = {
            c.position: self._segments_for(c, recognized, phonemes or [])
            for c in comparisons
        }
        report = self.aggregator.aggregate(comparisons, segments)

        counts = Counter(c.status.value for c in comparisons)
        logger.debug(
            f"{self.name}: {dict(counts)} accuracy={report.accuracy_percent:.1f}"
        )
        return report

    def assess_transcript(self, expected_phrase: str, transcript: str) -> AlignmentReport:
        """Assess a plain ASR transcript, which carries no acoustic scores."""
        return self.assess(expected_phrase, words_from_transcript(transcript))

    def assess_forced_alignment(
        self,
        expected_phrase: str,
        response: ForcedAlignmentResponse | dict[str, Any],
    ) -> AlignmentReport:
        """Assess a forced-alignment service response.

        Args:
            expected_phrase: Reference phrase.
            response: Parsed response model or the raw JSON payload.

        Returns:
            AlignmentReport for the response.

        Raises:
            MalformedInputError: If a raw payload fails validation.
        """
        if not isinstance(response, ForcedAlignmentResponse):
            response = parse_forced_alignment(response)
        return self.assess(
            expected_phrase,
            response.recognized_words(),
            response.phoneme_list(),
        )

    def assess_word(self, word: RecognizedWord, phonemes: list[Phoneme]) -> WordFeedback:
        """Phoneme-level feedback for a single practiced word.

        Args:
            word: The recognized word.
            phonemes: Phoneme scores; those outside the word span are ignored.

        Returns:
            WordFeedback with segments and the share of normal phonemes.
        """
        word_phonemes = sorted(phonemes_in_span(word, phonemes), key=lambda p: p.start_index)
        return WordFeedback(
            word=word.text,
            segments=tuple(self.segmenter.segment(word, word_phonemes)),
            phoneme_accuracy=phoneme_accuracy(word_phonemes),
            phonemes=tuple(word_phonemes),
        )

    def _segments_for(
        self,
        comparison: WordComparison,
        recognized: list[RecognizedWord],
        phonemes: list[Phoneme],
    ) -> tuple[CharSegment, ...]:
        """Build render-ready segments for one comparison position."""
        has_errors = False

        if comparison.recognized_index is not None:
            word = recognized[comparison.recognized_index]
            word_phonemes = phonemes_in_span(word, phonemes)
            has_errors = has_phoneme_errors(word_phonemes)
            if has_errors and (not comparison.is_correct or self.config.segment_correct_words):
                segments = self.segmenter.segment(word, word_phonemes)
                # Short words can clamp a flagged group to zero width.
                if any(s.severity != Severity.NORMAL for s in segments):
                    return tuple(segments)
                logger.debug(f"No flagged segment left for {word.text!r}, highlighting whole word")
            text = word.text
        else:
            text = comparison.expected_word or ""

        if not text:
            return ()
        return (CharSegment(text=text, severity=_whole_word_severity(comparison, has_errors)),)


def _count_orphans(recognized: list[RecognizedWord], phonemes: list[Phoneme]) -> int:
    return sum(
        1 for p in phonemes
        if not any(w.start_index <= p.start_index and p.end_index <= w.end_index for w in recognized)
    )


def _whole_word_severity(comparison: WordComparison, has_phoneme_errors: bool) -> Severity:
    """Severity used when a word is highlighted as a whole."""
    if comparison.status == ComparisonStatus.SUBSTITUTION:
        return Severity.ERROR
    if comparison.status == ComparisonStatus.MATCH and not comparison.is_acoustically_correct:
        return Severity.ERROR
    if comparison.status in (ComparisonStatus.DELETION, ComparisonStatus.INSERTION):
        return Severity.WARNING
    if has_phoneme_errors:
        return Severity.WARNING
    return Severity.NORMAL
