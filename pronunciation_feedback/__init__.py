"""
Pronunciation Feedback - alignment and feedback engine for shadowing practice.

This library compares what a learner said with the phrase they were
asked to say, classifies every word, highlights mispronounced parts of
words from phoneme scores, and summarizes the attempt.

Modules:
    types: Type definitions and data structures
    normalize: Phrase tokenization
    align: Word alignment strategies
    segment: Phoneme-to-character segmentation
    aggregate: Report aggregation and summary text
    engine: End-to-end orchestration
    wire: Forced-alignment service response models
    config: Environment-driven settings
    styles: Highlight style lookup
"""

from .aggregate import FeedbackAggregator, accuracy_percent, build_feedback_summary
from .align import EditDistanceAligner, LookaheadAligner, WordAligner
from .config import Settings, load_config
from .engine import EngineConfig, PronunciationEngine
from .errors import MalformedInputError
from .normalize import comparison_key, normalize, words_from_transcript
from .segment import PhonemeSegmenter, group_phonemes, phoneme_accuracy
from .styles import KeywordStyle, Style, StyleTable
from .types import (
    AlignmentReport,
    CharSegment,
    ComparisonStatus,
    Phoneme,
    PhonemeGroup,
    RecognizedWord,
    Severity,
    Token,
    WordComparison,
    WordEntry,
    WordFeedback,
    WordScoreType,
    WrongWord,
)
from .wire import ForcedAlignmentResponse, PhonemeData, WordData, parse_forced_alignment

__version__ = "0.1.0"

__all__ = [
    # Types
    "WordScoreType",
    "Severity",
    "ComparisonStatus",
    "Token",
    "RecognizedWord",
    "Phoneme",
    "WordComparison",
    "PhonemeGroup",
    "CharSegment",
    "WordEntry",
    "WrongWord",
    "AlignmentReport",
    "WordFeedback",
    "MalformedInputError",
    # Normalize
    "normalize",
    "comparison_key",
    "words_from_transcript",
    # Align
    "WordAligner",
    "LookaheadAligner",
    "EditDistanceAligner",
    # Segment
    "PhonemeSegmenter",
    "group_phonemes",
    "phoneme_accuracy",
    # Aggregate
    "FeedbackAggregator",
    "accuracy_percent",
    "build_feedback_summary",
    # Engine
    "EngineConfig",
    "PronunciationEngine",
    # Wire
    "ForcedAlignmentResponse",
    "WordData",
    "PhonemeData",
    "parse_forced_alignment",
    # Config
    "Settings",
    "load_config",
    # Styles
    "Style",
    "KeywordStyle",
    "StyleTable",
]
