"""Base classes for word alignment."""

from abc import ABC, abstractmethod

from ..normalize import comparison_key
from ..types import (
    ComparisonStatus,
    RecognizedWord,
    Token,
    WordComparison,
    WordScoreType,
)

DEFAULT_ACOUSTIC_THRESHOLD = 0.7


class WordAligner(ABC):
    """Abstract base class for word aligners.

    Aligners take the expected tokens and the recognizer's words and
    produce one WordComparison per position of the merged sequence. This
    allows swapping the greedy lookahead strategy for an optimal one.
    """

    def __init__(
        self,
        acoustic_threshold: float = DEFAULT_ACOUSTIC_THRESHOLD,
        strip_punctuation: bool = False,
    ):
        """Initialize aligner.

        Args:
            acoustic_threshold: Nativeness below which a word not scored
                as correct is flagged as mispronounced.
            strip_punctuation: Ignore punctuation when comparing words.
        """
        self.acoustic_threshold = acoustic_threshold
        self.strip_punctuation = strip_punctuation

    @abstractmethod
    def align(
        self,
        expected: list[Token],
        recognized: list[RecognizedWord],
    ) -> list[WordComparison]:
        """Align expected tokens against recognized words.

        Args:
            expected: Tokens of the reference phrase.
            recognized: Words reported by the recognizer, in spoken order.

        Returns:
            Comparisons in the order tokens were consumed.
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the aligner name for logging/benchmarking."""
        pass

    def key(self, word: RecognizedWord) -> str:
        return comparison_key(word.text, self.strip_punctuation)

    def is_acoustically_correct(self, word: RecognizedWord) -> bool:
        """A word is mispronounced only if both verdicts are negative."""
        return (
            word.score_type == WordScoreType.CORRECT
            or word.nativeness_score >= self.acoustic_threshold
        )

    def _match(
        self, out: list[WordComparison], token: Token, word: RecognizedWord, index: int
    ) -> None:
        out.append(WordComparison(
            status=ComparisonStatus.MATCH,
            expected_word=token.display_text,
            actual_word=word.text,
            position=len(out),
            is_acoustically_correct=self.is_acoustically_correct(word),
            expected_index=token.ordinal,
            recognized_index=index,
        ))

    def _substitution(
        self, out: list[WordComparison], token: Token, word: RecognizedWord, index: int
    ) -> None:
        out.append(WordComparison(
            status=ComparisonStatus.SUBSTITUTION,
            expected_word=token.display_text,
            actual_word=word.text,
            position=len(out),
            is_acoustically_correct=self.is_acoustically_correct(word),
            expected_index=token.ordinal,
            recognized_index=index,
        ))

    def _deletion(self, out: list[WordComparison], token: Token) -> None:
        out.append(WordComparison(
            status=ComparisonStatus.DELETION,
            expected_word=token.display_text,
            actual_word=None,
            position=len(out),
            expected_index=token.ordinal,
        ))

    def _insertion(
        self, out: list[WordComparison], word: RecognizedWord, index: int
    ) -> None:
        out.append(WordComparison(
            status=ComparisonStatus.INSERTION,
            expected_word=None,
            actual_word=word.text,
            position=len(out),
            is_acoustically_correct=self.is_acoustically_correct(word),
            recognized_index=index,
        ))
