"""Aggregation of word comparisons into an alignment report."""

from collections.abc import Mapping, Sequence
from types import MappingProxyType

from .types import AlignmentReport, CharSegment, ComparisonStatus, WordComparison


def accuracy_percent(total_correct: int, total_expected: int) -> float:
    """Share of expected words that were spoken correctly (0-100)."""
    if total_expected == 0:
        return 0.0
    return total_correct / total_expected * 100


def build_feedback_summary(
    total_correct: int,
    total_expected: int,
    accuracy: float,
    wrong: int,
    missing: int,
    extra: int,
) -> str:
    """Build the multi-line summary shown under the result.

    The correct-words line is always present; the other lines only
    appear when their count is non-zero.
    """
    lines = [f"Correct words: {total_correct}/{total_expected} ({accuracy:.1f}%)"]
    if wrong > 0:
        lines.append(f"Wrong/Mispronounced words: {wrong}")
    if missing > 0:
        lines.append(f"Missing words: {missing}")
    if extra > 0:
        lines.append(f"Extra words: {extra}")
    return "\n".join(lines)


class FeedbackAggregator:
    """Combines word comparisons and character segments into a report."""

    def aggregate(
        self,
        comparisons: Sequence[WordComparison],
        segments_by_position: Mapping[int, Sequence[CharSegment]] | None = None,
    ) -> AlignmentReport:
        """Build the report for one alignment.

        Args:
            comparisons: Output of a WordAligner.
            segments_by_position: Character segments keyed by comparison
                position. Positions without segments are left out.

        Returns:
            AlignmentReport with counts, accuracy and summary text.
        """
        total_expected = sum(1 for c in comparisons if c.status != ComparisonStatus.INSERTION)
        total_correct = sum(1 for c in comparisons if c.is_correct)
        accuracy = accuracy_percent(total_correct, total_expected)

        wrong = sum(
            1 for c in comparisons
            if c.status == ComparisonStatus.SUBSTITUTION
            or (c.status == ComparisonStatus.MATCH and not c.is_acoustically_correct)
        )
        missing = sum(1 for c in comparisons if c.status == ComparisonStatus.DELETION)
        extra = sum(1 for c in comparisons if c.status == ComparisonStatus.INSERTION)

        segments = MappingProxyType({
            position: tuple(segs)
            for position, segs in (segments_by_position or {}).items()
        })

        return AlignmentReport(
            accuracy_percent=accuracy,
            total_expected=total_expected,
            total_correct=total_correct,
            word_comparisons=tuple(comparisons),
            char_segments_by_position=segments,
            feedback_summary=build_feedback_summary(
                total_correct, total_expected, accuracy, wrong, missing, extra
            ),
        )
