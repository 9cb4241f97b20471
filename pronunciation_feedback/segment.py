"""Phoneme-to-character segmentation of recognized words.

Maps phoneme-level scores from the forced aligner onto character ranges
of a word so that the mispronounced part can be highlighted:
1. Restrict phonemes to the word's index span
2. Sort by start index
3. Merge adjacent phonemes of equal severity into groups
4. Map each group's index range onto characters by linear interpolation
5. Fill the gaps with normal-severity segments

The mapping spreads phoneme positions proportionally over the letters.
It does not follow real grapheme boundaries (silent letters, digraphs)
and is meant for visual highlighting only.
"""

import logging

from .types import CharSegment, Phoneme, PhonemeGroup, RecognizedWord, Severity

logger = logging.getLogger(__name__)


def phonemes_in_span(word: RecognizedWord, phonemes: list[Phoneme]) -> list[Phoneme]:
    """Return the phonemes that fall inside a word's index span."""
    return [
        p for p in phonemes
        if p.start_index >= word.start_index and p.end_index <= word.end_index
    ]


def has_phoneme_errors(phonemes: list[Phoneme]) -> bool:
    """True if any phoneme is scored as error or warning."""
    return any(p.score_type != Severity.NORMAL for p in phonemes)


def phoneme_accuracy(phonemes: list[Phoneme]) -> float:
    """Percentage of phonemes scored as normal (0 when there are none)."""
    if not phonemes:
        return 0.0
    normal = sum(1 for p in phonemes if p.score_type == Severity.NORMAL)
    return normal / len(phonemes) * 100


def group_phonemes(phonemes: list[Phoneme]) -> list[PhonemeGroup]:
    """Merge sorted phonemes into runs of equal severity.

    A phoneme joins the current group when it has the same severity and
    starts no more than one index after the group's end.

    Args:
        phonemes: Phonemes sorted by start index.

    Returns:
        Groups in index order.
    """
    if not phonemes:
        return []

    groups: list[PhonemeGroup] = []
    first = phonemes[0]
    start, end, severity = first.start_index, first.end_index, first.score_type

    for p in phonemes[1:]:
        if p.score_type == severity and p.start_index <= end + 1:
            end = max(end, p.end_index)
        else:
            groups.append(PhonemeGroup(start_idx=start, end_idx=end, severity=severity))
            start, end, severity = p.start_index, p.end_index, p.score_type

    groups.append(PhonemeGroup(start_idx=start, end_idx=end, severity=severity))
    return groups


def _ceil_div(num: int, den: int) -> int:
    return -(-num // den)


class PhonemeSegmenter:
    """Splits a word into character segments carrying phoneme severity."""

    @property
    def name(self) -> str:
        return "linear"

    def segment(self, word: RecognizedWord, phonemes: list[Phoneme]) -> list[CharSegment]:
        """Segment a word's text by the severity of its phonemes.

        Args:
            word: Recognized word whose text is segmented.
            phonemes: Phonemes of the utterance; only those inside the
                word's span are used, in any order.

        Returns:
            Contiguous segments whose texts concatenate to ``word.text``.
        """
        text = word.text
        n_chars = len(text)
        if n_chars == 0:
            return []

        in_span = phonemes_in_span(word, phonemes)
        if not in_span:
            return [CharSegment(text=text, severity=Severity.NORMAL)]

        ordered = sorted(in_span, key=lambda p: p.start_index)
        if ordered != in_span:
            logger.warning(f"Phonemes for {text!r} were not sorted by start index")

        groups = group_phonemes(ordered)
        min_start = min(p.start_index for p in ordered)
        max_end = max(p.end_index for p in ordered)
        total_span = max_end - min_start

        if total_span == 0:
            # Worst group severity, not the first group's.
            worst = max((g.severity for g in groups), key=lambda s: s.rank)
            logger.debug(f"Zero phoneme span for {text!r}, using one segment")
            return [CharSegment(text=text, severity=worst)]

        segments: list[CharSegment] = []
        cursor = 0
        for group in groups:
            rel_start = group.start_idx - min_start
            rel_end = group.end_idx - min_start

            # Integer arithmetic keeps floor/ceil exact.
            start_char = rel_start * n_chars // total_span
            end_char = _ceil_div((rel_end + 1) * n_chars, total_span)
            start_char = min(max(start_char, cursor), n_chars)
            end_char = min(max(end_char, start_char), n_chars)

            if cursor < start_char:
                segments.append(CharSegment(text=text[cursor:start_char], severity=Severity.NORMAL))
            if start_char < end_char:
                segments.append(CharSegment(text=text[start_char:end_char], severity=group.severity))
            cursor = max(cursor, end_char)

        if cursor < n_chars:
            segments.append(CharSegment(text=text[cursor:], severity=Severity.NORMAL))

        return segments
