"""Greedy aligner with one token of lookahead."""

import logging

from ..types import RecognizedWord, Token, WordComparison
from .base import WordAligner

logger = logging.getLogger(__name__)


class LookaheadAligner(WordAligner):
    """Aligner that walks both sequences greedily.

    Two cursors advance over the expected tokens and the recognized
    words. On a mismatch the aligner peeks exactly one expected token
    ahead: if that token matches the current recognized word, the
    expected token counts as skipped (deletion); otherwise the recognized
    word counts as extraneous (insertion).

    Known limitation: misalignments deeper than one token degrade into
    cascades of insertions and deletions, and a plausible substitution
    is never reported as such. Use EditDistanceAligner when that matters.
    """

    @property
    def name(self) -> str:
        return "lookahead"

    def align(
        self,
        expected: list[Token],
        recognized: list[RecognizedWord],
    ) -> list[WordComparison]:
        """Align by greedy matching with one-token lookahead.

        Args:
            expected: Tokens of the reference phrase.
            recognized: Words reported by the recognizer.

        Returns:
            Match, Deletion and Insertion comparisons in consumption order.
        """
        out: list[WordComparison] = []
        e, a = 0, 0

        while e < len(expected) or a < len(recognized):
            if e < len(expected) and a < len(recognized):
                token = expected[e]
                word = recognized[a]
                spoken = self.key(word)

                if token.text == spoken:
                    self._match(out, token, word, a)
                    e += 1
                    a += 1
                elif e + 1 < len(expected) and expected[e + 1].text == spoken:
                    logger.debug(f"Lookahead: {token.text!r} skipped before {spoken!r}")
                    self._deletion(out, token)
                    e += 1
                else:
                    self._insertion(out, word, a)
                    a += 1
            elif e < len(expected):
                self._deletion(out, expected[e])
                e += 1
            else:
                self._insertion(out, recognized[a], a)
                a += 1

        return out
