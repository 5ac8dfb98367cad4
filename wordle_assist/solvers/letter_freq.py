"""
Letter-Frequency Solver (distinct-letter coverage).

Idea:
  - Build a letter histogram over the CURRENT candidate pool. Score each
    vocabulary word as the sum of its DISTINCT letters' frequencies and rank
    words by that score.

Why it works:
  - Early rounds: favors words covering common letters (shrinks the pool fast).
  - Later rounds: the histogram reflects feedback, so top words tend to fit.

Notes:
  - Ignores positions.
  - Ties keep vocabulary order, so the ranking is deterministic.
"""

from __future__ import annotations
from collections import Counter
from typing import List, Sequence
from .base import BaseSolver, register


@register
class LetterFreqSolver(BaseSolver):
    id = "letter_freq"
    name = "Letter Frequency (distinct)"
    version = "1.0.0"

    def _score_word(self, w: str, counts: Counter[str]) -> int:
        """
        Sum letter frequencies but count each letter at most once per word
        (prefer 'slate' over 'sleet' when counts are similar).
        """
        return sum(counts[ch] for ch in set(w))

    def suggest(self, pool: Sequence[str], vocabulary: Sequence[str]) -> List[str]:
        # With nothing left to split, fall back to the vocabulary's own letters
        counts = Counter("".join(pool)) if pool else Counter("".join(vocabulary))

        # sorted() is stable: equal scores stay in vocabulary order
        return sorted(vocabulary, key=lambda w: -self._score_word(w, counts))
