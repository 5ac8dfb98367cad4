"""
Letter-Balance Solver (greedy half-split).

Idea:
  - A letter found in about half of the remaining candidates splits the pool
    best: whatever the feedback, roughly half the words go away.
  - Pick up to 5 such letters and narrow the vocabulary to words containing
    as many of them as possible.

Steps:
  1) For each letter, count candidate words containing it (once per word).
  2) balance = |count - len(pool) // 2|; lower is more discriminating.
  3) With letters ordered by (count, letter), trim to 5 by repeatedly dropping
     whichever end is farther from the half mark (the back on a tie).
  4) Starting from the full vocabulary, keep only words containing each kept
     letter in turn, most balanced first. A letter that would empty the set
     is skipped. Stop as soon as one word remains.

This is a cheap approximation of information gain, O(pool x alphabet); it
does not evaluate feedback patterns the way an entropy solver would.
"""

from __future__ import annotations
from collections import Counter
from typing import List, Sequence, Tuple
from .base import BaseSolver, register

MAX_LETTERS = 5


def letter_counts(pool: Sequence[str]) -> Counter[str]:
    """
    Number of words in `pool` containing each letter (repeats count once).
    """
    counts: Counter[str] = Counter()
    for w in pool:
        counts.update(set(w))
    return counts


def discriminating_letters(pool: Sequence[str], limit: int = MAX_LETTERS) -> List[str]:
    """
    Up to `limit` letters from the pool, most discriminating first.
    """
    counts = letter_counts(pool)
    half = len(pool) // 2

    ranked: List[Tuple[str, int]] = sorted(counts.items(), key=lambda kv: (kv[1], kv[0]))

    # Midpoint trimming: drop the extreme farther from the half mark
    lo, hi = 0, len(ranked)
    while hi - lo > limit:
        front = abs(ranked[lo][1] - half)
        back = abs(ranked[hi - 1][1] - half)
        if front > back:
            lo += 1
        else:
            hi -= 1

    kept = ranked[lo:hi]
    kept.sort(key=lambda kv: (abs(kv[1] - half), kv[0]))
    return [ch for ch, _ in kept]


def select_guesses(pool: Sequence[str], vocabulary: Sequence[str]) -> List[str]:
    """
    Narrow `vocabulary` to words containing the pool's most discriminating
    letters. Order follows `vocabulary`; never empty unless it is empty.
    """
    chosen = list(vocabulary)
    for ch in discriminating_letters(pool):
        if len(chosen) <= 1:
            break
        narrowed = [w for w in chosen if ch in w]
        if narrowed:
            chosen = narrowed
    return chosen


@register
class LetterBalanceSolver(BaseSolver):
    id = "letter_balance"
    name = "Letter Balance (half-split)"
    version = "1.0.0"

    def suggest(self, pool: Sequence[str], vocabulary: Sequence[str]) -> List[str]:
        return select_guesses(pool, vocabulary)
