"""
Candidate filtering given accumulated constraints.

Given:
  - a pool of words (the current candidates)
  - any collection of constraints (one round, or the whole history)

Return:
  - the words satisfying ALL constraints, in their original order.

Every constraint is checked against the word on its own, so filtering round
by round gives the same pool as filtering once with the full history.
An empty result is a legitimate outcome (no known word fits).
"""

from typing import Iterable, List, Sequence

from .constraints import Absent, Constraint, PositionMatch, PositionMismatch


def satisfies(word: str, c: Constraint) -> bool:
    """
    True if `word` is consistent with the single constraint `c`.
    """
    if isinstance(c, PositionMatch):
        return c.position < len(word) and word[c.position] == c.letter
    if isinstance(c, PositionMismatch):
        not_here = c.position >= len(word) or word[c.position] != c.letter
        return not_here and c.letter in word
    if isinstance(c, Absent):
        # Never at the gray square itself; elsewhere only the pinned copies
        if c.position is not None and c.position < len(word) and word[c.position] == c.letter:
            return False
        return word.count(c.letter) <= c.pinned
    raise TypeError(f"not a constraint: {c!r}")


def filter_candidates(pool: Iterable[str], constraints: Iterable[Constraint]) -> List[str]:
    """
    Keep only words of `pool` that satisfy every constraint.

    Args:
      pool        : candidate words (order is preserved)
      constraints : constraints from one or more rounds

    Returns:
      List[str] of consistent candidates; the input is not modified.
    """
    cs: Sequence[Constraint] = list(constraints)
    return [w for w in pool if all(satisfies(w, c) for c in cs)]
