"""
Constraints deduced from one round of feedback.

Each position of a (guess, feedback) pair becomes exactly one constraint:
  - '2' -> PositionMatch(letter, i)        : the answer has `letter` at i
  - '1' -> PositionMismatch(letter, i)     : `letter` is in the answer, not at i
  - '0' -> Absent(letter, pinned, i)       : not at i, and at most `pinned` copies

`pinned` counts the Match/Mismatch constraints on the same letter in the same
round. For a guess like "speed" marked 00100 the gray 'e' only says the answer
has no *extra* 'e' beyond the yellow one, so it becomes Absent('e', 1, 3).
Carrying that number on the constraint keeps every constraint self-contained,
so the filter never needs to look at siblings from the same round.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from .validation import ABSENT, CORRECT, PRESENT, check_feedback, check_guess


@dataclass(frozen=True)
class PositionMatch:
    letter: str
    position: int


@dataclass(frozen=True)
class PositionMismatch:
    letter: str
    position: int


@dataclass(frozen=True)
class Absent:
    letter: str
    pinned: int = 0
    position: Optional[int] = None  # the gray square, when known


Constraint = Union[PositionMatch, PositionMismatch, Absent]


def _sort_key(c: Constraint) -> Tuple:
    # Matches by position, then mismatches by position, then absents by letter
    if isinstance(c, PositionMatch):
        return (0, c.position, c.letter)
    if isinstance(c, PositionMismatch):
        return (1, c.position, c.letter)
    if isinstance(c, Absent):
        return (2, c.letter, -1 if c.position is None else c.position, c.pinned)
    raise TypeError(f"not a constraint: {c!r}")


def normalize(constraints: Iterable[Constraint]) -> List[Constraint]:
    """
    Return constraints in canonical order. Filtering does not depend on the
    order; this only makes printed output and test expectations reproducible.
    """
    return sorted(constraints, key=_sort_key)


def build_constraints(guess: str, feedback: str, N: int = 5) -> List[Constraint]:
    """
    Turn one round of feedback into N normalized constraints.

    Raises:
      InvalidFeedback if the guess or feedback has the wrong shape. Nothing is
      produced in that case.

    Example:
      build_constraints("apple", "20022") ->
        [PositionMatch('a', 0), PositionMatch('l', 3), PositionMatch('e', 4),
         Absent('p', 0, 1), Absent('p', 0, 2)]
    """
    g = check_guess(guess, N)
    f = check_feedback(feedback, N)

    # Pass 1: how many positions pin each letter (green or yellow)
    pinned = Counter(ch for ch, code in zip(g, f) if code != ABSENT)

    # Pass 2: one constraint per position
    out: List[Constraint] = []
    for i, (ch, code) in enumerate(zip(g, f)):
        if code == CORRECT:
            out.append(PositionMatch(ch, i))
        elif code == PRESENT:
            out.append(PositionMismatch(ch, i))
        else:
            out.append(Absent(ch, pinned[ch], i))

    return normalize(out)
