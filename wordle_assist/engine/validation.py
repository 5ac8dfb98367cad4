"""
Shape checks for one round of player input.

This module answers the question: "Can this (guess, feedback) pair be turned
into constraints?" A round is acceptable iff:
  - the guess is alphabetic with exact length N
  - the feedback has exact length N
  - every feedback symbol is one of '0', '1', '2'

Anything else raises InvalidFeedback. There is no retry here; the caller
(usually a CLI) decides whether to abort or ask again.
"""

from typing import Literal

# Feedback alphabet; each position of a feedback string is one of these
FeedbackChar = Literal["0", "1", "2"]

ABSENT = "0"    # letter not in the answer (beyond pinned occurrences)
PRESENT = "1"   # letter in the answer, but elsewhere
CORRECT = "2"   # letter in the answer at this position

FEEDBACK_SYMBOLS = frozenset((ABSENT, PRESENT, CORRECT))


class InvalidFeedback(ValueError):
    """Raised when a guess or feedback string cannot describe a round."""


def check_guess(guess: str, N: int) -> str:
    """
    Return the normalized (trimmed, lowercase) guess or raise InvalidFeedback.
    """
    if not isinstance(guess, str):
        raise InvalidFeedback(f"guess must be a string, got {type(guess).__name__}")

    g = guess.strip().lower()
    if len(g) != N:
        raise InvalidFeedback(f"guess {g!r} has length {len(g)}, expected {N}")
    if not g.isalpha():
        raise InvalidFeedback(f"guess {g!r} must be alphabetic")
    return g


def check_feedback(feedback: str, N: int) -> str:
    """
    Return the trimmed feedback string or raise InvalidFeedback.
    """
    if not isinstance(feedback, str):
        raise InvalidFeedback(f"feedback must be a string, got {type(feedback).__name__}")

    f = feedback.strip()
    if len(f) != N:
        raise InvalidFeedback(f"feedback {f!r} has length {len(f)}, expected {N}")

    bad = sorted({ch for ch in f if ch not in FEEDBACK_SYMBOLS})
    if bad:
        raise InvalidFeedback(
            f"feedback {f!r} contains unrecognized symbol(s) {bad}; use 0, 1 or 2")
    return f
