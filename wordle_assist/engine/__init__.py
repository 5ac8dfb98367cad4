from .validation import InvalidFeedback, check_guess, check_feedback
from .constraints import (
    PositionMatch, PositionMismatch, Absent, Constraint, build_constraints, normalize,
)
from .filtering import filter_candidates, satisfies
from .scoring import score

__all__ = [
    "InvalidFeedback", "check_guess", "check_feedback",
    "PositionMatch", "PositionMismatch", "Absent", "Constraint",
    "build_constraints", "normalize",
    "filter_candidates", "satisfies", "score",
]
