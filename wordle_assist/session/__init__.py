from .core import (
    FeedbackNotExpected, Phase, Session, SessionClosed, SessionState, run_case, run_batch,
    MAX_SUGGESTIONS, MAX_TURNS,
)
from .io import run_id, summarize, write_rounds_csv, write_summary

__all__ = ["FeedbackNotExpected", "Phase", "Session", "SessionClosed", "SessionState",
           "run_case", "run_batch", "MAX_SUGGESTIONS", "MAX_TURNS",
           "run_id", "summarize", "write_rounds_csv", "write_summary"]
