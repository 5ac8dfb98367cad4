"""
Session loop and simulation harness.

- Session:   owns the state of one interactive game and walks it through
             SUGGESTING -> AWAITING_FEEDBACK -> FILTERING -> (SUGGESTING |
             SOLVED | EXHAUSTED).
- run_case:  play one scripted session against a hidden answer.
- run_batch: run many scripted sessions in sequence (optionally a prefix).

These are UI-agnostic: the CLI, a notebook or tests drive them with plain
strings, and every failure surfaces as an exception for the caller to handle.
"""

from __future__ import annotations

import enum
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Set, Tuple

from wordle_assist.engine import Constraint, build_constraints, filter_candidates, score
from wordle_assist.solvers import BaseSolver, create_solver

MAX_SUGGESTIONS = 5
MAX_TURNS = 6


class Phase(enum.Enum):
    SUGGESTING = "suggesting"
    AWAITING_FEEDBACK = "awaiting_feedback"
    FILTERING = "filtering"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


TERMINAL_PHASES = frozenset((Phase.SOLVED, Phase.EXHAUSTED))


class SessionClosed(RuntimeError):
    """Raised when a finished session is asked for more rounds."""


class FeedbackNotExpected(RuntimeError):
    """Raised when feedback is submitted before any guesses were suggested."""


@dataclass
class SessionState:
    pool: List[str]
    vocabulary: Tuple[str, ...]
    history: List[Constraint] = field(default_factory=list)
    round: int = 0
    phase: Phase = Phase.SUGGESTING


def _dedupe(words: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(words))


class Session:
    """
    One assistant session.

    The pool only ever shrinks, the vocabulary never changes, and the
    constraint history only grows. State moves only after a round's feedback
    has been validated, so an InvalidFeedback leaves everything as it was.
    """

    def __init__(
            self,
            possibilities: Iterable[str],
            vocabulary: Optional[Iterable[str]] = None,
            *,
            N: int = 5,
            solver: Optional[BaseSolver] = None,
    ):
        pool = _dedupe(possibilities)
        vocab = tuple(_dedupe(vocabulary)) if vocabulary is not None else tuple(pool)
        self.N = int(N)
        self.solver = solver or create_solver()
        self.state = SessionState(pool=pool, vocabulary=vocab)
        self._settle()

    # ---- read-only views ----

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def pool(self) -> List[str]:
        return list(self.state.pool)

    @property
    def finished(self) -> bool:
        return self.state.phase in TERMINAL_PHASES

    @property
    def answer(self) -> Optional[str]:
        return self.state.pool[0] if self.state.phase is Phase.SOLVED else None

    def shortlist(self, limit: int = MAX_SUGGESTIONS) -> List[str]:
        """
        The whole pool once it is small enough to just try its words.
        """
        return self.pool if len(self.state.pool) <= limit else []

    # ---- transitions ----

    def _ensure_open(self) -> None:
        if self.finished:
            raise SessionClosed(f"session already {self.state.phase.value}")

    def _settle(self) -> None:
        """Pick the phase that follows a (re)computed pool."""
        n = len(self.state.pool)
        if n == 0:
            self.state.phase = Phase.EXHAUSTED
        elif n == 1:
            self.state.phase = Phase.SOLVED
        else:
            self.state.phase = Phase.SUGGESTING

    def suggest(self, limit: int = MAX_SUGGESTIONS) -> List[str]:
        """
        Ask the strategy for the next guesses; returns at most `limit` words.
        """
        self._ensure_open()
        ranked = self.solver.suggest(self.state.pool, self.state.vocabulary)
        self.state.phase = Phase.AWAITING_FEEDBACK
        return ranked[:limit]

    def submit(self, guess: str, feedback: str) -> Phase:
        """
        Apply one round of feedback and return the resulting phase.

        Raises:
          InvalidFeedback if the round is malformed (state unchanged).
          SessionClosed if the session already ended.
          FeedbackNotExpected unless suggest() ran since the last round.
        """
        self._ensure_open()
        if self.state.phase is not Phase.AWAITING_FEEDBACK:
            raise FeedbackNotExpected("call suggest() before submitting feedback")
        constraints = build_constraints(guess, feedback, self.N)

        self.state.history.extend(constraints)
        self.state.round += 1
        self.state.phase = Phase.FILTERING
        self.state.pool = filter_candidates(self.state.pool, constraints)
        self._settle()
        return self.state.phase

    def play(
            self,
            ask: Callable[[], Tuple[str, str]],
            show: Callable[[List[str], List[str]], None],
            *,
            limit: int = MAX_SUGGESTIONS,
    ) -> Phase:
        """
        Drive the loop until a terminal phase.

        Args:
          ask  : returns the (guess, feedback) actually played this round
          show : receives (suggestions, shortlist) before each round
        """
        while not self.finished:
            show(self.suggest(limit), self.shortlist(limit))
            guess, feedback = ask()
            self.submit(guess, feedback)
        return self.state.phase


# ---------------------------------------------------------------------------
# Simulation harness
# ---------------------------------------------------------------------------

def _assert_turns(max_turns: int) -> None:
    """Guardrail: a game needs at least one turn."""
    if max_turns < 1:
        raise ValueError(f"max_turns must be >= 1; got {max_turns}")


def _pick_guess(session: Session, guessed: Set[str]) -> str:
    """Top suggestion not yet played; the first candidate otherwise."""
    if session.phase is Phase.SOLVED:
        return session.answer
    for w in session.suggest(limit=len(session.state.vocabulary)):
        if w not in guessed:
            return w
    return session.state.pool[0]


def run_case(
        solver: BaseSolver,
        answer: str,
        *,
        possibilities: Sequence[str],
        vocabulary: Sequence[str],
        N: int,
        max_turns: int = MAX_TURNS,
) -> Dict:
    """
    Play one scripted session: each turn uses the assistant's own pick, and
    feedback comes from scoring it against `answer`.

    Returns:
        dict with keys:
            answer (str), success (bool), guesses (int), time_ms (float),
            history (list[(guess, feedback)]), phase (str),
            rounds (list of dicts: guess, feedback, pool_before, pool_after,
                    phase), showing how the candidate pool shrank each turn
    """
    _assert_turns(max_turns)

    session = Session(possibilities, vocabulary, N=N, solver=solver)
    history: List[Tuple[str, str]] = []
    rounds: List[Dict] = []
    guessed: Set[str] = set()
    success = False

    t0 = time.perf_counter()
    for _ in range(max_turns):
        if session.phase is Phase.EXHAUSTED:
            break

        before = len(session.state.pool)
        guess = _pick_guess(session, guessed)
        fb = score(guess, answer)
        history.append((guess, fb))
        guessed.add(guess)

        if guess == answer:
            success = True
            rounds.append({"guess": guess, "feedback": fb, "pool_before": before,
                           "pool_after": 1, "phase": Phase.SOLVED.value})
            break
        if session.finished:
            # Solved on a word that is not the answer; nothing left to try
            rounds.append({"guess": guess, "feedback": fb, "pool_before": before,
                           "pool_after": before, "phase": session.phase.value})
            break
        session.submit(guess, fb)
        rounds.append({"guess": guess, "feedback": fb, "pool_before": before,
                       "pool_after": len(session.state.pool), "phase": session.phase.value})
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "answer": answer,
        "success": success,
        "guesses": len(history),
        "time_ms": dt,
        "history": history,
        "rounds": rounds,
        "phase": Phase.SOLVED.value if success else session.phase.value,
    }


def run_batch(
        solver: BaseSolver,
        answers: Sequence[str],
        *,
        possibilities: Sequence[str],
        vocabulary: Sequence[str],
        N: int,
        max_turns: int = MAX_TURNS,
        sample: Optional[int] = None,
        on_result: Optional[Callable[[Dict], None]] = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If `sample` is given, only the first K
    answers of length N are played. `on_result` is called after every case
    (the CLI uses it to advance a progress bar).
    """
    _assert_turns(max_turns)

    cases = [w for w in answers if len(w) == N]
    if sample is not None:
        cases = cases[:sample]

    out: List[Dict] = []
    for ans in cases:
        r = run_case(solver, ans, possibilities=possibilities, vocabulary=vocabulary,
                     N=N, max_turns=max_turns)
        r["solver_id"] = solver.id
        out.append(r)
        if on_result is not None:
            on_result(r)
    return out
