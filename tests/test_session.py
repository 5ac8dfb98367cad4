import pytest
from wordle_assist.engine import InvalidFeedback, score
from wordle_assist.session import (
    FeedbackNotExpected, Phase, Session, SessionClosed, run_batch, run_case,
)
from wordle_assist.solvers import BaseSolver, create_solver, select_guesses

ANSWERS = ["crane", "raise", "stare", "trace", "cared"]
ALLOWED = ANSWERS + ["adieu", "arise"]


class CountingSolver(BaseSolver):
    id = "counting"

    def __init__(self):
        self.calls = 0

    def suggest(self, pool, vocabulary):
        self.calls += 1
        return select_guesses(pool, vocabulary)


def test_single_word_pool_is_solved_without_suggesting():
    solver = CountingSolver()
    s = Session(["crane"], ALLOWED, solver=solver)
    assert s.phase is Phase.SOLVED
    assert s.answer == "crane"

    def ask():
        raise AssertionError("should not prompt")

    assert s.play(ask, lambda sug, short: None) is Phase.SOLVED
    assert solver.calls == 0
    with pytest.raises(SessionClosed):
        s.suggest()


def test_empty_pool_is_exhausted():
    s = Session([], ALLOWED)
    assert s.phase is Phase.EXHAUSTED
    assert s.answer is None


def test_round_transitions():
    s = Session(ANSWERS, ALLOWED)
    assert s.phase is Phase.SUGGESTING
    assert s.suggest() == ["stare"]
    assert s.phase is Phase.AWAITING_FEEDBACK

    # "raise" vs "crane": r, a yellow; e green; "cared" has its a at 1
    assert s.submit("raise", "11002") is Phase.SUGGESTING
    assert s.state.round == 1
    assert len(s.state.history) == 5
    assert s.pool == ["crane", "trace"]


def test_eliminating_everything_ends_exhausted():
    solver = CountingSolver()
    s = Session(ANSWERS, ALLOWED, solver=solver)
    s.suggest()
    assert s.submit("fuzzy", "22222") is Phase.EXHAUSTED
    assert s.pool == []
    with pytest.raises(SessionClosed):
        s.suggest()
    with pytest.raises(SessionClosed):
        s.submit("crane", "22222")
    assert solver.calls == 1


def test_invalid_feedback_leaves_state_untouched():
    s = Session(ANSWERS, ALLOWED)
    s.suggest()
    with pytest.raises(InvalidFeedback):
        s.submit("crane", "2202")
    with pytest.raises(InvalidFeedback):
        s.submit("crane", "22a22")
    assert s.phase is Phase.AWAITING_FEEDBACK
    assert s.state.round == 0
    assert s.state.history == []
    assert s.pool == ANSWERS


def test_pool_is_deduplicated_and_vocabulary_frozen():
    s = Session(["crane", "crane", "stare"])
    assert s.pool == ["crane", "stare"]
    assert s.state.vocabulary == ("crane", "stare")


def test_play_apple_angle():
    s = Session(["apple", "angle", "ankle", "axle"])
    rounds = iter([("apple", score("apple", "angle")), ("angle", "22222")])
    shown = []

    phase = s.play(lambda: next(rounds), lambda sug, short: shown.append((sug, short)))
    assert phase is Phase.SOLVED
    assert s.answer == "angle"
    # both rounds had a pool of at most 5, so the shortlist was shown
    assert shown[0][1] == ["apple", "angle", "ankle", "axle"]
    assert shown[1][1] == ["angle", "ankle"]


def test_shortlist_hidden_for_large_pool():
    s = Session(ANSWERS + ["adieu"])
    assert s.shortlist(limit=5) == []
    assert s.shortlist(limit=6) == ANSWERS + ["adieu"]


def test_run_case_solves():
    r = run_case(create_solver(), "crane", possibilities=ANSWERS, vocabulary=ALLOWED, N=5)
    assert r["success"] is True
    assert r["history"] == [("stare", "00212"), ("crane", "22222")]
    assert r["guesses"] == 2
    assert r["phase"] == "solved"


def test_run_case_rejects_bad_turn_budget():
    with pytest.raises(ValueError):
        run_case(create_solver(), "crane", possibilities=ANSWERS, vocabulary=ALLOWED,
                 N=5, max_turns=0)


def test_run_batch_sample_and_callback():
    seen = []
    results = run_batch(create_solver(), ANSWERS, possibilities=ANSWERS, vocabulary=ALLOWED,
                        N=5, sample=2, on_result=seen.append)
    assert [r["answer"] for r in results] == ["crane", "raise"]
    assert all(r["success"] for r in results)
    assert all(r["solver_id"] == "letter_balance" for r in results)
    assert seen == results


def test_submit_requires_suggest_first():
    s = Session(ANSWERS, ALLOWED)
    with pytest.raises(FeedbackNotExpected):
        s.submit("raise", "11002")
    assert s.phase is Phase.SUGGESTING and s.state.round == 0

    s.suggest()
    s.submit("raise", "11002")
    # back in SUGGESTING: the next round needs a fresh suggest()
    with pytest.raises(FeedbackNotExpected):
        s.submit("trace", "02222")


def test_run_case_records_pool_sizes():
    r = run_case(create_solver(), "trace", possibilities=ANSWERS, vocabulary=ALLOWED, N=5)
    assert r["rounds"] == [
        {"guess": "stare", "feedback": "01212", "pool_before": 5, "pool_after": 1,
         "phase": "solved"},
        {"guess": "trace", "feedback": "22222", "pool_before": 1, "pool_after": 1,
         "phase": "solved"},
    ]
