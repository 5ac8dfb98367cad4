# apps/cli/assist.py
"""
Interactive assistant for a Wordle-style game.

Each round:
  1) Prints up to --show suggested guesses (and the remaining candidates once
     only a handful are left).
  2) Asks which word you actually played and what feedback you got, typed as
     digits: 0 = not in word, 1 = wrong place, 2 = correct.
  3) Narrows the candidates, until one word is left or none fit.

Exit status: 0 when finished, 1 if a word list can't be loaded or input ends
early, 2 on malformed guess/feedback (no re-prompt).

Usage:
  python -m apps.cli.assist en
  python -m apps.cli.assist --possibilities answers.txt --vocabulary allowed.txt
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Tuple

from wordle_assist.datasets import LANGUAGES, LoadFailure, bundled_path, load_words
from wordle_assist.engine import InvalidFeedback
from wordle_assist.session import MAX_SUGGESTIONS, Phase, Session
from wordle_assist.solvers import DEFAULT_SOLVER, create_solver, get_solver_ids


def _show(suggestions: List[str], shortlist: List[str]) -> None:
    print("I suggest you try one of the following:")
    for w in suggestions:
        print(f"\t{w}")
    if shortlist:
        print("I have narrowed it down to these ones if you're feeling lucky:")
        for w in shortlist:
            print(f"\t{w}")


def _ask() -> Tuple[str, str]:
    print("What did you use for a guess?")
    guess = input("> ")
    print("What result did you get?")
    print("Use 0 for wrong, 1 for wrong place and 2 for correct letter")
    feedback = input("> ")
    return guess, feedback


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordle-assist: suggest guesses and narrow the answer")
    ap.add_argument("language", nargs="?", choices=LANGUAGES, default="en",
                    help="bundled word list to use (default: en)")
    ap.add_argument("--possibilities",
                    help="path to words that can be the answer (overrides language)")
    ap.add_argument("--vocabulary",
                    help="path to words accepted as guesses (defaults to the possibilities)")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--solver", default=DEFAULT_SOLVER,
                    help=f"solver id (one of: {', '.join(get_solver_ids())})")
    ap.add_argument("--show", type=int, default=MAX_SUGGESTIONS,
                    help="how many suggestions to print per round")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        solver = create_solver(args.solver)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    try:
        pos_path = args.possibilities or bundled_path(args.language, args.N)
        possibilities = load_words(pos_path, args.N)
        vocabulary = load_words(args.vocabulary, args.N) if args.vocabulary else None
    except LoadFailure as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    session = Session(possibilities, vocabulary, N=args.N, solver=solver)
    try:
        phase = session.play(_ask, _show, limit=args.show)
    except InvalidFeedback as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except (EOFError, KeyboardInterrupt):
        print("\naborted", file=sys.stderr)
        return 1

    if phase is Phase.SOLVED:
        print(f"The answer should be: {session.answer}")
    else:
        print("Answer not in my wordlist :(")
    return 0


if __name__ == "__main__":
    sys.exit(main())
