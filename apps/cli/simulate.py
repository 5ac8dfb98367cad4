# apps/cli/simulate.py
"""
Benchmark a guess strategy by playing scripted sessions.

This script:
  1) Validates the word lists (prints counts + SHA, checks possibilities ⊆ vocabulary).
  2) Loads the lists and instantiates the requested solver.
  3) Plays one session per answer, following the solver's top pick each turn,
     with a progress indicator, and writes:
       - CSV:  one row per round, with the pool size before and after filtering
       - JSON: win rate, guess histogram, pool shrink per round, config and list hashes
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from wordle_assist.datasets import (
    LANGUAGES, LoadFailure, bundled_path, load_words, pretty_summary, validate_wordlists,
)
from wordle_assist.session import (
    MAX_TURNS, run_batch, run_id, summarize, write_rounds_csv, write_summary,
)
from wordle_assist.solvers import DEFAULT_SOLVER, create_solver, get_solver_ids


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordle-assist: benchmark a guess strategy")
    ap.add_argument("--solver", default=DEFAULT_SOLVER,
                    help=f"solver id (one of: {', '.join(get_solver_ids())})")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--language", choices=LANGUAGES, default="en",
                    help="bundled word list used when no paths are given")
    ap.add_argument("--possibilities", help="path to answers list (also the cases played)")
    ap.add_argument("--vocabulary", help="path to allowed guesses (defaults to possibilities)")
    ap.add_argument("--sample", type=int, help="play only the first K answers")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "off"],
        default="auto",
        help="Show run progress (auto=bar when stderr is a terminal)."
    )
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    pos_path = str(args.possibilities or bundled_path(args.language, args.N))
    voc_path = str(args.vocabulary or pos_path)

    # 1) Validate word lists and print a one-liner summary
    rep = validate_wordlists(args.N, pos_path, voc_path)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        print(f"warning: {issue}", file=sys.stderr)

    # 2) Load lists (lenient: malformed lines are skipped)
    try:
        possibilities = load_words(pos_path, args.N)
        vocabulary = load_words(voc_path, args.N)
        solver = create_solver(args.solver)
    except LoadFailure as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    total = len(possibilities) if args.sample is None else min(args.sample, len(possibilities))

    # 3) Run with progress
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "off"
    bar = tqdm(total=total, ncols=80, desc="Running", unit="game", disable=(mode == "off"))
    with bar:
        results = run_batch(
            solver, possibilities,
            possibilities=possibilities, vocabulary=vocabulary, N=args.N,
            max_turns=MAX_TURNS, sample=args.sample,
            on_result=lambda _r: bar.update(1),
        )

    # 4) Write outputs (per-round CSV + JSON summary)
    rid = run_id()
    outdir = Path(args.outdir)
    csv_path = write_rounds_csv(results, str(outdir / f"run_{rid}_rounds.csv"))
    summary = summarize(results)
    summary.update({
        "run_id": rid,
        "solver_id": solver.id,
        "config": vars(args),
        "wordlists": rep,
    })
    summary_path = write_summary(summary, str(outdir / f"run_{rid}_summary.json"))

    print(f"Solved {summary['wins']}/{summary['num_cases']}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {summary_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
