"""
Reports for scripted simulation runs.

A run is a list of `run_case` results. Two views are written:

- a per-round CSV (one row per guess of every game) with the pool size before
  and after filtering, so you can see how fast each strategy narrows things
  down and where it stalls;
- a JSON summary: win rate, guess-count histogram and the mean pool size left
  after each round number.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from pathlib import Path
from typing import Dict, List
import csv
import datetime as dt
import json

ROUND_FIELDS = ["solver", "answer", "round", "guess", "feedback",
                "pool_before", "pool_after", "phase", "success"]


def write_rounds_csv(results: List[Dict], path: str) -> str:
    """
    Write one row per played round and return the path written.

    Feedback digits are stored with a leading apostrophe; spreadsheets would
    otherwise read "00120" as the number 120.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=ROUND_FIELDS)
        w.writeheader()
        for r in results:
            for n, rnd in enumerate(r.get("rounds", []), start=1):
                w.writerow({
                    "solver": r.get("solver_id", "?"),
                    "answer": r["answer"],
                    "round": n,
                    "guess": rnd["guess"],
                    "feedback": "'" + rnd["feedback"],
                    "pool_before": rnd["pool_before"],
                    "pool_after": rnd["pool_after"],
                    "phase": rnd["phase"],
                    "success": r["success"],
                })
    return str(p)


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate a run: wins, guess histogram (wins only), games that ran out of
    candidates, and mean pool size remaining after round 1, 2, ...
    """
    wins = [r for r in results if r["success"]]
    histogram = Counter(r["guesses"] for r in wins)

    after: Dict[int, List[int]] = defaultdict(list)
    for r in results:
        for n, rnd in enumerate(r.get("rounds", []), start=1):
            after[n].append(rnd["pool_after"])

    return {
        "num_cases": len(results),
        "wins": len(wins),
        "win_rate": (len(wins) / len(results)) if results else 0.0,
        "mean_guesses": (sum(r["guesses"] for r in wins) / len(wins)) if wins else None,
        "guess_histogram": {str(k): histogram[k] for k in sorted(histogram)},
        "exhausted": sum(1 for r in results if r.get("phase") == "exhausted"),
        "mean_pool_after_round": [round(sum(v) / len(v), 3) for _, v in sorted(after.items())],
    }


def write_summary(summary: Dict, path: str) -> str:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(summary, indent=2) + "\n", encoding="utf-8")
    return str(p)


def run_id() -> str:
    """UTC timestamp for report filenames, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")
