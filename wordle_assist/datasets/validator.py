"""
Strict checks for a (possibilities, vocabulary) pair of word lists.

`load_words` quietly skips anything it can't use. This module reports what it
skipped and why, so a run's summary records exactly which lists it played
with:

    rep = validate_wordlists(5, "en_5.txt", "en_5.txt")
    print(pretty_summary(rep))
    # N=5 | possibilities: 483 ok, 0 bad, 0 dup | vocabulary: ... | subset=True | OK

A line is accepted only if it is already lowercase ASCII a-z of length N.
Possibilities must also be guessable, i.e. a subset of the vocabulary.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, List
import hashlib

EXAMPLES = 5


@dataclass
class ListReport:
    path: str
    exists: bool = False
    words: int = 0
    sha256: str = ""
    bad_lines: List[int] = field(default_factory=list)      # 1-based line numbers
    duplicates: List[str] = field(default_factory=list)

    def problems(self, label: str) -> List[str]:
        out: List[str] = []
        if not self.exists:
            return [f"{label} file not found: {self.path}"]
        if self.words == 0:
            out.append(f"{label} file contains 0 valid words")
        if self.bad_lines:
            out.append(f"{label} has {len(self.bad_lines)} invalid line(s), "
                       f"e.g. lines {self.bad_lines[:EXAMPLES]}")
        if self.duplicates:
            out.append(f"{label} contains duplicate words, e.g. {self.duplicates[:EXAMPLES]}")
        return out


def _accepts(token: str, N: int) -> bool:
    return len(token) == N and token.isascii() and token.isalpha() and token.islower()


def inspect_list(path: Path | str, N: int) -> tuple[ListReport, List[str]]:
    """
    Read one list and return (report, accepted words in file order).
    """
    p = Path(path)
    rep = ListReport(path=str(path))
    if not p.is_file():
        return rep, []

    raw = p.read_bytes()
    rep.exists = True
    rep.sha256 = hashlib.sha256(raw).hexdigest()

    words: List[str] = []
    for lineno, line in enumerate(raw.decode("utf-8").splitlines(), start=1):
        token = line.strip()
        if _accepts(token, N):
            words.append(token)
        else:
            rep.bad_lines.append(lineno)

    rep.words = len(words)
    rep.duplicates = sorted(w for w, n in Counter(words).items() if n > 1)
    return rep, words


def validate_wordlists(N: int, possibilities_path: str, vocabulary_path: str) -> Dict:
    """
    Inspect both lists and return a JSON-ready dict with keys
    N, possibilities, vocabulary, possibilities_subset_vocabulary, passed, issues.
    `passed` means: both present and non-empty, no bad or duplicate lines,
    and every possibility is in the vocabulary.
    """
    pos, pos_words = inspect_list(possibilities_path, N)
    voc, voc_words = inspect_list(vocabulary_path, N)

    issues = pos.problems("possibilities") + voc.problems("vocabulary")

    unguessable = sorted(set(pos_words) - set(voc_words))
    subset = pos.exists and voc.exists and not unguessable
    if pos.exists and voc.exists and unguessable:
        issues.append(f"possibilities not subset of vocabulary, e.g. {unguessable[:EXAMPLES]}")

    return {
        "N": N,
        "possibilities": asdict(pos),
        "vocabulary": asdict(voc),
        "possibilities_subset_vocabulary": subset,
        "passed": not issues,
        "issues": issues,
    }


def pretty_summary(report: Dict) -> str:
    def part(label: str, r: Dict) -> str:
        if not r["exists"]:
            return f"{label}: missing"
        return (f"{label}: {r['words']} ok, {len(r['bad_lines'])} bad, "
                f"{len(r['duplicates'])} dup (sha={r['sha256'][:12]})")

    status = "OK" if report["passed"] else "FAIL"
    return " | ".join([
        f"N={report['N']}",
        part("possibilities", report["possibilities"]),
        part("vocabulary", report["vocabulary"]),
        f"possibilities⊆vocabulary={report['possibilities_subset_vocabulary']}",
        status,
    ])
