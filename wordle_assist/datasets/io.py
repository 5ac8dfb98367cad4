from __future__ import annotations
from pathlib import Path
from typing import List

DATA_DIR = Path(__file__).resolve().parent / "data"
LANGUAGES = ("en", "pt")


class LoadFailure(Exception):
    """Raised when a word list is missing or unreadable."""


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises LoadFailure if the file can't be read.
    """
    p = Path(p)
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LoadFailure(f"cannot read word list {p}: {e}") from e
    return [ln.rstrip("\r\n") for ln in text.splitlines()]


def load_words(p: Path | str, N: int = 5) -> List[str]:
    """
    Load a word list for length N: lowercased, ASCII a-z only, duplicates
    dropped (first occurrence wins). Malformed lines are skipped.
    """
    out: List[str] = []
    seen = set()
    for raw in read_lines(p):
        w = raw.strip().lower()
        if len(w) != N or not (w.isascii() and w.isalpha()):
            continue
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def bundled_path(language: str, N: int = 5) -> Path:
    """
    Path of the word list shipped for `language` (one of LANGUAGES).
    """
    if language not in LANGUAGES:
        raise ValueError(f"Unknown language: {language}. Available: {list(LANGUAGES)}")
    return DATA_DIR / f"{language}_{N}.txt"
