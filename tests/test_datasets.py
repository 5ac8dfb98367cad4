from pathlib import Path

import pytest
from wordle_assist.datasets.validator import inspect_list
from wordle_assist.datasets import (
    LoadFailure, bundled_path, load_words, pretty_summary, validate_wordlists,
)


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_load_words_cleans_and_dedupes(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["Crane", "raise", "", "cranes", "cr4ne", "crane", "  stare  ", "maçãs"])
    assert load_words(p, 5) == ["crane", "raise", "stare"]


def test_load_words_missing_file(tmp_path: Path):
    with pytest.raises(LoadFailure):
        load_words(tmp_path / "nope.txt")


@pytest.mark.parametrize("language,word", [("en", "crane"), ("pt", "livro")])
def test_bundled_lists(language, word):
    words = load_words(bundled_path(language), 5)
    assert word in words
    assert len(words) == len(set(words))


def test_bundled_path_unknown_language():
    with pytest.raises(ValueError):
        bundled_path("xx")


def test_validate_wordlists_happy_path(tmp_path: Path):
    pos = tmp_path / "possibilities_5.txt"
    voc = tmp_path / "vocabulary_5.txt"
    _write(pos, ["crane", "raise", "stare"])
    _write(voc, ["crane", "raise", "stare", "trace", "cared"])

    rep = validate_wordlists(5, str(pos), str(voc))
    assert rep["passed"] is True
    assert rep["possibilities_subset_vocabulary"] is True
    s = pretty_summary(rep)
    assert "N=5" in s and "possibilities⊆vocabulary=True" in s and s.endswith("OK")


def test_validate_wordlists_flags_errors(tmp_path: Path):
    pos = tmp_path / "possibilities_6.txt"
    voc = tmp_path / "vocabulary_6.txt"
    # 'crane' is too short for N=6, '???' has bad chars, 'raiser' is fine
    pos.write_text("raiser\ncrane\n???\n", encoding="utf-8")
    voc.write_text("raiser\nplanet\nplanet\n", encoding="utf-8")

    rep = validate_wordlists(6, str(pos), str(voc))
    assert rep["passed"] is False
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlists_subset_violation(tmp_path: Path):
    pos = tmp_path / "possibilities_5.txt"
    voc = tmp_path / "vocabulary_5.txt"
    _write(pos, ["crane", "raise", "stare"])
    _write(voc, ["crane", "stare"])

    rep = validate_wordlists(5, str(pos), str(voc))
    assert rep["passed"] is False
    assert rep["possibilities_subset_vocabulary"] is False
    assert any("subset" in msg for msg in rep["issues"])


def test_validate_wordlists_missing_file(tmp_path: Path):
    rep = validate_wordlists(5, str(tmp_path / "a.txt"), str(tmp_path / "b.txt"))
    assert rep["passed"] is False
    assert len(rep["issues"]) == 2
    assert "FAIL" in pretty_summary(rep)


def test_inspect_list_points_at_bad_lines_and_duplicates(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["crane", "Raise", "stare", "crane", "", "cr4ne"])

    rep, words = inspect_list(p, 5)
    assert words == ["crane", "stare", "crane"]
    assert rep.bad_lines == [2, 5, 6]
    assert rep.duplicates == ["crane"]
    assert len(rep.sha256) == 64
    assert any("lines [2, 5, 6]" in msg for msg in rep.problems("possibilities"))
