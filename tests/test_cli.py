from pathlib import Path

import pytest
from apps.cli import assist, simulate


def _words(tmp_path: Path, words) -> str:
    p = tmp_path / "words.txt"
    p.write_text("\n".join(words) + "\n", encoding="utf-8")
    return str(p)


def _feed(monkeypatch, answers):
    it = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    monkeypatch.setattr("builtins.input", fake_input)


def test_assist_finds_answer(tmp_path, monkeypatch, capsys):
    path = _words(tmp_path, ["apple", "angle", "ankle"])
    _feed(monkeypatch, ["apple", "20022", "angle", "22222"])

    assert assist.main(["--possibilities", path]) == 0
    out = capsys.readouterr().out
    assert "I suggest you try one of the following:" in out
    assert "The answer should be: angle" in out


def test_assist_reports_not_in_wordlist(tmp_path, monkeypatch, capsys):
    path = _words(tmp_path, ["apple", "angle", "ankle"])
    _feed(monkeypatch, ["fuzzy", "22222"])

    assert assist.main(["--possibilities", path]) == 0
    assert "Answer not in my wordlist" in capsys.readouterr().out


@pytest.mark.parametrize("guess,feedback", [("apple", "2002"), ("appl", "2002"), ("apple", "20029")])
def test_assist_invalid_feedback_exits_2(tmp_path, monkeypatch, capsys, guess, feedback):
    path = _words(tmp_path, ["apple", "angle", "ankle"])
    _feed(monkeypatch, [guess, feedback])

    assert assist.main(["--possibilities", path]) == 2
    assert "error:" in capsys.readouterr().err


def test_assist_missing_wordlist_exits_1(tmp_path, capsys):
    assert assist.main(["--possibilities", str(tmp_path / "missing.txt")]) == 1
    assert "cannot read word list" in capsys.readouterr().err


def test_assist_eof_exits_1(tmp_path, monkeypatch):
    path = _words(tmp_path, ["apple", "angle", "ankle"])
    _feed(monkeypatch, [])
    assert assist.main(["--possibilities", path]) == 1


def test_simulate_writes_reports(tmp_path, capsys):
    path = _words(tmp_path, ["crane", "raise", "stare", "trace", "cared"])
    outdir = tmp_path / "reports"

    assert simulate.main(["--possibilities", path, "--outdir", str(outdir),
                          "--progress", "off"]) == 0
    out = capsys.readouterr().out
    assert "Solved 5/5" in out
    assert len(list(outdir.glob("run_*_rounds.csv"))) == 1
    assert len(list(outdir.glob("run_*_summary.json"))) == 1
