from pathlib import Path

import pytest
from apps.cli.play import main


@pytest.fixture
def dictionary(tmp_path: Path) -> str:
    p = tmp_path / "dictionary.txt"
    p.write_text("bat\nbet\nbit\ncats\n", encoding="utf-8")
    return str(p)


def test_auto_round(dictionary, capsys):
    code = main(["--dictionary", dictionary, "--length", "3", "--guesses", "10",
                 "--auto", "letter_freq", "--seed", "3"])
    out = capsys.readouterr().out
    assert code == 0
    assert "won" in out and "The word was" in out


def test_interactive_round(dictionary, capsys, monkeypatch):
    answers = iter(["a", "a", "xy", "b", "t", "e", "i"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    code = main(["--dictionary", dictionary, "--length", "3", "--guesses", "5",
                 "--difficulty", "hard", "--seed", "1"])
    out = capsys.readouterr().out
    assert "already been guessed" in out
    assert "single character" in out
    # HARD keeps "b-t" over "bet" on e (more blanks), then i reveals "bit"
    assert code == 0
    assert "You beat me! The word was bit." in out


def test_interactive_round_out_of_input(dictionary, capsys, monkeypatch):
    def _eof(prompt=""):
        raise EOFError
    monkeypatch.setattr("builtins.input", _eof)
    code = main(["--dictionary", dictionary, "--length", "3"])
    assert code == 1
    assert "you lose" in capsys.readouterr().out


def test_unplayable_length(dictionary, capsys):
    assert main(["--dictionary", dictionary, "--length", "7"]) == 2
    assert "Playable lengths: [3, 4]" in capsys.readouterr().out
