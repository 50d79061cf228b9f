from __future__ import annotations

from cli import main as cli_main


def test_main_prints_only_the_winning_id(capsys):
    assert cli_main.main() == 0
    out = capsys.readouterr().out
    assert out == "2"


def test_main_without_candidates_returns_nonzero(monkeypatch, capsys):
    monkeypatch.setattr(cli_main, "SAMPLE_DOCUMENTS", ("only the reference",))
    assert cli_main.main() == 1
    assert capsys.readouterr().out == ""
