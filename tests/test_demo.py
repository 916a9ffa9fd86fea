"""Tests for the command-line demonstration."""

from cubic import demo


def test_main_prints_found_root(capsys):
    assert demo.main() == 0
    out = capsys.readouterr().out
    assert out.startswith("found the root -0.63")
    assert out.rstrip().endswith("iterations")


def test_main_prints_no_root(capsys, monkeypatch):
    monkeypatch.setattr(demo, "EXAMPLE_COEFFICIENTS", (5.0, 1.0, 2.0, -3.0))
    assert demo.main() == 1
    assert capsys.readouterr().out == "No root found\n"
