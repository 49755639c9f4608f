"""
Tests for runners/solve_puzzle.py (single-puzzle CLI).

Acceptance:
- Prints both codes and any matching option
- Exit 1 while inputs are incomplete or invalid
- Exit 2 on unknown preset size or foreign symbols
"""

import logging

import pytest

from runners.solve_puzzle import main

N4_ARGS = ["--size", "4", "--top", "+ ▲ ● ■", "--bottom", "▲ ■ + ●", "--operator", "1324"]


def test_prints_both_codes(capsys):
    assert main(N4_ARGS) == 0
    out = capsys.readouterr().out
    assert "Top→Bottom code: 3412" in out
    assert "Bottom→Top code: 2143" in out


def test_reports_match(capsys):
    assert main(N4_ARGS + ["--options", "1243, 3412\n4231"]) == 0
    out = capsys.readouterr().out
    assert "Match (Top→Bottom): 3412" in out
    assert "No option matches" not in out


def test_reports_no_match(capsys):
    assert main(N4_ARGS + ["--options", "1111 2222"]) == 0
    assert "No option matches the computed code" in capsys.readouterr().out


def test_single_direction(capsys):
    assert main(N4_ARGS + ["--single-direction"]) == 0
    assert "Bottom→Top" not in capsys.readouterr().out


def test_default_size_six(capsys):
    args = ["--top", "%●■▲+X", "--bottom", "X+■%▲●", "--operator", "241356"]
    assert main(args) == 0
    out = capsys.readouterr().out
    assert "Top→Bottom code: 654321" in out
    assert "Bottom→Top code: 361542" in out


def test_custom_alphabet(capsys):
    args = ["--alphabet", "abc", "--top", "abc", "--bottom", "cab", "--operator", "123"]
    assert main(args) == 0
    assert "Top→Bottom code: 312" in capsys.readouterr().out


def test_incomplete_bottom():
    assert main(["--size", "4", "--top", "+▲●■", "--bottom", "▲■", "--operator", "1324"]) == 1


def test_duplicate_operator():
    assert main(["--size", "4", "--top", "+▲●■", "--bottom", "▲■+●", "--operator", "1134"]) == 1


@pytest.mark.parametrize(
    "args",
    [
        ["--size", "9", "--top", "+", "--bottom", "+", "--operator", "1"],
        ["--size", "4", "--top", "+▲●Z", "--bottom", "▲■+●", "--operator", "1324"],
        ["--size", "4", "--top", "+▲●■+", "--bottom", "▲■+●", "--operator", "1324"],
        ["--alphabet", "aab", "--top", "ab", "--bottom", "ba", "--operator", "12"],
    ],
)
def test_bad_arguments(args):
    assert main(args) == 2


def test_unknown_size_message_unquoted(caplog):
    args = ["--size", "9", "--top", "+", "--bottom", "+", "--operator", "1"]
    with caplog.at_level(logging.ERROR, logger="cts_solve"):
        assert main(args) == 2
    assert caplog.records[-1].getMessage() == "No alphabet preset for size 9. Known sizes: [3, 4, 5, 6]"


def test_foreign_symbol_message(caplog):
    args = ["--size", "4", "--top", "+▲●Z", "--bottom", "▲■+●", "--operator", "1324"]
    with caplog.at_level(logging.ERROR, logger="cts_solve"):
        assert main(args) == 2
    assert caplog.records[-1].getMessage().startswith("Symbol 'Z' is not in alphabet")
