import argparse

import pytest

from letterboxed.args import add_standard_args, get_options_from_args
from letterboxed.solve import format_solution, main
from letterboxed.solve_many import main as solve_many_main
from letterboxed.solver import SolverOptions

DICT = "testdata/letterboxed-words.txt"


def test_format_solution():
    assert format_solution(["previously", "yak"]) == "PREVIOUSLY, YAK"


def test_standard_args():
    parser = argparse.ArgumentParser()
    add_standard_args(parser)
    args = parser.parse_args([])
    assert get_options_from_args(args) == SolverOptions()

    args = parser.parse_args(["--max_words", "3", "--heuristic", "words"])
    assert get_options_from_args(args) == SolverOptions(max_words=3, heuristic="words")

    with pytest.raises(SystemExit):
        parser.parse_args(["--heuristic", "nope"])

    args = parser.parse_args(["--max_words", "0"])
    with pytest.raises(ValueError):
        get_options_from_args(args)


def test_main(capsys):
    assert main(["vks pyi elu rao", "--dictionary", DICT]) == 0
    out = capsys.readouterr().out
    assert "There are 12 words that can be made with this board." in out
    assert "Found solution: PREVIOUSLY, YAK" in out
    assert " o │           │ p" in out


def test_main_show_words(capsys):
    assert main(["vkspyielurao", "--dictionary", DICT, "--show_words"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "previously" in lines
    assert "leek" not in lines


def test_main_no_solution(capsys):
    assert main(["vkspyielurao", "--dictionary", DICT, "--max_words", "1"]) == 1
    assert "No solution found" in capsys.readouterr().out


def test_main_invalid_board(capsys):
    assert main(["vkspyielura", "--dictionary", DICT]) == 2
    assert "Invalid board" in capsys.readouterr().out


def test_solve_many(capsys):
    solve_many_main(["testdata/boards.txt", "--dictionary", DICT])
    out = capsys.readouterr().out
    assert out.splitlines() == [
        "vkspyielurao: PREVIOUSLY, YAK",
        "abcdefghijkl: -",
    ]


def test_solve_many_skips_invalid_boards(tmp_path, capsys):
    boards = tmp_path / "boards.txt"
    boards.write_text("vks pyi elu rao\nabc\nabcdefghijkl\n")
    solve_many_main([str(boards), "--dictionary", DICT])
    captured = capsys.readouterr()
    assert captured.out.splitlines() == [
        "vkspyielurao: PREVIOUSLY, YAK",
        "abc: invalid board",
        "abcdefghijkl: -",
    ]
    assert "Invalid board" in captured.err
