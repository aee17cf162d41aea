"""
Tests for the puzzle registry, input loading and timed runs.

Usage:
    pytest tests/test_puzzles.py
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.puzzles import (
    Answer,
    InputFileError,
    MalformedInput,
    PuzzleSolver,
    create_puzzle,
    default_input_path,
    find_puzzle_name,
    get_day_puzzle_names,
    get_default_puzzle_name,
    get_puzzle_info,
    get_puzzle_names,
    load_input,
    register_puzzle,
    run_puzzle,
)
from src.puzzles.base import split_lines
from src.puzzles.days import Day01Part1


def test_builtin_puzzles_registered():
    assert get_puzzle_names() == ["day01-part1", "day02-part1", "day02-part2"]


def test_puzzle_info_has_descriptions():
    info = get_puzzle_info()
    assert [i["name"] for i in info] == get_puzzle_names()
    assert all(i["description"] for i in info)


def test_create_puzzle_returns_solver():
    solver = create_puzzle("day02-part2")
    assert isinstance(solver, PuzzleSolver)
    assert (solver.day, solver.part) == (2, 2)


def test_unknown_puzzle_lists_available():
    with pytest.raises(ValueError, match="day01-part1"):
        create_puzzle("day99-part1")


def test_find_puzzle_name():
    assert find_puzzle_name(2, 1) == "day02-part1"
    assert find_puzzle_name(1, 2) is None


def test_day_puzzle_names():
    assert get_day_puzzle_names(2) == ["day02-part1", "day02-part2"]
    assert get_day_puzzle_names(5) == []


def test_default_puzzle_name():
    assert get_default_puzzle_name() == "day01-part1"


def test_solvers_keep_no_state_between_calls():
    solver = create_puzzle("day01-part1")
    assert solver.process("12") == "12"
    assert solver.process("34") == "34"


def test_default_input_path():
    assert default_input_path("inputs", 2) == Path("inputs") / "day02.txt"


def test_load_input_reads_file(tmp_path):
    path = tmp_path / "day01.txt"
    path.write_text("1abc2\ntreb7uchet\n", encoding="utf-8")
    assert load_input(path) == "1abc2\ntreb7uchet\n"


def test_load_input_missing_file(tmp_path):
    with pytest.raises(InputFileError) as excinfo:
        load_input(tmp_path / "missing.txt")
    assert excinfo.value.path == tmp_path / "missing.txt"


def test_run_puzzle_collects_metrics():
    answer = run_puzzle(create_puzzle("day01-part1"), "1abc2\npqr3stu8vwx")
    assert isinstance(answer, Answer)
    assert answer.value == "50"
    assert answer.metrics.puzzle_name == "day01-part1"
    assert answer.metrics.lines_processed == 2
    assert answer.metrics.computation_time_ms >= 0


def test_run_puzzle_propagates_errors():
    with pytest.raises(MalformedInput):
        run_puzzle(create_puzzle("day02-part1"), "Game one: 1 red")


def test_register_same_class_twice_is_allowed():
    assert register_puzzle(Day01Part1) is Day01Part1


def test_register_duplicate_name_rejected():
    class Impostor(PuzzleSolver):
        name = "day01-part1"
        day = 1
        part = 3

        def process(self, input):
            return "0"

    with pytest.raises(ValueError, match="already registered"):
        register_puzzle(Impostor)
    assert create_puzzle("day01-part1").__class__ is Day01Part1


def test_register_taken_slot_rejected():
    class SecondDay2Part1(PuzzleSolver):
        name = "day02-part1-alt"
        day = 2
        part = 1

        def process(self, input):
            return "0"

    with pytest.raises(ValueError, match="already solved"):
        register_puzzle(SecondDay2Part1)
    assert "day02-part1-alt" not in get_puzzle_names()


def test_register_requires_day_and_part():
    class Unnumbered(PuzzleSolver):
        name = "unnumbered"

        def process(self, input):
            return "0"

    with pytest.raises(ValueError):
        register_puzzle(Unnumbered)


@pytest.mark.parametrize("text, expected", [
    ("", []),
    ("a", ["a"]),
    ("a\n", ["a"]),
    ("a\n\n", ["a", ""]),
    ("a\r\nb\r\n", ["a", "b"]),
    ("a\x0cb\u2028c\x85d", ["a\x0cb\u2028c\x85d"]),
    ("\nb", ["", "b"]),
])
def test_split_lines(text, expected):
    assert split_lines(text) == expected


def test_run_puzzle_counts_newline_lines_only():
    answer = run_puzzle(create_puzzle("day01-part1"), "1\x0c2\n3\u20284\n")
    assert answer.metrics.lines_processed == 2
