"""
Tests for day 2: game record grammar, possible games and cube power.

Usage:
    pytest tests/test_day02.py
"""

import random
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.puzzles import (
    CubeCount,
    Game,
    MalformedInput,
    create_puzzle,
    parse_game,
    parse_games,
)
from src.puzzles.days.day02 import BAG_LIMIT


SAMPLE = """Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green
Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue
Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red
Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red
Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green"""


# --- Grammar ------------------------------------------------------------------

def test_parse_game_fields():
    game = parse_game("Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green")
    assert game.id == 1
    assert game.rounds == (
        CubeCount(red=4, blue=3),
        CubeCount(red=1, green=2, blue=6),
        CubeCount(green=2),
    )


def test_parse_games_sample():
    games = parse_games(SAMPLE)
    assert [g.id for g in games] == [1, 2, 3, 4, 5]
    assert len(games[2].rounds) == 3


def test_duplicate_color_last_wins():
    game = parse_game("Game 9: 1 red, 5 red, 2 blue")
    assert game.rounds == (CubeCount(red=5, blue=2),)


def test_parse_is_deterministic():
    assert parse_games(SAMPLE) == parse_games(SAMPLE)


def test_canonical_text_parses_back():
    for game in parse_games(SAMPLE):
        assert parse_game(game.to_text()) == game


@pytest.mark.parametrize("line", [
    "Game 1: 3 purple",
    "Game 1: 3 Red",
    "Game x: 3 red",
    "Game 1 3 red",
    "game 1: 3 red",
    "Game 1: red 3",
    "Game 1: 3 red;",
    "Game 1: 3 red, ",
    "Game 1: 3 red;2 blue",
    "Game 1: 3 red extra",
    "Game 1: ",
    "",
])
def test_malformed_lines_rejected(line):
    with pytest.raises(MalformedInput):
        parse_game(line)


def test_unknown_color_error_location():
    with pytest.raises(MalformedInput) as excinfo:
        parse_games("Game 1: 3 red\nGame 2: 4 green, 7 pink")
    error = excinfo.value
    assert error.line_number == 2
    assert error.column == len("Game 2: 4 green, 7 ")
    assert "pink" in str(error)


def test_bad_line_fails_whole_batch():
    with pytest.raises(MalformedInput):
        create_puzzle("day02-part1").process(SAMPLE + "\nGame 6: 1 orange")


def test_empty_input_rejected():
    with pytest.raises(MalformedInput):
        parse_games("")


# --- Part 1 -------------------------------------------------------------------

def test_part1_sample():
    assert create_puzzle("day02-part1").process(SAMPLE) == "8"


def test_game_within_limits_is_possible():
    game = Game(id=1, rounds=(CubeCount(12, 13, 14), CubeCount(0, 0, 0)))
    assert game.is_possible(BAG_LIMIT)


@pytest.mark.parametrize("over", [
    CubeCount(red=13),
    CubeCount(green=14),
    CubeCount(blue=15),
])
def test_one_round_over_any_limit_is_impossible(over):
    game = Game(id=1, rounds=(CubeCount(1, 1, 1), over, CubeCount(2, 2, 2)))
    assert not game.is_possible(BAG_LIMIT)


def test_round_fits_within():
    assert CubeCount(12, 13, 14).fits_within(BAG_LIMIT)
    assert not CubeCount(12, 13, 15).fits_within(BAG_LIMIT)


# --- Part 2 -------------------------------------------------------------------

def test_part2_sample():
    assert create_puzzle("day02-part2").process(SAMPLE) == "2286"


def test_min_cubes_sample_game():
    game = parse_game("Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green")
    assert game.min_cubes() == CubeCount(red=4, green=2, blue=6)
    assert game.min_cubes().power == 48


def test_power_zero_when_color_never_seen():
    game = Game(id=1, rounds=(CubeCount(red=3), CubeCount()))
    assert game.min_cubes() == CubeCount(3, 0, 0)
    assert game.min_cubes().power == 0


def test_min_cubes_not_gated_by_bag_limit():
    game = parse_game("Game 3: 20 red; 1 green, 1 blue")
    assert game.min_cubes().power == 20


def test_game_order_does_not_matter():
    lines = SAMPLE.splitlines()
    random.Random(3).shuffle(lines)
    shuffled = "\n".join(lines)
    assert create_puzzle("day02-part1").process(shuffled) == "8"
    assert create_puzzle("day02-part2").process(shuffled) == "2286"


# --- Unbounded counts and line splitting --------------------------------------

HUGE = 99999999999999999999


def test_part1_huge_count_is_impossible():
    text = f"Game 1: {HUGE} red\nGame 2: 1 blue"
    assert create_puzzle("day02-part1").process(text) == "2"


def test_part2_huge_count_keeps_exact_power():
    text = f"Game 1: {HUGE} red, 2 green, 3 blue"
    assert create_puzzle("day02-part2").process(text) == str(HUGE * 6)


def test_min_cubes_huge_count():
    game = parse_game(f"Game 7: {HUGE} blue; 1 red, 1 green")
    assert game.min_cubes() == CubeCount(red=1, green=1, blue=HUGE)


def test_crlf_line_endings():
    games = parse_games("Game 1: 3 red\r\nGame 2: 4 blue\r\n")
    assert [g.id for g in games] == [1, 2]


@pytest.mark.parametrize("separator", ["\x0c", "\u2028", "\x85"])
def test_only_newline_separates_games(separator):
    with pytest.raises(MalformedInput) as excinfo:
        parse_games(f"Game 1: 3 red{separator}Game 2: 4 blue")
    assert excinfo.value.line_number == 1
