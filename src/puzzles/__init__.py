"""
Puzzles Package - Advent of Code 2023 puzzle solvers.

Each puzzle is a pure process(input) -> str function wrapped in a
registered PuzzleSolver class, selectable by name from the CLI or UI.

Public API:
    - PuzzleSolver: Abstract base for solvers
    - Answer / AnswerMetrics: Result of a timed run
    - CubeCount / Game: Day 2 records
    - parse_game() / parse_games(): Day 2 grammar
    - PuzzleError, MalformedInput, MissingExpectedValue, InputFileError
    - create_puzzle(): Factory function
    - get_puzzle_names() / get_puzzle_info(): Registry queries
    - run_puzzle() / load_input(): Execution helpers

Usage:
    from src.puzzles import create_puzzle, load_input, run_puzzle

    solver = create_puzzle("day02-part1")
    answer = run_puzzle(solver, load_input("inputs/day02.txt"))
    print(answer.value, f"{answer.metrics.computation_time_ms:.1f}ms")
"""

# Core data structures
from .answer import Answer, AnswerMetrics
from .cubes import CubeCount, Game, Round
from .errors import PuzzleError, MalformedInput, MissingExpectedValue, InputFileError
from .game_parser import parse_game, parse_games

# Puzzle framework
from .base import PuzzleSolver
from .factory import (
    create_puzzle,
    find_puzzle_name,
    get_day_puzzle_names,
    get_puzzle_names,
    get_puzzle_info,
    get_default_puzzle_name,
    register_puzzle,
)
from .runner import default_input_path, load_input, run_puzzle

# Import days to register them
from . import days

__all__ = [
    # Data structures
    "Answer",
    "AnswerMetrics",
    "CubeCount",
    "Game",
    "Round",
    "parse_game",
    "parse_games",
    # Errors
    "PuzzleError",
    "MalformedInput",
    "MissingExpectedValue",
    "InputFileError",
    # Puzzle framework
    "PuzzleSolver",
    "create_puzzle",
    "find_puzzle_name",
    "get_day_puzzle_names",
    "get_puzzle_names",
    "get_puzzle_info",
    "get_default_puzzle_name",
    "register_puzzle",
    # Execution
    "default_input_path",
    "load_input",
    "run_puzzle",
]
