"""
Days Package - Concrete puzzle solvers.

Import this module to register all built-in puzzles.
"""

from .day01 import Day01Part1
from .day02 import Day02Part1, Day02Part2

__all__ = [
    "Day01Part1",
    "Day02Part1",
    "Day02Part2",
]
