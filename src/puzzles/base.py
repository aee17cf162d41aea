"""
Base Puzzle Module - Abstract base class for puzzle solvers.
"""

from abc import ABC, abstractmethod
from typing import Iterator, List, Tuple


def split_lines(text: str) -> List[str]:
    """
    Split puzzle input on "\\n" only.

    One trailing newline does not produce an extra empty line, and a
    trailing "\\r" is stripped from each line. Other control characters
    such as form feed or U+2028 stay inside their line.

    Args:
        text: Raw puzzle input

    Returns:
        Lines without their terminators
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class PuzzleSolver(ABC):
    """
    Abstract base class for all puzzle solvers.

    Subclasses must implement the process() method and define
    name, day, part and description class attributes.

    Attributes:
        name: Short identifier for the puzzle (e.g. "day01-part1")
        description: Human-readable description for CLI listing and UI
        day: Puzzle day number
        part: Puzzle part number (1 or 2)
    """
    name: str = "base"
    description: str = "Base puzzle"
    day: int = 0
    part: int = 0

    @abstractmethod
    def process(self, input: str) -> str:
        """
        Solve the puzzle for the given input text.

        Must be a pure function of its input: no state is kept
        between calls.

        Args:
            input: Raw puzzle input, lines separated by newlines

        Returns:
            Answer formatted as a decimal string

        Raises:
            PuzzleError: If the input does not match the puzzle format
        """
        pass

    def iter_lines(self, input: str) -> Iterator[Tuple[int, str]]:
        """
        Yield (line_number, line) pairs, numbered from 1.

        Lines are split as in split_lines().

        Args:
            input: Raw puzzle input

        Returns:
            Iterator over numbered lines
        """
        return enumerate(split_lines(input), start=1)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"
