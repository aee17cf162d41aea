"""
Errors Module - Typed failures raised while reading or solving puzzle input.

Every error aborts the whole process() call; no partial answers are produced.
"""

from typing import Optional


class PuzzleError(Exception):
    """Base class for all puzzle failures."""


class MalformedInput(PuzzleError):
    """
    Input text does not match the expected record grammar.

    Attributes:
        line_number: 1-based line the failure occurred on
        column: 0-based offset into the line where parsing stopped
        line: The offending line text
    """

    def __init__(self, message: str, line_number: int = 0, column: int = 0,
                 line: str = ""):
        self.line_number = line_number
        self.column = column
        self.line = line
        super().__init__(self._format(message))

    def _format(self, message: str) -> str:
        if not self.line_number:
            return message
        pointer = " " * self.column + "^"
        return f"line {self.line_number}, column {self.column}: {message}\n  {self.line}\n  {pointer}"


class MissingExpectedValue(PuzzleError):
    """
    A line lacks content it is guaranteed to contain (e.g. no digit).

    Attributes:
        line_number: 1-based line number
        line: The offending line text
    """

    def __init__(self, message: str, line_number: int = 0, line: str = ""):
        self.line_number = line_number
        self.line = line
        super().__init__(f"line {line_number}: {message}: {line!r}")


class InputFileError(PuzzleError):
    """Puzzle input file is missing or unreadable."""

    def __init__(self, path, reason: Optional[str] = None):
        self.path = path
        detail = f": {reason}" if reason else ""
        super().__init__(f"Cannot read puzzle input {path}{detail}")
