"""
Game Record Parser - Recursive-descent grammar for day 2 game lines.

Grammar (one game per line):

    game   := "Game " id ": " round ("; " round)*
    round  := cubes (", " cubes)*
    cubes  := count " " color
    color  := "red" | "green" | "blue"

Parsing is all-or-nothing: any deviation raises MalformedInput and no
games are returned.
"""

import re
from typing import Dict, List, Optional

from .base import split_lines
from .cubes import COLORS, CubeCount, Game, Round
from .errors import MalformedInput


_DIGITS = re.compile(r"[0-9]+")
_WORD = re.compile(r"[A-Za-z]+")


class _Cursor:
    """Read position within a single line."""

    def __init__(self, line: str, line_number: int):
        self.line = line
        self.line_number = line_number
        self.pos = 0

    def error(self, message: str, column: Optional[int] = None) -> MalformedInput:
        return MalformedInput(
            message,
            line_number=self.line_number,
            column=self.pos if column is None else column,
            line=self.line,
        )

    def at_end(self) -> bool:
        return self.pos >= len(self.line)

    def try_tag(self, literal: str) -> bool:
        if self.line.startswith(literal, self.pos):
            self.pos += len(literal)
            return True
        return False

    def tag(self, literal: str) -> None:
        if not self.try_tag(literal):
            raise self.error(f"expected {literal!r}")

    def _match(self, pattern: re.Pattern, what: str) -> str:
        match = pattern.match(self.line, self.pos)
        if match is None:
            raise self.error(f"expected {what}")
        self.pos = match.end()
        return match.group()

    def number(self) -> int:
        return int(self._match(_DIGITS, "a number"))

    def word(self) -> str:
        return self._match(_WORD, "a color")


# 3 blue, 4 red
def _round(cursor: _Cursor) -> Round:
    counts: Dict[str, int] = {}
    while True:
        amount = cursor.number()
        cursor.tag(" ")
        start = cursor.pos
        color = cursor.word()
        if color not in COLORS:
            raise cursor.error(f"unknown color {color!r}", column=start)
        # last mention of a color within a round wins
        counts[color] = amount
        if not cursor.try_tag(", "):
            return CubeCount(**counts)


# 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green
def _rounds(cursor: _Cursor) -> List[Round]:
    rounds = [_round(cursor)]
    while cursor.try_tag("; "):
        rounds.append(_round(cursor))
    return rounds


def parse_game(line: str, line_number: int = 1) -> Game:
    """
    Parse one game line.

    Example:
        >>> parse_game("Game 1: 3 blue, 4 red; 2 green").min_cubes()
        CubeCount(red=4, green=2, blue=3)

    Args:
        line: Text such as "Game 1: 3 blue, 4 red; 1 red, 2 green"
        line_number: Reported in errors when parsing a multi-line input

    Returns:
        Parsed Game

    Raises:
        MalformedInput: On an unknown color or any structural mismatch
    """
    cursor = _Cursor(line, line_number)
    cursor.tag("Game ")
    game_id = cursor.number()
    cursor.tag(": ")
    rounds = _rounds(cursor)
    if not cursor.at_end():
        raise cursor.error("unexpected trailing text")
    return Game(id=game_id, rounds=tuple(rounds))


def parse_games(text: str) -> List[Game]:
    """
    Parse a newline-separated list of game lines.

    Args:
        text: Full puzzle input

    Returns:
        Games in input order

    Raises:
        MalformedInput: If the input is empty or any line is malformed
    """
    lines = split_lines(text)
    if not lines:
        raise MalformedInput("expected at least one game")
    return [parse_game(line, number) for number, line in enumerate(lines, start=1)]
