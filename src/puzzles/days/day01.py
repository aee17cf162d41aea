"""
Day 1: Trebuchet?! - Sum the two-digit calibration value of every line.
"""

import logging

from ..base import PuzzleSolver
from ..errors import MissingExpectedValue
from ..factory import register_puzzle

logger = logging.getLogger(__name__)


def calibration_value(line: str, line_number: int = 1) -> int:
    """
    Combine the first and last digit of a line into a two-digit number.

    A line with a single digit uses it twice ("treb7uchet" -> 77).
    Everything that is not 0-9 is ignored.

    Raises:
        MissingExpectedValue: If the line contains no digit
    """
    digits = [int(c) for c in line if "0" <= c <= "9"]
    if not digits:
        raise MissingExpectedValue("expected at least one digit", line_number, line)
    return digits[0] * 10 + digits[-1]


@register_puzzle
class Day01Part1(PuzzleSolver):
    """Calibration document: sum of first*10 + last digit per line."""
    name = "day01-part1"
    description = "Day 1 part 1 - Trebuchet calibration digits"
    day = 1
    part = 1

    def process(self, input: str) -> str:
        total = sum(calibration_value(line, number)
                    for number, line in self.iter_lines(input))
        logger.debug(f"Calibration sum: {total}")
        return str(total)
