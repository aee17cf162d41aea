"""
Cubes Module - Immutable cube-count and game records for day 2.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np


# Column order of the count array built by Game.as_array()
COLORS: Tuple[str, ...] = ("red", "green", "blue")


@dataclass(frozen=True)
class CubeCount:
    """
    Cubes of each color observed in one round.

    Attributes:
        red: Red cubes shown
        green: Green cubes shown
        blue: Blue cubes shown
    """
    red: int = 0
    green: int = 0
    blue: int = 0

    @classmethod
    def from_array(cls, values: np.ndarray) -> 'CubeCount':
        """Create CubeCount from a [red, green, blue] array."""
        red, green, blue = (int(v) for v in values)
        return cls(red=red, green=green, blue=blue)

    def as_tuple(self) -> Tuple[int, int, int]:
        """Counts in (red, green, blue) order."""
        return (self.red, self.green, self.blue)

    @property
    def power(self) -> int:
        """Product of the three counts; zero if any color is absent."""
        return self.red * self.green * self.blue

    def fits_within(self, limit: 'CubeCount') -> bool:
        """True if no color exceeds the matching count in limit."""
        return (self.red <= limit.red
                and self.green <= limit.green
                and self.blue <= limit.blue)

    def to_text(self) -> str:
        """Canonical round text, e.g. "4 red, 0 green, 3 blue"."""
        return ", ".join(f"{count} {color}"
                         for color, count in zip(COLORS, self.as_tuple()))


# Type alias: a round is one cube draw
Round = CubeCount


@dataclass(frozen=True)
class Game:
    """
    One recorded game: an id and the rounds drawn in it.

    Attributes:
        id: Game number following "Game "
        rounds: Rounds in input order
    """
    id: int
    rounds: Tuple[Round, ...]

    def as_array(self) -> np.ndarray:
        """
        Round counts as an array of Python ints.

        Object dtype keeps counts unbounded.

        Returns:
            Array of shape (len(rounds), 3), columns ordered as COLORS
        """
        if not self.rounds:
            return np.zeros((0, len(COLORS)), dtype=object)
        return np.array([r.as_tuple() for r in self.rounds], dtype=object)

    def is_possible(self, limit: CubeCount) -> bool:
        """
        Check whether every round fits within the bag limit.

        One round over any single color makes the whole game impossible.
        """
        return all(r.fits_within(limit) for r in self.rounds)

    def min_cubes(self) -> CubeCount:
        """
        Fewest cubes of each color that make every round possible.

        Componentwise maximum over rounds; a color never shown stays 0.
        """
        counts = self.as_array()
        if counts.shape[0] == 0:
            return CubeCount()
        return CubeCount.from_array(counts.max(axis=0))

    def to_text(self) -> str:
        """Canonical game line; parses back to an equal Game."""
        rounds = "; ".join(r.to_text() for r in self.rounds)
        return f"Game {self.id}: {rounds}"
