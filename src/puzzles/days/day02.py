"""
Day 2: Cube Conundrum - Check recorded games against the bag contents.

Part 1 sums the ids of games possible with the known bag; part 2 sums the
power of the smallest bag that makes each game possible.
"""

import logging

from ..base import PuzzleSolver
from ..cubes import CubeCount
from ..factory import register_puzzle
from ..game_parser import parse_games

logger = logging.getLogger(__name__)


# Bag contents for part 1
BAG_LIMIT = CubeCount(red=12, green=13, blue=14)


@register_puzzle
class Day02Part1(PuzzleSolver):
    """Sum of ids of games whose every round fits within BAG_LIMIT."""
    name = "day02-part1"
    description = "Day 2 part 1 - Possible games (12 red, 13 green, 14 blue)"
    day = 2
    part = 1

    def process(self, input: str) -> str:
        games = parse_games(input)
        possible = [game for game in games if game.is_possible(BAG_LIMIT)]
        logger.debug(f"{len(possible)} of {len(games)} games possible")
        return str(sum(game.id for game in possible))


@register_puzzle
class Day02Part2(PuzzleSolver):
    """Sum over games of the power of the minimum cube set."""
    name = "day02-part2"
    description = "Day 2 part 2 - Power of minimum cube sets"
    day = 2
    part = 2

    def process(self, input: str) -> str:
        games = parse_games(input)
        total = sum(game.min_cubes().power for game in games)
        logger.debug(f"Summed power of {len(games)} games: {total}")
        return str(total)
