"""
Puzzle Factory Module - Registry and factory for puzzle solver instantiation.
"""

from typing import Dict, List, Optional, Type

from .base import PuzzleSolver


# Global registry of puzzle solvers
_PUZZLES: Dict[str, Type[PuzzleSolver]] = {}


def register_puzzle(cls: Type[PuzzleSolver]) -> Type[PuzzleSolver]:
    """
    Decorator to register a puzzle solver class.

    Usage:
        @register_puzzle
        class Day03Part1(PuzzleSolver):
            name = "day03-part1"
            ...

    Args:
        cls: Solver class to register

    Returns:
        The same class (for decorator chaining)

    Raises:
        ValueError: If the name or the (day, part) slot is already taken,
            or day/part are not positive
    """
    if cls.day < 1 or cls.part < 1:
        raise ValueError(f"{cls.__name__} must set positive day and part")
    existing = _PUZZLES.get(cls.name)
    if existing is not None and existing is not cls:
        raise ValueError(f"Puzzle name already registered: {cls.name}")
    taken = find_puzzle_name(cls.day, cls.part)
    if taken is not None and taken != cls.name:
        raise ValueError(f"Day {cls.day} part {cls.part} already solved by {taken}")
    _PUZZLES[cls.name] = cls
    return cls


def create_puzzle(name: str) -> PuzzleSolver:
    """
    Create a puzzle solver instance by name.

    Args:
        name: Puzzle name (e.g., "day01-part1", "day02-part2")

    Returns:
        Solver instance

    Raises:
        ValueError: If puzzle name not found
    """
    if name not in _PUZZLES:
        available = ", ".join(_PUZZLES.keys())
        raise ValueError(f"Unknown puzzle: {name}. Available: {available}")
    return _PUZZLES[name]()


def get_puzzle_names() -> List[str]:
    """Get list of registered puzzle names, ordered by day and part."""
    ordered = sorted(_PUZZLES.values(), key=lambda cls: (cls.day, cls.part))
    return [cls.name for cls in ordered]


def get_puzzle_info() -> List[Dict[str, str]]:
    """
    Get name and description for all registered puzzles.

    Returns:
        List of dicts with 'name' and 'description' keys
    """
    return [
        {"name": name, "description": _PUZZLES[name].description}
        for name in get_puzzle_names()
    ]


def find_puzzle_name(day: int, part: int) -> Optional[str]:
    """
    Look up the registered puzzle for a day and part.

    Returns:
        Puzzle name, or None if that day/part has no solver
    """
    for cls in _PUZZLES.values():
        if cls.day == day and cls.part == part:
            return cls.name
    return None


def get_day_puzzle_names(day: int) -> List[str]:
    """Get all registered puzzle names for one day, ordered by part."""
    return [name for name in get_puzzle_names() if _PUZZLES[name].day == day]


def get_default_puzzle_name() -> str:
    """
    Get the default puzzle name.

    Returns:
        Default puzzle name ("day01-part1" if available, else first registered)
    """
    if "day01-part1" in _PUZZLES:
        return "day01-part1"
    names = get_puzzle_names()
    if names:
        return names[0]
    return ""
