"""
Runner Module - Loads puzzle input and times solver execution.
"""

import logging
import time
from pathlib import Path
from typing import Union

from .answer import Answer, AnswerMetrics
from .base import PuzzleSolver, split_lines
from .errors import InputFileError

logger = logging.getLogger(__name__)


def default_input_path(input_dir: Union[str, Path], day: int) -> Path:
    """
    Get the conventional input file for a day.

    Args:
        input_dir: Directory holding puzzle inputs
        day: Puzzle day number

    Returns:
        Path like inputs/day02.txt
    """
    return Path(input_dir) / f"day{day:02d}.txt"


def load_input(path: Union[str, Path]) -> str:
    """
    Read a puzzle input file as UTF-8 text.

    Args:
        path: Input file location

    Returns:
        File contents

    Raises:
        InputFileError: If the file is missing or cannot be read
    """
    path = Path(path)
    if not path.is_file():
        raise InputFileError(path, "file not found")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()
    except (IOError, UnicodeDecodeError) as e:
        raise InputFileError(path, str(e)) from e

    logger.debug(f"Loaded {len(text)} characters from {path}")
    return text


def run_puzzle(solver: PuzzleSolver, text: str) -> Answer:
    """
    Run a solver on input text and collect metrics.

    Args:
        solver: Puzzle solver instance
        text: Raw puzzle input

    Returns:
        Answer with value and timing

    Raises:
        PuzzleError: Propagated unchanged from the solver
    """
    start_time = time.perf_counter()
    value = solver.process(text)
    elapsed_ms = (time.perf_counter() - start_time) * 1000

    logger.info(f"{solver.name}: {value} ({elapsed_ms:.2f}ms)")

    return Answer(
        value=value,
        metrics=AnswerMetrics(
            computation_time_ms=elapsed_ms,
            lines_processed=len(split_lines(text)),
            puzzle_name=solver.name,
        ),
    )
