"""
Puzzle Worker Module for the AoC 2023 solvers

Provides a background QThread worker that loads an input file and runs
one puzzle, so the control window stays responsive on large inputs.
Communicates with the UI via Qt signals for thread-safe status updates.
"""

import logging
from pathlib import Path
from typing import Optional

from PyQt5.QtCore import QThread, pyqtSignal

from src.puzzles import PuzzleError, create_puzzle, load_input, run_puzzle


# Configure module logger
logger = logging.getLogger(__name__)


class PuzzleWorker(QThread):
    """
    Background worker thread for a single puzzle run.

    Signals:
        status_changed(str): Emitted when worker status changes
        answer_ready(str, float): Emitted with the answer and time in ms
        error_occurred(str): Emitted when loading or solving fails

    Example:
        worker = PuzzleWorker("day02-part1", Path("inputs/day02.txt"))
        worker.answer_ready.connect(ui.set_answer)
        worker.start()
    """

    # Signals for UI updates (thread-safe)
    status_changed = pyqtSignal(str)
    answer_ready = pyqtSignal(str, float)
    error_occurred = pyqtSignal(str)

    def __init__(self, puzzle_name: str, input_path: Path):
        """
        Initialize the puzzle worker.

        Args:
            puzzle_name: Registered puzzle to run
            input_path: Puzzle input file
        """
        super().__init__()
        self.puzzle_name = puzzle_name
        self.input_path = Path(input_path)
        self.last_error: Optional[str] = None

    def run(self):
        """Load the input and solve. Called when thread starts."""
        logger.info(f"Running {self.puzzle_name} on {self.input_path}")
        self.status_changed.emit("Running")

        try:
            solver = create_puzzle(self.puzzle_name)
            answer = run_puzzle(solver, load_input(self.input_path))
        except (PuzzleError, ValueError) as e:
            logger.error(f"{self.puzzle_name} failed: {e}")
            self.last_error = str(e)
            self.error_occurred.emit(str(e))
            return

        self.last_error = None
        self.answer_ready.emit(answer.value, answer.metrics.computation_time_ms)
        self.status_changed.emit("Done")
