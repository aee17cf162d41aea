"""
Advent of Code 2023 - Entry Point

Runs puzzle solvers from the command line, or launches the Control UI
window with --gui.

Example:
    python main.py 1                        # All parts of day 1, inputs/day01.txt
    python main.py 2 --part 2 -i my.txt     # Day 2 part 2 on a custom file
    python main.py --list                   # Show available puzzles
    python main.py --gui
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import List, Optional

from src.puzzles import (
    PuzzleError,
    create_puzzle,
    default_input_path,
    find_puzzle_name,
    get_day_puzzle_names,
    get_default_puzzle_name,
    get_puzzle_info,
    load_input,
    run_puzzle,
)
from src.settings import get_input_dir, load_settings, save_settings


logger = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    """Configure root logging; answers go to stdout, logs to stderr."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    logging.getLogger().setLevel(level)


class Application:
    """
    GUI application controller.

    Manages the lifecycle of the control window and puzzle worker,
    connecting signals between them.
    """

    def __init__(self, settings: dict):
        """
        Initialize the application.

        Args:
            settings: Loaded user settings (updated and saved on change)
        """
        self.settings = settings
        self.window = None
        self.worker = None

    def setup(self):
        """Set up the UI and connect signals."""
        from src.control_ui import ControlWindow

        self.window = ControlWindow()

        self.window.run_requested.connect(self._on_run)
        self.window.shutdown_requested.connect(self._on_shutdown)
        self.window.puzzle_changed.connect(self._on_puzzle_changed)
        self.window.input_changed.connect(self._on_input_changed)

        saved_puzzle = self.settings.get("puzzle_name") or get_default_puzzle_name()
        if self.window.select_puzzle(saved_puzzle):
            logger.debug(f"Restored puzzle from settings: {saved_puzzle}")
        else:
            logger.debug(f"Saved puzzle '{saved_puzzle}' not found, using default")
        self._fill_default_input()

    def _fill_default_input(self):
        """Show the conventional input file for the selected puzzle."""
        puzzle = create_puzzle(self.window.current_puzzle())
        path = default_input_path(get_input_dir(self.settings), puzzle.day)
        self.window.set_input_path(str(path))

    def _on_run(self):
        """Handle Run button click."""
        from src.puzzle_worker import PuzzleWorker

        if self.worker and self.worker.isRunning():
            logger.warning("Worker already running")
            return

        self.worker = PuzzleWorker(self.window.current_puzzle(), Path(self.window.input_path()))
        self.worker.status_changed.connect(self.window.set_status)
        self.worker.answer_ready.connect(self.window.set_answer)
        self.worker.error_occurred.connect(self._on_error)
        self.worker.finished.connect(lambda: self.window.set_running(False))

        self.window.clear_answer()
        self.window.set_running(True)
        self.worker.start()

    def _on_shutdown(self):
        """Handle window close."""
        logger.info("Shutdown requested")
        if self.worker and self.worker.isRunning():
            self.worker.wait(2000)

    def _on_error(self, error_msg: str):
        """Handle worker error."""
        self.window.set_status(f"Error: {error_msg.splitlines()[0]}")

    def _on_puzzle_changed(self, puzzle_name: str):
        """Handle puzzle selection change from UI."""
        logger.info(f"Puzzle changed to: {puzzle_name}")
        self.settings["puzzle_name"] = puzzle_name
        save_settings(self.settings)
        self._fill_default_input()

    def _on_input_changed(self, path: str):
        """Remember the directory of a chosen input file."""
        if path:
            self.settings["input_dir"] = str(Path(path).parent)
            save_settings(self.settings)

    def run(self) -> int:
        """
        Show the window.

        Returns:
            Exit code
        """
        self.window.show()
        return 0


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Advent of Code 2023 - Puzzle solvers"
    )
    parser.add_argument(
        "day",
        type=int,
        nargs="?",
        help="Puzzle day to solve"
    )
    parser.add_argument(
        "--part", "-p",
        type=int,
        choices=(1, 2),
        help="Puzzle part (default: all parts of the day)"
    )
    parser.add_argument(
        "--input", "-i",
        help="Input file (default: <input_dir>/dayNN.txt)"
    )
    parser.add_argument(
        "--list", "-l",
        action="store_true",
        help="List available puzzles and exit"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--gui",
        action="store_true",
        help="Open the control window"
    )
    args = parser.parse_args(argv)
    if args.day is None and not (args.list or args.gui):
        parser.error("a day is required unless --list or --gui is given")
    return args


def select_puzzles(day: int, part: Optional[int]) -> List[str]:
    """
    Resolve puzzle names for a day and optional part.

    Returns:
        Registered puzzle names (empty if the day/part has no solver)
    """
    if part is None:
        return get_day_puzzle_names(day)
    name = find_puzzle_name(day, part)
    return [name] if name else []


def run_cli(args, settings: dict) -> int:
    """
    Solve the requested puzzles and print answers.

    Returns:
        Exit code (0 on success, 1 on a puzzle failure)
    """
    if args.list:
        for info in get_puzzle_info():
            print(f"{info['name']:<14} {info['description']}")
        return 0

    names = select_puzzles(args.day, args.part)
    if not names:
        logger.error(f"No solver for day {args.day}" + (f" part {args.part}" if args.part else ""))
        return 1

    path = Path(args.input) if args.input else default_input_path(get_input_dir(settings), args.day)

    try:
        text = load_input(path)
        for name in names:
            answer = run_puzzle(create_puzzle(name), text)
            if len(names) == 1:
                print(answer.value)
            else:
                print(f"{name}: {answer.value}")
    except PuzzleError as e:
        logger.error(str(e))
        return 1

    return 0


def run_gui(settings: dict) -> int:
    """Launch the Qt control window."""
    from PyQt5.QtWidgets import QApplication

    app = QApplication(sys.argv)

    application = Application(settings)
    application.setup()
    application.run()

    return app.exec_()


def main(argv: Optional[List[str]] = None) -> int:
    """Initialize and run the puzzle solvers."""
    args = parse_args(argv)
    configure_logging(args.debug)

    settings = load_settings()
    if settings["debug_enabled"] and not args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.gui:
        return run_gui(settings)
    return run_cli(args, settings)


if __name__ == "__main__":
    sys.exit(main())
