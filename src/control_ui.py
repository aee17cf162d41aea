"""
Control UI Module for the AoC 2023 solvers

Provides a PyQt5-based control window for picking a puzzle and an input
file, running the solver and showing its answer.
"""

from PyQt5.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QLabel, QPushButton, QHBoxLayout,
    QComboBox, QLineEdit, QFileDialog
)
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QFont

from src.puzzles import get_puzzle_info


BUTTON_STYLE = """
    QPushButton {
        background-color: %s;
        color: white;
        border: none;
        border-radius: 5px;
        padding: 10px;
    }
    QPushButton:disabled {
        background-color: #cccccc;
        color: #666666;
    }
"""


class ControlWindow(QMainWindow):
    """
    Main control window for the puzzle solvers.

    Lets the user choose a puzzle and input file, and displays the
    answer and timing reported by the worker thread.
    """

    # Signals for worker thread communication
    run_requested = pyqtSignal()
    shutdown_requested = pyqtSignal()
    puzzle_changed = pyqtSignal(str)  # Emits puzzle name when changed
    input_changed = pyqtSignal(str)   # Emits input file path when changed

    def __init__(self):
        super().__init__()
        self._is_running = False
        self._init_ui()

    def _init_ui(self):
        """Initialize the user interface components."""
        self.setWindowTitle("Advent of Code 2023")
        self.setFixedSize(420, 300)

        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        layout = QVBoxLayout()
        layout.setSpacing(10)
        layout.setContentsMargins(20, 20, 20, 20)
        central_widget.setLayout(layout)

        # Status label
        self.status_label = QLabel("Status: Idle")
        self.status_label.setAlignment(Qt.AlignCenter)
        status_font = QFont()
        status_font.setPointSize(10)
        status_font.setBold(True)
        self.status_label.setFont(status_font)
        layout.addWidget(self.status_label)

        # Puzzle selector
        puzzle_layout = QHBoxLayout()
        puzzle_layout.addWidget(QLabel("Puzzle:"))
        self.puzzle_combo = QComboBox()
        for info in get_puzzle_info():
            self.puzzle_combo.addItem(info["description"], info["name"])
        self.puzzle_combo.currentIndexChanged.connect(self._on_puzzle_changed)
        puzzle_layout.addWidget(self.puzzle_combo, 1)
        layout.addLayout(puzzle_layout)

        # Input file picker
        input_layout = QHBoxLayout()
        input_layout.addWidget(QLabel("Input:"))
        self.input_edit = QLineEdit()
        self.input_edit.editingFinished.connect(
            lambda: self.input_changed.emit(self.input_edit.text())
        )
        input_layout.addWidget(self.input_edit, 1)
        browse_button = QPushButton("...")
        browse_button.setStyleSheet(BUTTON_STYLE % "#607d8b")
        browse_button.clicked.connect(self._on_browse_clicked)
        input_layout.addWidget(browse_button)
        layout.addLayout(input_layout)

        # Run button
        self.run_button = QPushButton("RUN")
        self.run_button.setMinimumHeight(45)
        button_font = QFont()
        button_font.setPointSize(11)
        button_font.setBold(True)
        self.run_button.setFont(button_font)
        self.run_button.setStyleSheet(BUTTON_STYLE % "#4CAF50")
        self.run_button.clicked.connect(self.run_requested.emit)
        layout.addWidget(self.run_button)

        # Result labels
        self.answer_label = QLabel("Answer: --")
        self.answer_label.setTextInteractionFlags(Qt.TextSelectableByMouse)
        answer_font = QFont()
        answer_font.setPointSize(12)
        answer_font.setBold(True)
        self.answer_label.setFont(answer_font)
        layout.addWidget(self.answer_label)

        self.time_label = QLabel("Time:   --")
        layout.addWidget(self.time_label)

        layout.addStretch()

    def _on_browse_clicked(self):
        """Open a file dialog to choose the puzzle input."""
        path, _ = QFileDialog.getOpenFileName(
            self, "Select puzzle input", self.input_edit.text(), "Text files (*.txt);;All files (*)"
        )
        if path:
            self.input_edit.setText(path)
            self.input_changed.emit(path)

    def _on_puzzle_changed(self, index: int):
        """Handle puzzle dropdown selection change."""
        puzzle_name = self.puzzle_combo.itemData(index)
        if puzzle_name:
            self.puzzle_changed.emit(puzzle_name)

    def select_puzzle(self, puzzle_name: str) -> bool:
        """
        Select a puzzle in the dropdown by name.

        Returns:
            True if the puzzle exists in the dropdown
        """
        for i in range(self.puzzle_combo.count()):
            if self.puzzle_combo.itemData(i) == puzzle_name:
                self.puzzle_combo.setCurrentIndex(i)
                return True
        return False

    def current_puzzle(self) -> str:
        """Name of the selected puzzle."""
        return self.puzzle_combo.currentData() or ""

    def set_input_path(self, path: str):
        """Show the input file path without emitting input_changed."""
        self.input_edit.setText(path)

    def input_path(self) -> str:
        """Input file path currently entered."""
        return self.input_edit.text().strip()

    def set_status(self, status: str):
        """
        Update the status label.

        Args:
            status: Status text to display (e.g., "Idle", "Running", "Error: message")
        """
        self.status_label.setText(f"Status: {status}")

        if status.lower().startswith("error"):
            self.status_label.setStyleSheet("color: #d32f2f;")
        elif status.lower() == "done":
            self.status_label.setStyleSheet("color: #4CAF50;")
        else:
            self.status_label.setStyleSheet("color: #333333;")

    def set_answer(self, value: str, elapsed_ms: float):
        """
        Show a solver answer.

        Args:
            value: Answer string
            elapsed_ms: Computation time in milliseconds
        """
        self.answer_label.setText(f"Answer: {value}")
        self.time_label.setText(f"Time:   {elapsed_ms:.2f} ms")

    def clear_answer(self):
        """Reset result labels before a new run."""
        self.answer_label.setText("Answer: --")
        self.time_label.setText("Time:   --")

    def set_running(self, is_running: bool):
        """
        Toggle controls while a worker is active.

        Args:
            is_running: True if a puzzle is being solved
        """
        self._is_running = is_running
        self.run_button.setEnabled(not is_running)
        self.puzzle_combo.setEnabled(not is_running)
        self.input_edit.setEnabled(not is_running)

    def closeEvent(self, event):
        """
        Handle window close event.

        Emits shutdown_requested signal before closing to allow
        graceful cleanup of worker threads.

        Args:
            event: QCloseEvent object
        """
        self.shutdown_requested.emit()
        event.accept()
