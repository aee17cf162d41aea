"""
Answer Module - Result of running a puzzle solver.
"""

from dataclasses import dataclass, field


@dataclass
class AnswerMetrics:
    """
    Statistics for one solver run.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        lines_processed: Number of input lines handed to the solver
        puzzle_name: Name of the solver that produced the answer
    """
    computation_time_ms: float = 0.0
    lines_processed: int = 0
    puzzle_name: str = ""


@dataclass
class Answer:
    """
    Result of a puzzle computation.

    Attributes:
        value: Decimal answer string returned by process()
        metrics: Run statistics
    """
    value: str
    metrics: AnswerMetrics = field(default_factory=AnswerMetrics)

    def __str__(self) -> str:
        return self.value
