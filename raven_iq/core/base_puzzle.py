"""
Minimal base puzzle interface and the 3x3 matrix puzzle.

This module provides the essential interface that all puzzle types must implement,
the concrete matrix puzzle presented to the player, and the per-question result
handed to the session orchestrator.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .shapes import Pattern, patterns_to_dicts

MATRIX_SIZE = 3
MISSING_CELL_INDEX = MATRIX_SIZE * MATRIX_SIZE - 1


@dataclass
class BasePuzzle(ABC):
    """
    Base class for all puzzle types.

    Provides the minimal interface needed for presentation and scoring.
    """

    puzzle_id: str
    size: Tuple[int, int]

    @abstractmethod
    def get_size(self) -> Tuple[int, int]:
        """Return puzzle dimensions."""
        pass

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Convert puzzle to dictionary for serialization."""
        pass


class MatrixPuzzle(BasePuzzle):
    """
    Raven-style matrix puzzle: a 3x3 grid of patterns with one blank cell.

    Attributes:
        puzzle_id: Identifier derived from level and puzzle index
        size: Grid dimensions, always (3, 3)
        matrix: Rows of patterns; the blank cell is None
        options: Candidate answers after shuffling
        correct_answer_index: Position of the ground truth in options
        level: Difficulty level the puzzle was generated for
        puzzle_index: Slot index within the level
        template_id: Name of the template that produced the puzzle
    """

    def __init__(
        self,
        matrix: List[List[Optional[Pattern]]],
        options: List[Pattern],
        correct_answer_index: int,
        level: int = 1,
        puzzle_index: int = 0,
        template_id: str = "",
    ):
        """
        Initialize and validate a matrix puzzle.

        Raises:
            ValueError: If the matrix is not 3x3, does not have exactly one
                blank cell, has fewer than two options, or the answer index
                is out of range
        """
        super().__init__(
            f"level{level}_{puzzle_index:03d}", (MATRIX_SIZE, MATRIX_SIZE)
        )
        self.matrix = [list(row) for row in matrix]
        self.options = list(options)
        self.correct_answer_index = correct_answer_index
        self.level = level
        self.puzzle_index = puzzle_index
        self.template_id = template_id
        self._validate()

    def _validate(self):
        if len(self.matrix) != MATRIX_SIZE or any(
            len(row) != MATRIX_SIZE for row in self.matrix
        ):
            raise ValueError(f"Puzzle {self.puzzle_id} matrix must be 3x3")

        blank_cells = sum(1 for cell in self.cells() if cell is None)
        if blank_cells != 1:
            raise ValueError(
                f"Puzzle {self.puzzle_id} must have exactly one blank cell, found {blank_cells}"
            )

        if len(self.options) < 2:
            raise ValueError(f"Puzzle {self.puzzle_id} needs at least two options")

        if not 0 <= self.correct_answer_index < len(self.options):
            raise ValueError(
                f"Puzzle {self.puzzle_id} answer index {self.correct_answer_index} "
                f"out of range for {len(self.options)} options"
            )

    def get_size(self) -> Tuple[int, int]:
        return self.size

    def cells(self) -> List[Optional[Pattern]]:
        """Matrix cells in row-major order."""
        return [cell for row in self.matrix for cell in row]

    def missing_cell_index(self) -> int:
        """Row-major index of the blank cell (8 for every authored template)."""
        return self.cells().index(None)

    def get_correct_option(self) -> Pattern:
        return self.options[self.correct_answer_index]

    def is_correct(self, option_index: int) -> bool:
        return option_index == self.correct_answer_index

    def to_dict(self) -> Dict[str, Any]:
        return {
            "puzzle_id": self.puzzle_id,
            "level": self.level,
            "puzzle_index": self.puzzle_index,
            "template_id": self.template_id,
            "matrix": [
                [cell.to_dict() if cell is not None else None for cell in row]
                for row in self.matrix
            ],
            "options": patterns_to_dicts(self.options),
            "correct_answer_index": self.correct_answer_index,
        }


@dataclass(frozen=True)
class QuestionResult:
    """
    Outcome of one answered puzzle.

    Attributes:
        level: Level the question belonged to
        question_index: Puzzle slot index within the level
        correct: Whether the chosen option was the ground truth
        time_spent_seconds: Whole seconds between display and answer
        iq: Per-question IQ value
    """

    level: int
    question_index: int
    correct: bool
    time_spent_seconds: int
    iq: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "level": self.level,
            "question_index": self.question_index,
            "correct": self.correct,
            "time_spent_seconds": self.time_spent_seconds,
            "iq": self.iq,
        }
