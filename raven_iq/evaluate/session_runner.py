"""
Level session runner for the matrix exam.

This module sequences the puzzles of one level, scores each answer, and on
completion computes the session IQ and forwards records to the progress store:
- One question-counter update per answered puzzle
- High score and best IQ records after the last puzzle
- Level completion once the score reaches the pass ratio
"""

import logging
import math
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from ..core.base_puzzle import MatrixPuzzle, QuestionResult
from ..core.levels import LEVEL_INFO, resolve_level
from ..data.progress_store import ProgressStore
from ..generate.puzzle_generator import MatrixPuzzleGenerator
from ..utils.config_loader import get_config
from .iq_calculator import classify_iq, iq_percentile, overall_iq, question_iq
from .metrics import SessionMetrics

HARD_LEVEL_THRESHOLD = 4

_HARD_LEVEL_MESSAGES = (
    (80, "Extraordinary! You possess exceptional analytical intelligence."),
    (60, "Impressive! Your pattern recognition abilities are remarkable."),
    (40, "Challenging! These puzzles push the limits of human cognition."),
    (0, "These puzzles are designed for the most gifted minds. Keep pushing your limits!"),
)

_STANDARD_LEVEL_MESSAGES = (
    (80, "Excellent! Outstanding pattern recognition."),
    (60, "Good work! You're developing strong analytical skills."),
    (40, "Not bad! Keep practicing to improve your pattern recognition."),
    (0, "Keep trying! Pattern recognition improves with practice."),
)


def score_message(level: int, score: int, total: int) -> str:
    """Encouragement text for a finished level, harsher ladder from level 4 up."""
    percentage = score / total * 100 if total > 0 else 0
    ladder = (
        _HARD_LEVEL_MESSAGES if level >= HARD_LEVEL_THRESHOLD else _STANDARD_LEVEL_MESSAGES
    )
    for threshold, message in ladder:
        if percentage >= threshold:
            return message
    return ladder[-1][1]


@dataclass(frozen=True)
class SessionSummary:
    """Final outcome of a level session."""

    level: int
    title: str
    score: int
    total: int
    iq: int
    classification: str
    percentile: int
    new_high_score: bool
    new_best_iq: bool
    level_completed: bool
    message: str
    metrics: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "level": self.level,
            "title": self.title,
            "score": self.score,
            "total": self.total,
            "iq": self.iq,
            "classification": self.classification,
            "percentile": self.percentile,
            "new_high_score": self.new_high_score,
            "new_best_iq": self.new_best_iq,
            "level_completed": self.level_completed,
            "message": self.message,
            "metrics": self.metrics,
        }


class LevelSession:
    """
    Plays through the puzzles of a single level.

    Puzzles are generated on demand for consecutive indexes. Each answer is
    scored and counted in the progress store once; finish() computes the
    session IQ and updates the player's records exactly once.
    """

    def __init__(
        self,
        level: int,
        generator: Optional[MatrixPuzzleGenerator] = None,
        store: Optional[ProgressStore] = None,
        puzzles_per_level: Optional[int] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize a level session.

        Args:
            level: Difficulty level to play
            generator: Puzzle source, a default generator if omitted
            store: Progress store receiving the records, a default store if omitted
            puzzles_per_level: Number of puzzles, PUZZLES_PER_LEVEL by default
            clock: Monotonic time source in seconds
        """
        self.logger = logging.getLogger("LevelSession")
        self.config = get_config()
        session_config = self.config.get_session_config()

        self.generator = generator or MatrixPuzzleGenerator()
        self.level = resolve_level(level, self.generator.strict_levels)
        self.store = store or ProgressStore()
        if puzzles_per_level is None:
            puzzles_per_level = session_config["puzzles_per_level"]
        self.total_puzzles = puzzles_per_level
        self.pass_ratio = session_config["level_pass_ratio"]
        self.clock = clock
        self.metrics = SessionMetrics()

        self.results: List[QuestionResult] = []
        self._puzzle: Optional[MatrixPuzzle] = None
        self._started_at = 0.0
        self._summary: Optional[SessionSummary] = None

        self.logger.info(
            f"Started level {self.level} session with {self.total_puzzles} puzzles"
        )

    @property
    def current_index(self) -> int:
        return len(self.results)

    @property
    def score(self) -> int:
        return sum(1 for result in self.results if result.correct)

    def is_complete(self) -> bool:
        return self.current_index >= self.total_puzzles

    def current_puzzle(self) -> MatrixPuzzle:
        """
        Puzzle awaiting an answer; generated and timed on first access.

        Raises:
            RuntimeError: If every puzzle has been answered
        """
        if self.is_complete():
            raise RuntimeError(f"Level {self.level} session is already complete")
        if self._puzzle is None:
            self._puzzle = self.generator.generate(self.level, self.current_index)
            self._started_at = self.clock()
        return self._puzzle

    def submit_answer(
        self, option_index: int, time_spent_seconds: Optional[int] = None
    ) -> QuestionResult:
        """
        Score the chosen option for the current puzzle and advance.

        Args:
            option_index: Index into the current puzzle's options
            time_spent_seconds: Override for the measured answer time

        Returns:
            QuestionResult for the answered puzzle

        Raises:
            ValueError: If option_index is out of range
            RuntimeError: If the session is already complete
        """
        puzzle = self.current_puzzle()
        if not 0 <= option_index < len(puzzle.options):
            raise ValueError(
                f"Option {option_index} out of range for {len(puzzle.options)} options"
            )

        if time_spent_seconds is None:
            time_spent_seconds = round(self.clock() - self._started_at)

        correct = puzzle.is_correct(option_index)
        result = QuestionResult(
            level=self.level,
            question_index=puzzle.puzzle_index,
            correct=correct,
            time_spent_seconds=time_spent_seconds,
            iq=question_iq(self.level, correct),
        )

        self.store.update_question_stats(correct)
        self.results.append(result)
        self._puzzle = None

        self.logger.debug(
            f"Level {self.level} puzzle {result.question_index}: "
            f"{'correct' if correct else 'incorrect'} in {time_spent_seconds}s"
        )
        return result

    def finish(self) -> SessionSummary:
        """
        Compute the session IQ and persist the player's records.

        Returns:
            SessionSummary; repeated calls return the first summary without
            touching the store again

        Raises:
            RuntimeError: If puzzles remain unanswered
        """
        if self._summary is not None:
            return self._summary
        if not self.is_complete():
            raise RuntimeError(
                f"Level {self.level} session has {self.total_puzzles - self.current_index} "
                f"unanswered puzzles"
            )

        score = self.score
        total = self.total_puzzles
        iq = overall_iq(score, total, {self.level: total})

        new_high_score = self.store.update_high_score(score)
        new_best_iq = self.store.update_best_iq(iq)

        level_completed = score >= math.ceil(total * self.pass_ratio)
        if level_completed:
            self.store.mark_level_completed(self.level)

        self._summary = SessionSummary(
            level=self.level,
            title=LEVEL_INFO[self.level].title,
            score=score,
            total=total,
            iq=iq,
            classification=classify_iq(iq),
            percentile=iq_percentile(iq),
            new_high_score=new_high_score,
            new_best_iq=new_best_iq,
            level_completed=level_completed,
            message=score_message(self.level, score, total),
            metrics=self.metrics.compute_metrics(self.results),
        )

        self.logger.info(
            f"Level {self.level} finished: {score}/{total}, IQ {iq} ({self._summary.classification})"
        )
        return self._summary
