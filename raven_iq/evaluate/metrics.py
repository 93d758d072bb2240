"""
Session metrics for answered matrix puzzles.

This module summarizes a list of QuestionResult objects into accuracy, timing
and IQ statistics, and renders them as a table for export.
"""

import logging
from collections import Counter
from pathlib import Path
from typing import Any, Dict, Sequence, Union

import numpy as np
import pandas as pd

from ..core.base_puzzle import QuestionResult

RESULT_COLUMNS = ["level", "question_index", "correct", "time_spent_seconds", "iq"]


def results_to_dataframe(results: Sequence[QuestionResult]) -> pd.DataFrame:
    """One row per answered question, in answer order."""
    if not results:
        return pd.DataFrame(columns=RESULT_COLUMNS)
    return pd.DataFrame([result.to_dict() for result in results], columns=RESULT_COLUMNS)


class SessionMetrics:
    """
    Computes summary statistics over answered questions.

    Provides accuracy, correct/total counts, time-spent statistics, the mean
    per-question IQ and the per-level question distribution used as weights
    for the overall IQ.
    """

    def __init__(self):
        self.logger = logging.getLogger("SessionMetrics")

    def compute_metrics(self, results: Sequence[QuestionResult]) -> Dict[str, Any]:
        """
        Summarize a sequence of question results.

        Args:
            results: Answered questions in order

        Returns:
            Dict with accuracy, counts, time statistics, mean IQ and the
            level distribution
        """
        if not results:
            self.logger.debug("No results to summarize")
            return self._empty_metrics()

        correct = np.array([result.correct for result in results], dtype=bool)
        times = np.array([result.time_spent_seconds for result in results], dtype=float)
        iqs = np.array([result.iq for result in results], dtype=float)

        correct_count = int(np.sum(correct))
        total_count = len(results)
        accuracy = correct_count / total_count

        self.logger.info(f"Accuracy: {accuracy:.3f} ({correct_count}/{total_count})")

        return {
            "accuracy": accuracy,
            "correct_count": correct_count,
            "total_count": total_count,
            "mean_time_seconds": float(np.mean(times)),
            "std_time_seconds": float(np.std(times)),
            "min_time_seconds": float(np.min(times)),
            "max_time_seconds": float(np.max(times)),
            "total_time_seconds": float(np.sum(times)),
            "mean_question_iq": float(np.mean(iqs)),
            "level_distribution": self.level_distribution(results),
        }

    def level_distribution(self, results: Sequence[QuestionResult]) -> Dict[int, int]:
        """Number of questions answered per level."""
        return dict(Counter(result.level for result in results))

    def export_csv(
        self, results: Sequence[QuestionResult], filepath: Union[str, Path]
    ) -> str:
        """Write results as CSV and return the file path."""
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        results_to_dataframe(results).to_csv(filepath, index=False)
        self.logger.info(f"Exported {len(results)} results to {filepath}")
        return str(filepath)

    def _empty_metrics(self) -> Dict[str, Any]:
        """Return empty metrics dict when nothing was answered."""
        return {
            "accuracy": 0.0,
            "correct_count": 0,
            "total_count": 0,
            "mean_time_seconds": 0.0,
            "std_time_seconds": 0.0,
            "min_time_seconds": 0.0,
            "max_time_seconds": 0.0,
            "total_time_seconds": 0.0,
            "mean_question_iq": 0.0,
            "level_distribution": {},
        }
