"""
Scoring and session orchestration for the matrix exam.

This module contains the IQ formulas, session metrics, and the level session
runner that ties puzzle generation, scoring and progress storage together.
"""

from .iq_calculator import (
    accuracy_adjustment,
    classify_iq,
    erf_approx,
    iq_percentile,
    overall_iq,
    question_iq,
)
from .metrics import SessionMetrics, results_to_dataframe
from .session_runner import LevelSession, SessionSummary, score_message

__all__ = [
    "accuracy_adjustment",
    "classify_iq",
    "erf_approx",
    "iq_percentile",
    "overall_iq",
    "question_iq",
    "SessionMetrics",
    "results_to_dataframe",
    "LevelSession",
    "SessionSummary",
    "score_message",
]
