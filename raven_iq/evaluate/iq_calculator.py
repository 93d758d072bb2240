"""
Synthetic IQ scoring for matrix puzzle answers.

Per-question IQ comes from the level's base IQ, with a flat 20-point penalty
floored at the level's range minimum for an incorrect answer. A session IQ is
the question-weighted average of level base IQs adjusted by an accuracy tier
and clamped to [60, 160]. Percentiles use the Abramowitz-Stegun error
function approximation so results are reproducible across platforms.
"""

import logging
import math
from typing import Mapping, Optional

from ..core.levels import LEVEL_BASE_IQ, LEVEL_IQ_RANGE, resolve_level

logger = logging.getLogger(__name__)

NEUTRAL_IQ = 100
MIN_IQ = 60
MAX_IQ = 160
INCORRECT_PENALTY = 20

IQ_MEAN = 100
IQ_STD_DEV = 15

# (lower bound, adjustment); bounds are inclusive
ACCURACY_TIERS = (
    (0.9, 15),
    (0.8, 10),
    (0.7, 5),
    (0.6, 0),
    (0.5, -5),
    (0.4, -10),
)
LOWEST_TIER_ADJUSTMENT = -15

# (lower bound, label); bounds are inclusive
IQ_CLASSIFICATIONS = (
    (145, "Genius"),
    (130, "Very Superior"),
    (120, "Superior"),
    (110, "High Average"),
    (90, "Average"),
    (80, "Low Average"),
    (70, "Borderline"),
)
LOWEST_CLASSIFICATION = "Below Average"

# Abramowitz and Stegun formula 7.1.26
_ERF_A1 = 0.254829592
_ERF_A2 = -0.284496736
_ERF_A3 = 1.421413741
_ERF_A4 = -1.453152027
_ERF_A5 = 1.061405429
_ERF_P = 0.3275911


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def question_iq(level: int, correct: bool, strict: Optional[bool] = None) -> int:
    """
    IQ value for a single answered question.

    Args:
        level: Difficulty level of the question
        correct: Whether the answer was right
        strict: Level validation override (see resolve_level)

    Returns:
        The level's base IQ when correct, otherwise base - 20 floored at the
        level's range minimum
    """
    level = resolve_level(level, strict)
    base_iq = LEVEL_BASE_IQ[level]
    if correct:
        return base_iq
    return max(LEVEL_IQ_RANGE[level].min, base_iq - INCORRECT_PENALTY)


def accuracy_adjustment(accuracy: float) -> int:
    """Step adjustment for an accuracy ratio; each band includes its lower bound."""
    for lower_bound, adjustment in ACCURACY_TIERS:
        if accuracy >= lower_bound:
            return adjustment
    return LOWEST_TIER_ADJUSTMENT


def overall_iq(
    correct_count: int, total_count: int, level_distribution: Mapping[int, int]
) -> int:
    """
    Session IQ from aggregate results.

    Args:
        correct_count: Number of correct answers
        total_count: Number of questions answered
        level_distribution: Questions answered per level, used as weights

    Returns:
        Weighted base IQ plus the accuracy adjustment, rounded and clamped to
        [60, 160]; 100 when nothing was answered
    """
    if total_count <= 0:
        return NEUTRAL_IQ

    accuracy = correct_count / total_count

    weighted_sum = 0
    total_weight = 0
    for level, count in level_distribution.items():
        if level not in LEVEL_BASE_IQ or count <= 0:
            logger.warning(f"Ignoring level distribution entry {level!r}: {count!r}")
            continue
        weighted_sum += LEVEL_BASE_IQ[level] * count
        total_weight += count

    average_base_iq = weighted_sum / total_weight if total_weight > 0 else NEUTRAL_IQ
    adjusted_iq = average_base_iq + accuracy_adjustment(accuracy)

    return max(MIN_IQ, min(MAX_IQ, _round_half_up(adjusted_iq)))


def classify_iq(iq: float) -> str:
    """
    Descriptive label for an IQ score.

    Note the wide "Average" band: everything from 90 up to 109 is Average.
    """
    for lower_bound, label in IQ_CLASSIFICATIONS:
        if iq >= lower_bound:
            return label
    return LOWEST_CLASSIFICATION


def erf_approx(x: float) -> float:
    """Error function via Abramowitz-Stegun 7.1.26 (max abs error ~1.5e-7)."""
    sign = 1 if x >= 0 else -1
    x = abs(x)

    t = 1.0 / (1.0 + _ERF_P * x)
    y = 1.0 - (
        ((((_ERF_A5 * t + _ERF_A4) * t) + _ERF_A3) * t + _ERF_A2) * t + _ERF_A1
    ) * t * math.exp(-x * x)

    return sign * y


def iq_percentile(iq: float) -> int:
    """Percentile of an IQ score under N(100, 15), rounded to an integer 0..100."""
    z = (iq - IQ_MEAN) / IQ_STD_DEV
    cumulative = 0.5 * (1 + erf_approx(z / math.sqrt(2)))
    return _round_half_up(cumulative * 100)
