"""
Data structure for the persisted player progress record.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict

from ..core.levels import LEVELS


def default_level_progress() -> Dict[int, bool]:
    return {level: False for level in LEVELS}


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class StoredProgress:
    """
    Player progress kept between sessions.

    Attributes:
        high_score: Best number of correct answers in one level session
        best_iq: Best session IQ achieved
        level_progress: Completion flag per level 1-6
        total_questions_answered: Cumulative questions answered
        correct_answers: Cumulative correct answers
        last_played_at: ISO-8601 timestamp of the last save
    """

    high_score: int = 0
    best_iq: int = 0
    level_progress: Dict[int, bool] = field(default_factory=default_level_progress)
    total_questions_answered: int = 0
    correct_answers: int = 0
    last_played_at: str = field(default_factory=utc_timestamp)
