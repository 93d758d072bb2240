"""
Difficulty levels and their scoring tables.

Levels are integers 1..6, strictly ordered by intended difficulty. Each level
has a fixed base IQ (awarded for a correct answer) and a plausible IQ range
whose lower bound floors the penalty for an incorrect answer.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .exceptions import InvalidLevelError
from ..utils.config_loader import get_config

logger = logging.getLogger(__name__)

LEVELS: Tuple[int, ...] = (1, 2, 3, 4, 5, 6)
FALLBACK_LEVEL = 1

LEVEL_BASE_IQ: Dict[int, int] = {
    1: 85,
    2: 95,
    3: 105,
    4: 115,
    5: 125,
    6: 135,
}


@dataclass(frozen=True)
class IQRange:
    min: int
    max: int


LEVEL_IQ_RANGE: Dict[int, IQRange] = {
    1: IQRange(70, 100),
    2: IQRange(80, 110),
    3: IQRange(90, 120),
    4: IQRange(100, 130),
    5: IQRange(110, 140),
    6: IQRange(120, 150),
}


@dataclass(frozen=True)
class LevelInfo:
    """Display metadata for a level."""

    level: int
    title: str
    description: str


LEVEL_INFO: Dict[int, LevelInfo] = {
    1: LevelInfo(1, "Beginner", "Simple patterns with basic transformations"),
    2: LevelInfo(2, "Intermediate", "Multiple pattern rules and transformations"),
    3: LevelInfo(3, "Advanced", "Complex patterns with multiple variables"),
    4: LevelInfo(
        4, "Hell", "Multi-dimensional transformations with recursive patterns"
    ),
    5: LevelInfo(
        5, "Celestial", "Abstract mathematical relationships across dimensions"
    ),
    6: LevelInfo(6, "AI", "Hyper-complex multi-variable recursive transformations"),
}


def is_valid_level(level) -> bool:
    # bool is an int subclass but never a level
    return isinstance(level, int) and not isinstance(level, bool) and level in LEVELS


def resolve_level(level, strict: Optional[bool] = None) -> int:
    """
    Map a requested level onto a supported one.

    Unknown levels fall back to level 1 with a warning, unless strict
    validation is enabled (argument or STRICT_LEVEL_VALIDATION config), in
    which case InvalidLevelError is raised.

    Args:
        level: Requested difficulty level
        strict: Override for the configured validation policy

    Returns:
        A level in 1..6
    """
    if is_valid_level(level):
        return level

    if strict is None:
        strict = get_config().get_bool("STRICT_LEVEL_VALIDATION", False)

    if strict:
        raise InvalidLevelError(level)

    logger.warning(f"Unknown level {level!r}, falling back to level {FALLBACK_LEVEL}")
    return FALLBACK_LEVEL
