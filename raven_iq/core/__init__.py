"""
Core value model for the Raven-IQ matrix exam.

This package contains the shape/pattern model, the puzzle and result types,
and the level tables shared by the generator and the scorer.

Classes:
    Shape, Pattern, Position: Immutable drawing primitives
    BasePuzzle: Abstract base class for all puzzle types
    MatrixPuzzle: 3x3 matrix puzzle with shuffled options
    QuestionResult: Outcome of one answered puzzle
    InvalidLevelError: Raised for unknown levels under strict validation
"""

from .shapes import (
    CENTER,
    Pattern,
    Position,
    Shape,
    ShapeColor,
    ShapeSize,
    ShapeType,
)
from .base_puzzle import BasePuzzle, MatrixPuzzle, QuestionResult
from .exceptions import InvalidLevelError
from .levels import LEVELS, LEVEL_BASE_IQ, LEVEL_IQ_RANGE, LEVEL_INFO, resolve_level

__all__ = [
    'CENTER',
    'Pattern',
    'Position',
    'Shape',
    'ShapeColor',
    'ShapeSize',
    'ShapeType',
    'BasePuzzle',
    'MatrixPuzzle',
    'QuestionResult',
    'InvalidLevelError',
    'LEVELS',
    'LEVEL_BASE_IQ',
    'LEVEL_IQ_RANGE',
    'LEVEL_INFO',
    'resolve_level',
]
