"""
Matrix Puzzle Generation Module

This module implements procedural generation of Raven-style 3x3 matrix puzzles
from a catalogue of authored templates.

Architecture:
- shape_factory: ShapeFactory drawing unspecified shape attributes from an injected RNG
- templates: TemplateId catalogue, builders, and the per-level slot table
- puzzle_generator: MatrixPuzzleGenerator selecting, shuffling and locating answers

Key Features:
- Deterministic template selection with index wraparound
- Content reuse: higher levels delegate slots to lower-level templates
- Seedable randomness for reproducible puzzles
"""

from .shape_factory import ShapeFactory
from .templates import LEVEL_TEMPLATES, TEMPLATE_BUILDERS, TemplateId
from .puzzle_generator import (
    MatrixPuzzleGenerator,
    generate_puzzle,
    locate_answer,
    shuffle_options,
)


__all__ = [
    "ShapeFactory",
    "LEVEL_TEMPLATES",
    "TEMPLATE_BUILDERS",
    "TemplateId",
    "MatrixPuzzleGenerator",
    "generate_puzzle",
    "locate_answer",
    "shuffle_options",
]
