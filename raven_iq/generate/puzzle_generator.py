"""
Matrix Puzzle Generator

This module turns the authored template catalogue into playable puzzles: it
selects the template for a (level, puzzle index) pair, instantiates it with
randomized shape attributes, shuffles the options and reports where the
ground truth landed.

Architecture:
- Template selection: LEVEL_TEMPLATES[level][puzzle_index % len(...)], with
  delegated slots resolved recursively to a concrete TemplateId
- Instantiation: TEMPLATE_BUILDERS dispatch with a shared ShapeFactory
- Shuffling: backward Fisher-Yates over ground truth + distractors
- Answer location: first structural match of the ground truth

All randomness flows through one injected random.Random, so a seed makes the
generator fully reproducible.
"""

import logging
import random
from typing import List, Optional, Sequence

from ..core.base_puzzle import MatrixPuzzle
from ..core.levels import resolve_level
from ..core.shapes import Pattern
from ..utils.config_loader import get_config
from .shape_factory import ShapeFactory
from .templates import LEVEL_TEMPLATES, TEMPLATE_BUILDERS, Delegate, TemplateId

logger = logging.getLogger(__name__)


def shuffle_options(options: Sequence[Pattern], rng: random.Random) -> List[Pattern]:
    """
    Uniformly permute options with a backward Fisher-Yates scan.

    For i from the last index down to 1, swap element i with a uniformly
    chosen index in [0, i]. The input sequence is left untouched.
    """
    shuffled = list(options)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def locate_answer(options: Sequence[Pattern], answer: Pattern) -> int:
    """
    Index of the first option structurally equal to the answer.

    Duplicate options are tolerated; the first match wins.

    Raises:
        ValueError: If no option matches
    """
    for index, option in enumerate(options):
        if option.matches(answer):
            return index
    raise ValueError("Ground truth is missing from the option set")


class MatrixPuzzleGenerator:
    """
    Generates Raven-style matrix puzzles for levels 1-6.

    Unknown levels fall back to level 1 unless strict validation is enabled,
    in which case InvalidLevelError is raised.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        strict_levels: Optional[bool] = None,
    ):
        """
        Initialize the generator.

        Args:
            seed: Seed for a private random.Random (ignored when rng is given)
            rng: Random source shared by option shuffling and shape filling
            strict_levels: Reject unknown levels instead of falling back;
                defaults to STRICT_LEVEL_VALIDATION from config
        """
        self.config = get_config()
        session_config = self.config.get_session_config()

        if rng is None:
            if seed is None:
                seed = session_config["random_seed"]
            rng = random.Random(seed)
        self.rng = rng
        self.factory = ShapeFactory(self.rng)

        if strict_levels is None:
            strict_levels = session_config["strict_level_validation"]
        self.strict_levels = strict_levels
        self.puzzles_per_level = session_config["puzzles_per_level"]

        logger.debug(
            f"MatrixPuzzleGenerator initialized (seed={seed}, strict_levels={strict_levels})"
        )

    def template_count(self, level: int) -> int:
        """Number of template slots authored for a level."""
        return len(LEVEL_TEMPLATES[resolve_level(level, self.strict_levels)])

    def resolve_template(self, level: int, puzzle_index: int) -> TemplateId:
        """
        Follow the level's slot table (and any delegations) to a template.

        Indexes wrap around the level's slot list, so every non-negative
        index selects some template.
        """
        level = resolve_level(level, self.strict_levels)
        slot = LEVEL_TEMPLATES[level][puzzle_index % len(LEVEL_TEMPLATES[level])]
        while isinstance(slot, Delegate):
            slots = LEVEL_TEMPLATES[slot.level]
            slot = slots[slot.puzzle_index % len(slots)]
        return slot

    def generate(self, level: int, puzzle_index: int) -> MatrixPuzzle:
        """
        Build the puzzle for a (level, puzzle index) pair.

        Args:
            level: Difficulty level 1-6
            puzzle_index: Slot index within the level, wraps around

        Returns:
            MatrixPuzzle with shuffled options and the resolved answer index
        """
        level = resolve_level(level, self.strict_levels)
        template_id = self.resolve_template(level, puzzle_index)

        instance = TEMPLATE_BUILDERS[template_id](self.factory)
        options = shuffle_options(instance.options(), self.rng)
        correct_answer_index = locate_answer(options, instance.answer)

        logger.debug(
            f"Generated level {level} puzzle {puzzle_index} from {template_id.value}, "
            f"answer at option {correct_answer_index}"
        )

        return MatrixPuzzle(
            matrix=instance.matrix,
            options=options,
            correct_answer_index=correct_answer_index,
            level=level,
            puzzle_index=puzzle_index,
            template_id=template_id.value,
        )

    def generate_level(self, level: int, count: Optional[int] = None) -> List[MatrixPuzzle]:
        """Generate one session's worth of consecutive puzzles for a level."""
        if count is None:
            count = self.puzzles_per_level
        return [self.generate(level, index) for index in range(count)]


def generate_puzzle(
    level: int, puzzle_index: int, rng: Optional[random.Random] = None
) -> MatrixPuzzle:
    """Convenience wrapper building a one-off generator around rng."""
    return MatrixPuzzleGenerator(rng=rng).generate(level, puzzle_index)
