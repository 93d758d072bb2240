"""
Random shape construction with an injected random source.

Attributes a template does not pin down are drawn uniformly from the finite
type/size/color enumerations. Rotation defaults to 0 and position to the cell
center. All draws go through one random.Random so a seed reproduces a puzzle
exactly.
"""

import random
from typing import Optional

from ..core.shapes import (
    CENTER,
    SHAPE_COLORS,
    SHAPE_SIZES,
    SHAPE_TYPES,
    Pattern,
    Shape,
)


class ShapeFactory:
    """Builds shapes and filler patterns from a seedable random source."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def random_shape(self, **overrides) -> Shape:
        """
        Create a shape, drawing only the attributes not given as overrides.

        Draw order is type, size, color, so the same seed and the same
        overrides always yield the same shape.
        """
        shape_type = overrides.pop("type", None) or self.rng.choice(SHAPE_TYPES)
        size = overrides.pop("size", None) or self.rng.choice(SHAPE_SIZES)
        color = overrides.pop("color", None) or self.rng.choice(SHAPE_COLORS)
        rotation = overrides.pop("rotation", 0)
        position = overrides.pop("position", CENTER)
        if overrides:
            raise TypeError(f"Unknown shape attributes: {sorted(overrides)}")
        return Shape(shape_type, size, color, rotation, position)

    def random_pattern(self, shape_count: int = 1) -> Pattern:
        """Pattern of fully random, centered, unrotated shapes."""
        return Pattern(self.random_shape() for _ in range(shape_count))
