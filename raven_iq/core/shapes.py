"""
Shape and pattern value model for matrix puzzles.

A Shape is a single geometric primitive; a Pattern is the ordered list of
shapes drawn together in one matrix cell or answer option. Both are immutable:
variations are produced with Shape.with_overrides(), never by mutation.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Iterable, Tuple


class ShapeType(Enum):
    """Geometric primitives available to templates."""

    CIRCLE = "circle"
    SQUARE = "square"
    TRIANGLE = "triangle"
    DIAMOND = "diamond"
    CROSS = "cross"
    STAR = "star"


class ShapeSize(Enum):
    """Relative shape sizes, smallest first."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class ShapeColor(Enum):
    """Fill colors, darkest first."""

    BLACK = "black"
    GRAY = "gray"
    WHITE = "white"


SHAPE_TYPES: Tuple[ShapeType, ...] = tuple(ShapeType)
SHAPE_SIZES: Tuple[ShapeSize, ...] = tuple(ShapeSize)
SHAPE_COLORS: Tuple[ShapeColor, ...] = tuple(ShapeColor)


@dataclass(frozen=True)
class Position:
    """Normalized (x, y) location inside a cell, both in [0, 1]."""

    x: float
    y: float

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y}


CENTER = Position(0.5, 0.5)


@dataclass(frozen=True, eq=False)
class Shape:
    """
    A single geometric primitive.

    Attributes:
        type: Primitive kind (circle, square, ...)
        size: Relative size
        color: Fill color
        rotation: Rotation in degrees
        position: Normalized location inside the cell
    """

    type: ShapeType
    size: ShapeSize
    color: ShapeColor
    rotation: float = 0
    position: Position = CENTER

    def with_overrides(self, **changes) -> "Shape":
        """Return a copy of this shape with the given attributes replaced."""
        return replace(self, **changes)

    def matches(self, other: "Shape") -> bool:
        """Field-by-field structural comparison."""
        if not isinstance(other, Shape):
            return False
        return (
            self.type == other.type
            and self.size == other.size
            and self.color == other.color
            and self.rotation == other.rotation
            and self.position.x == other.position.x
            and self.position.y == other.position.y
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Shape):
            return NotImplemented
        return self.matches(other)

    def __hash__(self) -> int:
        return hash(
            (
                self.type,
                self.size,
                self.color,
                self.rotation,
                self.position.x,
                self.position.y,
            )
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "size": self.size.value,
            "color": self.color.value,
            "rotation": self.rotation,
            "position": self.position.to_dict(),
        }


@dataclass(frozen=True, eq=False)
class Pattern:
    """
    Ordered sequence of shapes rendered as one cell.

    An empty pattern is a valid, visually blank cell. The missing matrix cell
    is represented by None, not by an empty pattern.
    """

    shapes: Tuple[Shape, ...] = ()

    def __post_init__(self):
        # Accept any iterable but always store a tuple
        object.__setattr__(self, "shapes", tuple(self.shapes))

    @classmethod
    def of(cls, *shapes: Shape) -> "Pattern":
        return cls(shapes)

    def matches(self, other: "Pattern") -> bool:
        """
        Order-sensitive structural equality.

        Two patterns match iff they hold the same number of shapes and the
        shapes match pairwise in the same order.
        """
        if not isinstance(other, Pattern):
            return False
        if len(self.shapes) != len(other.shapes):
            return False
        return all(a.matches(b) for a, b in zip(self.shapes, other.shapes))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Pattern):
            return NotImplemented
        return self.matches(other)

    def __hash__(self) -> int:
        return hash(self.shapes)

    def __len__(self) -> int:
        return len(self.shapes)

    def __iter__(self):
        return iter(self.shapes)

    def to_dict(self) -> Dict[str, Any]:
        return {"shapes": [shape.to_dict() for shape in self.shapes]}


def patterns_to_dicts(patterns: Iterable[Pattern]):
    return [pattern.to_dict() for pattern in patterns]
