"""
Authored puzzle templates for the six difficulty levels.

Each template builds a 3x3 matrix by applying a transformation rule (size,
rotation, color, shape identity, position, shape union, or a combination)
across rows and columns, leaves the bottom-right cell blank, and returns the
pattern completing the rule together with five distractors.

Template selection is a closed dispatch table: every level owns an ordered
tuple of slots, and a slot is either a TemplateId or a Delegate pointing at a
lower level's slot. Higher levels pad their bespoke templates with reused
lower-level ones.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, NamedTuple, Optional, Tuple, Union

from ..core.base_puzzle import MATRIX_SIZE
from ..core.shapes import (
    CENTER,
    SHAPE_COLORS,
    SHAPE_SIZES,
    SHAPE_TYPES,
    Pattern,
    Position,
    Shape,
    ShapeColor,
    ShapeSize,
    ShapeType,
)
from .shape_factory import ShapeFactory

Matrix = List[List[Optional[Pattern]]]

SMALL, MEDIUM, LARGE = SHAPE_SIZES
BLACK, GRAY, WHITE = SHAPE_COLORS


class TemplateId(Enum):
    """Closed set of authored templates."""

    SIZE_PROGRESSION = "size_progression"
    ROTATION_PROGRESSION = "rotation_progression"
    COLOR_PROGRESSION = "color_progression"
    SHAPE_SEQUENCE = "shape_sequence"
    SHAPE_ADDITION = "shape_addition"
    SIZE_ROTATION = "size_rotation"
    OPPOSED_SIZES = "opposed_sizes"
    SHAPE_COLOR_SEQUENCE = "shape_color_sequence"
    POSITION_ROTATION = "position_rotation"
    SHAPE_SUBTRACTION = "shape_subtraction"
    TRIPLE_PROGRESSION = "triple_progression"
    MULTI_SHAPE_BUILDUP = "multi_shape_buildup"
    RECURSIVE_TRANSFORMATION = "recursive_transformation"
    FIBONACCI_COMPOSITION = "fibonacci_composition"
    HYPER_COMPOSITION = "hyper_composition"


class Delegate(NamedTuple):
    """Slot that reuses another level's template slot."""

    level: int
    puzzle_index: int


TemplateSlot = Union[TemplateId, Delegate]


@dataclass
class TemplateInstance:
    """
    A template filled with concrete shapes, before option shuffling.

    Attributes:
        template_id: Template that produced this instance
        matrix: 3x3 rows with the bottom-right cell set to None
        answer: Ground-truth pattern for the blank cell
        distractors: Plausible-but-wrong options
    """

    template_id: TemplateId
    matrix: Matrix
    answer: Pattern
    distractors: List[Pattern]

    def options(self) -> List[Pattern]:
        """Ground truth followed by distractors, unshuffled."""
        return [self.answer] + list(self.distractors)


def _shift(row: int, col: int) -> int:
    """Index into a 3-step cycle that shifts by one per row."""
    return (row + col) % MATRIX_SIZE


def _cyclic_grid(cell: Callable[[int, int], Pattern]) -> Tuple[Matrix, Pattern]:
    """
    Fill the matrix from a per-cell rule and evaluate the same rule at the
    blank bottom-right cell to obtain the ground truth.
    """
    last = MATRIX_SIZE - 1
    matrix = [
        [
            None if (row, col) == (last, last) else cell(row, col)
            for col in range(MATRIX_SIZE)
        ]
        for row in range(MATRIX_SIZE)
    ]
    return matrix, cell(last, last)


def _one(shape: Shape) -> Pattern:
    return Pattern.of(shape)


def _pt(x: float, y: float) -> Position:
    return Position(x, y)


# Level 1: single-rule transformations


def size_progression(factory: ShapeFactory) -> TemplateInstance:
    base = factory.random_shape(position=CENTER)
    matrix, answer = _cyclic_grid(
        lambda r, c: _one(base.with_overrides(size=SHAPE_SIZES[_shift(r, c)]))
    )
    distractors = [
        _one(base.with_overrides(size=SMALL)),
        _one(base.with_overrides(size=LARGE)),
        _one(base.with_overrides(type=ShapeType.CIRCLE)),
        factory.random_pattern(),
        factory.random_pattern(),
    ]
    return TemplateInstance(TemplateId.SIZE_PROGRESSION, matrix, answer, distractors)


def rotation_progression(factory: ShapeFactory) -> TemplateInstance:
    base = factory.random_shape(type=ShapeType.TRIANGLE, position=CENTER)
    matrix, answer = _cyclic_grid(
        lambda r, c: _one(base.with_overrides(rotation=(90 * (r + c)) % 360))
    )
    distractors = [
        _one(base.with_overrides(rotation=90)),
        _one(base.with_overrides(rotation=180)),
        _one(base.with_overrides(rotation=270)),
        factory.random_pattern(),
        factory.random_pattern(),
    ]
    return TemplateInstance(
        TemplateId.ROTATION_PROGRESSION, matrix, answer, distractors
    )


def color_progression(factory: ShapeFactory) -> TemplateInstance:
    base = factory.random_shape(position=CENTER)
    matrix, answer = _cyclic_grid(
        lambda r, c: _one(base.with_overrides(color=SHAPE_COLORS[_shift(r, c)]))
    )
    distractors = [
        _one(base.with_overrides(color=BLACK)),
        _one(base.with_overrides(color=WHITE)),
        factory.random_pattern(),
        factory.random_pattern(),
        factory.random_pattern(),
    ]
    return TemplateInstance(TemplateId.COLOR_PROGRESSION, matrix, answer, distractors)


def shape_sequence(factory: ShapeFactory) -> TemplateInstance:
    cycle = [
        factory.random_shape(type=shape_type, position=CENTER)
        for shape_type in (ShapeType.CIRCLE, ShapeType.SQUARE, ShapeType.TRIANGLE)
    ]
    matrix, answer = _cyclic_grid(lambda r, c: _one(cycle[_shift(r, c)]))
    distractors = [
        _one(cycle[0]),
        _one(cycle[2]),
        factory.random_pattern(),
        factory.random_pattern(),
        factory.random_pattern(),
    ]
    return TemplateInstance(TemplateId.SHAPE_SEQUENCE, matrix, answer, distractors)


def shape_addition(factory: ShapeFactory) -> TemplateInstance:
    a = factory.random_shape(position=_pt(0.3, 0.5))
    b = factory.random_shape(position=_pt(0.7, 0.5))
    union = Pattern.of(a, b)
    matrix = [
        [_one(a), _one(b), union],
        [_one(b), _one(a), union],
        [_one(a), _one(b), None],
    ]
    distractors = [
        _one(a),
        _one(b),
        factory.random_pattern(2),
        factory.random_pattern(),
        factory.random_pattern(),
    ]
    return TemplateInstance(TemplateId.SHAPE_ADDITION, matrix, union, distractors)


# Level 2: two rules at once


def size_rotation(factory: ShapeFactory) -> TemplateInstance:
    base = factory.random_shape(type=ShapeType.DIAMOND, position=CENTER)
    matrix, answer = _cyclic_grid(
        lambda r, c: _one(
            base.with_overrides(size=SHAPE_SIZES[_shift(r, c)], rotation=45 * (r + c))
        )
    )
    distractors = [
        _one(base.with_overrides(size=MEDIUM, rotation=45)),
        _one(base.with_overrides(size=LARGE, rotation=180)),
        _one(base.with_overrides(size=SMALL, rotation=180)),
        factory.random_pattern(),
        factory.random_pattern(),
    ]
    return TemplateInstance(TemplateId.SIZE_ROTATION, matrix, answer, distractors)


def opposed_sizes(factory: ShapeFactory) -> TemplateInstance:
    grower = factory.random_shape(type=ShapeType.CIRCLE, position=_pt(0.3, 0.3))
    shrinker = factory.random_shape(type=ShapeType.SQUARE, position=_pt(0.7, 0.7))

    def pair(grow: ShapeSize, shrink: ShapeSize) -> Pattern:
        return Pattern.of(
            grower.with_overrides(size=grow), shrinker.with_overrides(size=shrink)
        )

    matrix, answer = _cyclic_grid(
        lambda r, c: pair(
            SHAPE_SIZES[_shift(r, c)], SHAPE_SIZES[(2 - _shift(r, c)) % MATRIX_SIZE]
        )
    )
    distractors = [
        pair(LARGE, SMALL),
        pair(SMALL, LARGE),
        pair(MEDIUM, LARGE),
        factory.random_pattern(2),
        factory.random_pattern(),
    ]
    return TemplateInstance(TemplateId.OPPOSED_SIZES, matrix, answer, distractors)


def shape_color_sequence(factory: ShapeFactory) -> TemplateInstance:
    base = factory.random_shape(position=CENTER)
    types = (ShapeType.CIRCLE, ShapeType.SQUARE, ShapeType.TRIANGLE)

    def styled(shape_type: ShapeType, color: ShapeColor) -> Pattern:
        return _one(base.with_overrides(type=shape_type, color=color))

    matrix, answer = _cyclic_grid(
        lambda r, c: styled(types[_shift(r, c)], SHAPE_COLORS[_shift(r, c)])
    )
    distractors = [
        styled(ShapeType.CIRCLE, GRAY),
        styled(ShapeType.SQUARE, BLACK),
        styled(ShapeType.TRIANGLE, GRAY),
        factory.random_pattern(),
        factory.random_pattern(),
    ]
    return TemplateInstance(
        TemplateId.SHAPE_COLOR_SEQUENCE, matrix, answer, distractors
    )


def position_rotation(factory: ShapeFactory) -> TemplateInstance:
    base = factory.random_shape(type=ShapeType.STAR)
    positions = (_pt(0.3, 0.3), _pt(0.7, 0.3), _pt(0.5, 0.7))

    def placed(position: Position, rotation: int) -> Pattern:
        return _one(base.with_overrides(position=position, rotation=rotation))

    matrix, answer = _cyclic_grid(
        lambda r, c: placed(positions[_shift(r, c)], 60 * (r + c))
    )
    distractors = [
        placed(_pt(0.7, 0.3), 60),
        placed(_pt(0.5, 0.5), 240),
        placed(_pt(0.7, 0.7), 240),
        factory.random_pattern(),
        factory.random_pattern(),
    ]
    return TemplateInstance(TemplateId.POSITION_ROTATION, matrix, answer, distractors)


def shape_subtraction(factory: ShapeFactory) -> TemplateInstance:
    s1 = factory.random_shape(type=ShapeType.CIRCLE, position=_pt(0.25, 0.5))
    s2 = factory.random_shape(type=ShapeType.SQUARE, position=_pt(0.75, 0.5))
    s3 = factory.random_shape(type=ShapeType.TRIANGLE, position=_pt(0.5, 0.25))
    full = Pattern.of(s1, s2, s3)
    matrix = [
        [Pattern.of(s1, s3), _one(s2), full],
        [Pattern.of(s2, s3), _one(s1), full],
        [_one(s1), Pattern.of(s2, s3), None],
    ]
    distractors = [
        Pattern.of(s1, s2),
        Pattern.of(s2, s3),
        Pattern.of(s1, s3),
        _one(s1),
        factory.random_pattern(),
    ]
    return TemplateInstance(TemplateId.SHAPE_SUBTRACTION, matrix, full, distractors)


# Level 3: three variables and growing compositions


def triple_progression(factory: ShapeFactory) -> TemplateInstance:
    base = factory.random_shape(type=ShapeType.CROSS, position=CENTER)

    def styled(size: ShapeSize, color: ShapeColor, rotation: int) -> Pattern:
        return _one(base.with_overrides(size=size, color=color, rotation=rotation))

    matrix, answer = _cyclic_grid(
        lambda r, c: styled(
            SHAPE_SIZES[_shift(r, c)], SHAPE_COLORS[_shift(r, c)], 45 * (r + c)
        )
    )
    distractors = [
        styled(MEDIUM, BLACK, 180),
        styled(LARGE, GRAY, 180),
        styled(MEDIUM, GRAY, 135),
        factory.random_pattern(),
        factory.random_pattern(),
    ]
    return TemplateInstance(TemplateId.TRIPLE_PROGRESSION, matrix, answer, distractors)


def multi_shape_buildup(factory: ShapeFactory) -> TemplateInstance:
    s1 = factory.random_shape(type=ShapeType.CIRCLE)
    s2 = factory.random_shape(type=ShapeType.SQUARE)
    s3 = factory.random_shape(type=ShapeType.TRIANGLE)

    def at(shape: Shape, x: float, y: float, size: ShapeSize) -> Shape:
        return shape.with_overrides(position=_pt(x, y), size=size)

    row3_base = (
        at(s1, 0.3, 0.3, LARGE),
        at(s2, 0.7, 0.3, MEDIUM),
        at(s3, 0.5, 0.7, SMALL),
    )
    matrix = [
        [
            Pattern.of(at(s1, 0.3, 0.3, SMALL)),
            Pattern.of(at(s1, 0.3, 0.3, SMALL), at(s2, 0.7, 0.3, MEDIUM)),
            Pattern.of(
                at(s1, 0.3, 0.3, SMALL),
                at(s2, 0.7, 0.3, MEDIUM),
                at(s3, 0.5, 0.7, LARGE),
            ),
        ],
        [
            Pattern.of(at(s1, 0.3, 0.3, MEDIUM), at(s2, 0.7, 0.3, SMALL)),
            Pattern.of(
                at(s1, 0.3, 0.3, MEDIUM),
                at(s2, 0.7, 0.3, SMALL),
                at(s3, 0.5, 0.7, LARGE),
            ),
            Pattern.of(
                at(s1, 0.3, 0.3, MEDIUM),
                at(s2, 0.7, 0.3, SMALL),
                at(s3, 0.5, 0.7, LARGE),
                at(s1, 0.7, 0.7, SMALL),
            ),
        ],
        [
            Pattern(row3_base),
            Pattern(row3_base + (at(s2, 0.3, 0.7, LARGE),)),
            None,
        ],
    ]
    answer = Pattern(
        row3_base + (at(s2, 0.3, 0.7, LARGE), at(s3, 0.7, 0.7, MEDIUM))
    )
    distractors = [
        Pattern(row3_base),
        factory.random_pattern(2),
        factory.random_pattern(),
        factory.random_pattern(3),
        factory.random_pattern(),
    ]
    return TemplateInstance(TemplateId.MULTI_SHAPE_BUILDUP, matrix, answer, distractors)


# Levels 4-6: authored multi-rule compositions


def recursive_transformation(factory: ShapeFactory) -> TemplateInstance:
    b1 = factory.random_shape(type=ShapeType.CIRCLE, position=_pt(0.25, 0.25))
    b2 = factory.random_shape(type=ShapeType.SQUARE, position=_pt(0.75, 0.25))
    b3 = factory.random_shape(type=ShapeType.TRIANGLE, position=_pt(0.25, 0.75))
    b4 = factory.random_shape(type=ShapeType.DIAMOND, position=_pt(0.75, 0.75))

    def v(shape: Shape, size: ShapeSize, color: ShapeColor, rotation: int) -> Shape:
        return shape.with_overrides(size=size, color=color, rotation=rotation)

    matrix = [
        [
            Pattern.of(v(b1, SMALL, BLACK, 0), v(b2, LARGE, WHITE, 45)),
            Pattern.of(
                v(b1, MEDIUM, GRAY, 90), v(b2, MEDIUM, BLACK, 90), v(b3, SMALL, WHITE, 0)
            ),
            Pattern.of(
                v(b1, LARGE, WHITE, 180),
                v(b2, SMALL, GRAY, 135),
                v(b3, MEDIUM, BLACK, 120),
                v(b4, SMALL, WHITE, 0),
            ),
        ],
        [
            Pattern.of(v(b2, MEDIUM, GRAY, 45), v(b3, LARGE, BLACK, 60)),
            Pattern.of(
                v(b2, LARGE, WHITE, 90), v(b3, MEDIUM, GRAY, 120), v(b4, SMALL, BLACK, 45)
            ),
            Pattern.of(
                v(b2, SMALL, BLACK, 135),
                v(b3, SMALL, WHITE, 180),
                v(b4, MEDIUM, GRAY, 90),
                v(b1, LARGE, BLACK, 270),
            ),
        ],
        [
            Pattern.of(v(b3, LARGE, WHITE, 60), v(b4, MEDIUM, BLACK, 90)),
            Pattern.of(
                v(b3, SMALL, BLACK, 120), v(b4, LARGE, GRAY, 135), v(b1, MEDIUM, WHITE, 180)
            ),
            None,
        ],
    ]
    answer = Pattern.of(
        v(b3, MEDIUM, GRAY, 180),
        v(b4, SMALL, WHITE, 180),
        v(b1, LARGE, BLACK, 270),
        v(b2, MEDIUM, GRAY, 225),
    )
    distractors = [
        Pattern.of(v(b3, LARGE, GRAY, 180), v(b4, SMALL, WHITE, 180)),
        Pattern.of(v(b3, MEDIUM, BLACK, 180), v(b4, MEDIUM, WHITE, 180)),
        factory.random_pattern(3),
        factory.random_pattern(2),
        factory.random_pattern(),
    ]
    return TemplateInstance(
        TemplateId.RECURSIVE_TRANSFORMATION, matrix, answer, distractors
    )


def fibonacci_composition(factory: ShapeFactory) -> TemplateInstance:
    circle = factory.random_shape(type=ShapeType.CIRCLE)
    square = factory.random_shape(type=ShapeType.SQUARE)
    triangle = factory.random_shape(type=ShapeType.TRIANGLE)

    def v(shape: Shape, x: float, y: float, size: ShapeSize, color: ShapeColor) -> Shape:
        return shape.with_overrides(position=_pt(x, y), size=size, color=color)

    matrix = [
        [
            Pattern.of(v(circle, 0.5, 0.5, SMALL, BLACK)),
            Pattern.of(v(square, 0.5, 0.5, SMALL, BLACK)),
            Pattern.of(v(circle, 0.3, 0.5, SMALL, BLACK), v(square, 0.7, 0.5, SMALL, GRAY)),
        ],
        [
            Pattern.of(v(square, 0.5, 0.5, MEDIUM, GRAY)),
            Pattern.of(v(circle, 0.3, 0.5, SMALL, GRAY), v(square, 0.7, 0.5, MEDIUM, WHITE)),
            Pattern.of(
                v(square, 0.2, 0.3, MEDIUM, GRAY),
                v(circle, 0.5, 0.5, SMALL, WHITE),
                v(square, 0.8, 0.7, LARGE, BLACK),
            ),
        ],
        [
            Pattern.of(v(circle, 0.3, 0.5, MEDIUM, WHITE), v(square, 0.7, 0.5, LARGE, BLACK)),
            Pattern.of(
                v(square, 0.2, 0.3, LARGE, WHITE),
                v(circle, 0.5, 0.5, MEDIUM, BLACK),
                v(square, 0.8, 0.7, SMALL, GRAY),
            ),
            None,
        ],
    ]
    answer = Pattern.of(
        v(circle, 0.15, 0.2, LARGE, BLACK),
        v(square, 0.4, 0.4, MEDIUM, GRAY),
        v(circle, 0.6, 0.6, SMALL, WHITE),
        v(square, 0.85, 0.8, MEDIUM, BLACK),
        v(triangle, 0.5, 0.1, SMALL, GRAY),
    )
    distractors = [factory.random_pattern(n) for n in (3, 2, 4, 1, 5)]
    return TemplateInstance(
        TemplateId.FIBONACCI_COMPOSITION, matrix, answer, distractors
    )


def hyper_composition(factory: ShapeFactory) -> TemplateInstance:
    s = [factory.random_shape(type=shape_type) for shape_type in SHAPE_TYPES]

    def v(
        index: int, x: float, y: float, size: ShapeSize, color: ShapeColor, rotation: int
    ) -> Shape:
        return s[index].with_overrides(
            position=_pt(x, y), size=size, color=color, rotation=rotation
        )

    matrix = [
        [
            Pattern.of(
                v(0, 0.2, 0.2, SMALL, BLACK, 0), v(1, 0.8, 0.2, MEDIUM, GRAY, 60)
            ),
            Pattern.of(
                v(1, 0.2, 0.2, MEDIUM, GRAY, 60),
                v(2, 0.5, 0.5, LARGE, WHITE, 120),
                v(0, 0.8, 0.8, SMALL, BLACK, 180),
            ),
            Pattern.of(
                v(2, 0.2, 0.2, LARGE, WHITE, 120),
                v(3, 0.4, 0.4, SMALL, BLACK, 180),
                v(1, 0.6, 0.6, MEDIUM, GRAY, 240),
                v(0, 0.8, 0.8, LARGE, WHITE, 300),
            ),
        ],
        [
            Pattern.of(
                v(3, 0.2, 0.2, MEDIUM, WHITE, 90), v(4, 0.8, 0.2, LARGE, BLACK, 150)
            ),
            Pattern.of(
                v(4, 0.2, 0.2, LARGE, BLACK, 150),
                v(5, 0.5, 0.5, SMALL, GRAY, 210),
                v(3, 0.8, 0.8, MEDIUM, WHITE, 270),
            ),
            Pattern.of(
                v(5, 0.2, 0.2, SMALL, GRAY, 210),
                v(0, 0.35, 0.35, MEDIUM, WHITE, 270),
                v(4, 0.5, 0.5, LARGE, BLACK, 330),
                v(3, 0.65, 0.65, SMALL, GRAY, 30),
                v(2, 0.8, 0.8, MEDIUM, WHITE, 90),
            ),
        ],
        [
            Pattern.of(
                v(1, 0.2, 0.2, LARGE, GRAY, 180), v(2, 0.8, 0.2, SMALL, WHITE, 240)
            ),
            Pattern.of(
                v(2, 0.2, 0.2, SMALL, WHITE, 240),
                v(3, 0.4, 0.4, MEDIUM, BLACK, 300),
                v(1, 0.6, 0.6, LARGE, GRAY, 0),
                v(4, 0.8, 0.8, SMALL, WHITE, 60),
            ),
            None,
        ],
    ]
    answer = Pattern.of(
        v(3, 0.2, 0.2, MEDIUM, BLACK, 300),
        v(4, 0.3, 0.3, LARGE, WHITE, 0),
        v(5, 0.4, 0.4, SMALL, GRAY, 60),
        v(2, 0.5, 0.5, MEDIUM, BLACK, 120),
        v(1, 0.6, 0.6, LARGE, WHITE, 180),
        v(0, 0.7, 0.7, SMALL, GRAY, 240),
        v(4, 0.8, 0.8, MEDIUM, BLACK, 300),
    )
    distractors = [factory.random_pattern(n) for n in (4, 3, 5, 2, 6)]
    return TemplateInstance(TemplateId.HYPER_COMPOSITION, matrix, answer, distractors)


TEMPLATE_BUILDERS: Dict[TemplateId, Callable[[ShapeFactory], TemplateInstance]] = {
    TemplateId.SIZE_PROGRESSION: size_progression,
    TemplateId.ROTATION_PROGRESSION: rotation_progression,
    TemplateId.COLOR_PROGRESSION: color_progression,
    TemplateId.SHAPE_SEQUENCE: shape_sequence,
    TemplateId.SHAPE_ADDITION: shape_addition,
    TemplateId.SIZE_ROTATION: size_rotation,
    TemplateId.OPPOSED_SIZES: opposed_sizes,
    TemplateId.SHAPE_COLOR_SEQUENCE: shape_color_sequence,
    TemplateId.POSITION_ROTATION: position_rotation,
    TemplateId.SHAPE_SUBTRACTION: shape_subtraction,
    TemplateId.TRIPLE_PROGRESSION: triple_progression,
    TemplateId.MULTI_SHAPE_BUILDUP: multi_shape_buildup,
    TemplateId.RECURSIVE_TRANSFORMATION: recursive_transformation,
    TemplateId.FIBONACCI_COMPOSITION: fibonacci_composition,
    TemplateId.HYPER_COMPOSITION: hyper_composition,
}

LEVEL_TEMPLATES: Dict[int, Tuple[TemplateSlot, ...]] = {
    1: (
        TemplateId.SIZE_PROGRESSION,
        TemplateId.ROTATION_PROGRESSION,
        TemplateId.COLOR_PROGRESSION,
        TemplateId.SHAPE_SEQUENCE,
        TemplateId.SHAPE_ADDITION,
    ),
    2: (
        TemplateId.SIZE_ROTATION,
        TemplateId.OPPOSED_SIZES,
        TemplateId.SHAPE_COLOR_SEQUENCE,
        TemplateId.POSITION_ROTATION,
        TemplateId.SHAPE_SUBTRACTION,
    ),
    3: (
        TemplateId.TRIPLE_PROGRESSION,
        TemplateId.MULTI_SHAPE_BUILDUP,
        Delegate(2, 0),
        Delegate(2, 1),
        Delegate(2, 2),
    ),
    4: (
        TemplateId.RECURSIVE_TRANSFORMATION,
        Delegate(3, 0),
        Delegate(3, 1),
        Delegate(3, 0),
        Delegate(3, 1),
    ),
    5: (
        TemplateId.FIBONACCI_COMPOSITION,
        Delegate(4, 0),
        Delegate(4, 1),
        Delegate(4, 0),
        Delegate(4, 1),
    ),
    6: (
        TemplateId.HYPER_COMPOSITION,
        Delegate(5, 0),
        Delegate(5, 1),
        Delegate(5, 0),
        Delegate(5, 1),
    ),
}
