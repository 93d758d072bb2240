"""
Comprehensive test suite for raven_iq.generate module.
Tests the shape model, template catalogue, option shuffling and puzzle generation.
"""

import random
from collections import Counter
from unittest.mock import Mock, patch

import pytest

from raven_iq.core.base_puzzle import MatrixPuzzle
from raven_iq.core.exceptions import InvalidLevelError
from raven_iq.core.shapes import (
    CENTER,
    SHAPE_SIZES,
    Pattern,
    Position,
    Shape,
    ShapeColor,
    ShapeSize,
    ShapeType,
)
from raven_iq.generate.puzzle_generator import (
    MatrixPuzzleGenerator,
    generate_puzzle,
    locate_answer,
    shuffle_options,
)
from raven_iq.generate.shape_factory import ShapeFactory
from raven_iq.generate.templates import (
    LEVEL_TEMPLATES,
    TEMPLATE_BUILDERS,
    Delegate,
    TemplateId,
    size_progression,
)


def _shape(**overrides):
    values = dict(type=ShapeType.CIRCLE, size=ShapeSize.SMALL, color=ShapeColor.BLACK)
    values.update(overrides)
    return Shape(**values)


class TestShapeModel:
    """Test Shape and Pattern value semantics."""

    def test_shape_defaults(self):
        """Rotation defaults to 0 and position to the cell center."""
        shape = _shape()
        assert shape.rotation == 0
        assert shape.position == CENTER

    def test_with_overrides_returns_copy(self):
        """Overrides produce a new shape and leave the original untouched."""
        shape = _shape()
        bigger = shape.with_overrides(size=ShapeSize.LARGE)

        assert bigger.size == ShapeSize.LARGE
        assert shape.size == ShapeSize.SMALL
        assert bigger.type == shape.type

    def test_shape_is_immutable(self):
        shape = _shape()
        with pytest.raises(Exception):
            shape.size = ShapeSize.LARGE

    def test_shape_matching_checks_every_field(self):
        """Shapes differing in any single attribute do not match."""
        shape = _shape()
        assert shape.matches(_shape())
        assert not shape.matches(_shape(type=ShapeType.STAR))
        assert not shape.matches(_shape(size=ShapeSize.MEDIUM))
        assert not shape.matches(_shape(color=ShapeColor.GRAY))
        assert not shape.matches(_shape(rotation=90))
        assert not shape.matches(_shape(position=Position(0.3, 0.5)))

    def test_pattern_matching_is_order_sensitive(self):
        a = _shape()
        b = _shape(type=ShapeType.SQUARE)

        assert Pattern.of(a, b).matches(Pattern.of(a, b))
        assert not Pattern.of(a, b).matches(Pattern.of(b, a))
        assert not Pattern.of(a).matches(Pattern.of(a, a))

    def test_equality_operator_agrees_with_matches(self):
        a = _shape()
        assert Pattern.of(a) == Pattern([_shape()])
        assert Pattern.of(a) != Pattern.of(a.with_overrides(rotation=45))
        assert hash(Pattern.of(a)) == hash(Pattern.of(_shape()))

    def test_empty_pattern_is_not_missing_cell(self):
        """An empty pattern is a blank drawing, distinct from the None cell."""
        empty = Pattern()
        assert len(empty) == 0
        assert empty is not None
        assert empty.matches(Pattern())

    def test_shape_serialization(self):
        shape = _shape(rotation=90, position=Position(0.3, 0.7))
        assert shape.to_dict() == {
            "type": "circle",
            "size": "small",
            "color": "black",
            "rotation": 90,
            "position": {"x": 0.3, "y": 0.7},
        }


class TestShapeFactory:
    """Test seeded random shape construction."""

    def test_same_seed_same_shapes(self):
        first = ShapeFactory(random.Random(11))
        second = ShapeFactory(random.Random(11))

        assert [first.random_shape() for _ in range(10)] == [
            second.random_shape() for _ in range(10)
        ]

    def test_overrides_are_respected(self):
        factory = ShapeFactory(random.Random(3))
        for _ in range(20):
            shape = factory.random_shape(type=ShapeType.STAR, color=ShapeColor.WHITE)
            assert shape.type == ShapeType.STAR
            assert shape.color == ShapeColor.WHITE
            assert shape.rotation == 0
            assert shape.position == CENTER

    def test_random_pattern_shape_count(self):
        factory = ShapeFactory(random.Random(5))
        assert len(factory.random_pattern()) == 1
        assert len(factory.random_pattern(4)) == 4

    def test_unknown_attribute_rejected(self):
        factory = ShapeFactory(random.Random(5))
        with pytest.raises(TypeError):
            factory.random_shape(opacity=0.5)


class TestTemplates:
    """Test the authored template catalogue."""

    @pytest.mark.parametrize("template_id", list(TemplateId))
    def test_template_structure(self, template_id):
        """Every template leaves only the bottom-right cell blank and offers six options."""
        instance = TEMPLATE_BUILDERS[template_id](ShapeFactory(random.Random(42)))

        assert instance.template_id == template_id
        assert len(instance.matrix) == 3
        assert all(len(row) == 3 for row in instance.matrix)

        cells = [cell for row in instance.matrix for cell in row]
        assert cells[8] is None
        assert all(cell is not None for cell in cells[:8])

        options = instance.options()
        assert len(options) == 6
        assert options[0] is instance.answer
        assert not any(d.matches(instance.answer) for d in instance.distractors[:2])

    def test_every_template_has_a_builder(self):
        assert set(TEMPLATE_BUILDERS) == set(TemplateId)

    def test_level_slot_tables(self):
        assert sorted(LEVEL_TEMPLATES) == [1, 2, 3, 4, 5, 6]
        for slots in LEVEL_TEMPLATES.values():
            assert len(slots) == 5
            for slot in slots:
                assert isinstance(slot, (TemplateId, Delegate))

    def test_delegates_point_to_lower_levels(self):
        for level, slots in LEVEL_TEMPLATES.items():
            for slot in slots:
                if isinstance(slot, Delegate):
                    assert slot.level < level

    def test_size_progression_scenario(self):
        """Rows follow the shifted size cycle and the completion is medium."""
        instance = size_progression(ShapeFactory(random.Random(1)))

        for row in range(3):
            for col in range(3):
                if (row, col) == (2, 2):
                    continue
                shape = instance.matrix[row][col].shapes[0]
                assert shape.size == SHAPE_SIZES[(row + col) % 3]

        assert instance.matrix[0][0].shapes[0].size == ShapeSize.SMALL
        assert instance.matrix[1][0].shapes[0].size == ShapeSize.MEDIUM
        assert instance.matrix[2][0].shapes[0].size == ShapeSize.LARGE
        assert instance.answer.shapes[0].size == ShapeSize.MEDIUM

    def test_shape_addition_answer_is_union(self):
        instance = TEMPLATE_BUILDERS[TemplateId.SHAPE_ADDITION](
            ShapeFactory(random.Random(9))
        )
        a = instance.matrix[2][0].shapes[0]
        b = instance.matrix[2][1].shapes[0]
        assert instance.answer == Pattern.of(a, b)
        assert instance.matrix[0][2] == instance.answer

    def test_rotation_progression_wraps_to_zero(self):
        instance = TEMPLATE_BUILDERS[TemplateId.ROTATION_PROGRESSION](
            ShapeFactory(random.Random(9))
        )
        assert [cell.shapes[0].rotation for cell in instance.matrix[1]] == [90, 180, 270]
        assert instance.answer.shapes[0].rotation == 0
        assert instance.answer.shapes[0].type == ShapeType.TRIANGLE


class TestShuffleAndLocate:
    """Test option shuffling and ground-truth location."""

    def test_shuffle_is_a_permutation(self):
        items = list(range(6))
        shuffled = shuffle_options(items, random.Random(8))

        assert sorted(shuffled) == items
        assert items == list(range(6))

    def test_shuffle_is_seeded(self):
        items = list(range(10))
        assert shuffle_options(items, random.Random(4)) == shuffle_options(
            items, random.Random(4)
        )

    def test_single_option_unchanged(self):
        assert shuffle_options(["only"], random.Random(0)) == ["only"]

    def test_locate_first_match_wins(self):
        answer = Pattern.of(_shape())
        options = [Pattern.of(_shape(size=ShapeSize.LARGE)), Pattern.of(_shape()), answer]
        assert locate_answer(options, answer) == 1

    def test_locate_missing_answer(self):
        with pytest.raises(ValueError):
            locate_answer([Pattern()], Pattern.of(_shape()))

    def test_answer_position_is_roughly_uniform(self):
        """Across many puzzles every option slot holds the answer about 1/6 of the time."""
        generator = MatrixPuzzleGenerator(rng=random.Random(2024))
        positions = Counter(
            generator.generate(2, 0).correct_answer_index for _ in range(3000)
        )

        assert sorted(positions) == [0, 1, 2, 3, 4, 5]
        for count in positions.values():
            assert 400 <= count <= 600


class TestMatrixPuzzleGenerator:
    """Test puzzle generation end to end."""

    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_every_level_yields_valid_puzzles(self, level):
        """Exactly one blank cell and the indexed option completes the matrix."""
        for puzzle_index in range(12):
            seed = level * 100 + puzzle_index
            generator = MatrixPuzzleGenerator(seed=seed, strict_levels=True)
            puzzle = generator.generate(level, puzzle_index)

            cells = puzzle.cells()
            assert sum(1 for cell in cells if cell is None) == 1
            assert puzzle.missing_cell_index() == 8

            template_id = generator.resolve_template(level, puzzle_index)
            expected = TEMPLATE_BUILDERS[template_id](
                ShapeFactory(random.Random(seed))
            ).answer
            assert puzzle.options[puzzle.correct_answer_index].matches(expected)
            assert puzzle.template_id == template_id.value
            assert len(puzzle.options) == 6

    def test_index_wraparound(self):
        """Indexes a whole number of cycles apart select the same template."""
        for level in range(1, 7):
            generator = MatrixPuzzleGenerator(seed=0)
            count = generator.template_count(level)
            for index in range(count):
                first = MatrixPuzzleGenerator(seed=77).generate(level, index)
                later = MatrixPuzzleGenerator(seed=77).generate(level, index + 3 * count)

                assert first.template_id == later.template_id
                assert first.get_correct_option() == later.get_correct_option()
                assert first.matrix == later.matrix

    def test_higher_levels_reuse_lower_templates(self):
        generator = MatrixPuzzleGenerator(seed=0)

        assert generator.resolve_template(4, 2) == generator.resolve_template(3, 0)
        assert generator.resolve_template(3, 2) == TemplateId.SIZE_ROTATION
        assert generator.resolve_template(6, 2) == TemplateId.MULTI_SHAPE_BUILDUP
        assert generator.resolve_template(6, 0) == TemplateId.HYPER_COMPOSITION

    def test_same_seed_same_puzzle(self):
        first = MatrixPuzzleGenerator(seed=123).generate(3, 1)
        second = MatrixPuzzleGenerator(seed=123).generate(3, 1)
        assert first.to_dict() == second.to_dict()

    def test_unknown_level_falls_back_to_level_one(self):
        generator = MatrixPuzzleGenerator(seed=5, strict_levels=False)

        for level in (0, 7, -1, "3", None):
            puzzle = generator.generate(level, 0)
            assert puzzle.level == 1
            assert puzzle.template_id == TemplateId.SIZE_PROGRESSION.value

    def test_unknown_level_rejected_when_strict(self):
        generator = MatrixPuzzleGenerator(seed=5, strict_levels=True)

        with pytest.raises(InvalidLevelError) as exc_info:
            generator.generate(7, 0)
        assert exc_info.value.level == 7

    @patch("raven_iq.generate.puzzle_generator.get_config")
    def test_strict_policy_from_config(self, mock_get_config):
        config = Mock()
        config.get_session_config.return_value = {
            "puzzles_per_level": 3,
            "level_pass_ratio": 0.6,
            "strict_level_validation": True,
            "random_seed": 10,
            "progress_store_path": "",
        }
        mock_get_config.return_value = config

        generator = MatrixPuzzleGenerator()
        assert generator.strict_levels is True
        assert len(generator.generate_level(2)) == 3
        with pytest.raises(InvalidLevelError):
            generator.generate(0, 0)

    def test_generate_level_uses_consecutive_indexes(self):
        puzzles = MatrixPuzzleGenerator(seed=1).generate_level(1, count=5)

        assert [p.puzzle_index for p in puzzles] == [0, 1, 2, 3, 4]
        assert [p.template_id for p in puzzles] == [
            "size_progression",
            "rotation_progression",
            "color_progression",
            "shape_sequence",
            "shape_addition",
        ]

    def test_generate_puzzle_helper(self):
        first = generate_puzzle(2, 4, rng=random.Random(6))
        second = generate_puzzle(2, 4, rng=random.Random(6))

        assert isinstance(first, MatrixPuzzle)
        assert first.to_dict() == second.to_dict()
        assert first.template_id == TemplateId.SHAPE_SUBTRACTION.value

    def test_puzzle_serialization(self):
        data = MatrixPuzzleGenerator(seed=2).generate(1, 0).to_dict()

        assert data["puzzle_id"] == "level1_000"
        assert data["matrix"][2][2] is None
        assert len(data["options"]) == 6
        assert 0 <= data["correct_answer_index"] < 6


class TestMatrixPuzzleValidation:
    """Test MatrixPuzzle invariants."""

    def _matrix(self, blanks=(8,)):
        cells = [None if i in blanks else Pattern.of(_shape()) for i in range(9)]
        return [cells[0:3], cells[3:6], cells[6:9]]

    def test_valid_puzzle(self):
        options = [Pattern.of(_shape()), Pattern()]
        puzzle = MatrixPuzzle(self._matrix(), options, 1, level=2, puzzle_index=4)

        assert puzzle.get_size() == (3, 3)
        assert puzzle.get_correct_option() == Pattern()
        assert puzzle.is_correct(1)
        assert not puzzle.is_correct(0)

    def test_two_blank_cells_rejected(self):
        with pytest.raises(ValueError):
            MatrixPuzzle(self._matrix(blanks=(7, 8)), [Pattern(), Pattern()], 0)

    def test_no_blank_cell_rejected(self):
        with pytest.raises(ValueError):
            MatrixPuzzle(self._matrix(blanks=()), [Pattern(), Pattern()], 0)

    def test_too_few_options_rejected(self):
        with pytest.raises(ValueError):
            MatrixPuzzle(self._matrix(), [Pattern()], 0)

    def test_answer_index_out_of_range_rejected(self):
        with pytest.raises(ValueError):
            MatrixPuzzle(self._matrix(), [Pattern(), Pattern()], 2)

    def test_non_square_matrix_rejected(self):
        matrix = self._matrix()[:2]
        with pytest.raises(ValueError):
            MatrixPuzzle(matrix, [Pattern(), Pattern()], 0)
