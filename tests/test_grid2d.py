"""Unit tests for the flat-buffer 2D grid container.

Covers construction, bounds-checked lookup, reshaping and the row-major
iteration contract.
"""

import pytest
from conway_life.core.grid2d import DimensionMismatch, Grid2D


class TestGridCreation:
    """Test building grids from initializers and sequences."""

    def test_create_populates_row_major(self):
        """Initializer values land in row-major order."""
        grid = Grid2D.create(3, 2, lambda x, y: (x, y))

        assert grid.width == 3
        assert grid.height == 2
        assert grid.cells == ((0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1))

    def test_initializer_called_once_per_coordinate_in_order(self):
        """Initializer runs exactly once per cell, x fastest."""
        calls = []

        def initializer(x, y):
            calls.append((x, y))
            return 0

        Grid2D.create(2, 3, initializer)
        assert calls == [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2), (1, 2)]

    @pytest.mark.parametrize("width,height", [(0, 0), (0, 5), (5, 0)])
    def test_empty_grid_is_valid(self, width, height):
        """Zero width or height gives an empty grid."""
        grid = Grid2D.create(width, height, lambda x, y: pytest.fail("initializer must not run"))

        assert len(grid) == 0
        assert list(grid.iterate()) == []
        assert grid.get(0, 0) is None

    def test_initializer_failure_propagates(self):
        """First initializer error aborts construction."""
        def initializer(x, y):
            if (x, y) == (1, 1):
                raise RuntimeError("boom")
            return x

        with pytest.raises(RuntimeError, match="boom"):
            Grid2D.create(3, 3, initializer)

    def test_negative_dimensions_rejected(self):
        """Negative dimensions raise ValueError."""
        with pytest.raises(ValueError, match="non-negative"):
            Grid2D.create(-1, 2, lambda x, y: 0)

    def test_from_sequence(self):
        """Flat data is kept in order with matching dimensions."""
        grid = Grid2D.from_sequence(2, 3, [0, 1, 2, 3, 4, 5])

        assert grid.width == 2
        assert grid.height == 3
        assert grid.cells == (0, 1, 2, 3, 4, 5)
        assert grid.get(1, 2) == 5
        assert grid.get(0, 1) == 2

    def test_from_sequence_incompatible_dimensions(self):
        """Length mismatch raises DimensionMismatch."""
        with pytest.raises(DimensionMismatch) as excinfo:
            Grid2D.from_sequence(3, 3, [1])

        assert excinfo.value.width == 3
        assert excinfo.value.height == 3
        assert excinfo.value.length == 1

    def test_dimension_mismatch_is_value_error(self):
        """DimensionMismatch can be caught as ValueError."""
        with pytest.raises(ValueError, match="requires 4 cells, got 5"):
            Grid2D.from_sequence(2, 2, range(5))

    def test_from_sequence_copies_input(self):
        """Mutating the source list doesn't affect the grid."""
        data = [1, 2, 3, 4]
        grid = Grid2D.from_sequence(2, 2, data)
        data[0] = 99

        assert grid.get(0, 0) == 1


class TestGridLookup:
    """Test bounds-checked get."""

    def test_get(self):
        """In-bounds lookup returns the initializer value."""
        grid = Grid2D.create(2, 2, lambda x, y: (x, y))
        assert grid.get(1, 1) == (1, 1)

    def test_get_every_coordinate(self):
        """Every in-bounds coordinate maps to its own value."""
        grid = Grid2D.create(4, 3, lambda x, y: x * 10 + y)
        for y in range(3):
            for x in range(4):
                assert grid.get(x, y) == x * 10 + y

    def test_get_x_bounds(self):
        """Columns outside the grid are absent."""
        grid = Grid2D.create(2, 2, lambda x, y: (x, y))
        assert grid.get(-1, 0) is None, "(-1, 0) is outside bounds"
        assert grid.get(2, 0) is None, "(2, 0) is outside bounds"

    def test_get_y_bounds(self):
        """Rows outside the grid are absent."""
        grid = Grid2D.create(2, 2, lambda x, y: (x, y))
        assert grid.get(0, -1) is None, "(0, -1) is outside bounds"
        assert grid.get(0, 2) is None, "(0, 2) is outside bounds"

    def test_no_wraparound(self):
        """Index arithmetic never spills into the neighbouring row."""
        grid = Grid2D.create(3, 3, lambda x, y: (x, y))
        # (3, 0) would be linear index 3 == (0, 1) if unchecked
        assert grid.get(3, 0) is None
        assert grid.get(-1, 1) is None

    def test_index_of(self):
        """Linear index is y * width + x."""
        grid = Grid2D.create(4, 3, lambda x, y: 0)
        assert grid.index_of(0, 0) == 0
        assert grid.index_of(3, 0) == 3
        assert grid.index_of(1, 2) == 9

        with pytest.raises(IndexError):
            grid.index_of(4, 0)

    def test_index_of_agrees_with_get(self):
        """get reads the buffer slot index_of reports."""
        grid = Grid2D.create(4, 3, lambda x, y: (x, y))
        for (x, y), value in grid.iterate():
            assert grid.cells[grid.index_of(x, y)] == value == grid.get(x, y)


class TestGridReshape:
    """Test relabeling the buffer with new dimensions."""

    def test_reshape_relabels_buffer(self):
        """Same linear data, new row/column interpretation."""
        grid = Grid2D.from_sequence(2, 3, [0, 1, 2, 3, 4, 5])
        reshaped = grid.reshape(3, 2)

        assert (reshaped.width, reshaped.height) == (3, 2)
        assert reshaped.cells == grid.cells
        assert reshaped.get(2, 0) == 2
        assert reshaped.get(0, 1) == 3

    def test_reshape_leaves_original_untouched(self):
        """Original grid keeps its dimensions."""
        grid = Grid2D.from_sequence(2, 3, [0, 1, 2, 3, 4, 5])
        grid.reshape(6, 1)

        assert (grid.width, grid.height) == (2, 3)
        assert grid.get(1, 2) == 5

    def test_reshape_mismatch(self):
        """Product must equal the buffer length."""
        grid = Grid2D.from_sequence(2, 3, [0, 1, 2, 3, 4, 5])

        with pytest.raises(DimensionMismatch):
            grid.reshape(4, 2)

        assert (grid.width, grid.height) == (2, 3)


class TestGridIteration:
    """Test the row-major traversal contract."""

    def test_iter(self):
        """Pairs come out row-major with x varying fastest."""
        grid = Grid2D.create(2, 3, lambda x, y: (x, y))
        assert list(grid.iterate()) == [
            ((0, 0), (0, 0)),
            ((1, 0), (1, 0)),
            ((0, 1), (0, 1)),
            ((1, 1), (1, 1)),
            ((0, 2), (0, 2)),
            ((1, 2), (1, 2)),
        ]

    def test_iteration_is_restartable(self):
        """Each call starts a fresh traversal."""
        grid = Grid2D.create(3, 2, lambda x, y: x + y)
        assert list(grid.iterate()) == list(grid.iterate())
        assert list(grid) == list(grid.iterate())

    @pytest.mark.parametrize("width,height", [(1, 1), (1, 7), (7, 1), (5, 4), (40, 30)])
    def test_every_cell_visited_once(self, width, height):
        """Traversal covers each coordinate exactly once."""
        grid = Grid2D.create(width, height, lambda x, y: None)
        coords = [coord for coord, _ in grid.iterate()]

        assert len(coords) == width * height
        assert coords == [(x, y) for y in range(height) for x in range(width)]

    def test_map_builds_new_grid(self):
        """map reads the source grid and returns a new one."""
        grid = Grid2D.create(3, 2, lambda x, y: x + y)
        doubled = grid.map(lambda coord, value: value * 2)

        assert doubled.cells == (0, 2, 4, 2, 4, 6)
        assert grid.cells == (0, 1, 2, 1, 2, 3)


class TestGridEquality:
    """Test grid equality comparison."""

    def test_equal_grids(self):
        """Same shape and data compare equal."""
        assert Grid2D.from_sequence(2, 1, "ab") == Grid2D.from_sequence(2, 1, "ab")

    def test_same_data_different_shape(self):
        """Shape is part of equality."""
        assert Grid2D.from_sequence(2, 1, "ab") != Grid2D.from_sequence(1, 2, "ab")

    def test_unhashable_values_supported(self):
        """Grids of mutable values compare by content; grids themselves are unhashable."""
        first = Grid2D.create(2, 2, lambda x, y: [x, y])
        second = Grid2D.create(2, 2, lambda x, y: [x, y])

        assert first == second
        assert first.get(1, 0) == [1, 0]
        with pytest.raises(TypeError):
            hash(first)

    def test_non_grid_comparison(self):
        """Grid is not equal to non-grid objects."""
        grid = Grid2D.from_sequence(1, 1, [0])
        assert grid != (0,)
        assert grid != None
