"""Tests for the height grid."""

import pytest
import numpy as np
from py_heightmap.core.grid import HeightGrid, is_valid_size
from py_heightmap.core.errors import (
    FrozenGridError, HeightmapError, InvalidSizeError, OutOfBoundsError
)


class TestGridSize:
    """Test size validation."""

    @pytest.mark.parametrize("size", [3, 5, 9, 17, 33, 65, 129, 257, 513])
    def test_valid_sizes(self, size):
        """Test that 2^k + 1 sizes are accepted."""
        grid = HeightGrid(size)
        assert grid.dimensions() == (size, size)

    @pytest.mark.parametrize("size", [-5, 0, 1, 2, 4, 6, 10, 100, 512, 514])
    def test_invalid_sizes(self, size):
        """Test that other sizes raise InvalidSizeError."""
        with pytest.raises(InvalidSizeError) as exc_info:
            HeightGrid(size)
        assert exc_info.value.size == size

    @pytest.mark.parametrize("size", [5.0, "5", True, None])
    def test_non_integer_sizes(self, size):
        """Test that non-integer sizes are rejected."""
        assert not is_valid_size(size)
        with pytest.raises(InvalidSizeError):
            HeightGrid(size)

    def test_numpy_integer_size(self):
        """Test that NumPy integers count as integers."""
        grid = HeightGrid(np.int64(9))
        assert grid.size == 9
        assert isinstance(grid.size, int)

    def test_invalid_size_error_types(self):
        """Test that size errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            HeightGrid(4)
        with pytest.raises(HeightmapError):
            HeightGrid(4)

    def test_levels(self):
        """Test that levels equals k for size 2^k + 1."""
        assert HeightGrid(3).levels == 1
        assert HeightGrid(5).levels == 2
        assert HeightGrid(257).levels == 8

    def test_create_alias(self):
        """Test the create() constructor."""
        grid = HeightGrid.create(17)
        assert isinstance(grid, HeightGrid)
        assert grid.size == 17


class TestGridAccess:
    """Test addressed access and bounds checking."""

    @pytest.fixture
    def grid(self):
        return HeightGrid(5)

    def test_new_grid_is_unset(self, grid):
        """Test that a fresh grid has no assigned cells."""
        assert not grid.is_set(0, 0)
        assert not grid.is_complete()
        assert np.isnan(grid.get(2, 3))

    def test_set_and_get(self, grid):
        """Test round trip of a single cell."""
        grid.set(1, 3, -2.75)
        assert grid.get(1, 3) == -2.75
        assert grid.is_set(1, 3)
        assert not grid.is_set(3, 1)

    def test_x_is_column(self, grid):
        """Test that x addresses columns and y addresses rows."""
        grid.set(4, 0, 7.0)
        assert grid.to_array()[0, 4] == 7.0

    def test_values_not_clamped(self, grid):
        """Test that the grid stores values verbatim."""
        grid.set(0, 0, 1e9)
        grid.set(0, 1, -1e9)
        assert grid.get(0, 0) == 1e9
        assert grid.get(0, 1) == -1e9

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (5, 0), (0, 5), (5, 5), (100, 2)])
    def test_get_out_of_bounds(self, grid, x, y):
        """Test that reads outside [0, size) fail."""
        with pytest.raises(OutOfBoundsError) as exc_info:
            grid.get(x, y)
        assert exc_info.value.size == 5
        assert (exc_info.value.x, exc_info.value.y) == (x, y)

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, 5)])
    def test_set_out_of_bounds(self, grid, x, y):
        """Test that writes outside [0, size) fail without mutating."""
        before = grid.to_array().copy()
        with pytest.raises(OutOfBoundsError):
            grid.set(x, y, 1.0)
        np.testing.assert_array_equal(grid.to_array(), before)

    def test_non_integer_coordinates(self, grid):
        """Test that fractional coordinates are not addressable."""
        with pytest.raises(OutOfBoundsError):
            grid.get(1.5, 2)

    def test_out_of_bounds_is_index_error(self, grid):
        """Test that bounds errors can be caught as IndexError."""
        with pytest.raises(IndexError):
            grid.get(9, 9)

    def test_corners(self, grid):
        """Test corner coordinate order."""
        assert grid.corners() == ((0, 0), (0, 4), (4, 0), (4, 4))

    def test_complete_when_all_set(self):
        """Test the coverage query."""
        grid = HeightGrid(3)
        for y in range(3):
            for x in range(3):
                grid.set(x, y, float(x + y))
        assert grid.is_complete()


class TestGridFreeze:
    """Test the read-only snapshot."""

    def test_freeze_blocks_writes(self):
        """Test that a frozen grid refuses writes."""
        grid = HeightGrid(3)
        grid.set(0, 0, 1.0)
        assert grid.freeze() is grid
        assert grid.frozen

        with pytest.raises(FrozenGridError):
            grid.set(0, 0, 2.0)
        assert grid.get(0, 0) == 1.0

    def test_array_view_is_read_only(self):
        """Test that the exported view cannot be written through."""
        grid = HeightGrid(3)
        view = grid.to_array()
        with pytest.raises(ValueError):
            view[0, 0] = 1.0
