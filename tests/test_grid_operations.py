"""Unit tests for core grid operations.

Covers construction, the dead-border lookup policy, writes, cloning and
seeding. The flat cell array must always hold width*height entries.
"""

import os

import numpy as np
import psutil
import pytest

from termlife.core.grid import Cell, Grid


class TestGridInitialization:
    """Test grid initialization and basic properties."""

    def test_initial_state_dead(self):
        """New grid should be all dead by default."""
        grid = Grid(4, 3)
        assert grid.is_empty()
        assert grid.count_alive() == 0
        assert all(grid.at(x, y) is Cell.DEAD for y in range(3) for x in range(4))

    def test_fixed_size(self):
        """Cell storage length is width * height."""
        grid = Grid(7, 5)
        assert len(grid.cells) == 35
        assert len(grid) == 35

    @pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 3)])
    def test_non_positive_dimensions(self, width, height):
        with pytest.raises(ValueError, match="must be positive"):
            Grid(width, height)

    def test_initial_state_from_array(self):
        """Grid can be initialized from a (height, width) array."""
        initial = np.array([[True, False, False],
                            [False, False, True]])
        grid = Grid(3, 2, initial)

        assert grid.at(0, 0) is Cell.ALIVE
        assert grid.at(1, 0) is Cell.DEAD
        assert grid.at(2, 1) is Cell.ALIVE
        assert len(grid.cells) == 6

    def test_initial_state_is_copied(self):
        initial = np.zeros((2, 2), dtype=bool)
        grid = Grid(2, 2, initial)
        initial[0, 0] = True
        assert grid.at(0, 0) is Cell.DEAD

    def test_initial_state_validation(self):
        """Mismatched initial state raises ValueError."""
        with pytest.raises(ValueError, match="shape.*doesn't match"):
            Grid(4, 4, np.zeros((2, 2), dtype=bool))


class TestBoundaryPolicy:
    """Off-grid coordinates read as dead and never raise."""

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (3, 0), (0, 3), (-5, -5), (100, 1)])
    def test_out_of_range_is_dead(self, x, y):
        grid = Grid(3, 3, np.ones((3, 3), dtype=bool))
        assert grid.at(x, y) is Cell.DEAD

    def test_in_range_reads_state(self):
        grid = Grid(3, 3, np.ones((3, 3), dtype=bool))
        assert grid.at(0, 0) is Cell.ALIVE
        assert grid.at(2, 2) is Cell.ALIVE


class TestGridManipulation:
    """Test grid state manipulation methods."""

    def test_get_set_operations(self):
        grid = Grid(16, 16)

        grid.set(5, 3, Cell.ALIVE)
        assert grid.at(5, 3) is Cell.ALIVE
        assert grid.cells[3 * 16 + 5]

        grid.set(5, 3, Cell.DEAD)
        assert grid.at(5, 3) is Cell.DEAD

    def test_set_is_row_major(self):
        grid = Grid(3, 2)
        grid.set(2, 1, Cell.ALIVE)
        assert grid.cells.tolist() == [False, False, False, False, False, True]

    def test_bounds_checking(self):
        """Out-of-bounds writes raise IndexError, negative ones included."""
        grid = Grid(16, 16)

        with pytest.raises(IndexError):
            grid.set(16, 0, Cell.ALIVE)

        with pytest.raises(IndexError):
            grid.set(0, 16, Cell.ALIVE)

        with pytest.raises(IndexError, match="out of bounds"):
            grid.set(-1, 0, Cell.ALIVE)

        assert len(grid.cells) == 256
        assert grid.is_empty()

    def test_from_grid_copies_shape_and_contents(self):
        source = Grid(5, 4)
        source.set(1, 2, Cell.ALIVE)

        clone = Grid.from_grid(source)
        assert clone == source
        assert (clone.width, clone.height) == (5, 4)

        clone.set(0, 0, Cell.ALIVE)
        assert source.at(0, 0) is Cell.DEAD

    def test_from_pattern_with_padding(self):
        grid = Grid.from_pattern(np.array([[1, 1, 1]]), pad=1)
        assert (grid.width, grid.height) == (5, 3)
        assert grid.count_alive() == 3
        assert [grid.at(x, 1) for x in range(5)] == [
            Cell.DEAD, Cell.ALIVE, Cell.ALIVE, Cell.ALIVE, Cell.DEAD
        ]

    def test_str_uses_render_glyphs(self):
        grid = Grid.from_pattern(np.array([[1, 0], [0, 1]]))
        assert str(grid) == "x`\n`x"


class TestRandomize:
    """Seeding from an injectable randomness source."""

    def test_reproducible_with_fixed_seed(self):
        a = Grid(40, 40)
        b = Grid(40, 40)
        a.randomize(0.2, np.random.default_rng(1234))
        b.randomize(0.2, np.random.default_rng(1234))
        assert a == b
        assert len(a.cells) == 1600

    def test_density_extremes(self):
        grid = Grid(10, 10)
        grid.randomize(1.0, np.random.default_rng(0))
        assert grid.count_alive() == 100
        grid.randomize(0.0, np.random.default_rng(0))
        assert grid.is_empty()

    def test_default_density_is_roughly_one_fifth(self):
        grid = Grid(100, 100)
        grid.randomize(rng=np.random.default_rng(42))
        assert 0.17 < grid.count_alive() / 10000 < 0.23

    def test_invalid_density(self):
        with pytest.raises(ValueError, match="between 0 and 1"):
            Grid(4, 4).randomize(1.5)


def test_memory_usage_verification():
    """Two 40x40 buffers stay well under a few MB."""
    process = psutil.Process(os.getpid())
    memory_before = process.memory_info().rss / 1024 / 1024

    grids = [Grid(40, 40), Grid(40, 40)]

    memory_after = process.memory_info().rss / 1024 / 1024
    assert memory_after - memory_before < 10, f"Grids used {memory_after - memory_before:.1f}MB"
    assert all(len(g.cells) == 1600 for g in grids)
