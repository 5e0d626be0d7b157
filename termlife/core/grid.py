"""Core grid state management for the terminal Game of Life.

The grid is a fixed-size rectangle of cells stored as a flat, row-major
numpy boolean array. Anything outside the rectangle reads as dead, which
gives the simulation a fixed dead border instead of a toroidal wrap.
"""

from enum import IntEnum
import logging
from typing import Optional

import numpy as np

logger = logging.getLogger(__name__)


class Cell(IntEnum):
    """Two-state cell value. Truthy exactly when alive."""

    DEAD = 0
    ALIVE = 1


class Grid:
    """Fixed-size 2D Game of Life grid.

    Attributes:
        width: Grid width in cells
        height: Grid height in cells
        cells: Flat numpy boolean array (True=alive), row-major, len == width*height
    """

    def __init__(self, width: int, height: int, initial_state: Optional[np.ndarray] = None):
        """Initialize grid with given dimensions, all cells dead.

        Args:
            width: Grid width (cells)
            height: Grid height (cells)
            initial_state: Optional (height, width) or flat array of cell states

        Raises:
            ValueError: If dimensions are invalid or initial_state shape doesn't match
        """
        if width < 1 or height < 1:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

        self.width = width
        self.height = height

        if initial_state is not None:
            state = np.asarray(initial_state)
            if state.shape not in ((height, width), (width * height,)):
                raise ValueError(
                    f"Initial state shape {state.shape} doesn't match grid size {(height, width)}"
                )
            self.cells = state.astype(bool).reshape(width * height)
        else:
            self.cells = np.zeros(width * height, dtype=bool)

        logger.debug(f"Created grid {width}x{height}")

    @classmethod
    def from_grid(cls, source: 'Grid') -> 'Grid':
        """Create a grid with the same dimensions and contents as source."""
        return cls(source.width, source.height, source.cells)

    @classmethod
    def from_pattern(cls, pattern: np.ndarray, pad: int = 0) -> 'Grid':
        """Create grid from a 2D pattern array with dead padding.

        Args:
            pattern: 2D array, truthy entries are alive
            pad: Dead cells added on every side of the pattern

        Returns:
            Grid: New grid containing the pattern
        """
        pattern = np.asarray(pattern, dtype=bool)
        height, width = pattern.shape
        state = np.zeros((height + 2 * pad, width + 2 * pad), dtype=bool)
        state[pad:pad + height, pad:pad + width] = pattern
        return cls(width + 2 * pad, height + 2 * pad, state)

    def randomize(self, density: float = 0.2, rng: Optional[np.random.Generator] = None) -> None:
        """Make each cell independently alive with probability density.

        Args:
            density: Probability of a cell being alive (0.0 to 1.0)
            rng: Randomness source; a fresh default generator when omitted

        Raises:
            ValueError: If density is outside [0, 1]
        """
        if not 0.0 <= density <= 1.0:
            raise ValueError(f"Density must be between 0 and 1, got {density}")

        if rng is None:
            rng = np.random.default_rng()
        self.cells[:] = rng.random(self.width * self.height) < density

    def at(self, x: int, y: int) -> Cell:
        """Get the cell at (x, y); coordinates off the grid read as dead."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return Cell.DEAD
        return Cell.ALIVE if self.cells[y * self.width + x] else Cell.DEAD

    def set(self, x: int, y: int, value: Cell) -> None:
        """Overwrite the cell at (x, y).

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Coordinates ({x}, {y}) out of bounds for {self.width}x{self.height} grid")
        self.cells[y * self.width + x] = bool(value)

    def count_alive(self) -> int:
        """Count total number of alive cells."""
        return int(np.count_nonzero(self.cells))

    def is_empty(self) -> bool:
        """Check if all cells are dead."""
        return not self.cells.any()

    def to_array(self) -> np.ndarray:
        """Get cells as a (height, width) array copy."""
        return self.cells.reshape(self.height, self.width).copy()

    def __len__(self) -> int:
        return len(self.cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (self.width == other.width and
                self.height == other.height and
                np.array_equal(self.cells, other.cells))

    def __str__(self) -> str:
        """Glyph dump, x for alive and ` for dead."""
        rows = self.to_array()
        return '\n'.join(''.join('x' if alive else '`' for alive in row) for row in rows)

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height}, alive={self.count_alive()})"
