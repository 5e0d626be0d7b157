"""Conway's Game of Life rules engine.

Computes the next generation of a grid into a separate output grid. Reads
only ever touch the current grid and writes only ever touch the output
grid, so cells within one generation have no ordering dependency.
"""

import logging
from typing import Dict, Set, Tuple

from .grid import Cell, Grid

logger = logging.getLogger(__name__)


# Standard Conway rules
SURVIVAL_SET: Set[int] = {2, 3}  # Live cells survive with 2-3 neighbors
BIRTH_SET: Set[int] = {3}        # Dead cells born with exactly 3 neighbors


def next_state(cell: Cell, live_neighbors: int) -> Cell:
    """Apply Conway's rules to determine the next cell state.

    Args:
        cell: Current cell state
        live_neighbors: Number of live neighbors (0-8)

    Returns:
        Next cell state
    """
    if cell:
        alive = live_neighbors in SURVIVAL_SET
    else:
        alive = live_neighbors in BIRTH_SET
    return Cell.ALIVE if alive else Cell.DEAD


def count_neighbors(grid: Grid, x: int, y: int) -> int:
    """Count living neighbors of a cell using the Moore neighborhood.

    Off-grid neighbors count as dead.

    Args:
        grid: The grid containing the cell
        x: X coordinate of cell (column)
        y: Y coordinate of cell (row)

    Returns:
        Number of living neighbors (0-8)
    """
    count = 0
    for dy in (-1, 0, 1):
        for dx in (-1, 0, 1):
            if dx == 0 and dy == 0:
                continue
            if grid.at(x + dx, y + dy):
                count += 1
    return count


def transition(current: Grid, output: Grid) -> int:
    """Write the next generation of current into output.

    current is never modified and output is never read; every cell of
    output is overwritten.

    Args:
        current: Grid holding this generation
        output: Grid receiving the next generation

    Returns:
        Number of alive cells written to output

    Raises:
        ValueError: If the grids differ in size or are the same object
    """
    if current.width != output.width or current.height != output.height:
        raise ValueError(
            f"Input and output grid sizes are not the same: "
            f"{current.width}x{current.height} vs {output.width}x{output.height}"
        )
    if current is output:
        raise ValueError("Input and output grids must be distinct buffers")

    live_count = 0
    for y in range(current.height):
        for x in range(current.width):
            cell = next_state(current.at(x, y), count_neighbors(current, x, y))
            output.set(x, y, cell)
            if cell:
                live_count += 1

    return live_count


def rule_table() -> Dict[Tuple[Cell, int], Cell]:
    """Get the rule outcome for every (cell state, neighbor count) pair."""
    return {
        (cell, neighbors): next_state(cell, neighbors)
        for cell in Cell
        for neighbors in range(9)
    }
