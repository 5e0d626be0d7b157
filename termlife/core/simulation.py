"""Double-buffered simulation loop.

Two grids live in a two-element list for the lifetime of the run. Each
tick renders the current one, computes the next generation into the other,
then flips which index is current. No cell data is copied between them.
"""

import logging
import time
from typing import Callable, List, Optional

import numpy as np

from .conway import transition
from .grid import Grid

logger = logging.getLogger(__name__)


class Simulation:
    """Runs generations of a grid, alternating render and transition.

    Attributes:
        buffers: The two grids, allocated once
        current_index: Index into buffers of the grid read this tick
        generation: Number of completed steps (bookkeeping only)
    """

    def __init__(self,
                 grid: Grid,
                 renderer=None,
                 interval: float = 0.2,
                 sleep: Callable[[float], None] = time.sleep):
        """Initialize with grid as the current buffer.

        Args:
            grid: Initial generation; becomes buffer 0
            renderer: Object with a render(grid) method, or None to skip drawing
            interval: Seconds to wait after each tick
            sleep: Delay function, injectable for tests
        """
        self.buffers: List[Grid] = [grid, Grid.from_grid(grid)]
        self.current_index = 0
        self.renderer = renderer
        self.interval = interval
        self.sleep = sleep
        self.generation = 0

        logger.debug(f"Simulation ready on {grid.width}x{grid.height} grid, interval={interval}s")

    @classmethod
    def seeded(cls,
               width: int,
               height: int,
               density: float = 0.2,
               rng: Optional[np.random.Generator] = None,
               **kwargs) -> 'Simulation':
        """Create a simulation whose first grid is randomly seeded.

        Args:
            width: Grid width (cells)
            height: Grid height (cells)
            density: Probability each cell starts alive
            rng: Randomness source; pass a seeded generator for a reproducible board
            **kwargs: Forwarded to the constructor
        """
        grid = Grid(width, height)
        grid.randomize(density, rng)
        logger.debug(f"Seeded {grid.count_alive()} alive cells at density {density}")
        return cls(grid, **kwargs)

    @property
    def current(self) -> Grid:
        return self.buffers[self.current_index]

    @property
    def next(self) -> Grid:
        return self.buffers[1 - self.current_index]

    def step(self) -> int:
        """Compute the next generation and make it current.

        Returns:
            Number of alive cells in the new current grid
        """
        live_count = transition(self.current, self.next)
        self.current_index = 1 - self.current_index
        self.generation += 1
        return live_count

    def tick(self) -> int:
        """Render, step, then wait one interval."""
        if self.renderer is not None:
            self.renderer.render(self.current)

        live_count = self.step()
        logger.debug(f"Generation {self.generation}: {live_count} alive")

        self.sleep(self.interval)
        return live_count

    def run(self, max_ticks: Optional[int] = None) -> None:
        """Tick until max_ticks have run, or forever when max_ticks is None."""
        ticks = 0
        while max_ticks is None or ticks < max_ticks:
            self.tick()
            ticks += 1
