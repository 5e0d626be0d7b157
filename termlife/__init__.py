"""
termlife: Conway's Game of Life animated in a terminal.

A fixed-size grid with a dead border, a double-buffered tick loop,
and an ANSI renderer.
"""

from .core.grid import Cell, Grid
from .core.conway import transition
from .core.simulation import Simulation

__version__ = "0.1.0"

__all__ = [
    'Cell',
    'Grid',
    'Simulation',
    'transition',
]
