"""Terminal drawing with ANSI cursor escapes.

Rows are placed by explicit cursor jumps rather than newlines, so each
frame overwrites the previous one in place.
"""

import logging
import sys
from typing import Optional, TextIO, Tuple

from ..core.grid import Grid

logger = logging.getLogger(__name__)

CLEAR_ALL = '\033[2J'

ALIVE_GLYPH = 'x'
DEAD_GLYPH = '`'


def goto(x: int, y: int) -> str:
    """Escape moving the cursor to 1-based column x, row y."""
    return f'\033[{y};{x}H'


def right(n: int = 1) -> str:
    """Escape moving the cursor n columns right."""
    return f'\033[{n}C'


def draw_box(stream: TextIO, topleft: Tuple[int, int], bottomright: Tuple[int, int]) -> None:
    """Clear the screen and draw a box-drawing frame between two corners.

    Args:
        stream: Text stream to write to
        topleft: 1-based (column, row) of the top-left corner
        bottomright: 1-based (column, row) of the bottom-right corner
    """
    left, top = topleft
    rightmost, bottom = bottomright

    stream.write(CLEAR_ALL)

    for y in range(top + 1, bottom):
        stream.write(f'{goto(left, y)}│{goto(rightmost, y)}│')

    for x in range(left + 1, rightmost):
        stream.write(f'{goto(x, top)}─{goto(x, bottom)}─')

    stream.write(
        f'{goto(left, top)}┌{goto(rightmost, top)}┐'
        f'{goto(left, bottom)}└{goto(rightmost, bottom)}┘\n'
    )


class TerminalRenderer:
    """Draws grids at a fixed screen offset.

    Each cell takes two columns: its glyph, then a one-column cursor skip.
    """

    def __init__(self, stream: Optional[TextIO] = None, offset: Tuple[int, int] = (2, 2)):
        self.stream = stream if stream is not None else sys.stdout
        self.offset = offset

    def frame_corners(self, width: int, height: int) -> Tuple[Tuple[int, int], Tuple[int, int]]:
        """Corners of the box enclosing a width x height grid."""
        return (1, 1), (width * 2 + 2, height + 2)

    def draw_frame(self, width: int, height: int) -> None:
        """Clear the screen and draw the border once, before the first render."""
        topleft, bottomright = self.frame_corners(width, height)
        draw_box(self.stream, topleft, bottomright)
        logger.debug(f"Drew frame {topleft} -> {bottomright}")

    def render(self, grid: Grid) -> None:
        """Write every cell of grid, one cursor jump per row."""
        col, row = self.offset
        skip = right(1)
        parts = []
        for y in range(grid.height):
            parts.append(goto(col, row + y))
            for x in range(grid.width):
                parts.append(ALIVE_GLYPH if grid.at(x, y) else DEAD_GLYPH)
                parts.append(skip)

        self.stream.write(''.join(parts))
        self.stream.flush()

    def park_cursor(self, height: int) -> None:
        """Move the cursor below the frame."""
        _, (_, bottom) = self.frame_corners(1, height)
        self.stream.write(f'{goto(1, bottom + 1)}\n')
        self.stream.flush()
