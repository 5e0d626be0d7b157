"""Fixed simulation settings."""

from dataclasses import dataclass
from typing import Tuple

GRID_WIDTH = 40
GRID_HEIGHT = 40
SEED_DENSITY = 0.2         # Probability each starting cell is alive
TICK_INTERVAL = 0.2        # Seconds between generations
SCREEN_OFFSET = (2, 2)     # 1-based (column, row) of the top-left cell


@dataclass(frozen=True)
class LifeConfig:
    """Bundle of the settings a run uses. Defaults are the fixed constants."""

    width: int = GRID_WIDTH
    height: int = GRID_HEIGHT
    density: float = SEED_DENSITY
    interval: float = TICK_INTERVAL
    offset: Tuple[int, int] = SCREEN_OFFSET

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Grid dimensions must be positive, got {self.width}x{self.height}")
        if not 0.0 <= self.density <= 1.0:
            raise ValueError(f"Density must be between 0 and 1, got {self.density}")
        if self.interval < 0:
            raise ValueError(f"Tick interval cannot be negative, got {self.interval}")
        if self.offset[0] < 1 or self.offset[1] < 1:
            raise ValueError(f"Screen offset is 1-based, got {self.offset}")
