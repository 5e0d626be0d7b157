"""Command-line entry point: seed a board and animate it until killed."""

import argparse
import logging
import sys
import time
from typing import Callable, List, Optional, TextIO

import numpy as np

from .config import LifeConfig
from .core.simulation import Simulation
from .render.terminal import TerminalRenderer

logger = logging.getLogger(__name__)


def run_life(config: LifeConfig,
             seed: Optional[int] = None,
             stream: Optional[TextIO] = None,
             max_ticks: Optional[int] = None,
             sleep: Callable[[float], None] = time.sleep) -> Simulation:
    """Draw the frame, seed the board, and run the tick loop.

    Args:
        config: Grid size, seed density, interval and screen offset
        seed: Seed for the initial board; None for a fresh random board
        stream: Render target, stdout when omitted
        max_ticks: Stop after this many ticks; None runs forever
        sleep: Delay function between ticks

    Returns:
        The simulation, once a bounded run finishes
    """
    renderer = TerminalRenderer(stream, config.offset)
    renderer.draw_frame(config.width, config.height)

    simulation = Simulation.seeded(
        config.width,
        config.height,
        density=config.density,
        rng=np.random.default_rng(seed),
        renderer=renderer,
        interval=config.interval,
        sleep=sleep,
    )
    logger.info(f"Starting {config.width}x{config.height} board, seed={seed}")

    simulation.run(max_ticks)
    return simulation


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Conway's Game of Life in the terminal")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible initial board")
    parser.add_argument("--log-file", default=None, help="Write debug logs to this file")
    args = parser.parse_args(argv)

    # stdout is the render surface, keep log records off it
    if args.log_file:
        logging.basicConfig(filename=args.log_file, level=logging.DEBUG,
                            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    else:
        logging.basicConfig(stream=sys.stderr, level=logging.WARNING,
                            format='%(asctime)s - %(levelname)s - %(message)s')

    config = LifeConfig()
    try:
        run_life(config, seed=args.seed)
    except KeyboardInterrupt:
        TerminalRenderer(offset=config.offset).park_cursor(config.height)
        return 130
    except Exception as e:
        logger.error(f"Simulation failed: {e}")
        return 1
    return 0
