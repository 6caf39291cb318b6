#!/usr/bin/env python3
"""
Conway's Game of Life command line entry point.

Runs a random board either in a pygame window or, with --headless, as text
on stdout.
"""

import sys
import time
import argparse
import logging
from typing import Callable, List, Optional, TextIO

from .config import SimulationConfig
from .core.board import LifeBoard

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="conway-life", description="Conway's Game of Life")
    parser.add_argument("--width", type=int, help="Board width in cells (default 40)")
    parser.add_argument("--height", type=int, help="Board height in cells (default 30)")
    parser.add_argument("--cell-size", type=int, help="Cell size in pixels (default 20)")
    parser.add_argument("--tick", type=float, dest="tick_seconds", help="Seconds per generation (default 0.25)")
    parser.add_argument("--density", type=float, help="Initial live cell probability (default 0.5)")
    parser.add_argument("--seed", type=int, help="Random seed for a reproducible start")
    parser.add_argument("--generations", type=int, help="Stop after this many generations")
    parser.add_argument("--headless", action="store_true", help="Print generations as text instead of opening a window")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    return parser


def run_headless(board: LifeBoard,
                 generations: Optional[int],
                 tick_seconds: float,
                 out: Optional[TextIO] = None,
                 sleep: Callable[[float], None] = time.sleep) -> int:
    """Print each generation, then advance, until the limit (or forever).

    Returns:
        Number of generations advanced
    """
    out = sys.stdout if out is None else out
    advanced = 0
    while generations is None or advanced < generations:
        out.write(f"Generation {board.generation} ({board.live_count()} alive)\n")
        out.write(f"{board}\n\n")
        out.flush()

        board.advance()
        advanced += 1
        sleep(tick_seconds)

    return advanced


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    try:
        config = SimulationConfig.from_env(
            width=args.width,
            height=args.height,
            cell_size=args.cell_size,
            tick_seconds=args.tick_seconds,
            density=args.density,
            seed=args.seed
        )
        if args.generations is not None and args.generations < 0:
            raise ValueError(f"Generations must be non-negative, got {args.generations}")

        logger.info(f"Configuration: {config!r}")

        if args.headless:
            board = LifeBoard.create_random(config.width, config.height,
                                            density=config.density, seed=config.seed)
            advanced = run_headless(board, args.generations, config.tick_seconds)
        else:
            # pygame is only imported when a window is wanted
            from .display.app import LifeApp
            advanced = LifeApp(config).run(max_generations=args.generations)

    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 0
    except Exception as e:
        logger.error(f"Simulation failed: {e}")
        return 1

    logger.info(f"Finished after {advanced} generations")
    return 0


if __name__ == "__main__":
    sys.exit(main())
