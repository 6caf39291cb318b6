#!/usr/bin/env python3
"""
Glider Demonstration Script

Places a glider on an otherwise empty board, advances it and reports how far
its center of mass travelled. Exits non-zero if the glider loses cells or
fails to move diagonally.
"""

import sys
import logging

import numpy as np

from conway_life.core.board import LifeBoard, glider_pattern

logger = logging.getLogger(__name__)


def center_of_mass(board: LifeBoard):
    """(x, y) centroid of live cells, (0.0, 0.0) for an empty board."""
    rows, cols = np.nonzero(board.to_array())
    if len(rows) == 0:
        return (0.0, 0.0)
    return (float(np.mean(cols)), float(np.mean(rows)))


def run_glider_demo(board_size=30, steps=30, start_x=5, start_y=5):
    """Run glider demonstration and return metrics."""
    logger.info(f"Board size: {board_size}x{board_size}, steps: {steps}, start: ({start_x}, {start_y})")

    board = LifeBoard.from_pattern(board_size, board_size, glider_pattern(), start_x, start_y)
    initial_com = center_of_mass(board)

    for step in range(steps):
        live_count = board.advance()
        if step % 5 == 0 or step == steps - 1:
            com = center_of_mass(board)
            logger.info(f"Step {step}: COM=({com[0]:.1f}, {com[1]:.1f}), Live={live_count}")
        if live_count != 5:
            raise RuntimeError(f"Glider mass changed to {live_count} at step {step}")

    final_com = center_of_mass(board)
    delta_x = final_com[0] - initial_com[0]
    delta_y = final_com[1] - initial_com[1]

    results = {
        "displacement_x": delta_x,
        "displacement_y": delta_y,
        "total_distance": (delta_x**2 + delta_y**2)**0.5,
        "movement_diagonal": delta_y != 0 and 0.7 <= abs(delta_x / delta_y) <= 1.4,
        "final_live_count": board.live_count(),
    }

    if not results["movement_diagonal"]:
        raise RuntimeError(f"Movement not diagonal (dx={delta_x:.1f}, dy={delta_y:.1f})")

    logger.info(f"Glider moved {results['total_distance']:.2f} cells diagonally")
    return results


if __name__ == "__main__":
    import argparse

    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

    parser = argparse.ArgumentParser(description="Glider Demonstration")
    parser.add_argument("--board-size", type=int, default=30, help="Board size (square)")
    parser.add_argument("--steps", type=int, default=30, help="Generations to run")
    parser.add_argument("--start-x", type=int, default=5, help="Glider start X position")
    parser.add_argument("--start-y", type=int, default=5, help="Glider start Y position")

    args = parser.parse_args()

    try:
        run_glider_demo(
            board_size=args.board_size,
            steps=args.steps,
            start_x=args.start_x,
            start_y=args.start_y
        )
    except Exception as e:
        logger.error(f"Demonstration failed: {e}")
        sys.exit(1)
