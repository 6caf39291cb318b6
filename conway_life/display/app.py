"""
Windowed driver loop.

Opens a pygame window and repeats render, advance, wait until the window is
closed, Escape is pressed, or an optional generation limit is reached. There
is no mid-tick cancellation; quit events are checked once per tick.
"""

import time
from typing import Callable, Iterable, Optional, Tuple
import logging

import pygame

from ..config import BACKGROUND_COLOR, SimulationConfig
from ..core.board import LifeBoard
from .renderer import BoardRenderer

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Conway's Game of Life"


def should_quit(events: Iterable[pygame.event.Event]) -> bool:
    """Check polled events for a window close or Escape key press."""
    for event in events:
        if event.type == pygame.QUIT:
            return True
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return True
    return False


class LifeApp:
    """Runs a LifeBoard in a pygame window at a fixed tick rate."""

    def __init__(self,
                 config: Optional[SimulationConfig] = None,
                 board: Optional[LifeBoard] = None,
                 sleep: Callable[[float], None] = time.sleep):
        """Initialize the app.

        Args:
            config: Simulation settings (defaults if None)
            board: Starting board; a random one is built from config if None
            sleep: Wait function called with the tick interval between frames
        """
        self.config = config or SimulationConfig()
        if board is None:
            board = LifeBoard.create_random(
                self.config.width,
                self.config.height,
                density=self.config.density,
                seed=self.config.seed
            )
        self.board = board
        self.renderer = BoardRenderer(
            self.config.cell_size,
            self.config.cell_size,
            self.config.alive_color,
            self.config.dead_color
        )
        self._sleep = sleep

    def render_frame(self, screen: pygame.Surface) -> None:
        """Clear the screen and draw the current generation."""
        screen.fill(BACKGROUND_COLOR)
        self.renderer.draw(self.board, screen)

    def window_size(self) -> Tuple[int, int]:
        """Configured window size, or just big enough for the whole board."""
        if self.config.window_size is not None:
            return self.config.window_size
        width, height = self.renderer.surface_size(self.board)
        # pygame treats a zero dimension as "use the desktop size"
        return max(width, 1), max(height, 1)

    def run(self, max_generations: Optional[int] = None) -> int:
        """Run the driver loop until quit.

        Args:
            max_generations: Stop after this many advances (None = run until quit)

        Returns:
            Number of generations advanced
        """
        pygame.init()
        try:
            screen = pygame.display.set_mode(self.window_size())
            pygame.display.set_caption(WINDOW_TITLE)
            logger.info(f"Starting simulation: {self.board!r}, tick={self.config.tick_seconds}s")

            advanced = 0
            while max_generations is None or advanced < max_generations:
                if should_quit(pygame.event.get()):
                    logger.info("Quit requested")
                    break

                self.render_frame(screen)
                self.board.advance()
                advanced += 1

                pygame.display.flip()
                self._sleep(self.config.tick_seconds)
        finally:
            pygame.quit()

        logger.info(f"Simulation stopped after {advanced} generations")
        return advanced
