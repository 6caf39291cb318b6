"""
Board renderer

Draws each cell of a LifeBoard as a filled rectangle on a pygame surface.
Only reads the board; callers render before calling advance().
"""

from typing import Tuple
import logging

import pygame

from ..config import ALIVE_COLOR, DEAD_COLOR, DEFAULT_CELL_SIZE, Color
from ..core.board import LifeBoard
from ..core.rules import Cell

logger = logging.getLogger(__name__)


class BoardRenderer:
    """Paints board cells at (x * cell_width, y * cell_height)."""

    def __init__(self,
                 cell_width: int = DEFAULT_CELL_SIZE,
                 cell_height: int = DEFAULT_CELL_SIZE,
                 alive_color: Color = ALIVE_COLOR,
                 dead_color: Color = DEAD_COLOR):
        if cell_width <= 0 or cell_height <= 0:
            raise ValueError(f"Cell size must be positive, got {cell_width}x{cell_height}")

        self.cell_width = cell_width
        self.cell_height = cell_height
        self.colors = {
            Cell.ALIVE: pygame.Color(*alive_color),
            Cell.DEAD: pygame.Color(*dead_color),
        }

    def surface_size(self, board: LifeBoard) -> Tuple[int, int]:
        """Pixel size needed to show the whole board."""
        return board.width * self.cell_width, board.height * self.cell_height

    def cell_rect(self, x: int, y: int) -> pygame.Rect:
        return pygame.Rect(x * self.cell_width, y * self.cell_height,
                           self.cell_width, self.cell_height)

    def draw(self, board: LifeBoard, target: pygame.Surface) -> None:
        """Fill one rectangle per cell in row-major order."""
        for (x, y), cell in board.cells():
            target.fill(self.colors[cell], self.cell_rect(x, y))
