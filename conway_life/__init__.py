"""
Conway's Game of Life on a fixed-size grid, rendered to a pygame window.
"""

from .core import Cell, DimensionMismatch, Grid2D, LifeBoard
from .config import SimulationConfig

__version__ = "0.1.0"

__all__ = [
    'Cell',
    'DimensionMismatch',
    'Grid2D',
    'LifeBoard',
    'SimulationConfig',
]
