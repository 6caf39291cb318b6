"""
Core simulation: flat 2D grid container and the Life board built on it.
"""

from .grid2d import DimensionMismatch, Grid2D
from .rules import Cell, next_state, rule_table
from .board import LifeBoard, block_pattern, blinker_pattern, glider_pattern

__all__ = [
    'Cell',
    'DimensionMismatch',
    'Grid2D',
    'LifeBoard',
    'blinker_pattern',
    'block_pattern',
    'glider_pattern',
    'next_state',
    'rule_table',
]
