"""
pygame display layer: board renderer and windowed driver loop.
"""

from .renderer import BoardRenderer
from .app import LifeApp, should_quit

__all__ = ['BoardRenderer', 'LifeApp', 'should_quit']
