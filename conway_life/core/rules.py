"""
Conway's Game of Life Rules

Cell states and the fixed B3/S23 transition rule. No neighbor lookup here,
the board counts neighbors and asks this module for the outcome.
"""

from enum import Enum
from typing import Dict, FrozenSet, Tuple


class Cell(Enum):
    """Two-valued cell state."""

    DEAD = 0
    ALIVE = 1

    @classmethod
    def from_bool(cls, alive: bool) -> 'Cell':
        return cls.ALIVE if alive else cls.DEAD

    def __bool__(self) -> bool:
        return self is Cell.ALIVE


# Standard Conway rules - unmodified
SURVIVAL_COUNTS: FrozenSet[int] = frozenset({2, 3})  # Live cells survive with 2-3 neighbors
BIRTH_COUNTS: FrozenSet[int] = frozenset({3})        # Dead cells born with exactly 3 neighbors

MAX_NEIGHBORS = 8


def next_state(cell: Cell, live_neighbors: int) -> Cell:
    """Apply Conway's rules to determine next cell state.

    Args:
        cell: Current cell state
        live_neighbors: Number of live neighbors (0-8)

    Returns:
        Next cell state

    Raises:
        ValueError: If live_neighbors is outside 0-8
    """
    if not 0 <= live_neighbors <= MAX_NEIGHBORS:
        raise ValueError(f"Neighbor count must be between 0 and {MAX_NEIGHBORS}, got {live_neighbors}")

    if cell is Cell.ALIVE:
        # Survival rule
        return Cell.from_bool(live_neighbors in SURVIVAL_COUNTS)
    # Birth rule
    return Cell.from_bool(live_neighbors in BIRTH_COUNTS)


def rule_table() -> Dict[Tuple[Cell, int], Cell]:
    """Get the complete rule table.

    Returns:
        Dictionary mapping (current_state, neighbor_count) to next_state
    """
    return {
        (cell, neighbors): next_state(cell, neighbors)
        for cell in Cell
        for neighbors in range(MAX_NEIGHBORS + 1)
    }
