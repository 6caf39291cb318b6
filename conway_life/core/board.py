"""Life board: one generation of cell states and the step to the next.

The board owns a single Grid2D of Cell values. Advancing builds the whole next
generation into a fresh grid while only reading the current one, then swaps
the new grid in. Cells beyond the edges are absent (never wrapped), which
behaves like an infinite dead border.
"""

import numpy as np
from typing import Callable, Iterator, List, Optional, Tuple
import logging

from .grid2d import Coord, Grid2D
from .rules import Cell, next_state

logger = logging.getLogger(__name__)

# Moore neighborhood offsets, origin excluded
NEIGHBOR_OFFSETS: Tuple[Coord, ...] = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
)


class LifeBoard:
    """Conway's Game of Life board.

    Attributes:
        generation: Number of advances applied since construction
    """

    def __init__(self, width: int, height: int, initializer: Callable[[int, int], Cell]):
        """Initialize board with given dimensions.

        Args:
            width: Board width (cells)
            height: Board height (cells)
            initializer: Function returning the starting Cell for (x, y)
        """
        self._grid: Grid2D[Cell] = Grid2D.create(width, height, initializer)
        self.generation = 0
        logger.debug(f"Created life board {width}x{height}")

    @classmethod
    def from_grid(cls, grid: Grid2D) -> 'LifeBoard':
        """Create board from an existing grid.

        A grid of Cell values is adopted as-is. Any other values (bools,
        0/1, numpy booleans) are converted by truthiness into a new grid.
        """
        if not all(isinstance(value, Cell) for value in grid.cells):
            grid = grid.map(lambda _coord, value: Cell.from_bool(bool(value)))

        board = cls.__new__(cls)
        board._grid = grid
        board.generation = 0
        return board

    @classmethod
    def create_random(cls,
                      width: int,
                      height: int,
                      rng: Optional[np.random.Generator] = None,
                      density: float = 0.5,
                      seed: Optional[int] = None) -> 'LifeBoard':
        """Create board with independently random cells.

        Args:
            width: Board width (cells)
            height: Board height (cells)
            rng: Randomness source, drawn from once per cell in row-major order
            density: Probability of a cell starting alive (0.0 to 1.0)
            seed: Seed for a fresh generator when rng is not given

        Returns:
            LifeBoard: New randomly populated board

        Raises:
            ValueError: If density is outside [0.0, 1.0] or both rng and seed are given
        """
        if not 0.0 <= density <= 1.0:
            raise ValueError(f"Density must be between 0.0 and 1.0, got {density}")
        if rng is not None and seed is not None:
            raise ValueError("Pass either rng or seed, not both")

        if rng is None:
            rng = np.random.default_rng(seed)

        return cls(width, height, lambda _x, _y: Cell.from_bool(rng.random() < density))

    @classmethod
    def from_pattern(cls, width: int, height: int, pattern, x: int = 0, y: int = 0) -> 'LifeBoard':
        """Create board with a pattern placed at (x, y), everything else dead.

        Args:
            width: Board width (cells)
            height: Board height (cells)
            pattern: 2D array-like, truthy entries are alive
            x: Board column of the pattern's top-left cell
            y: Board row of the pattern's top-left cell

        Returns:
            LifeBoard: New board; pattern cells falling off the board are dropped
        """
        pattern = np.asarray(pattern, dtype=bool)
        if pattern.ndim != 2:
            raise ValueError(f"Pattern must be 2D, got shape {pattern.shape}")

        pattern_height, pattern_width = pattern.shape

        def initializer(cx: int, cy: int) -> Cell:
            px, py = cx - x, cy - y
            if 0 <= px < pattern_width and 0 <= py < pattern_height:
                return Cell.from_bool(pattern[py, px])
            return Cell.DEAD

        return cls(width, height, initializer)

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    @property
    def grid(self) -> Grid2D[Cell]:
        """Current generation. Grids are immutable, so this is a safe snapshot."""
        return self._grid

    def get(self, x: int, y: int) -> Optional[Cell]:
        """Get cell at coordinates, or None off the board."""
        return self._grid.get(x, y)

    def cells(self) -> Iterator[Tuple[Coord, Cell]]:
        """Iterate ``((x, y), cell)`` over the current generation in row-major order."""
        return self._grid.iterate()

    def living_neighbors(self, x: int, y: int) -> int:
        """Count living neighbors of a cell using Moore neighborhood.

        Args:
            x: X coordinate of cell (column)
            y: Y coordinate of cell (row)

        Returns:
            Number of living neighbors (0-8)
        """
        neighbors = (self._grid.get(x + dx, y + dy) for dx, dy in NEIGHBOR_OFFSETS)
        # Off-board positions come back as None and are skipped
        present = (cell for cell in neighbors if cell is not None)
        return sum(1 for cell in present if cell is Cell.ALIVE)

    def _advance_cell(self, coord: Coord, cell: Cell) -> Cell:
        x, y = coord
        return next_state(cell, self.living_neighbors(x, y))

    def advance(self) -> int:
        """Replace the board with its next generation.

        Every neighbor count is taken from the current generation; the new
        grid is fully built before it replaces the old one.

        Returns:
            Number of live cells after evolution
        """
        self._grid = self._grid.map(self._advance_cell)
        self.generation += 1

        live_count = self.live_count()
        logger.debug(f"Generation {self.generation}: {live_count} live cells")
        return live_count

    def advance_many(self, steps: int) -> List[int]:
        """Advance multiple generations.

        Returns:
            Live cell count after each step
        """
        if steps < 0:
            raise ValueError(f"Steps must be non-negative, got {steps}")
        return [self.advance() for _ in range(steps)]

    def live_count(self) -> int:
        """Count total number of live cells."""
        return sum(1 for cell in self._grid.cells if cell is Cell.ALIVE)

    def is_empty(self) -> bool:
        """Check if all cells are dead."""
        return not any(cell is Cell.ALIVE for cell in self._grid.cells)

    def to_array(self) -> np.ndarray:
        """Get current generation as a (height, width) boolean numpy array."""
        flat = np.fromiter((cell is Cell.ALIVE for cell in self._grid.cells),
                           dtype=bool, count=len(self._grid))
        return flat.reshape((self.height, self.width))

    def __eq__(self, other: object) -> bool:
        """Boards are equal when their current generations match."""
        if not isinstance(other, LifeBoard):
            return NotImplemented
        return self._grid == other._grid

    def __str__(self) -> str:
        """String representation showing live cells as X."""
        lines = []
        for y in range(self.height):
            lines.append(''.join('X' if self._grid.get(x, y) is Cell.ALIVE else '.'
                                 for x in range(self.width)))
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return (f"LifeBoard({self.width}x{self.height}, generation={self.generation}, "
                f"alive={self.live_count()})")


# Classic Conway test patterns
def block_pattern() -> np.ndarray:
    """Create stable 2x2 block still life."""
    return np.array([
        [True, True],
        [True, True]
    ], dtype=bool)


def blinker_pattern() -> np.ndarray:
    """Create horizontal blinker pattern (3 cells)."""
    return np.array([[True, True, True]], dtype=bool)


def glider_pattern() -> np.ndarray:
    """Create classic Conway glider travelling down and to the right."""
    return np.array([
        [False, True, False],
        [False, False, True],
        [True, True, True]
    ], dtype=bool)
