"""Flat-buffer 2D grid container.

A Grid2D stores width*height values in a single row-major sequence and maps
(x, y) coordinates onto it with ``y * width + x``. It knows nothing about
Life rules or rendering; the board and the display layer both address cells
through it.
"""

from typing import Callable, Generic, Iterable, Iterator, Optional, Tuple, TypeVar
import logging

logger = logging.getLogger(__name__)

T = TypeVar('T')
U = TypeVar('U')

Coord = Tuple[int, int]


class DimensionMismatch(ValueError):
    """Raised when width * height doesn't equal the length of the cell data."""

    def __init__(self, width: int, height: int, length: int):
        self.width = width
        self.height = height
        self.length = length
        super().__init__(
            f"Invalid dimensions: {width}x{height} requires {width * height} cells, "
            f"got {length}"
        )


def _check_dimensions(width: int, height: int) -> None:
    if width < 0 or height < 0:
        raise ValueError(f"Grid dimensions must be non-negative, got {width}x{height}")


class Grid2D(Generic[T]):
    """Fixed-size 2D grid backed by one flat, immutable sequence.

    Attributes:
        width: Grid width in cells
        height: Grid height in cells
    """

    __slots__ = ('width', 'height', '_cells')

    def __init__(self, width: int, height: int, cells: Iterable[T]):
        """Initialize grid from a flat row-major sequence.

        Args:
            width: Grid width (cells)
            height: Grid height (cells)
            cells: Row-major cell values, exactly width*height of them

        Raises:
            ValueError: If a dimension is negative
            DimensionMismatch: If the number of cells doesn't match width*height
        """
        _check_dimensions(width, height)
        data = tuple(cells)
        if len(data) != width * height:
            raise DimensionMismatch(width, height, len(data))

        self.width = width
        self.height = height
        self._cells = data

    @classmethod
    def create(cls, width: int, height: int, initializer: Callable[[int, int], T]) -> 'Grid2D[T]':
        """Create grid by calling ``initializer(x, y)`` once per coordinate.

        The initializer is called in row-major order. Any exception it raises
        propagates and no grid is built.

        Args:
            width: Grid width (cells)
            height: Grid height (cells)
            initializer: Function producing the value for each coordinate

        Returns:
            Grid2D: New populated grid
        """
        _check_dimensions(width, height)
        cells = [initializer(x, y) for y in range(height) for x in range(width)]
        return cls(width, height, cells)

    @classmethod
    def from_sequence(cls, width: int, height: int, data: Iterable[T]) -> 'Grid2D[T]':
        """Create grid from an existing flat sequence.

        Raises:
            DimensionMismatch: If len(data) != width * height
        """
        return cls(width, height, data)

    @property
    def cells(self) -> Tuple[T, ...]:
        """Row-major cell values (read-only)."""
        return self._cells

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether (x, y) addresses a cell of this grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def _linear_index(self, x: int, y: int) -> int:
        return y * self.width + x

    def index_of(self, x: int, y: int) -> int:
        """Linear buffer index for in-bounds coordinates.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not self.in_bounds(x, y):
            raise IndexError(f"Coordinates ({x}, {y}) out of bounds for {self.width}x{self.height} grid")
        return self._linear_index(x, y)

    def get(self, x: int, y: int) -> Optional[T]:
        """Get value at coordinates.

        Off-grid coordinates are a normal case (neighbor lookups at the edges)
        and return None rather than raising. Coordinates never wrap.

        Args:
            x: X coordinate (column), may be negative
            y: Y coordinate (row), may be negative

        Returns:
            Value at (x, y), or None if outside the grid
        """
        if not self.in_bounds(x, y):
            return None
        return self._cells[self._linear_index(x, y)]

    def reshape(self, new_width: int, new_height: int) -> 'Grid2D[T]':
        """Reinterpret the same buffer with new dimensions.

        Data is neither reordered nor copied; only the row/column
        interpretation of the linear buffer changes.

        Raises:
            DimensionMismatch: If new_width * new_height != len(self)
        """
        _check_dimensions(new_width, new_height)
        if new_width * new_height != len(self._cells):
            raise DimensionMismatch(new_width, new_height, len(self._cells))

        reshaped = object.__new__(type(self))
        reshaped.width = new_width
        reshaped.height = new_height
        reshaped._cells = self._cells
        return reshaped

    def iterate(self) -> Iterator[Tuple[Coord, T]]:
        """Yield ``((x, y), value)`` pairs in row-major order (x varies fastest).

        Each call returns a fresh generator, so traversal can be restarted.
        """
        width = self.width
        for index, value in enumerate(self._cells):
            y, x = divmod(index, width)
            yield (x, y), value

    def map(self, fn: Callable[[Coord, T], U]) -> 'Grid2D[U]':
        """Build a new grid of the same shape from ``fn((x, y), value)``.

        This grid is only read; results go into a brand-new buffer.
        """
        return Grid2D(self.width, self.height, [fn(coord, value) for coord, value in self.iterate()])

    def __iter__(self) -> Iterator[Tuple[Coord, T]]:
        return self.iterate()

    def __len__(self) -> int:
        return len(self._cells)

    def __eq__(self, other: object) -> bool:
        """Check equality with another grid."""
        if not isinstance(other, Grid2D):
            return NotImplemented
        return (self.width == other.width and
                self.height == other.height and
                self._cells == other._cells)

    def __repr__(self) -> str:
        return f"Grid2D({self.width}x{self.height}, cells={len(self._cells)})"
