"""Simulation and display settings."""

import os
from typing import Mapping, Optional, Tuple
import logging

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]

DEFAULT_WIDTH = 40
DEFAULT_HEIGHT = 30
DEFAULT_CELL_SIZE = 20
DEFAULT_TICK_SECONDS = 0.25
ALIVE_COLOR: Color = (0, 0, 0)
DEAD_COLOR: Color = (255, 255, 255)
BACKGROUND_COLOR: Color = (0, 0, 0)

ENV_PREFIX = "LIFE_"


class SimulationConfig:
    """Configuration for a Life run: board size, cell pixels, tick rate, seeding."""

    def __init__(self,
                 width: int = DEFAULT_WIDTH,
                 height: int = DEFAULT_HEIGHT,
                 cell_size: int = DEFAULT_CELL_SIZE,
                 tick_seconds: float = DEFAULT_TICK_SECONDS,
                 density: float = 0.5,
                 seed: Optional[int] = None,
                 window_size: Optional[Tuple[int, int]] = None,
                 alive_color: Color = ALIVE_COLOR,
                 dead_color: Color = DEAD_COLOR):
        """Initialize simulation configuration.

        Args:
            width: Board width in cells
            height: Board height in cells
            cell_size: Pixel width and height of one drawn cell
            tick_seconds: Wait between generations
            density: Probability of a cell starting alive (0.0-1.0)
            seed: Seed for the initial random board (None = unseeded)
            window_size: Window (width, height) in pixels (None = fit the board)
            alive_color: RGB fill for live cells
            dead_color: RGB fill for dead cells

        Raises:
            ValueError: If any value is out of range
        """
        if width < 0 or height < 0:
            raise ValueError(f"Board dimensions must be non-negative, got {width}x{height}")
        if cell_size <= 0:
            raise ValueError(f"Cell size must be positive, got {cell_size}")
        if tick_seconds < 0:
            raise ValueError(f"Tick interval must be non-negative, got {tick_seconds}")
        if not 0.0 <= density <= 1.0:
            raise ValueError(f"Density must be between 0.0 and 1.0, got {density}")

        self.width = width
        self.height = height
        self.cell_size = cell_size
        self.tick_seconds = tick_seconds
        self.density = density
        self.seed = seed
        self.window_size = tuple(window_size) if window_size is not None else None
        self.alive_color = tuple(alive_color)
        self.dead_color = tuple(dead_color)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> 'SimulationConfig':
        """Build configuration from LIFE_* environment variables.

        Recognised: LIFE_WIDTH, LIFE_HEIGHT, LIFE_CELL_SIZE, LIFE_TICK_SECONDS,
        LIFE_DENSITY, LIFE_SEED. Keyword overrides that aren't None win over
        the environment.
        """
        environ = os.environ if environ is None else environ
        casts = {
            'width': int,
            'height': int,
            'cell_size': int,
            'tick_seconds': float,
            'density': float,
            'seed': int,
        }

        values = {}
        for name, cast in casts.items():
            raw = environ.get(ENV_PREFIX + name.upper())
            if raw is None or raw == "":
                continue
            try:
                values[name] = cast(raw)
            except ValueError:
                raise ValueError(f"Invalid {ENV_PREFIX + name.upper()}={raw!r}") from None

        values.update({name: value for name, value in overrides.items() if value is not None})
        logger.debug(f"Resolved configuration values: {values}")
        return cls(**values)

    def copy(self) -> 'SimulationConfig':
        """Create a deep copy of the configuration."""
        return SimulationConfig(
            width=self.width,
            height=self.height,
            cell_size=self.cell_size,
            tick_seconds=self.tick_seconds,
            density=self.density,
            seed=self.seed,
            window_size=self.window_size,
            alive_color=self.alive_color,
            dead_color=self.dead_color
        )

    def __repr__(self) -> str:
        return (f"SimulationConfig({self.width}x{self.height}, cell_size={self.cell_size}, "
                f"tick={self.tick_seconds}s, density={self.density}, seed={self.seed})")
