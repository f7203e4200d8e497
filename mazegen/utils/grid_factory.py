"""Grid factory for creating grids and generating mazes from a config."""

import logging
from typing import Tuple

from ..domain.generators import generate
from ..domain.grid import Grid
from ..domain.types import GenerationConfig

logger = logging.getLogger(__name__)


def create_grid(rows: int, columns: int) -> Grid:
    """
    Create a new grid with every wall standing.

    Args:
        rows: Number of rows (must be > 0)
        columns: Number of columns (must be > 0)

    Returns:
        New Grid instance

    Raises:
        ValueError: If rows or columns <= 0
    """
    return Grid(rows, columns)


def generate_maze(config: GenerationConfig) -> Tuple[Grid, int]:
    """
    Build a grid and carve it with the configured algorithm.

    Returns:
        Tuple of (grid, seed actually used)
    """
    grid = create_grid(config.rows, config.columns)
    seed = generate(grid, config.algorithm, config.seed)
    logger.info(
        "Generated %dx%d maze with %s (seed %d)",
        config.rows, config.columns, config.algorithm, seed,
    )
    return grid, seed
