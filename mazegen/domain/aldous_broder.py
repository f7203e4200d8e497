"""Aldous-Broder maze generation."""

import logging
from typing import Optional

from .grid import Grid
from ..utils.rng import SeededRNG, resolve_seed

logger = logging.getLogger(__name__)


def aldous_broder(grid: Grid, seed: Optional[int] = None) -> int:
    """
    Carve a uniform spanning tree with an unrestricted random walk.

    The walk steps to any neighbor, visited or not, and only links when it
    enters a cell for the first time. Slow to finish on large grids but free
    of directional bias.
    """
    seed = resolve_seed(seed)
    rng = SeededRNG(seed)
    logger.debug("aldous_broder: %dx%d seed=%d", grid.rows, grid.columns, seed)

    current = (rng.randrange(grid.rows), rng.randrange(grid.columns))
    visited = {current}
    steps = 0

    while len(visited) < grid.size:
        neighbors = grid.neighbors(current)
        neighbor, direction = neighbors[rng.randrange(len(neighbors))]

        if neighbor not in visited:
            grid.link(current[0], current[1], direction)
            visited.add(neighbor)

        current = neighbor
        steps += 1

    logger.debug("aldous_broder: done after %d steps", steps)
    return seed
