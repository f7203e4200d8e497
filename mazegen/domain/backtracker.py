"""Recursive backtracker (depth-first) maze generation."""

import logging
from typing import List, Optional

from .grid import Grid
from .types import Coord
from ..utils.rng import SeededRNG, resolve_seed

logger = logging.getLogger(__name__)


def backtracker(grid: Grid, seed: Optional[int] = None) -> int:
    """
    Carve a maze depth first with an explicit stack.

    A cell counts as unvisited while it has no links at all. The top of the
    stack extends into a random unvisited neighbor; with none left it is
    popped. Gives long winding corridors with few branches.
    """
    seed = resolve_seed(seed)
    rng = SeededRNG(seed)
    logger.debug("backtracker: %dx%d seed=%d", grid.rows, grid.columns, seed)

    start = (rng.randrange(grid.rows), rng.randrange(grid.columns))
    stack: List[Coord] = [start]
    longest = 1

    while stack:
        current = stack[-1]
        candidates = [
            (neighbor, direction)
            for neighbor, direction in grid.neighbors(current)
            if grid.cell(*neighbor).is_empty()
        ]

        if not candidates:
            stack.pop()
            continue

        neighbor, direction = candidates[rng.randrange(len(candidates))]
        grid.link(current[0], current[1], direction)
        stack.append(neighbor)
        longest = max(longest, len(stack))

    logger.debug("backtracker: done, deepest stack %d", longest)
    return seed
