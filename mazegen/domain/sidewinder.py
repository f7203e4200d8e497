"""Sidewinder maze generation."""

import logging
from typing import Optional

from .grid import Grid
from .types import Direction
from ..utils.rng import SeededRNG, resolve_seed

logger = logging.getLogger(__name__)


def sidewinder(grid: Grid, seed: Optional[int] = None) -> int:
    """
    Carve a maze row by row, growing eastward runs of cells.

    Each run is closed either at the east edge or on an even coin flip (never
    on the top row, which becomes one long corridor). Closing a run links a
    random member of it northward. The result has long horizontal passages
    and sparse vertical ones.

    Args:
        grid: Freshly created grid, mutated in place
        seed: Random seed, a fresh one is drawn when None

    Returns:
        The seed that was used
    """
    seed = resolve_seed(seed)
    rng = SeededRNG(seed)
    logger.debug("sidewinder: %dx%d seed=%d", grid.rows, grid.columns, seed)

    for row in range(grid.rows):
        run = []
        for column in range(grid.columns):
            run.append((row, column))

            far_east = column == grid.columns - 1
            far_north = row == grid.rows - 1
            # Flip on every cell so the random stream does not depend on position
            heads = rng.coin()
            close_out = far_east or (not far_north and heads)

            if close_out:
                member_row, member_column = rng.choice(run)
                if member_row < grid.rows - 1:
                    grid.link(member_row, member_column, Direction.NORTH)
                run.clear()
            else:
                grid.link(row, column, Direction.EAST)

    logger.debug("sidewinder: done with %d links", grid.link_count())
    return seed
