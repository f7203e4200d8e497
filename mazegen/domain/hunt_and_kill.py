"""Hunt-and-Kill maze generation."""

import logging
from typing import Optional, Set, Tuple

from .grid import Grid
from .types import Coord, Direction
from ..utils.rng import SeededRNG, resolve_seed

logger = logging.getLogger(__name__)


def hunt_and_kill(grid: Grid, seed: Optional[int] = None) -> int:
    """
    Carve a maze with a random walk that restarts through a grid scan.

    The walk only enters unvisited cells. When it gets stuck, the hunt scans
    from the top row down, left to right, for the first unvisited cell that
    touches the maze, joins it to the maze and resumes walking from there.
    """
    seed = resolve_seed(seed)
    rng = SeededRNG(seed)
    logger.debug("hunt_and_kill: %dx%d seed=%d", grid.rows, grid.columns, seed)

    current: Optional[Coord] = (rng.randrange(grid.rows), rng.randrange(grid.columns))
    visited: Set[Coord] = {current}
    hunts = 0

    while current is not None:
        unvisited = [
            (neighbor, direction)
            for neighbor, direction in grid.neighbors(current)
            if neighbor not in visited
        ]

        if unvisited:
            neighbor, direction = unvisited[rng.randrange(len(unvisited))]
            grid.link(current[0], current[1], direction)
            visited.add(neighbor)
            current = neighbor
        else:
            current = _hunt(grid, visited)
            if current is not None:
                hunts += 1

    logger.debug("hunt_and_kill: done after %d hunts", hunts)
    return seed


def _hunt(grid: Grid, visited: Set[Coord]) -> Optional[Coord]:
    """
    Join the first unvisited cell bordering the maze and return it.

    Rows are scanned from the top (rows - 1) down, columns left to right.
    Returns None once every cell is visited.
    """
    for row in range(grid.rows - 1, -1, -1):
        for column in range(grid.columns):
            cell = (row, column)
            if cell in visited:
                continue
            found = _first_visited_neighbor(grid, cell, visited)
            if found is not None:
                grid.link(row, column, found[1])
                visited.add(cell)
                return cell
    return None


def _first_visited_neighbor(grid: Grid, cell: Coord,
                            visited: Set[Coord]) -> Optional[Tuple[Coord, Direction]]:
    for neighbor, direction in grid.neighbors(cell):
        if neighbor in visited:
            return neighbor, direction
    return None
