"""
Structural checks and statistics for generated mazes.

Nothing here solves mazes; the breadth-first search only confirms that every
cell is reachable.
"""

from collections import deque
from dataclasses import dataclass
from typing import List, Set

import numpy as np

from ..domain.grid import Grid
from ..domain.types import Coord, Direction

PASSAGE = 1
WALL = 0


@dataclass
class MazeStats:
    """Summary numbers for a finished maze."""
    rows: int
    columns: int
    links: int
    dead_ends: int
    horizontal_ratio: float
    open_fraction: float
    perfect: bool

    def as_lines(self) -> List[str]:
        """Human readable lines for printing."""
        return [
            f"Size: {self.rows}x{self.columns}",
            f"Links: {self.links}",
            f"Dead ends: {self.dead_ends}",
            f"Horizontal links: {self.horizontal_ratio:.1%}",
            f"Open raster: {self.open_fraction:.1%}",
            f"Perfect maze: {'yes' if self.perfect else 'no'}",
        ]


def to_array(grid: Grid) -> np.ndarray:
    """
    Rasterize the maze into a (2*rows+1, 2*columns+1) array.

    Cells sit on odd indices. 1 marks a passage, 0 a wall. Array row 0 is the
    top edge, so maze row ``rows - 1`` comes first.
    """
    raster = np.zeros((2 * grid.rows + 1, 2 * grid.columns + 1), dtype=np.uint8)

    for row in grid:
        for cell in row:
            y = 2 * (grid.rows - 1 - cell.row) + 1
            x = 2 * cell.column + 1
            raster[y, x] = PASSAGE
            if cell.is_linked(Direction.NORTH):
                raster[y - 1, x] = PASSAGE
            if cell.is_linked(Direction.SOUTH):
                raster[y + 1, x] = PASSAGE
            if cell.is_linked(Direction.EAST):
                raster[y, x + 1] = PASSAGE
            if cell.is_linked(Direction.WEST):
                raster[y, x - 1] = PASSAGE

    return raster


def connected_cells(grid: Grid, start: Coord = (0, 0)) -> Set[Coord]:
    """All cells reachable from ``start`` through open walls."""
    if not grid.is_valid_coord(start):
        return set()

    queue = deque([start])
    reachable = {start}

    while queue:
        current = queue.popleft()
        for direction in grid.links(current):
            neighbor = grid.neighbor(current, direction)
            if neighbor is not None and neighbor not in reachable:
                reachable.add(neighbor)
                queue.append(neighbor)

    return reachable


def is_symmetric(grid: Grid) -> bool:
    """Check that every link is mirrored by its neighbor and stays on the grid."""
    for row in grid:
        for cell in row:
            for direction in cell.links:
                neighbor = grid.neighbor(cell.coord, direction)
                if neighbor is None or not grid.is_linked(neighbor, direction.opposite):
                    return False
    return True


def is_perfect(grid: Grid) -> bool:
    """
    Check the spanning tree property: size - 1 links, all cells connected.

    A connected graph with exactly one edge fewer than it has nodes cannot
    contain a cycle.
    """
    if not is_symmetric(grid):
        return False
    if grid.link_count() != grid.size - 1:
        return False
    return len(connected_cells(grid)) == grid.size


def dead_ends(grid: Grid) -> List[Coord]:
    """Cells with exactly one open wall."""
    return [cell.coord for row in grid for cell in row if len(cell.links) == 1]


def summarize(grid: Grid) -> MazeStats:
    """Collect the statistics shown by the command line and the viewer."""
    links = grid.link_count()
    horizontal = sum(
        1 for row in grid for cell in row if cell.is_linked(Direction.EAST)
    )
    raster = to_array(grid)

    return MazeStats(
        rows=grid.rows,
        columns=grid.columns,
        links=links,
        dead_ends=len(dead_ends(grid)),
        horizontal_ratio=horizontal / links if links else 0.0,
        open_fraction=float(raster.mean()),
        perfect=is_perfect(grid),
    )
