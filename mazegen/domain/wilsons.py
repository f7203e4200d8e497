"""Wilson's algorithm: loop-erased random walks."""

import logging
from typing import Dict, List, Optional

from .grid import Grid
from .types import Coord, Direction
from ..utils.rng import SeededRNG, resolve_seed

logger = logging.getLogger(__name__)


class _CellPool:
    """Cells outside the tree, with O(1) random pick and removal."""

    def __init__(self, cells: List[Coord]):
        self._cells = list(cells)
        self._index: Dict[Coord, int] = {cell: i for i, cell in enumerate(self._cells)}

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, cell: Coord) -> bool:
        return cell in self._index

    def pick(self, rng: SeededRNG) -> Coord:
        return self._cells[rng.randrange(len(self._cells))]

    def remove(self, cell: Coord):
        """Swap the last cell into the removed slot."""
        index = self._index.pop(cell, None)
        if index is None:
            return
        last = self._cells.pop()
        if index < len(self._cells):
            self._cells[index] = last
            self._index[last] = index


def wilsons(grid: Grid, seed: Optional[int] = None) -> int:
    """
    Carve a uniform spanning tree by grafting loop-erased random walks.

    One random cell seeds the tree. From a random cell outside the tree a
    walk wanders until it touches the tree; any loop it makes along the way
    is cut out. The surviving path is then carved and joins the tree.

    Args:
        grid: Freshly created grid, mutated in place
        seed: Random seed, a fresh one is drawn when None

    Returns:
        The seed that was used
    """
    seed = resolve_seed(seed)
    rng = SeededRNG(seed)
    logger.debug("wilsons: %dx%d seed=%d", grid.rows, grid.columns, seed)

    unvisited = _CellPool(grid.cell_locations())
    unvisited.remove(unvisited.pick(rng))
    walks = 0

    while unvisited:
        cell = unvisited.pick(rng)
        path: List[Coord] = [cell]
        # directions[i] leads from path[i] to path[i + 1]
        directions: List[Direction] = []
        index_of: Dict[Coord, int] = {cell: 0}

        while cell in unvisited:
            neighbors = grid.neighbors(cell)
            cell, direction = neighbors[rng.randrange(len(neighbors))]

            if cell in index_of:
                # Loop: cut the path back to the first visit of this cell
                keep = index_of[cell]
                for erased in path[keep + 1:]:
                    del index_of[erased]
                del path[keep + 1:]
                del directions[keep:]
            else:
                index_of[cell] = len(path)
                path.append(cell)
                directions.append(direction)

        for (row, column), direction in zip(path, directions):
            grid.link(row, column, direction)
            unvisited.remove((row, column))
        walks += 1

    logger.debug("wilsons: done after %d walks", walks)
    return seed
