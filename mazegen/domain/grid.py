"""Rectangular maze grid with symmetric wall links."""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterator, List, Optional, Tuple

from .types import Cell, Coord, Direction, check_dimensions

# Neighbor order is fixed so that random index selection is reproducible
NEIGHBOR_ORDER = (Direction.SOUTH, Direction.NORTH, Direction.WEST, Direction.EAST)


@dataclass
class Grid:
    """
    A rows x columns grid of cells addressed by (row, column).

    Cells never reference each other; links are stored as direction sets on
    each cell and are always updated on both sides at once.
    """
    rows: int
    columns: int
    cells: List[List[Cell]] = field(init=False, repr=False)

    def __post_init__(self):
        """Allocate every cell with all walls standing."""
        check_dimensions(self.rows, self.columns)

        self.cells = [
            [Cell(row, column) for column in range(self.columns)]
            for row in range(self.rows)
        ]

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self.rows * self.columns

    def __iter__(self) -> Iterator[List[Cell]]:
        """Iterate over rows, starting with row 0."""
        return iter(self.cells)

    def __str__(self) -> str:
        from ..utils.render import render_box
        return render_box(self)

    def is_valid_coord(self, coord: Coord) -> bool:
        """Check if coordinate is within grid bounds."""
        row, column = coord
        return 0 <= row < self.rows and 0 <= column < self.columns

    def cell(self, row: int, column: int) -> Optional[Cell]:
        """Get cell at (row, column), returns None if out of bounds."""
        if not self.is_valid_coord((row, column)):
            return None
        return self.cells[row][column]

    def cell_locations(self) -> List[Coord]:
        """All cell coordinates in row-major order."""
        return [(row, column) for row in range(self.rows) for column in range(self.columns)]

    def neighbor(self, coord: Coord, direction: Direction) -> Optional[Coord]:
        """Coordinate of the adjacent cell in ``direction``, or None off the grid."""
        d_row, d_column = direction.offset
        target = (coord[0] + d_row, coord[1] + d_column)
        if not self.is_valid_coord(target):
            return None
        return target

    def neighbors(self, coord: Coord) -> List[Tuple[Coord, Direction]]:
        """
        In-bounds neighbors of a cell as (neighbor_coord, direction) pairs.

        The direction is the one leading from ``coord`` to the neighbor. Order
        is always South, North, West, East.
        """
        result = []
        for direction in NEIGHBOR_ORDER:
            target = self.neighbor(coord, direction)
            if target is not None:
                result.append((target, direction))
        return result

    def link(self, row: int, column: int, direction: Direction) -> bool:
        """
        Open the wall between (row, column) and its neighbor in ``direction``.

        Both cells are updated together. A request pointing off the grid
        changes nothing and returns False.
        """
        source = self.cell(row, column)
        if source is None:
            return False
        target = self.neighbor((row, column), direction)
        if target is None:
            return False

        source.link(direction)
        self.cells[target[0]][target[1]].link(direction.opposite)
        return True

    def links(self, coord: Coord) -> FrozenSet[Direction]:
        """Open directions of the cell at ``coord`` (empty when out of bounds)."""
        cell = self.cell(*coord)
        if cell is None:
            return frozenset()
        return frozenset(cell.links)

    def is_linked(self, coord: Coord, direction: Direction) -> bool:
        """Check whether the cell at ``coord`` is open toward ``direction``."""
        return direction in self.links(coord)

    def link_count(self) -> int:
        """Number of undirected links in the grid."""
        # Each link is stored once on each side
        return sum(len(cell.links) for row in self.cells for cell in row) // 2
