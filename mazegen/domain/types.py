"""Core type definitions for maze generation."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Set, Tuple, Literal

from ..utils.rng import check_seed

# Coordinate type for grid positions: (row, column)
Coord = Tuple[int, int]

# Text rendering styles
RenderStyle = Literal["box", "compact"]

RENDER_STYLES = ("box", "compact")


class Direction(Enum):
    """Wall directions of a cell. Row 0 is the bottom row, so north is row + 1."""
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    @property
    def opposite(self) -> "Direction":
        """The direction pointing back from the neighbor."""
        return _OPPOSITES[self]

    @property
    def offset(self) -> Tuple[int, int]:
        """(d_row, d_column) step toward the neighbor."""
        return _OFFSETS[self]


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}

_OFFSETS = {
    Direction.NORTH: (1, 0),
    Direction.SOUTH: (-1, 0),
    Direction.EAST: (0, 1),
    Direction.WEST: (0, -1),
}


def check_dimensions(rows: int, columns: int):
    """
    Validate grid dimensions.

    Raises:
        ValueError: If rows or columns is not a positive integer
    """
    # Reject bools too, they pass isinstance(x, int)
    if isinstance(rows, bool) or isinstance(columns, bool) \
            or not isinstance(rows, int) or not isinstance(columns, int):
        raise ValueError(f"Grid dimensions must be integers, got {rows!r}x{columns!r}")
    if rows <= 0 or columns <= 0:
        raise ValueError(f"Grid dimensions must be positive, got {rows}x{columns}")


@dataclass
class Cell:
    """A single maze cell and the set of directions whose walls are open."""
    row: int
    column: int
    links: Set[Direction] = field(default_factory=set)

    @property
    def coord(self) -> Coord:
        return (self.row, self.column)

    def link(self, direction: Direction):
        self.links.add(direction)

    def unlink(self, direction: Direction):
        self.links.discard(direction)

    def is_linked(self, direction: Direction) -> bool:
        """Check whether the wall toward ``direction`` is open."""
        return direction in self.links

    def is_empty(self) -> bool:
        """True while every wall of the cell is still standing."""
        return not self.links


@dataclass
class GenerationConfig:
    """Configuration for a maze generation run."""
    rows: int = 10
    columns: int = 20
    algorithm: str = "backtracker"
    seed: Optional[int] = None
    style: RenderStyle = "box"

    def __post_init__(self):
        """Validate dimensions, seed, algorithm name and render style."""
        check_dimensions(self.rows, self.columns)
        if self.seed is not None:
            check_seed(self.seed)
        if self.style not in RENDER_STYLES:
            raise ValueError(
                f"Unknown render style '{self.style}', expected one of {', '.join(RENDER_STYLES)}"
            )
        # Imported here to avoid a cycle: the algorithms import this module
        from .generators import normalize_name
        self.algorithm = normalize_name(self.algorithm)
