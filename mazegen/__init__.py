"""Maze Generator - perfect mazes from five randomized spanning tree algorithms.

Sidewinder, Aldous-Broder, Wilson's, Hunt-and-Kill and the recursive
backtracker each carve a rectangular grid in place from a seed, so the same
seed and dimensions always give the same maze.
"""

from .domain.generators import ALGORITHMS, generate
from .domain.grid import Grid
from .domain.types import Direction

__version__ = "1.0.0"
__all__ = ["ALGORITHMS", "Direction", "Grid", "generate"]
