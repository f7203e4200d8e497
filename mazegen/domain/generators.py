"""Registry of maze generation algorithms."""

from typing import Callable, Dict, Optional

from .grid import Grid
from .aldous_broder import aldous_broder
from .backtracker import backtracker
from .hunt_and_kill import hunt_and_kill
from .sidewinder import sidewinder
from .wilsons import wilsons

# Every algorithm mutates the grid in place and returns the seed it used
Algorithm = Callable[[Grid, Optional[int]], int]

ALGORITHMS: Dict[str, Algorithm] = {
    "sidewinder": sidewinder,
    "aldous_broder": aldous_broder,
    "wilsons": wilsons,
    "hunt_and_kill": hunt_and_kill,
    "backtracker": backtracker,
}

DISPLAY_NAMES = {
    "sidewinder": "Sidewinder",
    "aldous_broder": "Aldous-Broder",
    "wilsons": "Wilson's",
    "hunt_and_kill": "Hunt-and-Kill",
    "backtracker": "Backtracker",
}


def normalize_name(name: str) -> str:
    """
    Map user spellings like 'Hunt-and-Kill' or 'aldous broder' to registry keys.

    Raises:
        ValueError: If the name is not a known algorithm
    """
    key = name.strip().lower().replace("-", "_").replace(" ", "_").replace("'", "")
    if key not in ALGORITHMS:
        raise ValueError(
            f"Unknown algorithm '{name}', expected one of {', '.join(ALGORITHMS)}"
        )
    return key


def get_algorithm(name: str) -> Algorithm:
    """Look up an algorithm function by name."""
    return ALGORITHMS[normalize_name(name)]


def generate(grid: Grid, algorithm: str, seed: Optional[int] = None) -> int:
    """Run the named algorithm on ``grid`` and return the seed used."""
    return get_algorithm(algorithm)(grid, seed)
