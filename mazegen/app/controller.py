"""Application controller connecting the viewer to maze generation."""

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal

from ..domain.grid import Grid
from ..domain.generators import normalize_name
from ..domain.types import GenerationConfig, check_dimensions
from ..utils.analysis import MazeStats, summarize
from ..utils.grid_factory import generate_maze

logger = logging.getLogger(__name__)


class MazeController(QObject):
    """
    Holds the current configuration and maze, regenerating on request.

    Signals:
        grid_updated: Emitted after a new maze has been carved
        error_occurred: Emitted with a message when generation fails
    """

    grid_updated = Signal()
    error_occurred = Signal(str)

    def __init__(self, config: Optional[GenerationConfig] = None):
        super().__init__()

        self._config = config or GenerationConfig()
        self._grid: Optional[Grid] = None
        self._seed: Optional[int] = None
        self._stats: Optional[MazeStats] = None

    # Properties

    @property
    def config(self) -> GenerationConfig:
        return self._config

    @property
    def grid(self) -> Optional[Grid]:
        """Get the current maze."""
        return self._grid

    @property
    def seed(self) -> Optional[int]:
        """Seed used for the current maze."""
        return self._seed

    @property
    def stats(self) -> Optional[MazeStats]:
        return self._stats

    # Configuration

    def set_algorithm(self, name: str) -> bool:
        """Select the algorithm used by the next regeneration."""
        try:
            self._config.algorithm = normalize_name(name)
            return True
        except ValueError as e:
            self.error_occurred.emit(str(e))
            return False

    def set_size(self, rows: int, columns: int) -> bool:
        """Set the dimensions used by the next regeneration."""
        try:
            check_dimensions(rows, columns)
        except ValueError as e:
            self.error_occurred.emit(str(e))
            return False
        self._config.rows = rows
        self._config.columns = columns
        return True

    # Generation

    def regenerate(self, seed: Optional[int] = None) -> bool:
        """
        Carve a new maze with the current configuration.

        A seed of None draws a fresh one; the seed used is available through
        the ``seed`` property afterwards.
        """
        self._config.seed = seed
        try:
            self._grid, self._seed = generate_maze(self._config)
            self._stats = summarize(self._grid)
        except ValueError as e:
            logger.warning("Maze generation failed: %s", e)
            self.error_occurred.emit(f"Failed to generate maze: {e}")
            return False

        self.grid_updated.emit()
        return True
