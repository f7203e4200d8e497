"""Read-only graphics view of the current maze."""

from typing import List

from PySide6.QtWidgets import QGraphicsView, QGraphicsScene
from PySide6.QtGui import QPainter
from PySide6.QtCore import Qt

from ..app.controller import MazeController
from ..utils.analysis import WALL, to_array
from .tiles import MazeTile


class MazeView(QGraphicsView):
    """Graphics view drawing the maze raster as tiles."""

    def __init__(self, controller: MazeController):
        super().__init__()

        self.controller = controller
        self.scene = QGraphicsScene()
        self.setScene(self.scene)

        self.tiles: List[MazeTile] = []
        self.tile_size = 12.0

        self.setRenderHint(QPainter.Antialiasing)
        self.setDragMode(QGraphicsView.ScrollHandDrag)

        self.controller.grid_updated.connect(self.update_grid)
        self.update_grid()

    def update_grid(self):
        """Rebuild the tiles from the controller's maze."""
        grid = self.controller.grid
        if not grid:
            return

        self.scene.clear()
        self.tiles.clear()

        raster = to_array(grid)
        height, width = raster.shape
        self.scene.setSceneRect(0, 0, width * self.tile_size, height * self.tile_size)

        for y in range(height):
            for x in range(width):
                tile = MazeTile(x, y, self.tile_size, raster[y, x] == WALL)
                self.scene.addItem(tile)
                self.tiles.append(tile)

        self.fit_in_view()

    def wheelEvent(self, event):
        """Handle mouse wheel for zooming."""
        zoom_factor = 1.15
        if event.angleDelta().y() > 0:
            self.scale(zoom_factor, zoom_factor)
        else:
            self.scale(1 / zoom_factor, 1 / zoom_factor)

    def fit_in_view(self):
        """Fit the entire maze in the view."""
        if self.scene.items():
            self.fitInView(self.scene.itemsBoundingRect(), Qt.KeepAspectRatio)

    def reset_zoom(self):
        """Reset zoom to 1:1."""
        self.resetTransform()
