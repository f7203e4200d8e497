"""Raster tile graphics items for the maze viewer."""

from PySide6.QtWidgets import QGraphicsRectItem
from PySide6.QtGui import QBrush, QPen, QColor
from PySide6.QtCore import Qt


class MazeTile(QGraphicsRectItem):
    """Graphics item for one raster square of the maze (wall or passage)."""

    COLORS = {
        "passage": QColor(240, 240, 240),    # Light gray
        "wall": QColor(64, 64, 64),          # Dark gray
    }

    def __init__(self, x: int, y: int, size: float, is_wall: bool):
        super().__init__(0, 0, size, size)
        self.raster_x = x
        self.raster_y = y
        self.is_wall = is_wall

        self.setPos(x * size, y * size)
        self.setBrush(QBrush(self.COLORS["wall" if is_wall else "passage"]))
        self.setPen(QPen(Qt.NoPen))
