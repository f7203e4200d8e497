"""Text renderers for finished mazes. Row 0 is printed at the bottom."""

from ..domain.grid import Grid
from ..domain.types import Direction, RENDER_STYLES


def render_box(grid: Grid) -> str:
    """
    Draw the maze with '+', '-' and '|' characters.

    Example for a 1x2 grid with one east link::

        +---+---+
        |       |
        +---+---+
    """
    lines = ["+" + "---+" * grid.columns]

    for row in reversed(grid.cells):
        body = "|"
        bottom = "+"
        for cell in row:
            body += "   " + (" " if cell.is_linked(Direction.EAST) else "|")
            bottom += ("   " if cell.is_linked(Direction.SOUTH) else "---") + "+"
        lines.append(body)
        lines.append(bottom)

    return "\n".join(lines) + "\n"


def render_compact(grid: Grid) -> str:
    """
    Draw the maze three characters per cell using '_' floors and '|' walls.

    Example for the same 1x2 grid::

        _______
        |_____|
    """
    lines = ["_" * (grid.columns * 3 + 1)]

    for row in reversed(grid.cells):
        line = "|"
        for cell in row:
            floor = "  " if cell.is_linked(Direction.SOUTH) else "__"
            edge = floor[0] if cell.is_linked(Direction.EAST) else "|"
            line += floor + edge
        lines.append(line)

    return "\n".join(lines) + "\n"


_RENDERERS = {
    "box": render_box,
    "compact": render_compact,
}


def render(grid: Grid, style: str = "box") -> str:
    """Render ``grid`` in the given style ('box' or 'compact')."""
    if style not in _RENDERERS:
        raise ValueError(
            f"Unknown render style '{style}', expected one of {', '.join(RENDER_STYLES)}"
        )
    return _RENDERERS[style](grid)
