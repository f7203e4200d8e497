"""Main entry point for the maze generator."""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .domain.generators import ALGORITHMS, DISPLAY_NAMES
from .domain.types import GenerationConfig, RENDER_STYLES
from .utils.analysis import summarize
from .utils.grid_factory import generate_maze
from .utils.render import render


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="mazegen",
        description="Generate perfect mazes and print them as text",
    )
    parser.add_argument("--rows", type=int, default=10, help="Number of rows")
    parser.add_argument("--columns", type=int, default=20, help="Number of columns")
    parser.add_argument(
        "--algorithm", default="backtracker",
        help=f"One of {', '.join(ALGORITHMS)}, or 'all'",
    )
    parser.add_argument("--seed", type=int, help="Random seed (random when omitted)")
    parser.add_argument("--style", choices=RENDER_STYLES, default="box", help="Text rendering style")
    parser.add_argument("--stats", action="store_true", help="Print maze statistics")
    parser.add_argument("--gui", action="store_true", help="Open the maze viewer instead of printing")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def run_text(args: argparse.Namespace) -> int:
    """Print one maze per requested algorithm."""
    names = list(ALGORITHMS) if args.algorithm == "all" else [args.algorithm]

    for name in names:
        try:
            config = GenerationConfig(
                rows=args.rows, columns=args.columns,
                algorithm=name, seed=args.seed, style=args.style,
            )
            grid, seed = generate_maze(config)
        except ValueError as e:
            print(f"Error: {e}")
            return 1

        print(f"{DISPLAY_NAMES[config.algorithm]} (seed {seed})")
        print(render(grid, config.style), end="")
        if args.stats:
            for line in summarize(grid).as_lines():
                print(f"  {line}")
        print()

    return 0


def run_gui(args: argparse.Namespace) -> int:
    """Open the read-only viewer."""
    try:
        config = GenerationConfig(
            rows=args.rows, columns=args.columns,
            algorithm="backtracker" if args.algorithm == "all" else args.algorithm,
            seed=args.seed,
        )
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    os.environ.setdefault('QT_LOGGING_RULES', 'qt.qpa.backingstore=false')

    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication(sys.argv[:1])
    app.setApplicationName("Maze Generator")

    # Import UI components (after QApplication is created)
    from .app.controller import MazeController
    from .ui.main_window import MainWindow

    controller = MazeController(config)
    controller.regenerate(config.seed)
    window = MainWindow(controller)
    window.show()
    return app.exec()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command line."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.gui:
        return run_gui(args)
    return run_text(args)


if __name__ == "__main__":
    sys.exit(main())
