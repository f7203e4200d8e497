"""Main window for the maze viewer."""

from PySide6.QtWidgets import (
    QMainWindow, QVBoxLayout, QHBoxLayout, QWidget, QPushButton,
    QLabel, QComboBox, QSpinBox, QLineEdit, QStatusBar, QGroupBox, QTextEdit
)
from PySide6.QtGui import QKeySequence, QShortcut

from ..app.controller import MazeController
from ..domain.generators import ALGORITHMS, DISPLAY_NAMES
from ..utils.rng import parse_seed
from .grid_view import MazeView


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, controller: MazeController):
        super().__init__()
        self.controller = controller

        self.setWindowTitle("Maze Generator")
        self.setMinimumSize(900, 600)

        self._create_ui()
        self._setup_connections()
        self._setup_shortcuts()

        self._on_grid_updated()

    def _create_ui(self):
        """Create the user interface."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        main_layout = QVBoxLayout(central_widget)
        main_layout.addLayout(self._create_controls())

        content_layout = QHBoxLayout()
        self.maze_view = MazeView(self.controller)
        content_layout.addWidget(self.maze_view, 3)
        content_layout.addWidget(self._create_statistics_panel(), 1)
        main_layout.addLayout(content_layout, 1)

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)
        self.status_bar.showMessage("Ready | Ctrl+G to generate, Ctrl+N for a new seed, Q to quit")

    def _create_controls(self) -> QHBoxLayout:
        """Create the control panel."""
        layout = QHBoxLayout()
        config = self.controller.config

        algo_group = QGroupBox("Algorithm")
        algo_layout = QHBoxLayout(algo_group)
        self.algorithm_combo = QComboBox()
        for key in ALGORITHMS:
            self.algorithm_combo.addItem(DISPLAY_NAMES[key], key)
        self.algorithm_combo.setCurrentIndex(list(ALGORITHMS).index(config.algorithm))
        algo_layout.addWidget(self.algorithm_combo)

        grid_group = QGroupBox("Grid")
        grid_layout = QHBoxLayout(grid_group)
        grid_layout.addWidget(QLabel("Size:"))
        self.rows_spin = QSpinBox()
        self.rows_spin.setRange(1, 200)
        self.rows_spin.setValue(config.rows)
        grid_layout.addWidget(self.rows_spin)
        grid_layout.addWidget(QLabel("×"))
        self.columns_spin = QSpinBox()
        self.columns_spin.setRange(1, 200)
        self.columns_spin.setValue(config.columns)
        grid_layout.addWidget(self.columns_spin)

        seed_group = QGroupBox("Seed")
        seed_layout = QHBoxLayout(seed_group)
        self.seed_edit = QLineEdit()
        self.seed_edit.setPlaceholderText("random")
        seed_layout.addWidget(self.seed_edit)

        self.generate_btn = QPushButton("Generate")
        self.new_seed_btn = QPushButton("New Seed")

        layout.addWidget(algo_group)
        layout.addWidget(grid_group)
        layout.addWidget(seed_group)
        layout.addWidget(self.generate_btn)
        layout.addWidget(self.new_seed_btn)
        layout.addStretch()

        return layout

    def _create_statistics_panel(self) -> QGroupBox:
        """Create the statistics display panel."""
        stats_group = QGroupBox("Maze Statistics")
        stats_layout = QVBoxLayout(stats_group)

        self.stats_display = QTextEdit()
        self.stats_display.setReadOnly(True)
        stats_layout.addWidget(self.stats_display)
        stats_layout.addStretch()

        return stats_group

    def _setup_connections(self):
        """Setup signal connections."""
        self.generate_btn.clicked.connect(self._on_generate)
        self.new_seed_btn.clicked.connect(self._on_new_seed)

        self.controller.grid_updated.connect(self._on_grid_updated)
        self.controller.error_occurred.connect(self._on_error)

    def _setup_shortcuts(self):
        """Setup keyboard shortcuts."""
        QShortcut(QKeySequence("Ctrl+G"), self, self._on_generate)
        QShortcut(QKeySequence("Ctrl+N"), self, self._on_new_seed)
        QShortcut(QKeySequence("F"), self, self.maze_view.fit_in_view)
        QShortcut(QKeySequence("0"), self, self.maze_view.reset_zoom)

        QShortcut(QKeySequence("Q"), self, self.close)
        QShortcut(QKeySequence("Ctrl+Q"), self, self.close)
        QShortcut(QKeySequence("Escape"), self, self.close)

    def _apply_settings(self) -> bool:
        """Push the widget values into the controller."""
        if not self.controller.set_algorithm(self.algorithm_combo.currentData()):
            return False
        return self.controller.set_size(self.rows_spin.value(), self.columns_spin.value())

    def _on_generate(self):
        """Generate with the seed in the seed box (blank means random)."""
        try:
            seed = parse_seed(self.seed_edit.text())
        except ValueError as e:
            self._on_error(str(e))
            return
        if self._apply_settings():
            self.controller.regenerate(seed)

    def _on_new_seed(self):
        """Generate with a fresh random seed."""
        if self._apply_settings():
            self.controller.regenerate(None)

    def _on_grid_updated(self):
        """Refresh the seed box and statistics after a new maze."""
        if self.controller.seed is not None:
            self.seed_edit.setText(str(self.controller.seed))

        stats = self.controller.stats
        if stats is None:
            self.stats_display.clear()
            return

        name = self.algorithm_combo.currentText()
        lines = [f"Algorithm: {name}", f"Seed: {self.controller.seed}"] + stats.as_lines()
        self.stats_display.setPlainText("\n".join(lines))
        self.status_bar.showMessage(f"Generated {stats.rows}×{stats.columns} maze with {name}")

    def _on_error(self, message: str):
        """Show an error in the status bar."""
        self.status_bar.showMessage(f"Error: {message}")
