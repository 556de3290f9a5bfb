"""
Main application window.

Provides the primary UI container with:
- Theme chooser
- Two file path selectors
- Compare and export actions
- Result list
- Status bar
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PyQt6.QtCore import Qt, pyqtSlot
from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel,
    QListWidget, QPushButton, QRadioButton, QButtonGroup,
    QStatusBar, QApplication, QProgressBar
)

from textdiff.core.models import LineDifference, TextDiffError
from textdiff.services.exporter import ResultExporter
from textdiff.services.settings import SettingsManager, Theme
from textdiff.ui.widgets.dialogs import (
    APP_TITLE, ask_export_destination, show_error, show_warning
)
from textdiff.ui.widgets.path_selector import PathSelector
from textdiff.workers.base_worker import WorkerThread
from textdiff.workers.compare_worker import LineCompareWorker


class MainWindow(QMainWindow):
    """
    Main application window.

    Collects two file paths, runs the comparison in a worker thread
    and shows the differing lines.
    """

    def __init__(
        self,
        settings_manager: Optional[SettingsManager] = None,
        parent: Optional[QWidget] = None
    ):
        super().__init__(parent)

        self._settings_manager = settings_manager or SettingsManager()
        self._settings = self._settings_manager.settings
        self._exporter = ResultExporter()

        self._current_worker: Optional[WorkerThread] = None
        self._result: Optional[LineDifference] = None

        self._setup_ui()
        self._setup_statusbar()
        self._load_settings()

    def _setup_ui(self) -> None:
        """Set up the main UI layout."""
        self.setWindowTitle(APP_TITLE)
        self.setMinimumSize(600, 480)

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(15)

        title = QLabel(APP_TITLE)
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        title.setStyleSheet("font-size: 48px; color: #808080;")
        layout.addWidget(title)

        layout.addLayout(self._create_theme_chooser())

        self._left_selector = PathSelector(
            self._settings_manager, is_left=True, placeholder="/path/to/first/file.txt"
        )
        layout.addWidget(self._left_selector)

        self._right_selector = PathSelector(
            self._settings_manager, is_left=False, placeholder="/path/to/second/file.txt"
        )
        layout.addWidget(self._right_selector)

        button_row = QHBoxLayout()
        button_row.addStretch()

        self._export_btn = QPushButton("Export...")
        self._export_btn.setEnabled(False)
        self._export_btn.clicked.connect(self._on_export)
        button_row.addWidget(self._export_btn)

        self._compare_btn = QPushButton("Compare")
        self._compare_btn.setDefault(True)
        self._compare_btn.clicked.connect(self._on_compare)
        button_row.addWidget(self._compare_btn)

        layout.addLayout(button_row)

        self._result_list = QListWidget()
        self._result_list.setAlternatingRowColors(True)
        layout.addWidget(self._result_list, 1)

        self.setCentralWidget(central)

    def _create_theme_chooser(self) -> QHBoxLayout:
        """Create one radio button per theme."""
        row = QHBoxLayout()
        row.addWidget(QLabel("Choose a theme:"))

        self._theme_group = QButtonGroup(self)
        for theme in Theme:
            button = QRadioButton(theme.value.capitalize())
            button.setChecked(theme == self._settings.ui.theme)
            button.toggled.connect(
                lambda checked, t=theme: checked and self._on_theme_changed(t)
            )
            self._theme_group.addButton(button)
            row.addWidget(button)

        row.addStretch()
        return row

    def _setup_statusbar(self) -> None:
        """Set up the status bar."""
        self._statusbar = QStatusBar()
        self.setStatusBar(self._statusbar)

        self._status_label = QLabel("Ready")
        self._statusbar.addWidget(self._status_label, 1)

        self._progress_bar = QProgressBar()
        self._progress_bar.setMaximumWidth(200)
        self._progress_bar.setRange(0, 0)
        self._progress_bar.hide()
        self._statusbar.addPermanentWidget(self._progress_bar)

        self._stats_label = QLabel()
        self._statusbar.addPermanentWidget(self._stats_label)

    def _load_settings(self) -> None:
        """Restore window geometry."""
        if self._settings.ui.window_maximized:
            self.showMaximized()
        else:
            self.resize(self._settings.ui.window_width, self._settings.ui.window_height)
            self._center_on_screen()

    def _save_settings(self) -> None:
        """Save window geometry."""
        self._settings.ui.window_maximized = self.isMaximized()
        if not self.isMaximized():
            self._settings.ui.window_width = self.width()
            self._settings.ui.window_height = self.height()
        self._settings_manager.save()

    def _center_on_screen(self) -> None:
        """Center window on screen."""
        screen = QApplication.primaryScreen()
        if screen:
            geometry = screen.availableGeometry()
            x = geometry.x() + (geometry.width() - self.width()) // 2
            y = geometry.y() + (geometry.height() - self.height()) // 2
            self.move(x, y)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def compare_files(self, left_path: str, right_path: str) -> None:
        """Fill in both paths and start a comparison."""
        self._left_selector.set_path(left_path)
        self._right_selector.set_path(right_path)
        self._on_compare()

    @pyqtSlot()
    def _on_compare(self) -> None:
        left_path = self._left_selector.path()
        right_path = self._right_selector.path()

        if not left_path or not right_path:
            show_warning(self, "Please select two files first!")
            return

        if self._current_worker is not None and self._current_worker.isRunning():
            self._current_worker.cancel()
            self._current_worker.wait()

        self._left_selector.add_to_history(left_path)
        self._right_selector.add_to_history(right_path)

        self._show_progress(f"Comparing {Path(left_path).name} and {Path(right_path).name}...")
        self._compare_btn.setEnabled(False)

        worker = LineCompareWorker(left_path, right_path)
        thread = WorkerThread(worker)
        worker.signals.status.connect(self._status_label.setText)
        worker.signals.finished.connect(self._on_compare_complete)
        worker.signals.error.connect(self._on_worker_error)
        worker.signals.cancelled.connect(self._hide_progress)

        self._current_worker = thread
        thread.start()

    @pyqtSlot(object)
    def _on_compare_complete(self, result: LineDifference) -> None:
        self._hide_progress()
        self._result = result

        self._result_list.clear()
        self._result_list.addItems(result.lines)

        self._export_btn.setEnabled(True)
        self._stats_label.setText(result.summary())
        self._status_label.setText("Comparison complete")

    @pyqtSlot(str, str)
    def _on_worker_error(self, error_type: str, message: str) -> None:
        self._hide_progress()
        logging.error(f"MainWindow - Comparison failed ({error_type}): {message}")
        show_error(self, f"Error while reading file!\n{message}")
        self._status_label.setText("Comparison failed")

    def _show_progress(self, message: str) -> None:
        self._status_label.setText(message)
        self._progress_bar.show()

    @pyqtSlot()
    def _hide_progress(self) -> None:
        self._progress_bar.hide()
        self._compare_btn.setEnabled(True)

    # -------------------------------------------------------------------------
    # Export
    # -------------------------------------------------------------------------

    @pyqtSlot()
    def _on_export(self) -> None:
        if self._result is None:
            return

        choice = ask_export_destination(
            self,
            self._settings.export.last_directory,
            self._settings.export.default_format,
        )
        if choice is None:
            return
        destination, export_format = choice

        try:
            self._exporter.export(self._result.lines, export_format, destination)
        except TextDiffError as e:
            logging.error(f"MainWindow - Export failed: {e}")
            show_error(self, f"Error while exporting!\n{e}")
            return

        self._settings.export.last_directory = str(destination.parent)
        self._settings.export.default_format = export_format
        self._settings_manager.save()
        self._status_label.setText(f"Exported to {destination}")

    # -------------------------------------------------------------------------
    # Theme and lifecycle
    # -------------------------------------------------------------------------

    def _on_theme_changed(self, theme: Theme) -> None:
        from textdiff.main import setup_theme

        app = QApplication.instance()
        if app is not None:
            setup_theme(app, theme)
        self._settings.ui.theme = theme
        self._settings_manager.save()

    def closeEvent(self, event: QCloseEvent) -> None:
        if self._current_worker is not None and self._current_worker.isRunning():
            self._current_worker.cancel()
            self._current_worker.wait()
        self._save_settings()
        super().closeEvent(event)
