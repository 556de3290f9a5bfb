"""
Path selection widget.

Provides file path selection with:
- Browse button
- History dropdown
- Drag and drop support
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QDragEnterEvent, QDropEvent
from PyQt6.QtWidgets import (
    QWidget, QHBoxLayout, QLineEdit, QPushButton,
    QFileDialog, QToolButton, QMenu
)

from textdiff.services.settings import SettingsManager


FILE_FILTER = "Text file (*.txt);;All files (*)"


class PathSelector(QWidget):
    """
    Widget for selecting a file path.

    Features:
    - Text input
    - Browse button
    - History dropdown backed by the recent paths in settings
    - Drag and drop
    """

    path_changed = pyqtSignal(str)

    def __init__(
        self,
        settings_manager: SettingsManager,
        is_left: bool,
        placeholder: str = "/path/to/file.txt",
        parent: Optional[QWidget] = None
    ):
        super().__init__(parent)

        self._settings_manager = settings_manager
        self._is_left = is_left
        self.placeholder = placeholder

        self.setAcceptDrops(True)
        self._setup_ui()

    def _setup_ui(self) -> None:
        """Setup the widget UI."""
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(10)

        self.path_edit = QLineEdit()
        self.path_edit.setPlaceholderText(self.placeholder)
        self.path_edit.textChanged.connect(self.path_changed.emit)
        layout.addWidget(self.path_edit)

        self.history_btn = QToolButton()
        self.history_btn.setText("▼")
        self.history_btn.setPopupMode(QToolButton.ToolButtonPopupMode.InstantPopup)
        self.history_menu = QMenu(self)
        self.history_btn.setMenu(self.history_menu)
        layout.addWidget(self.history_btn)
        self._update_history_menu()

        self.browse_btn = QPushButton("...")
        self.browse_btn.setMinimumWidth(60)
        self.browse_btn.clicked.connect(self._browse)
        layout.addWidget(self.browse_btn)

    def path(self) -> str:
        """Get the current path."""
        return self.path_edit.text().strip()

    def set_path(self, path: str) -> None:
        """Set the current path."""
        self.path_edit.setText(path)

    def add_to_history(self, path: str) -> None:
        """Remember a path in the recent paths list."""
        self._settings_manager.add_recent_path(path, self._is_left)
        self._update_history_menu()

    def _history(self) -> list[str]:
        settings = self._settings_manager.settings
        return settings.recent_left_paths if self._is_left else settings.recent_right_paths

    def _update_history_menu(self) -> None:
        """Update the history dropdown menu."""
        self.history_menu.clear()
        history = self._history()

        for path in history:
            action = self.history_menu.addAction(path)
            # Bind the current path, not the loop variable
            action.triggered.connect(lambda checked=False, p=path: self.set_path(p))

        if history:
            self.history_menu.addSeparator()
            clear_action = self.history_menu.addAction("Clear History")
            clear_action.triggered.connect(self._clear_history)

        self.history_btn.setEnabled(bool(history))

    def _clear_history(self) -> None:
        self._settings_manager.clear_recent_paths(self._is_left)
        self._update_history_menu()

    def _browse(self) -> None:
        """Open a file dialog."""
        start_dir = str(Path(self.path()).parent) if self.path() else ""
        path, _ = QFileDialog.getOpenFileName(self, "Select File", start_dir, FILE_FILTER)
        if path:
            self.set_path(path)

    def dragEnterEvent(self, event: QDragEnterEvent) -> None:
        if event.mimeData().hasUrls():
            event.acceptProposedAction()

    def dropEvent(self, event: QDropEvent) -> None:
        urls = event.mimeData().urls()
        if urls and urls[0].isLocalFile():
            self.set_path(urls[0].toLocalFile())
            event.acceptProposedAction()
