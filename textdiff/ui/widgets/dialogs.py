"""
Dialogs used by the main window.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from PyQt6.QtWidgets import QFileDialog, QMessageBox, QWidget

from textdiff.core.models import ExportFormat


APP_TITLE = "text-diff"

# Save dialog filter for each export format
EXPORT_FILTERS = {
    ExportFormat.TEXT: "Text file (*.txt)",
    ExportFormat.CSV: "CSV file (*.csv)",
    ExportFormat.JSON: "JSON file (*.json)",
}


def show_warning(parent: Optional[QWidget], message: str) -> None:
    QMessageBox.warning(parent, APP_TITLE, message)


def show_error(parent: Optional[QWidget], message: str) -> None:
    QMessageBox.critical(parent, APP_TITLE, message)


def ask_export_destination(
    parent: Optional[QWidget],
    start_dir: str = "",
    default_format: ExportFormat = ExportFormat.TEXT
) -> Optional[tuple[Path, ExportFormat]]:
    """
    Ask where to export a result.

    The format comes from the file extension when it is recognized,
    otherwise from the selected filter.

    Returns:
        (destination, format), or None if the dialog was cancelled
    """
    filters = ";;".join(EXPORT_FILTERS.values())
    path, selected_filter = QFileDialog.getSaveFileName(
        parent,
        "Export Differences",
        start_dir,
        filters,
        EXPORT_FILTERS[default_format],
    )
    if not path:
        return None

    destination = Path(path)
    if destination.suffix.lower().lstrip('.') in {f.value for f in ExportFormat}:
        return destination, ExportFormat.from_path(destination)

    for export_format, name in EXPORT_FILTERS.items():
        if name == selected_filter:
            return destination, export_format
    return destination, ExportFormat.default()
