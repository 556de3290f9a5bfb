"""
Worker for comparing two text files in the background.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from PyQt6.QtCore import QObject

from textdiff.core.diff.line_set_diff import LineSetDiffEngine
from textdiff.core.models import LineDifference
from textdiff.services.file_io import FileIOService
from textdiff.workers.base_worker import BaseWorker


class LineCompareWorker(BaseWorker):
    """
    Worker for comparing text files line by line.

    Reads both files and runs the line set diff engine in a
    background thread. Read failures surface through the
    `error` signal as FileAccessError.
    """

    def __init__(
        self,
        left_path: str | Path,
        right_path: str | Path,
        file_io_service: Optional[FileIOService] = None,
        engine: Optional[LineSetDiffEngine] = None,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent=parent)
        self.left_path = Path(left_path)
        self.right_path = Path(right_path)
        self._file_io = file_io_service or FileIOService()
        self._engine = engine or LineSetDiffEngine()

    def do_work(self) -> LineDifference:
        """Read both files and compute the differing lines."""
        self.report_status(f"Reading {self.left_path.name}...")
        left_lines = self._file_io.read_lines(self.left_path)
        self.check_cancelled()

        self.report_status(f"Reading {self.right_path.name}...")
        right_lines = self._file_io.read_lines(self.right_path)
        self.check_cancelled()

        self.report_status("Computing differences...")
        result = self._engine.compare(left_lines, right_lines)

        self.report_status("Complete")
        return result
