"""
PyQt6 User Interface module.

Provides the main application window.
"""

from textdiff.ui.main_window import MainWindow

__all__ = [
    'MainWindow',
]
