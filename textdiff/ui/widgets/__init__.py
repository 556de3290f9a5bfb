"""
Reusable UI widgets for the text-diff application.
"""

from textdiff.ui.widgets.path_selector import (
    PathSelector,
)
from textdiff.ui.widgets.dialogs import (
    ask_export_destination,
    show_error,
    show_warning,
)

__all__ = [
    'PathSelector',
    'ask_export_destination',
    'show_error',
    'show_warning',
]
