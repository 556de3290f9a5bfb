"""
Core comparison logic and data models.

Nothing in this package depends on Qt.
"""

from textdiff.core.models import (
    DifferenceResult,
    ExportFormat,
    ExportRequest,
    FileAccessError,
    LineDifference,
    LineSequence,
    SerializationError,
    TextDiffError,
)
from textdiff.core.diff import LineSetDiffEngine, get_differences

__all__ = [
    'DifferenceResult',
    'ExportFormat',
    'ExportRequest',
    'FileAccessError',
    'LineDifference',
    'LineSequence',
    'SerializationError',
    'TextDiffError',
    'LineSetDiffEngine',
    'get_differences',
]
