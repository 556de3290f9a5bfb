"""
text-diff: find the lines that differ between two text files.

Reads two files, reports the lines found in only one of them and
exports the result as plain text, CSV or JSON.
"""

__version__ = "1.0.0"

from textdiff.core import (
    ExportFormat,
    FileAccessError,
    LineDifference,
    LineSetDiffEngine,
    SerializationError,
    TextDiffError,
    get_differences,
)

__all__ = [
    'ExportFormat',
    'FileAccessError',
    'LineDifference',
    'LineSetDiffEngine',
    'SerializationError',
    'TextDiffError',
    'get_differences',
]
