"""
Diff module for file comparison operations.

Provides the line set difference engine used to find the lines
present in only one of two files.
"""

from textdiff.core.diff.line_set_diff import (
    LineSetDiffEngine,
    get_differences,
)

__all__ = [
    'LineSetDiffEngine',
    'get_differences',
]
