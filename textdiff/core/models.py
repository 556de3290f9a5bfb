"""
Core data models for the text-diff application.

This module defines the data structures shared by the core and the shell:
- Export format enumeration
- Export requests
- Line difference results
- Error hierarchy

All models are UI-agnostic and can be used without Qt.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional


# A line of text with its terminator stripped, and the ordered lines of a file.
Line = str
LineSequence = list[str]
DifferenceResult = list[str]


# =============================================================================
# Enumerations
# =============================================================================

class ExportFormat(Enum):
    """Serialization used when exporting a difference result."""
    TEXT = "txt"
    CSV = "csv"
    JSON = "json"

    @classmethod
    def default(cls) -> 'ExportFormat':
        """Format used when none can be determined."""
        return cls.TEXT

    @classmethod
    def from_path(cls, path: Path | str) -> 'ExportFormat':
        """
        Infer the format from a destination's file extension.

        The match is case-insensitive. Unknown or missing extensions
        fall back to the default format.
        """
        suffix = Path(path).suffix.lower().lstrip('.')
        for export_format in cls:
            if export_format.value == suffix:
                return export_format
        return cls.default()

    @classmethod
    def from_string(cls, value: str) -> 'ExportFormat':
        """Create from a name ("text", "csv") or extension ("txt")."""
        try:
            for export_format in cls:
                if export_format.value == value.lower():
                    return export_format
            return cls[value.upper()]
        except (KeyError, AttributeError):
            return cls.default()

    @property
    def extension(self) -> str:
        return f".{self.value}"


# =============================================================================
# Diff Models
# =============================================================================

@dataclass
class LineDifference:
    """
    Lines present in only one of two compared files.

    `lines` holds the left-only lines in left order followed by the
    right-only lines in right order.
    """
    lines: DifferenceResult = field(default_factory=list)
    left_only_count: int = 0
    right_only_count: int = 0
    left_line_count: int = 0
    right_line_count: int = 0

    @property
    def total_differences(self) -> int:
        return len(self.lines)

    @property
    def is_identical(self) -> bool:
        return not self.lines

    def summary(self) -> str:
        """Short human readable description for status displays."""
        if self.is_identical:
            return "No differences"
        return (
            f"{self.total_differences} different line(s): "
            f"{self.left_only_count} only in first, "
            f"{self.right_only_count} only in second"
        )


@dataclass(frozen=True)
class ExportRequest:
    """A difference result to be written once to a destination."""
    lines: tuple[str, ...]
    export_format: ExportFormat
    destination: Path

    @classmethod
    def for_destination(
        cls,
        lines: DifferenceResult,
        destination: Path | str,
        export_format: Optional[ExportFormat] = None
    ) -> 'ExportRequest':
        """Build a request, inferring the format from the destination if needed."""
        destination = Path(destination)
        return cls(
            lines=tuple(lines),
            export_format=export_format or ExportFormat.from_path(destination),
            destination=destination,
        )


# =============================================================================
# Errors
# =============================================================================

class TextDiffError(Exception):
    """Base class for errors raised by the text-diff core."""
    pass


class FileAccessError(TextDiffError):
    """
    A source file could not be read or a destination could not be written.

    Wraps the underlying OS or decoding error for display.
    """

    def __init__(self, message: str, path: Path | str | None = None,
                 cause: Optional[BaseException] = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None
        self.cause = cause


class SerializationError(TextDiffError):
    """A difference result could not be encoded."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
