"""
Services for file access, export and persisted settings.
"""

from textdiff.services.file_io import FileIOService
from textdiff.services.exporter import ResultExporter
from textdiff.services.settings import (
    ApplicationSettings,
    ExportSettings,
    SettingsManager,
    Theme,
    UISettings,
)

__all__ = [
    'FileIOService',
    'ResultExporter',
    'ApplicationSettings',
    'ExportSettings',
    'SettingsManager',
    'Theme',
    'UISettings',
]
