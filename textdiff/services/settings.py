"""
Application settings management.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Callable, Optional
from enum import Enum

from textdiff.core.models import ExportFormat


class Theme(Enum):
    """UI theme options."""
    SYSTEM = "system"
    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def from_string(cls, value: str) -> 'Theme':
        """Create from string value."""
        try:
            # Try to match by value
            for theme in cls:
                if theme.value == value.lower():
                    return theme
            # Try to match by name
            return cls[value.upper()]
        except (KeyError, AttributeError):
            return cls.SYSTEM


@dataclass
class UISettings:
    """User interface settings."""
    theme: Theme = Theme.SYSTEM
    window_width: int = 800
    window_height: int = 720
    window_maximized: bool = False
    recent_files_limit: int = 5


@dataclass
class ExportSettings:
    """Settings for exporting difference results."""
    default_format: ExportFormat = ExportFormat.TEXT
    last_directory: str = ""


@dataclass
class ApplicationSettings:
    """Main application settings container."""
    ui: UISettings = field(default_factory=UISettings)
    export: ExportSettings = field(default_factory=ExportSettings)

    recent_left_paths: list[str] = field(default_factory=list)
    recent_right_paths: list[str] = field(default_factory=list)


class SettingsManager:
    """Manager for loading/saving application settings."""

    def __init__(self, settings_path: Optional[Path] = None):
        self.settings_path = Path(settings_path) if settings_path else self._get_default_path()
        self._settings: Optional[ApplicationSettings] = None
        self._observers: list[Callable[[ApplicationSettings], None]] = []

    @staticmethod
    def _get_default_path() -> Path:
        """Get the default settings file path."""
        if os.name == 'nt':
            # Windows
            app_data = os.environ.get('APPDATA', os.path.expanduser('~'))
            return Path(app_data) / 'TextDiff' / 'settings.json'
        else:
            # Linux/Mac
            config_home = os.environ.get('XDG_CONFIG_HOME',
                                         os.path.expanduser('~/.config'))
            return Path(config_home) / 'textdiff' / 'settings.json'

    @property
    def settings(self) -> ApplicationSettings:
        """Get current settings, loading from disk if needed."""
        if self._settings is None:
            self._settings = self.load()
        return self._settings

    def load(self) -> ApplicationSettings:
        """Load settings from disk, falling back to defaults."""
        if not self.settings_path.exists():
            return ApplicationSettings()

        try:
            with open(self.settings_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("settings root is not an object")
            return self._from_dict(data)
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logging.warning(f"SettingsManager - Using defaults, could not load {self.settings_path}: {e}")
            return ApplicationSettings()

    def save(self, settings: Optional[ApplicationSettings] = None) -> bool:
        """Save settings to disk."""
        settings = settings or self._settings
        if settings is None:
            return False

        try:
            self.settings_path.parent.mkdir(parents=True, exist_ok=True)

            data = self._to_dict(settings)

            with open(self.settings_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            logging.warning(f"SettingsManager - Could not save {self.settings_path}: {e}")
            return False

        self._settings = settings
        self._notify_observers()
        return True

    def reset(self) -> ApplicationSettings:
        """Reset to default settings."""
        self._settings = ApplicationSettings()
        self.save()
        return self._settings

    def add_observer(self, callback: Callable[[ApplicationSettings], None]) -> None:
        """Add a callback to be notified of settings changes."""
        self._observers.append(callback)

    def remove_observer(self, callback: Callable[[ApplicationSettings], None]) -> None:
        """Remove a settings change observer."""
        if callback in self._observers:
            self._observers.remove(callback)

    def _notify_observers(self) -> None:
        """Notify all observers of settings change."""
        for callback in self._observers:
            callback(self._settings)

    def add_recent_path(self, path: str, is_left: bool) -> None:
        """Add a path to the front of the recent files list."""
        settings = self.settings

        recent = settings.recent_left_paths if is_left else settings.recent_right_paths

        # Remove if already exists
        if path in recent:
            recent.remove(path)

        recent.insert(0, path)

        # Trim to limit
        del recent[settings.ui.recent_files_limit:]

        self.save()

    def clear_recent_paths(self, is_left: bool) -> None:
        """Forget the recent files on one side."""
        if is_left:
            self.settings.recent_left_paths.clear()
        else:
            self.settings.recent_right_paths.clear()
        self.save()

    def _to_dict(self, settings: ApplicationSettings) -> dict:
        """Convert settings to dictionary for JSON serialization."""
        def convert(obj: Any) -> Any:
            if isinstance(obj, Enum):
                return obj.name
            elif isinstance(obj, dict):
                return {k: convert(v) for k, v in obj.items()}
            elif isinstance(obj, list):
                return [convert(item) for item in obj]
            else:
                return obj

        return convert(asdict(settings))

    def _from_dict(self, data: dict) -> ApplicationSettings:
        """
        Convert dictionary back to settings objects.

        Sections or values of the wrong type are replaced by their defaults.
        """
        def get_enum(enum_class: type, value: Any, default: Enum) -> Enum:
            if isinstance(value, str):
                try:
                    return enum_class[value]
                except KeyError:
                    return default
            return default

        def get_section(key: str) -> dict:
            section = data.get(key, {})
            return section if isinstance(section, dict) else {}

        def get_value(section: dict, key: str, default: Any) -> Any:
            value = section.get(key, default)
            # bool is an int subclass, so compare exact types
            return value if type(value) is type(default) else default

        def get_paths(key: str) -> list[str]:
            value = data.get(key, [])
            if not isinstance(value, list):
                return []
            return [path for path in value if isinstance(path, str)]

        ui_data = get_section('ui')
        ui = UISettings(
            theme=get_enum(Theme, ui_data.get('theme'), UISettings.theme),
            window_width=get_value(ui_data, 'window_width', UISettings.window_width),
            window_height=get_value(ui_data, 'window_height', UISettings.window_height),
            window_maximized=get_value(ui_data, 'window_maximized', False),
            recent_files_limit=get_value(ui_data, 'recent_files_limit', UISettings.recent_files_limit),
        )

        export_data = get_section('export')
        export = ExportSettings(
            default_format=get_enum(ExportFormat, export_data.get('default_format'),
                                    ExportSettings.default_format),
            last_directory=get_value(export_data, 'last_directory', ''),
        )

        return ApplicationSettings(
            ui=ui,
            export=export,
            recent_left_paths=get_paths('recent_left_paths'),
            recent_right_paths=get_paths('recent_right_paths'),
        )
