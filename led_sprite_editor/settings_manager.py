"""
Settings manager for sprite editor
Handles saving and loading user preferences
"""

import os
from pathlib import Path
from typing import Optional, Union

from .constants import SETTINGS_FILE_COMMENT, SETTINGS_FILE_NAME
from .exceptions import FileOperationError, FormatError
from .logging_config import get_logger
from .utils.properties import format_properties, parse_properties

logger = get_logger("settings")


class SettingsManager:
    """Manages application settings with persistence"""

    def __init__(self, app_name: str = "led_sprite_editor",
                 settings_file: Optional[Union[str, Path]] = None):
        self.app_name = app_name
        self.settings_file = Path(settings_file) if settings_file else self._get_settings_path()
        self.settings = self._load_settings()

    def _get_settings_path(self) -> Path:
        """Get the appropriate settings directory for the platform"""
        if os.name == "nt":  # Windows
            base = Path(os.environ.get("APPDATA", os.path.expanduser("~")))
            settings_dir = base / self.app_name
        else:  # Linux/Mac
            base = Path(os.path.expanduser("~"))
            settings_dir = base / f".{self.app_name}"

        return settings_dir / SETTINGS_FILE_NAME

    def _load_settings(self) -> dict[str, str]:
        """Load settings from file"""
        if not self.settings_file.exists():
            return {}
        try:
            return parse_properties(self.settings_file.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, FormatError) as e:
            # If file is corrupted, start fresh
            logger.warning(f"Ignoring unreadable settings file {self.settings_file}: {e}")
            return {}

    def save_settings(self) -> None:
        """
        Save current settings to file

        Raises:
            FileOperationError: If the file cannot be written
        """
        document = format_properties(sorted(self.settings.items()), comment=SETTINGS_FILE_COMMENT)
        try:
            self.settings_file.parent.mkdir(parents=True, exist_ok=True)
            self.settings_file.write_text(document, encoding="utf-8")
        except OSError as e:
            raise FileOperationError(f"Cannot write settings to {self.settings_file}: {e}") from e

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get a setting value"""
        return self.settings.get(key, default)

    def set(self, key: str, value: str) -> None:
        """Set a setting value (call save_settings() to persist)"""
        self.settings[key] = str(value)

    def remove(self, key: str) -> None:
        self.settings.pop(key, None)

    def reset_settings(self) -> None:
        """Reset all settings to defaults"""
        self.settings = {}
        self.save_settings()
