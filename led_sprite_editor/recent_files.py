#!/usr/bin/env python3
"""
Recently used project files
"""

import os
from pathlib import Path
from typing import Iterator, Union

from .constants import KEY_RECENT_FILES, MAX_RECENT_FILES
from .logging_config import get_logger
from .settings_manager import SettingsManager
from .utils.validation import require_not_none, require_positive

logger = get_logger("recent_files")


class RecentFiles:
    """Bounded most-recently-used list of file paths, most recent first"""

    def __init__(self, max_entries: int = MAX_RECENT_FILES):
        self.max_entries = require_positive(max_entries, "max_entries")
        self._files: list[Path] = []

    def __len__(self):
        return len(self._files)

    def __iter__(self) -> Iterator[Path]:
        return iter(list(self._files))

    @property
    def files(self) -> list[Path]:
        return list(self._files)

    def add(self, path: Union[str, Path]) -> Path:
        """Move a path to the front, dropping the oldest entry past the limit"""
        require_not_none(path, "path")
        path = Path(path).absolute()

        if path in self._files:
            self._files.remove(path)
        self._files.insert(0, path)
        del self._files[self.max_entries:]
        return path

    def clear(self) -> None:
        self._files.clear()

    def to_setting(self) -> str:
        return ",".join(str(path) for path in self._files)

    def save(self, settings: SettingsManager) -> None:
        """Store the list in settings (call settings.save_settings() to persist)"""
        if self._files:
            settings.set(KEY_RECENT_FILES, self.to_setting())
        else:
            settings.remove(KEY_RECENT_FILES)

    @classmethod
    def load(cls, settings: SettingsManager, max_entries: int = MAX_RECENT_FILES) -> "RecentFiles":
        """
        Restore a list saved with save()

        Entries are re-added oldest first so the stored order survives;
        paths that are no longer readable files are skipped.
        """
        recent = cls(max_entries)
        stored = settings.get(KEY_RECENT_FILES)
        if not stored:
            return recent

        for entry in reversed(stored.split(",")):
            path = Path(entry)
            if entry and path.is_file() and os.access(path, os.R_OK):
                recent.add(path)
            else:
                logger.debug(f"Skipping missing recent file {entry!r}")
        return recent
