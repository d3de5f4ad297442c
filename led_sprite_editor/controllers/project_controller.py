#!/usr/bin/env python3
"""
Project controller
Coordinates loading, saving, exporting and the recent files list
"""

from pathlib import Path
from typing import Optional, Union

from PyQt6.QtCore import pyqtSignal

from .. import project_file
from ..constants import ANIMATION_SPEED_PRESETS, DEFAULT_PROJECT_NAME
from ..exceptions import FileOperationError, SpriteEditorError, format_error_message
from ..logging_config import get_logger
from ..models.sequence import Sequence
from ..recent_files import RecentFiles
from ..settings_manager import SettingsManager
from ..source_export import export_source_text
from .base_controller import BaseController
from .selection_controller import SelectionController

logger = get_logger("project")


class ProjectController(BaseController):
    """
    File-level workflow for the sequence being edited

    Failures are logged and reported once through error_occurred; the
    project in memory is never left half-loaded.
    """

    # Signals
    project_changed = pyqtSignal(object)  # new Sequence
    project_saved = pyqtSignal(str)  # path written
    recent_files_changed = pyqtSignal()
    error_occurred = pyqtSignal(str)  # user-facing message

    def __init__(self, selection: SelectionController,
                 settings: Optional[SettingsManager] = None,
                 recent_files: Optional[RecentFiles] = None, parent=None):
        super().__init__(selection.event_bus, parent)
        self._selection = selection
        self.settings = settings if settings is not None else SettingsManager()
        self._recent = recent_files if recent_files is not None else RecentFiles.load(self.settings)

    @property
    def sequence(self) -> Sequence:
        return self._selection.sequence

    @property
    def recent_files(self) -> list[Path]:
        return self._recent.files

    @property
    def needs_save(self) -> bool:
        return self.sequence.is_dirty

    @property
    def window_title(self) -> str:
        sequence = self.sequence
        if sequence.source_file is None:
            return sequence.name
        return f"{sequence.name} - {sequence.source_file.absolute()}"

    def _report(self, operation: str, error: Exception) -> None:
        logger.error(f"Failed to {operation}: {error}")
        self.error_occurred.emit(format_error_message(operation, error))

    def _remember(self, path: Path) -> None:
        self._recent.add(path)
        self.recent_files_changed.emit()

    def new_project(self, name: str = DEFAULT_PROJECT_NAME) -> Sequence:
        sequence = Sequence(name)
        self._selection.set_sequence(sequence)
        self.project_changed.emit(sequence)
        return sequence

    def load_project(self, path: Union[str, Path]) -> bool:
        """Load a project file; on failure the current project stays open"""
        try:
            sequence = project_file.load_project(path)
        except SpriteEditorError as e:
            self._report(f"load {path}", e)
            return False

        self._selection.set_sequence(sequence)
        self._remember(sequence.source_file)
        self.project_changed.emit(sequence)
        return True

    def save_project(self) -> bool:
        """Save to the project's current file; False if it has none yet"""
        if self.sequence.source_file is None:
            return False
        return self.save_project_as(self.sequence.source_file)

    def save_project_as(self, path: Union[str, Path]) -> bool:
        try:
            written = project_file.save_project(self.sequence, path)
        except SpriteEditorError as e:
            self._report(f"save {path}", e)
            return False

        self._remember(written)
        self.project_saved.emit(str(written))
        return True

    def set_animation_speed(self, interval_ms: int) -> None:
        self.sequence.animation_interval_ms = interval_ms

    def set_animation_preset(self, preset: str) -> None:
        """Apply one of ANIMATION_SPEED_PRESETS, e.g. '30 FPS'"""
        self.set_animation_speed(ANIMATION_SPEED_PRESETS[preset])

    def export_source_text(self) -> str:
        return export_source_text(self.sequence)

    def shutdown(self) -> bool:
        """Persist the recent files list; returns False if that failed"""
        self._recent.save(self.settings)
        try:
            self.settings.save_settings()
        except FileOperationError as e:
            logger.error(f"Could not save settings: {e}")
            return False
        return True
