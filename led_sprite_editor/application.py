#!/usr/bin/env python3
"""
Application wiring for the LED matrix sprite editor
Creates the event bus and controllers a UI shell attaches to
"""

from typing import Optional

from .controllers.playback_controller import PlaybackController
from .controllers.project_controller import ProjectController
from .controllers.selection_controller import SelectionController
from .events import EventBus
from .logging_config import setup_logging
from .settings_manager import SettingsManager


class SpriteEditorApplication:
    """
    Composition root

    The UI shell owns one instance and passes its event bus and
    controllers to the views; nothing in the core is global.
    """

    def __init__(self, settings: Optional[SettingsManager] = None,
                 log_level: str = "INFO", log_file: Optional[str] = None,
                 module_levels: Optional[dict[str, str]] = None):
        self.logger = setup_logging(log_level, log_file, module_levels)
        self.event_bus = EventBus()
        self.controllers = self._create_controllers(settings)

    def _create_controllers(self, settings):
        """Create all controller instances"""
        selection = SelectionController(self.event_bus)
        controllers = {
            'selection': selection,
            'playback': PlaybackController(selection),
            'project': ProjectController(selection, settings=settings),
        }
        return controllers

    @property
    def selection(self) -> SelectionController:
        return self.controllers['selection']

    @property
    def playback(self) -> PlaybackController:
        return self.controllers['playback']

    @property
    def project(self) -> ProjectController:
        return self.controllers['project']

    def shutdown(self) -> bool:
        """Stop playback and persist settings"""
        self.playback.stop()
        return self.project.shutdown()
