"""
Controllers package for sprite editor
Provides the QObject controllers a UI shell connects to
"""

from .base_controller import BaseController
from .playback_controller import PlaybackController
from .project_controller import ProjectController
from .selection_controller import SelectionController

__all__ = [
    "BaseController",
    "PlaybackController",
    "ProjectController",
    "SelectionController",
]
