"""
LED Matrix Sprite Editor
Design 8x8 monochrome animations and export them as C byte arrays
"""

from .events import ActiveFrameChangedEvent, EventBus, Subscription
from .exceptions import (
    FileOperationError,
    FormatError,
    IntegrityError,
    SpriteEditorError,
    ValidationError,
)
from .models import Frame, Sequence
from .project_file import deserialize, load_project, save_project, serialize
from .recent_files import RecentFiles
from .source_export import export_source_text

__version__ = "1.0.0"
__all__ = [
    "ActiveFrameChangedEvent",
    "EventBus",
    "FileOperationError",
    "FormatError",
    "Frame",
    "IntegrityError",
    "RecentFiles",
    "Sequence",
    "SpriteEditorError",
    "Subscription",
    "ValidationError",
    "deserialize",
    "export_source_text",
    "load_project",
    "save_project",
    "serialize",
]
