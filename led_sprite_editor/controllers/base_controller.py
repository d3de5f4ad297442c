#!/usr/bin/env python3
"""
Base controller class
Provides common functionality for all controllers
"""

from PyQt6.QtCore import QObject

from ..events import EventBus
from ..utils.validation import require_not_none


class BaseController(QObject):
    """Base class for controllers; all share the application's event bus"""

    def __init__(self, event_bus: EventBus, parent=None):
        super().__init__(parent)
        self._event_bus = require_not_none(event_bus, "event_bus")

    @property
    def event_bus(self) -> EventBus:
        """Get the event bus this controller publishes on"""
        return self._event_bus
