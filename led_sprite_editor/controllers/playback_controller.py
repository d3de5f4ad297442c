#!/usr/bin/env python3
"""
Playback controller
Steps through the frames of a sequence on a QTimer
"""

from typing import Optional

from PyQt6.QtCore import QTimer, pyqtSignal

from ..logging_config import get_logger
from ..models.frame import Frame
from ..utils.validation import require_not_none
from .base_controller import BaseController
from .selection_controller import SelectionController

logger = get_logger("playback")


class PlaybackController(BaseController):
    """
    Animation playback

    The timer fires on the thread that owns this object, the same UI
    thread that performs every other edit, so no locking is needed.
    While playing, the ghost outline of the previous frame is hidden.
    """

    playback_state_changed = pyqtSignal(bool)  # is_running

    def __init__(self, selection: SelectionController, parent=None):
        require_not_none(selection, "selection")
        super().__init__(selection.event_bus, parent)
        self._selection = selection
        self._running = False
        self._show_outline = True

        self._timer = QTimer(self)
        self._timer.timeout.connect(self._on_timeout)

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def show_previous_frame_outline(self) -> bool:
        return self._show_outline

    @property
    def interval_ms(self) -> int:
        return self._timer.interval()

    def start(self) -> None:
        """Start playback, restarting with the current interval if already running"""
        if self._running:
            self.stop()
        interval = self._selection.sequence.animation_interval_ms
        self._running = True
        self._show_outline = False
        self._timer.start(interval)
        logger.debug(f"Playback started at {interval} ms per frame")
        self.playback_state_changed.emit(True)

    def stop(self) -> None:
        if not self._running:
            return
        self._timer.stop()
        self._running = False
        self._show_outline = True
        logger.debug("Playback stopped")
        self.playback_state_changed.emit(False)

    def toggle(self) -> bool:
        """Start or stop playback; returns the new running state"""
        if self._running:
            self.stop()
        else:
            self.start()
        return self._running

    def outline_frame(self) -> Optional[Frame]:
        """Frame to draw as a ghost under the active frame, if any"""
        if not self._show_outline:
            return None
        selection = self._selection
        return selection.sequence.previous(selection.selected_frame)

    def _on_timeout(self) -> None:
        self._selection.advance()
