#!/usr/bin/env python3
"""
Selection controller
Tracks the active frame of a sequence and the edits applied to it
"""

from typing import Optional

from PyQt6.QtCore import pyqtSignal

from ..constants import DEFAULT_PROJECT_NAME
from ..events import ActiveFrameChangedEvent, EventBus
from ..logging_config import get_logger
from ..models.frame import Frame
from ..models.sequence import Sequence
from ..utils.validation import require_not_none
from .base_controller import BaseController

logger = get_logger("selection")


class SelectionController(BaseController):
    """
    Owns the "active frame" of the sequence being edited

    Every selection change is published as an ActiveFrameChangedEvent so
    the editor canvas and the frame strip stay in sync.
    """

    # Signals
    frames_changed = pyqtSignal()  # frames added, removed or reordered
    frame_content_changed = pyqtSignal(object)  # frame whose pixels changed

    def __init__(self, event_bus: EventBus, sequence: Optional[Sequence] = None, parent=None):
        super().__init__(event_bus, parent)
        self._sequence = sequence if sequence is not None else Sequence(DEFAULT_PROJECT_NAME)
        self._selected = self._sequence.first()

    @property
    def sequence(self) -> Sequence:
        return self._sequence

    @property
    def selected_frame(self) -> Frame:
        return self._selected

    @property
    def selected_index(self) -> int:
        return self._sequence.index_of(self._selected)

    def set_sequence(self, sequence: Sequence) -> None:
        """Switch to another sequence and select its first frame"""
        require_not_none(sequence, "sequence")
        self._sequence = sequence
        self._selected = sequence.first()
        self.frames_changed.emit()
        self.select(self._selected)

    def select(self, frame: Frame) -> None:
        """Make frame the active frame and notify subscribers"""
        require_not_none(frame, "frame")
        self._sequence.index_of(frame)  # must belong to the sequence
        self._selected = frame
        self.event_bus.publish(ActiveFrameChangedEvent(self, self._sequence, frame))

    def select_previous(self) -> bool:
        """Select the previous frame; returns False at the first frame"""
        previous = self._sequence.previous(self._selected)
        if previous is None:
            return False
        self.select(previous)
        return True

    def select_next(self) -> bool:
        """Select the next frame; returns False at the last frame"""
        index = self.selected_index + 1
        if index >= len(self._sequence):
            return False
        self.select(self._sequence.frame_at(index))
        return True

    def advance(self) -> Frame:
        """Select the next frame, wrapping around to the first"""
        self.select(self._sequence.next(self._selected))
        return self._selected

    def new_frame(self) -> Frame:
        """Append a blank frame and select it"""
        frame = Frame(self._sequence.width, self._sequence.height)
        self._sequence.append(frame)
        logger.debug(f"Added {frame!r} to {self._sequence!r}")
        self.frames_changed.emit()
        self.select(frame)
        return frame

    def duplicate_frame(self) -> Frame:
        """Insert a copy of the active frame right after it and select the copy"""
        copy = self._selected.create_copy()
        self._sequence.insert(self.selected_index + 1, copy)
        self.frames_changed.emit()
        self.select(copy)
        return copy

    def delete_frame(self, frame: Optional[Frame] = None) -> None:
        """
        Delete a frame (default: the active one)

        When the active frame is deleted the frame now at its position is
        selected, or the last frame if it was at the end.
        """
        if frame is None:
            frame = self._selected
        index = self._sequence.index_of(frame)
        self._sequence.delete(frame)

        # Selection must point into the sequence before listeners run
        reselect = frame is self._selected
        if reselect:
            self._selected = self._sequence.frame_at(min(index, len(self._sequence) - 1))
        self.frames_changed.emit()
        if reselect:
            self.select(self._selected)

    # Pixel edits on the active frame

    def _content_changed(self, changed: bool) -> bool:
        if changed:
            self.frame_content_changed.emit(self._selected)
        return changed

    def set_pixel(self, x: int, y: int, on: bool) -> bool:
        return self._content_changed(self._selected.set(x, y, on))

    def toggle_pixel(self, x: int, y: int) -> bool:
        state = self._selected.toggle(x, y)
        self._content_changed(True)
        return state

    def fill_frame(self) -> bool:
        return self._content_changed(self._selected.fill())

    def clear_frame(self) -> bool:
        return self._content_changed(self._selected.clear())
