#!/usr/bin/env python3
"""
Sequence model
An ordered, never-empty list of frames played back as an animation
"""

from pathlib import Path
from typing import Iterator, Optional, Union

from ..constants import DEFAULT_ANIMATION_INTERVAL_MS
from ..exceptions import IntegrityError, ValidationError
from ..utils.validation import require_not_blank, require_not_none, require_positive
from .frame import Frame


class Sequence:
    """
    Animation project: a name, its frames and the playback interval

    Insertion order is playback order. Deleting the last frame replaces
    it with a blank one so there is always a frame to edit.
    """

    def __init__(self, name: str, frames: Optional[list[Frame]] = None,
                 source_file: Optional[Union[str, Path]] = None,
                 animation_interval_ms: int = DEFAULT_ANIMATION_INTERVAL_MS):
        require_not_blank(name, "name")
        require_positive(animation_interval_ms, "animation_interval_ms")
        if frames is None:
            frames = [Frame()]
        elif not frames:
            raise IntegrityError("A sequence needs at least one frame")
        self._check_frames(frames)

        self._name = name
        self._frames = list(frames)
        self._source_file = Path(source_file) if source_file is not None else None
        self._animation_interval_ms = animation_interval_ms
        self._dirty = False

    @staticmethod
    def _check_frames(frames: list[Frame]) -> None:
        # A frame list that mixes sizes is a corrupt project, unlike a bad
        # argument to insert(), which is reported as ValidationError
        first = frames[0]
        seen = set()
        for frame in frames:
            if not isinstance(frame, Frame):
                raise ValidationError(f"Not a frame: {frame!r}")
            if id(frame) in seen:
                raise ValidationError(f"{frame!r} appears more than once")
            if (frame.width, frame.height) != (first.width, first.height):
                raise IntegrityError(
                    f"{frame!r} is {frame.width}x{frame.height}, expected {first.width}x{first.height}"
                )
            seen.add(id(frame))

    def __repr__(self):
        return f"Sequence({self._name!r}, {len(self._frames)} frames)"

    def __len__(self):
        return len(self._frames)

    def __iter__(self) -> Iterator[Frame]:
        return iter(tuple(self._frames))

    # Properties

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        require_not_blank(value, "name")
        if value != self._name:
            self._name = value
            self._dirty = True

    @property
    def source_file(self) -> Optional[Path]:
        """File the sequence was loaded from or last saved to"""
        return self._source_file

    @source_file.setter
    def source_file(self, value: Union[str, Path]) -> None:
        require_not_none(value, "source_file")
        self._source_file = Path(value)

    @property
    def animation_interval_ms(self) -> int:
        return self._animation_interval_ms

    @animation_interval_ms.setter
    def animation_interval_ms(self, value: int) -> None:
        require_positive(value, "animation_interval_ms")
        if value != self._animation_interval_ms:
            self._animation_interval_ms = value
            self._dirty = True

    @property
    def frames(self) -> tuple[Frame, ...]:
        return tuple(self._frames)

    @property
    def width(self) -> int:
        return self._frames[0].width

    @property
    def height(self) -> int:
        return self._frames[0].height

    @property
    def is_dirty(self) -> bool:
        """Unsaved changes in the sequence itself or any of its frames"""
        return self._dirty or any(frame.dirty for frame in self._frames)

    def mark_saved(self) -> None:
        self._dirty = False
        for frame in self._frames:
            frame.mark_saved()

    # Lookup

    def first(self) -> Frame:
        return self._frames[0]

    def last(self) -> Frame:
        return self._frames[-1]

    def frame_at(self, index: int) -> Frame:
        if not 0 <= index < len(self._frames):
            raise ValidationError(f"Frame index {index} out of range")
        return self._frames[index]

    def contains(self, frame: Frame) -> bool:
        return any(existing is frame for existing in self._frames)

    def index_of(self, frame: Frame) -> int:
        """Position of a frame, matched by identity"""
        for index, existing in enumerate(self._frames):
            if existing is frame:
                return index
        raise ValidationError(f"{frame!r} is not part of {self!r}")

    def next(self, current: Frame) -> Frame:
        """Frame after current, wrapping around to the first"""
        index = self.index_of(current) + 1
        if index < len(self._frames):
            return self._frames[index]
        return self._frames[0]

    def previous(self, current: Frame) -> Optional[Frame]:
        """Frame before current, or None if current is the first"""
        index = self.index_of(current) - 1
        if index >= 0:
            return self._frames[index]
        return None

    # Mutation

    def insert(self, index: int, frame: Frame) -> None:
        if not isinstance(frame, Frame):
            raise ValidationError(f"Not a frame: {frame!r}")
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index <= len(self._frames):
            raise ValidationError(f"Insert position {index!r} out of range")
        if self.contains(frame):
            raise ValidationError(f"{frame!r} is already part of {self!r}")
        if (frame.width, frame.height) != (self.width, self.height):
            raise ValidationError(
                f"{frame!r} is {frame.width}x{frame.height}, sequence frames are {self.width}x{self.height}"
            )
        self._frames.insert(index, frame)
        self._dirty = True

    def append(self, frame: Frame) -> None:
        self.insert(len(self._frames), frame)

    def delete(self, frame: Frame) -> None:
        """
        Remove a frame

        Callers holding a reference to the removed frame must pick a new
        one; an emptied sequence gets a fresh blank frame.
        """
        index = self.index_of(frame)
        del self._frames[index]
        if not self._frames:
            self._frames.append(Frame(frame.width, frame.height))
        self._dirty = True
