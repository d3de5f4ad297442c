#!/usr/bin/env python3
"""
Frame model
A monochrome bitmap stored as one byte per column, bit y = row y
"""

import itertools
import re
from typing import Optional

import numpy as np
from PIL import Image

from ..constants import BYTE_MASK, FRAME_HEIGHT, FRAME_WIDTH, MAX_FRAME_HEIGHT
from ..exceptions import FormatError, ValidationError
from ..utils.validation import require_in_range, require_positive

_HEX_TOKEN = re.compile(r"[0-9a-fA-F]+")
_frame_ids = itertools.count()


class Frame:
    """
    One bitmap of an animation

    Frames compare by identity: two frames with the same pixels are
    still different frames of a sequence.
    """

    def __init__(self, width: int = FRAME_WIDTH, height: int = FRAME_HEIGHT,
                 columns: Optional[bytes] = None):
        require_positive(width, "width")
        require_positive(height, "height")
        if height > MAX_FRAME_HEIGHT:
            raise ValidationError(
                f"height must not exceed {MAX_FRAME_HEIGHT} (one byte per column), got {height}"
            )

        self.width = width
        self.height = height
        self.frame_id = next(_frame_ids)
        self._dirty = False

        if columns is None:
            self.columns = np.zeros(width, dtype=np.uint8)
        else:
            values = [int(value) for value in columns]
            if len(values) != width:
                raise ValidationError(f"Expected {width} column bytes, got {len(values)}")
            unused_bits = BYTE_MASK & ~((1 << height) - 1)
            for value in values:
                if not 0 <= value <= BYTE_MASK:
                    raise ValidationError(f"Column byte out of range: {value}")
                if value & unused_bits:
                    raise ValidationError(
                        f"Column byte 0x{value:02x} sets rows outside height {height}"
                    )
            self.columns = np.array(values, dtype=np.uint8)

    def __repr__(self):
        return f"Frame #{self.frame_id}"

    @property
    def dirty(self) -> bool:
        """Whether the frame changed since it was last saved"""
        return self._dirty

    def mark_saved(self) -> None:
        self._dirty = False

    @property
    def _full_mask(self) -> int:
        return (1 << self.height) - 1

    def _check_point(self, x: int, y: int) -> None:
        require_in_range(x, self.width, "x")
        require_in_range(y, self.height, "y")

    def is_set(self, x: int, y: int) -> bool:
        """Return whether the pixel at (x, y) is lit"""
        self._check_point(x, y)
        return bool(int(self.columns[x]) & (1 << y))

    def set(self, x: int, y: int, on: bool) -> bool:
        """
        Light or clear the pixel at (x, y)

        Returns:
            True if the stored byte changed
        """
        self._check_point(x, y)
        old_value = int(self.columns[x])
        if on:
            new_value = old_value | (1 << y)
        else:
            new_value = old_value & ~(1 << y)
        changed = new_value != old_value
        if changed:
            self.columns[x] = new_value
            self._dirty = True
        return changed

    def toggle(self, x: int, y: int) -> bool:
        """Flip the pixel at (x, y) and return its new state"""
        new_state = not self.is_set(x, y)
        self.set(x, y, new_state)
        return new_state

    def fill(self) -> bool:
        """Light every pixel, returning whether anything changed"""
        return self._set_all(self._full_mask)

    def clear(self) -> bool:
        """Clear every pixel, returning whether anything changed"""
        return self._set_all(0)

    def _set_all(self, value: int) -> bool:
        changed = bool(np.any(self.columns != value))
        self.columns[:] = value
        self._dirty |= changed
        return changed

    @property
    def is_blank(self) -> bool:
        return not self.columns.any()

    def to_bytes(self) -> bytes:
        return self.columns.tobytes()

    def to_pixel_array(self) -> np.ndarray:
        """Return a (height, width) boolean array, True where lit"""
        rows = np.arange(self.height, dtype=np.uint8).reshape(-1, 1)
        return ((self.columns.reshape(1, -1) >> rows) & 1).astype(bool)

    def render(self, scale: int = 1) -> Image.Image:
        """Render to a grayscale image, lit pixels white"""
        require_positive(scale, "scale")
        pixels = self.to_pixel_array().astype(np.uint8) * 255
        image = Image.fromarray(pixels)
        if scale > 1:
            image = image.resize((self.width * scale, self.height * scale), Image.Resampling.NEAREST)
        return image

    def encode(self) -> str:
        """Render the column bytes as '0x..' literals, e.g. '0x0, 0xff, ...'"""
        return ", ".join(f"0x{int(value):x}" for value in self.columns)

    @classmethod
    def decode(cls, text: str, height: int = FRAME_HEIGHT) -> "Frame":
        """
        Parse the output of encode()

        Args:
            text: Comma-separated hex bytes, '0x' prefix optional
            height: Rows per column of the decoded frame

        Returns:
            New frame, one column per token

        Raises:
            FormatError: If a token is not a hex byte
        """
        if text is None or not text.strip():
            raise FormatError("Frame data is empty")

        values = []
        for position, token in enumerate(text.split(",")):
            token = token.strip()
            if token[:2] in ("0x", "0X"):
                token = token[2:]
            if not _HEX_TOKEN.fullmatch(token):
                raise FormatError(f"Token {position} is not a hex byte: {token!r}")
            value = int(token, 16)
            if value > BYTE_MASK:
                raise FormatError(f"Token {position} does not fit in a byte: 0x{value:x}")
            values.append(value)

        try:
            return cls(width=len(values), height=height, columns=values)
        except ValidationError as e:
            raise FormatError(str(e)) from e

    def create_copy(self) -> "Frame":
        """Return an independent frame with the same pixels and a clean dirty flag"""
        return Frame(self.width, self.height, self.columns.tolist())
