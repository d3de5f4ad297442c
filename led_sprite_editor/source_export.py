#!/usr/bin/env python3
"""
Source code export
Renders a sequence as a C array literal for firmware builds
"""

from .constants import SOURCE_ARRAY_NAME, SOURCE_ARRAY_TYPE, SOURCE_INDENT
from .models.sequence import Sequence


def export_source_text(sequence: Sequence, array_name: str = SOURCE_ARRAY_NAME) -> str:
    """
    Render all frames as a two-dimensional byte array

    Example for two 8 column frames:

        const uint8_t data[2][8] = {
            {0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0},
            {0xff, 0xff, 0xff, 0xff, 0xff, 0xff, 0xff, 0xff}
        };
    """
    rows = ",\n".join(f"{SOURCE_INDENT}{{{frame.encode()}}}" for frame in sequence.frames)
    header = f"{SOURCE_ARRAY_TYPE} {array_name}[{len(sequence)}][{sequence.width}] = {{"
    return f"{header}\n{rows}\n}};\n"
