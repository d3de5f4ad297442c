#!/usr/bin/env python3
"""
Project file I/O

File format (flat key=value text):
- name: project name
- animationSpeed: playback interval in ms (optional, default 16)
- image.0, image.1, ...: frame data as written by Frame.encode(),
  read until the first missing index
"""

import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional, Union

from .constants import (
    DEFAULT_ANIMATION_INTERVAL_MS,
    KEY_ANIMATION_SPEED,
    KEY_IMAGE_PREFIX,
    KEY_NAME,
    PROJECT_FILE_COMMENT,
)
from .exceptions import FileOperationError, FormatError, IntegrityError, ValidationError
from .logging_config import get_logger
from .models.frame import Frame
from .models.sequence import Sequence
from .utils.properties import format_properties, parse_properties

logger = get_logger("project_file")


def serialize(sequence: Sequence, timestamp: bool = True) -> str:
    """Render a sequence as a project document"""
    entries = [(KEY_NAME, sequence.name)]
    for index, frame in enumerate(sequence.frames):
        entries.append((f"{KEY_IMAGE_PREFIX}{index}", frame.encode()))
    entries.append((KEY_ANIMATION_SPEED, str(sequence.animation_interval_ms)))
    return format_properties(entries, comment=PROJECT_FILE_COMMENT, timestamp=timestamp)


def deserialize(text: str, source_file: Optional[Union[str, Path]] = None) -> Sequence:
    """
    Build a sequence from a project document

    Args:
        text: Document contents
        source_file: Optional path recorded on the returned sequence

    Returns:
        A clean (not dirty) sequence

    Raises:
        FormatError: If the name is missing or any value is malformed
        IntegrityError: If the document holds no frames
    """
    props = parse_properties(text)

    name = props.get(KEY_NAME, "")
    if not name.strip():
        raise FormatError("Not a valid project file: missing name")

    interval = DEFAULT_ANIMATION_INTERVAL_MS
    speed = props.get(KEY_ANIMATION_SPEED, "").strip()
    if speed:
        try:
            interval = int(speed)
        except ValueError:
            raise FormatError(f"Invalid {KEY_ANIMATION_SPEED}: {speed!r}") from None
        if interval <= 0:
            raise FormatError(f"{KEY_ANIMATION_SPEED} must be positive, got {interval}")

    frames = []
    while True:
        key = f"{KEY_IMAGE_PREFIX}{len(frames)}"
        if key not in props:
            break
        try:
            frames.append(Frame.decode(props[key]))
        except FormatError as e:
            raise FormatError(f"{key}: {e}") from e

    if not frames:
        raise IntegrityError("Project without frames")

    try:
        return Sequence(name, frames, source_file=source_file, animation_interval_ms=interval)
    except ValidationError as e:
        raise FormatError(str(e)) from e


def _new_file_mode() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def _read_text(path: Path) -> str:
    data = path.read_bytes()
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        # Files written by older versions may be Latin-1
        return data.decode("latin-1")


def load_project(path: Union[str, Path]) -> Sequence:
    """
    Load a sequence from a project file

    Raises:
        FileOperationError: If the file cannot be read
        FormatError, IntegrityError: If the contents are invalid
    """
    if path is None:
        raise ValidationError("path must not be None")
    path = Path(path)

    try:
        text = _read_text(path)
    except OSError as e:
        raise FileOperationError(f"Cannot read {path}: {e}") from e

    sequence = deserialize(text, source_file=path.absolute())
    logger.info(f"Loaded '{sequence.name}' with {len(sequence)} frames from {path}")
    return sequence


def save_project(sequence: Sequence, path: Optional[Union[str, Path]] = None) -> Path:
    """
    Save a sequence, by default to its source file

    The file is replaced atomically; on failure the previous file and the
    sequence's dirty state are left as they were.

    Returns:
        The path written

    Raises:
        ValidationError: If neither path nor sequence.source_file is set
        FileOperationError: If the file cannot be written
    """
    if sequence is None:
        raise ValidationError("sequence must not be None")
    if path is None:
        path = sequence.source_file
    if path is None:
        raise ValidationError(f"No file to save '{sequence.name}' to")
    path = Path(path).absolute()

    document = serialize(sequence)
    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(document)
        # mkstemp creates 0600; keep the mode a plain write would give
        if path.exists():
            shutil.copymode(path, tmp_name)
        else:
            os.chmod(tmp_name, _new_file_mode())
        os.replace(tmp_name, path)
        tmp_name = None
    except OSError as e:
        raise FileOperationError(f"Cannot write {path}: {e}") from e
    finally:
        if tmp_name is not None:
            try:
                os.unlink(tmp_name)
            except OSError:
                logger.warning(f"Could not remove temporary file {tmp_name}")

    sequence.source_file = path
    sequence.mark_saved()
    logger.info(f"Saved '{sequence.name}' with {len(sequence)} frames to {path}")
    return path
