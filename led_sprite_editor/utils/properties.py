#!/usr/bin/env python3
"""
Reader and writer for flat key=value documents

Both the project files and the settings file use the Java properties
dialect: '#' or '!' comment lines, '=', ':' or whitespace between key
and value, backslash escapes and backslash line continuation. Output
escapes non-ASCII characters as \\uXXXX so written files are plain ASCII.
"""

import time
from typing import Iterable, Optional

from ..exceptions import FormatError

_SEPARATORS = "=:"
_WHITESPACE = " \t\f"
_COMMENT_CHARS = "#!"

_UNESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_ESCAPES = {"\t": "\\t", "\n": "\\n", "\r": "\\r", "\f": "\\f", "\\": "\\\\"}


def _logical_lines(text: str) -> Iterable[tuple[int, str]]:
    """Yield (line number, logical line) with continuations joined"""
    pending = None
    start = 0
    for number, raw in enumerate(text.splitlines(), start=1):
        line = raw.lstrip(_WHITESPACE)
        if pending is None:
            if not line or line[0] in _COMMENT_CHARS:
                continue
            start = number
            pending = ""
        # An odd number of trailing backslashes continues the line
        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2 == 1:
            pending += line[:-1]
            continue
        yield start, pending + line
        pending = None
    if pending is not None:
        yield start, pending


def _unescape(chunk: str, line_number: int) -> str:
    chars = []
    i = 0
    while i < len(chunk):
        char = chunk[i]
        if char != "\\" or i + 1 >= len(chunk):
            chars.append(char)
            i += 1
            continue
        code = chunk[i + 1]
        if code == "u":
            digits = chunk[i + 2:i + 6]
            if len(digits) != 4 or any(c not in "0123456789abcdefABCDEF" for c in digits):
                raise FormatError(f"Line {line_number}: malformed \\uXXXX escape")
            chars.append(chr(int(digits, 16)))
            i += 6
        else:
            chars.append(_UNESCAPES.get(code, code))
            i += 2
    # Surrogate pairs from \\u escapes combine into one character
    text = "".join(chars)
    try:
        return text.encode("utf-16", "surrogatepass").decode("utf-16")
    except UnicodeDecodeError as e:
        raise FormatError(f"Line {line_number}: unpaired surrogate escape") from e


def _split_line(line: str) -> tuple[str, str]:
    """Split a logical line at the first unescaped separator"""
    key_end = len(line)
    i = 0
    while i < len(line):
        char = line[i]
        if char == "\\":
            i += 2
            continue
        if char in _SEPARATORS or char in _WHITESPACE:
            key_end = i
            break
        i += 1

    rest = line[key_end:].lstrip(_WHITESPACE)
    if rest and rest[0] in _SEPARATORS:
        rest = rest[1:].lstrip(_WHITESPACE)
    return line[:key_end], rest


def parse_properties(text: str) -> dict[str, str]:
    """
    Parse a key=value document

    Args:
        text: Document contents

    Returns:
        Mapping of keys to values; later duplicates win

    Raises:
        FormatError: If an escape sequence is malformed
    """
    entries = {}
    for line_number, line in _logical_lines(text):
        raw_key, raw_value = _split_line(line)
        key = _unescape(raw_key, line_number)
        entries[key] = _unescape(raw_value, line_number)
    return entries


def _escape(text: str, is_key: bool) -> str:
    out = []
    for index, char in enumerate(text):
        if char in _ESCAPES:
            out.append(_ESCAPES[char])
        elif char == " " and (is_key or index == 0):
            out.append("\\ ")
        elif char in _SEPARATORS or char in _COMMENT_CHARS:
            out.append("\\" + char)
        elif " " <= char <= "~":
            out.append(char)
        else:
            encoded = char.encode("utf-16-be", "surrogatepass")
            for offset in range(0, len(encoded), 2):
                out.append(f"\\u{encoded[offset]:02X}{encoded[offset + 1]:02X}")
    return "".join(out)


def format_properties(entries: Iterable[tuple[str, str]],
                      comment: Optional[str] = None,
                      timestamp: bool = True) -> str:
    """
    Render entries as a key=value document

    Args:
        entries: (key, value) pairs, written in the given order
        comment: Optional header comment
        timestamp: Whether to write the current time as a second comment

    Returns:
        Document text ending with a newline
    """
    lines = []
    if comment:
        lines.extend("#" + part for part in comment.splitlines())
    if timestamp:
        lines.append("#" + time.strftime("%a %b %d %H:%M:%S %Z %Y"))
    for key, value in entries:
        lines.append(f"{_escape(key, True)}={_escape(value, False)}")
    return "\n".join(lines) + "\n"
