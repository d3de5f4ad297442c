#!/usr/bin/env python3
"""
Custom exceptions and error handling utilities for the sprite editor.

Every error raised by the core derives from SpriteEditorError so the UI
layer can report failures with a single handler.
"""


class SpriteEditorError(Exception):
    """Base exception for all sprite editor errors"""
    pass


class ValidationError(SpriteEditorError):
    """Raised when an argument violates an operation's contract"""
    pass


class FormatError(SpriteEditorError):
    """Raised when hex data or a persisted document is malformed"""
    pass


class IntegrityError(SpriteEditorError):
    """Raised when decoded data would break a model invariant"""
    pass


class FileOperationError(SpriteEditorError):
    """Raised when a file cannot be read or written"""
    pass


def format_error_message(operation: str, error: Exception) -> str:
    """
    Format an error message for user display.

    Args:
        operation: Description of the operation that failed
        error: The exception that was raised

    Returns:
        User-friendly error message
    """
    # File errors are usually wrapped, look at the cause first
    cause = error.__cause__ if isinstance(error, FileOperationError) else error

    if isinstance(cause, FileNotFoundError):
        return f"File not found during {operation}"
    elif isinstance(cause, PermissionError):
        return f"Permission denied during {operation}"
    elif isinstance(cause, OSError) and cause.errno == 28:  # No space left
        return f"Disk full - cannot complete {operation}"
    elif isinstance(error, FormatError):
        return f"Invalid file format: {error}"
    elif isinstance(error, IntegrityError):
        return f"Corrupt project: {error}"
    elif isinstance(error, ValidationError):
        return f"Invalid input: {error}"
    else:
        return f"Failed to {operation}: {error}"
