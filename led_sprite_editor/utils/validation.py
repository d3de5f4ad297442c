#!/usr/bin/env python3
"""
Input validation utilities
Contract checks shared by the models; each raises ValidationError
before any state is touched
"""

from typing import Any

from ..exceptions import ValidationError


def require_not_none(value: Any, name: str) -> Any:
    """Reject a missing reference"""
    if value is None:
        raise ValidationError(f"{name} must not be None")
    return value


def require_not_blank(value: Any, name: str) -> str:
    """Reject None, non-strings and whitespace-only strings"""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{name} must not be None or blank")
    return value


def require_positive(value: Any, name: str) -> int:
    """
    Validate a strictly positive integer

    Args:
        value: Value to validate
        name: Argument name used in the error message

    Returns:
        The validated value
    """
    # bool is an int subclass but never a meaningful count
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise ValidationError(f"{name} must be greater than 0, got {value}")
    return value


def require_in_range(value: Any, upper: int, name: str) -> int:
    """Validate an integer index in [0, upper)"""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an integer, got {value!r}")
    if not 0 <= value < upper:
        raise ValidationError(f"{name} must be in [0, {upper}), got {value}")
    return value
