"""
Models package for sprite editor
Provides the frame and sequence data models
"""

from .frame import Frame
from .sequence import Sequence

__all__ = [
    'Frame',
    'Sequence',
]
