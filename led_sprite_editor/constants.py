#!/usr/bin/env python3
"""
Constants for the LED matrix sprite editor
All magic numbers and file format details in one place
"""

# Frame geometry (one byte per column, bit y = row y)
FRAME_WIDTH = 8  # columns
FRAME_HEIGHT = 8  # rows
MAX_FRAME_HEIGHT = 8  # bits per column byte
BYTE_MASK = 0xFF

# Animation playback
DEFAULT_ANIMATION_INTERVAL_MS = 16
ANIMATION_SPEED_PRESETS = {
    "60 FPS": 16,
    "30 FPS": 32,
    "15 FPS": 48,
}

# Project defaults
DEFAULT_PROJECT_NAME = "example"

# Project file keys
KEY_NAME = "name"
KEY_ANIMATION_SPEED = "animationSpeed"
KEY_IMAGE_PREFIX = "image."
PROJECT_FILE_COMMENT = "Automatically generated, do not alter."

# Application settings
SETTINGS_FILE_NAME = "settings.properties"
SETTINGS_FILE_COMMENT = "Automatically generated, do not edit."
KEY_RECENT_FILES = "recentFiles"
MAX_RECENT_FILES = 6

# Source export
SOURCE_ARRAY_NAME = "data"
SOURCE_ARRAY_TYPE = "const uint8_t"
SOURCE_INDENT = "    "
