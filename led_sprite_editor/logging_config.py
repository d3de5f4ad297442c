#!/usr/bin/env python3
"""
Logging configuration for the LED sprite editor
All loggers live under the "led_sprite_editor" namespace
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "led_sprite_editor"

# Loggers that can be tuned on their own, e.g. to silence isolated
# event subscriber failures while debugging file I/O
MODULE_LOGGERS = ("events", "selection", "playback", "project", "project_file",
                  "recent_files", "settings")


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def setup_logging(level: str = "INFO",
                  log_file: Optional[str] = None,
                  module_levels: Optional[dict[str, str]] = None) -> logging.Logger:
    """
    Configure the editor's log output.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file to write logs to (defaults to console only)
        module_levels: Per-module overrides keyed by a name from
            MODULE_LOGGERS, for example {"events": "ERROR"}

    Returns:
        The "led_sprite_editor" logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(_level(level))

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    # Handlers pass everything; levels are decided per logger
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        except OSError as e:
            logger.warning(f"Could not create log file {log_file}: {e}")

    for name in MODULE_LOGGERS:
        get_logger(name).setLevel(logging.NOTSET)
    for name, module_level in (module_levels or {}).items():
        if name not in MODULE_LOGGERS:
            logger.warning(f"Unknown logger {name!r} in module levels")
            continue
        get_logger(name).setLevel(_level(module_level))

    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger for one part of the editor, e.g. get_logger("events")"""
    return logging.getLogger(f'{ROOT_LOGGER_NAME}.{name}')
