"""Utility exports for the openingstats package."""

from .logger import funclogger, get_logger, set_level
from .normalize_string import normalize_string
from .now import Now

__all__ = [
    "Now",
    "funclogger",
    "get_logger",
    "normalize_string",
    "set_level",
]
