"""Utility functions and classes for ThumbGrab."""

from .config import Config
from .logging import log_error
from .clipboard import copy_text

__all__ = ["Config", "log_error", "copy_text"]
