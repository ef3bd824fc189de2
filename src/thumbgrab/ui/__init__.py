"""UI components for ThumbGrab."""

from .main_window import ThumbGrabApp
from .thumbnail_card import ThumbnailCard

__all__ = ["ThumbGrabApp", "ThumbnailCard"]
