"""Core functionality for ThumbGrab."""

from .models import (
    ProbeState,
    ResolutionTag,
    ProbeResult,
    ThumbnailCandidate,
    ResultSet,
    Feedback,
    RESOLUTIONS,
    PRIMARY_RESOLUTION,
    suggested_filename,
)
from .extractor import extract_video_id, is_valid_video_id
from .candidates import build_candidates, thumbnail_url
from .prober import ThumbnailProber
from .session import ThumbnailSession
from .presentation import CardModel, RenderModel, project
from .downloader import ThumbnailDownloader
from .i18n import Translator, LANGUAGES, detect_language, normalize_language

__all__ = [
    "ProbeState",
    "ResolutionTag",
    "ProbeResult",
    "ThumbnailCandidate",
    "ResultSet",
    "Feedback",
    "RESOLUTIONS",
    "PRIMARY_RESOLUTION",
    "extract_video_id",
    "is_valid_video_id",
    "build_candidates",
    "thumbnail_url",
    "suggested_filename",
    "ThumbnailProber",
    "ThumbnailSession",
    "CardModel",
    "RenderModel",
    "project",
    "ThumbnailDownloader",
    "Translator",
    "LANGUAGES",
    "detect_language",
    "normalize_language",
]
