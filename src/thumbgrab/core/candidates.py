"""Thumbnail URL templating."""

from typing import List

from .extractor import is_valid_video_id
from .models import RESOLUTIONS, ResolutionTag, ThumbnailCandidate

THUMBNAIL_BASE_URL = "https://img.youtube.com/vi/"


def thumbnail_url(video_id: str, resolution: ResolutionTag) -> str:
    return f"{THUMBNAIL_BASE_URL}{video_id}/{resolution.suffix}.jpg"


def build_candidates(video_id: str) -> List[ThumbnailCandidate]:
    """Build the four pending candidates for a video, best resolution first.

    Raises ValueError if ``video_id`` is not an 11-character video ID, since
    it is substituted into the URL path verbatim.
    """
    if not is_valid_video_id(video_id):
        raise ValueError(f"Not a YouTube video ID: {video_id!r}")
    return [
        ThumbnailCandidate(
            video_id=video_id,
            resolution=res,
            url=thumbnail_url(video_id, res),
        )
        for res in RESOLUTIONS
    ]
