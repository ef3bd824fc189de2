"""YouTube video ID extraction from pasted URLs."""

import re
from typing import Optional

# Locator forms, tried left to right at each position:
#   youtube.com/v/ID, /e/ID, /embed/ID, /shorts/ID, /live/ID
#   youtube.com/...?v=ID or ...&v=ID (first v= wins)
#   youtube.com/<segment>/<anything>/ID (legacy user and embed paths)
#   youtu.be/ID
_VIDEO_ID_PATTERN = re.compile(
    r"(?:youtube\.com/(?:(?:v|e(?:mbed)?|shorts|live)/|.*?[?&]v=|[^/]+/.+/)"
    r"|youtu\.be/)"
    r"([A-Za-z0-9_-]{11})"
    r"(?=[\"'&?/#\s]|$)"
)

_VIDEO_ID_SHAPE = re.compile(r"[A-Za-z0-9_-]{11}")


def extract_video_id(text: str) -> Optional[str]:
    """Return the 11-character video ID embedded in a YouTube URL.

    Supported formats:
    - https://www.youtube.com/watch?v=VIDEO_ID (extra query params allowed)
    - https://youtu.be/VIDEO_ID
    - https://www.youtube.com/embed/VIDEO_ID, /v/VIDEO_ID, /e/VIDEO_ID
    - https://www.youtube.com/shorts/VIDEO_ID, /live/VIDEO_ID

    Returns None when no recognised locator precedes an ID. A bare ID
    without a YouTube-shaped prefix is never accepted.
    """
    if not text:
        return None
    match = _VIDEO_ID_PATTERN.search(text)
    if match:
        return match.group(1)
    return None


def is_valid_video_id(video_id: str) -> bool:
    """Check if a string has the shape of a YouTube video ID."""
    return bool(video_id) and _VIDEO_ID_SHAPE.fullmatch(video_id) is not None
