"""Data models for thumbnail candidates and probe results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Any


class ProbeState(Enum):
    """Lifecycle of a single thumbnail probe."""
    PENDING = "pending"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass(frozen=True)
class ResolutionTag:
    """One of the fixed thumbnail variants served by img.youtube.com."""
    name: str
    suffix: str      # e.g., "maxresdefault"
    label_key: str   # translation key of the display label
    width: int
    height: int

    @property
    def size_label(self) -> str:
        return f"{self.width}x{self.height}"


MAXRES = ResolutionTag("maxres", "maxresdefault", "resMaxHd", 1280, 720)
SD = ResolutionTag("sd", "sddefault", "resSd", 640, 480)
HQ = ResolutionTag("hq", "hqdefault", "resHq", 480, 360)
MQ = ResolutionTag("mq", "mqdefault", "resMq", 320, 180)

# Preference order, best first
RESOLUTIONS = (MAXRES, SD, HQ, MQ)
PRIMARY_RESOLUTION = MAXRES


def suggested_filename(video_id: str, resolution: ResolutionTag) -> str:
    return f"thumbnail_{video_id}_{resolution.suffix}.jpg"


@dataclass
class ProbeResult:
    """Outcome of one image load attempt."""
    state: ProbeState
    width: int = 0
    height: int = 0
    image: Optional[Any] = None  # PIL.Image.Image when loaded
    error: Optional[str] = None


@dataclass
class ThumbnailCandidate:
    """A single (resolution, url, probe state) tuple for one video."""
    video_id: str
    resolution: ResolutionTag
    url: str
    state: ProbeState = ProbeState.PENDING
    hidden: bool = False
    image: Optional[Any] = None

    @property
    def is_primary(self) -> bool:
        return self.resolution == PRIMARY_RESOLUTION

    @property
    def filename(self) -> str:
        """Suggested filename for the save affordance."""
        return suggested_filename(self.video_id, self.resolution)

    def record(self, result: ProbeResult) -> bool:
        """Apply a probe outcome. Returns True if the state changed.

        LOADED is absorbing. A LOADED signal overrides an earlier FAILED one,
        a FAILED signal never downgrades a LOADED candidate.
        """
        if result.state is ProbeState.PENDING or result.state is self.state:
            return False
        if self.state is ProbeState.LOADED:
            return False

        self.state = result.state
        if result.state is ProbeState.LOADED:
            self.image = result.image
            self.hidden = False
        return True


@dataclass
class ResultSet:
    """Candidates of the current submission, tagged with its generation."""
    generation: int
    video_id: str
    candidates: List[ThumbnailCandidate] = field(default_factory=list)

    def get(self, name: str) -> Optional[ThumbnailCandidate]:
        for candidate in self.candidates:
            if candidate.resolution.name == name:
                return candidate
        return None

    @property
    def any_loaded(self) -> bool:
        return any(c.state is ProbeState.LOADED for c in self.candidates)

    @property
    def visible(self) -> List[ThumbnailCandidate]:
        """Candidates currently showing a real thumbnail."""
        return [c for c in self.candidates
                if c.state is ProbeState.LOADED and not c.hidden]


class Feedback(Enum):
    """User-facing signals, as (translation key, display duration in ms)."""
    NO_URL = ("feedbackNoUrl", 3000)
    INVALID_URL = ("feedbackInvalidUrl", 4000)
    LOAD_ERROR = ("feedbackLoadError", 5000)
    COPIED = ("feedbackCopied", 3000)
    COPY_FAIL = ("feedbackCopyFail", 4000)
    SAVED = ("feedbackSaved", 3000)
    SAVE_FAIL = ("feedbackSaveFail", 4000)
    UNEXPECTED = ("feedbackUnexpectedError", 4000)

    @property
    def key(self) -> str:
        return self.value[0]

    @property
    def duration_ms(self) -> int:
        return self.value[1]
