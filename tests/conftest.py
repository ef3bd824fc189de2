import threading
from io import BytesIO
from typing import Callable, Dict, List

import pytest
from PIL import Image

from thumbgrab.core import ProbeResult, ProbeState, ThumbnailSession


class ManualScheduler:
    """Virtual-time stand-in for the Tk main loop.

    Like ``after``, scheduling is safe from worker threads; jobs only run
    inside ``advance``.
    """

    def __init__(self):
        self.now = 0
        self._seq = 0
        self._jobs: Dict[int, tuple] = {}
        self._lock = threading.Lock()

    def call_soon(self, fn):
        return self.call_later(0, fn)

    def call_later(self, delay_ms, fn):
        with self._lock:
            self._seq += 1
            self._jobs[self._seq] = (self.now + delay_ms, self._seq, fn)
            return self._seq

    def cancel(self, handle):
        with self._lock:
            self._jobs.pop(handle, None)

    def advance(self, ms=0):
        """Run every job due within the next ``ms`` milliseconds, in order."""
        target = self.now + ms
        while True:
            with self._lock:
                due = [job for job in self._jobs.values() if job[0] <= target]
                if not due:
                    break
                when, seq, fn = min(due)
                del self._jobs[seq]
            self.now = when
            fn()
        self.now = target

    @property
    def pending(self) -> int:
        with self._lock:
            return len(self._jobs)


class FakeFuture:
    def __init__(self):
        self.cancelled = False

    def cancel(self):
        self.cancelled = True
        return True


class FakeProber:
    """Records submitted probes so tests decide when and how they finish."""

    def __init__(self):
        self.calls: List[tuple] = []
        self.cancel_pending_calls = 0

    def submit(self, url: str, callback: Callable[[ProbeResult], None]):
        future = FakeFuture()
        self.calls.append((url, callback, future))
        return future

    def cancel_pending(self):
        self.cancel_pending_calls += 1
        for _, _, future in self.calls:
            future.cancel()

    @property
    def urls(self) -> List[str]:
        return [url for url, _, _ in self.calls]

    def finish(self, suffix: str, state: ProbeState, index: int = -1):
        """Complete the latest probe whose URL ends with ``{suffix}.jpg``."""
        matches = [c for c in self.calls if c[0].endswith(f"/{suffix}.jpg")]
        url, callback, _ = matches[index]
        image = Image.new("RGB", (16, 9)) if state is ProbeState.LOADED else None
        callback(ProbeResult(state, image=image))


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def prober():
    return FakeProber()


@pytest.fixture
def events():
    return {"updates": [], "feedback": []}


@pytest.fixture
def session(prober, scheduler, events):
    return ThumbnailSession(
        prober,
        scheduler,
        grace_ms=50,
        settle_ms=1500,
        on_update=events["updates"].append,
        on_feedback=events["feedback"].append,
    )


@pytest.fixture
def image_bytes():
    def _make(size=(1280, 720), fmt="JPEG") -> bytes:
        buf = BytesIO()
        Image.new("RGB", size, (200, 30, 30)).save(buf, format=fmt)
        return buf.getvalue()
    return _make
