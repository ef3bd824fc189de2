"""Submission pipeline: extraction, candidate probing and display policy."""

import logging
from functools import partial
from typing import Callable, List, Optional, Any

from .candidates import build_candidates
from .extractor import extract_video_id
from .models import Feedback, ProbeResult, ProbeState, ResultSet

logger = logging.getLogger(__name__)

# Empirical UI timings, in milliseconds
DEFAULT_GRACE_MS = 50
DEFAULT_SETTLE_MS = 1500


class ThumbnailSession:
    """Owns the current result set and drives it from probe outcomes.

    All state changes happen on the scheduler's thread (the UI loop).
    ``scheduler`` must provide ``call_soon(fn)``, ``call_later(ms, fn)``
    returning a handle, and ``cancel(handle)``. ``call_soon`` has to be safe
    to call from probe worker threads.

    Every submission gets a new generation number. Probe completions and
    timers carry the generation they were started for and are dropped when
    it is no longer current.
    """

    def __init__(self, prober, scheduler,
                 grace_ms: int = DEFAULT_GRACE_MS,
                 settle_ms: int = DEFAULT_SETTLE_MS,
                 on_update: Optional[Callable[[Optional[ResultSet]], None]] = None,
                 on_feedback: Optional[Callable[[Feedback], None]] = None):
        self.prober = prober
        self.scheduler = scheduler
        self.grace_ms = grace_ms
        self.settle_ms = settle_ms
        self.on_update = on_update
        self.on_feedback = on_feedback

        self.generation = 0
        self.result_set: Optional[ResultSet] = None
        self._futures: List[Any] = []
        self._timers: List[Any] = []

    def submit(self, raw: Optional[str]) -> Optional[ResultSet]:
        """Start a new submission for the pasted text.

        Returns the new result set, or None when the input was empty or not
        a recognised YouTube URL (the matching feedback is emitted instead).
        """
        self.clear()

        text = (raw or "").strip()
        if not text:
            self._feedback(Feedback.NO_URL)
            return None

        video_id = extract_video_id(text)
        if video_id is None:
            logger.info(f"No video ID found in input: {text!r}")
            self._feedback(Feedback.INVALID_URL)
            return None

        generation = self.generation
        result_set = ResultSet(generation, video_id, build_candidates(video_id))
        self.result_set = result_set
        logger.info(f"Probing thumbnails for {video_id} (generation {generation})")
        self._publish()

        for candidate in result_set.candidates:
            callback = partial(self._probe_finished, generation, candidate.resolution.name)
            self._futures.append(self.prober.submit(candidate.url, callback))

        self._timers.append(
            self.scheduler.call_later(self.settle_ms, partial(self._settle, generation))
        )
        return result_set

    def clear(self):
        """Discard the current result set and everything still in flight."""
        self.generation += 1
        for future in self._futures:
            future.cancel()
        if self._futures:
            # Running requests of the old generation keep their workers
            self.prober.cancel_pending()
        for handle in self._timers:
            self.scheduler.cancel(handle)
        self._futures = []
        self._timers = []

        if self.result_set is not None:
            self.result_set = None
            self._publish()

    # Probe completion, called from worker threads
    def _probe_finished(self, generation: int, name: str, result: ProbeResult):
        self.scheduler.call_soon(partial(self._apply, generation, name, result))

    def _current(self, generation: int) -> Optional[ResultSet]:
        rs = self.result_set
        if rs is None or rs.generation != generation or generation != self.generation:
            return None
        return rs

    def _apply(self, generation: int, name: str, result: ProbeResult):
        rs = self._current(generation)
        if rs is None:
            logger.debug(f"Dropping stale probe result for {name} (generation {generation})")
            return

        candidate = rs.get(name)
        if candidate is None or not candidate.record(result):
            return

        if candidate.state is ProbeState.FAILED and not candidate.is_primary:
            self._timers.append(
                self.scheduler.call_later(self.grace_ms, partial(self._hide_if_failed, generation, name))
            )
        self._publish()

    def _hide_if_failed(self, generation: int, name: str):
        rs = self._current(generation)
        if rs is None:
            return
        candidate = rs.get(name)
        # A LOADED signal during the grace delay keeps the card
        if candidate is None or candidate.state is not ProbeState.FAILED or candidate.is_primary:
            return
        candidate.hidden = True
        self._publish()

    def _settle(self, generation: int):
        rs = self._current(generation)
        if rs is None:
            return

        if rs.any_loaded:
            logger.info(f"{len(rs.visible)} thumbnail(s) available for {rs.video_id}")
            return

        pending = [c.resolution.name for c in rs.candidates if c.state is ProbeState.PENDING]
        if pending:
            logger.info(f"Still pending at settle time, counted as unavailable: {', '.join(pending)}")
        logger.warning(f"No thumbnails could be loaded for {rs.video_id}")

        # Retract the results view; late completions find no result set
        for future in self._futures:
            future.cancel()
        self.prober.cancel_pending()
        self._futures = []
        self.result_set = None
        self._publish()
        self._feedback(Feedback.LOAD_ERROR)

    def _publish(self):
        if self.on_update:
            self.on_update(self.result_set)

    def _feedback(self, feedback: Feedback):
        if self.on_feedback:
            self.on_feedback(feedback)
