"""Thumbnail availability probing over HTTP."""

import logging
import concurrent.futures
from io import BytesIO
from typing import Callable, Optional

import requests
from requests.adapters import HTTPAdapter
from PIL import Image, UnidentifiedImageError

from .models import ProbeResult, ProbeState

logger = logging.getLogger(__name__)

# img.youtube.com answers missing variants with this generic image
PLACEHOLDER_SIZE = (120, 90)


class ThumbnailProber:
    """Checks whether thumbnail URLs resolve to real images.

    Probes run on a small thread pool. Each probe issues one GET and tries
    to decode the body with Pillow; there are no retries, a failed probe is
    final.
    """

    def __init__(self, timeout: float = 10.0, max_workers: int = 4,
                 session: Optional[requests.Session] = None):
        self.timeout = timeout

        if session is None:
            session = requests.Session()
            adapter = HTTPAdapter(pool_connections=max_workers, pool_maxsize=max_workers,
                                  max_retries=0)
            session.mount('https://', adapter)
            session.headers.update({'User-Agent': 'Mozilla/5.0'})
        self.session = session

        self.max_workers = max_workers
        self._executor = self._new_executor()

    def _new_executor(self) -> concurrent.futures.ThreadPoolExecutor:
        return concurrent.futures.ThreadPoolExecutor(
            max_workers=self.max_workers, thread_name_prefix="thumb-probe"
        )

    def check(self, url: str) -> ProbeResult:
        """Load one URL and classify it as LOADED or FAILED."""
        try:
            resp = self.session.get(url, timeout=self.timeout)
            resp.raise_for_status()
            pil_img = Image.open(BytesIO(resp.content))
            pil_img.load()
        except requests.RequestException as e:
            logger.warning(f"Thumbnail not found or failed to load: {url} ({e})")
            return ProbeResult(ProbeState.FAILED, error=str(e))
        except (UnidentifiedImageError, OSError) as e:
            logger.warning(f"Thumbnail is not a decodable image: {url} ({e})")
            return ProbeResult(ProbeState.FAILED, error=str(e))

        if pil_img.size == PLACEHOLDER_SIZE:
            logger.warning(f"Thumbnail is the placeholder image: {url}")
            return ProbeResult(ProbeState.FAILED, width=pil_img.width, height=pil_img.height,
                               error="placeholder image")

        logger.debug(f"Thumbnail loaded: {url} ({pil_img.width}x{pil_img.height})")
        return ProbeResult(ProbeState.LOADED, width=pil_img.width, height=pil_img.height,
                           image=pil_img)

    def submit(self, url: str,
               callback: Callable[[ProbeResult], None]) -> concurrent.futures.Future:
        """Probe in the background; callback runs on the worker thread."""
        future = self._executor.submit(self.check, url)

        def _done(fut: concurrent.futures.Future):
            if fut.cancelled():
                return
            exc = fut.exception()
            if exc is not None:
                logger.error(f"Probe crashed for {url}: {exc}", exc_info=exc)
                callback(ProbeResult(ProbeState.FAILED, error=str(exc)))
                return
            callback(fut.result())

        future.add_done_callback(_done)
        return future

    def cancel_pending(self):
        """Abandon every submitted probe and start over with fresh workers.

        Probes already running cannot be interrupted; they finish on the old
        pool and their callbacks still fire, but new probes never queue
        behind them.
        """
        old = self._executor
        self._executor = self._new_executor()
        old.shutdown(wait=False, cancel_futures=True)

    def shutdown(self):
        """Stop the worker pool, dropping probes that have not started."""
        self._executor.shutdown(wait=False, cancel_futures=True)
        self.session.close()
