"""Saving thumbnails to disk."""

import logging
import threading
from pathlib import Path
from typing import Optional, Callable, Dict

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

logger = logging.getLogger(__name__)


class ThumbnailDownloader:
    """Streams thumbnail images to files."""

    def __init__(self, headers: Optional[Dict[str, str]] = None, timeout: float = 30.0,
                 session: Optional[requests.Session] = None):
        self.timeout = timeout
        self._stop_event = threading.Event()

        if session is None:
            session = requests.Session()
            retries = Retry(total=3, backoff_factor=0.5, status_forcelist=[500, 502, 503, 504])
            session.mount('https://', HTTPAdapter(max_retries=retries))
            session.mount('http://', HTTPAdapter(max_retries=retries))
            session.headers.update({'User-Agent': 'Mozilla/5.0'})
        if headers:
            session.headers.update(headers)
        self.session = session

    def save(self, url: str, output_path: Path,
             progress_callback: Optional[Callable[[float, int, int], None]] = None) -> Path:
        """Download ``url`` to ``output_path`` and return the path.

        Raises requests.RequestException on HTTP errors and ValueError when
        fewer bytes arrive than the server announced.
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        part_path = output_path.with_name(f"{output_path.name}.part")

        downloaded = 0
        total = 0
        try:
            with self.session.get(url, stream=True, timeout=self.timeout) as r:
                r.raise_for_status()
                content_length = r.headers.get('content-length')
                if content_length:
                    total = int(content_length)

                with open(part_path, 'wb') as f:
                    for chunk in r.iter_content(chunk_size=1024 * 64):
                        if self._stop_event.is_set():
                            break
                        if chunk:
                            f.write(chunk)
                            downloaded += len(chunk)
                            if progress_callback and total > 0:
                                progress_callback(downloaded / total * 100, downloaded, total)

            if self._stop_event.is_set():
                raise InterruptedError(f"Download stopped: {url}")
            if total > 0 and downloaded < total:
                raise ValueError(f"Download incomplete: Expected {total}, got {downloaded}")

            part_path.replace(output_path)
        finally:
            if part_path.exists():
                part_path.unlink()

        logger.info(f"Saved {url} to {output_path} ({downloaded} bytes)")
        return output_path

    def stop(self):
        """Stop an in-progress download."""
        self._stop_event.set()
