from unittest.mock import MagicMock

import pytest
import requests

from thumbgrab.core import ThumbnailDownloader

URL = "https://img.youtube.com/vi/dQw4w9WgXcQ/sddefault.jpg"


def _session(chunks, headers=None, status=200):
    resp = MagicMock()
    resp.headers = headers or {}
    resp.iter_content.return_value = chunks
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status} Client Error")
    session = MagicMock()
    session.get.return_value.__enter__.return_value = resp
    return session


def test_save_writes_file(tmp_path):
    session = _session([b"abc", b"", b"def"], headers={"content-length": "6"})
    progress = []
    target = tmp_path / "out" / "thumbnail_dQw4w9WgXcQ_sddefault.jpg"

    path = ThumbnailDownloader(session=session).save(
        URL, target, progress_callback=lambda *a: progress.append(a))

    assert path == target
    assert target.read_bytes() == b"abcdef"
    assert progress[-1] == (100.0, 6, 6)
    assert not (tmp_path / "out" / "thumbnail_dQw4w9WgXcQ_sddefault.jpg.part").exists()


def test_save_without_content_length(tmp_path):
    session = _session([b"img"])
    target = tmp_path / "t.jpg"
    ThumbnailDownloader(session=session).save(URL, target)
    assert target.read_bytes() == b"img"


def test_incomplete_download_raises_and_cleans_up(tmp_path):
    session = _session([b"abc"], headers={"content-length": "10"})
    target = tmp_path / "t.jpg"

    with pytest.raises(ValueError):
        ThumbnailDownloader(session=session).save(URL, target)
    assert not target.exists()
    assert list(tmp_path.iterdir()) == []


def test_http_error_propagates(tmp_path):
    session = _session([], status=404)
    with pytest.raises(requests.HTTPError):
        ThumbnailDownloader(session=session).save(URL, tmp_path / "t.jpg")
    assert list(tmp_path.iterdir()) == []


def test_stopped_download_does_not_leave_file(tmp_path):
    downloader = ThumbnailDownloader(session=_session([b"abc"]))
    downloader.stop()
    with pytest.raises(InterruptedError):
        downloader.save(URL, tmp_path / "t.jpg")
    assert list(tmp_path.iterdir()) == []
