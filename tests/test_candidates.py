import pytest

from thumbgrab.core import (
    PRIMARY_RESOLUTION,
    RESOLUTIONS,
    ProbeResult,
    ProbeState,
    build_candidates,
    suggested_filename,
    thumbnail_url,
)


def test_builds_four_candidates_in_preference_order():
    candidates = build_candidates("dQw4w9WgXcQ")
    assert [c.resolution.name for c in candidates] == ["maxres", "sd", "hq", "mq"]
    assert [c.url for c in candidates] == [
        "https://img.youtube.com/vi/dQw4w9WgXcQ/maxresdefault.jpg",
        "https://img.youtube.com/vi/dQw4w9WgXcQ/sddefault.jpg",
        "https://img.youtube.com/vi/dQw4w9WgXcQ/hqdefault.jpg",
        "https://img.youtube.com/vi/dQw4w9WgXcQ/mqdefault.jpg",
    ]
    assert all(c.state is ProbeState.PENDING for c in candidates)
    assert all(not c.hidden for c in candidates)


def test_identifier_substituted_verbatim():
    candidates = build_candidates("Ab-_9zZ0-x_")
    assert all("/vi/Ab-_9zZ0-x_/" in c.url for c in candidates)
    assert all(c.url.startswith("https://") for c in candidates)


def test_each_call_builds_fresh_candidates():
    first = build_candidates("dQw4w9WgXcQ")
    second = build_candidates("dQw4w9WgXcQ")
    first[0].state = ProbeState.FAILED
    assert second[0].state is ProbeState.PENDING


def test_resolution_metadata():
    sizes = [(r.suffix, r.size_label) for r in RESOLUTIONS]
    assert sizes == [
        ("maxresdefault", "1280x720"),
        ("sddefault", "640x480"),
        ("hqdefault", "480x360"),
        ("mqdefault", "320x180"),
    ]
    assert PRIMARY_RESOLUTION is RESOLUTIONS[0]


def test_filenames_and_primary_flag():
    candidates = build_candidates("dQw4w9WgXcQ")
    assert candidates[0].filename == "thumbnail_dQw4w9WgXcQ_maxresdefault.jpg"
    assert candidates[3].filename == suggested_filename("dQw4w9WgXcQ", RESOLUTIONS[3])
    assert [c.is_primary for c in candidates] == [True, False, False, False]
    assert thumbnail_url("x" * 11, RESOLUTIONS[1]) == f"https://img.youtube.com/vi/{'x' * 11}/sddefault.jpg"


def test_record_transitions():
    candidate = build_candidates("dQw4w9WgXcQ")[1]

    assert candidate.record(ProbeResult(ProbeState.FAILED)) is True
    assert candidate.state is ProbeState.FAILED
    # Repeated signal is a no-op
    assert candidate.record(ProbeResult(ProbeState.FAILED)) is False

    candidate.hidden = True
    assert candidate.record(ProbeResult(ProbeState.LOADED, image="img")) is True
    assert candidate.state is ProbeState.LOADED
    assert candidate.hidden is False
    assert candidate.image == "img"

    # LOADED is absorbing
    assert candidate.record(ProbeResult(ProbeState.FAILED)) is False
    assert candidate.state is ProbeState.LOADED


@pytest.mark.parametrize("video_id", ["", "short", "dQw4w9WgXcQx", "dQw4w9WgXc/", None])
def test_rejects_malformed_identifier(video_id):
    with pytest.raises(ValueError):
        build_candidates(video_id)


def test_candidate_filename_uses_shared_template():
    for candidate in build_candidates("Ab-_9zZ0-x_"):
        assert candidate.filename == suggested_filename("Ab-_9zZ0-x_", candidate.resolution)
        assert candidate.filename == f"thumbnail_Ab-_9zZ0-x__{candidate.resolution.suffix}.jpg"
