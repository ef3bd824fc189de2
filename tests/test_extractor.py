import pytest

from thumbgrab.core import extract_video_id, is_valid_video_id

VIDEO_ID = "dQw4w9WgXcQ"


@pytest.mark.parametrize("url", [
    "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
    "https://youtube.com/watch?v=dQw4w9WgXcQ&t=30s",
    "https://www.youtube.com/watch?feature=share&v=dQw4w9WgXcQ",
    "https://www.youtube.com/watch?v=dQw4w9WgXcQ&list=PL1234567890&index=2",
    "https://m.youtube.com/watch?v=dQw4w9WgXcQ#t=10",
    "https://youtu.be/dQw4w9WgXcQ",
    "https://youtu.be/dQw4w9WgXcQ?t=10",
    "youtu.be/dQw4w9WgXcQ",
    "https://www.youtube.com/embed/dQw4w9WgXcQ",
    "https://www.youtube.com/embed/dQw4w9WgXcQ?autoplay=1",
    "https://www.youtube.com/v/dQw4w9WgXcQ",
    "https://www.youtube.com/e/dQw4w9WgXcQ",
    "https://www.youtube.com/shorts/dQw4w9WgXcQ",
    "https://youtube.com/shorts/dQw4w9WgXcQ?feature=share",
    "https://www.youtube.com/live/dQw4w9WgXcQ",
    "https://www.youtube.com/user/SomeUser#p/u/1/dQw4w9WgXcQ",
    '<iframe src="https://www.youtube.com/embed/dQw4w9WgXcQ" frameborder="0">',
    "  https://www.youtube.com/watch?v=dQw4w9WgXcQ  ",
])
def test_extracts_id_from_recognised_shapes(url):
    assert extract_video_id(url) == VIDEO_ID


@pytest.mark.parametrize("text", [
    "",
    "   ",
    "not a url",
    "dQw4w9WgXcQ",
    "https://example.com/watch?v=dQw4w9WgXcQ",
    "https://vimeo.com/dQw4w9WgXcQ",
    "https://www.youtube.com/",
    "https://www.youtube.com/watch?v=short",
    "https://youtu.be/dQw4w9WgXcQextra",
    "https://www.youtube.com/watch?vid=dQw4w9WgXcQ",
    "the token dQw4w9WgXcQ appears here without any link",
])
def test_rejects_input_without_locator(text):
    assert extract_video_id(text) is None


def test_none_input():
    assert extract_video_id(None) is None


def test_identifier_case_and_symbols_are_preserved():
    assert extract_video_id("https://youtu.be/Ab-_9zZ0-x_") == "Ab-_9zZ0-x_"
    assert extract_video_id("https://www.youtube.com/watch?v=ABCDEFGHIJK") == "ABCDEFGHIJK"


def test_first_v_parameter_wins():
    url = "https://www.youtube.com/watch?v=AAAAAAAAAAA&v=BBBBBBBBBBB"
    assert extract_video_id(url) == "AAAAAAAAAAA"


def test_later_v_parameter_used_when_first_is_malformed():
    url = "https://www.youtube.com/watch?v=bad&v=BBBBBBBBBBB"
    assert extract_video_id(url) == "BBBBBBBBBBB"


@pytest.mark.parametrize("value,expected", [
    ("dQw4w9WgXcQ", True),
    ("Ab-_9zZ0-x_", True),
    ("dQw4w9WgXc", False),
    ("dQw4w9WgXcQQ", False),
    ("dQw4w9WgXc!", False),
    ("", False),
])
def test_is_valid_video_id(value, expected):
    assert is_valid_video_id(value) is expected
