"""Tests for utils.py: YouTube normalization and ID generation."""

import re

import pytest

from visually.utils import extract_youtube_id, generate_id, get_youtube_embed_url

EMBED = "https://www.youtube-nocookie.com/embed/dQw4w9WgXcQ"


@pytest.mark.parametrize("url", [
    "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
    "http://youtube.com/watch?v=dQw4w9WgXcQ",
    "youtube.com/watch?v=dQw4w9WgXcQ",
    "https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=42s",
    "https://www.youtube.com/embed/dQw4w9WgXcQ",
    "https://www.youtube.com/v/dQw4w9WgXcQ",
    "https://youtu.be/dQw4w9WgXcQ",
    "youtu.be/dQw4w9WgXcQ",
])
def test_youtube_forms_share_one_embed_url(url):
    assert get_youtube_embed_url(url) == EMBED


@pytest.mark.parametrize("url", [
    "https://example.com/video",
    "https://vimeo.com/123456789",
    "https://www.youtube.com/watch?v=short",
    "https://www.youtube.com/channel/UCxyz",
    "",
])
def test_non_youtube_urls_derive_nothing(url):
    assert get_youtube_embed_url(url) is None


def test_extract_youtube_id():
    assert extract_youtube_id("https://youtu.be/a_b-C1d2E3f") == "a_b-C1d2E3f"
    assert extract_youtube_id("https://example.com/video") is None


def test_generate_id_format():
    assert re.fullmatch(r"[0-9a-z]+-[0-9a-z]{9}", generate_id())


def test_generate_id_unique_in_practice():
    ids = {generate_id() for _ in range(1000)}
    assert len(ids) == 1000
