"""Helpers used by the builder: ID generation and YouTube URL normalization."""

import random
import re
import string
import time
from typing import Optional


_BASE36 = string.digits + string.ascii_lowercase

_YOUTUBE_RE = re.compile(
    r"(?:https?://)?(?:www\.)?"
    r"(?:youtube\.com/(?:watch\?v=|embed/|v/)|youtu\.be/)"
    r"([A-Za-z0-9_-]{11})"
)

EMBED_HOST = "www.youtube-nocookie.com"


def _to_base36(n: int) -> str:
    if n == 0:
        return "0"
    digits = []
    while n:
        n, rem = divmod(n, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def generate_id() -> str:
    """Return an opaque, practically unique ID like 'lz3k9w1c-4f8a0b2kq'."""
    millis = int(time.time() * 1000)
    suffix = "".join(random.choices(_BASE36, k=9))
    return f"{_to_base36(millis)}-{suffix}"


def extract_youtube_id(url: str) -> Optional[str]:
    """Return the 11-character video ID, or None if not a YouTube URL."""
    match = _YOUTUBE_RE.search(url)
    if match:
        return match.group(1)
    return None


def get_youtube_embed_url(url: str) -> Optional[str]:
    """Derive the privacy-enhanced embed URL for a YouTube link.

    Accepts watch?v=, embed/, v/ and youtu.be/ forms, with or without
    scheme and www. Returns None when the URL is not recognized.
    """
    video_id = extract_youtube_id(url)
    if video_id is None:
        return None
    return f"https://{EMBED_HOST}/embed/{video_id}"
