"""
Podcast Platform Detection

Identify the hosting platform from a podcast URL.
"""

import re
from typing import Optional
from urllib.parse import parse_qs, urlparse

from .models import PlatformInfo

AUDIO_FILE_RE = re.compile(r"\.(mp3|wav|m4a|ogg|aac)$", re.IGNORECASE)

_HOST_PLATFORMS = [
    (("youtube.com", "youtu.be"), "youtube", "YouTube"),
    (("spotify.com",), "spotify", "Spotify"),
    (("podcasts.apple.com",), "apple", "Apple Podcasts"),
    (("soundcloud.com",), "soundcloud", "SoundCloud"),
]


def detect_platform(url: str) -> PlatformInfo:
    """
    Detect the podcast platform for a URL.

    Unparseable URLs and unknown hosts are reported as "other".
    """
    try:
        parsed = urlparse(url)
    except ValueError:
        return PlatformInfo()

    hostname = (parsed.hostname or "").lower()

    for hosts, platform, name in _HOST_PLATFORMS:
        if any(host in hostname for host in hosts):
            info = PlatformInfo(platform=platform, name=name)
            if platform == "youtube":
                video_id = extract_youtube_id(url)
                if video_id:
                    info.youtube_id = video_id
                    info.thumbnail_url = youtube_thumbnail(video_id)
            return info

    if AUDIO_FILE_RE.search(parsed.path):
        return PlatformInfo(platform="audio", name="Audio File")

    return PlatformInfo()


def extract_youtube_id(url: str) -> Optional[str]:
    """Extract the video id from a youtube.com or youtu.be URL."""
    try:
        parsed = urlparse(url)
    except ValueError:
        return None

    hostname = (parsed.hostname or "").lower()
    if "youtu.be" in hostname:
        return parsed.path.lstrip("/") or None

    values = parse_qs(parsed.query).get("v")
    return values[0] if values else None


def youtube_thumbnail(video_id: str) -> str:
    return f"https://img.youtube.com/vi/{video_id}/maxresdefault.jpg"
