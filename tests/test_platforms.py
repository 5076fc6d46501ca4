"""
Tests for podcast platform detection.
"""

import pytest

from podsift.platforms import detect_platform, extract_youtube_id, youtube_thumbnail


class TestDetectPlatform:
    @pytest.mark.parametrize(
        "url,platform,name",
        [
            ("https://open.spotify.com/episode/abc", "spotify", "Spotify"),
            ("https://podcasts.apple.com/us/podcast/id123", "apple", "Apple Podcasts"),
            ("https://soundcloud.com/artist/track", "soundcloud", "SoundCloud"),
            ("https://cdn.example.com/ep1.MP3", "audio", "Audio File"),
            ("https://cdn.example.com/ep1.m4a?token=1", "audio", "Audio File"),
            ("https://example.com/podcast/episode-1", "other", "Podcast"),
        ],
    )
    def test_platforms(self, url, platform, name):
        info = detect_platform(url)
        assert info.platform == platform
        assert info.name == name

    def test_youtube_with_thumbnail(self):
        info = detect_platform("https://www.youtube.com/watch?v=abc123XYZ")

        assert info.platform == "youtube"
        assert info.youtube_id == "abc123XYZ"
        assert info.thumbnail_url == "https://img.youtube.com/vi/abc123XYZ/maxresdefault.jpg"

    def test_youtube_without_video_id(self):
        info = detect_platform("https://www.youtube.com/channel/xyz")
        assert info.platform == "youtube"
        assert info.youtube_id is None
        assert info.thumbnail_url is None


class TestExtractYoutubeId:
    def test_short_link(self):
        assert extract_youtube_id("https://youtu.be/abc123") == "abc123"

    def test_watch_link(self):
        assert extract_youtube_id("https://youtube.com/watch?v=abc123&t=42") == "abc123"

    def test_no_id(self):
        assert extract_youtube_id("https://youtu.be/") is None

    def test_thumbnail(self):
        assert youtube_thumbnail("id1").endswith("/vi/id1/maxresdefault.jpg")
